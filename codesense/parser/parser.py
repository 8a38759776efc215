"""
Recursive-descent parser turning a token stream into the AST defined in
`classes.py`.

Precedence is encoded as a cascade of methods, lowest binding power first:
assignment, conditional, logical-or/nullish, logical-and, equality,
relational, additive, multiplicative, exponent, unary, new/call/member and
primary. Every binary level is left-associative except `**`.

The single place that backtracks is `(`: when the matching `)` is followed
by `=>`, the parser first tries to read an arrow-function parameter list and,
if that fails, rewinds the tokenizer and reads a parenthesized expression
instead. Any other group is read as an expression straight away.
"""

from typing import Callable, List, Optional, Set, Tuple

from ..exceptions import ErrorCode, ParseError
from .classes import *
from .tokenizer import Tokenizer
from .tokens import WORD_TOKENS, Token, TokenKind

# Token kinds that may name a binding even though they lex as contextual keywords.
IDENTIFIER_LIKE = frozenset(
    {TokenKind.IDENTIFIER, TokenKind.GET, TokenKind.SET, TokenKind.OF, TokenKind.STATIC, TokenKind.CONSTRUCTOR, TokenKind.ASYNC}
)

# Anything spelled like a word is a valid property name after `.` or as an object key.
WORD_KINDS = frozenset({TokenKind.IDENTIFIER, TokenKind.KEYWORD, *WORD_TOKENS.values()})

ASSIGNMENT_OPERATORS = frozenset({TokenKind.ASSIGN, TokenKind.PLUS_ASSIGN, TokenKind.MINUS_ASSIGN})
ASSIGNABLE_NODES = (Identifier, MemberExpression, ObjectLiteral, ArrayLiteral)

LOGICAL_OR_OPERATORS = frozenset({TokenKind.OR, TokenKind.NULLISH})
LOGICAL_AND_OPERATORS = frozenset({TokenKind.AND})
EQUALITY_OPERATORS = frozenset({TokenKind.EQ, TokenKind.NEQ, TokenKind.STRICT_EQ, TokenKind.STRICT_NEQ})
RELATIONAL_OPERATORS = frozenset({TokenKind.LT, TokenKind.GT, TokenKind.LTE, TokenKind.GTE, TokenKind.INSTANCEOF, TokenKind.IN})
ADDITIVE_OPERATORS = frozenset({TokenKind.PLUS, TokenKind.MINUS})
MULTIPLICATIVE_OPERATORS = frozenset({TokenKind.STAR, TokenKind.SLASH, TokenKind.PERCENT})

UNARY_OPERATORS = frozenset({TokenKind.NOT, TokenKind.MINUS, TokenKind.PLUS, TokenKind.TYPEOF})
UNARY_KEYWORDS = frozenset({"void", "delete", "await"})
UPDATE_OPERATORS = frozenset({"++", "--"})
OPENING_BRACKETS = frozenset({TokenKind.LPAREN, TokenKind.LBRACKET, TokenKind.LBRACE})
CLOSING_BRACKETS = frozenset({TokenKind.RPAREN, TokenKind.RBRACKET, TokenKind.RBRACE})

# Tokens after which a `get`/`set`/`async`/`static` prefix is really the member name itself.
MEMBER_NAME_TERMINATORS = frozenset(
    {TokenKind.COLON, TokenKind.COMMA, TokenKind.LPAREN, TokenKind.RBRACE, TokenKind.ASSIGN, TokenKind.SEMICOLON, TokenKind.EOF}
)


def _number_value(raw: str):
    text = raw.replace("_", "")
    try:
        if text.endswith("n"):
            text = text[:-1]
        lowered = text.lower()
        if lowered.startswith("0x"):
            return int(text[2:], 16)
        if lowered.startswith("0o"):
            return int(text[2:], 8)
        if lowered.startswith("0b"):
            return int(text[2:], 2)
        if "." in text or "e" in lowered:
            return float(text)
        return int(text)
    except ValueError:
        return 0


class ExpressionParser:
    def __init__(self, tokenizer: Tokenizer):
        self.tokenizer = tokenizer
        self._keyword_statements = {
            "if": self._parse_if,
            "for": self._parse_for,
            "while": self._parse_while,
            "do": self._parse_do_while,
            "try": self._parse_try,
            "throw": self._parse_throw,
            "break": self._parse_break_or_continue,
            "continue": self._parse_break_or_continue,
        }

    # --- Entry points ---

    def parse_program(self) -> Program:
        body = []
        while not self.tokenizer.is_eof():
            body.append(self.parse_statement())
        return Program(body=body, start=0, end=len(self.tokenizer.text))

    def parse_expression(self) -> Node:
        """Parses exactly one expression at assignment precedence."""
        return self._parse_assignment()

    def parse_statement(self) -> Node:
        t = self.tokenizer
        token = t.peek()
        kind = token.type

        if kind in (TokenKind.VAR, TokenKind.LET, TokenKind.CONST):
            node = self._parse_variable_declaration()
            t.match(TokenKind.SEMICOLON)
            return self._with_end(node)
        if kind == TokenKind.FUNCTION or (kind == TokenKind.ASYNC and t.peek_at(1).type == TokenKind.FUNCTION):
            return self._parse_function(declaration=True)
        if kind == TokenKind.CLASS:
            return self._parse_class(declaration=True)
        if kind == TokenKind.RETURN:
            return self._parse_return()
        if kind == TokenKind.LBRACE:
            return self._parse_block()
        if kind == TokenKind.SEMICOLON:
            t.next()
            return EmptyStatement(start=token.start, end=token.end)
        if kind == TokenKind.KEYWORD and token.value in self._keyword_statements:
            return self._keyword_statements[token.value]()

        expression = self._parse_sequence()
        t.match(TokenKind.SEMICOLON)
        return ExpressionStatement(expression=expression, start=expression.start, end=t.last_end)

    # --- Helpers ---

    def _with_end(self, node):
        """Returns `node` stretched to the last consumed token (a trailing `;`)."""
        end = self.tokenizer.last_end
        return node if node.end >= end else node.model_copy(update={"end": end})

    def _newline_between(self, end: int, start: int) -> bool:
        return "\n" in self.tokenizer.text[end:start]

    def _check_keyword(self, word: str) -> bool:
        token = self.tokenizer.peek()
        return token.type == TokenKind.KEYWORD and token.value == word

    def _expect_keyword(self, word: str) -> Token:
        token = self.tokenizer.peek()
        if not self._check_keyword(word):
            raise ParseError(ErrorCode.UNEXPECTED_TOKEN, offset=token.start, expected=f"'{word}'", actual=token.type, value=token.value)
        return self.tokenizer.next()

    def _match_assign(self) -> bool:
        token = self.tokenizer.peek()
        if token.type == TokenKind.ASSIGN and token.value == "=":
            self.tokenizer.next()
            return True
        return False

    def _parse_identifier(self) -> Identifier:
        token = self.tokenizer.peek()
        if token.type not in IDENTIFIER_LIKE:
            self.tokenizer.expect(TokenKind.IDENTIFIER)
        self.tokenizer.next()
        return Identifier(name=token.value, start=token.start, end=token.end)

    def _parse_property_name(self) -> Identifier:
        """Reads a name after `.` or `?.`; keywords and `#private` names are allowed."""
        t = self.tokenizer
        token = t.peek()
        if token.type == TokenKind.UNKNOWN and token.value == "#":
            following = t.peek_at(1)
            if following.type in WORD_KINDS and following.start == token.end:
                t.next()
                t.next()
                return Identifier(name="#" + following.value, start=token.start, end=following.end)
        if token.type not in WORD_KINDS:
            t.expect(TokenKind.IDENTIFIER)
        t.next()
        return Identifier(name=token.value, start=token.start, end=token.end)

    def _parse_property_key(self) -> Tuple[Node, bool]:
        """Reads an object or class member key. Returns the key and whether it was computed."""
        t = self.tokenizer
        token = t.peek()
        if token.type == TokenKind.LBRACKET:
            t.next()
            key = self.parse_expression()
            t.expect(TokenKind.RBRACKET)
            return key, True
        if token.type == TokenKind.STRING:
            t.next()
            return StringLiteral(value=token.cooked or "", raw=token.value, start=token.start, end=token.end), False
        if token.type == TokenKind.NUMBER:
            t.next()
            return NumberLiteral(value=_number_value(token.value), raw=token.value, start=token.start, end=token.end), False
        return self._parse_property_name(), False

    def _parse_binding_target(self) -> Node:
        token = self.tokenizer.peek()
        if token.type == TokenKind.LBRACE:
            return self._parse_object_literal()
        if token.type == TokenKind.LBRACKET:
            return self._parse_array_literal()
        return self._parse_identifier()

    # --- Statements ---

    def _parse_variable_declaration(self) -> VariableDeclaration:
        t = self.tokenizer
        keyword = t.next()
        declarations = []
        while True:
            target = self._parse_binding_target()
            init = self.parse_expression() if self._match_assign() else None
            end = init.end if init is not None else target.end
            declarations.append(VariableDeclarator(id=target, init=init, start=target.start, end=end))
            if not t.match(TokenKind.COMMA):
                break
        return VariableDeclaration(kind=keyword.value, declarations=declarations, start=keyword.start, end=t.last_end)

    def _parse_return(self) -> ReturnStatement:
        t = self.tokenizer
        keyword = t.next()
        argument = None
        upcoming = t.peek()
        ends_statement = upcoming.type in (TokenKind.SEMICOLON, TokenKind.RBRACE, TokenKind.EOF)
        if not ends_statement and not self._newline_between(keyword.end, upcoming.start):
            argument = self._parse_sequence()
        t.match(TokenKind.SEMICOLON)
        return ReturnStatement(argument=argument, start=keyword.start, end=t.last_end)

    def _parse_block(self) -> BlockStatement:
        t = self.tokenizer
        open_brace = t.expect(TokenKind.LBRACE)
        body = []
        while not t.check(TokenKind.RBRACE) and not t.is_eof():
            body.append(self.parse_statement())
        close_brace = t.expect(TokenKind.RBRACE)
        return BlockStatement(body=body, start=open_brace.start, end=close_brace.end)

    def _parse_parenthesized_test(self) -> Node:
        self.tokenizer.expect(TokenKind.LPAREN)
        test = self._parse_sequence()
        self.tokenizer.expect(TokenKind.RPAREN)
        return test

    def _parse_if(self) -> IfStatement:
        keyword = self.tokenizer.next()
        test = self._parse_parenthesized_test()
        consequent = self.parse_statement()
        alternate = None
        if self._check_keyword("else"):
            self.tokenizer.next()
            alternate = self.parse_statement()
        end = (alternate or consequent).end
        return IfStatement(test=test, consequent=consequent, alternate=alternate, start=keyword.start, end=end)

    def _parse_for(self) -> Node:
        t = self.tokenizer
        keyword = t.next()
        t.expect(TokenKind.LPAREN)

        init = None
        if t.check_any((TokenKind.VAR, TokenKind.LET, TokenKind.CONST)):
            init = self._parse_variable_declaration()
        elif not t.check(TokenKind.SEMICOLON):
            init = self._parse_sequence()

        if init is not None and t.check_any((TokenKind.IN, TokenKind.OF)):
            is_of = t.next().type == TokenKind.OF
            right = self.parse_expression()
            t.expect(TokenKind.RPAREN)
            body = self.parse_statement()
            return ForInStatement(left=init, right=right, body=body, of=is_of, start=keyword.start, end=body.end)

        if isinstance(init, BinaryExpression) and init.operator == "in" and t.check(TokenKind.RPAREN):
            # `for (key in obj)` reads as a relational expression first.
            t.next()
            body = self.parse_statement()
            return ForInStatement(left=init.left, right=init.right, body=body, of=False, start=keyword.start, end=body.end)

        t.expect(TokenKind.SEMICOLON)
        test = None if t.check(TokenKind.SEMICOLON) else self._parse_sequence()
        t.expect(TokenKind.SEMICOLON)
        update = None if t.check(TokenKind.RPAREN) else self._parse_sequence()
        t.expect(TokenKind.RPAREN)
        body = self.parse_statement()
        return ForStatement(init=init, test=test, update=update, body=body, start=keyword.start, end=body.end)

    def _parse_while(self) -> WhileStatement:
        keyword = self.tokenizer.next()
        test = self._parse_parenthesized_test()
        body = self.parse_statement()
        return WhileStatement(test=test, body=body, start=keyword.start, end=body.end)

    def _parse_do_while(self) -> DoWhileStatement:
        keyword = self.tokenizer.next()
        body = self.parse_statement()
        self._expect_keyword("while")
        test = self._parse_parenthesized_test()
        self.tokenizer.match(TokenKind.SEMICOLON)
        return DoWhileStatement(body=body, test=test, start=keyword.start, end=self.tokenizer.last_end)

    def _parse_try(self) -> TryStatement:
        t = self.tokenizer
        keyword = t.next()
        block = self._parse_block()
        handler = None
        finalizer = None
        if self._check_keyword("catch"):
            catch_token = t.next()
            param = None
            if t.match(TokenKind.LPAREN):
                param = self._parse_binding_target()
                t.expect(TokenKind.RPAREN)
            body = self._parse_block()
            handler = CatchClause(param=param, body=body, start=catch_token.start, end=body.end)
        if self._check_keyword("finally"):
            t.next()
            finalizer = self._parse_block()
        end = (finalizer or handler or block).end
        return TryStatement(block=block, handler=handler, finalizer=finalizer, start=keyword.start, end=end)

    def _parse_throw(self) -> ThrowStatement:
        keyword = self.tokenizer.next()
        argument = self._parse_sequence()
        self.tokenizer.match(TokenKind.SEMICOLON)
        return ThrowStatement(argument=argument, start=keyword.start, end=self.tokenizer.last_end)

    def _parse_break_or_continue(self) -> Node:
        t = self.tokenizer
        keyword = t.next()
        label = None
        upcoming = t.peek()
        if upcoming.type == TokenKind.IDENTIFIER and not self._newline_between(keyword.end, upcoming.start):
            label = self._parse_identifier()
        t.match(TokenKind.SEMICOLON)
        node_class = BreakStatement if keyword.value == "break" else ContinueStatement
        return node_class(label=label, start=keyword.start, end=t.last_end)

    # --- Functions and classes ---

    def _parse_parameter(self) -> Parameter:
        t = self.tokenizer
        start = t.peek().start
        rest = t.match(TokenKind.SPREAD) is not None
        target = self._parse_binding_target()
        default_value = self.parse_expression() if self._match_assign() else None
        return Parameter(id=target, default_value=default_value, rest=rest, start=start, end=t.last_end)

    def _parse_parameter_list(self) -> List[Parameter]:
        """Reads `( ... )`, including the parentheses. A rest parameter must come last."""
        t = self.tokenizer
        t.expect(TokenKind.LPAREN)
        params = []
        while not t.check(TokenKind.RPAREN):
            param = self._parse_parameter()
            params.append(param)
            if param.rest and not t.check(TokenKind.RPAREN):
                raise ParseError(ErrorCode.REST_PARAMETER_NOT_LAST, offset=param.start)
            if not t.match(TokenKind.COMMA):
                break
        t.expect(TokenKind.RPAREN)
        return params

    def _parse_function_rest(self, start: int, is_async: bool, generator: bool, node_class=FunctionExpression, fid=None):
        params = self._parse_parameter_list()
        body = self._parse_block()
        return node_class(id=fid, params=params, body=body, is_async=is_async, generator=generator, start=start, end=body.end)

    def _parse_function(self, declaration: bool) -> Node:
        t = self.tokenizer
        start = t.peek().start
        is_async = t.match(TokenKind.ASYNC) is not None
        t.expect(TokenKind.FUNCTION)
        generator = t.match(TokenKind.STAR) is not None
        fid = self._parse_identifier() if t.peek().type in IDENTIFIER_LIKE else None
        node_class = FunctionDeclaration if declaration else FunctionExpression
        return self._parse_function_rest(start, is_async, generator, node_class=node_class, fid=fid)

    def _parse_arrow_body(self, params: List[Parameter], start: int, is_async: bool) -> ArrowFunction:
        t = self.tokenizer
        t.expect(TokenKind.ARROW)
        if t.check(TokenKind.LBRACE):
            body = self._parse_block()
            return ArrowFunction(params=params, body=body, expression=False, is_async=is_async, start=start, end=body.end)
        body = self.parse_expression()
        return ArrowFunction(params=params, body=body, expression=True, is_async=is_async, start=start, end=body.end)

    def _parse_arrow_parameters(self) -> List[Parameter]:
        """Speculatively reads a parameter list after an already consumed `(`."""
        t = self.tokenizer
        params = []
        while not t.check(TokenKind.RPAREN):
            param = self._parse_parameter()
            params.append(param)
            if param.rest or not t.match(TokenKind.COMMA):
                break
        t.expect(TokenKind.RPAREN)
        return params

    def _expression_to_parameters(self, expression: Node) -> List[Parameter]:
        """Converts a parenthesized expression that turned out to precede `=>`."""
        items = expression.expressions if isinstance(expression, SequenceExpression) else [expression]
        params = []
        for item in items:
            if isinstance(item, Identifier):
                params.append(Parameter(id=item.clone(), start=item.start, end=item.end))
            elif isinstance(item, AssignmentExpression) and item.operator == "=" and isinstance(item.left, Identifier):
                params.append(Parameter(id=item.left.clone(), default_value=item.right, start=item.start, end=item.end))
            elif isinstance(item, (ObjectLiteral, ArrayLiteral)):
                params.append(Parameter(id=item, start=item.start, end=item.end))
            else:
                raise ParseError(ErrorCode.INVALID_ARROW_PARAMETERS, offset=item.start)
        return params

    def _group_precedes_arrow(self) -> bool:
        """Scans ahead from just inside a `(` for its matching `)` and checks for a following `=>`."""
        tokens = self.tokenizer.tokens
        depth = 0
        for index in range(self.tokenizer.get_position(), len(tokens)):
            kind = tokens[index].type
            if kind in OPENING_BRACKETS:
                depth += 1
            elif kind in CLOSING_BRACKETS:
                if depth == 0:
                    return kind == TokenKind.RPAREN and tokens[index + 1].type == TokenKind.ARROW
                depth -= 1
        return False

    def _parse_parenthesized_or_arrow(self, is_async: bool = False, start: Optional[int] = None) -> Node:
        t = self.tokenizer
        open_paren = t.expect(TokenKind.LPAREN)
        start = open_paren.start if start is None else start
        after_paren = t.get_position()

        if self._group_precedes_arrow():
            try:
                params = self._parse_arrow_parameters()
                if t.check(TokenKind.ARROW):
                    return self._parse_arrow_body(params, start, is_async)
            except ParseError:
                pass

        # Not an arrow parameter list: rewind and read a parenthesized expression.
        t.reset(after_paren)
        expression = self._parse_sequence()
        t.expect(TokenKind.RPAREN)
        if t.check(TokenKind.ARROW):
            return self._parse_arrow_body(self._expression_to_parameters(expression), start, is_async)
        return expression

    def _parse_class(self, declaration: bool) -> Node:
        t = self.tokenizer
        keyword = t.expect(TokenKind.CLASS)
        cid = None
        if t.peek().type in IDENTIFIER_LIKE:
            cid = self._parse_identifier()
        super_class = None
        if t.match(TokenKind.EXTENDS):
            super_class = self._parse_call_member()
        body = self._parse_class_body()
        node_class = ClassDeclaration if declaration else ClassExpression
        return node_class(id=cid, super_class=super_class, body=body, start=keyword.start, end=body.end)

    def _parse_class_body(self) -> ClassBody:
        t = self.tokenizer
        open_brace = t.expect(TokenKind.LBRACE)
        members = []
        while not t.check(TokenKind.RBRACE) and not t.is_eof():
            if t.match(TokenKind.SEMICOLON):
                continue
            member = self._parse_class_member()
            if member is not None:
                members.append(member)
        close_brace = t.expect(TokenKind.RBRACE)
        return ClassBody(body=members, start=open_brace.start, end=close_brace.end)

    def _take_modifier(self, kind: TokenKind) -> bool:
        """Consumes a `static`/`async`/`get`/`set` prefix unless it is itself the member name."""
        t = self.tokenizer
        if t.check(kind) and t.peek_at(1).type not in MEMBER_NAME_TERMINATORS:
            t.next()
            return True
        return False

    def _parse_class_member(self) -> Optional[Node]:
        t = self.tokenizer
        start = t.peek().start

        is_static = self._take_modifier(TokenKind.STATIC)
        if is_static and t.check(TokenKind.LBRACE):
            # Static initialization blocks declare nothing visible to completion.
            self._parse_block()
            return None
        is_async = self._take_modifier(TokenKind.ASYNC)
        accessor = None
        if self._take_modifier(TokenKind.GET):
            accessor = "get"
        elif self._take_modifier(TokenKind.SET):
            accessor = "set"
        generator = t.match(TokenKind.STAR) is not None

        key, computed = self._parse_property_key()

        if t.check(TokenKind.LPAREN):
            value = self._parse_function_rest(key.start, is_async, generator)
            if accessor:
                kind = accessor
            elif not is_static and not computed and isinstance(key, Identifier) and key.name == "constructor":
                kind = "constructor"
            else:
                kind = "method"
            return MethodDefinition(key=key, value=value, kind=kind, computed=computed, is_static=is_static, start=start, end=value.end)

        value = self.parse_expression() if self._match_assign() else None
        t.match(TokenKind.SEMICOLON)
        return PropertyDefinition(key=key, value=value, computed=computed, is_static=is_static, start=start, end=t.last_end)

    # --- Expressions ---

    def _parse_sequence(self) -> Node:
        first = self.parse_expression()
        if not self.tokenizer.check(TokenKind.COMMA):
            return first
        expressions = [first]
        while self.tokenizer.match(TokenKind.COMMA):
            expressions.append(self.parse_expression())
        return SequenceExpression(expressions=expressions, start=first.start, end=expressions[-1].end)

    def _parse_assignment(self) -> Node:
        t = self.tokenizer
        left = self._parse_conditional()
        token = t.peek()
        if token.type not in ASSIGNMENT_OPERATORS:
            return left
        if not isinstance(left, ASSIGNABLE_NODES):
            raise ParseError(ErrorCode.INVALID_ASSIGNMENT_TARGET, offset=left.start)
        t.next()
        right = self._parse_assignment()
        return AssignmentExpression(operator=token.value, left=left, right=right, start=left.start, end=right.end)

    def _parse_conditional(self) -> Node:
        t = self.tokenizer
        test = self._parse_logical_or()
        if not t.match(TokenKind.QUESTION):
            return test
        consequent = self._parse_assignment()
        t.expect(TokenKind.COLON)
        alternate = self._parse_assignment()
        return ConditionalExpression(test=test, consequent=consequent, alternate=alternate, start=test.start, end=alternate.end)

    def _parse_left_associative(self, operand: Callable[[], Node], operators: Set[TokenKind]) -> Node:
        t = self.tokenizer
        left = operand()
        while t.peek().type in operators and t.peek().value not in UPDATE_OPERATORS:
            operator = t.next()
            right = operand()
            left = BinaryExpression(operator=operator.value, left=left, right=right, start=left.start, end=right.end)
        return left

    def _parse_logical_or(self) -> Node:
        return self._parse_left_associative(self._parse_logical_and, LOGICAL_OR_OPERATORS)

    def _parse_logical_and(self) -> Node:
        return self._parse_left_associative(self._parse_equality, LOGICAL_AND_OPERATORS)

    def _parse_equality(self) -> Node:
        return self._parse_left_associative(self._parse_relational, EQUALITY_OPERATORS)

    def _parse_relational(self) -> Node:
        return self._parse_left_associative(self._parse_additive, RELATIONAL_OPERATORS)

    def _parse_additive(self) -> Node:
        return self._parse_left_associative(self._parse_multiplicative, ADDITIVE_OPERATORS)

    def _parse_multiplicative(self) -> Node:
        return self._parse_left_associative(self._parse_exponent, MULTIPLICATIVE_OPERATORS)

    def _parse_exponent(self) -> Node:
        base = self._parse_unary()
        if not self.tokenizer.match(TokenKind.POWER):
            return base
        exponent = self._parse_exponent()
        return BinaryExpression(operator="**", left=base, right=exponent, start=base.start, end=exponent.end)

    def _parse_unary(self) -> Node:
        t = self.tokenizer
        token = t.peek()
        if token.value in UPDATE_OPERATORS and token.type in ADDITIVE_OPERATORS:
            t.next()
            argument = self._parse_unary()
            return UpdateExpression(operator=token.value, argument=argument, prefix=True, start=token.start, end=argument.end)
        if token.type in UNARY_OPERATORS or (token.type == TokenKind.KEYWORD and token.value in UNARY_KEYWORDS):
            t.next()
            argument = self._parse_unary()
            return UnaryExpression(operator=token.value, argument=argument, prefix=True, start=token.start, end=argument.end)

        expression = self._parse_call_member()
        upcoming = t.peek()
        if upcoming.value in UPDATE_OPERATORS and upcoming.type in ADDITIVE_OPERATORS and not self._newline_between(expression.end, upcoming.start):
            t.next()
            return UpdateExpression(operator=upcoming.value, argument=expression, prefix=False, start=expression.start, end=upcoming.end)
        return expression

    def _parse_call_member(self) -> Node:
        if self.tokenizer.check(TokenKind.NEW):
            expression = self._parse_new()
        else:
            expression = self._parse_primary()
        return self._parse_suffixes(expression, allow_calls=True)

    def _parse_new(self) -> Node:
        t = self.tokenizer
        keyword = t.expect(TokenKind.NEW)
        if t.match(TokenKind.DOT):
            # new.target
            meta = Identifier(name="new", start=keyword.start, end=keyword.end)
            prop = self._parse_property_name()
            return MemberExpression(object=meta, property=prop, start=keyword.start, end=prop.end)
        callee = self._parse_new() if t.check(TokenKind.NEW) else self._parse_primary()
        callee = self._parse_suffixes(callee, allow_calls=False)
        arguments = self._parse_arguments() if t.check(TokenKind.LPAREN) else []
        return NewExpression(callee=callee, arguments=arguments, start=keyword.start, end=t.last_end)

    def _parse_suffixes(self, expression: Node, allow_calls: bool) -> Node:
        """Folds `.name`, `?.`, `[expr]` and `(args)` suffixes onto `expression` iteratively."""
        t = self.tokenizer
        while True:
            token = t.peek()
            if token.type == TokenKind.DOT:
                t.next()
                prop = self._parse_property_name()
                expression = MemberExpression(object=expression, property=prop, start=expression.start, end=prop.end)
            elif token.type == TokenKind.OPTIONAL_CHAIN:
                t.next()
                if t.check(TokenKind.LPAREN) and allow_calls:
                    arguments = self._parse_arguments()
                    expression = CallExpression(callee=expression, arguments=arguments, optional=True, start=expression.start, end=t.last_end)
                elif t.match(TokenKind.LBRACKET):
                    prop = self._parse_sequence()
                    close = t.expect(TokenKind.RBRACKET)
                    expression = MemberExpression(object=expression, property=prop, computed=True, optional=True, start=expression.start, end=close.end)
                else:
                    prop = self._parse_property_name()
                    expression = MemberExpression(object=expression, property=prop, optional=True, start=expression.start, end=prop.end)
            elif token.type == TokenKind.LBRACKET:
                t.next()
                prop = self._parse_sequence()
                close = t.expect(TokenKind.RBRACKET)
                expression = MemberExpression(object=expression, property=prop, computed=True, start=expression.start, end=close.end)
            elif token.type == TokenKind.LPAREN and allow_calls:
                arguments = self._parse_arguments()
                expression = CallExpression(callee=expression, arguments=arguments, start=expression.start, end=t.last_end)
            else:
                return expression

    def _parse_arguments(self) -> List[Node]:
        t = self.tokenizer
        t.expect(TokenKind.LPAREN)
        arguments = []
        while not t.check(TokenKind.RPAREN):
            arguments.append(self._parse_spread_or_expression())
            if not t.match(TokenKind.COMMA):
                break
        t.expect(TokenKind.RPAREN)
        return arguments

    def _parse_spread_or_expression(self) -> Node:
        t = self.tokenizer
        spread = t.match(TokenKind.SPREAD)
        if spread is None:
            return self.parse_expression()
        argument = self.parse_expression()
        return SpreadElement(argument=argument, start=spread.start, end=argument.end)

    def _parse_primary(self) -> Node:
        t = self.tokenizer
        token = t.peek()
        kind = token.type

        if kind == TokenKind.STRING:
            t.next()
            return StringLiteral(value=token.cooked or "", raw=token.value, start=token.start, end=token.end)
        if kind == TokenKind.NUMBER:
            t.next()
            return NumberLiteral(value=_number_value(token.value), raw=token.value, start=token.start, end=token.end)
        if kind == TokenKind.BOOLEAN:
            t.next()
            return BooleanLiteral(value=token.value == "true", start=token.start, end=token.end)
        if kind == TokenKind.NULL:
            t.next()
            return NullLiteral(start=token.start, end=token.end)
        if kind == TokenKind.UNDEFINED:
            t.next()
            return UndefinedLiteral(start=token.start, end=token.end)
        if kind == TokenKind.REGEX:
            t.next()
            return RegexLiteral(raw=token.value, start=token.start, end=token.end)
        if kind == TokenKind.TEMPLATE:
            t.next()
            return TemplateLiteral(value=token.cooked or "", start=token.start, end=token.end)
        if kind == TokenKind.THIS:
            t.next()
            return ThisExpression(start=token.start, end=token.end)
        if kind == TokenKind.ASYNC:
            return self._parse_async_primary()
        if kind in IDENTIFIER_LIKE:
            identifier = self._parse_identifier()
            if t.check(TokenKind.ARROW):
                param = Parameter(id=identifier.clone(), start=identifier.start, end=identifier.end)
                return self._parse_arrow_body([param], identifier.start, is_async=False)
            return identifier
        if kind == TokenKind.FUNCTION:
            return self._parse_function(declaration=False)
        if kind == TokenKind.CLASS:
            return self._parse_class(declaration=False)
        if kind == TokenKind.NEW:
            return self._parse_new()
        if kind == TokenKind.LPAREN:
            return self._parse_parenthesized_or_arrow()
        if kind == TokenKind.LBRACKET:
            return self._parse_array_literal()
        if kind == TokenKind.LBRACE:
            return self._parse_object_literal()

        # Anything else degrades to an opaque identifier so parsing keeps moving.
        t.next()
        return Identifier(name=token.value, start=token.start, end=token.end)

    def _parse_async_primary(self) -> Node:
        t = self.tokenizer
        token = t.peek()
        following = t.peek_at(1)
        if following.type == TokenKind.FUNCTION:
            return self._parse_function(declaration=False)
        if following.type in IDENTIFIER_LIKE and t.peek_at(2).type == TokenKind.ARROW:
            t.next()
            identifier = self._parse_identifier()
            param = Parameter(id=identifier.clone(), start=identifier.start, end=identifier.end)
            return self._parse_arrow_body([param], token.start, is_async=True)
        if following.type == TokenKind.LPAREN:
            position = t.get_position()
            t.next()
            try:
                node = self._parse_parenthesized_or_arrow(is_async=True, start=token.start)
                if isinstance(node, ArrowFunction):
                    return node
            except ParseError:
                pass
            t.reset(position)
        # A plain identifier named `async`.
        t.next()
        return Identifier(name=token.value, start=token.start, end=token.end)

    def _parse_array_literal(self) -> ArrayLiteral:
        t = self.tokenizer
        open_bracket = t.expect(TokenKind.LBRACKET)
        elements: List[Optional[Node]] = []
        while not t.check(TokenKind.RBRACKET):
            if t.match(TokenKind.COMMA):
                elements.append(None)
                continue
            elements.append(self._parse_spread_or_expression())
            if not t.match(TokenKind.COMMA):
                break
        close = t.expect(TokenKind.RBRACKET)
        return ArrayLiteral(elements=elements, start=open_bracket.start, end=close.end)

    def _parse_object_literal(self) -> ObjectLiteral:
        t = self.tokenizer
        open_brace = t.expect(TokenKind.LBRACE)
        properties = []
        while not t.check(TokenKind.RBRACE):
            properties.append(self._parse_object_member())
            if not t.match(TokenKind.COMMA):
                break
        close = t.expect(TokenKind.RBRACE)
        return ObjectLiteral(properties=properties, start=open_brace.start, end=close.end)

    def _parse_object_member(self) -> Node:
        t = self.tokenizer
        start = t.peek().start

        spread = t.match(TokenKind.SPREAD)
        if spread is not None:
            argument = self.parse_expression()
            return SpreadElement(argument=argument, start=spread.start, end=argument.end)

        is_async = self._take_modifier(TokenKind.ASYNC)
        accessor = None
        if self._take_modifier(TokenKind.GET):
            accessor = "get"
        elif self._take_modifier(TokenKind.SET):
            accessor = "set"
        generator = t.match(TokenKind.STAR) is not None

        key, computed = self._parse_property_key()

        if t.check(TokenKind.LPAREN):
            value = self._parse_function_rest(key.start, is_async, generator)
            return Property(key=key, value=value, computed=computed, kind=accessor or "method", start=start, end=value.end)

        if t.match(TokenKind.COLON):
            value = self.parse_expression()
            return Property(key=key, value=value, computed=computed, start=start, end=value.end)

        if not isinstance(key, Identifier) or computed:
            t.expect(TokenKind.COLON)

        if self._match_assign():
            # Shorthand with a default, only meaningful inside a destructuring pattern.
            default = self.parse_expression()
            value = AssignmentExpression(operator="=", left=key.clone(), right=default, start=key.start, end=default.end)
            return Property(key=key, value=value, shorthand=True, start=start, end=default.end)

        return Property(key=key, value=key.clone(), shorthand=True, start=start, end=key.end)


def parse_program(text: str) -> Program:
    """Parses a whole document. Raises ParseError on malformed input."""
    return ExpressionParser(Tokenizer(text)).parse_program()


def parse_expression(text: str) -> Node:
    """Parses a single expression from the start of `text`."""
    return ExpressionParser(Tokenizer(text)).parse_expression()
