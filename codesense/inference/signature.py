"""
Interprets catalog return-type strings into type descriptors.

The grammar is deliberately closed: `Array<T>` becomes an array descriptor
whose element is read by these same rules, the primitive names become
primitives, `undefined`/`void` become the undefined primitive, generic
placeholders resolve through the caller's substitutions, and every other
name is an opaque named object. A string the grammar cannot read is treated
as an opaque object name too.
"""

import os
from functools import lru_cache
from typing import Dict, Optional

from lark import Lark, LarkError, Transformer, Tree

from .descriptors import PRIMITIVE_NAMES, TypeDescriptor, create_array, create_named_object, create_primitive

GENERIC_PLACEHOLDERS = ("T", "U", "K", "V")
UNDEFINED_NAMES = ("undefined", "void")

SIGNATURE_PARSER = None

try:
    from importlib.resources import files as pkg_files

    signature_grammar = (pkg_files("codesense.inference") / "signature.lark").read_text()
    SIGNATURE_PARSER = Lark(signature_grammar, start="start", parser="lalr")
except (ModuleNotFoundError, FileNotFoundError):
    # Running from a source checkout that is not installed as a package
    grammar_path = os.path.join(os.path.dirname(__file__), "signature.lark")
    with open(grammar_path, "r") as f:
        signature_grammar = f.read()
    SIGNATURE_PARSER = Lark(signature_grammar, start="start", parser="lalr")


class SignatureTransformer(Transformer):
    """Builds descriptors bottom-up. A rule yielding None means 'no information'."""

    def __init__(self, substitutions: Dict[str, TypeDescriptor]):
        self.substitutions = substitutions
        super().__init__()

    def start(self, items):
        return items[0]

    def type_args(self, items):
        return list(items)

    def type_ref(self, items) -> Optional[TypeDescriptor]:
        name = str(items[0])
        args = items[1] if len(items) > 1 else []

        if name == "Array":
            # Elements follow the same rules, so `Array<Symbol>` holds named objects, not only primitives.
            return create_array(args[0] if args else None)
        if name in PRIMITIVE_NAMES:
            return create_primitive(name)
        if name in UNDEFINED_NAMES:
            return create_primitive("undefined")
        if name in GENERIC_PLACEHOLDERS:
            return self.substitutions.get(name)
        if name == "any":
            return None
        return create_named_object(name)


@lru_cache(maxsize=256)
def _parse_signature(signature: str) -> Optional[Tree]:
    try:
        return SIGNATURE_PARSER.parse(signature)
    except LarkError:
        return None


def parse_return_type(signature: Optional[str], substitutions: Optional[Dict[str, TypeDescriptor]] = None) -> Optional[TypeDescriptor]:
    """
    Converts a catalog return-type string into a descriptor.
    Returns None when the string carries no usable information.
    """
    if not signature:
        return None
    tree = _parse_signature(signature)
    if tree is None:
        return create_named_object(signature)
    return SignatureTransformer(substitutions or {}).transform(tree)
