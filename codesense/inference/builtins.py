"""
Member catalog for the JavaScript standard library and the DOM.

Each table maps a member name to a small signature record: `params` lists the
parameter type names, `returns` is a return-type string understood by
`parse_return_type`, and `is_property` marks data members. `T`, `U`, `K`
and `V` are generic placeholders; the engine substitutes the array element
type for `T` where it knows it.
"""

from typing import Dict, List, Optional

# --- Primitive Type Definitions ---

STRING_METHODS = {
    # Properties
    "length": {"returns": "Number", "is_property": True},

    # Methods
    "at": {"params": ["number"], "returns": "String"},
    "charAt": {"params": ["number"], "returns": "String"},
    "charCodeAt": {"params": ["number"], "returns": "Number"},
    "codePointAt": {"params": ["number"], "returns": "Number"},
    "concat": {"params": ["...string"], "returns": "String"},
    "endsWith": {"params": ["string", "number?"], "returns": "Boolean"},
    "includes": {"params": ["string", "number?"], "returns": "Boolean"},
    "indexOf": {"params": ["string", "number?"], "returns": "Number"},
    "lastIndexOf": {"params": ["string", "number?"], "returns": "Number"},
    "localeCompare": {"params": ["string"], "returns": "Number"},
    "match": {"params": ["RegExp"], "returns": "Array<String>"},
    "matchAll": {"params": ["RegExp"], "returns": "Iterator"},
    "normalize": {"params": ["string?"], "returns": "String"},
    "padEnd": {"params": ["number", "string?"], "returns": "String"},
    "padStart": {"params": ["number", "string?"], "returns": "String"},
    "repeat": {"params": ["number"], "returns": "String"},
    "replace": {"params": ["string|RegExp", "string|function"], "returns": "String"},
    "replaceAll": {"params": ["string|RegExp", "string|function"], "returns": "String"},
    "search": {"params": ["RegExp"], "returns": "Number"},
    "slice": {"params": ["number", "number?"], "returns": "String"},
    "split": {"params": ["string|RegExp", "number?"], "returns": "Array<String>"},
    "startsWith": {"params": ["string", "number?"], "returns": "Boolean"},
    "substring": {"params": ["number", "number?"], "returns": "String"},
    "toLocaleLowerCase": {"params": [], "returns": "String"},
    "toLocaleUpperCase": {"params": [], "returns": "String"},
    "toLowerCase": {"params": [], "returns": "String"},
    "toString": {"params": [], "returns": "String"},
    "toUpperCase": {"params": [], "returns": "String"},
    "trim": {"params": [], "returns": "String"},
    "trimEnd": {"params": [], "returns": "String"},
    "trimStart": {"params": [], "returns": "String"},
    "valueOf": {"params": [], "returns": "String"},
}

NUMBER_METHODS = {
    "toExponential": {"params": ["number?"], "returns": "String"},
    "toFixed": {"params": ["number?"], "returns": "String"},
    "toLocaleString": {"params": [], "returns": "String"},
    "toPrecision": {"params": ["number?"], "returns": "String"},
    "toString": {"params": ["number?"], "returns": "String"},
    "valueOf": {"params": [], "returns": "Number"},
}

BOOLEAN_METHODS = {
    "toString": {"params": [], "returns": "String"},
    "valueOf": {"params": [], "returns": "Boolean"},
}

# --- Array Type Definition ---

ARRAY_METHODS = {
    # Properties
    "length": {"returns": "Number", "is_property": True},

    # Mutating methods
    "copyWithin": {"params": ["number", "number", "number?"], "returns": "Array<T>"},
    "fill": {"params": ["T", "number?", "number?"], "returns": "Array<T>"},
    "pop": {"params": [], "returns": "T"},
    "push": {"params": ["...T"], "returns": "Number"},
    "reverse": {"params": [], "returns": "Array<T>"},
    "shift": {"params": [], "returns": "T"},
    "sort": {"params": ["function?"], "returns": "Array<T>"},
    "splice": {"params": ["number", "number?", "...T"], "returns": "Array<T>"},
    "unshift": {"params": ["...T"], "returns": "Number"},

    # Non-mutating methods
    "at": {"params": ["number"], "returns": "T"},
    "concat": {"params": ["...Array"], "returns": "Array<T>"},
    "entries": {"params": [], "returns": "Iterator"},
    "every": {"params": ["function"], "returns": "Boolean"},
    "filter": {"params": ["function"], "returns": "Array<T>"},
    "find": {"params": ["function"], "returns": "T"},
    "findIndex": {"params": ["function"], "returns": "Number"},
    "findLast": {"params": ["function"], "returns": "T"},
    "findLastIndex": {"params": ["function"], "returns": "Number"},
    "flat": {"params": ["number?"], "returns": "Array"},
    "flatMap": {"params": ["function"], "returns": "Array"},
    "forEach": {"params": ["function"], "returns": "undefined"},
    "includes": {"params": ["T", "number?"], "returns": "Boolean"},
    "indexOf": {"params": ["T", "number?"], "returns": "Number"},
    "join": {"params": ["string?"], "returns": "String"},
    "keys": {"params": [], "returns": "Iterator"},
    "lastIndexOf": {"params": ["T", "number?"], "returns": "Number"},
    "map": {"params": ["function"], "returns": "Array<U>"},
    "reduce": {"params": ["function", "U?"], "returns": "U"},
    "reduceRight": {"params": ["function", "U?"], "returns": "U"},
    "slice": {"params": ["number?", "number?"], "returns": "Array<T>"},
    "some": {"params": ["function"], "returns": "Boolean"},
    "toLocaleString": {"params": [], "returns": "String"},
    "toReversed": {"params": [], "returns": "Array<T>"},
    "toSorted": {"params": ["function?"], "returns": "Array<T>"},
    "toSpliced": {"params": ["number", "number?", "...T"], "returns": "Array<T>"},
    "toString": {"params": [], "returns": "String"},
    "values": {"params": [], "returns": "Iterator"},
    "with": {"params": ["number", "T"], "returns": "Array<T>"},
}

# --- Object Type Definition ---

OBJECT_METHODS = {
    "hasOwnProperty": {"params": ["string"], "returns": "Boolean"},
    "isPrototypeOf": {"params": ["Object"], "returns": "Boolean"},
    "propertyIsEnumerable": {"params": ["string"], "returns": "Boolean"},
    "toLocaleString": {"params": [], "returns": "String"},
    "toString": {"params": [], "returns": "String"},
    "valueOf": {"params": [], "returns": "Object"},
}

# --- Date Type Definition ---

DATE_METHODS = {
    "getDate": {"params": [], "returns": "Number"},
    "getDay": {"params": [], "returns": "Number"},
    "getFullYear": {"params": [], "returns": "Number"},
    "getHours": {"params": [], "returns": "Number"},
    "getMilliseconds": {"params": [], "returns": "Number"},
    "getMinutes": {"params": [], "returns": "Number"},
    "getMonth": {"params": [], "returns": "Number"},
    "getSeconds": {"params": [], "returns": "Number"},
    "getTime": {"params": [], "returns": "Number"},
    "getTimezoneOffset": {"params": [], "returns": "Number"},
    "getUTCDate": {"params": [], "returns": "Number"},
    "getUTCDay": {"params": [], "returns": "Number"},
    "getUTCFullYear": {"params": [], "returns": "Number"},
    "getUTCHours": {"params": [], "returns": "Number"},
    "getUTCMilliseconds": {"params": [], "returns": "Number"},
    "getUTCMinutes": {"params": [], "returns": "Number"},
    "getUTCMonth": {"params": [], "returns": "Number"},
    "getUTCSeconds": {"params": [], "returns": "Number"},
    "setDate": {"params": ["number"], "returns": "Number"},
    "setFullYear": {"params": ["number", "number?", "number?"], "returns": "Number"},
    "setHours": {"params": ["number", "number?", "number?", "number?"], "returns": "Number"},
    "setMilliseconds": {"params": ["number"], "returns": "Number"},
    "setMinutes": {"params": ["number", "number?", "number?"], "returns": "Number"},
    "setMonth": {"params": ["number", "number?"], "returns": "Number"},
    "setSeconds": {"params": ["number", "number?"], "returns": "Number"},
    "setTime": {"params": ["number"], "returns": "Number"},
    "setUTCDate": {"params": ["number"], "returns": "Number"},
    "setUTCFullYear": {"params": ["number", "number?", "number?"], "returns": "Number"},
    "setUTCHours": {"params": ["number", "number?", "number?", "number?"], "returns": "Number"},
    "setUTCMilliseconds": {"params": ["number"], "returns": "Number"},
    "setUTCMinutes": {"params": ["number", "number?", "number?"], "returns": "Number"},
    "setUTCMonth": {"params": ["number", "number?"], "returns": "Number"},
    "setUTCSeconds": {"params": ["number", "number?"], "returns": "Number"},
    "toDateString": {"params": [], "returns": "String"},
    "toISOString": {"params": [], "returns": "String"},
    "toJSON": {"params": [], "returns": "String"},
    "toLocaleDateString": {"params": [], "returns": "String"},
    "toLocaleString": {"params": [], "returns": "String"},
    "toLocaleTimeString": {"params": [], "returns": "String"},
    "toString": {"params": [], "returns": "String"},
    "toTimeString": {"params": [], "returns": "String"},
    "toUTCString": {"params": [], "returns": "String"},
    "valueOf": {"params": [], "returns": "Number"},
}

# --- Promise Type Definition ---

PROMISE_METHODS = {
    "then": {"params": ["function", "function?"], "returns": "Promise<U>"},
    "catch": {"params": ["function"], "returns": "Promise<U>"},
    "finally": {"params": ["function"], "returns": "Promise<T>"},
}

# --- RegExp Type Definition ---

REGEXP_METHODS = {
    # Properties
    "flags": {"returns": "String", "is_property": True},
    "global": {"returns": "Boolean", "is_property": True},
    "ignoreCase": {"returns": "Boolean", "is_property": True},
    "multiline": {"returns": "Boolean", "is_property": True},
    "source": {"returns": "String", "is_property": True},
    "sticky": {"returns": "Boolean", "is_property": True},
    "unicode": {"returns": "Boolean", "is_property": True},
    "lastIndex": {"returns": "Number", "is_property": True},

    # Methods
    "exec": {"params": ["string"], "returns": "Array<String>"},
    "test": {"params": ["string"], "returns": "Boolean"},
    "toString": {"params": [], "returns": "String"},
}

# --- Map Type Definition ---

MAP_METHODS = {
    "size": {"returns": "Number", "is_property": True},
    "clear": {"params": [], "returns": "undefined"},
    "delete": {"params": ["K"], "returns": "Boolean"},
    "entries": {"params": [], "returns": "Iterator"},
    "forEach": {"params": ["function"], "returns": "undefined"},
    "get": {"params": ["K"], "returns": "V"},
    "has": {"params": ["K"], "returns": "Boolean"},
    "keys": {"params": [], "returns": "Iterator"},
    "set": {"params": ["K", "V"], "returns": "Map<K,V>"},
    "values": {"params": [], "returns": "Iterator"},
}

# --- Set Type Definition ---

SET_METHODS = {
    "size": {"returns": "Number", "is_property": True},
    "add": {"params": ["T"], "returns": "Set<T>"},
    "clear": {"params": [], "returns": "undefined"},
    "delete": {"params": ["T"], "returns": "Boolean"},
    "entries": {"params": [], "returns": "Iterator"},
    "forEach": {"params": ["function"], "returns": "undefined"},
    "has": {"params": ["T"], "returns": "Boolean"},
    "keys": {"params": [], "returns": "Iterator"},
    "values": {"params": [], "returns": "Iterator"},
}

# --- DOM Type Definitions ---

EVENT_TARGET_METHODS = {
    "addEventListener": {"params": ["string", "function", "object?"], "returns": "undefined"},
    "removeEventListener": {"params": ["string", "function", "object?"], "returns": "undefined"},
    "dispatchEvent": {"params": ["Event"], "returns": "Boolean"},
}

NODE_METHODS = {
    # Properties
    "childNodes": {"returns": "NodeList", "is_property": True},
    "firstChild": {"returns": "Node", "is_property": True},
    "lastChild": {"returns": "Node", "is_property": True},
    "nextSibling": {"returns": "Node", "is_property": True},
    "nodeName": {"returns": "String", "is_property": True},
    "nodeType": {"returns": "Number", "is_property": True},
    "nodeValue": {"returns": "String", "is_property": True},
    "ownerDocument": {"returns": "Document", "is_property": True},
    "parentNode": {"returns": "Node", "is_property": True},
    "parentElement": {"returns": "HTMLElement", "is_property": True},
    "previousSibling": {"returns": "Node", "is_property": True},
    "textContent": {"returns": "String", "is_property": True},

    # Methods
    "appendChild": {"params": ["Node"], "returns": "Node"},
    "cloneNode": {"params": ["boolean?"], "returns": "Node"},
    "compareDocumentPosition": {"params": ["Node"], "returns": "Number"},
    "contains": {"params": ["Node"], "returns": "Boolean"},
    "getRootNode": {"params": [], "returns": "Node"},
    "hasChildNodes": {"params": [], "returns": "Boolean"},
    "insertBefore": {"params": ["Node", "Node?"], "returns": "Node"},
    "isEqualNode": {"params": ["Node"], "returns": "Boolean"},
    "isSameNode": {"params": ["Node"], "returns": "Boolean"},
    "normalize": {"params": [], "returns": "undefined"},
    "removeChild": {"params": ["Node"], "returns": "Node"},
    "replaceChild": {"params": ["Node", "Node"], "returns": "Node"},
}

ELEMENT_METHODS = {
    # Properties
    "attributes": {"returns": "NamedNodeMap", "is_property": True},
    "childElementCount": {"returns": "Number", "is_property": True},
    "children": {"returns": "HTMLCollection", "is_property": True},
    "classList": {"returns": "DOMTokenList", "is_property": True},
    "className": {"returns": "String", "is_property": True},
    "clientHeight": {"returns": "Number", "is_property": True},
    "clientLeft": {"returns": "Number", "is_property": True},
    "clientTop": {"returns": "Number", "is_property": True},
    "clientWidth": {"returns": "Number", "is_property": True},
    "firstElementChild": {"returns": "Element", "is_property": True},
    "id": {"returns": "String", "is_property": True},
    "innerHTML": {"returns": "String", "is_property": True},
    "lastElementChild": {"returns": "Element", "is_property": True},
    "nextElementSibling": {"returns": "Element", "is_property": True},
    "outerHTML": {"returns": "String", "is_property": True},
    "previousElementSibling": {"returns": "Element", "is_property": True},
    "scrollHeight": {"returns": "Number", "is_property": True},
    "scrollLeft": {"returns": "Number", "is_property": True},
    "scrollTop": {"returns": "Number", "is_property": True},
    "scrollWidth": {"returns": "Number", "is_property": True},
    "tagName": {"returns": "String", "is_property": True},

    # Methods
    "after": {"params": ["...Node|string"], "returns": "undefined"},
    "animate": {"params": ["object", "object?"], "returns": "Animation"},
    "append": {"params": ["...Node|string"], "returns": "undefined"},
    "before": {"params": ["...Node|string"], "returns": "undefined"},
    "closest": {"params": ["string"], "returns": "Element"},
    "getAttribute": {"params": ["string"], "returns": "String"},
    "getAttributeNames": {"params": [], "returns": "Array<String>"},
    "getBoundingClientRect": {"params": [], "returns": "DOMRect"},
    "getElementsByClassName": {"params": ["string"], "returns": "HTMLCollection"},
    "getElementsByTagName": {"params": ["string"], "returns": "HTMLCollection"},
    "hasAttribute": {"params": ["string"], "returns": "Boolean"},
    "hasAttributes": {"params": [], "returns": "Boolean"},
    "insertAdjacentElement": {"params": ["string", "Element"], "returns": "Element"},
    "insertAdjacentHTML": {"params": ["string", "string"], "returns": "undefined"},
    "insertAdjacentText": {"params": ["string", "string"], "returns": "undefined"},
    "matches": {"params": ["string"], "returns": "Boolean"},
    "prepend": {"params": ["...Node|string"], "returns": "undefined"},
    "querySelector": {"params": ["string"], "returns": "Element"},
    "querySelectorAll": {"params": ["string"], "returns": "NodeList"},
    "remove": {"params": [], "returns": "undefined"},
    "removeAttribute": {"params": ["string"], "returns": "undefined"},
    "replaceChildren": {"params": ["...Node|string"], "returns": "undefined"},
    "replaceWith": {"params": ["...Node|string"], "returns": "undefined"},
    "scroll": {"params": ["object|number", "number?"], "returns": "undefined"},
    "scrollBy": {"params": ["object|number", "number?"], "returns": "undefined"},
    "scrollIntoView": {"params": ["object?"], "returns": "undefined"},
    "scrollTo": {"params": ["object|number", "number?"], "returns": "undefined"},
    "setAttribute": {"params": ["string", "string"], "returns": "undefined"},
    "toggleAttribute": {"params": ["string", "boolean?"], "returns": "Boolean"},
}

HTML_ELEMENT_METHODS = {
    # Properties
    "accessKey": {"returns": "String", "is_property": True},
    "contentEditable": {"returns": "String", "is_property": True},
    "dataset": {"returns": "DOMStringMap", "is_property": True},
    "dir": {"returns": "String", "is_property": True},
    "draggable": {"returns": "Boolean", "is_property": True},
    "hidden": {"returns": "Boolean", "is_property": True},
    "innerText": {"returns": "String", "is_property": True},
    "lang": {"returns": "String", "is_property": True},
    "offsetHeight": {"returns": "Number", "is_property": True},
    "offsetLeft": {"returns": "Number", "is_property": True},
    "offsetParent": {"returns": "Element", "is_property": True},
    "offsetTop": {"returns": "Number", "is_property": True},
    "offsetWidth": {"returns": "Number", "is_property": True},
    "outerText": {"returns": "String", "is_property": True},
    "spellcheck": {"returns": "Boolean", "is_property": True},
    "style": {"returns": "CSSStyleDeclaration", "is_property": True},
    "tabIndex": {"returns": "Number", "is_property": True},
    "title": {"returns": "String", "is_property": True},

    # Methods
    "blur": {"params": [], "returns": "undefined"},
    "click": {"params": [], "returns": "undefined"},
    "focus": {"params": ["object?"], "returns": "undefined"},
}

# --- DOM Collection Types ---

NODELIST_METHODS = {
    "length": {"returns": "Number", "is_property": True},
    "entries": {"params": [], "returns": "Iterator"},
    "forEach": {"params": ["function"], "returns": "undefined"},
    "item": {"params": ["number"], "returns": "Node"},
    "keys": {"params": [], "returns": "Iterator"},
    "values": {"params": [], "returns": "Iterator"},
}

HTML_COLLECTION_METHODS = {
    "length": {"returns": "Number", "is_property": True},
    "item": {"params": ["number"], "returns": "Element"},
    "namedItem": {"params": ["string"], "returns": "Element"},
}

DOM_TOKEN_LIST_METHODS = {
    "length": {"returns": "Number", "is_property": True},
    "value": {"returns": "String", "is_property": True},
    "add": {"params": ["...string"], "returns": "undefined"},
    "contains": {"params": ["string"], "returns": "Boolean"},
    "entries": {"params": [], "returns": "Iterator"},
    "forEach": {"params": ["function"], "returns": "undefined"},
    "item": {"params": ["number"], "returns": "String"},
    "keys": {"params": [], "returns": "Iterator"},
    "remove": {"params": ["...string"], "returns": "undefined"},
    "replace": {"params": ["string", "string"], "returns": "Boolean"},
    "supports": {"params": ["string"], "returns": "Boolean"},
    "toggle": {"params": ["string", "boolean?"], "returns": "Boolean"},
    "values": {"params": [], "returns": "Iterator"},
}

CSS_STYLE_DECLARATION_METHODS = {
    "length": {"returns": "Number", "is_property": True},
    "cssText": {"returns": "String", "is_property": True},
    "getPropertyPriority": {"params": ["string"], "returns": "String"},
    "getPropertyValue": {"params": ["string"], "returns": "String"},
    "item": {"params": ["number"], "returns": "String"},
    "removeProperty": {"params": ["string"], "returns": "String"},
    "setProperty": {"params": ["string", "string", "string?"], "returns": "undefined"},
}

DOM_RECT_METHODS = {
    "bottom": {"returns": "Number", "is_property": True},
    "height": {"returns": "Number", "is_property": True},
    "left": {"returns": "Number", "is_property": True},
    "right": {"returns": "Number", "is_property": True},
    "top": {"returns": "Number", "is_property": True},
    "width": {"returns": "Number", "is_property": True},
    "x": {"returns": "Number", "is_property": True},
    "y": {"returns": "Number", "is_property": True},
    "toJSON": {"params": [], "returns": "Object"},
}

# --- Global Object Static Methods ---

GLOBAL_OBJECT_STATICS = {
    "Object": {
        "assign": {"params": ["object", "...object"], "returns": "Object"},
        "create": {"params": ["object", "object?"], "returns": "Object"},
        "defineProperties": {"params": ["object", "object"], "returns": "Object"},
        "defineProperty": {"params": ["object", "string", "object"], "returns": "Object"},
        "entries": {"params": ["object"], "returns": "Array"},
        "freeze": {"params": ["object"], "returns": "Object"},
        "fromEntries": {"params": ["iterable"], "returns": "Object"},
        "getOwnPropertyDescriptor": {"params": ["object", "string"], "returns": "Object"},
        "getOwnPropertyDescriptors": {"params": ["object"], "returns": "Object"},
        "getOwnPropertyNames": {"params": ["object"], "returns": "Array<String>"},
        "getOwnPropertySymbols": {"params": ["object"], "returns": "Array<Symbol>"},
        "getPrototypeOf": {"params": ["object"], "returns": "Object"},
        "hasOwn": {"params": ["object", "string"], "returns": "Boolean"},
        "is": {"params": ["any", "any"], "returns": "Boolean"},
        "isExtensible": {"params": ["object"], "returns": "Boolean"},
        "isFrozen": {"params": ["object"], "returns": "Boolean"},
        "isSealed": {"params": ["object"], "returns": "Boolean"},
        "keys": {"params": ["object"], "returns": "Array<String>"},
        "preventExtensions": {"params": ["object"], "returns": "Object"},
        "seal": {"params": ["object"], "returns": "Object"},
        "setPrototypeOf": {"params": ["object", "object"], "returns": "Object"},
        "values": {"params": ["object"], "returns": "Array"},
    },

    "Array": {
        "from": {"params": ["iterable", "function?", "object?"], "returns": "Array"},
        "isArray": {"params": ["any"], "returns": "Boolean"},
        "of": {"params": ["...any"], "returns": "Array"},
    },

    "String": {
        "fromCharCode": {"params": ["...number"], "returns": "String"},
        "fromCodePoint": {"params": ["...number"], "returns": "String"},
        "raw": {"params": ["object", "...any"], "returns": "String"},
    },

    "Number": {
        "isFinite": {"params": ["any"], "returns": "Boolean"},
        "isInteger": {"params": ["any"], "returns": "Boolean"},
        "isNaN": {"params": ["any"], "returns": "Boolean"},
        "isSafeInteger": {"params": ["any"], "returns": "Boolean"},
        "parseFloat": {"params": ["string"], "returns": "Number"},
        "parseInt": {"params": ["string", "number?"], "returns": "Number"},
    },

    "Math": {
        "abs": {"params": ["number"], "returns": "Number"},
        "acos": {"params": ["number"], "returns": "Number"},
        "acosh": {"params": ["number"], "returns": "Number"},
        "asin": {"params": ["number"], "returns": "Number"},
        "asinh": {"params": ["number"], "returns": "Number"},
        "atan": {"params": ["number"], "returns": "Number"},
        "atan2": {"params": ["number", "number"], "returns": "Number"},
        "atanh": {"params": ["number"], "returns": "Number"},
        "cbrt": {"params": ["number"], "returns": "Number"},
        "ceil": {"params": ["number"], "returns": "Number"},
        "clz32": {"params": ["number"], "returns": "Number"},
        "cos": {"params": ["number"], "returns": "Number"},
        "cosh": {"params": ["number"], "returns": "Number"},
        "exp": {"params": ["number"], "returns": "Number"},
        "expm1": {"params": ["number"], "returns": "Number"},
        "floor": {"params": ["number"], "returns": "Number"},
        "fround": {"params": ["number"], "returns": "Number"},
        "hypot": {"params": ["...number"], "returns": "Number"},
        "imul": {"params": ["number", "number"], "returns": "Number"},
        "log": {"params": ["number"], "returns": "Number"},
        "log1p": {"params": ["number"], "returns": "Number"},
        "log2": {"params": ["number"], "returns": "Number"},
        "log10": {"params": ["number"], "returns": "Number"},
        "max": {"params": ["...number"], "returns": "Number"},
        "min": {"params": ["...number"], "returns": "Number"},
        "pow": {"params": ["number", "number"], "returns": "Number"},
        "random": {"params": [], "returns": "Number"},
        "round": {"params": ["number"], "returns": "Number"},
        "sign": {"params": ["number"], "returns": "Number"},
        "sin": {"params": ["number"], "returns": "Number"},
        "sinh": {"params": ["number"], "returns": "Number"},
        "sqrt": {"params": ["number"], "returns": "Number"},
        "tan": {"params": ["number"], "returns": "Number"},
        "tanh": {"params": ["number"], "returns": "Number"},
        "trunc": {"params": ["number"], "returns": "Number"},
    },

    "JSON": {
        "parse": {"params": ["string", "function?"], "returns": "any"},
        "stringify": {"params": ["any", "function?", "number|string?"], "returns": "String"},
    },

    "Date": {
        "now": {"params": [], "returns": "Number"},
        "parse": {"params": ["string"], "returns": "Number"},
        "UTC": {"params": ["number", "number?", "number?", "number?", "number?", "number?", "number?"], "returns": "Number"},
    },

    "Promise": {
        "all": {"params": ["iterable"], "returns": "Promise<Array>"},
        "allSettled": {"params": ["iterable"], "returns": "Promise<Array>"},
        "any": {"params": ["iterable"], "returns": "Promise"},
        "race": {"params": ["iterable"], "returns": "Promise"},
        "reject": {"params": ["any"], "returns": "Promise"},
        "resolve": {"params": ["any?"], "returns": "Promise"},
    },
}

# --- Document, Window and Host Objects ---

DOCUMENT_METHODS = {
    # Properties
    "activeElement": {"returns": "Element", "is_property": True},
    "body": {"returns": "HTMLElement", "is_property": True},
    "cookie": {"returns": "String", "is_property": True},
    "documentElement": {"returns": "HTMLElement", "is_property": True},
    "forms": {"returns": "HTMLCollection", "is_property": True},
    "head": {"returns": "HTMLElement", "is_property": True},
    "images": {"returns": "HTMLCollection", "is_property": True},
    "links": {"returns": "HTMLCollection", "is_property": True},
    "readyState": {"returns": "String", "is_property": True},
    "title": {"returns": "String", "is_property": True},

    # Methods
    "createDocumentFragment": {"params": [], "returns": "DocumentFragment"},
    "createElement": {"params": ["string"], "returns": "HTMLElement"},
    "createTextNode": {"params": ["string"], "returns": "Node"},
    "getElementById": {"params": ["string"], "returns": "HTMLElement"},
    "getElementsByClassName": {"params": ["string"], "returns": "HTMLCollection"},
    "getElementsByName": {"params": ["string"], "returns": "NodeList"},
    "getElementsByTagName": {"params": ["string"], "returns": "HTMLCollection"},
    "querySelector": {"params": ["string"], "returns": "Element"},
    "querySelectorAll": {"params": ["string"], "returns": "NodeList"},
}

WINDOW_METHODS = {
    # Properties
    "console": {"returns": "Console", "is_property": True},
    "document": {"returns": "Document", "is_property": True},
    "innerHeight": {"returns": "Number", "is_property": True},
    "innerWidth": {"returns": "Number", "is_property": True},
    "localStorage": {"returns": "Storage", "is_property": True},
    "location": {"returns": "Location", "is_property": True},
    "navigator": {"returns": "Navigator", "is_property": True},
    "scrollX": {"returns": "Number", "is_property": True},
    "scrollY": {"returns": "Number", "is_property": True},
    "sessionStorage": {"returns": "Storage", "is_property": True},

    # Methods
    "alert": {"params": ["string?"], "returns": "undefined"},
    "cancelAnimationFrame": {"params": ["number"], "returns": "undefined"},
    "clearInterval": {"params": ["number"], "returns": "undefined"},
    "clearTimeout": {"params": ["number"], "returns": "undefined"},
    "confirm": {"params": ["string?"], "returns": "Boolean"},
    "fetch": {"params": ["string", "object?"], "returns": "Promise"},
    "getComputedStyle": {"params": ["Element"], "returns": "CSSStyleDeclaration"},
    "prompt": {"params": ["string?", "string?"], "returns": "String"},
    "requestAnimationFrame": {"params": ["function"], "returns": "Number"},
    "scrollTo": {"params": ["object|number", "number?"], "returns": "undefined"},
    "setInterval": {"params": ["function", "number?"], "returns": "Number"},
    "setTimeout": {"params": ["function", "number?"], "returns": "Number"},
}

CONSOLE_METHODS = {
    "assert": {"params": ["boolean", "...any"], "returns": "undefined"},
    "clear": {"params": [], "returns": "undefined"},
    "count": {"params": ["string?"], "returns": "undefined"},
    "debug": {"params": ["...any"], "returns": "undefined"},
    "dir": {"params": ["any"], "returns": "undefined"},
    "error": {"params": ["...any"], "returns": "undefined"},
    "group": {"params": ["...any"], "returns": "undefined"},
    "groupEnd": {"params": [], "returns": "undefined"},
    "info": {"params": ["...any"], "returns": "undefined"},
    "log": {"params": ["...any"], "returns": "undefined"},
    "table": {"params": ["any"], "returns": "undefined"},
    "time": {"params": ["string?"], "returns": "undefined"},
    "timeEnd": {"params": ["string?"], "returns": "undefined"},
    "trace": {"params": ["...any"], "returns": "undefined"},
    "warn": {"params": ["...any"], "returns": "undefined"},
}

STORAGE_METHODS = {
    "length": {"returns": "Number", "is_property": True},
    "clear": {"params": [], "returns": "undefined"},
    "getItem": {"params": ["string"], "returns": "String"},
    "key": {"params": ["number"], "returns": "String"},
    "removeItem": {"params": ["string"], "returns": "undefined"},
    "setItem": {"params": ["string", "string"], "returns": "undefined"},
}

# --- Error ---

ERROR_METHODS = {
    "message": {"returns": "String", "is_property": True},
    "name": {"returns": "String", "is_property": True},
    "stack": {"returns": "String", "is_property": True},
    "cause": {"returns": "any", "is_property": True},
    "toString": {"params": [], "returns": "String"},
}

# --- Constructor Return Types ---

CONSTRUCTOR_TYPES = {
    "Array": "Array",
    "Boolean": "Boolean",
    "Date": "Date",
    "Error": "Error",
    "Function": "Function",
    "Map": "Map",
    "Number": "Number",
    "Object": "Object",
    "Promise": "Promise",
    "RegExp": "RegExp",
    "Set": "Set",
    "String": "String",
    "WeakMap": "WeakMap",
    "WeakSet": "WeakSet",
    "Int8Array": "Int8Array",
    "Uint8Array": "Uint8Array",
    "Uint8ClampedArray": "Uint8ClampedArray",
    "Int16Array": "Int16Array",
    "Uint16Array": "Uint16Array",
    "Int32Array": "Int32Array",
    "Uint32Array": "Uint32Array",
    "Float32Array": "Float32Array",
    "Float64Array": "Float64Array",
    "BigInt64Array": "BigInt64Array",
    "BigUint64Array": "BigUint64Array",
    "ArrayBuffer": "ArrayBuffer",
    "DataView": "DataView",
}

# --- DOM Type Hierarchy ---
# Single inheritance: only the first parent is followed.

DOM_TYPE_HIERARCHY = {
    "HTMLDivElement": ["HTMLElement"],
    "HTMLSpanElement": ["HTMLElement"],
    "HTMLInputElement": ["HTMLElement"],
    "HTMLButtonElement": ["HTMLElement"],
    "HTMLAnchorElement": ["HTMLElement"],
    "HTMLImageElement": ["HTMLElement"],
    "HTMLFormElement": ["HTMLElement"],
    "HTMLCanvasElement": ["HTMLElement"],
    "HTMLVideoElement": ["HTMLMediaElement"],
    "HTMLAudioElement": ["HTMLMediaElement"],
    "HTMLMediaElement": ["HTMLElement"],
    "HTMLElement": ["Element"],
    "Element": ["Node"],
    "Node": ["EventTarget"],
    "EventTarget": [],
    "Document": ["Node"],
    "DocumentFragment": ["Node"],
    "Window": ["EventTarget"],
}

# --- Type Definitions Registry ---

TYPE_DEFINITIONS = {
    # Primitives
    "String": STRING_METHODS,
    "Number": NUMBER_METHODS,
    "Boolean": BOOLEAN_METHODS,
    # Collections
    "Array": ARRAY_METHODS,
    "Map": MAP_METHODS,
    "Set": SET_METHODS,
    # Objects
    "Object": OBJECT_METHODS,
    "Date": DATE_METHODS,
    "RegExp": REGEXP_METHODS,
    "Promise": PROMISE_METHODS,
    "Error": ERROR_METHODS,
    # DOM
    "EventTarget": EVENT_TARGET_METHODS,
    "Node": {**EVENT_TARGET_METHODS, **NODE_METHODS},
    "Element": {**EVENT_TARGET_METHODS, **NODE_METHODS, **ELEMENT_METHODS},
    "HTMLElement": {**EVENT_TARGET_METHODS, **NODE_METHODS, **ELEMENT_METHODS, **HTML_ELEMENT_METHODS},
    "Document": {**EVENT_TARGET_METHODS, **NODE_METHODS, **DOCUMENT_METHODS},
    # DOM Collections
    "NodeList": NODELIST_METHODS,
    "HTMLCollection": HTML_COLLECTION_METHODS,
    "DOMTokenList": DOM_TOKEN_LIST_METHODS,
    "CSSStyleDeclaration": CSS_STYLE_DECLARATION_METHODS,
    "DOMRect": DOM_RECT_METHODS,
    # Host objects
    "Window": {**EVENT_TARGET_METHODS, **WINDOW_METHODS},
    "Console": CONSOLE_METHODS,
    "Storage": STORAGE_METHODS,
}

# Global identifiers and the named object type each one denotes. Constructor
# functions map to `<Name>Constructor` so their static members are listed
# instead of their prototype.
CONSTRUCTOR_SUFFIX = "Constructor"

GLOBAL_OBJECTS = {
    "window": "Window",
    "document": "Document",
    "console": "Console",
    "Math": "Math",
    "JSON": "JSON",
    "Object": "ObjectConstructor",
    "Array": "ArrayConstructor",
    "String": "StringConstructor",
    "Number": "NumberConstructor",
    "Boolean": "BooleanConstructor",
    "Date": "DateConstructor",
    "Promise": "PromiseConstructor",
    "localStorage": "Storage",
    "sessionStorage": "Storage",
}

MemberTable = Dict[str, dict]


class BuiltinTypes:
    """Read-only queries over the catalog tables."""

    def get_type_members(self, type_name: str) -> Optional[MemberTable]:
        return TYPE_DEFINITIONS.get(type_name)

    def get_static_members(self, object_name: str) -> Optional[MemberTable]:
        if object_name.endswith(CONSTRUCTOR_SUFFIX):
            object_name = object_name[: -len(CONSTRUCTOR_SUFFIX)]
        return GLOBAL_OBJECT_STATICS.get(object_name)

    def get_constructor_type(self, constructor_name: str) -> Optional[str]:
        return CONSTRUCTOR_TYPES.get(constructor_name)

    def get_global_object(self, name: str) -> Optional[str]:
        return GLOBAL_OBJECTS.get(name)

    def get_method_return_type(self, type_name: str, member_name: str) -> Optional[str]:
        """Looks the member up on the prototype first, then among the statics."""
        members = self.get_type_members(type_name)
        if members and member_name in members:
            return members[member_name].get("returns")

        statics = self.get_static_members(type_name)
        if statics and member_name in statics:
            return statics[member_name].get("returns")

        return None

    def get_global_function_return_type(self, name: str) -> Optional[str]:
        return GLOBAL_FUNCTIONS.get(name)

    def is_property(self, type_name: str, member_name: str) -> bool:
        members = self.get_type_members(type_name) or {}
        return members.get(member_name, {}).get("is_property", False)

    def get_type_hierarchy(self, type_name: str) -> List[str]:
        hierarchy = [type_name]
        parents = DOM_TYPE_HIERARCHY.get(type_name)
        while parents:
            parent = parents[0]
            hierarchy.append(parent)
            parents = DOM_TYPE_HIERARCHY.get(parent)
        return hierarchy

    def get_all_members(self, type_name: str) -> MemberTable:
        """Members including inherited ones; derived types override their bases."""
        result: MemberTable = {}
        for name in reversed(self.get_type_hierarchy(type_name)):
            result.update(self.get_type_members(name) or {})
        return result


# --- Global Functions ---
# Callable globals and the return-type string of calling them.

GLOBAL_FUNCTIONS = {
    "parseInt": "Number",
    "parseFloat": "Number",
    "isNaN": "Boolean",
    "isFinite": "Boolean",
    "encodeURI": "String",
    "encodeURIComponent": "String",
    "decodeURI": "String",
    "decodeURIComponent": "String",
    "setTimeout": "Number",
    "setInterval": "Number",
    "clearTimeout": "undefined",
    "clearInterval": "undefined",
    "requestAnimationFrame": "Number",
    "cancelAnimationFrame": "undefined",
    "queueMicrotask": "undefined",
    "structuredClone": "any",
    "alert": "undefined",
    "confirm": "Boolean",
    "prompt": "String",
    "fetch": "Promise",
}

# Remaining global names offered for identifier completion, with the object type they denote.
GLOBAL_NAMES = {
    "RegExp": "RegExpConstructor",
    "Map": "MapConstructor",
    "Set": "SetConstructor",
    "Error": "ErrorConstructor",
    "Symbol": "SymbolConstructor",
    "navigator": "Navigator",
    "location": "Location",
    "globalThis": "Window",
}
