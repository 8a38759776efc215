"""
JavaScript completion data: the member lists used by the best-guess completion
layer when inference has no type for a chain.
"""

# --- Object Methods (after dot) ---

JS_OBJECT_MEMBERS = {
    "console": [
        "assert", "clear", "count", "countReset", "debug", "dir", "dirxml",
        "error", "group", "groupCollapsed", "groupEnd", "info", "log",
        "profile", "profileEnd", "table", "time", "timeEnd", "timeLog",
        "timeStamp", "trace", "warn",
    ],

    "window": [
        "addEventListener", "alert", "atob", "blur", "btoa", "cancelAnimationFrame",
        "cancelIdleCallback", "clearInterval", "clearTimeout", "close", "confirm",
        "createImageBitmap", "customElements", "devicePixelRatio", "dispatchEvent",
        "document", "fetch", "focus", "frameElement", "frames", "getComputedStyle",
        "getSelection", "history", "indexedDB", "innerHeight", "innerWidth",
        "isSecureContext", "length", "localStorage", "location", "locationbar",
        "matchMedia", "menubar", "moveBy", "moveTo", "name", "navigator",
        "open", "opener", "outerHeight", "outerWidth", "pageXOffset", "pageYOffset",
        "parent", "performance", "personalbar", "postMessage", "print", "prompt",
        "queueMicrotask", "removeEventListener", "requestAnimationFrame",
        "requestIdleCallback", "resizeBy", "resizeTo", "screen", "screenLeft",
        "screenTop", "screenX", "screenY", "scroll", "scrollbars", "scrollBy",
        "scrollTo", "scrollX", "scrollY", "self", "sessionStorage", "setInterval",
        "setTimeout", "speechSynthesis", "status", "statusbar", "stop",
        "structuredClone", "toolbar", "top", "visualViewport",
    ],

    "document": [
        "activeElement", "addEventListener", "adoptNode", "adoptedStyleSheets",
        "body", "characterSet", "childElementCount", "children", "close",
        "compatMode", "contentType", "cookie", "createAttribute", "createComment",
        "createDocumentFragment", "createElement", "createElementNS", "createEvent",
        "createNodeIterator", "createRange", "createTextNode", "createTreeWalker",
        "currentScript", "defaultView", "designMode", "dir", "dispatchEvent",
        "doctype", "documentElement", "documentURI", "domain", "elementFromPoint",
        "elementsFromPoint", "embeds", "evaluate", "execCommand", "exitFullscreen",
        "fonts", "forms", "fullscreen", "fullscreenElement", "fullscreenEnabled",
        "getAnimations", "getElementById", "getElementsByClassName",
        "getElementsByName", "getElementsByTagName", "getSelection", "hasFocus",
        "head", "hidden", "images", "implementation", "importNode", "links",
        "location", "nodeName", "nodeType", "open", "ownerDocument",
        "querySelector", "querySelectorAll", "readyState", "referrer",
        "removeEventListener", "scripts", "scrollingElement", "styleSheets",
        "textContent", "title", "URL", "visibilityState", "write", "writeln",
    ],

    "Math": [
        "abs", "acos", "acosh", "asin", "asinh", "atan", "atan2", "atanh",
        "cbrt", "ceil", "clz32", "cos", "cosh", "E", "exp", "expm1", "floor",
        "fround", "hypot", "imul", "LN2", "LN10", "log", "log1p", "log2",
        "log10", "LOG2E", "LOG10E", "max", "min", "PI", "pow", "random",
        "round", "sign", "sin", "sinh", "sqrt", "SQRT1_2", "SQRT2", "tan",
        "tanh", "trunc",
    ],

    "JSON": ["parse", "stringify"],

    "Object": [
        "assign", "create", "defineProperties", "defineProperty", "entries",
        "freeze", "fromEntries", "getOwnPropertyDescriptor", "getOwnPropertyDescriptors",
        "getOwnPropertyNames", "getOwnPropertySymbols", "getPrototypeOf", "hasOwn",
        "is", "isExtensible", "isFrozen", "isSealed", "keys", "preventExtensions",
        "prototype", "seal", "setPrototypeOf", "values",
    ],

    "Array": ["from", "isArray", "of", "prototype"],

    "Promise": ["all", "allSettled", "any", "race", "reject", "resolve", "prototype"],

    "String": ["fromCharCode", "fromCodePoint", "prototype", "raw"],

    "Number": [
        "EPSILON", "isFinite", "isInteger", "isNaN", "isSafeInteger",
        "MAX_SAFE_INTEGER", "MAX_VALUE", "MIN_SAFE_INTEGER", "MIN_VALUE",
        "NaN", "NEGATIVE_INFINITY", "parseFloat", "parseInt", "POSITIVE_INFINITY",
        "prototype",
    ],

    "localStorage": ["clear", "getItem", "key", "length", "removeItem", "setItem"],

    "sessionStorage": ["clear", "getItem", "key", "length", "removeItem", "setItem"],

    "Date": ["now", "parse", "prototype", "UTC"],

    "RegExp": ["prototype", "$1", "$2", "$3", "$4", "$5", "$6", "$7", "$8", "$9",
        "input", "lastMatch", "lastParen", "leftContext", "rightContext"],
}

# --- HTMLElement Members (for DOM elements) ---

JS_HTML_ELEMENT_MEMBERS = [
    "accessKey", "addEventListener", "after", "animate", "append", "appendChild",
    "attachShadow", "attributes", "before", "blur", "childElementCount",
    "childNodes", "children", "classList", "className", "click", "clientHeight",
    "clientLeft", "clientTop", "clientWidth", "cloneNode", "closest", "contains",
    "contentEditable", "dataset", "dir", "dispatchEvent", "draggable",
    "firstChild", "firstElementChild", "focus", "getAttribute", "getAttributeNames",
    "getBoundingClientRect", "getClientRects", "getElementsByClassName",
    "getElementsByTagName", "getRootNode", "hasAttribute", "hasAttributes",
    "hasChildNodes", "hidden", "id", "innerHTML", "innerText", "insertAdjacentElement",
    "insertAdjacentHTML", "insertAdjacentText", "insertBefore", "isConnected",
    "isContentEditable", "lang", "lastChild", "lastElementChild", "matches",
    "nextElementSibling", "nextSibling", "nodeName", "nodeType", "nodeValue",
    "normalize", "offsetHeight", "offsetLeft", "offsetParent", "offsetTop",
    "offsetWidth", "outerHTML", "outerText", "ownerDocument", "parentElement",
    "parentNode", "prepend", "previousElementSibling", "previousSibling",
    "querySelector", "querySelectorAll", "remove", "removeAttribute",
    "removeChild", "removeEventListener", "replaceChild", "replaceChildren",
    "replaceWith", "scrollHeight", "scrollIntoView", "scrollLeft", "scrollTop",
    "scrollWidth", "setAttribute", "shadowRoot", "slot", "spellcheck", "style",
    "tabIndex", "tagName", "textContent", "title", "toggleAttribute",
]

# --- Nested Object Members ---

JS_CLASSLIST_MEMBERS = [
    "add", "contains", "entries", "forEach", "item", "keys", "length",
    "remove", "replace", "supports", "toggle", "toString", "value", "values",
]

JS_STYLE_MEMBERS = [
    "alignContent", "alignItems", "alignSelf", "animation", "background",
    "backgroundColor", "backgroundImage", "backgroundPosition", "backgroundRepeat",
    "backgroundSize", "border", "borderBottom", "borderColor", "borderLeft",
    "borderRadius", "borderRight", "borderStyle", "borderTop", "borderWidth",
    "bottom", "boxShadow", "boxSizing", "clear", "color", "content", "cssText",
    "cursor", "direction", "display", "flex", "flexBasis", "flexDirection",
    "flexFlow", "flexGrow", "flexShrink", "flexWrap", "float", "font",
    "fontFamily", "fontSize", "fontStyle", "fontWeight", "gap", "getPropertyValue",
    "grid", "gridArea", "gridColumn", "gridRow", "gridTemplate", "height",
    "justifyContent", "left", "letterSpacing", "lineHeight", "listStyle",
    "margin", "marginBottom", "marginLeft", "marginRight", "marginTop",
    "maxHeight", "maxWidth", "minHeight", "minWidth", "opacity", "order",
    "outline", "overflow", "overflowX", "overflowY", "padding", "paddingBottom",
    "paddingLeft", "paddingRight", "paddingTop", "position", "removeProperty",
    "right", "setProperty", "textAlign", "textDecoration", "textIndent",
    "textOverflow", "textTransform", "top", "transform", "transformOrigin",
    "transition", "userSelect", "verticalAlign", "visibility", "whiteSpace",
    "width", "wordBreak", "wordSpacing", "zIndex",
]

JS_LOCATION_MEMBERS = [
    "ancestorOrigins", "assign", "hash", "host", "hostname", "href", "origin",
    "pathname", "port", "protocol", "reload", "replace", "search", "toString",
]

JS_HISTORY_MEMBERS = [
    "back", "forward", "go", "length", "pushState", "replaceState",
    "scrollRestoration", "state",
]

JS_NAVIGATOR_MEMBERS = [
    "appCodeName", "appName", "appVersion", "clipboard", "cookieEnabled",
    "deviceMemory", "geolocation", "hardwareConcurrency", "language", "languages",
    "maxTouchPoints", "mediaDevices", "onLine", "platform", "serviceWorker",
    "storage", "userAgent", "vibrate",
]

JS_NODELIST_MEMBERS = ["entries", "forEach", "item", "keys", "length", "values"]

JS_NESTED_MEMBERS = {
    "classList": JS_CLASSLIST_MEMBERS,
    "style": JS_STYLE_MEMBERS,
    "location": JS_LOCATION_MEMBERS,
    "history": JS_HISTORY_MEMBERS,
    "navigator": JS_NAVIGATOR_MEMBERS,
    "body": JS_HTML_ELEMENT_MEMBERS,
    "head": JS_HTML_ELEMENT_MEMBERS,
    "documentElement": JS_HTML_ELEMENT_MEMBERS,
    "activeElement": JS_HTML_ELEMENT_MEMBERS,
    "parentElement": JS_HTML_ELEMENT_MEMBERS,
    "firstElementChild": JS_HTML_ELEMENT_MEMBERS,
    "lastElementChild": JS_HTML_ELEMENT_MEMBERS,
    "nextElementSibling": JS_HTML_ELEMENT_MEMBERS,
    "previousElementSibling": JS_HTML_ELEMENT_MEMBERS,
    "childNodes": JS_NODELIST_MEMBERS,
}

JS_METHOD_RETURN_TYPES = {
    "getElementById": "HTMLElement",
    "querySelector": "HTMLElement",
    "closest": "HTMLElement",
    "createElement": "HTMLElement",
    "cloneNode": "HTMLElement",
    "querySelectorAll": "NodeList",
    "getElementsByClassName": "HTMLCollection",
    "getElementsByTagName": "HTMLCollection",
    "getBoundingClientRect": "DOMRect",
}

JS_TYPE_MEMBERS = {
    "HTMLElement": JS_HTML_ELEMENT_MEMBERS,
    "NodeList": JS_NODELIST_MEMBERS,
    "DOMTokenList": JS_CLASSLIST_MEMBERS,
    "CSSStyleDeclaration": JS_STYLE_MEMBERS,
    "Location": JS_LOCATION_MEMBERS,
    "History": JS_HISTORY_MEMBERS,
    "Navigator": JS_NAVIGATOR_MEMBERS,
}
