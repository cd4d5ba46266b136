"""Escaping of code sample text before it is embedded in HTML."""

CODE_ENTITIES = {
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
    "`": "&#96;",
}

_CODE_TABLE = str.maketrans(CODE_ENTITIES)


def escape_code(code: str) -> str:
    """Escape markup-significant characters in a code sample.

    Ampersands are left alone: doc comments are XML, so `&lt;` already in the
    source must survive, and escaping twice gives the same text.
    """
    return code.translate(_CODE_TABLE)
