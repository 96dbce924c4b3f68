"""
Attribute-safe encodings.

Values placed in HTML attributes (missing words, error messages, warden keys)
are URI-encoded and then base64 encoded. The result only contains base64
characters so it cannot break out of an attribute, and casual reading of the
markup does not reveal answers.
"""

from __future__ import annotations

import base64
from urllib.parse import quote, unquote

# Characters left unescaped by a JavaScript-style encodeURIComponent.
_URI_SAFE = "-_.!~*'()"


def string_to_base64(value: str) -> str:
    """URI-encode the string and return its base64 representation."""
    encoded = quote(value, safe=_URI_SAFE)
    return base64.b64encode(encoded.encode("ascii")).decode("ascii")


def base64_to_string(value: str) -> str:
    """Reverse of :func:`string_to_base64`."""
    return unquote(base64.b64decode(value).decode("ascii"))


def escape_attribute(content: str) -> str:
    """Escape content so that it is safe to include in an attribute."""
    return string_to_base64(content)


def unescape_attribute(escaped_content: str) -> str:
    """Unescape an attribute previously escaped."""
    return base64_to_string(escaped_content)


def get_error_attribute_html(message: str) -> str:
    """
    Get a ``data-error`` attribute suitable for inserting into an HTML tag.

    The message is hidden from the rendered page but can be recovered with
    :func:`unescape_attribute`.
    """
    return f'data-error="{escape_attribute(message)}"'
