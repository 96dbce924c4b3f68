"""
Lesson metadata: the key/value header at the start of a lesson file.
"""

from __future__ import annotations

import re
from types import MappingProxyType

from src.text.markdown import escape_html

METADATA_LINE = re.compile(r"^\s*(\w+)\s*[:;.]-?\s*(.*?)\s*$")


class Metadata:
    """
    Read-only mapping of uppercase keys to HTML-escaped values.

    Build instances with :meth:`create_from_source`.
    """

    __slots__ = ("_map",)

    def __init__(self, values: dict[str, str]):
        self._map = MappingProxyType(dict(values))

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.upper() in self._map

    def keys(self) -> list[str]:
        return list(self._map)

    def get_value(self, key: str, default: str | None = None) -> str | None:
        """Get the value for key, ignoring case, or default if absent."""
        return self._map.get(key.upper(), default)

    def as_dict(self) -> dict[str, str]:
        return dict(self._map)

    @classmethod
    def create_from_source(cls, source: str | None) -> Metadata:
        """
        Create metadata from the lesson header.

        Each line of the form ``key: value`` defines an entry. The key can only
        contain word characters and is stored in upper case. The separator can
        be a colon, semicolon or period, optionally followed by a hyphen, with
        any spacing around it. Repeated keys overwrite earlier ones. All other
        lines are ignored, so free prose can sit alongside the metadata.
        """
        values: dict[str, str] = {}
        for line in (source or "").splitlines():
            match = METADATA_LINE.match(line)
            if match:
                values[match.group(1).upper()] = escape_html(match.group(2))
        return cls(values)
