"""
Parsing Warden: protection of rendered HTML from later parsing passes.

Once a pass has turned source text into HTML (a link, an image, a code
block), later and broader passes must not see that HTML again. The warden
swaps each such fragment for an opaque key and puts the fragments back once
every pass has run.

A warden belongs to a single top-level render call. Keys are only
resolvable through the warden that issued them.
"""

from __future__ import annotations

import re

from loguru import logger

from src.text.encoding import string_to_base64

KEY_DELIMITER = "???"

# ??? + issue count + base64 (with '=' swapped for ':') + ???
KEY_PATTERN = re.compile(r"\?{3}\d+[a-zA-Z0-9+/]+:{0,2}\?{3}")


class ParsingWarden:
    """Escrow of protected fragments keyed by opaque tokens."""

    def __init__(self) -> None:
        self._wards: dict[str, str] = {}
        self._issued = 0

    def __len__(self) -> int:
        return len(self._wards)

    def clear(self) -> None:
        """Clear all the entries."""
        self._wards.clear()
        self._issued = 0

    @staticmethod
    def _create_key_code(data: str) -> str:
        # '==' padding would be read as a Setext heading underline
        return string_to_base64(data).replace("=", ":")

    def protect(self, data: str) -> str:
        """
        Protect data from further parsing.

        Args:
            data: The fragment to guard.

        Returns:
            The key, which is spliced into the working text in place of the
            data. Empty data is returned untouched.
        """
        if not data:
            return data
        # The issue count, not the table size, keeps keys unique after retrievals.
        key = f"{KEY_DELIMITER}{self._issued}{self._create_key_code(data)}{KEY_DELIMITER}"
        self._issued += 1
        self._wards[key] = data
        return key

    def retrieve(self, key: str) -> str:
        """
        Get the originally protected fragment. The ward is removed.

        If the key is unknown the key itself is returned so the failure stays
        visible in the output rather than aborting the render.
        """
        value = self._wards.pop(key, None)
        if value is None:
            logger.error(f"Could not find {key} in protected data.")
            return key
        return value

    def reinstate(self, data: str) -> str:
        """Replace every key in data by its fragment. Fragments are not rescanned."""
        if not data:
            return data
        return KEY_PATTERN.sub(lambda match: self.retrieve(match.group(0)), data)
