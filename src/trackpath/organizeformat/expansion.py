"""Expansion values returned by organize format objects.

Every part of a parsed format (literal text, a tag field, a block, a whole
statement) formats to an Expansion: the produced text plus two flags.

    any_empty  a tag written at this level resolved to the empty string.
               Enclosing blocks use it to decide whether to drop themselves.
    unique     a unique tag (title, track) resolved to a non-empty value
               somewhere inside.

Expansions add together: texts concatenate and each flag is True if it is
True on *either* side.
"""

from typing import NamedTuple


class Expansion(NamedTuple):
    text: str = ""
    any_empty: bool = False
    unique: bool = False

    def __add__(self, other):
        return Expansion(
            self.text + other.text,
            self.any_empty or other.any_empty,
            self.unique or other.unique,
        )

    def __str__(self):
        return self.text


EMPTY = Expansion()
