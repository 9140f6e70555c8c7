from .base import Statement
from .expansion import Expansion


class Block(Statement):
    """An organize format object representing an optional block.

    The block renders its content only if every tag written directly in it
    resolved to a non-empty value; otherwise it renders nothing.  Nested
    blocks decide for themselves and never empty their parent.
    """

    def format(self, song, remove_problematic=False):
        ret = Statement.format(self, song, remove_problematic)
        if ret.any_empty:
            return Expansion("", unique=ret.unique)
        return Expansion(ret.text, unique=ret.unique)

    def __repr__(self):
        return "Block({})".format(", ".join(repr(part) for part in self))

    def to_string(self):
        return "{" + super().to_string() + "}"
