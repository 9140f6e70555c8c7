from .expansion import EMPTY
from .field import Field


class Statement(list):
    """An object holding a list of organize format parts."""

    def __init__(self, parts=()):
        list.__init__(self, parts)

    def format(self, song, remove_problematic=False):
        ret = EMPTY
        for part in self:
            ret = ret + part.format(song, remove_problematic)
        return ret

    @property
    def fields(self):
        """All fields in this statement, including those inside blocks."""
        for part in self:
            if isinstance(part, Statement):
                yield from part.fields
            elif isinstance(part, Field):
                yield part

    def __repr__(self):
        """Standard representation for debugging."""
        return "Statement({})".format(", ".join(repr(part) for part in self))

    def to_string(self):
        return "".join(part.to_string() for part in self)
