from .expansion import Expansion


class String:
    """Literal text in an organize format."""

    def __init__(self, string):
        self.string = string

    def format(self, song, remove_problematic=False):
        return Expansion(self.string)

    def __repr__(self):
        return f"String({repr(self.string)})"

    def __eq__(self, other):
        return isinstance(other, String) and other.string == self.string

    def to_string(self):
        return self.string
