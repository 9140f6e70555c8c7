from . import string, field
from .base import Statement
from .block import Block
from ..constants import MAX_BLOCK_DEPTH


def match_blocks(format):
    """Find the blocks in <format>.

    Return a dict mapping the index of every '{' that opens a block to the
    index of the '}' that closes it.

    A '}' closes the innermost open '{'.  An empty '{}' is not a block: its
    '{' is literal text and the '}' closes the next enclosing '{' instead.
    Braces left unmatched are literal text.
    """
    matches = {}
    opened = []
    for i, c in enumerate(format):
        if c == "{":
            opened.append(i)
        elif c == "}":
            if opened and opened[-1] == i - 1:
                opened.pop()
            if opened:
                matches[opened.pop()] = i
    return matches


def parse(format):
    """Parse an organize format statement.

    Return a tuple: (Statement, length of string parsed)

    The string should have the following format:
        [ block | field | literal ] *

    where a block is '{' statement '}' with a non-empty statement.  Braces
    that don't form a block, and blocks nested deeper than MAX_BLOCK_DEPTH,
    are kept as literal characters.
    """
    matches = match_blocks(format)

    # (statement being filled, index of the brace that closes it)
    stack = [(Statement(), None)]
    last_string = ""
    i = 0
    while i < len(format):
        c = format[i]
        current, close = stack[-1]
        opens_block = c == "{" and i in matches and len(stack) <= MAX_BLOCK_DEPTH
        if (i == close or opens_block or c == "%") and last_string:
            current.append(string.String(last_string))
            last_string = ""

        if i == close:
            stack.pop()
            i += 1
        elif opens_block:
            obj = Block()
            current.append(obj)
            stack.append((obj, matches[i]))
            i += 1
        elif c == "%":
            obj, length = field.parse(format, i)
            current.append(obj)
            i += length
        else:
            last_string += c
            i += 1

    if last_string:
        stack[-1][0].append(string.String(last_string))
    return stack[0][0], i
