"""Syntax checking for organize formats.

The validator never evaluates a format.  It is meant for interactive
editing: a format the user is still typing (an unclosed block, a half
written tag name under the cursor) is INTERMEDIATE rather than INVALID.
"""

import enum
import re
from typing import List, Optional

from ..constants import KNOWN_TAGS
from . import statement

_TAG = re.compile(r"%([a-zA-Z]*)")


class ValidationState(enum.Enum):
    INVALID = 0
    INTERMEDIATE = 1
    ACCEPTABLE = 2


def unknown_tags(text: str) -> List[str]:
    """Names of all %tags in <text> that are not known tags, in order."""
    organizeformat, dummy_length = statement.parse(text)
    return [f.name for f in organizeformat.fields if not f.is_known]


def validate(text: str, pos: Optional[int] = None) -> ValidationState:
    """Check whether <text> is a well-formed organize format.

    Args:
        text: Candidate format string
        pos: Cursor position in <text>, if the string is being edited

    Returns:
        ValidationState for the whole string
    """
    state = ValidationState.ACCEPTABLE

    # Make sure all the blocks match up
    block_level = 0
    for c in text:
        if c == "{":
            block_level += 1
        elif c == "}":
            block_level -= 1
            if block_level < 0:
                return ValidationState.INVALID
    if block_level:
        state = ValidationState.INTERMEDIATE

    # Make sure the tags are valid
    for match in _TAG.finditer(text):
        tag = match.group(1)
        if tag in KNOWN_TAGS:
            continue
        being_typed = pos is not None and match.end() == pos
        if being_typed and any(known.startswith(tag) for known in KNOWN_TAGS):
            state = ValidationState.INTERMEDIATE
        else:
            return ValidationState.INVALID

    return state


def is_valid(text: str) -> bool:
    return validate(text) is ValidationState.ACCEPTABLE
