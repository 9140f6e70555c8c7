"""Organize format sub-package.

This package implements the format strings used to name files when a music
collection is organized.  A format mixes literal text, tag references and
optional blocks:
    %albumartist/%album/%track - %title
    %artist/%album{ (Disc %disc)}/%title
    {%track. }%title

An optional block ({...}) is dropped when any tag written in it resolves to
an empty value.

Modules:
    statement.py: Top-level statement parsing
    block.py: Optional blocks ({...})
    field.py: Tag references (%tag) and the tag registry
    string.py: Literal string handling
    expansion.py: Values produced by formatting
    validator.py: Syntax checking for formats being edited

Main functions:
    compile(format_string): Parse format string into Statement object
    format(format_string, song): Expand a format string for a song
"""

from . import statement
from .base import Statement as Statement
from .block import Block as Block
from .expansion import Expansion as Expansion
from .field import Field as Field, tag_value as tag_value
from .string import String as String
from .validator import ValidationState as ValidationState, validate as validate


def compile(format_string):
    """Compile a format string into a Statement object.

    Args:
        format_string: Organize format string

    Returns:
        Statement object that can be expanded for a song
    """
    organizeformat, dummy_length = statement.parse(format_string)
    return organizeformat


def format(format_string, song, remove_problematic=False):
    """Expand a format string for a song.

    Args:
        format_string: Organize format string
        song: Song holding the track metadata
        remove_problematic: Also strip dots from tag values

    Returns:
        Expansion with the text and the any_empty/unique flags
    """
    return compile(format_string).format(song, remove_problematic)


__all__ = [
    "compile",
    "format",
    "tag_value",
    "validate",
    "Statement",
    "Block",
    "Expansion",
    "Field",
    "String",
    "ValidationState",
]
