"""
notelist: an in-memory note list with a small web and command-line front end.
"""

from .collection import NoteCollection
from .notes import Note, NoteStatus, NoteVariant, ValidationError

__version__ = "0.1.0"

__all__ = ["Note", "NoteCollection", "NoteStatus", "NoteVariant", "ValidationError", "__version__"]
