"""Character-level O/I/T/S labels for raw text, projected from a tokenized version."""

from .alignment import EditOperation, align, edit_script
from .labels import CharacterLabel, tag_tokenized_text
from .projection import iobify, project_labels

__all__ = [
    "CharacterLabel",
    "EditOperation",
    "align",
    "edit_script",
    "iobify",
    "project_labels",
    "tag_tokenized_text",
]
__version__ = "0.1.0"
