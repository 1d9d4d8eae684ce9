"""Building blocks for an ink story runtime: commands, header, collections and helpers."""

__version__ = "0.1.0"

__all__ = [
    "array",
    "avl",
    "core",
    "inkvar",
    "random",
    "restorable",
    "stack",
    "strings",
    "tags",
]