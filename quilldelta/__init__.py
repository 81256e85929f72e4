"""Build, slice, compose and invert documents and changes in the Quill Delta format."""

__version__ = "1.1.1"
__all__ = ["attributes", "op", "iterator", "delta", "compose"]