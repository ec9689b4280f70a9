"""cVerse - render structured CV records into paginated PDF documents."""

__version__ = "0.1.0"
