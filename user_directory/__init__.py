"""User directory core: roster records and their audit trail."""

__version__ = "0.1.0"
