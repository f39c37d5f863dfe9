"""Zolarus chat assistant: intent parsing, localized replies and backend glue."""

__version__ = "0.1.0"
