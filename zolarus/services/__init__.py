"""Application services built on top of the intent extractor."""

from .chat import ChatMessage, ChatSession, widget_visible

__all__ = ["ChatMessage", "ChatSession", "widget_visible"]
