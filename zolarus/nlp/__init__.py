"""Chat message understanding: shopping parsing and intent routing."""

from .intent import IntentExtractor, IntentReply, IntentRule, canonical_page
from .recipient import RecipientResolver
from .shopping import ParsedShoppingQuery, ShoppingParser, parse_shopping

__all__ = [
    "IntentExtractor",
    "IntentReply",
    "IntentRule",
    "ParsedShoppingQuery",
    "RecipientResolver",
    "ShoppingParser",
    "canonical_page",
    "parse_shopping",
]
