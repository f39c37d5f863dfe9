"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import Counter


chat_messages_total = Counter(
    "chat_messages_total",
    "Total number of chat messages answered by the assistant.",
)

chat_intents_total = Counter(
    "chat_intents_total",
    "Number of chat messages resolved per intent rule.",
    ["intent"],
)

backend_requests_total = Counter(
    "backend_requests_total",
    "Calls made to the hosted auth/DB backend.",
    ["operation", "outcome"],
)
