"""Request and response bodies for the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    text: str = Field(default="", max_length=2000)
    path: str = "/"
    lang: str | None = None
    user_id: str | None = None


class ChatResponse(BaseModel):
    reply: str
    nav: str | None = None
    refresh: bool = False
    intent: str


class ChipsResponse(BaseModel):
    lang: str
    greeting: str
    placeholder: str
    chips: list[str]


class ShopParseRequest(BaseModel):
    text: str = Field(default="", max_length=2000)
    user_id: str | None = None


class ShopParseResponse(BaseModel):
    match: bool
    recipient: str | None = None
    occasion: str | None = None
    budget: str | None = None
    keywords: str | None = None
    query_string: str | None = None
