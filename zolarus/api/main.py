"""FastAPI entrypoint and HTTP routes."""

from pathlib import Path

from fastapi import Cookie, FastAPI, HTTPException, Query, Response, status

from zolarus.api.schemas import (
    ChatRequest,
    ChatResponse,
    ChipsResponse,
    ShopParseRequest,
    ShopParseResponse,
)
from zolarus.config.settings import get_settings
from zolarus.i18n import BUNDLE, COOKIE_MAX_AGE, COOKIE_NAME, chips, normalize_lang, resolve_lang, text
from zolarus.nlp.intent import IntentExtractor
from zolarus.nlp.shopping import apply_defaults
from zolarus.storage import JsonFileStore, KeyValueStore, PreferenceStore


def create_app(store: KeyValueStore | None = None) -> FastAPI:
    """Initialise the FastAPI application."""

    settings = get_settings()
    app = FastAPI(
        title="Zolarus Assistant API",
        version="0.1.0",
        docs_url="/docs" if settings.environment != "prod" else None,
        redoc_url="/redoc" if settings.environment != "prod" else None,
    )

    preferences = PreferenceStore(store if store is not None else JsonFileStore(Path(settings.storage_path)))
    extractor = IntentExtractor(preferences)
    app.state.extractor = extractor
    app.state.preferences = preferences

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple health endpoint used for readiness probes."""

        return {"status": "ok"}

    @app.post("/chat", response_model=ChatResponse, tags=["chat"])
    def chat(
        request: ChatRequest,
        lang: str | None = Query(default=None),
        zola_lang: str | None = Cookie(default=None, alias=COOKIE_NAME),
    ) -> ChatResponse:
        """Answer one chat message for the page the user is on."""

        active = resolve_lang(request.lang or lang, zola_lang)
        result = extractor.answer_for(request.text, request.path, active, request.user_id)
        return ChatResponse(
            reply=result.reply,
            nav=result.nav,
            refresh=result.refresh,
            intent=result.intent,
        )

    @app.get("/chat/chips", response_model=ChipsResponse, tags=["chat"])
    def chat_chips(
        lang: str | None = Query(default=None),
        zola_lang: str | None = Cookie(default=None, alias=COOKIE_NAME),
    ) -> ChipsResponse:
        active = resolve_lang(lang, zola_lang)
        return ChipsResponse(
            lang=active,
            greeting=text("chat.greeting", active),
            placeholder=text("chat.placeholder", active),
            chips=chips(active),
        )

    @app.post("/shop/parse", response_model=ShopParseResponse, tags=["shop"])
    def shop_parse(request: ShopParseRequest) -> ShopParseResponse:
        """Parse a free-text gift search, prefilled from the user's soft preferences."""

        query = extractor.parse_shopping(request.text)
        if query is None:
            return ShopParseResponse(match=False)
        if request.user_id:
            prefs = preferences.load(request.user_id)
            query = apply_defaults(query, prefs.last_budget, prefs.last_keywords)
        return ShopParseResponse(
            match=True,
            recipient=query.recipient,
            occasion=query.occasion,
            budget=query.budget,
            keywords=query.keywords,
            query_string=query.to_query_string(),
        )

    @app.put("/lang/{lang}", tags=["i18n"])
    def switch_language(lang: str, response: Response) -> dict[str, str]:
        """Remember the chosen language in the ``zola_lang`` cookie for a year."""

        active = normalize_lang(lang)
        response.set_cookie(COOKIE_NAME, active, max_age=COOKIE_MAX_AGE, path="/")
        return {"lang": active}

    @app.get("/i18n/{lang}/{key}", tags=["i18n"])
    def translate(lang: str, key: str) -> dict[str, str]:
        if key not in BUNDLE:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown key: {key}")
        active = normalize_lang(lang)
        return {"lang": active, "key": key, "text": text(key, active)}

    return app


app = create_app()
