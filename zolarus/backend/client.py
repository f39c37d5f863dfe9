"""Async wrapper around the hosted auth/DB REST endpoints."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

import httpx

from zolarus.backend.results import Result, Success, Unavailable
from zolarus.config.settings import Settings, get_settings
from zolarus.metrics.prometheus_exporter import backend_requests_total

logger = logging.getLogger(__name__)


class BackendRequestError(RuntimeError):
    """Raised when the backend responds with an error status code."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


@dataclass(slots=True)
class Profile:
    """Row of the ``profiles`` table that the UI reads."""

    id: str
    full_name: str | None = None
    phone: str | None = None

    @property
    def first_name(self) -> str | None:
        if not self.full_name:
            return None
        return self.full_name.split()[0]


class BackendClient:
    """Reads profiles, referral counts and chat memories.

    Every public method returns :class:`Success` or :class:`Unavailable`
    and never raises for transport or HTTP errors.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        access_token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = settings or get_settings()
        if not settings.supabase_url:
            raise RuntimeError("SUPABASE_URL is not configured.")

        self._settings = settings
        headers = {"apikey": settings.supabase_anon_key}
        bearer = access_token or settings.supabase_anon_key
        if bearer:
            headers["Authorization"] = f"Bearer {bearer}"
        self._client = httpx.AsyncClient(
            base_url=settings.supabase_url.rstrip("/"),
            timeout=settings.request_timeout,
            headers=headers,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""

        await self._client.aclose()

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, str] | None = None,
        json_body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        try:
            response = await self._client.request(
                method,
                endpoint,
                params=params,
                json=json_body,
                headers=headers,
            )
            response.raise_for_status()
            return response
        except httpx.TimeoutException as exc:
            raise BackendRequestError(f"Backend timed out on {endpoint}.") from exc
        except httpx.HTTPStatusError as exc:
            raise BackendRequestError(
                f"Backend returned {exc.response.status_code} for {endpoint}: {exc.response.text}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise BackendRequestError(f"Backend request to {endpoint} failed: {exc}") from exc

    async def _guarded(self, operation: str, call) -> Result:
        try:
            value = await call()
        except (BackendRequestError, ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.warning("Backend %s unavailable: %s", operation, exc)
            backend_requests_total.labels(operation=operation, outcome="unavailable").inc()
            return Unavailable(str(exc))
        backend_requests_total.labels(operation=operation, outcome="success").inc()
        return Success(value)

    async def get_user(self, access_token: str) -> Result:
        """Return the authenticated user payload for ``access_token``."""

        async def _call() -> dict[str, Any]:
            response = await self._request(
                "GET",
                "/auth/v1/user",
                headers={"Authorization": f"Bearer {access_token}"},
            )
            return response.json()

        return await self._guarded("get_user", _call)

    async def fetch_profile(self, user_id: str) -> Result:
        """``Success(Profile)``, ``Success(None)`` when no row exists, or ``Unavailable``."""

        async def _call() -> Profile | None:
            response = await self._request(
                "GET",
                "/rest/v1/profiles",
                params={"id": f"eq.{user_id}", "select": "id,full_name,phone", "limit": "1"},
            )
            rows = response.json()
            if not rows:
                return None
            row = rows[0]
            return Profile(
                id=str(row.get("id") or user_id),
                full_name=row.get("full_name") or None,
                phone=row.get("phone") or None,
            )

        return await self._guarded("fetch_profile", _call)

    async def count_referrals(self, user_id: str) -> Result:
        """Number of ``referrals`` rows where the user is the referrer."""

        async def _call() -> int:
            response = await self._request(
                "GET",
                "/rest/v1/referrals",
                params={"referrer_id": f"eq.{user_id}", "select": "id"},
                headers={"Prefer": "count=exact"},
            )
            content_range = response.headers.get("content-range", "")
            total = content_range.rpartition("/")[2]
            if total.isdigit():
                return int(total)
            return len(response.json())

        return await self._guarded("count_referrals", _call)

    async def load_memory(self, user_id: str) -> Result:
        """Saved chat transcript for the user, or an empty list."""

        async def _call() -> list[dict[str, str]]:
            response = await self._request(
                "GET",
                "/rest/v1/zola_memories",
                params={"user_id": f"eq.{user_id}", "select": "messages", "limit": "1"},
            )
            rows = response.json()
            if not rows:
                return []
            messages = rows[0].get("messages") or []
            return [
                {"role": str(item.get("role")), "text": str(item.get("text", ""))}
                for item in messages
                if isinstance(item, dict) and item.get("role") in ("user", "bot")
            ]

        return await self._guarded("load_memory", _call)

    async def save_memory(self, user_id: str, messages: Sequence[Mapping[str, str]]) -> Result:
        """Upsert the chat transcript for the user."""

        async def _call() -> bool:
            await self._request(
                "POST",
                "/rest/v1/zola_memories",
                params={"on_conflict": "user_id"},
                json_body={"user_id": user_id, "messages": [dict(item) for item in messages]},
                headers={"Prefer": "resolution=merge-duplicates,return=minimal"},
            )
            return True

        return await self._guarded("save_memory", _call)

    async def ping(self) -> bool:
        """Return ``True`` if the auth health endpoint answers."""

        try:
            await self._request("GET", "/auth/v1/health")
        except BackendRequestError:
            return False
        return True


async def check_backend(settings: Settings | None = None) -> tuple[bool, str]:
    """Probe the backend and return ``(reachable, message)``."""

    try:
        client = BackendClient(settings)
    except RuntimeError as exc:
        return False, str(exc)
    try:
        reachable = await client.ping()
    finally:
        await client.close()
    if reachable:
        return True, "Backend is reachable."
    return False, "Backend responded with non-success status."
