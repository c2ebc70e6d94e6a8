from __future__ import annotations

from typing import Any

import httpx


class DummyAsyncClient:
    """Minimal async client stub replaying queued responses or errors."""

    def __init__(self, *outcomes: httpx.Response | Exception):
        self._outcomes = list(outcomes)
        self.calls: list[dict[str, Any]] = []

    async def __aenter__(self) -> DummyAsyncClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        return None

    def _next(self) -> httpx.Response:
        outcome = self._outcomes.pop(0) if len(self._outcomes) > 1 else self._outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def post(self, url: str, *, json: dict[str, Any], headers: dict[str, str] | None = None):
        self.calls.append({"method": "POST", "url": url, "json": json, "headers": headers or {}})
        return self._next()

    async def get(self, url: str):
        self.calls.append({"method": "GET", "url": url})
        return self._next()


def completion_response(content: Any) -> httpx.Response:
    return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": content}}]})
