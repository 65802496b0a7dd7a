"""PopShops v3 HTTP transport."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from psapi.settings import Settings, load_settings
from psapi.utils.urls import endpoint_url

logger = logging.getLogger(__name__)


class PopShopsClient:
    def __init__(
        self,
        *,
        settings: Settings | None = None,
        base_url: str | None = None,
        session: httpx.Client | None = None,
    ) -> None:
        settings = settings or load_settings()
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self._session = session or httpx.Client(
            timeout=settings.timeout, headers={"User-Agent": settings.user_agent}
        )

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> PopShopsClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def fetch(self, call_kind: str, params: Mapping[str, Any]) -> dict[str, Any]:
        """GET ``{base_url}/{call_kind}.json`` once and return the decoded document."""
        url = endpoint_url(self.base_url, call_kind)
        logger.info("Sending request to %s", url)
        response = self._session.get(url, params={k: v for k, v in params.items() if v is not None})
        response.raise_for_status()
        logger.info("JSON file retrieved")
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object from {url}, got {type(data).__name__}")
        return data
