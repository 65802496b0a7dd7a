"""One-shot PopShops API call and the resource graph it produces."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx
import pendulum

from psapi.errors import DuplicateCall, InvalidCallKind, PsApiError, TransportError, UpstreamStatusError
from psapi.graph.attributes import AttributeNotFound
from psapi.graph.resources import DummyResource, Resource
from psapi.graph.store import GraphStore
from psapi.ingest.models import CALL_KINDS
from psapi.ingest.pipeline import ingest_document
from psapi.ingest.popshops import PopShopsClient
from psapi.settings import Settings, load_settings
from psapi.utils.dates import now_in_tz
from psapi.utils.urls import current_page, extract_prefixed, page_query, request_url

logger = logging.getLogger(__name__)

SORT_ALIASES = {"price": ("price", "price_min", "current_price")}


@dataclass(slots=True)
class CallResult:
    call_kind: str
    ok: bool
    error: PsApiError | None = None
    url: str | None = None
    status: Any = None
    counts: dict[str, int] = field(default_factory=dict)
    finished_at: pendulum.DateTime | None = None

    def __bool__(self) -> bool:
        return self.ok


class PsApiCall:
    """A single request against the PopShops products, merchants or deals API.

    The instance is one-shot: :meth:`get` performs the request and fills
    :attr:`store`; any later :meth:`get` is rejected. Failures never raise, they
    are logged and reported through the returned :class:`CallResult`, leaving
    the graph empty.
    """

    def __init__(
        self,
        account: str,
        catalog: str,
        *,
        options: Mapping[str, Any] | None = None,
        url_mode: bool = False,
        url_mode_prefix: str | None = None,
        query: Mapping[str, Any] | None = None,
        client: PopShopsClient | None = None,
        settings: Settings | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.options: dict[str, Any] = {"account": account, "catalog": catalog, **(options or {})}
        self.url_mode = url_mode
        self.url_mode_prefix = url_mode_prefix or self.settings.url_mode_prefix
        self.query: dict[str, Any] = dict(query or {})
        self.logger = log or logger
        self.store = GraphStore()
        self.called = False
        self.call_kind: str | None = None
        self.params: dict[str, Any] = {}
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs: Any) -> PsApiCall:
        settings = settings or load_settings()
        if not settings.account or not settings.catalog:
            raise ValueError("PSAPI_ACCOUNT and PSAPI_CATALOG must be configured")
        return cls(settings.account, settings.catalog, settings=settings, **kwargs)

    def get(self, call_kind: str, params: Mapping[str, Any] | None = None) -> CallResult:
        self.logger.info("Setting up to call PopShops %s API...", call_kind)
        if self.called:
            return self._reject(call_kind, DuplicateCall())
        if call_kind not in CALL_KINDS:
            return self._reject(call_kind, InvalidCallKind(call_kind))
        self.called = True
        self.call_kind = call_kind

        self.params = dict(params or {})
        if self.url_mode:
            self.params.update(extract_prefixed(self.query, self.url_mode_prefix))
        self.options.update(self.params)

        client = self._client or PopShopsClient(settings=self.settings)
        url = request_url(client.base_url, call_kind, self.options)
        self.logger.info("Request URL: %s", url)
        try:
            document = client.fetch(call_kind, self.options)
        except (httpx.HTTPError, ValueError) as exc:
            return self._reject(call_kind, TransportError(str(exc)), url=url)
        finally:
            if self._client is None:
                client.close()

        status = document.get("status")
        if str(status) != "200":
            self.logger.info("API reported unexpected status: %s; Message: %s", status, document.get("message"))
            return self._reject(
                call_kind, UpstreamStatusError(status, document.get("message")), url=url, status=status
            )
        self.logger.info("API reported status 200 OK")
        ingest_document(document, call_kind, self.store, log=self.logger)
        return CallResult(
            call_kind=call_kind,
            ok=True,
            url=url,
            status=status,
            counts=self.store.counts(),
            finished_at=now_in_tz(),
        )

    def _reject(self, call_kind: str, error: PsApiError, **fields: Any) -> CallResult:
        self.logger.error("%s. Call aborted.", error)
        return CallResult(call_kind=call_kind, ok=False, error=error, finished_at=now_in_tz(), **fields)

    def resource(self, kind: str, sort_by: str = "relevance", descending: bool = True) -> list[Resource]:
        """Return every resource of ``kind``.

        ``relevance`` keeps the order the API returned, which is already most
        relevant first; ``descending=False`` reverses it. Any other ``sort_by`` is
        an attribute name (``price`` also matches ``price_min`` and
        ``current_price``). Numeric values come first, then non-numeric ones,
        then resources lacking the attribute.
        """
        resources = self.store.collection(kind)
        if sort_by == "relevance":
            return resources if descending else resources[::-1]
        names = SORT_ALIASES.get(sort_by, (sort_by,))
        numeric: list[tuple[float, Resource]] = []
        textual: list[tuple[str, Resource]] = []
        missing: list[Resource] = []
        for resource in resources:
            value = _sort_value(resource, names)
            if value is None:
                missing.append(resource)
            elif isinstance(value, float):
                numeric.append((value, resource))
            else:
                textual.append((value, resource))
        numeric.sort(key=lambda item: item[0], reverse=descending)
        textual.sort(key=lambda item: item[0], reverse=descending)
        return [resource for _, resource in numeric] + [resource for _, resource in textual] + missing

    def resource_by_id(self, kind: str, resource_id: Any) -> Resource | DummyResource:
        return self.store.by_id(kind, resource_id)

    def next_page(self) -> str:
        return page_query(self.params, self.url_mode_prefix, current_page(self.params) + 1)

    def prev_page(self) -> str:
        return page_query(self.params, self.url_mode_prefix, current_page(self.params) - 1)


def _sort_value(resource: Resource, names: tuple[str, ...]) -> float | str | None:
    for name in names:
        value = resource.attr(name)
        if isinstance(value, AttributeNotFound):
            continue
        try:
            return float(value)
        except (TypeError, ValueError):
            return str(value)
    return None
