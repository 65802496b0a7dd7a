"""FastAPI demo exposing a PopShops call as HTML and JSON."""

from __future__ import annotations

import logging
from typing import Any, Iterator

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from psapi.call import PsApiCall
from psapi.errors import InvalidCallKind, UnknownResourceKind
from psapi.ingest.popshops import PopShopsClient
from psapi.logs import enable_logging
from psapi.render import render_catalog
from psapi.settings import Settings, load_settings

logger = logging.getLogger(__name__)

app = FastAPI(title="PopShops Resource Graph")


class ResourceModel(BaseModel):
    kind: str
    id: str | None
    attributes: dict[str, Any]
    relations: list[str]


class CallResponse(BaseModel):
    call_kind: str
    counts: dict[str, int]
    next_page: str
    prev_page: str
    resources: list[ResourceModel]


def get_settings() -> Settings:
    load_dotenv()
    settings = load_settings()
    if settings.logging:
        enable_logging()
    return settings


def get_client(settings: Settings = Depends(get_settings)) -> Iterator[PopShopsClient]:
    client = PopShopsClient(settings=settings)
    try:
        yield client
    finally:
        client.close()


def _new_call(request: Request, settings: Settings, client: PopShopsClient) -> PsApiCall:
    try:
        return PsApiCall.from_settings(settings, url_mode=True, query=request.query_params, client=client)
    except ValueError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


def _run(call: PsApiCall, call_kind: str) -> None:
    result = call.get(call_kind)
    if result:
        return
    if isinstance(result.error, InvalidCallKind):
        raise HTTPException(status_code=400, detail=str(result.error))
    raise HTTPException(status_code=502, detail=str(result.error))


@app.get("/catalog", response_class=HTMLResponse)
def catalog(
    request: Request,
    settings: Settings = Depends(get_settings),
    client: PopShopsClient = Depends(get_client),
) -> HTMLResponse:
    call = _new_call(request, settings, client)
    _run(call, "products")
    return HTMLResponse(render_catalog(call))


@app.get("/api/{call_kind}", response_model=CallResponse)
def call_api(
    call_kind: str,
    request: Request,
    kind: str | None = Query(None, description="Resource kind to list; defaults to the call kind"),
    sort_by: str = "relevance",
    descending: bool = True,
    settings: Settings = Depends(get_settings),
    client: PopShopsClient = Depends(get_client),
) -> CallResponse:
    call = _new_call(request, settings, client)
    _run(call, call_kind)
    try:
        resources = call.resource(kind or call_kind, sort_by=sort_by, descending=descending)
    except UnknownResourceKind as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return CallResponse(
        call_kind=call_kind,
        counts=call.store.counts(),
        next_page=call.next_page(),
        prev_page=call.prev_page(),
        resources=[
            ResourceModel(
                kind=resource.kind,
                id=resource.id_key,
                attributes=resource.attributes,
                relations=resource.relations(),
            )
            for resource in resources
        ],
    )
