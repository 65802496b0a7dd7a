"""Ingestion helpers."""

from __future__ import annotations

import json
import pathlib

from psapi.graph.store import GraphStore
from psapi.ingest.models import CALL_KINDS
from psapi.ingest.pipeline import ingest_document


def load_document(path: pathlib.Path | str, call_kind: str = "products") -> GraphStore:
    """Build a graph from a saved API response on disk."""
    data = json.loads(pathlib.Path(path).read_text())
    return ingest_document(data, call_kind)


__all__ = ["CALL_KINDS", "ingest_document", "load_document"]
