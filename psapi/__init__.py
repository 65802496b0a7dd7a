"""Object-graph client for the PopShops v3 products, merchants and deals APIs."""

import logging

from psapi.call import CallResult, PsApiCall
from psapi.errors import (
    DuplicateCall,
    InvalidCallKind,
    PsApiError,
    TransportError,
    UnknownRelation,
    UnknownResourceKind,
    UpstreamStatusError,
)
from psapi.graph import AttributeNotFound, DummyResource, GraphStore, Resource

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AttributeNotFound",
    "CallResult",
    "DummyResource",
    "DuplicateCall",
    "GraphStore",
    "InvalidCallKind",
    "PsApiCall",
    "PsApiError",
    "Resource",
    "TransportError",
    "UnknownRelation",
    "UnknownResourceKind",
    "UpstreamStatusError",
]
