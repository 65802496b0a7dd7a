"""Error taxonomy for PopShops calls and graph lookups."""

from __future__ import annotations


class PsApiError(Exception):
    pass


class InvalidCallKind(PsApiError):
    def __init__(self, call_kind: str) -> None:
        super().__init__(f'Invalid call kind "{call_kind}"; expected one of products, merchants, deals')
        self.call_kind = call_kind


class DuplicateCall(PsApiError):
    def __init__(self) -> None:
        super().__init__("PsApiCall objects are one-shot; the API was already called")


class UpstreamStatusError(PsApiError):
    def __init__(self, status: object, message: object = None) -> None:
        super().__init__(f"API reported unexpected status: {status}; Message: {message}")
        self.status = status
        self.message = message


class TransportError(PsApiError):
    """Request could not be sent, failed with an HTTP error, or returned undecodable JSON."""


class UnknownResourceKind(PsApiError, KeyError):
    def __init__(self, kind: str) -> None:
        super().__init__(f"Unknown resource kind: {kind!r}")
        self.kind = kind

    def __str__(self) -> str:
        return str(self.args[0])


class UnknownRelation(PsApiError, KeyError):
    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind} has no relation named {name!r}")
        self.kind = kind
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])
