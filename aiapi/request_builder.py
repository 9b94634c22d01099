"""JSON encoding and HTTP request construction."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


def _default(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(value, Enum):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"cannot encode {type(value).__name__}")


class JSONMarshaller:
    """Encodes values as JSON bytes."""

    def marshal(self, value: Any) -> bytes:
        return json.dumps(value, default=_default, separators=(",", ":")).encode()


class JSONUnmarshaler:
    """Decodes JSON bytes."""

    def unmarshal(self, data: Any) -> Any:
        return json.loads(data)


@dataclass
class HttpRequest:
    """A request ready to be sent."""

    method: str
    url: str
    body: Optional[bytes] = None
    headers: dict = field(default_factory=dict)


@dataclass
class ApiCall:
    """Description of one API call: endpoint, model and payload."""

    method: str
    path: str
    model: str = ""
    body: Any = None
    content_type: Optional[str] = None
    headers: dict = field(default_factory=dict)
    raw_response: bool = False


class RequestBuilder:
    """Builds HttpRequest objects, encoding non-binary bodies as JSON."""

    def __init__(self, marshaller: Optional[Any] = None) -> None:
        self.marshaller = marshaller if marshaller is not None else JSONMarshaller()

    def build(self, method: str, url: str, body: Any, header: Optional[dict]) -> HttpRequest:
        payload: Optional[bytes]
        if body is None:
            payload = None
        elif isinstance(body, (bytes, bytearray)):
            payload = bytes(body)
        elif hasattr(body, "read"):
            payload = body.read()
        else:
            payload = self.marshaller.marshal(body)
        return HttpRequest(method=method, url=url, body=payload, headers=dict(header or {}))