"""Engine listing and retrieval."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Union

from .request_builder import ApiCall


def _load(data: Union[dict, str, bytes, bytearray]) -> dict:
    if isinstance(data, (str, bytes, bytearray)):
        data = json.loads(data)
    if not isinstance(data, dict):
        raise ValueError("response body is not an object")
    return data


@dataclass
class Engine:
    """An engine offered by the service."""

    id: str = ""
    object: str = ""
    owner: str = ""
    ready: bool = False

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "Engine":
        raw = _load(data)
        return cls(
            id=raw.get("id") or "",
            object=raw.get("object") or "",
            owner=raw.get("owner") or "",
            ready=bool(raw.get("ready", False)),
        )


@dataclass
class EnginesList:
    """A list of engines."""

    engines: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "EnginesList":
        raw = _load(data)
        return cls(engines=[Engine.from_dict(item) for item in raw.get("data") or []])


def list_engines_call() -> ApiCall:
    return ApiCall(method="GET", path="/engines")


def get_engine_call(engine_id: str) -> ApiCall:
    return ApiCall(method="GET", path=f"/engines/{engine_id}")