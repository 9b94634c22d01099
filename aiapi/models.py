"""Model listing, retrieval and deletion."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Union

from .request_builder import ApiCall


def _load(data: Union[dict, str, bytes, bytearray]) -> dict:
    if isinstance(data, (str, bytes, bytearray)):
        data = json.loads(data)
    if not isinstance(data, dict):
        raise ValueError("response body is not an object")
    return data


@dataclass
class Permission:
    """A permission attached to a model."""

    created_at: int = 0
    id: str = ""
    object: str = ""
    allow_create_engine: bool = False
    allow_sampling: bool = False
    allow_logprobs: bool = False
    allow_search_indices: bool = False
    allow_view: bool = False
    allow_fine_tuning: bool = False
    organization: str = ""
    group: Any = None
    is_blocking: bool = False

    @classmethod
    def _from_dict(cls, raw: dict) -> "Permission":
        return cls(
            created_at=raw.get("created") or 0,
            id=raw.get("id") or "",
            object=raw.get("object") or "",
            allow_create_engine=bool(raw.get("allow_create_engine", False)),
            allow_sampling=bool(raw.get("allow_sampling", False)),
            allow_logprobs=bool(raw.get("allow_logprobs", False)),
            allow_search_indices=bool(raw.get("allow_search_indices", False)),
            allow_view=bool(raw.get("allow_view", False)),
            allow_fine_tuning=bool(raw.get("allow_fine_tuning", False)),
            organization=raw.get("organization") or "",
            group=raw.get("group"),
            is_blocking=bool(raw.get("is_blocking", False)),
        )


@dataclass
class Model:
    """A model offered by the service."""

    created_at: int = 0
    id: str = ""
    object: str = ""
    owned_by: str = ""
    permission: list = field(default_factory=list)
    root: str = ""
    parent: str = ""

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "Model":
        raw = _load(data)
        return cls(
            created_at=raw.get("created") or 0,
            id=raw.get("id") or "",
            object=raw.get("object") or "",
            owned_by=raw.get("owned_by") or "",
            permission=[Permission._from_dict(p) for p in raw.get("permission") or []],
            root=raw.get("root") or "",
            parent=raw.get("parent") or "",
        )


@dataclass
class ModelsList:
    """Models available to the user or organization."""

    models: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "ModelsList":
        raw = _load(data)
        return cls(models=[Model.from_dict(item) for item in raw.get("data") or []])


@dataclass
class FineTuneModelDeleteResponse:
    """Deletion status of a fine-tuned model."""

    id: str = ""
    object: str = ""
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "FineTuneModelDeleteResponse":
        raw = _load(data)
        return cls(
            id=raw.get("id") or "",
            object=raw.get("object") or "",
            deleted=bool(raw.get("deleted", False)),
        )


def list_models_call() -> ApiCall:
    return ApiCall(method="GET", path="/models")


def get_model_call(model_id: str) -> ApiCall:
    return ApiCall(method="GET", path=f"/models/{model_id}")


def delete_fine_tune_model_call(model_id: str) -> ApiCall:
    return ApiCall(method="DELETE", path="/models/" + model_id)