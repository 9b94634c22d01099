"""Fine-tuning jobs: requests, responses and calls."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional, Union
from urllib.parse import urlencode

from .fine_tunes import FineTuneEvent
from .request_builder import ApiCall


def _load(data: Union[dict, str, bytes, bytearray]) -> dict:
    if isinstance(data, (str, bytes, bytearray)):
        data = json.loads(data)
    if not isinstance(data, dict):
        raise ValueError("response body is not an object")
    return data


@dataclass
class Hyperparameters:
    """Job hyperparameters; each is a number or "auto"."""

    epochs: Any = None
    learning_rate_multiplier: Any = None
    batch_size: Any = None

    def to_dict(self) -> dict:
        pairs = (
            ("n_epochs", self.epochs),
            ("learning_rate_multiplier", self.learning_rate_multiplier),
            ("batch_size", self.batch_size),
        )
        return {key: value for key, value in pairs if value is not None}

    @classmethod
    def _from_dict(cls, raw: dict) -> "Hyperparameters":
        return cls(
            epochs=raw.get("n_epochs"),
            learning_rate_multiplier=raw.get("learning_rate_multiplier"),
            batch_size=raw.get("batch_size"),
        )


@dataclass
class FineTuningJob:
    """A fine-tuning job."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    finished_at: int = 0
    model: str = ""
    fine_tuned_model: str = ""
    organization_id: str = ""
    status: str = ""
    hyperparameters: Hyperparameters = field(default_factory=Hyperparameters)
    training_file: str = ""
    validation_file: str = ""
    result_files: list = field(default_factory=list)
    trained_tokens: int = 0

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "FineTuningJob":
        raw = _load(data)
        return cls(
            id=raw.get("id") or "",
            object=raw.get("object") or "",
            created_at=raw.get("created_at") or 0,
            finished_at=raw.get("finished_at") or 0,
            model=raw.get("model") or "",
            fine_tuned_model=raw.get("fine_tuned_model") or "",
            organization_id=raw.get("organization_id") or "",
            status=raw.get("status") or "",
            hyperparameters=Hyperparameters._from_dict(raw.get("hyperparameters") or {}),
            training_file=raw.get("training_file") or "",
            validation_file=raw.get("validation_file") or "",
            result_files=list(raw.get("result_files") or []),
            trained_tokens=raw.get("trained_tokens") or 0,
        )


@dataclass
class FineTuningJobRequest:
    """Request to create a fine-tuning job."""

    training_file: str = ""
    validation_file: str = ""
    model: str = ""
    hyperparameters: Optional[Hyperparameters] = None
    suffix: str = ""

    def to_dict(self) -> dict:
        out: dict = {"training_file": self.training_file}
        if self.validation_file:
            out["validation_file"] = self.validation_file
        if self.model:
            out["model"] = self.model
        if self.hyperparameters is not None:
            out["hyperparameters"] = self.hyperparameters.to_dict()
        if self.suffix:
            out["suffix"] = self.suffix
        return out


@dataclass
class FineTuningJobEvent:
    """An event of a fine-tuning job."""

    object: str = ""
    id: str = ""
    created_at: int = 0
    level: str = ""
    message: str = ""
    data: Any = None
    type: str = ""


@dataclass
class FineTuningJobEventList:
    """A page of events of a fine-tuning job."""

    object: str = ""
    data: list = field(default_factory=list)
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "FineTuningJobEventList":
        raw = _load(data)
        return cls(
            object=raw.get("object") or "",
            data=[FineTuneEvent._from_dict(item) for item in raw.get("data") or []],
            has_more=bool(raw.get("has_more", False)),
        )


def create_fine_tuning_job_call(request: FineTuningJobRequest) -> ApiCall:
    return ApiCall(method="POST", path="/fine_tuning/jobs", body=request)


def cancel_fine_tuning_job_call(job_id: str) -> ApiCall:
    return ApiCall(method="POST", path="/fine_tuning/jobs/" + job_id + "/cancel")


def retrieve_fine_tuning_job_call(job_id: str) -> ApiCall:
    return ApiCall(method="GET", path=f"/fine_tuning/jobs/{job_id}")


def list_fine_tuning_job_events_call(
    job_id: str, after: Optional[str] = None, limit: Optional[int] = None
) -> ApiCall:
    """Describe a listing of job events, optionally paged by after and limit."""
    params = {}
    if after is not None:
        params["after"] = after
    if limit is not None:
        params["limit"] = str(limit)
    query = "?" + urlencode(sorted(params.items())) if params else ""
    return ApiCall(method="GET", path="/fine_tuning/jobs/" + job_id + "/events" + query)