"""Legacy fine-tune jobs: requests, responses and calls.

The service has retired this endpoint in favour of fine-tuning jobs.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Union

from .files import File
from .request_builder import ApiCall


def _load(data: Union[dict, str, bytes, bytearray]) -> dict:
    if isinstance(data, (str, bytes, bytearray)):
        data = json.loads(data)
    if not isinstance(data, dict):
        raise ValueError("response body is not an object")
    return data


@dataclass
class FineTuneRequest:
    """Request to start a fine-tune."""

    training_file: str = ""
    validation_file: str = ""
    model: str = ""
    epochs: int = 0
    batch_size: int = 0
    learning_rate_multiplier: float = 0.0
    prompt_loss_rate: float = 0.0
    compute_classification_metrics: bool = False
    classification_classes: int = 0
    classification_positive_class: str = ""
    classification_betas: list = field(default_factory=list)
    suffix: str = ""

    def to_dict(self) -> dict:
        out: dict = {"training_file": self.training_file}
        optional = (
            ("validation_file", self.validation_file),
            ("model", self.model),
            ("n_epochs", self.epochs),
            ("batch_size", self.batch_size),
            ("learning_rate_multiplier", self.learning_rate_multiplier),
            ("prompt_loss_rate", self.prompt_loss_rate),
            ("compute_classification_metrics", self.compute_classification_metrics),
            ("classification_n_classes", self.classification_classes),
            ("classification_positive_class", self.classification_positive_class),
            ("classification_betas", list(self.classification_betas)),
            ("suffix", self.suffix),
        )
        out.update((key, value) for key, value in optional if value)
        return out


@dataclass
class FineTuneEvent:
    """An event in the life of a fine-tune."""

    object: str = ""
    created_at: int = 0
    level: str = ""
    message: str = ""

    @classmethod
    def _from_dict(cls, raw: dict) -> "FineTuneEvent":
        return cls(
            object=raw.get("object") or "",
            created_at=raw.get("created_at") or 0,
            level=raw.get("level") or "",
            message=raw.get("message") or "",
        )


@dataclass
class FineTuneHyperParams:
    """Hyperparameters a fine-tune ran with."""

    batch_size: int = 0
    learning_rate_multiplier: float = 0.0
    epochs: int = 0
    prompt_loss_weight: float = 0.0

    @classmethod
    def _from_dict(cls, raw: dict) -> "FineTuneHyperParams":
        return cls(
            batch_size=raw.get("batch_size") or 0,
            learning_rate_multiplier=float(raw.get("learning_rate_multiplier") or 0.0),
            epochs=raw.get("n_epochs") or 0,
            prompt_loss_weight=float(raw.get("prompt_loss_weight") or 0.0),
        )


@dataclass
class FineTune:
    """A fine-tune job."""

    id: str = ""
    object: str = ""
    model: str = ""
    created_at: int = 0
    events: list = field(default_factory=list)
    fine_tuned_model: str = ""
    hyper_params: FineTuneHyperParams = field(default_factory=FineTuneHyperParams)
    organization_id: str = ""
    result_files: list = field(default_factory=list)
    status: str = ""
    validation_files: list = field(default_factory=list)
    training_files: list = field(default_factory=list)
    updated_at: int = 0

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "FineTune":
        raw = _load(data)
        return cls(
            id=raw.get("id") or "",
            object=raw.get("object") or "",
            model=raw.get("model") or "",
            created_at=raw.get("created_at") or 0,
            events=[FineTuneEvent._from_dict(e) for e in raw.get("events") or []],
            fine_tuned_model=raw.get("fine_tuned_model") or "",
            hyper_params=FineTuneHyperParams._from_dict(raw.get("hyperparams") or {}),
            organization_id=raw.get("organization_id") or "",
            result_files=[File.from_dict(f) for f in raw.get("result_files") or []],
            status=raw.get("status") or "",
            validation_files=[File.from_dict(f) for f in raw.get("validation_files") or []],
            training_files=[File.from_dict(f) for f in raw.get("training_files") or []],
            updated_at=raw.get("updated_at") or 0,
        )


@dataclass
class FineTuneList:
    """A list of fine-tunes."""

    object: str = ""
    data: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "FineTuneList":
        raw = _load(data)
        return cls(
            object=raw.get("object") or "",
            data=[FineTune.from_dict(item) for item in raw.get("data") or []],
        )


@dataclass
class FineTuneEventList:
    """Events of one fine-tune."""

    object: str = ""
    data: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "FineTuneEventList":
        raw = _load(data)
        return cls(
            object=raw.get("object") or "",
            data=[FineTuneEvent._from_dict(item) for item in raw.get("data") or []],
        )


@dataclass
class FineTuneDeleteResponse:
    """Deletion status of a fine-tune."""

    id: str = ""
    object: str = ""
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "FineTuneDeleteResponse":
        raw = _load(data)
        return cls(
            id=raw.get("id") or "",
            object=raw.get("object") or "",
            deleted=bool(raw.get("deleted", False)),
        )


def create_fine_tune_call(request: FineTuneRequest) -> ApiCall:
    return ApiCall(method="POST", path="/fine-tunes", body=request)


def cancel_fine_tune_call(fine_tune_id: str) -> ApiCall:
    return ApiCall(method="POST", path="/fine-tunes/" + fine_tune_id + "/cancel")


def list_fine_tunes_call() -> ApiCall:
    return ApiCall(method="GET", path="/fine-tunes")


def get_fine_tune_call(fine_tune_id: str) -> ApiCall:
    return ApiCall(method="GET", path=f"/fine-tunes/{fine_tune_id}")


def delete_fine_tune_call(fine_tune_id: str) -> ApiCall:
    return ApiCall(method="DELETE", path="/fine-tunes/" + fine_tune_id)


def list_fine_tune_events_call(fine_tune_id: str) -> ApiCall:
    return ApiCall(method="GET", path="/fine-tunes/" + fine_tune_id + "/events")