"""Moderation requests and responses."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from typing import Union

from .request_builder import ApiCall

MODERATION_TEXT_STABLE = "text-moderation-stable"
MODERATION_TEXT_LATEST = "text-moderation-latest"
# Retired; use the stable or latest model instead.
MODERATION_TEXT_001 = "text-moderation-001"

_VALID_MODELS = frozenset({MODERATION_TEXT_STABLE, MODERATION_TEXT_LATEST})


class InvalidModerationModelError(ValueError):
    """The model cannot be used for moderation."""

    def __init__(
        self,
        message: str = (
            "this model is not supported with moderation, please use "
            "text-moderation-stable or text-moderation-latest instead"
        ),
    ) -> None:
        super().__init__(message)


@dataclass
class ModerationRequest:
    """Input to check, and optionally the model to check it with."""

    input: str = ""
    model: str = ""

    def to_dict(self) -> dict:
        out: dict = {}
        if self.input:
            out["input"] = self.input
        if self.model:
            out["model"] = self.model
        return out


def _json_key(name: str) -> str:
    return name.replace("_threatening", "/threatening").replace(
        "self_harm", "self-harm"
    ).replace("_intent", "/intent").replace("_instructions", "/instructions").replace(
        "_minors", "/minors"
    ).replace("_graphic", "/graphic")


@dataclass
class ResultCategories:
    """Which categories the input was flagged for."""

    hate: bool = False
    hate_threatening: bool = False
    harassment: bool = False
    harassment_threatening: bool = False
    self_harm: bool = False
    self_harm_intent: bool = False
    self_harm_instructions: bool = False
    sexual: bool = False
    sexual_minors: bool = False
    violence: bool = False
    violence_graphic: bool = False

    @classmethod
    def _from_dict(cls, data: dict) -> "ResultCategories":
        return cls(**{f.name: bool(data.get(_json_key(f.name), False)) for f in fields(cls)})


@dataclass
class ResultCategoryScores:
    """Score for each category."""

    hate: float = 0.0
    hate_threatening: float = 0.0
    harassment: float = 0.0
    harassment_threatening: float = 0.0
    self_harm: float = 0.0
    self_harm_intent: float = 0.0
    self_harm_instructions: float = 0.0
    sexual: float = 0.0
    sexual_minors: float = 0.0
    violence: float = 0.0
    violence_graphic: float = 0.0

    @classmethod
    def _from_dict(cls, data: dict) -> "ResultCategoryScores":
        return cls(**{f.name: float(data.get(_json_key(f.name)) or 0.0) for f in fields(cls)})


@dataclass
class Result:
    """One moderation result."""

    categories: ResultCategories = field(default_factory=ResultCategories)
    category_scores: ResultCategoryScores = field(default_factory=ResultCategoryScores)
    flagged: bool = False


@dataclass
class ModerationResponse:
    """Result of a moderation request."""

    id: str = ""
    model: str = ""
    results: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "ModerationResponse":
        raw = json.loads(data) if isinstance(data, (str, bytes, bytearray)) else data
        if not isinstance(raw, dict):
            raise ValueError("response body is not an object")
        return cls(
            id=raw.get("id") or "",
            model=raw.get("model") or "",
            results=[
                Result(
                    categories=ResultCategories._from_dict(item.get("categories") or {}),
                    category_scores=ResultCategoryScores._from_dict(
                        item.get("category_scores") or {}
                    ),
                    flagged=bool(item.get("flagged", False)),
                )
                for item in raw.get("results") or []
            ],
        )


def moderation_call(request: ModerationRequest) -> ApiCall:
    """Describe the moderation call; raise if the model is not a moderation model."""
    if request.model and request.model not in _VALID_MODELS:
        raise InvalidModerationModelError()
    return ApiCall(method="POST", path="/moderations", model=request.model, body=request)