"""Edits requests and responses."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Optional, Union

from .request_builder import ApiCall


@dataclass
class EditsRequest:
    """Request to edit input according to an instruction."""

    model: Optional[str] = None
    input: str = ""
    instruction: str = ""
    n: int = 0
    temperature: float = 0.0
    top_p: float = 0.0

    def to_dict(self) -> dict:
        out: dict = {}
        if self.model is not None:
            out["model"] = self.model
        for key, value in (
            ("input", self.input),
            ("instruction", self.instruction),
            ("n", self.n),
            ("temperature", self.temperature),
            ("top_p", self.top_p),
        ):
            if value:
                out[key] = value
        return out


@dataclass
class EditsChoice:
    """One possible edit."""

    text: str = ""
    index: int = 0


@dataclass
class EditsResponse:
    """Result of an edits request."""

    object: str = ""
    created: int = 0
    usage: dict = field(default_factory=dict)
    choices: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "EditsResponse":
        raw = json.loads(data) if isinstance(data, (str, bytes, bytearray)) else data
        if not isinstance(raw, dict):
            raise ValueError("response body is not an object")
        return cls(
            object=raw.get("object") or "",
            created=raw.get("created") or 0,
            usage=dict(raw.get("usage") or {}),
            choices=[
                EditsChoice(text=item.get("text") or "", index=item.get("index") or 0)
                for item in raw.get("choices") or []
            ],
        )


def edits_call(request: EditsRequest) -> ApiCall:
    """Describe an edits call. The edits endpoint is retired by the service."""
    return ApiCall(method="POST", path="/edits", model=request.model or "", body=request)