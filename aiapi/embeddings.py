"""Embedding requests, responses and vector helpers."""

from __future__ import annotations

import base64
import json
import struct
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from .request_builder import ApiCall

_FLOAT32 = struct.Struct("<f")


class EmbeddingModel(str, Enum):
    """Models that produce embedding vectors."""

    # Retired models, kept for existing callers.
    ADA_SIMILARITY = "text-similarity-ada-001"
    BABBAGE_SIMILARITY = "text-similarity-babbage-001"
    CURIE_SIMILARITY = "text-similarity-curie-001"
    DAVINCI_SIMILARITY = "text-similarity-davinci-001"
    ADA_SEARCH_DOCUMENT = "text-search-ada-doc-001"
    ADA_SEARCH_QUERY = "text-search-ada-query-001"
    BABBAGE_SEARCH_DOCUMENT = "text-search-babbage-doc-001"
    BABBAGE_SEARCH_QUERY = "text-search-babbage-query-001"
    CURIE_SEARCH_DOCUMENT = "text-search-curie-doc-001"
    CURIE_SEARCH_QUERY = "text-search-curie-query-001"
    DAVINCI_SEARCH_DOCUMENT = "text-search-davinci-doc-001"
    DAVINCI_SEARCH_QUERY = "text-search-davinci-query-001"
    ADA_CODE_SEARCH_CODE = "code-search-ada-code-001"
    ADA_CODE_SEARCH_TEXT = "code-search-ada-text-001"
    BABBAGE_CODE_SEARCH_CODE = "code-search-babbage-code-001"
    BABBAGE_CODE_SEARCH_TEXT = "code-search-babbage-text-001"

    ADA_EMBEDDING_V2 = "text-embedding-ada-002"
    SMALL_EMBEDDING_3 = "text-embedding-3-small"
    LARGE_EMBEDDING_3 = "text-embedding-3-large"


class EmbeddingEncodingFormat(str, Enum):
    """Format of the returned embedding data; the service defaults to float."""

    FLOAT = "float"
    BASE64 = "base64"


class VectorLengthMismatchError(ValueError):
    """Two vectors of different lengths were combined."""

    def __init__(self, message: str = "vector length mismatch") -> None:
        super().__init__(message)


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _load(data: Union[dict, str, bytes, bytearray]) -> dict:
    if isinstance(data, (str, bytes, bytearray)):
        data = json.loads(data)
    if not isinstance(data, dict):
        raise ValueError("response body is not an object")
    return data


@dataclass
class Embedding:
    """One embedding vector."""

    object: str = ""
    embedding: list = field(default_factory=list)
    index: int = 0

    def dot_product(self, other: "Embedding") -> float:
        """Dot product with another embedding of the same length."""
        if len(self.embedding) != len(other.embedding):
            raise VectorLengthMismatchError()
        return sum(a * b for a, b in zip(self.embedding, other.embedding))

    @classmethod
    def _from_dict(cls, data: dict) -> "Embedding":
        return cls(
            object=data.get("object") or "",
            embedding=[float(v) for v in data.get("embedding") or []],
            index=data.get("index") or 0,
        )


@dataclass
class EmbeddingResponse:
    """Result of a create-embeddings request."""

    object: str = ""
    data: list = field(default_factory=list)
    model: str = ""
    usage: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "EmbeddingResponse":
        raw = _load(data)
        return cls(
            object=raw.get("object") or "",
            data=[Embedding._from_dict(item) for item in raw.get("data") or []],
            model=raw.get("model") or "",
            usage=dict(raw.get("usage") or {}),
        )


@dataclass
class Base64Embedding:
    """An embedding whose vector is base64-encoded little-endian float32."""

    object: str = ""
    embedding: str = ""
    index: int = 0

    def decode(self) -> list:
        """Decode the vector; raise ValueError on malformed base64."""
        raw = base64.b64decode(self.embedding, validate=True)
        usable = len(raw) - len(raw) % _FLOAT32.size
        return [value for (value,) in _FLOAT32.iter_unpack(raw[:usable])]


@dataclass
class EmbeddingResponseBase64:
    """Result of a create-embeddings request in base64 format."""

    object: str = ""
    data: list = field(default_factory=list)
    model: str = ""
    usage: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "EmbeddingResponseBase64":
        raw = _load(data)
        return cls(
            object=raw.get("object") or "",
            data=[
                Base64Embedding(
                    object=item.get("object") or "",
                    embedding=item.get("embedding") or "",
                    index=item.get("index") or 0,
                )
                for item in raw.get("data") or []
            ],
            model=raw.get("model") or "",
            usage=dict(raw.get("usage") or {}),
        )

    def to_embedding_response(self) -> EmbeddingResponse:
        """Decode every vector into a plain EmbeddingResponse."""
        data = [
            Embedding(object=item.object, embedding=item.decode(), index=item.index)
            for item in self.data
        ]
        return EmbeddingResponse(
            object=self.object, data=data, model=self.model, usage=dict(self.usage)
        )


@dataclass
class EmbeddingRequest:
    """Create-embeddings request with any kind of input."""

    input: Any = None
    model: Union[EmbeddingModel, str] = ""
    user: str = ""
    encoding_format: Union[EmbeddingEncodingFormat, str] = ""
    dimensions: int = 0

    def convert(self) -> "EmbeddingRequest":
        return self

    def to_dict(self) -> dict:
        out: dict = {"input": self.input, "model": _text(self.model), "user": self.user}
        if _text(self.encoding_format):
            out["encoding_format"] = _text(self.encoding_format)
        if self.dimensions:
            out["dimensions"] = self.dimensions
        return out


class _ConvertibleRequest:
    def convert(self) -> EmbeddingRequest:  # pragma: no cover - overridden
        raise NotImplementedError

    def to_dict(self) -> dict:
        return self.convert().to_dict()


@dataclass
class EmbeddingRequestStrings(_ConvertibleRequest):
    """Create-embeddings request for a list of strings."""

    input: list = field(default_factory=list)
    model: Union[EmbeddingModel, str] = ""
    user: str = ""
    encoding_format: Union[EmbeddingEncodingFormat, str] = ""
    dimensions: int = 0

    def convert(self) -> EmbeddingRequest:
        return EmbeddingRequest(
            input=self.input,
            model=self.model,
            user=self.user,
            encoding_format=self.encoding_format,
            dimensions=self.dimensions,
        )


@dataclass
class EmbeddingRequestTokens(_ConvertibleRequest):
    """Create-embeddings request for lists of token ids."""

    input: list = field(default_factory=list)
    model: Union[EmbeddingModel, str] = ""
    user: str = ""
    encoding_format: Union[EmbeddingEncodingFormat, str] = ""
    dimensions: int = 0

    def convert(self) -> EmbeddingRequest:
        return EmbeddingRequest(
            input=self.input,
            model=self.model,
            user=self.user,
            encoding_format=self.encoding_format,
            dimensions=self.dimensions,
        )


def create_embeddings_call(request: Any) -> ApiCall:
    """Describe the call that creates embeddings for a request."""
    base = request.convert()
    return ApiCall(method="POST", path="/embeddings", model=_text(base.model), body=base)


def decode_embeddings_response(request: Any, data: Union[dict, str, bytes]) -> EmbeddingResponse:
    """Decode a response body according to the request's encoding format."""
    base = request.convert()
    if _text(base.encoding_format) != EmbeddingEncodingFormat.BASE64.value:
        return EmbeddingResponse.from_dict(data)
    return EmbeddingResponseBase64.from_dict(data).to_embedding_response()