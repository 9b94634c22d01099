"""File upload, listing and retrieval calls."""

from __future__ import annotations

import io
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Union

from .formdata import FormBuilder
from .request_builder import ApiCall


class PurposeType(str, Enum):
    """Purpose of an uploaded file."""

    FINE_TUNE = "fine-tune"
    FINE_TUNE_RESULTS = "fine-tune-results"
    ASSISTANTS = "assistants"
    ASSISTANTS_OUTPUT = "assistants_output"
    BATCH = "batch"


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
class FileRequest:
    """Upload of a local file given by path."""

    file_name: str = ""
    file_path: str = ""
    purpose: Union[PurposeType, str] = ""


@dataclass
class FileBytesRequest:
    """Upload of in-memory bytes under a name."""

    name: str = ""
    data: bytes = b""
    purpose: Union[PurposeType, str] = ""


@dataclass
class File:
    """A file stored by the service."""

    bytes: int = 0
    created_at: int = 0
    id: str = ""
    filename: str = ""
    object: str = ""
    status: str = ""
    purpose: str = ""
    status_details: str = ""

    @classmethod
    def from_dict(cls, data: Union[dict, str, Any]) -> "File":
        raw = _load(data)
        return cls(
            bytes=raw.get("bytes") or 0,
            created_at=raw.get("created_at") or 0,
            id=raw.get("id") or "",
            filename=raw.get("filename") or "",
            object=raw.get("object") or "",
            status=raw.get("status") or "",
            purpose=raw.get("purpose") or "",
            status_details=raw.get("status_details") or "",
        )


@dataclass
class FilesList:
    """Files that belong to the user or organization."""

    files: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Union[dict, str, Any]) -> "FilesList":
        raw = _load(data)
        return cls(files=[File.from_dict(item) for item in raw.get("data") or []])


def _factory(form_builder_factory: Optional[Callable[[Any], Any]]) -> Callable[[Any], Any]:
    return form_builder_factory if form_builder_factory is not None else FormBuilder


def create_file_bytes_call(
    request: FileBytesRequest,
    form_builder_factory: Optional[Callable[[Any], Any]] = None,
) -> ApiCall:
    """Describe an upload of bytes; form-building errors propagate."""
    body = io.BytesIO()
    builder = _factory(form_builder_factory)(body)
    builder.write_field("purpose", _text(request.purpose))
    builder.create_form_file_reader("file", io.BytesIO(request.data), request.name)
    builder.close()
    return ApiCall(
        method="POST",
        path="/files",
        body=body.getvalue(),
        content_type=builder.content_type(),
    )


def create_file_call(
    request: FileRequest,
    form_builder_factory: Optional[Callable[[Any], Any]] = None,
) -> ApiCall:
    """Describe an upload of the local file at request.file_path."""
    body = io.BytesIO()
    builder = _factory(form_builder_factory)(body)
    builder.write_field("purpose", _text(request.purpose))
    with open(request.file_path, "rb") as handle:
        builder.create_form_file("file", handle)
    builder.close()
    return ApiCall(
        method="POST",
        path="/files",
        body=body.getvalue(),
        content_type=builder.content_type(),
    )


def delete_file_call(file_id: str) -> ApiCall:
    return ApiCall(method="DELETE", path="/files/" + file_id)


def list_files_call() -> ApiCall:
    return ApiCall(method="GET", path="/files")


def get_file_call(file_id: str) -> ApiCall:
    return ApiCall(method="GET", path=f"/files/{file_id}")


def get_file_content_call(file_id: str) -> ApiCall:
    """Describe a download of a file's raw content."""
    return ApiCall(method="GET", path=f"/files/{file_id}/content", raw_response=True)