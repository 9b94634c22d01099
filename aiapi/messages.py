"""Thread messages: requests, responses and calls."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional, Union
from urllib.parse import urlencode

from .config import DEFAULT_ASSISTANT_VERSION
from .request_builder import ApiCall

MESSAGES_SUFFIX = "messages"
BETA_HEADER = "OpenAI-Beta"


def _load(data: Union[dict, str, bytes, bytearray]) -> dict:
    if isinstance(data, (str, bytes, bytearray)):
        data = json.loads(data)
    if not isinstance(data, dict):
        raise ValueError("response body is not an object")
    return data


def _beta_headers(assistant_version: str) -> dict:
    return {BETA_HEADER: f"assistants={assistant_version}"}


@dataclass
class MessageText:
    """Text content of a message with its annotations."""

    value: str = ""
    annotations: list = field(default_factory=list)


@dataclass
class ImageFile:
    """Reference to an image file attached to a message."""

    file_id: str = ""


@dataclass
class MessageContent:
    """One piece of message content: text or an image file."""

    type: str = ""
    text: Optional[MessageText] = None
    image_file: Optional[ImageFile] = None

    def to_dict(self) -> dict:
        out: dict = {"type": self.type}
        if self.text is not None:
            out["text"] = {"value": self.text.value, "annotations": list(self.text.annotations)}
        if self.image_file is not None:
            out["image_file"] = {"file_id": self.image_file.file_id}
        return out

    @classmethod
    def _from_dict(cls, raw: dict) -> "MessageContent":
        raw_text = raw.get("text")
        raw_image = raw.get("image_file")
        return cls(
            type=raw.get("type") or "",
            text=(
                MessageText(
                    value=raw_text.get("value") or "",
                    annotations=list(raw_text.get("annotations") or []),
                )
                if isinstance(raw_text, dict)
                else None
            ),
            image_file=(
                ImageFile(file_id=raw_image.get("file_id") or "")
                if isinstance(raw_image, dict)
                else None
            ),
        )


@dataclass
class Message:
    """A message in a thread."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    thread_id: str = ""
    role: str = ""
    content: list = field(default_factory=list)
    file_ids: list = field(default_factory=list)
    assistant_id: Optional[str] = None
    run_id: Optional[str] = None
    metadata: Optional[dict] = None

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "Message":
        raw = _load(data)
        metadata = raw.get("metadata")
        return cls(
            id=raw.get("id") or "",
            object=raw.get("object") or "",
            created_at=raw.get("created_at") or 0,
            thread_id=raw.get("thread_id") or "",
            role=raw.get("role") or "",
            content=[MessageContent._from_dict(c) for c in raw.get("content") or []],
            file_ids=list(raw.get("file_ids") or []),
            assistant_id=raw.get("assistant_id"),
            run_id=raw.get("run_id"),
            metadata=dict(metadata) if isinstance(metadata, dict) else None,
        )


@dataclass
class MessagesList:
    """A page of messages in a thread."""

    messages: list = field(default_factory=list)
    object: str = ""
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "MessagesList":
        raw = _load(data)
        return cls(
            messages=[Message.from_dict(item) for item in raw.get("data") or []],
            object=raw.get("object") or "",
            first_id=raw.get("first_id"),
            last_id=raw.get("last_id"),
            has_more=bool(raw.get("has_more", False)),
        )


@dataclass
class MessageRequest:
    """Request to add a message to a thread."""

    role: str = ""
    content: str = ""
    file_ids: list = field(default_factory=list)
    metadata: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        out: dict = {"role": self.role, "content": self.content}
        if self.file_ids:
            out["file_ids"] = list(self.file_ids)
        if self.metadata:
            out["metadata"] = dict(self.metadata)
        return out


@dataclass
class MessageFile:
    """A file attached to a message."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    message_id: str = ""

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "MessageFile":
        raw = _load(data)
        return cls(
            id=raw.get("id") or "",
            object=raw.get("object") or "",
            created_at=raw.get("created_at") or 0,
            message_id=raw.get("message_id") or "",
        )


@dataclass
class MessageFilesList:
    """Files attached to a message."""

    message_files: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "MessageFilesList":
        raw = _load(data)
        return cls(message_files=[MessageFile.from_dict(item) for item in raw.get("data") or []])


@dataclass
class MessageDeletionStatus:
    """Deletion status of a message."""

    id: str = ""
    object: str = ""
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "MessageDeletionStatus":
        raw = _load(data)
        return cls(
            id=raw.get("id") or "",
            object=raw.get("object") or "",
            deleted=bool(raw.get("deleted", False)),
        )


def _message_path(thread_id: str, *rest: str) -> str:
    return "/".join(("", "threads", thread_id, MESSAGES_SUFFIX) + rest)


def create_message_call(
    thread_id: str,
    request: MessageRequest,
    assistant_version: str = DEFAULT_ASSISTANT_VERSION,
) -> ApiCall:
    """Describe the call that adds a message to a thread."""
    return ApiCall(
        method="POST",
        path=_message_path(thread_id),
        body=request,
        headers=_beta_headers(assistant_version),
    )


def list_messages_call(
    thread_id: str,
    limit: Optional[int] = None,
    order: Optional[str] = None,
    after: Optional[str] = None,
    before: Optional[str] = None,
    assistant_version: str = DEFAULT_ASSISTANT_VERSION,
) -> ApiCall:
    """Describe a listing of a thread's messages with optional paging."""
    params: dict[str, Any] = {}
    if limit is not None:
        params["limit"] = str(limit)
    if order is not None:
        params["order"] = order
    if after is not None:
        params["after"] = after
    if before is not None:
        params["before"] = before
    query = "?" + urlencode(sorted(params.items())) if params else ""
    return ApiCall(
        method="GET",
        path=_message_path(thread_id) + query,
        headers=_beta_headers(assistant_version),
    )


def retrieve_message_call(
    thread_id: str,
    message_id: str,
    assistant_version: str = DEFAULT_ASSISTANT_VERSION,
) -> ApiCall:
    return ApiCall(
        method="GET",
        path=_message_path(thread_id, message_id),
        headers=_beta_headers(assistant_version),
    )


def modify_message_call(
    thread_id: str,
    message_id: str,
    metadata: dict,
    assistant_version: str = DEFAULT_ASSISTANT_VERSION,
) -> ApiCall:
    """Describe the call that replaces a message's metadata."""
    return ApiCall(
        method="POST",
        path=_message_path(thread_id, message_id),
        body={"metadata": metadata},
        headers=_beta_headers(assistant_version),
    )


def retrieve_message_file_call(
    thread_id: str,
    message_id: str,
    file_id: str,
    assistant_version: str = DEFAULT_ASSISTANT_VERSION,
) -> ApiCall:
    return ApiCall(
        method="GET",
        path=_message_path(thread_id, message_id, "files", file_id),
        headers=_beta_headers(assistant_version),
    )


def list_message_files_call(
    thread_id: str,
    message_id: str,
    assistant_version: str = DEFAULT_ASSISTANT_VERSION,
) -> ApiCall:
    return ApiCall(
        method="GET",
        path=_message_path(thread_id, message_id, "files"),
        headers=_beta_headers(assistant_version),
    )


def delete_message_call(
    thread_id: str,
    message_id: str,
    assistant_version: str = DEFAULT_ASSISTANT_VERSION,
) -> ApiCall:
    return ApiCall(
        method="DELETE",
        path=_message_path(thread_id, message_id),
        headers=_beta_headers(assistant_version),
    )