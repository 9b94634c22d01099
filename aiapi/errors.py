"""Errors reported by the API and by request handling."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional, Union


@dataclass
class InnerError:
    """Azure content-filtering details."""

    code: str = ""
    content_filter_results: dict = field(default_factory=dict)


class APIError(Exception):
    """Error information returned by the API."""

    def __init__(
        self,
        message: str = "",
        code: Any = None,
        param: Optional[str] = None,
        type: str = "",
        http_status_code: int = 0,
        inner_error: Optional[InnerError] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.param = param
        self.type = type
        self.http_status_code = http_status_code
        self.inner_error = inner_error

    def __str__(self) -> str:
        if self.http_status_code > 0:
            return f"error, status code: {self.http_status_code}, message: {self.message}"
        return self.message

    @classmethod
    def from_json(cls, data: Union[str, bytes, dict]) -> "APIError":
        """Build an error from its JSON form; raise ValueError if malformed."""
        raw = json.loads(data) if isinstance(data, (str, bytes, bytearray)) else data
        if not isinstance(raw, dict):
            raise ValueError("error body is not an object")

        if "message" not in raw:
            raise ValueError("error body has no message")
        message = raw["message"]
        if message is None:
            message = ""
        elif isinstance(message, list):
            if not all(isinstance(m, str) for m in message):
                raise ValueError("message list must hold strings")
            message = ", ".join(message)
        elif not isinstance(message, str):
            raise ValueError("message must be a string or a list of strings")

        err_type = raw.get("type")
        if err_type is None:
            err_type = ""
        elif not isinstance(err_type, str):
            raise ValueError("type must be a string")

        inner = None
        raw_inner = raw.get("innererror")
        if raw_inner is not None:
            if not isinstance(raw_inner, dict):
                raise ValueError("innererror must be an object")
            inner_code = raw_inner.get("code") or ""
            if not isinstance(inner_code, str):
                raise ValueError("innererror code must be a string")
            results = raw_inner.get("content_filter_result") or {}
            if not isinstance(results, dict):
                raise ValueError("content_filter_result must be an object")
            inner = InnerError(code=inner_code, content_filter_results=results)

        param = raw.get("param")
        if param is not None and not isinstance(param, str):
            raise ValueError("param must be a string")

        code: Any = None
        if "code" in raw:
            code = raw["code"]
            if code is None:
                code = 0

        return cls(
            message=message,
            code=code,
            param=param,
            type=err_type,
            inner_error=inner,
        )


class RequestError(Exception):
    """A generic failure of a request, with its HTTP status."""

    def __init__(self, http_status_code: int, err: BaseException) -> None:
        super().__init__(http_status_code, err)
        self.http_status_code = http_status_code
        self.err = err
        self.__cause__ = err

    def __str__(self) -> str:
        return f"error, status code: {self.http_status_code}, message: {self.err}"