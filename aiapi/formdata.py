"""Builder for multipart/form-data bodies."""

from __future__ import annotations

import posixpath
import secrets
from typing import BinaryIO

_CHUNK = 64 * 1024


def _quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _base(name: str) -> str:
    if name == "":
        return "."
    stripped = name.rstrip("/")
    if stripped == "":
        return "/"
    return posixpath.basename(stripped)


class FormBuilder:
    """Writes form fields and files as multipart parts into a writable body."""

    def __init__(self, body) -> None:
        self._body = body
        self.boundary = secrets.token_hex(30)
        self._started = False

    def _begin_part(self, headers: list[str]) -> None:
        prefix = "\r\n" if self._started else ""
        text = f"{prefix}--{self.boundary}\r\n" + "".join(h + "\r\n" for h in headers) + "\r\n"
        self._body.write(text.encode())
        self._started = True

    def create_form_file(self, fieldname: str, file: BinaryIO) -> None:
        """Add an open file, named by its own name."""
        self._create(fieldname, file, getattr(file, "name", ""))

    def create_form_file_reader(self, fieldname: str, reader: BinaryIO, filename: str) -> None:
        """Add data from a reader under the base name of filename."""
        self._create(fieldname, reader, _base(filename))

    def _create(self, fieldname: str, reader: BinaryIO, filename: str) -> None:
        if not filename:
            raise ValueError("filename cannot be empty")
        self._begin_part(
            [
                f'Content-Disposition: form-data; name="{_quote(fieldname)}"; '
                f'filename="{_quote(str(filename))}"',
                "Content-Type: application/octet-stream",
            ]
        )
        for chunk in iter(lambda: reader.read(_CHUNK), b""):
            self._body.write(chunk if isinstance(chunk, bytes) else chunk.encode())

    def write_field(self, fieldname: str, value: str) -> None:
        self._begin_part([f'Content-Disposition: form-data; name="{_quote(fieldname)}"'])
        self._body.write(value.encode())

    def close(self) -> None:
        prefix = "\r\n" if self._started else ""
        self._body.write(f"{prefix}--{self.boundary}--\r\n".encode())

    def content_type(self) -> str:
        return f"multipart/form-data; boundary={self.boundary}"