import io

import pytest

from aiapi.formdata import FormBuilder


class _FailingWriter:
    def write(self, data):
        raise OSError("mock writer failed")


def test_failing_writer(tmp_path):
    path = tmp_path / "f.bin"
    path.write_bytes(b"hello")
    with open(path, "rb") as fh:
        builder = FormBuilder(_FailingWriter())
        with pytest.raises(OSError, match="mock writer failed"):
            builder.create_form_file("file", fh)


def test_closed_file(tmp_path):
    path = tmp_path / "f.bin"
    path.write_bytes(b"hello")
    fh = open(path, "rb")
    fh.close()
    builder = FormBuilder(io.BytesIO())
    with pytest.raises(ValueError):
        builder.create_form_file("file", fh)


def test_body_layout():
    body = io.BytesIO()
    builder = FormBuilder(body)
    builder.write_field("purpose", "fine-tune")
    builder.create_form_file_reader("file", io.BytesIO(b"data"), "dir/a.txt")
    builder.close()
    b = builder.boundary
    expected = (
        f"--{b}\r\nContent-Disposition: form-data; name=\"purpose\"\r\n\r\nfine-tune"
        f"\r\n--{b}\r\nContent-Disposition: form-data; name=\"file\"; filename=\"a.txt\"\r\n"
        f"Content-Type: application/octet-stream\r\n\r\ndata\r\n--{b}--\r\n"
    ).encode()
    assert body.getvalue() == expected
    assert builder.content_type() == f"multipart/form-data; boundary={b}"


def test_empty_file_name_rejected():
    builder = FormBuilder(io.BytesIO())
    with pytest.raises(ValueError, match="filename cannot be empty"):
        builder.create_form_file("file", io.BytesIO(b"x"))