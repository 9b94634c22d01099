import pytest

from aiapi.files import (
    File,
    FileBytesRequest,
    FileRequest,
    FilesList,
    PurposeType,
    create_file_bytes_call,
    create_file_call,
    delete_file_call,
    get_file_call,
    get_file_content_call,
    list_files_call,
)


class MockError(Exception):
    pass


class FakeBuilder:
    def __init__(self, write_field=None, create_form_file=None, reader=None, close=None):
        self._write_field = write_field
        self._create_form_file = create_form_file
        self._reader = reader
        self._close = close

    def write_field(self, fieldname, value):
        if self._write_field:
            self._write_field(fieldname, value)

    def create_form_file(self, fieldname, file):
        if self._create_form_file:
            self._create_form_file(fieldname, file)

    def create_form_file_reader(self, fieldname, reader, filename):
        if self._reader:
            self._reader(fieldname, reader, filename)

    def close(self):
        if self._close:
            self._close()

    def content_type(self):
        return ""


def _raiser(err):
    def fail(*_args):
        raise err

    return fail


BYTES_REQUEST = FileBytesRequest(name="foo", data=b"foo", purpose=PurposeType.ASSISTANTS)


def test_file_bytes_upload_write_field_failure():
    err = MockError("mockWriteField error")
    builder = FakeBuilder(write_field=_raiser(err))
    with pytest.raises(MockError) as info:
        create_file_bytes_call(BYTES_REQUEST, lambda body: builder)
    assert info.value is err


def test_file_bytes_upload_reader_failure():
    err = MockError("mockCreateFormFile error")
    builder = FakeBuilder(reader=_raiser(err))
    with pytest.raises(MockError) as info:
        create_file_bytes_call(BYTES_REQUEST, lambda body: builder)
    assert info.value is err


def test_file_bytes_upload_close_failure():
    err = MockError("mockClose error")
    builder = FakeBuilder(close=_raiser(err))
    with pytest.raises(MockError) as info:
        create_file_bytes_call(BYTES_REQUEST, lambda body: builder)
    assert info.value is err


def test_file_upload_failures(tmp_path):
    path = tmp_path / "client.txt"
    path.write_bytes(b"hello")
    request = FileRequest(file_name="test.go", file_path=str(path), purpose="fine-tune")
    for kind in ("write_field", "create_form_file", "close"):
        err = MockError(kind)
        builder = FakeBuilder(**{kind: _raiser(err)})
        with pytest.raises(MockError) as info:
            create_file_call(request, lambda body, b=builder: b)
        assert info.value is err


def test_write_field_failure_comes_before_opening_file():
    err = MockError("write")
    request = FileRequest(file_path="does/not/exist.jsonl", purpose="fine-tune")
    with pytest.raises(MockError):
        create_file_call(request, lambda body: FakeBuilder(write_field=_raiser(err)))


def test_file_upload_with_non_existent_path():
    request = FileRequest(file_path="some non existent file path/F616FD18-589E-44A8-BF0C-891EAE69C455")
    with pytest.raises(FileNotFoundError):
        create_file_call(request)


def test_file_bytes_upload_builds_multipart_body():
    call = create_file_bytes_call(BYTES_REQUEST)
    assert call.method == "POST"
    assert call.path == "/files"
    assert call.content_type.startswith("multipart/form-data; boundary=")
    boundary = call.content_type.split("boundary=")[1]
    assert call.body.startswith(f"--{boundary}\r\n".encode())
    assert call.body.endswith(f"--{boundary}--\r\n".encode())
    assert b'name="purpose"\r\n\r\nassistants' in call.body
    assert b'name="file"; filename="foo"' in call.body
    assert b"\r\n\r\nfoo\r\n" in call.body


def test_file_upload_from_path(tmp_path):
    path = tmp_path / "data.jsonl"
    path.write_bytes(b'{"prompt":"x"}')
    call = create_file_call(FileRequest(file_path=str(path), purpose="fine-tune"))
    assert b"fine-tune" in call.body
    assert b'{"prompt":"x"}' in call.body
    assert b'name="file"' in call.body


def test_simple_calls():
    assert (delete_file_call("f1").method, delete_file_call("f1").path) == ("DELETE", "/files/f1")
    assert (list_files_call().method, list_files_call().path) == ("GET", "/files")
    assert get_file_call("f1").path == "/files/f1"
    content = get_file_content_call("f1")
    assert content.path == "/files/f1/content"
    assert content.raw_response is True


def test_file_from_dict():
    file = File.from_dict(
        '{"bytes":12,"created_at":5,"id":"file-1","filename":"a.jsonl",'
        '"object":"file","status":"uploaded","purpose":"fine-tune","status_details":""}'
    )
    assert file == File(
        bytes=12,
        created_at=5,
        id="file-1",
        filename="a.jsonl",
        object="file",
        status="uploaded",
        purpose="fine-tune",
    )


def test_files_list_from_dict():
    files = FilesList.from_dict({"data": [{"id": "a"}, {"id": "b"}]})
    assert [f.id for f in files.files] == ["a", "b"]
    assert FilesList.from_dict('{"data":null}').files == []


def test_from_dict_rejects_non_object():
    with pytest.raises(ValueError):
        File.from_dict("[1]")