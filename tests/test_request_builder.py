import io

import pytest

from aiapi.request_builder import (
    ApiCall,
    HttpRequest,
    JSONMarshaller,
    JSONUnmarshaler,
    RequestBuilder,
)


class _FailingMarshaller:
    def marshal(self, value):
        raise RuntimeError("test marshaller failed")


def test_marshaller_errors_propagate():
    builder = RequestBuilder(_FailingMarshaller())
    with pytest.raises(RuntimeError, match="test marshaller failed"):
        builder.build("", "", {}, None)


def test_returns_request():
    req = RequestBuilder().build("POST", "/foo", {"foo": "bar"}, None)
    assert req == HttpRequest("POST", "/foo", JSONMarshaller().marshal({"foo": "bar"}), {})
    assert req.body == b'{"foo":"bar"}'


def test_nil_body():
    req = RequestBuilder().build("GET", "/foo", None, None)
    assert req == HttpRequest("GET", "/foo", None, {})


def test_reader_and_headers():
    req = RequestBuilder().build("POST", "/f", io.BytesIO(b"raw"), {"X": "1"})
    assert req.body == b"raw"
    assert req.headers == {"X": "1"}


def test_unmarshal_round_trip():
    data = {"a": [1, 2], "b": None}
    assert JSONUnmarshaler().unmarshal(JSONMarshaller().marshal(data)) == data


def test_api_call_defaults():
    call = ApiCall("GET", "/models")
    assert (call.model, call.body, call.raw_response, call.headers) == ("", None, False, {})