import pytest

from aiapi.engines import Engine, EnginesList, get_engine_call, list_engines_call


def test_get_engine_call():
    call = get_engine_call("text-davinci-003")
    assert (call.method, call.path) == ("GET", "/engines/text-davinci-003")


def test_list_engines_call():
    call = list_engines_call()
    assert (call.method, call.path) == ("GET", "/engines")


def test_engine_from_empty_marshalled_engine():
    engine = Engine.from_dict('{"id":"","object":"","owner":"","ready":false}')
    assert engine == Engine()


def test_engine_from_dict():
    engine = Engine.from_dict({"id": "davinci", "object": "engine", "owner": "openai", "ready": True})
    assert engine == Engine(id="davinci", object="engine", owner="openai", ready=True)


def test_engines_list_from_dict():
    assert EnginesList.from_dict('{"data":null}').engines == []
    engines = EnginesList.from_dict({"data": [{"id": "a"}, {"id": "b", "ready": True}]})
    assert [e.id for e in engines.engines] == ["a", "b"]
    assert engines.engines[1].ready is True


def test_engines_list_rejects_bad_body():
    with pytest.raises(ValueError):
        EnginesList.from_dict("not json")