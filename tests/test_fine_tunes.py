import json

import pytest

from aiapi.fine_tunes import (
    FineTune,
    FineTuneDeleteResponse,
    FineTuneEvent,
    FineTuneEventList,
    FineTuneHyperParams,
    FineTuneList,
    FineTuneRequest,
    cancel_fine_tune_call,
    create_fine_tune_call,
    delete_fine_tune_call,
    get_fine_tune_call,
    list_fine_tune_events_call,
    list_fine_tunes_call,
)
from aiapi.request_builder import JSONMarshaller

FINE_TUNE_ID = "fine-tune-id"


@pytest.mark.parametrize(
    "call, method, path",
    [
        (list_fine_tunes_call(), "GET", "/fine-tunes"),
        (create_fine_tune_call(FineTuneRequest()), "POST", "/fine-tunes"),
        (cancel_fine_tune_call(FINE_TUNE_ID), "POST", "/fine-tunes/fine-tune-id/cancel"),
        (get_fine_tune_call(FINE_TUNE_ID), "GET", "/fine-tunes/fine-tune-id"),
        (delete_fine_tune_call(FINE_TUNE_ID), "DELETE", "/fine-tunes/fine-tune-id"),
        (list_fine_tune_events_call(FINE_TUNE_ID), "GET", "/fine-tunes/fine-tune-id/events"),
    ],
)
def test_call_routes(call, method, path):
    assert (call.method, call.path) == (method, path)


def test_create_carries_request_body():
    request = FineTuneRequest(training_file="file-abc")
    assert create_fine_tune_call(request).body is request


def test_empty_request_keeps_only_training_file():
    assert JSONMarshaller().marshal(FineTuneRequest()) == b'{"training_file":""}'


def test_request_to_dict_uses_wire_names():
    request = FineTuneRequest(
        training_file="file-a",
        epochs=4,
        classification_classes=2,
        classification_betas=[0.5],
        compute_classification_metrics=True,
    )
    assert request.to_dict() == {
        "training_file": "file-a",
        "n_epochs": 4,
        "classification_n_classes": 2,
        "classification_betas": [0.5],
        "compute_classification_metrics": True,
    }


def test_fine_tune_from_empty_object():
    assert FineTune.from_dict("{}") == FineTune()


def test_fine_tune_from_dict_nested():
    raw = {
        "id": FINE_TUNE_ID,
        "status": "succeeded",
        "hyperparams": {"batch_size": 4, "n_epochs": 3, "learning_rate_multiplier": 0.1},
        "events": [{"object": "fine-tune-event", "level": "info", "message": "ok"}],
        "result_files": [{"id": "file-r", "bytes": 10}],
    }
    tune = FineTune.from_dict(json.dumps(raw))
    assert tune.id == FINE_TUNE_ID
    assert tune.hyper_params == FineTuneHyperParams(
        batch_size=4, learning_rate_multiplier=0.1, epochs=3
    )
    assert tune.events == [FineTuneEvent(object="fine-tune-event", level="info", message="ok")]
    assert tune.result_files[0].id == "file-r"
    assert tune.result_files[0].bytes == 10


def test_list_and_events_and_delete():
    tunes = FineTuneList.from_dict({"object": "list", "data": [{"id": "a"}, {"id": "b"}]})
    assert [t.id for t in tunes.data] == ["a", "b"]
    events = FineTuneEventList.from_dict({"data": [{"message": "m", "created_at": 5}]})
    assert events.data == [FineTuneEvent(message="m", created_at=5)]
    deleted = FineTuneDeleteResponse.from_dict(b'{"id":"x","deleted":true}')
    assert deleted == FineTuneDeleteResponse(id="x", deleted=True)


def test_non_object_body_rejected():
    with pytest.raises(ValueError):
        FineTune.from_dict("[]")