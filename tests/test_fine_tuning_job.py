import json

import pytest

from aiapi.fine_tunes import FineTuneEvent
from aiapi.fine_tuning_job import (
    FineTuningJob,
    FineTuningJobEventList,
    FineTuningJobRequest,
    Hyperparameters,
    cancel_fine_tuning_job_call,
    create_fine_tuning_job_call,
    list_fine_tuning_job_events_call,
    retrieve_fine_tuning_job_call,
)
from aiapi.request_builder import JSONMarshaller

JOB_ID = "fine-tuning-job-id"

SAMPLE_JOB = {
    "object": "fine_tuning.job",
    "id": JOB_ID,
    "model": "davinci-002",
    "created_at": 1692661014,
    "finished_at": 1692661190,
    "fine_tuned_model": "ft:davinci-002:my-org:custom_suffix:7q8mpxmy",
    "organization_id": "org-123",
    "result_files": ["file-abc123"],
    "status": "succeeded",
    "validation_file": "",
    "training_file": "file-abc123",
    "hyperparameters": {
        "n_epochs": "auto",
        "learning_rate_multiplier": "auto",
        "batch_size": "auto",
    },
    "trained_tokens": 5768,
}


def test_job_decodes_sample():
    job = FineTuningJob.from_dict(json.dumps(SAMPLE_JOB))
    assert job.id == JOB_ID
    assert job.created_at == 1692661014
    assert job.finished_at == 1692661190
    assert job.result_files == ["file-abc123"]
    assert job.trained_tokens == 5768
    assert job.hyperparameters == Hyperparameters("auto", "auto", "auto")


def test_empty_job_decodes_to_defaults():
    assert FineTuningJob.from_dict("{}") == FineTuningJob()


@pytest.mark.parametrize(
    "call, method, path",
    [
        (create_fine_tuning_job_call(FineTuningJobRequest()), "POST", "/fine_tuning/jobs"),
        (cancel_fine_tuning_job_call(JOB_ID), "POST", "/fine_tuning/jobs/fine-tuning-job-id/cancel"),
        (retrieve_fine_tuning_job_call(JOB_ID), "GET", "/fine_tuning/jobs/fine-tuning-job-id"),
    ],
)
def test_call_routes(call, method, path):
    assert (call.method, call.path) == (method, path)


@pytest.mark.parametrize(
    "after, limit, suffix",
    [
        (None, None, ""),
        ("last-event-id", None, "?after=last-event-id"),
        (None, 10, "?limit=10"),
        ("last-event-id", 10, "?after=last-event-id&limit=10"),
    ],
)
def test_list_events_query(after, limit, suffix):
    call = list_fine_tuning_job_events_call(JOB_ID, after=after, limit=limit)
    assert call.method == "GET"
    assert call.path == "/fine_tuning/jobs/fine-tuning-job-id/events" + suffix


def test_empty_request_marshals_training_file_only():
    assert JSONMarshaller().marshal(FineTuningJobRequest()) == b'{"training_file":""}'


def test_request_with_hyperparameters():
    request = FineTuningJobRequest(
        training_file="file-a",
        model="gpt-3.5-turbo",
        hyperparameters=Hyperparameters(epochs=3),
        suffix="custom",
    )
    assert request.to_dict() == {
        "training_file": "file-a",
        "model": "gpt-3.5-turbo",
        "hyperparameters": {"n_epochs": 3},
        "suffix": "custom",
    }


def test_event_list_decodes():
    events = FineTuningJobEventList.from_dict(
        {"object": "list", "has_more": True, "data": [{"level": "info", "message": "step"}]}
    )
    assert events.has_more is True
    assert events.data == [FineTuneEvent(level="info", message="step")]


def test_non_object_rejected():
    with pytest.raises(ValueError):
        FineTuningJobEventList.from_dict("3")