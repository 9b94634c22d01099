import pytest

from aiapi.config import APIType, default_azure_config, default_config


def _mapper(model):
    return {"gpt-3.5-turbo": "my-gpt35"}.get(model, model)


@pytest.mark.parametrize(
    "model, mapper, expected",
    [
        ("gpt-3.5-turbo", None, "gpt-35-turbo"),
        ("gpt-3.5-turbo-0301", None, "gpt-35-turbo-0301"),
        ("text-embedding-ada-002", None, "text-embedding-ada-002"),
        ("", None, ""),
        ("models", None, "models"),
        ("gpt-3.5-turbo", _mapper, "my-gpt35"),
    ],
)
def test_azure_deployment_for(model, mapper, expected):
    conf = default_azure_config("", "https://test.example.com/")
    if mapper is not None:
        conf.azure_model_mapper = mapper
    assert conf.azure_deployment_for(model) == expected


def test_default_config_values():
    conf = default_config("token")
    assert conf.api_type is APIType.OPEN_AI
    assert conf.assistant_version == "v2"
    assert conf.empty_messages_limit == 300
    assert conf.azure_deployment_for("a.b") == "a.b"


def test_config_str_hides_token():
    conf = default_config("token")
    assert str(conf) == "<OpenAI API ClientConfig>"
    assert "token" not in repr(conf).replace("auth_token", "")


def test_azure_defaults():
    conf = default_azure_config("placeholder", "https://x.example.com/")
    assert conf.api_type is APIType.AZURE
    assert conf.api_version == "2023-05-15"