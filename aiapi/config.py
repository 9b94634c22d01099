"""Client configuration."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_EMPTY_MESSAGES_LIMIT = 300
DEFAULT_ASSISTANT_VERSION = "v2"
DEFAULT_AZURE_API_VERSION = "2023-05-15"

AZURE_API_PREFIX = "openai"
AZURE_DEPLOYMENTS_PREFIX = "deployments"
AZURE_HEADER_FIELD = "api-key"

_AZURE_STRIP = re.compile(r"[.:]")


class APIType(str, Enum):
    """Kind of service the client talks to."""

    OPEN_AI = "OPEN_AI"
    AZURE = "AZURE"
    AZURE_AD = "AZURE_AD"
    CLOUDFLARE_AZURE = "CLOUDFLARE_AZURE"


def _azure_model_mapper(model: str) -> str:
    return _AZURE_STRIP.sub("", model)


@dataclass
class ClientConfig:
    """Settings used by a client to reach the API."""

    auth_token: str = field(default_factory=str, repr=False)
    base_url: str = DEFAULT_BASE_URL
    org_id: str = ""
    api_type: APIType = APIType.OPEN_AI
    api_version: str = ""
    assistant_version: str = ""
    azure_model_mapper: Optional[Callable[[str], str]] = None
    http_client: Any = None
    empty_messages_limit: int = DEFAULT_EMPTY_MESSAGES_LIMIT

    def __str__(self) -> str:
        return "<OpenAI API ClientConfig>"

    def azure_deployment_for(self, model: str) -> str:
        """Return the Azure deployment name for a model."""
        if self.azure_model_mapper is not None:
            return self.azure_model_mapper(model)
        return model


def default_config(auth_token: str) -> ClientConfig:
    """Configuration for the standard service."""
    return ClientConfig(
        auth_token=auth_token,
        base_url=DEFAULT_BASE_URL,
        api_type=APIType.OPEN_AI,
        assistant_version=DEFAULT_ASSISTANT_VERSION,
    )


def default_azure_config(api_key: str, base_url: str) -> ClientConfig:
    """Configuration for an Azure deployment."""
    return ClientConfig(
        auth_token=api_key,
        base_url=base_url,
        api_type=APIType.AZURE,
        api_version=DEFAULT_AZURE_API_VERSION,
        azure_model_mapper=_azure_model_mapper,
    )