"""Image generation, editing and variation calls."""

from __future__ import annotations

import io
import json
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Callable, Optional, Union

from .formdata import FormBuilder
from .request_builder import ApiCall

CREATE_IMAGE_SIZE_256X256 = "256x256"
CREATE_IMAGE_SIZE_512X512 = "512x512"
CREATE_IMAGE_SIZE_1024X1024 = "1024x1024"
# Supported by dall-e-3 only.
CREATE_IMAGE_SIZE_1792X1024 = "1792x1024"
CREATE_IMAGE_SIZE_1024X1792 = "1024x1792"

CREATE_IMAGE_RESPONSE_FORMAT_URL = "url"
CREATE_IMAGE_RESPONSE_FORMAT_B64_JSON = "b64_json"

CREATE_IMAGE_MODEL_DALL_E_2 = "dall-e-2"
CREATE_IMAGE_MODEL_DALL_E_3 = "dall-e-3"

CREATE_IMAGE_QUALITY_HD = "hd"
CREATE_IMAGE_QUALITY_STANDARD = "standard"

CREATE_IMAGE_STYLE_VIVID = "vivid"
CREATE_IMAGE_STYLE_NATURAL = "natural"


@dataclass
class ImageRequest:
    """Request to generate images from a prompt."""

    prompt: str = ""
    model: str = ""
    n: int = 0
    quality: str = ""
    size: str = ""
    style: str = ""
    response_format: str = ""
    user: str = ""

    def to_dict(self) -> dict:
        pairs = (
            ("prompt", self.prompt),
            ("model", self.model),
            ("n", self.n),
            ("quality", self.quality),
            ("size", self.size),
            ("style", self.style),
            ("response_format", self.response_format),
            ("user", self.user),
        )
        return {key: value for key, value in pairs if value}


@dataclass
class ImageResponseDataInner:
    """One generated image."""

    url: str = ""
    b64_json: str = ""
    revised_prompt: str = ""


@dataclass
class ImageResponse:
    """Result of an image request."""

    created: int = 0
    data: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Union[dict, str, bytes]) -> "ImageResponse":
        raw = json.loads(data) if isinstance(data, (str, bytes, bytearray)) else data
        if not isinstance(raw, dict):
            raise ValueError("response body is not an object")
        return cls(
            created=raw.get("created") or 0,
            data=[
                ImageResponseDataInner(
                    url=item.get("url") or "",
                    b64_json=item.get("b64_json") or "",
                    revised_prompt=item.get("revised_prompt") or "",
                )
                for item in raw.get("data") or []
            ],
        )


@dataclass
class ImageEditRequest:
    """Request to edit an image, optionally through a mask."""

    image: Optional[BinaryIO] = None
    mask: Optional[BinaryIO] = None
    prompt: str = ""
    model: str = ""
    n: int = 0
    size: str = ""
    response_format: str = ""


@dataclass
class ImageVariRequest:
    """Request for variations of an image."""

    image: Optional[BinaryIO] = None
    model: str = ""
    n: int = 0
    size: str = ""
    response_format: str = ""


def _factory(form_builder_factory: Optional[Callable[[Any], Any]]) -> Callable[[Any], Any]:
    return form_builder_factory if form_builder_factory is not None else FormBuilder


def create_image_call(request: ImageRequest) -> ApiCall:
    """Describe an image generation call."""
    return ApiCall(
        method="POST", path="/images/generations", model=request.model, body=request
    )


def create_edit_image_call(
    request: ImageEditRequest,
    form_builder_factory: Optional[Callable[[Any], Any]] = None,
) -> ApiCall:
    """Describe an image edit call; form-building errors propagate."""
    body = io.BytesIO()
    builder = _factory(form_builder_factory)(body)
    builder.create_form_file("image", request.image)
    if request.mask is not None:
        builder.create_form_file("mask", request.mask)
    builder.write_field("prompt", request.prompt)
    builder.write_field("n", str(request.n))
    builder.write_field("size", request.size)
    builder.write_field("response_format", request.response_format)
    builder.close()
    return ApiCall(
        method="POST",
        path="/images/edits",
        model=request.model,
        body=body.getvalue(),
        content_type=builder.content_type(),
    )


def create_vari_image_call(
    request: ImageVariRequest,
    form_builder_factory: Optional[Callable[[Any], Any]] = None,
) -> ApiCall:
    """Describe an image variation call; form-building errors propagate."""
    body = io.BytesIO()
    builder = _factory(form_builder_factory)(body)
    builder.create_form_file("image", request.image)
    builder.write_field("n", str(request.n))
    builder.write_field("size", request.size)
    builder.write_field("response_format", request.response_format)
    builder.close()
    return ApiCall(
        method="POST",
        path="/images/variations",
        model=request.model,
        body=body.getvalue(),
        content_type=builder.content_type(),
    )