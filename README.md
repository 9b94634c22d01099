# aiapi

`aiapi` describes the calls of an OpenAI-compatible REST API as plain Python
objects. It has no runtime dependencies. For each endpoint it produces an
`ApiCall` (method, path, model, body, content type and extra headers),
decodes JSON responses into dataclasses and turns error bodies into
exceptions.

## What the package does not do

There is no client object and no network code. Nothing here sends a
request, joins an `ApiCall.path` to `ClientConfig.base_url`, adds
authentication headers, maps a model to an Azure deployment URL, retries,
or reads streamed responses. You pass the described call to whichever HTTP
client you already use, and feed the response body to the matching
`from_dict` method.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `aiapi.config` | `ClientConfig`, `APIType`, `default_config`, `default_azure_config` |
| `aiapi.errors` | `APIError`, `InnerError`, `RequestError` |
| `aiapi.request_builder` | `ApiCall`, `HttpRequest`, `RequestBuilder`, `JSONMarshaller`, `JSONUnmarshaler` |
| `aiapi.formdata` | `FormBuilder` for multipart/form-data bodies |
| `aiapi.error_accumulator` | `ErrorAccumulator`, `ErrorAccumulatorWriteError` |
| `aiapi.jsonschema` | `Definition`, `DataType`, `validate`, `verify_schema_and_unmarshal`, `generate_schema_for_type` |
| `aiapi.embeddings` | embedding requests and responses, base64 decoding |
| `aiapi.moderation` | moderation requests and results |
| `aiapi.files` | file uploads, listing, retrieval and deletion |
| `aiapi.image` | image generation, edits and variations |
| `aiapi.edits`, `aiapi.engines`, `aiapi.models` | edits, engines and models |
| `aiapi.fine_tunes`, `aiapi.fine_tuning_job` | legacy fine-tunes and fine-tuning jobs |
| `aiapi.messages` | assistant thread messages |

## Configuration

```python
from aiapi.config import default_config, default_azure_config

config = default_config("token")          # base_url, assistant_version "v2"

azure = default_azure_config("placeholder", "https://example.com/")
azure.azure_deployment_for("gpt-3.5-turbo")   # "gpt-35-turbo"
```

The Azure configuration sets `api_version` to `"2023-05-15"` and maps a
model name to a deployment name by removing `.` and `:`. Assign your own
function to `azure_model_mapper` to change that; with no mapper the model
name is returned unchanged. `str(config)` never shows the token.

## Describing calls

```python
from aiapi.moderation import ModerationRequest, moderation_call

call = moderation_call(ModerationRequest(input="some text", model="text-moderation-stable"))
call.method, call.path, call.model   # ("POST", "/moderations", "text-moderation-stable")
```

`moderation_call` raises `InvalidModerationModelError` for any model other
than `text-moderation-stable` or `text-moderation-latest` (an empty model
is allowed). Other endpoints have their own `*_call` functions, such as
`list_models_call`, `get_engine_call`, `create_image_call`,
`create_fine_tuning_job_call` and `list_messages_call`.

Query parameters (`list_messages_call`, `list_fine_tuning_job_events_call`)
are only added when given, sorted by name. Message calls carry the header
`OpenAI-Beta: assistants=<version>`, `v2` by default.
`get_file_content_call` sets `raw_response=True`.

Turn a call into an `HttpRequest` with `RequestBuilder`:

```python
from aiapi.request_builder import RequestBuilder

request = RequestBuilder().build("POST", "https://example.com/v1" + call.path, call.body, None)
request.body   # b'{"input":"some text","model":"text-moderation-stable"}'
```

Bytes bodies and readable objects are sent as they are; anything else is
encoded as compact JSON, using a `to_dict` method where the object has one.

## Uploads

`create_file_call`, `create_file_bytes_call`, `create_edit_image_call` and
`create_vari_image_call` build a multipart body with `FormBuilder` and
return it in `ApiCall.body`, with the boundary in `ApiCall.content_type`.
`create_file_call` opens `FileRequest.file_path` itself, so a missing file
raises `FileNotFoundError`. A file part needs a non-empty file name,
otherwise `FormBuilder` raises `ValueError`. Each of these functions takes
an optional `form_builder_factory`; errors raised by the builder propagate.

## Responses and errors

```python
from aiapi.errors import APIError

error = APIError.from_json('{"message": ["foo", "bar"], "type": "invalid_request_error"}')
error.message   # "foo, bar"
```

`from_json` raises `ValueError` for malformed bodies: no `message`, a
message that is not a string or list of strings, or a `type`, `param` or
`innererror` of the wrong kind. A `code` keeps its JSON type (an integer
stays `int`, text stays `str`); a `null` code becomes `0` and a missing one
`None`. With `http_status_code` set, `str(error)` reads
`error, status code: <n>, message: <message>`. `RequestError` wraps another
exception with an HTTP status.

Response classes decode from a dict, a JSON string or bytes, for example
`ModelsList.from_dict(body)` or `FineTuningJob.from_dict(body)`.

## Embeddings

```python
from aiapi.embeddings import Embedding

a = Embedding(embedding=[1.0, 2.0, 3.0])
b = Embedding(embedding=[2.0, 4.0, 6.0])
a.dot_product(b)   # 28.0
```

Vectors of different lengths raise `VectorLengthMismatchError`.
`create_embeddings_call` accepts an `EmbeddingRequest`,
`EmbeddingRequestStrings` or `EmbeddingRequestTokens`.
`decode_embeddings_response(request, body)` decodes the body according to
the request's encoding format; with `EmbeddingEncodingFormat.BASE64` the
vectors are decoded from little-endian float32, and invalid base64 raises
`ValueError`.

## JSON Schema

```python
from aiapi.jsonschema import DataType, Definition, validate, verify_schema_and_unmarshal

schema = Definition(type=DataType.STRING)
validate(schema, "abc")   # True
validate(schema, 123)     # False

obj = Definition(type=DataType.OBJECT, properties={"n": Definition(type=DataType.INTEGER)},
                 required=["n"])
verify_schema_and_unmarshal(obj, '{"n": 1}')   # {"n": 1}
```

`verify_schema_and_unmarshal` raises `SchemaValidationError` when the data
does not match. `Definition.to_dict` always includes `properties`, even when
empty. `generate_schema_for_type` derives a schema from `str`, `int`,
`float`, `bool`, lists and dataclasses; dataclass field metadata `json`,
`description` and `required` control names, descriptions and required
fields, and a `json` name ending in `,omitempty` makes a field optional.
Unsupported types raise `TypeError`.

## Error accumulator

`ErrorAccumulator` collects bytes into a buffer (a `BytesIO` by default);
`getvalue()` returns them, and a failing buffer write raises
`ErrorAccumulatorWriteError`.