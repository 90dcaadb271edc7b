"""
Response decoding

Turns a successful DockerResponse into a typed result. Failures here are
always DeserializationError; transport failures never reach this module.
"""

from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .exceptions import DeserializationError
from .http_client import DockerResponse


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def decode_value(response: DockerResponse, result_type: Any) -> Any:
    """
    Decode response body into a result type

    Args:
        response: Successful daemon response
        result_type: Result model, or a typing construct such as List[Model]

    Returns:
        Validated result

    Raises:
        DeserializationError: body is not JSON or does not match result_type
    """
    try:
        return _adapter(result_type).validate_json(response.body)
    except ValidationError as e:
        raise DeserializationError(
            f"Unexpected response body for {getattr(result_type, '__name__', result_type)}: {e}",
            body=response.body,
            source=e
        ) from e


def decode_unit(response: DockerResponse) -> None:
    """Operations without a payload; any body is ignored"""
    return None


def decode_json(response: DockerResponse) -> Any:
    """
    Decode response body as untyped JSON

    Raises:
        DeserializationError: body is not JSON
    """
    if not response.body:
        return None
    try:
        return _adapter(Any).validate_json(response.body)
    except ValidationError as e:
        raise DeserializationError(f"Response body is not JSON: {e}", body=response.body, source=e) from e
