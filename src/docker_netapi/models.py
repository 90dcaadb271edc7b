"""
Base models for Docker API payloads

Python attributes are snake_case; on the wire the daemon expects PascalCase
keys, with a handful of fixed spellings (``IPAM``, ``EndpointID``...) set per
field as an alias.
"""

import json
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_pascal

from .exceptions import SerializationError
from .text import as_str, textify

QueryParams = List[Tuple[str, str]]


def dump_json(value: Any) -> str:
    """
    Serialize a value for the wire

    Raises:
        SerializationError: value is not representable as JSON
    """
    try:
        return json.dumps(textify(value), separators=(',', ':'), allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Could not serialize to JSON: {e}", source=e) from e


def encode_text(value: Any) -> str:
    """
    String form of a text parameter for the wire

    Raises:
        SerializationError: bytes are not valid UTF-8
    """
    try:
        return as_str(value)
    except UnicodeDecodeError as e:
        raise SerializationError(f"Could not decode text parameter: {e}", source=e) from e


class WireModel(BaseModel):
    """Model with daemon-style (PascalCase) field names"""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    def to_wire(self) -> dict:
        """Model as a dict keyed by daemon field names, unset optionals dropped"""
        return self.model_dump(by_alias=True, exclude_none=True, warnings=False)

    def into_body(self) -> bytes:
        """JSON request body for this model"""
        return dump_json(self.to_wire()).encode('utf-8')


class OptionsModel(WireModel):
    """Options for a single API call"""

    def into_query_params(self) -> QueryParams:
        """
        Encode options as ordered query string pairs

        Options sent as a request body have no query parameters.
        """
        return []


class ResultModel(WireModel):
    """Record decoded from a daemon response"""

    @model_validator(mode='before')
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # daemon sends null for empty maps and lists
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


def encode_query_params(options: Optional[OptionsModel]) -> Optional[QueryParams]:
    """
    Encode optional call options

    Args:
        options: Options model or None

    Returns:
        None when no options were given, else the ordered pairs
    """
    if options is None:
        return None
    return options.into_query_params()


def filters_param(filters: Any) -> QueryParams:
    """Filters map as the single JSON encoded ``filters`` pair"""
    return [('filters', dump_json(filters))]
