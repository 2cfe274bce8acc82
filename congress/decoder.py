"""Decoding of API response envelopes into lists of records."""

from __future__ import annotations
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar

from .errors import APIErrorResponse, DecodeError
from .models import Record

R = TypeVar("R", bound=Record)


class Unwrap(Enum):
    """How to get from an envelope's `results` to a flat list of entities."""
    # results is the entity list
    DIRECT = "direct"
    # results[0][group_key] is the entity list; later groups are ignored
    FIRST_GROUP = "first_group"
    # results[0] is the single entity
    FIRST_GROUP_SINGLE = "first_group_single"
    # every results[i][group_key], concatenated in order
    ALL_GROUPS = "all_groups"


@dataclass
class Envelope:
    """The wrapper every API response shares."""
    status: Optional[str] = None
    copyright: Optional[str] = None
    results: List[Any] = field(default_factory=list)


def _optional_str(payload: Dict[str, Any], key: str) -> Optional[str]:
    value = payload.get(key)
    if value is not None and not isinstance(value, str):
        raise DecodeError(f"envelope '{key}' must be a string, got {type(value).__name__}")
    return value


def _error_messages(errors: Any) -> List[str]:
    messages = []
    for item in errors if isinstance(errors, list) else [errors]:
        if isinstance(item, dict):
            item = item.get("error") or item.get("message")
        if item:
            messages.append(str(item))
    return messages


def parse_envelope(body: bytes) -> Envelope:
    """
    Parse a raw response body into an Envelope.

    An absent or null `results` is treated as empty.

    Raises:
        APIErrorResponse: if the body is an upstream error envelope
        DecodeError: if the body is not JSON or the envelope fields have the
            wrong types
    """
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError) as e:
        raise DecodeError(f"response is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise DecodeError(f"envelope must be a JSON object, got {type(payload).__name__}")

    status = _optional_str(payload, "status")
    errors = payload.get("errors", payload.get("error"))
    if status == "ERROR" or (errors and "results" not in payload):
        raise APIErrorResponse(status or "ERROR", _error_messages(errors))

    results = payload.get("results")
    if results is None:
        results = []
    elif not isinstance(results, list):
        raise DecodeError(f"envelope 'results' must be a list, got {type(results).__name__}")

    return Envelope(
        status=status,
        copyright=_optional_str(payload, "copyright"),
        results=results,
    )


def _group_entities(group: Any, group_key: str) -> List[Any]:
    if not isinstance(group, dict):
        raise DecodeError(f"result group must be a JSON object, got {type(group).__name__}")
    entities = group.get(group_key)
    if entities is None:
        return []
    if not isinstance(entities, list):
        raise DecodeError(f"result group '{group_key}' must be a list, got {type(entities).__name__}")
    return entities


def unwrap(results: List[Any], strategy: Unwrap, group_key: str = "members") -> List[Any]:
    """Extract the flat entity list from `results` according to `strategy`."""
    if not results:
        return []

    if strategy is Unwrap.DIRECT:
        return list(results)
    if strategy is Unwrap.FIRST_GROUP:
        return list(_group_entities(results[0], group_key))
    if strategy is Unwrap.FIRST_GROUP_SINGLE:
        return [results[0]]
    if strategy is Unwrap.ALL_GROUPS:
        entities: List[Any] = []
        for group in results:
            entities.extend(_group_entities(group, group_key))
        return entities

    raise ValueError(f"unknown unwrap strategy: {strategy!r}")


def decode(
    body: bytes,
    strategy: Unwrap,
    record_type: Type[R],
    group_key: str = "members",
) -> List[R]:
    """
    Decode a response body into records, in the order the API returned them.

    Args:
        body: Raw response bytes
        strategy: Unwrap strategy for this endpoint
        record_type: Record class to build for each entity
        group_key: Key holding the entity list inside each result group

    Returns:
        List of records (empty when the API returned no results)
    """
    envelope = parse_envelope(body)
    return [record_type.from_dict(entity) for entity in unwrap(envelope.results, strategy, group_key)]
