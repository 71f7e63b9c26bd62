"""Translate GitHub's REST repository payload into domain entities."""
import json
from typing import Any, Dict, List, Tuple, Type, Union

from src.domain.errors import DecodeError
from src.domain.models import Repository


# JSON field name -> accepted Python types
REQUIRED_FIELDS: Dict[str, Union[Type, Tuple[Type, ...]]] = {
    "id": int,
    "name": str,
    "stargazers_count": int,
    "html_url": str,
    "fork": bool,
}


def decode_repositories(body: bytes) -> List[Repository]:
    """Decode a response body into repositories.

    The whole decode fails if the body is not a JSON array or if any element
    misses a required field. ``language`` may be absent or null.

    Args:
        body: Raw response body

    Returns:
        Repositories in payload order

    Raises:
        DecodeError: When the body does not match the expected shape
    """
    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        raise DecodeError(f"Response body is not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise DecodeError(
            f"Expected a JSON array of repositories, got {type(payload).__name__}"
        )

    return [decode_repository(item, index) for index, item in enumerate(payload)]


def decode_repository(item: Any, index: int = 0) -> Repository:
    """Decode one element of the repositories array."""
    if not isinstance(item, dict):
        raise DecodeError(f"Element {index} is not a JSON object")

    for field, expected in REQUIRED_FIELDS.items():
        if field not in item:
            raise DecodeError(f"Element {index} is missing required field '{field}'")
        value = item[field]
        # bool is an int subclass; JSON true is not a valid id or star count
        if expected is int and isinstance(value, bool):
            raise DecodeError(f"Element {index} field '{field}' must be an integer")
        if not isinstance(value, expected):
            raise DecodeError(
                f"Element {index} field '{field}' has unexpected type "
                f"{type(value).__name__}"
            )

    if item["stargazers_count"] < 0:
        raise DecodeError(f"Element {index} has a negative star count")

    language = item.get("language")
    if language is not None and not isinstance(language, str):
        raise DecodeError(f"Element {index} field 'language' must be a string or null")

    return Repository(
        id=item["id"],
        name=item["name"],
        star_count=item["stargazers_count"],
        url=item["html_url"],
        is_fork=item["fork"],
        language=language,
    )
