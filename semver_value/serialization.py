"""Adapters for the standard library json module."""

from typing import Any, Iterable, Set, Union
import json
import logging

from .version import Version

logger = logging.getLogger(__name__)


class VersionEncoder(json.JSONEncoder):
    """JSON encoder that writes Version values as their text form."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Version):
            return o.format()
        return super().default(o)


def dumps(obj: Any, **kwargs) -> str:
    """json.dumps with Version support."""
    kwargs.setdefault("cls", VersionEncoder)
    return json.dumps(obj, **kwargs)


def _key_set(keys: Union[str, Iterable[str]]) -> Set[str]:
    # A bare string is one key, not an iterable of characters
    if isinstance(keys, str):
        return {keys}
    return set(keys)


def decode_versions(obj: Any, keys: Union[str, Iterable[str]]) -> Any:
    """Replace string values stored under any of ``keys`` with parsed versions.

    Walks nested dicts and lists in place and returns ``obj``. A value that
    fails to parse raises ParseError.
    """
    keys = _key_set(keys)
    if isinstance(obj, dict):
        for key, value in obj.items():
            if key in keys and isinstance(value, str):
                obj[key] = Version.parse(value)
            else:
                decode_versions(value, keys)
    elif isinstance(obj, list):
        for item in obj:
            decode_versions(item, keys)
    return obj


def loads(data: Union[str, bytes], keys: Union[str, Iterable[str]] = (), **kwargs) -> Any:
    """json.loads, then parse the values under ``keys`` into Version objects."""
    obj = json.loads(data, **kwargs)
    keys = _key_set(keys)
    if keys:
        logger.debug(f"Decoding versions under keys: {sorted(keys)}")
        decode_versions(obj, keys)
    return obj
