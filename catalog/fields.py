from __future__ import annotations

from typing import Any, Dict, Tuple

from catalog.errors import KeyNotFound, TypeMismatch, ValueNotFound

Path = Tuple[str, ...]


def json_type(value: Any) -> str:
    if isinstance(value, bool):
        return "a bool"
    if isinstance(value, str):
        return "a string"
    if isinstance(value, (int, float)):
        return "a number"
    if isinstance(value, list):
        return "an array"
    if isinstance(value, dict):
        return "a dictionary"
    return type(value).__name__


def require_object(raw: Any, path: Path) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise TypeMismatch(path, f"Expected to decode Dictionary but found {json_type(raw)} instead.")
    return raw


def require_present(container: Dict[str, Any], key: str, path: Path) -> Any:
    if key not in container:
        raise KeyNotFound(key, path)
    value = container[key]
    if value is None:
        raise ValueNotFound((*path, key), f"Expected a value for key \"{key}\" but found null instead.")
    return value


def require_str(container: Dict[str, Any], key: str, path: Path) -> str:
    value = require_present(container, key, path)
    if not isinstance(value, str):
        raise TypeMismatch((*path, key), f"Expected to decode String but found {json_type(value)} instead.")
    return value


def require_int(container: Dict[str, Any], key: str, path: Path) -> int:
    value = require_present(container, key, path)
    # bool is an int subclass but never a JSON integer
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeMismatch((*path, key), f"Expected to decode Int but found {json_type(value)} instead.")
    return value
