from __future__ import annotations

from typing import Iterable, Tuple


def format_path(path: Iterable[object]) -> str:
    return ".".join(str(p) for p in path)


class DecodingError(Exception):
    """Input did not match the expected schema at ``coding_path``."""

    def __init__(self, coding_path: Iterable[object], message: str) -> None:
        self.coding_path: Tuple[str, ...] = tuple(str(p) for p in coding_path)
        self.message = message
        super().__init__(self._describe())

    def _describe(self) -> str:
        where = format_path(self.coding_path)
        return f"{self.message} (at '{where}')" if where else self.message


class KeyNotFound(DecodingError):
    def __init__(self, key: str, coding_path: Iterable[object]) -> None:
        self.key = key
        super().__init__((*coding_path, key), f'No value associated with key "{key}"')


class ValueNotFound(DecodingError):
    pass


class TypeMismatch(DecodingError):
    pass


class DataCorrupted(DecodingError):
    pass


class LoadError(Exception):
    """A department source could not be turned into a list of departments."""

    def __init__(self, filename: str, message: str) -> None:
        self.filename = filename
        super().__init__(message)


class FileNotFound(LoadError):
    def __init__(self, filename: str) -> None:
        super().__init__(filename, f"JSON file '{filename}' not found.")


class DataLoadingError(LoadError):
    def __init__(self, filename: str) -> None:
        super().__init__(filename, f"Could not load data from JSON file '{filename}'.")


class DataDecodingError(LoadError):
    def __init__(self, filename: str, underlying: Exception) -> None:
        self.underlying = underlying
        super().__init__(filename, f"Failed to decode JSON from '{filename}': {underlying}")
