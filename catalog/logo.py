"""Where a department's icon image comes from.

A logo is one of three variants, each a frozen dataclass so equality and
hashing are structural. On the wire a logo is ``{"type": tag, "value": str}``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Union

from pydantic import AnyUrl, TypeAdapter, ValidationError

from catalog.errors import DataCorrupted
from catalog.fields import Path, require_object, require_str

SYMBOL_TAG = "sfSymbol"
ASSET_TAG = "localAsset"
REMOTE_TAG = "remoteURL"

_URL_ADAPTER = TypeAdapter(AnyUrl)


def canonical_url(value: str) -> str:
    """Validate an absolute URL and return its canonical string form."""
    try:
        return str(_URL_ADAPTER.validate_python(value))
    except ValidationError as exc:
        raise ValueError(f"Invalid URL string: {value!r}") from exc


@dataclass(frozen=True)
class SymbolLogo:
    name: str


@dataclass(frozen=True)
class AssetLogo:
    name: str


@dataclass(frozen=True)
class RemoteLogo:
    url: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "url", canonical_url(self.url))


LogoSource = Union[SymbolLogo, AssetLogo, RemoteLogo]


def decode_logo_source(raw: Any, path: Path = ()) -> LogoSource:
    container = require_object(raw, path)
    tag = require_str(container, "type", path)
    value = require_str(container, "value", path)

    if tag == SYMBOL_TAG:
        return SymbolLogo(name=value)
    if tag == ASSET_TAG:
        return AssetLogo(name=value)
    if tag == REMOTE_TAG:
        try:
            return RemoteLogo(url=value)
        except ValueError:
            raise DataCorrupted((*path, "value"), "Invalid URL string for remoteURL type") from None
    raise DataCorrupted((*path, "type"), f"Invalid logo source type '{tag}'")


def encode_logo_source(logo: LogoSource) -> Dict[str, str]:
    if isinstance(logo, SymbolLogo):
        return {"type": SYMBOL_TAG, "value": logo.name}
    if isinstance(logo, AssetLogo):
        return {"type": ASSET_TAG, "value": logo.name}
    if isinstance(logo, RemoteLogo):
        return {"type": REMOTE_TAG, "value": logo.url}
    raise TypeError(f"Unsupported logo source: {logo!r}")
