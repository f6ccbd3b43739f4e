from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List

from catalog.errors import DataCorrupted, TypeMismatch
from catalog.fields import Path, json_type, require_int, require_object, require_present, require_str
from catalog.logo import LogoSource, decode_logo_source, encode_logo_source


@dataclass(frozen=True, eq=False)
class Department:
    """A department card. Identity is ``id`` alone; content never affects equality."""

    name: str
    description: str
    logo_source: LogoSource
    dataset_count: int
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Department):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


def decode_department(raw: Any, path: Path = ()) -> Department:
    container = require_object(raw, path)
    name = require_str(container, "name", path)
    description = require_str(container, "description", path)
    logo_source = decode_logo_source(require_present(container, "logoSource", path), (*path, "logoSource"))
    dataset_count = require_int(container, "datasetCount", path)
    if dataset_count < 0:
        raise DataCorrupted((*path, "datasetCount"), f"Dataset count must be non-negative, got {dataset_count}")
    # any "id" in the input is ignored; every decode yields a new identity
    return Department(
        name=name,
        description=description,
        logo_source=logo_source,
        dataset_count=dataset_count,
    )


def decode_departments(raw: Any) -> List[Department]:
    if not isinstance(raw, list):
        raise TypeMismatch((), f"Expected to decode Array<Department> but found {json_type(raw)} instead.")
    departments: List[Department] = []
    for index, item in enumerate(raw):
        departments.append(decode_department(item, (str(index),)))
    return departments


def encode_department(department: Department) -> Dict[str, Any]:
    return {
        "name": department.name,
        "description": department.description,
        "logoSource": encode_logo_source(department.logo_source),
        "datasetCount": department.dataset_count,
    }
