"""Load state for the department screen.

The screen is always in exactly one of Idle, Loading, Failed, Empty or
Loaded. ``DepartmentLoader`` drives the transitions and refuses to start a
second load while one is in flight.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, List, Optional, Tuple, Union

from catalog.data import DEFAULT_FILENAME, fetch_generated_departments, load_departments_from_json
from catalog.models import Department

logger = logging.getLogger(__name__)


class LoadMode(str, Enum):
    GENERATED = "generated"
    JSON = "json"


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Failed:
    message: str


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Loaded:
    departments: Tuple[Department, ...]


LoadState = Union[Idle, Loading, Failed, Empty, Loaded]


def state_from_departments(departments: List[Department]) -> LoadState:
    if not departments:
        return Empty()
    return Loaded(tuple(departments))


async def _load_json_default() -> List[Department]:
    return load_departments_from_json(DEFAULT_FILENAME)


class DepartmentLoader:
    def __init__(
        self,
        fetch_generated: Callable[[], Awaitable[List[Department]]] = fetch_generated_departments,
        load_json: Callable[[], Awaitable[List[Department]]] = _load_json_default,
    ) -> None:
        self._fetchers = {LoadMode.GENERATED: fetch_generated, LoadMode.JSON: load_json}
        self.state: LoadState = Idle()
        self.is_loading = False

    @property
    def departments(self) -> List[Department]:
        if isinstance(self.state, Loaded):
            return list(self.state.departments)
        return []

    def find(self, department_id: Union[str, uuid.UUID]) -> Optional[Department]:
        for dept in self.departments:
            if str(dept.id) == str(department_id):
                return dept
        return None

    async def load(self, mode: LoadMode = LoadMode.GENERATED) -> Optional[LoadState]:
        """Run one load; returns None without fetching if a load is already running."""
        mode = LoadMode(mode)
        if self.is_loading:
            return None

        self.is_loading = True
        self.state = Loading()
        try:
            departments = await self._fetchers[mode]()
        except Exception as exc:
            logger.exception("Error occurred during fetch (%s)", mode.value)
            self.state = Failed(str(exc))
        else:
            self.state = state_from_departments(departments)
        finally:
            self.is_loading = False
        return self.state
