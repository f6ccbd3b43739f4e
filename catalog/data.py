from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import List, Tuple

import pandas as pd

from catalog.descriptions import lookup_description
from catalog.errors import DataDecodingError, DataLoadingError, DecodingError, FileNotFound
from catalog.formatting import display_name
from catalog.logo import AssetLogo, LogoSource, RemoteLogo, SymbolLogo, encode_logo_source
from catalog.models import Department, decode_departments

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parents[1]
DEFAULT_FILENAME = "departments.json"
GENERATED_DELAY_SECONDS = 1.0

GENERATED_DEPARTMENTS: Tuple[Tuple[str, LogoSource, int], ...] = (
    ("Department\nof State Hospitals", SymbolLogo("cross.case.fill"), 5),
    ("Department\nof Tax & Fee Admin", SymbolLogo("dollarsign.circle.fill"), 38),
    ("Department\nof Technology", SymbolLogo("server.rack"), 15),
    ("Department\nof Toxic Substances", SymbolLogo("testtube.2"), 2),
    ("Department\nof Water Resources", AssetLogo("ca-water-drop"), 546),
    ("Emergency Medical\nServices Authority", SymbolLogo("staroflife.fill"), 3),
    (
        "Employment Development\nDepartment",
        RemoteLogo("https://via.placeholder.com/150/0000FF/FFFFFF?Text=EDD"),
        17,
    ),
    ("Dept of Education", SymbolLogo("book.closed.fill"), 20),
    ("Highway Patrol", SymbolLogo("shield.lefthalf.filled"), 8),
    ("Parks and Recreation", AssetLogo("california-flag"), 75),
)

TABLE_COLUMNS = ["id", "name", "description", "logo_type", "logo_value", "dataset_count"]


def build_generated_departments() -> List[Department]:
    return [
        Department(
            name=name,
            description=lookup_description(name),
            logo_source=logo,
            dataset_count=count,
        )
        for name, logo, count in GENERATED_DEPARTMENTS
    ]


async def fetch_generated_departments(delay: float = GENERATED_DELAY_SECONDS) -> List[Department]:
    """Return the fixed mock list after ``delay`` seconds (exercises loading UI)."""
    logger.info("Starting asynchronous fetch for generated departments")
    await asyncio.sleep(delay)
    departments = build_generated_departments()
    logger.info("Generated %d departments", len(departments))
    return departments


def load_departments_from_json(filename: str = DEFAULT_FILENAME, data_dir: Path = DATA_DIR) -> List[Department]:
    logger.info("Attempting to load departments from %s", filename)
    path = Path(data_dir) / filename
    if not path.is_file():
        raise FileNotFound(filename)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Could not read %s: %s", path, exc)
        raise DataLoadingError(filename) from exc

    try:
        departments = decode_departments(json.loads(text))
    except (ValueError, RecursionError, DecodingError) as exc:
        # JSONDecodeError is a ValueError; so is the int digit limit
        logger.error("JSON decoding error in %s: %s", filename, exc)
        raise DataDecodingError(filename, exc) from exc

    logger.info("Successfully decoded %d departments from %s", len(departments), filename)
    return departments


def departments_frame(departments: List[Department]) -> pd.DataFrame:
    if not departments:
        return pd.DataFrame(columns=TABLE_COLUMNS)
    rows = []
    for dept in departments:
        logo = encode_logo_source(dept.logo_source)
        rows.append(
            {
                "id": str(dept.id),
                "name": display_name(dept.name),
                "description": dept.description,
                "logo_type": logo["type"],
                "logo_value": logo["value"],
                "dataset_count": dept.dataset_count,
            }
        )
    df = pd.DataFrame(rows, columns=TABLE_COLUMNS)
    df["dataset_count"] = pd.to_numeric(df["dataset_count"], errors="coerce").astype("int64")
    return df
