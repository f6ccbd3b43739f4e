from __future__ import annotations

import logging
import math
from typing import List, Literal

import numpy as np
import pandas as pd
from fastapi import FastAPI, Query
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool

from api.schemas import DepartmentListResponse, DepartmentModel, DescriptionResponse, LogoSourceModel
from catalog.charts import dataset_count_chart, to_vega_spec
from catalog.data import departments_frame, fetch_generated_departments, load_departments_from_json
from catalog.descriptions import lookup_description, normalize_key
from catalog.errors import FileNotFound, LoadError
from catalog.logo import encode_logo_source
from catalog.models import Department

app = FastAPI(title="CA Departments API", version="0.1.0")
logger = logging.getLogger(__name__)

CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000", "http://localhost:8501"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

Mode = Literal["generated", "json"]


def _json(data: object) -> JSONResponse:
    """Return JSON with safe encoding for pandas/numpy objects."""

    def _safe_float(value: object) -> float | None:
        try:
            out = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return None
        if math.isnan(out) or math.isinf(out):
            return None
        return out

    return JSONResponse(
        content=jsonable_encoder(
            data,
            custom_encoder={
                type(pd.NA): lambda _: None,
                np.integer: int,
                float: _safe_float,
                np.floating: _safe_float,
                np.ndarray: lambda arr: arr.tolist(),
            },
        )
    )


def _error(exc: Exception) -> JSONResponse:
    status_code = 404 if isinstance(exc, FileNotFound) else 500
    return JSONResponse(status_code=status_code, content={"error": str(exc), "type": type(exc).__name__})


async def _load(mode: Mode) -> List[Department]:
    if mode == "json":
        return await run_in_threadpool(load_departments_from_json)
    return await fetch_generated_departments()


def _to_model(dept: Department) -> DepartmentModel:
    return DepartmentModel(
        id=str(dept.id),
        name=dept.name,
        description=dept.description,
        logoSource=LogoSourceModel(**encode_logo_source(dept.logo_source)),
        datasetCount=dept.dataset_count,
    )


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/departments")
async def departments(mode: Mode = Query(default="generated")):
    try:
        depts = await _load(mode)
        payload = DepartmentListResponse(mode=mode, count=len(depts), departments=[_to_model(d) for d in depts])
        return _json(payload.model_dump())
    except LoadError as exc:
        logger.exception("departments failed")
        return _error(exc)


@app.get("/descriptions")
def descriptions(name: str = Query(...)):
    return _json(DescriptionResponse(name=name, key=normalize_key(name), description=lookup_description(name)).model_dump())


@app.get("/charts/datasets")
async def dataset_chart(mode: Mode = Query(default="generated")):
    try:
        frame = departments_frame(await _load(mode))
        return _json({"mode": mode, "chart": to_vega_spec(dataset_count_chart(frame))})
    except LoadError as exc:
        logger.exception("dataset_chart failed")
        return _error(exc)


@app.get("/export/departments")
async def export_departments(mode: Mode = Query(default="generated")):
    try:
        export_df = departments_frame(await _load(mode))
    except LoadError as exc:
        logger.exception("export_departments failed")
        return _error(exc)
    csv_bytes = export_df.to_csv(index=False).encode("utf-8")
    return Response(
        content=csv_bytes,
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=departments.csv"},
    )
