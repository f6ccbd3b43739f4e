from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field


class LogoSourceModel(BaseModel):
    type: Literal["sfSymbol", "localAsset", "remoteURL"]
    value: str


class DepartmentModel(BaseModel):
    id: str
    name: str
    description: str
    logoSource: LogoSourceModel
    datasetCount: int = Field(ge=0)


class DepartmentListResponse(BaseModel):
    mode: Literal["generated", "json"]
    count: int
    departments: List[DepartmentModel] = Field(default_factory=list)


class DescriptionResponse(BaseModel):
    name: str
    key: str
    description: str
