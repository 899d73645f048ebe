from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from apple_model_names.catalog.lookup import family_for, known_identifiers, name_for
from apple_model_names.catalog.model_def import DeviceFamily
from apple_model_names.web.schemas import ModelOut

router = APIRouter(prefix="/models", tags=["models"])


@router.get("", response_model=List[ModelOut])
async def list_models(family: Optional[DeviceFamily] = Query(default=None)):
    return [
        ModelOut(identifier=i, model_name=name_for(i), family=family_for(i))
        for i in known_identifiers(family)
    ]


@router.get("/{identifier}", response_model=ModelOut)
async def get_model(identifier: str):
    name = name_for(identifier)
    if name is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"unknown identifier {identifier!r}")
    return ModelOut(identifier=identifier, model_name=name, family=family_for(identifier))
