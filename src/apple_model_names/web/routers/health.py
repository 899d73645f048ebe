from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from apple_model_names.core.exceptions import SimulatorConfigurationError
from apple_model_names.device import Device
from apple_model_names.web.deps import get_device

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    return {"ok": True}


@router.get("/ready")
async def ready(device: Device = Depends(get_device)):
    # Ready once the host identifier can be read
    try:
        device.identifier()
    except SimulatorConfigurationError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    return {"ready": True}
