from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from apple_model_names.catalog.lookup import family_for
from apple_model_names.core.exceptions import SimulatorConfigurationError
from apple_model_names.core.settings import Settings
from apple_model_names.device import Device
from apple_model_names.utils.logging import log_json
from apple_model_names.web.deps import get_device, get_settings
from apple_model_names.web.schemas import DeviceOut

router = APIRouter(prefix="/device", tags=["device"])


@router.get("", response_model=DeviceOut)
async def current_device(
    device: Device = Depends(get_device),
    settings: Settings = Depends(get_settings),
):
    """Identifier and model name of the host running this service."""
    try:
        identifier = device.identifier()
    except SimulatorConfigurationError as e:
        log_json("device_lookup_failed", level=logging.ERROR, error=str(e))
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    return DeviceOut(
        identifier=identifier,
        model_name=device.display_name(identifier),
        family=family_for(identifier),
        simulated=device.simulated,
        runtime=settings.runtime,
    )
