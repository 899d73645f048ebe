from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from apple_model_names.catalog.model_def import DeviceFamily


class ModelOut(BaseModel):
    identifier: str = Field(..., description="Hardware identifier, e.g. iPhone16,1")
    model_name: str
    family: DeviceFamily


class DeviceOut(BaseModel):
    identifier: str
    model_name: str = Field(..., description="Decorated with the simulator suffix when simulated")
    family: Optional[DeviceFamily] = None
    simulated: bool
    runtime: str = Field(..., description="Configured provider selection: auto, simulator or device")
