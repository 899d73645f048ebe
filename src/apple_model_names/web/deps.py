# src/apple_model_names/web/deps.py
from __future__ import annotations

from fastapi import Request

from apple_model_names.core.settings import Settings
from apple_model_names.device import Device


def get_settings(request: Request) -> Settings:
    # Built once in the app lifespan
    settings: Settings = request.app.state.settings
    return settings


def get_device(request: Request) -> Device:
    device: Device | None = getattr(request.app.state, "device", None)
    if device is None:
        raise RuntimeError("Device not initialised on app.state.device")
    return device
