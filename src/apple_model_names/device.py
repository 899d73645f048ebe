"""
Current-device accessors over the model catalog.

    from apple_model_names import device

    device.identifier()                  # "iPhone16,1"
    device.model_name()                  # "iPhone 15 Pro" ("iPhone 15 Pro Simulator" in a simulator)
    device.model_name_for("iPhone8,2")   # "iPhone 6s Plus"
    device.model_name_for("Unknown1,1")  # None
"""
from __future__ import annotations

import threading
from typing import Optional

from apple_model_names.catalog.lookup import family_for, name_for
from apple_model_names.catalog.model_def import DeviceFamily
from apple_model_names.core.settings import Settings
from apple_model_names.platform.provider import IdentifierProvider, select_provider


class Device:
    def __init__(self, provider: IdentifierProvider, *, simulator_suffix: str = " Simulator") -> None:
        if not simulator_suffix:
            raise ValueError("simulator_suffix must not be empty")
        self.provider = provider
        self.simulator_suffix = simulator_suffix

    @classmethod
    def from_settings(cls, settings: Settings) -> "Device":
        return cls(select_provider(settings), simulator_suffix=settings.simulator_suffix)

    @property
    def simulated(self) -> bool:
        return self.provider.simulated

    def identifier(self) -> str:
        return self.provider.current_identifier()

    def model_name(self) -> str:
        """
        Marketing name of the running host.

        Unknown identifiers fall back to the raw identifier. Under a simulator the
        suffix is appended to whichever of the two was resolved.
        """
        return self.display_name(self.identifier())

    def display_name(self, identifier: str) -> str:
        # Same rules as model_name(), for an identifier already read from the provider
        name = name_for(identifier) or identifier
        if self.simulated:
            return f"{name}{self.simulator_suffix}"
        return name

    def model_name_for(self, identifier: str) -> Optional[str]:
        # Explicit lookups are never decorated, even on a simulator
        return name_for(identifier)

    def family(self) -> Optional[DeviceFamily]:
        return family_for(self.identifier())


_default: Optional[Device] = None
_default_lock = threading.Lock()


def default_device() -> Device:
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Device.from_settings(Settings())
    return _default


def reset_default_device(device: Optional[Device] = None) -> None:
    """Drop (or replace) the process-wide Device; the next access rebuilds it from Settings."""
    global _default
    with _default_lock:
        _default = device


def identifier() -> str:
    return default_device().identifier()


def model_name() -> str:
    return default_device().model_name()


def model_name_for(identifier: str) -> Optional[str]:
    return name_for(identifier)
