from __future__ import annotations

import logging
import os
import platform
import sys
from typing import Any, Callable, Mapping, Protocol

from apple_model_names.core.exceptions import SimulatorConfigurationError
from apple_model_names.core.settings import Settings
from apple_model_names.utils.logging import log_json


class IdentifierProvider(Protocol):
    """Source of the raw hardware identifier for the running host."""

    simulated: bool

    def current_identifier(self) -> str: ...


def decode_machine(raw: bytes) -> str:
    # utsname.machine is a fixed-size, NUL-terminated buffer
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _default_uname() -> Any:
    if hasattr(os, "uname"):
        return os.uname()
    return platform.uname()


class SimulatorIdentifierProvider:
    simulated = True

    def __init__(
        self,
        env_var: str = "SIMULATOR_MODEL_IDENTIFIER",
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.env_var = env_var
        self._environ = os.environ if environ is None else environ

    def current_identifier(self) -> str:
        identifier = self._environ.get(self.env_var)
        if not identifier:
            log_json("simulator_identifier_missing", level=logging.ERROR, env_var=self.env_var)
            raise SimulatorConfigurationError(
                f"simulator environment does not define {self.env_var}"
            )
        return identifier


class NativeIdentifierProvider:
    simulated = False

    def __init__(self, uname: Callable[[], Any] = _default_uname) -> None:
        self._uname = uname

    def current_identifier(self) -> str:
        machine = self._uname().machine
        if isinstance(machine, (bytes, bytearray)):
            return decode_machine(bytes(machine))
        return machine


def running_in_simulator() -> bool:
    if sys.platform != "ios":
        return False
    ios_ver = getattr(platform, "ios_ver", None)
    return bool(ios_ver and ios_ver().is_simulator)


def select_provider(settings: Settings) -> IdentifierProvider:
    runtime = settings.runtime
    if runtime == "auto":
        runtime = "simulator" if running_in_simulator() else "device"

    provider: IdentifierProvider
    if runtime == "simulator":
        provider = SimulatorIdentifierProvider(settings.simulator_env_var)
    else:
        provider = NativeIdentifierProvider()

    log_json("provider_selected", runtime=runtime, provider=type(provider).__name__)
    return provider
