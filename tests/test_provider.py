from __future__ import annotations

import platform
from types import SimpleNamespace

import pytest

from apple_model_names.core.exceptions import SimulatorConfigurationError
from apple_model_names.core.settings import Settings
from apple_model_names.platform import provider as provider_mod
from apple_model_names.platform.provider import (
    NativeIdentifierProvider,
    SimulatorIdentifierProvider,
    decode_machine,
    running_in_simulator,
    select_provider,
)


def test_simulator_reads_env_var():
    p = SimulatorIdentifierProvider(environ={"SIMULATOR_MODEL_IDENTIFIER": "iPhone16,1"})
    assert p.simulated is True
    assert p.current_identifier() == "iPhone16,1"


def test_simulator_custom_env_var():
    p = SimulatorIdentifierProvider("SIM_ID", environ={"SIM_ID": "iPad16,6"})
    assert p.current_identifier() == "iPad16,6"


@pytest.mark.parametrize("environ", [{}, {"SIMULATOR_MODEL_IDENTIFIER": ""}])
def test_simulator_without_identifier_is_fatal(environ):
    p = SimulatorIdentifierProvider(environ=environ)
    with pytest.raises(SimulatorConfigurationError, match="SIMULATOR_MODEL_IDENTIFIER"):
        p.current_identifier()


def test_simulator_defaults_to_process_env(monkeypatch):
    monkeypatch.setenv("SIMULATOR_MODEL_IDENTIFIER", "Watch7,12")
    assert SimulatorIdentifierProvider().current_identifier() == "Watch7,12"


def test_decode_machine_stops_at_nul():
    assert decode_machine(b"iPhone16,1\x00\x00\x00junk") == "iPhone16,1"
    assert decode_machine(b"AppleTV14,1") == "AppleTV14,1"
    assert decode_machine(b"\x00") == ""


def test_native_reads_uname_machine():
    p = NativeIdentifierProvider(uname=lambda: SimpleNamespace(machine="iPhone8,2"))
    assert p.simulated is False
    assert p.current_identifier() == "iPhone8,2"


def test_native_decodes_byte_buffer():
    buf = bytearray(256)
    buf[: len(b"Watch6,18")] = b"Watch6,18"
    p = NativeIdentifierProvider(uname=lambda: SimpleNamespace(machine=buf))
    assert p.current_identifier() == "Watch6,18"


def test_native_on_this_host_is_not_empty():
    assert NativeIdentifierProvider().current_identifier()


def test_running_in_simulator_off_ios(monkeypatch):
    monkeypatch.setattr(provider_mod.sys, "platform", "linux")
    assert running_in_simulator() is False


@pytest.mark.parametrize("is_simulator", [True, False])
def test_running_in_simulator_on_ios(monkeypatch, is_simulator):
    monkeypatch.setattr(provider_mod.sys, "platform", "ios")
    monkeypatch.setattr(
        platform, "ios_ver", lambda: SimpleNamespace(is_simulator=is_simulator), raising=False
    )
    assert running_in_simulator() is is_simulator


def test_select_provider_explicit():
    sim = select_provider(Settings(runtime="simulator", simulator_env_var="SIM_ID"))
    assert isinstance(sim, SimulatorIdentifierProvider)
    assert sim.env_var == "SIM_ID"

    native = select_provider(Settings(runtime="device"))
    assert isinstance(native, NativeIdentifierProvider)


def test_select_provider_auto(monkeypatch):
    monkeypatch.setattr(provider_mod, "running_in_simulator", lambda: False)
    assert isinstance(select_provider(Settings()), NativeIdentifierProvider)

    monkeypatch.setattr(provider_mod, "running_in_simulator", lambda: True)
    assert isinstance(select_provider(Settings()), SimulatorIdentifierProvider)
