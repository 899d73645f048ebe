from __future__ import annotations

import pytest

from apple_model_names.device import reset_default_device


class FakeProvider:
    def __init__(self, identifier: str, simulated: bool = False) -> None:
        self.identifier = identifier
        self.simulated = simulated
        self.calls = 0

    def current_identifier(self) -> str:
        self.calls += 1
        return self.identifier


@pytest.fixture
def fake_provider():
    return FakeProvider


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in (
        "APPLE_MODELS_RUNTIME",
        "APPLE_MODELS_SIMULATOR_ENV_VAR",
        "APPLE_MODELS_SIMULATOR_SUFFIX",
        "APPLE_MODELS_LOG_LEVEL",
        "SIMULATOR_MODEL_IDENTIFIER",
    ):
        monkeypatch.delenv(var, raising=False)
    reset_default_device()
    yield
    reset_default_device()
