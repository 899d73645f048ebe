from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from apple_model_names.catalog.model_def import MODEL_NAMES
from apple_model_names.device import Device
from apple_model_names.platform.provider import SimulatorIdentifierProvider
from apple_model_names.web.app import create_app


@pytest.fixture
def make_client():
    def _make(provider):
        app = create_app()
        app.state.device = Device(provider)
        return TestClient(app)
    return _make


def test_health(make_client, fake_provider):
    with make_client(fake_provider("iPhone16,1")) as client:
        assert client.get("/health").json() == {"ok": True}
        assert client.get("/ready").json() == {"ready": True}


def test_current_device_simulated(make_client, fake_provider):
    with make_client(fake_provider("iPhone16,1", simulated=True)) as client:
        r = client.get("/device")
    assert r.status_code == 200
    assert r.json() == {
        "identifier": "iPhone16,1",
        "model_name": "iPhone 15 Pro Simulator",
        "family": "iPhone",
        "simulated": True,
        "runtime": "auto",
    }


def test_current_device_unknown(make_client, fake_provider):
    with make_client(fake_provider("x86_64")) as client:
        body = client.get("/device").json()
    assert body["model_name"] == "x86_64"
    assert body["family"] is None
    assert body["simulated"] is False


def test_current_device_reports_configured_runtime(monkeypatch, make_client, fake_provider):
    monkeypatch.setenv("APPLE_MODELS_RUNTIME", "device")
    with make_client(fake_provider("iPad16,6")) as client:
        body = client.get("/device").json()
    assert body["runtime"] == "device"
    assert body["model_name"] == "iPad Pro 13-inch (M4)"


def test_current_device_reads_identifier_once(make_client, fake_provider):
    provider = fake_provider("Watch7,12", simulated=True)
    with make_client(provider) as client:
        body = client.get("/device").json()
    assert provider.calls == 1
    assert body["model_name"] == "Apple Watch Ultra 3 Simulator"
    assert body["family"] == "Watch"


def test_misconfigured_simulator(make_client):
    with make_client(SimulatorIdentifierProvider(environ={})) as client:
        assert client.get("/device").status_code == 500
        assert client.get("/ready").status_code == 503


def test_get_model(make_client, fake_provider):
    with make_client(fake_provider("iPhone16,1", simulated=True)) as client:
        r = client.get("/models/iPhone16,1")
        missing = client.get("/models/UnknownDevice1,1")
    assert r.status_code == 200
    assert r.json() == {"identifier": "iPhone16,1", "model_name": "iPhone 15 Pro", "family": "iPhone"}
    assert missing.status_code == 404


def test_list_models(make_client, fake_provider):
    with make_client(fake_provider("iPhone16,1")) as client:
        everything = client.get("/models").json()
        vision = client.get("/models", params={"family": "RealityDevice"}).json()
        bad = client.get("/models", params={"family": "Mac"})
    assert len(everything) == len(MODEL_NAMES)
    assert vision[0] == {
        "identifier": "RealityDevice14,1",
        "model_name": "Apple Vision Pro",
        "family": "RealityDevice",
    }
    assert bad.status_code == 422
