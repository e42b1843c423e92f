from typing import List

import pytest
import requests
from prometheus_client import REGISTRY

from police_api.errors import DecodeError, HttpError, NotFoundError, TransportError
from police_api.http_client import Endpoint, build_url, dispatch
from police_api.models import Force

from conftest import BASE, FakeResponse, FakeSession


def _forces_endpoint(**params):
    return Endpoint(path="forces", shape=List[Force], params=params, name="forces")


def test_build_url_joins_once():
    assert build_url("https://x/api/", "/forces") == "https://x/api/forces"
    assert build_url("https://x/api", "forces") == "https://x/api/forces"


def test_dispatch_decodes_list():
    payload = [{"id": "met", "name": "Metropolitan Police"}, {"id": "kent", "name": "Kent Police"}]
    session = FakeSession({"forces": FakeResponse(200, payload)})
    forces = dispatch(session, BASE, _forces_endpoint())
    assert [(f.id, f.name) for f in forces] == [(p["id"], p["name"]) for p in payload]
    assert session.calls[0]["headers"] == {"Accept": "application/json"}


def test_dispatch_drops_unset_params():
    session = FakeSession({"forces": FakeResponse(200, [])})
    dispatch(session, BASE, _forces_endpoint(date=None, force="kent"))
    assert session.calls[0]["params"] == {"force": "kent"}


def test_dispatch_no_timeout_unless_configured():
    session = FakeSession({"forces": FakeResponse(200, [])})
    dispatch(session, BASE, _forces_endpoint())
    dispatch(session, BASE, _forces_endpoint(), timeout=5.0)
    assert "timeout" not in session.calls[0]
    assert session.calls[1]["timeout"] == 5.0


def test_dispatch_empty_list_is_success():
    session = FakeSession({"forces": FakeResponse(200, [])})
    assert dispatch(session, BASE, _forces_endpoint()) == []


def test_dispatch_404_is_not_found():
    session = FakeSession({"forces": FakeResponse(404, text="Not Found")})
    with pytest.raises(NotFoundError) as ei:
        dispatch(session, BASE, _forces_endpoint())
    assert ei.value.path == "forces"
    assert not isinstance(ei.value, HttpError)


@pytest.mark.parametrize("status,body", [(400, "Bad Request"), (429, "Rate limit exceeded"), (500, ""), (503, "busy")])
def test_dispatch_other_status_is_http_error(status, body):
    session = FakeSession({"forces": FakeResponse(status, text=body)})
    with pytest.raises(HttpError) as ei:
        dispatch(session, BASE, _forces_endpoint())
    assert ei.value.status == status
    assert ei.value.body == (body or None)


def test_dispatch_invalid_json_is_decode_error():
    session = FakeSession({"forces": FakeResponse(200, text="<html>oops</html>")})
    with pytest.raises(DecodeError) as ei:
        dispatch(session, BASE, _forces_endpoint())
    assert ei.value.body == "<html>oops</html>"
    assert isinstance(ei.value.cause, ValueError)


def test_dispatch_schema_mismatch_is_decode_error():
    session = FakeSession({"forces": FakeResponse(200, [{"id": "met"}])})
    with pytest.raises(DecodeError):
        dispatch(session, BASE, _forces_endpoint())


def test_dispatch_wrong_container_is_decode_error():
    session = FakeSession({"forces": FakeResponse(200, {"id": "met", "name": "Met"})})
    with pytest.raises(DecodeError):
        dispatch(session, BASE, _forces_endpoint())


@pytest.mark.parametrize("exc", [
    requests.ConnectionError("refused"),
    requests.Timeout("slow"),
    requests.exceptions.SSLError("bad cert"),
])
def test_dispatch_transport_failure(monkeypatch, exc):
    session = requests.Session()

    def boom(*_args, **_kwargs):
        raise exc

    monkeypatch.setattr(session, "get", boom)
    with pytest.raises(TransportError) as ei:
        dispatch(session, BASE, _forces_endpoint())
    assert ei.value.__cause__ is exc
    assert ei.value.cause is exc


def test_dispatch_records_metrics():
    labels = {"endpoint": "forces", "outcome": "200"}
    before = REGISTRY.get_sample_value("police_api_calls_total", labels) or 0.0
    session = FakeSession({"forces": FakeResponse(200, [])})
    dispatch(session, BASE, _forces_endpoint())
    assert REGISTRY.get_sample_value("police_api_calls_total", labels) == before + 1


def test_render_prometheus_exposes_api_metrics():
    from police_api.metrics import content_type, render_prometheus

    session = FakeSession({"forces": FakeResponse(200, [])})
    dispatch(session, BASE, _forces_endpoint())
    text = render_prometheus().decode("utf-8")
    assert "police_api_calls_total" in text
    assert "police_api_latency_seconds" in text
    assert content_type().startswith("text/plain")
