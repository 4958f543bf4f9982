from __future__ import annotations

import json

import pytest
import requests

from api import weather
from api.weather import ForecastLoadError, fetch_forecast


def make_response(status: int, body: bytes, reason: str = "OK") -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    response._content = body
    response.url = "https://api.bmkg.go.id/publik/prakiraan-cuaca?adm4=31.71.03.1001"
    return response


@pytest.fixture
def captured_get(monkeypatch):
    calls = []

    def install(response=None, error=None):
        def fake_get(url, **kwargs):
            calls.append((url, kwargs))
            if error is not None:
                raise error
            return response

        monkeypatch.setattr(weather.requests, "get", fake_get)
        return calls

    return install


def test_fetch_forecast_returns_decoded_json(captured_get, bmkg_payload):
    calls = captured_get(make_response(200, json.dumps(bmkg_payload).encode()))

    payload = fetch_forecast("31.71.03.1001", url="https://example.test/forecast", timeout=3)

    assert payload == bmkg_payload
    assert len(calls) == 1
    url, kwargs = calls[0]
    assert url == "https://example.test/forecast"
    assert kwargs["params"] == {"adm4": "31.71.03.1001"}
    assert kwargs["timeout"] == 3


def test_fetch_forecast_uses_configured_defaults(captured_get):
    calls = captured_get(make_response(200, b"{}"))

    fetch_forecast()

    url, kwargs = calls[0]
    assert url == weather.BMKG_API_URL
    assert kwargs["params"] == {"adm4": weather.BMKG_ADM4}
    assert kwargs["timeout"] == weather.REQUEST_TIMEOUT


@pytest.mark.parametrize("status, reason", [(404, "Not Found"), (500, "Internal Server Error"), (503, "Service Unavailable")])
def test_fetch_forecast_non_success_status_raises(captured_get, status, reason):
    calls = captured_get(make_response(status, b"error", reason=reason))

    with pytest.raises(ForecastLoadError) as excinfo:
        fetch_forecast("31.71.03.1001")

    assert excinfo.value.status == status
    assert str(status) in str(excinfo.value)
    assert len(calls) == 1


def test_fetch_forecast_network_failure_raises(captured_get):
    calls = captured_get(error=requests.ConnectionError("connection refused"))

    with pytest.raises(ForecastLoadError) as excinfo:
        fetch_forecast("31.71.03.1001")

    assert excinfo.value.status is None
    assert "connection refused" in str(excinfo.value)
    assert len(calls) == 1


def test_fetch_forecast_non_json_body_is_none(captured_get):
    captured_get(make_response(200, b"<html>maintenance</html>"))

    assert fetch_forecast("31.71.03.1001") is None
