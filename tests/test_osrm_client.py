from unittest import mock

import pytest
import requests

from routing.osrm_client import OSRMClient, OSRMError


def _session_returning(payload=None, status_code=200, json_error=None):
    response = mock.Mock(status_code=status_code)
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    session = mock.Mock(spec=requests.Session)
    session.get.return_value = response
    return session


def test_requires_base_url():
    with pytest.raises(ValueError):
        OSRMClient(base_url="")


def test_format_coordinates_swaps_to_lon_lat():
    assert OSRMClient.format_coordinates([(12.97, 77.59), (12.95, 77.58)]) == "77.59,12.97;77.58,12.95"


def test_compute_route_builds_url_and_normalizes():
    session = _session_returning({
        "code": "Ok",
        "routes": [
            {"distance": 3612.4, "duration": 540.1, "legs": []},
            {"distance": 3527.0, "duration": 600.0, "legs": []},
        ],
    })
    client = OSRMClient(base_url="http://osrm.local/", timeout=3, session=session)

    routes = client.compute_route([(12.9734, 77.5910), (12.9527, 77.5848)], alternatives=True)

    assert routes == [
        {"distance": 3612.4, "duration": 540.1},
        {"distance": 3527.0, "duration": 600.0},
    ]
    session.get.assert_called_once_with(
        "http://osrm.local/route/v1/driving/77.591,12.9734;77.5848,12.9527",
        params={"overview": "false", "alternatives": "true"},
        timeout=3,
    )


def test_compute_route_needs_two_points():
    client = OSRMClient(base_url="http://osrm.local", session=_session_returning({}))
    with pytest.raises(ValueError):
        client.compute_route([(0.0, 0.0)])


def test_osrm_error_code_raises():
    session = _session_returning({"code": "NoRoute", "message": "Impossible route between points"}, status_code=400)
    client = OSRMClient(base_url="http://osrm.local", session=session)

    with pytest.raises(OSRMError, match="Impossible route"):
        client.compute_route([(0.0, 0.0), (1.0, 1.0)])


def test_transport_failure_raises():
    session = mock.Mock(spec=requests.Session)
    session.get.side_effect = requests.Timeout("read timed out")
    client = OSRMClient(base_url="http://osrm.local", session=session)

    with pytest.raises(OSRMError) as excinfo:
        client.compute_route([(0.0, 0.0), (1.0, 1.0)])
    assert isinstance(excinfo.value.__cause__, requests.Timeout)


def test_non_json_response_raises():
    session = _session_returning(status_code=502, json_error=ValueError("Expecting value"))
    client = OSRMClient(base_url="http://osrm.local", session=session)

    with pytest.raises(OSRMError, match="HTTP 502"):
        client.compute_route([(0.0, 0.0), (1.0, 1.0)])


def test_close_releases_session():
    session = _session_returning({})
    OSRMClient(base_url="http://osrm.local", session=session).close()
    session.close.assert_called_once_with()


def test_non_object_json_raises():
    session = _session_returning(["not", "an", "object"])
    client = OSRMClient(base_url="http://osrm.local", session=session)

    with pytest.raises(OSRMError, match="unexpected response"):
        client.compute_route([(0.0, 0.0), (1.0, 1.0)])
