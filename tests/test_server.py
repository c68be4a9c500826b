import pytest
from fastapi.testclient import TestClient

from campsearch.server import app

from test_search import fake_api


@pytest.fixture
def client(monkeypatch, fake_api):
    monkeypatch.setattr("campsearch.search.pick_api", lambda choice: fake_api)
    return TestClient(app, raise_server_exceptions=False)


def test_search_endpoint(client):
    resp = client.get(
        "/search",
        params={
            "api": "recreation_gov",
            "campground": ["100", "999"],
            "weekday": 1,
            "nights": 3,
            "months": 1,
        },
    )
    assert resp.status_code == 200

    body = resp.json()
    assert body["isError"] is False
    assert body["args"] == {
        "api": "recreation_gov",
        "campgrounds": ["100", "999"],
        "startDayOfWeek": 1,
        "lengthOfStay": 3,
        "monthsToCheck": 1,
    }
    assert body["startDay"] == "Monday"
    assert body["results"][0]["campgroundName"] == "Campground 100"
    assert [u["name"] for u in body["results"][0]["results"]["2024-06-03"]] == [
        "001", "002"
    ]
    assert body["results"][1] == {
        "isError": True,
        "campgroundId": "999",
        "message": "No campground with id 999",
    }


def test_search_endpoint_reserve_ca_has_no_urls(client):
    resp = client.get(
        "/search",
        params={"api": "reserve_ca", "campground": "100", "weekday": 1, "nights": 3, "months": 1},
    )
    assert resp.status_code == 200
    units = resp.json()["results"][0]["results"]["2024-06-03"]
    assert units == [{"name": "001"}, {"name": "002"}]


def test_search_endpoint_default_api(client):
    resp = client.get(
        "/search",
        params={"campground": "100", "weekday": 1, "nights": 3, "months": 1},
    )
    assert resp.status_code == 200
    assert resp.json()["args"]["api"] == "recreation_gov"
    assert "url" in resp.json()["results"][0]["results"]["2024-06-03"][0]


@pytest.mark.parametrize("params", [
    {"campground": "100", "weekday": 8, "nights": 3, "months": 1},
    {"campground": "100", "weekday": 1, "nights": 0, "months": 1},
    {"campground": "100", "weekday": 1, "nights": 3, "months": 0},
    {"weekday": 1, "nights": 3, "months": 1},
    {"campground": "100", "weekday": "mon", "nights": 3, "months": 1},
])
def test_search_endpoint_bad_params(client, params):
    resp = client.get("/search", params=params)
    assert resp.status_code == 422


def test_search_endpoint_unexpected_error(client, monkeypatch):

    async def broken_search_many(*args, **kwargs):
        raise RuntimeError("kaput")

    monkeypatch.setattr("campsearch.server.search_many", broken_search_many)
    resp = client.get(
        "/search",
        params={"campground": "100", "weekday": 1, "nights": 3, "months": 1},
    )
    assert resp.status_code == 500
    assert resp.json() == {"isError": True, "message": "kaput"}
