import json
import logging

import pytest
from typer.testing import CliRunner

from campsearch.cli import app

from test_search import fake_api

runner = CliRunner()


@pytest.fixture(autouse=True)
def patch_api(monkeypatch, fake_api):
    monkeypatch.setattr("campsearch.search.pick_api", lambda choice: fake_api)


def test_search_json():
    result = runner.invoke(
        app, ["search", "100", "--day", "mon", "--nights", "3", "--months", "1"]
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "campgroundName": "Campground 100",
        "results": {
            "2024-06-03": [
                {"name": "001", "url": "https://example.com/campsites/001"},
                {"name": "002", "url": "https://example.com/campsites/002"},
            ],
        },
    }


def test_search_reserve_ca():
    result = runner.invoke(
        app, ["search", "100", "--api", "reserve_ca", "-d", "1", "-n", "3", "-m", "1"]
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout)["results"]["2024-06-03"] == [
        {"name": "001"}, {"name": "002"}
    ]


def test_search_table():
    result = runner.invoke(
        app, ["search", "100", "--day", "mon", "--nights", "3", "--table"]
    )
    assert result.exit_code == 0
    assert "Campground 100" in result.output
    assert "2024-06-03" in result.output


def test_search_not_found():
    result = runner.invoke(app, ["search", "999", "--day", "mon", "--nights", "3"])
    assert result.exit_code == 1
    assert result.stdout == ""
    assert "No campground with id 999" in result.stderr


def test_verbose_logs_to_stderr():
    result = runner.invoke(
        app, ["--verbose", "search", "100", "--day", "mon", "--nights", "3"]
    )
    assert result.exit_code == 0
    assert logging.getLogger().level == logging.DEBUG
    assert "2 of 3 campsites match" in result.stderr
    assert json.loads(result.stdout)["campgroundName"] == "Campground 100"


def test_quiet_by_default():
    result = runner.invoke(app, ["search", "100", "--day", "mon", "--nights", "3"])
    assert result.exit_code == 0
    assert logging.getLogger().level == logging.WARNING
    assert result.stderr == ""
