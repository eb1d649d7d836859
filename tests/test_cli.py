"""Tests for the CLI."""

import json

import bcrypt
import pytest
from click.testing import CliRunner

from marche_covid import cli as cli_module


@pytest.fixture
def cli_store(store, monkeypatch):
    monkeypatch.setattr(cli_module, "get_store", lambda: store)
    return store


def test_hash_password():
    """Test bcrypt hash generation."""
    result = CliRunner().invoke(cli_module.cli, ["hash-password", "--password", "secret"])
    assert result.exit_code == 0
    assert bcrypt.checkpw(b"secret", result.output.strip().encode("utf-8"))


def test_stats(cli_store):
    """Test printing a statistic."""
    result = CliRunner().invoke(cli_module.cli, ["stats", "positivity-rate", "2020-03-11", "2020-03-11"])
    assert result.exit_code == 0
    assert json.loads(result.output) == [{"date": "2020-03-11", "positivity_rate": 30.0}]


def test_stats_rejects_reversed_range(cli_store):
    """Test range validation in the CLI."""
    result = CliRunner().invoke(cli_module.cli, ["stats", "new-positives", "2020-03-12", "2020-03-10"])
    assert result.exit_code != 0


def test_latest(cli_store):
    """Test showing the latest report."""
    result = CliRunner().invoke(cli_module.cli, ["latest"])
    assert result.exit_code == 0
    assert json.loads(result.output)["data"] == "2020-03-12T18:00:00"


def test_import_reports_skips_existing_days(cli_store, tmp_path):
    """Test merging a JSON document into the store."""
    source = tmp_path / "import.json"
    source.write_text(
        json.dumps(
            [
                {"data": "2020-03-12T18:00:00", "totale_casi": 1},
                {"data": "2020-03-13T18:00:00", "totale_casi": 120},
            ]
        )
    )
    result = CliRunner().invoke(cli_module.cli, ["import-reports", str(source)])
    assert result.exit_code == 0
    assert "Imported 1 of 2" in result.output
    assert cli_store.latest().total_cases == 120
