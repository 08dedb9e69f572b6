"""
Tests for the gamereviews CLI
"""

import json

import pytest
from click.testing import CliRunner

from gamereviews.cli import cli, main
from gamereviews.store import DEFAULT_SEED


def test_schema_prints_sdl():
    result = CliRunner().invoke(cli, ["schema"])

    assert result.exit_code == 0
    assert "type Mutation" in result.output
    assert "deleteReview(id: ID!): [Review!]!" in result.output


def test_schema_to_file(tmp_path):
    output = tmp_path / "schema.graphql"

    result = CliRunner().invoke(cli, ["schema", "--output", str(output)])

    assert result.exit_code == 0
    assert "type Query" in output.read_text()


def test_dump_seed(tmp_path):
    output = tmp_path / "seed.json"

    result = CliRunner().invoke(cli, ["dump-seed", "-o", str(output)])

    assert result.exit_code == 0
    assert json.loads(output.read_text()) == DEFAULT_SEED


def test_check_seed_consistent(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(DEFAULT_SEED))

    result = CliRunner().invoke(cli, ["check-seed", str(path)])

    assert result.exit_code == 0
    assert "Seed data is consistent" in result.output


def test_check_seed_dangling_reference(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps({"reviews": [{"id": "1", "author_id": "1", "game_id": "1"}]}))

    result = CliRunner().invoke(cli, ["check-seed", str(path), "--output-format", "json"])

    assert result.exit_code == 1
    report = json.loads(result.output)
    assert report["valid"] is True
    assert "Review 1 references missing author 1" in report["warnings"]


def test_check_seed_invalid_file(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text("not json")

    result = CliRunner().invoke(cli, ["check-seed", str(path)])

    assert result.exit_code == 1


def test_main_runs_cli_group(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["gamereviews", "schema"])

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 0
    assert "type Query" in capsys.readouterr().out
