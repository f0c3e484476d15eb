"""Tests for the figwind CLI commands."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from figwind.cli.main import cli
from figwind.store import Database, DictionaryStore, run_migrations


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    return str(tmp_path / "figwind.db")


def _stored(db_path: str) -> dict[str, str]:
    database = Database(db_path)
    database.connect()
    run_migrations(database)
    try:
        return DictionaryStore(database).all()
    finally:
        database.close()


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "convert Figma CSS into Tailwind" in result.output

    def test_cli_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert "convert" in result.output
        assert "vars" in result.output
        assert "serve" in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "figwind" in result.output


# ---------------------------------------------------------------------------
# convert command
# ---------------------------------------------------------------------------


class TestConvertCommand:
    def test_convert_inline_css(self, runner: CliRunner, db_path: str) -> None:
        result = runner.invoke(
            cli,
            ["convert", "--db", db_path, "--css", "color: var(--Heading-Font, #272727);\nfont-size: 16px;"],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "text-[#272727] text-base"

    def test_convert_from_stdin(self, runner: CliRunner, db_path: str) -> None:
        result = runner.invoke(cli, ["convert", "--db", db_path], input="font-weight: 600;\n")
        assert result.exit_code == 0
        assert result.output.strip() == "font-semibold"

    def test_convert_from_file(self, runner: CliRunner, db_path: str, tmp_path: Path) -> None:
        css_file = tmp_path / "heading.css"
        css_file.write_text("border-radius: 4px;\n", encoding="utf-8")
        result = runner.invoke(cli, ["convert", "--db", db_path, "--file", str(css_file)])
        assert result.exit_code == 0
        assert result.output.strip() == "rounded"

    def test_convert_with_prefix_and_existing(self, runner: CliRunner, db_path: str) -> None:
        result = runner.invoke(
            cli,
            [
                "convert",
                "--db", db_path,
                "--css", "font-size: 14px;",
                "--prefix", "lg hover",
                "--existing", "flex",
            ],
        )
        assert result.exit_code == 0
        assert result.output.strip() == "flex lg:text-sm hover:text-sm"

    def test_convert_uses_dictionary(self, runner: CliRunner, db_path: str) -> None:
        runner.invoke(cli, ["vars", "add", "--db", db_path, "--", "--Heading-Font", "mackinac"])
        result = runner.invoke(
            cli,
            ["convert", "--db", db_path, "--css", "font-family: var(--Heading-Font, Serif);"],
        )
        assert result.output.strip() == "font-mackinac"


# ---------------------------------------------------------------------------
# vars commands
# ---------------------------------------------------------------------------


class TestVarsCommands:
    def test_add_and_list(self, runner: CliRunner, db_path: str) -> None:
        result = runner.invoke(
            cli, ["vars", "add", "--db", db_path, "--", "--Border-Medium", "border-gray-400"]
        )
        assert result.exit_code == 0, result.output
        assert "Added --Border-Medium -> border-gray-400" in result.output

        result = runner.invoke(cli, ["vars", "list", "--db", db_path])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"--Border-Medium": "border-gray-400"}

    def test_add_blank_value_fails(self, runner: CliRunner, db_path: str) -> None:
        result = runner.invoke(cli, ["vars", "add", "--db", db_path, "--", "--A", "  "])
        assert result.exit_code == 1
        assert _stored(db_path) == {}

    def test_remove(self, runner: CliRunner, db_path: str) -> None:
        runner.invoke(cli, ["vars", "add", "--db", db_path, "--", "--A", "a"])
        result = runner.invoke(cli, ["vars", "remove", "--db", db_path, "--", "--A"])
        assert result.exit_code == 0
        assert _stored(db_path) == {}

    def test_remove_missing(self, runner: CliRunner, db_path: str) -> None:
        result = runner.invoke(cli, ["vars", "remove", "--db", db_path, "--", "--Nope"])
        assert result.exit_code == 1

    def test_import(self, runner: CliRunner, db_path: str, tmp_path: Path) -> None:
        source = tmp_path / "vars.json"
        source.write_text(json.dumps({"--A": "a", "--B": "b", "--C": ""}), encoding="utf-8")
        result = runner.invoke(cli, ["vars", "import", "--db", db_path, str(source)])
        assert result.exit_code == 0
        assert "Imported 2 variables" in result.output
        assert _stored(db_path) == {"--A": "a", "--B": "b"}

    def test_import_rejects_non_object(self, runner: CliRunner, db_path: str, tmp_path: Path) -> None:
        source = tmp_path / "vars.json"
        source.write_text("[1, 2]", encoding="utf-8")
        result = runner.invoke(cli, ["vars", "import", "--db", db_path, str(source)])
        assert result.exit_code == 1

    def test_custom_storage_key(self, runner: CliRunner, db_path: str) -> None:
        runner.invoke(cli, ["vars", "add", "--db", db_path, "--key", "other", "--", "--A", "a"])
        result = runner.invoke(cli, ["vars", "list", "--db", db_path])
        assert json.loads(result.output) == {}


# ---------------------------------------------------------------------------
# serve command
# ---------------------------------------------------------------------------


class TestServeCommand:
    def test_serve_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["serve", "--help"])
        assert result.exit_code == 0
        assert "Start the figwind web API" in result.output
        assert "--host" in result.output
        assert "--port" in result.output
        assert "--db" in result.output
        assert "--debug" in result.output
