"""Tests for the list command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from domfuzz.cli import cli


class TestListCommand:
    def test_table_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        for name in ("bitsquatting", "fat-finger", "tld-variations", "combosquatting"):
            assert name in result.output
        assert "lookalike (default)" in result.output

    def test_quiet_lists_ids(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "list"])
        assert result.exit_code == 0
        ids = result.stdout.split()
        assert len(ids) == 23
        assert "intl-tld" in ids

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "list"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["op"] == "list"
        assert data["data"]["default_bundle"] == "lookalike"
        assert "homoglyphs" in data["data"]["aliases"]
        by_id = {item["id"]: item for item in data["data"]["transformations"]}
        assert by_id["combosquatting"]["requires_dictionary"] is True
        assert "lookalike" in by_id["bitsquatting"]["bundles"]
