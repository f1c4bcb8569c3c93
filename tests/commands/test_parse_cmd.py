"""Tests for the ``mdfront parse`` command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from mdfront.cli import cli

ARTICLE = """#####
date = "2025-11-21"
author = "Jane Doe"
show_demo = true

[[references]]
title = "Rust Book"
url = "https://doc.rust-lang.org/book/"
#####

# Lifetimes

Borrowed values must not outlive their owner.
"""


@pytest.fixture
def article(tmp_path: Path) -> Path:
    path = tmp_path / "articles" / "rust" / "lifetimes.md"
    path.parent.mkdir(parents=True)
    path.write_text(ARTICLE, encoding="utf-8")
    return path


@pytest.mark.usefixtures("_isolated_cwd")
class TestParseCommand:
    def test_human_output(self, cli_runner: CliRunner, article: Path) -> None:
        result = cli_runner.invoke(cli, ["parse", str(article)])
        assert result.exit_code == 0, result.output
        assert "title: Lifetimes" in result.stdout
        assert "author: Jane Doe" in result.stdout
        assert "primary_series: rust" in result.stdout
        assert "Rust Book <https://doc.rust-lang.org/book/>" in result.stdout
        assert "Borrowed values must not outlive their owner." in result.stdout

    def test_json_output(self, cli_runner: CliRunner, article: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", str(article)])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["ok"] is True
        assert payload["op"] == "parse"
        meta = payload["data"]["metadata"]
        assert meta["date"] == "2025-11-21"
        assert meta["show_demo"] is True
        assert meta["show_references"] is True
        assert meta["references"][0]["description"] is None
        assert payload["data"]["content"].startswith("# Lifetimes")

    def test_relative_path_uses_default_base_dir(
        self, cli_runner: CliRunner, article: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "articles/rust/lifetimes.md"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["data"]["metadata"]["primary_series"] == "rust"

    def test_base_dir_option(self, cli_runner: CliRunner, article: Path, tmp_path: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "parse", str(article), "--base-dir", str(tmp_path)]
        )
        assert json.loads(result.stdout)["data"]["metadata"]["primary_series"] == "articles/rust"

    def test_no_content(self, cli_runner: CliRunner, article: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", str(article), "--no-content"])
        assert json.loads(result.stdout)["data"]["content"] is None

    def test_quiet(self, cli_runner: CliRunner, article: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "parse", str(article)])
        assert result.exit_code == 0
        assert result.stdout.strip() == "OK: parse"

    def test_plain_file_warns_on_stderr(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        plain = tmp_path / "plain.md"
        plain.write_text("# Plain\n", encoding="utf-8")
        result = cli_runner.invoke(cli, ["parse", str(plain)])
        assert result.exit_code == 0
        assert "metadata: none" in result.stdout
        assert "WARNING: No front matter block found" in result.stderr

    def test_missing_file_exits_1(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["parse", str(tmp_path / "nope.md")])
        assert result.exit_code == 1
        assert "File not found" in result.stderr

    def test_config_base_dir(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "content" / "go" / "channels.md"
        path.parent.mkdir(parents=True)
        path.write_text(ARTICLE, encoding="utf-8")
        config = tmp_path / "blog.toml"
        config.write_text('[parser]\nbase_dir = "content"\n')
        result = cli_runner.invoke(cli, ["--json", "-c", str(config), "parse", str(path)])
        assert json.loads(result.stdout)["data"]["metadata"]["primary_series"] == "go"

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "--examples"])
        assert result.exit_code == 0
        assert "mdfront parse articles/rust/ownership.md" in result.stdout
