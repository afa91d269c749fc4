"""Tests for the mdpage command-line interface."""

import json
import logging
from pathlib import Path

import pytest

from mdpage.cli import build_parser, main, resolve_config
from mdpage.config import AppConfig


@pytest.fixture
def notes(tmp_path: Path) -> Path:
    path = tmp_path / "notes.md"
    path.write_text("# Notes\n\n```py\nprint(1)\n```\n", encoding="utf-8")
    return path


class TestParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args(["a.md"])
        assert args.files == ["a.md"]
        assert args.input == []
        assert args.output is None
        assert args.config is None
        assert args.jobs == 1
        assert args.verbose is False

    def test_repeated_input(self) -> None:
        args = build_parser().parse_args(["-i", "a.md", "--input", "b.md"])
        assert args.input == ["a.md", "b.md"]


class TestMain:
    def test_converts_file(self, notes: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        out = tmp_path / "out"
        assert main([str(notes), "-o", str(out)]) == 0

        target = out / "notes.html"
        assert capsys.readouterr().out.strip() == str(target)
        page = target.read_text(encoding="utf-8")
        assert '<pre><code class="language-py">print(1)</code></pre>' in page

    def test_input_flag_and_positional_merge(self, notes: Path, tmp_path: Path) -> None:
        other = tmp_path / "other.md"
        other.write_text("text", encoding="utf-8")
        out = tmp_path / "out"

        assert main(["-i", str(notes), str(other), "-o", str(out)]) == 0
        assert (out / "notes.html").is_file()
        assert (out / "other.html").is_file()

    def test_no_inputs_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_jobs_must_be_positive(self, notes: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(notes), "--jobs", "0"])
        assert exc_info.value.code == 2

    def test_missing_file_fails(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="mdpage"):
            code = main([str(tmp_path / "missing.md"), "-o", str(tmp_path / "out")])
        assert code == 1
        assert "missing.md" in caplog.text

    def test_one_failure_does_not_stop_others(self, notes: Path, tmp_path: Path) -> None:
        out = tmp_path / "out"
        code = main([str(tmp_path / "missing.md"), str(notes), "-o", str(out)])
        assert code == 1
        assert (out / "notes.html").is_file()

    def test_parallel_jobs(self, tmp_path: Path) -> None:
        sources = []
        for i in range(6):
            path = tmp_path / f"doc{i}.md"
            path.write_text(f"| n |\n|---:|\n| {i} |", encoding="utf-8")
            sources.append(str(path))
        out = tmp_path / "out"

        assert main([*sources, "-j", "3", "-o", str(out)]) == 0
        for i in range(6):
            page = (out / f"doc{i}.html").read_text(encoding="utf-8")
            assert f'<td align="right">{i}</td>' in page

    def test_config_output_dir(self, notes: Path, tmp_path: Path) -> None:
        config = tmp_path / "conf" / "config.json"
        config.parent.mkdir()
        config.write_text(json.dumps({"custom": {"outputDir": "site"}}), encoding="utf-8")

        assert main([str(notes), "-c", str(config)]) == 0
        assert (config.parent.resolve() / "site" / "notes.html").is_file()

    def test_output_flag_overrides_config(self, notes: Path, tmp_path: Path) -> None:
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"custom": {"outputDir": "site"}}), encoding="utf-8")
        out = tmp_path / "explicit"

        assert main([str(notes), "-c", str(config), "-o", str(out)]) == 0
        assert (out / "notes.html").is_file()
        assert not (tmp_path / "site").exists()

    def test_config_render_section(self, notes: Path, tmp_path: Path) -> None:
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"render": {"highlight": False}}), encoding="utf-8")
        out = tmp_path / "out"

        assert main([str(notes), "-c", str(config), "-o", str(out)]) == 0
        assert "hljs" not in (out / "notes.html").read_text(encoding="utf-8")

    def test_bad_config_fails(self, notes: Path, tmp_path: Path) -> None:
        config = tmp_path / "config.json"
        config.write_text("{oops", encoding="utf-8")
        assert main([str(notes), "-c", str(config)]) == 1

    def test_default_config_in_cwd(
        self, notes: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "config.json").write_text(
            json.dumps({"custom": {"outputDir": "from-cwd"}}), encoding="utf-8"
        )
        monkeypatch.chdir(tmp_path)

        assert main([str(notes)]) == 0
        assert (tmp_path / "from-cwd" / "notes.html").is_file()


class TestResolveConfig:
    def test_no_default_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert resolve_config(None) == AppConfig()

    def test_explicit_path(self, tmp_path: Path) -> None:
        config = tmp_path / "c.json"
        config.write_text('{"render": {"hard_wrap": true}}', encoding="utf-8")
        assert resolve_config(str(config)).render.hard_wrap is True
