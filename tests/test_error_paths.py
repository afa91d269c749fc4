"""Error types and graceful degradation on malformed input.

The block parser has no error type of its own: malformed Markdown degrades
locally. Errors exist only for configuration and file I/O.
"""

import pytest

from mdpage import convert_body
from mdpage.errors import ConfigError, MdpageError, OutputError


class TestConfigError:
    def test_message_only(self) -> None:
        err = ConfigError("bad value")
        assert str(err) == "bad value"
        assert err.path is None

    def test_with_path(self) -> None:
        err = ConfigError("invalid JSON", "conf/config.json")
        assert str(err) == "conf/config.json: invalid JSON"
        assert err.message == "invalid JSON"

    def test_is_mdpage_error(self) -> None:
        assert isinstance(ConfigError("x"), MdpageError)


class TestOutputError:
    def test_with_path(self) -> None:
        err = OutputError("cannot write output", "out/a.html")
        assert "out/a.html" in str(err)
        assert "cannot write output" in str(err)

    def test_is_mdpage_error(self) -> None:
        assert isinstance(OutputError("x"), MdpageError)


class TestMalformedInputDegrades:
    """None of these raise; each degrades to a sensible fragment."""

    @pytest.mark.parametrize(
        "source",
        [
            "```",
            "```\n",
            "> ```",
            "|",
            "|---|",
            "| a |\n|---|\n| 1 | 2 |",
            ">",
            ">>>",
            "| a | b |\n|:|:|",
            "\n\n\n",
            "````\n```",
        ],
    )
    def test_never_raises(self, source: str) -> None:
        assert isinstance(convert_body(source), str)

    def test_bare_colon_cells_are_not_alignment(self) -> None:
        html = convert_body("| a | b |\n|:|:|")
        assert "<table" not in html
