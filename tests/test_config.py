"""Tests for urlformat config parsing (urlformat._config).

Validates the dict → config type conversion and YAML file loading.
"""

from pathlib import Path

import pytest

from urlformat import (
    ConfigParseError,
    HandlerConfig,
    HexMode,
    Matched,
    MatchOptions,
    MatchPolicy,
    Narrowing,
    ShapeError,
    load_handler_config,
    parse_handler_config,
    parse_options,
)
from urlformat.testing import CallRecorder


class TestParseHandlerConfig:
    """Tests for parse_handler_config()."""

    def test_minimal(self) -> None:
        config = parse_handler_config({"directive": "about"})
        assert config == HandlerConfig(directive="about")
        assert config.options == MatchOptions()

    def test_full(self) -> None:
        config = parse_handler_config(
            {
                "directive": "/u/%u",
                "shape": ["uint32"],
                "options": {"policy": "lenient", "hex_mode": "base16", "narrowing": "checked"},
            }
        )
        assert config.shape == ("uint32",)
        assert config.options == MatchOptions(
            policy=MatchPolicy.LENIENT,
            hex_mode=HexMode.BASE16,
            narrowing=Narrowing.CHECKED,
        )

    def test_not_a_dict(self) -> None:
        with pytest.raises(ConfigParseError, match="expected dict"):
            parse_handler_config(["directive"])  # type: ignore[arg-type]

    def test_missing_directive(self) -> None:
        with pytest.raises(ConfigParseError, match="directive"):
            parse_handler_config({"shape": []})

    def test_directive_not_string(self) -> None:
        with pytest.raises(ConfigParseError, match="must be a string"):
            parse_handler_config({"directive": 42})

    def test_shape_not_list(self) -> None:
        with pytest.raises(ConfigParseError, match="'shape' must be a list"):
            parse_handler_config({"directive": "%d", "shape": "int"})

    def test_shape_entry_not_string(self) -> None:
        with pytest.raises(ConfigParseError, match="shape entries"):
            parse_handler_config({"directive": "%d", "shape": [1]})


class TestParseOptions:
    """Tests for parse_options()."""

    def test_none_is_default(self) -> None:
        assert parse_options(None) == MatchOptions()

    def test_partial(self) -> None:
        options = parse_options({"policy": "LENIENT"})
        assert options.policy is MatchPolicy.LENIENT
        assert options.hex_mode is HexMode.LEGACY
        assert options.narrowing is Narrowing.WRAP

    def test_not_a_dict(self) -> None:
        with pytest.raises(ConfigParseError, match="options must be a dict"):
            parse_options("strict")  # type: ignore[arg-type]

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigParseError, match="unknown option"):
            parse_options({"mode": "strict"})

    def test_bad_value(self) -> None:
        with pytest.raises(ConfigParseError, match="'hex_mode' must be one of"):
            parse_options({"hex_mode": "octal"})

    def test_value_not_string(self) -> None:
        with pytest.raises(ConfigParseError, match="'policy' must be a string"):
            parse_options({"policy": True})


class TestHandlerConfig:
    def test_compile_validates(self) -> None:
        with pytest.raises(ShapeError):
            HandlerConfig(directive="%d-%d", shape=("int",)).compile()

    def test_compile_unknown_type(self) -> None:
        with pytest.raises(ShapeError):
            HandlerConfig(directive="%d", shape=("integer",)).compile()

    def test_bind(self) -> None:
        recorder = CallRecorder()
        handler = HandlerConfig(directive="/x/%d", shape=("int32",)).bind(recorder)
        handler.try_handle("/x/4")
        assert recorder.calls == [(4,)]

    def test_bind_carries_options(self) -> None:
        config = HandlerConfig(
            directive="%x",
            shape=("int64",),
            options=MatchOptions(hex_mode=HexMode.BASE16),
        )
        assert config.bind(CallRecorder()).match("1f") == Matched((31,))


class TestLoadHandlerConfig:
    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "handler.yaml"
        path.write_text(
            'directive: "/users/%d"\n'
            "shape: [int32]\n"
            "options:\n"
            "  narrowing: checked\n"
        )
        config = load_handler_config(path)
        assert config.directive == "/users/%d"
        assert config.shape == ("int32",)
        assert config.options.narrowing is Narrowing.CHECKED

    def test_load_str_path(self, tmp_path: Path) -> None:
        path = tmp_path / "handler.yaml"
        path.write_text('directive: "about"\n')
        assert load_handler_config(str(path)).directive == "about"

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("directive: [unclosed\n")
        with pytest.raises(ConfigParseError, match="invalid YAML"):
            load_handler_config(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ConfigParseError, match="expected dict"):
            load_handler_config(path)
