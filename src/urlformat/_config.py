"""Config types for building handlers from dicts or YAML files.

Config-driven construction path:
  dict → parse_handler_config() → HandlerConfig → .compile() → Pattern
                                                → .bind(cb) → FormatHandler

Expected shape::

    directive: "item-%i-end"
    shape: [int32]
    options:
      policy: strict      # strict | lenient
      hex_mode: legacy    # legacy | base16
      narrowing: wrap     # wrap | checked
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from urlformat._handler import FormatHandler
from urlformat._kinds import HexMode
from urlformat._matcher import DEFAULT_OPTIONS, MatchOptions, MatchPolicy
from urlformat._shape import Narrowing
from urlformat._tokenizer import tokenize

if TYPE_CHECKING:
    from urlformat._handler import Callback
    from urlformat._pattern import Pattern


class ConfigParseError(Exception):
    """Error parsing a config dict into config types."""


@dataclass(frozen=True, slots=True)
class HandlerConfig:
    """A directive, its shape entries, and match options."""

    directive: str
    shape: tuple[str, ...] = ()
    options: MatchOptions = DEFAULT_OPTIONS

    def compile(self) -> Pattern:
        """Tokenize and validate.

        Raises:
            ShapeError: If the shape is unknown or does not fit the directive.
        """
        pattern = tokenize(self.directive, self.shape)
        pattern.validate()
        return pattern

    def bind(self, callback: Callback) -> FormatHandler:
        return FormatHandler(self.compile(), callback, self.options)


def parse_options(data: dict[str, Any] | None) -> MatchOptions:
    """Parse an options dict. Missing keys take their defaults.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if data is None:
        return DEFAULT_OPTIONS
    if not isinstance(data, dict):
        msg = f"options must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    unknown = sorted(set(data) - {"policy", "hex_mode", "narrowing"})
    if unknown:
        msg = f"unknown option(s): {unknown}"
        raise ConfigParseError(msg)

    return MatchOptions(
        policy=_parse_enum(data, "policy", MatchPolicy, DEFAULT_OPTIONS.policy),
        hex_mode=_parse_enum(data, "hex_mode", HexMode, DEFAULT_OPTIONS.hex_mode),
        narrowing=_parse_enum(data, "narrowing", Narrowing, DEFAULT_OPTIONS.narrowing),
    )


def parse_handler_config(data: dict[str, Any]) -> HandlerConfig:
    """Parse a dict into a HandlerConfig.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    directive = data.get("directive")
    if directive is None:
        msg = "missing required field 'directive'"
        raise ConfigParseError(msg)
    if not isinstance(directive, str):
        msg = f"'directive' must be a string, got {type(directive).__name__}"
        raise ConfigParseError(msg)

    raw_shape = data.get("shape", [])
    if not isinstance(raw_shape, list):
        msg = f"'shape' must be a list, got {type(raw_shape).__name__}"
        raise ConfigParseError(msg)
    for entry in raw_shape:
        if not isinstance(entry, str):
            msg = f"shape entries must be strings, got {type(entry).__name__}"
            raise ConfigParseError(msg)

    return HandlerConfig(
        directive=directive,
        shape=tuple(raw_shape),
        options=parse_options(data.get("options")),
    )


def load_handler_config(path: str | Path) -> HandlerConfig:
    """Read a YAML file holding a single handler config.

    Raises:
        ConfigParseError: If the file is not valid YAML or is malformed.
    """
    path = Path(path)
    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        msg = f"{path}: invalid YAML: {e}"
        raise ConfigParseError(msg) from e
    return parse_handler_config(data)


def _parse_enum[E: enum.Enum](data: dict[str, Any], key: str, enum_type: type[E], default: E) -> E:
    if key not in data:
        return default
    raw = data[key]
    if not isinstance(raw, str):
        msg = f"'{key}' must be a string, got {type(raw).__name__}"
        raise ConfigParseError(msg)
    try:
        return enum_type(raw.lower())
    except ValueError:
        expected = sorted(m.value for m in enum_type)
        msg = f"'{key}' must be one of {expected}, got {raw!r}"
        raise ConfigParseError(msg) from None
