"""urlformat: printf-style patterns that destructure strings into typed values.

All public types are exported from this module for flat imports:

    from urlformat import tokenize, match, url_format, Matched, NoMatch
"""

__version__ = "0.1.0"

# Config types, see urlformat._config for details
from urlformat._config import (
    ConfigParseError,
    HandlerConfig,
    load_handler_config,
    parse_handler_config,
    parse_options,
)

# Handlers
from urlformat._handler import (
    Callback,
    FormatHandler,
    RouteHandler,
    register,
    url_format,
)

# Value kinds
from urlformat._kinds import HexMode, Value, ValueKind

# Matching
from urlformat._matcher import (
    DEFAULT_OPTIONS,
    Matched,
    MatchOptions,
    MatchPolicy,
    MatchResult,
    NoMatch,
    NoMatchReason,
    match,
    segment,
)
from urlformat._pattern import Pattern

# Shapes and construction errors
from urlformat._shape import (
    FormatError,
    Narrowing,
    ShapeError,
    ShapeType,
    UnknownShapeTypeError,
    resolve_shape,
)
from urlformat._tokenizer import SPECIFIERS, tokenize, tokenize_directive
from urlformat._tokens import Literal, Placeholder, Token

__all__ = [
    # Kinds
    "ValueKind",
    "HexMode",
    "Value",
    # Tokens
    "Literal",
    "Placeholder",
    "Token",
    # Shapes
    "ShapeType",
    "Narrowing",
    "resolve_shape",
    # Pattern + tokenizer
    "Pattern",
    "SPECIFIERS",
    "tokenize",
    "tokenize_directive",
    # Matcher
    "MatchPolicy",
    "MatchOptions",
    "DEFAULT_OPTIONS",
    "Matched",
    "NoMatch",
    "NoMatchReason",
    "MatchResult",
    "match",
    "segment",
    # Handlers
    "Callback",
    "RouteHandler",
    "FormatHandler",
    "register",
    "url_format",
    # Config
    "HandlerConfig",
    "ConfigParseError",
    "parse_options",
    "parse_handler_config",
    "load_handler_config",
    # Errors
    "FormatError",
    "ShapeError",
    "UnknownShapeTypeError",
]
