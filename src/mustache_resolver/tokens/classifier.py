"""Classification of placeholder content into typed tokens.

The classifier is a single hand-written scanner. Checks run in a fixed
order and the first match wins:

1. ``??`` anywhere            -> NULL_COALESCE
2. ``TEMPORAL:``/``NOW``/``TODAY`` prefix -> TEMPORAL
3. ``identifier(`` at start   -> FUNCTION
4. ``$name`` without dots     -> VARIABLE
5. digit/space, operator, digit/space -> MATH
6. dot path                   -> DYNAMIC, COLLECTION, RELATION, MODEL, TABLE
                                 or UNKNOWN

Examples:
    >>> TokenClassifier().classify("User.name").type
    <TokenType.MODEL: 'model'>
    >>> TokenClassifier().classify("users.0.email").type
    <TokenType.COLLECTION: 'collection'>
"""

from __future__ import annotations

from typing import Any

from mustache_resolver.constants import COLLECTION_KEYWORDS, COLLECTION_WILDCARD
from mustache_resolver.tokens.token import Token
from mustache_resolver.tokens.types import TokenType
from mustache_resolver.values import is_numeric, parse_number

__all__ = [
    "TokenClassifier",
    "is_reference_arg",
    "parse_function_args",
    "split_function_args",
    "split_path",
]

_DIGITS = "0123456789"
_MATH_OPERATORS = "+-*/"
_QUOTE_CHARS = "'\""
# Characters stripped from temporal arguments and null-coalesce defaults
_STRIP_CHARS = " \t\n\r\0\x0b'\""

_TEMPORAL_PREFIXES = ("TEMPORAL:", "NOW:", "NOW", "TODAY:", "TODAY")


def _is_identifier_start(char: str) -> bool:
    return char.isascii() and (char.isalpha() or char == "_")


def _is_identifier_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")


def _scan_identifier(text: str, start: int = 0) -> int:
    """Return the end offset of the identifier starting at ``start`` (or start)."""
    if start >= len(text) or not _is_identifier_start(text[start]):
        return start
    end = start + 1
    while end < len(text) and _is_identifier_char(text[end]):
        end += 1
    return end


def _call_open_paren(text: str) -> int | None:
    """Offset of ``(`` when text starts with ``identifier\\s*(``."""
    end = _scan_identifier(text)
    if end == 0:
        return None
    while end < len(text) and text[end].isspace():
        end += 1
    if end < len(text) and text[end] == "(":
        return end
    return None


def _match_call(text: str) -> tuple[str, str] | None:
    """Split ``name(args)`` into name and the raw argument text.

    The whole text must be the call: it has to end with ``)``.
    """
    paren = _call_open_paren(text)
    if paren is None or not text.endswith(")"):
        return None
    name = text[: _scan_identifier(text)]
    return name, text[paren + 1 : -1]


def _is_pascal_case(value: str) -> bool:
    return (
        bool(value)
        and value[0].isascii()
        and value[0].isupper()
        and all(ch.isascii() and ch.isalnum() for ch in value)
    )


def _is_snake_case(value: str) -> bool:
    return (
        bool(value)
        and value[0].isascii()
        and value[0].islower()
        and all(
            ch in _DIGITS or ch == "_" or (ch.isascii() and ch.islower())
            for ch in value
        )
    )


def split_path(expression: str) -> list[str]:
    """Split a dot path, keeping dots inside ``[...]`` within their segment.

    Examples:
        >>> split_path("User.meta[a.b].name")
        ['User', 'meta[a.b]', 'name']
    """
    segments: list[str] = []
    current: list[str] = []
    depth = 0
    for char in expression:
        if char == "[":
            depth += 1
        elif char == "]" and depth > 0:
            depth -= 1
        if char == "." and depth == 0:
            segments.append("".join(current).strip())
            current = []
            continue
        current.append(char)
    segments.append("".join(current).strip())
    return segments


def _decode_arg(value: str) -> Any:
    if len(value) >= 2 and value[0] in _QUOTE_CHARS and value[-1] == value[0]:
        return value[1:-1]
    if is_numeric(value):
        return parse_number(value)
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if lowered == "null":
        return None
    # Bare reference, resolved later against the context
    return value


def split_function_args(args_text: str) -> list[str]:
    """Split a function argument list into raw argument texts.

    Commas nested inside parentheses or quoted strings do not split
    arguments.
    """
    args_text = args_text.strip()
    if not args_text:
        return []

    args: list[str] = []
    current: list[str] = []
    depth = 0
    quote: str | None = None

    for index, char in enumerate(args_text):
        escaped = index > 0 and args_text[index - 1] == "\\"
        if char in _QUOTE_CHARS and not escaped:
            if quote is None:
                quote = char
            elif char == quote:
                quote = None

        if quote is None:
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1

        if char == "," and depth == 0 and quote is None:
            args.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    last = "".join(current).strip()
    if last:
        args.append(last)
    return args


def is_reference_arg(raw_arg: str) -> bool:
    """True when an unquoted argument names a path or variable to look up."""
    return bool(raw_arg) and _decode_arg(raw_arg) == raw_arg


def parse_function_args(args_text: str) -> list[Any]:
    """Split and decode a function argument list.

    Quoted arguments become strings, numeric ones int/float,
    ``true``/``false``/``null`` their Python values, and anything else is
    kept as a bare reference string.

    Examples:
        >>> parse_function_args("'a, b', 2, round(x, 1), null")
        ['a, b', 2, 'round(x, 1)', None]
    """
    return [_decode_arg(arg) for arg in split_function_args(args_text)]


class TokenClassifier:
    """Classifies raw placeholder content into a ``Token``."""

    def classify(self, raw: str) -> Token:
        raw = raw.strip()

        if "??" in raw:
            return self._null_coalesce_token(raw)
        if raw.startswith(_TEMPORAL_PREFIXES):
            return self._temporal_token(raw)
        if _call_open_paren(raw) is not None:
            return self._function_token(raw)
        if raw.startswith("$") and "." not in raw:
            return Token(raw=raw, type=TokenType.VARIABLE, path=(raw[1:],))
        if self._looks_like_math(raw):
            return Token(
                raw=raw,
                type=TokenType.MATH,
                metadata={"expression": raw},
            )
        return self._path_token(raw)

    def _looks_like_math(self, raw: str) -> bool:
        # An operator with a digit or whitespace directly on both sides
        for index, char in enumerate(raw):
            if char not in _MATH_OPERATORS or index == 0 or index + 1 >= len(raw):
                continue
            before, after = raw[index - 1], raw[index + 1]
            if (before in _DIGITS or before.isspace()) and (
                after in _DIGITS or after.isspace()
            ):
                return True
        return False

    def _null_coalesce_token(self, raw: str) -> Token:
        expression, _, default = raw.partition("??")
        default = default.strip(_STRIP_CHARS)
        return Token(
            raw=raw,
            type=TokenType.NULL_COALESCE,
            path=tuple(split_path(expression.strip())),
            default_value=default or None,
        )

    def _temporal_token(self, raw: str) -> Token:
        temporal_type = "unknown"
        function_name: str | None = None
        function_args: list[Any] = []
        expression = ""

        if raw.startswith("TEMPORAL:"):
            temporal_type = "temporal"
            rest = raw[len("TEMPORAL:") :]
            call = _match_call(rest)
            if call is not None:
                function_name = call[0]
                expression = call[1].strip(_STRIP_CHARS)
                function_args = parse_function_args(call[1])
            else:
                expression = rest
        elif raw.startswith(("NOW:", "TODAY:")) or raw in ("NOW", "TODAY"):
            temporal_type = "now" if raw.startswith("NOW") else "today"
            rest = raw.partition(":")[2]
            call = _match_call(rest)
            if raw in ("NOW", "TODAY"):
                function_name = "default"
            elif call is not None:
                function_name = call[0]
                expression = call[1].strip(_STRIP_CHARS)
                function_args = parse_function_args(call[1])
            else:
                function_name = rest

        return Token(
            raw=raw,
            type=TokenType.TEMPORAL,
            function_name=function_name,
            function_args=tuple(function_args),
            metadata={"temporal_type": temporal_type, "expression": expression},
        )

    def _function_token(self, raw: str) -> Token:
        call = _match_call(raw)
        if call is None:
            return Token(raw=raw, type=TokenType.UNKNOWN)
        name, args_text = call
        raw_args = split_function_args(args_text)
        return Token(
            raw=raw,
            type=TokenType.FUNCTION,
            function_name=name,
            function_args=tuple(_decode_arg(arg) for arg in raw_args),
            metadata={"raw_args": tuple(raw_args)},
        )

    def _path_token(self, raw: str) -> Token:
        path = split_path(raw)
        if not path or not path[0]:
            return Token(raw=raw, type=TokenType.UNKNOWN)
        return Token(raw=raw, type=self._path_type(path), path=tuple(path))

    def _path_type(self, path: list[str]) -> TokenType:
        if any(segment.startswith("$") for segment in path):
            return TokenType.DYNAMIC
        if any(
            is_numeric(segment)
            or segment == COLLECTION_WILDCARD
            or segment in COLLECTION_KEYWORDS
            for segment in path
        ):
            return TokenType.COLLECTION

        prefix = path[0]
        if _is_pascal_case(prefix):
            return TokenType.RELATION if len(path) > 2 else TokenType.MODEL
        if _is_snake_case(prefix):
            return TokenType.TABLE
        return TokenType.UNKNOWN
