"""Recursive-descent parser for temporal expressions.

Grammar, lowest precedence first::

    or      := and ('||' and)*
    and     := not ('&&' not)*
    not     := '!' not | primary
    primary := '(' or ')' | condition

Conditions are ``cron:<fields>``, ``nth:<day>:<n>[,<m>...]``,
``last:<day>``, time ranges like ``08:00-18:00`` and bare identifiers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from mustache_resolver.exceptions import InvalidSyntaxError
from mustache_resolver.temporal.ast import (
    BUILTIN_KEYWORDS,
    AndNode,
    CronNode,
    CustomNode,
    KeywordNode,
    LastWeekdayNode,
    LiteralNode,
    Node,
    NotNode,
    NthWeekdayNode,
    OrNode,
    TimeRangeNode,
)
from mustache_resolver.temporal.time_range import TIME_RANGE_PATTERN

__all__ = ["ExpressionParser"]

AND = "&&"
OR = "||"
NOT = "!"
LPAREN = "("
RPAREN = ")"

CRON_PREFIX = "cron:"
NTH_PREFIX = "nth:"
LAST_PREFIX = "last:"

_IDENTIFIER = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")


@dataclass(frozen=True, slots=True)
class _Lexeme:
    kind: str  # operator, lparen, rparen or condition
    value: str


class ExpressionParser:
    """Parses one temporal expression into an AST.

    Example:
        >>> ExpressionParser("!holiday").parse()
        NotNode(operand=CustomNode(keyword='holiday'))
    """

    def __init__(self, expression: str) -> None:
        self.expression = expression.strip()
        self._lexemes: list[_Lexeme] = []
        self._position = 0

    def parse(self) -> Node:
        """Parse the expression. An empty expression is always true.

        Raises:
            InvalidSyntaxError: On unexpected characters, unbalanced
                parentheses, missing operands or trailing tokens.
        """
        if not self.expression:
            return LiteralNode(True)

        self._lexemes = self._tokenize()
        self._position = 0
        node = self._parse_or()

        if self._position < len(self._lexemes):
            raise InvalidSyntaxError(
                f"Unexpected token at position {self._position}: "
                f'"{self._lexemes[self._position].value}"',
                self.expression,
                self._position,
            )
        return node

    def extract_keywords(self) -> list[str]:
        """Condition texts in first-seen order, without duplicates."""
        seen: dict[str, None] = {}
        for lexeme in self._tokenize():
            if lexeme.kind == "condition":
                seen.setdefault(lexeme.value, None)
        return list(seen)

    # -- lexing --

    def _tokenize(self) -> list[_Lexeme]:
        text = self.expression
        lexemes: list[_Lexeme] = []
        i = 0

        while i < len(text):
            char = text[i]
            if char.isspace():
                i += 1
            elif text.startswith((AND, OR), i):
                lexemes.append(_Lexeme("operator", text[i : i + 2]))
                i += 2
            elif char == NOT:
                lexemes.append(_Lexeme("operator", NOT))
                i += 1
            elif char == LPAREN:
                lexemes.append(_Lexeme("lparen", LPAREN))
                i += 1
            elif char == RPAREN:
                lexemes.append(_Lexeme("rparen", RPAREN))
                i += 1
            elif text.startswith(CRON_PREFIX, i):
                start = i + len(CRON_PREFIX)
                end = self._cron_end(start)
                fields = text[start:end].strip()
                lexemes.append(_Lexeme("condition", CRON_PREFIX + fields))
                i = end
            elif text.startswith((NTH_PREFIX, LAST_PREFIX), i):
                end = self._condition_end(i)
                lexemes.append(_Lexeme("condition", text[i:end]))
                i = end
            else:
                match = TIME_RANGE_PATTERN.match(text, i) or _IDENTIFIER.match(text, i)
                if match is None:
                    raise InvalidSyntaxError(
                        f'Unexpected character at position {i}: "{char}"',
                        self.expression,
                        i,
                    )
                lexemes.append(_Lexeme("condition", match.group(0)))
                i = match.end()

        return lexemes

    def _condition_end(self, start: int) -> int:
        # nth:/last: conditions stop at whitespace, parentheses or operators
        text = self.expression
        i = start
        while i < len(text):
            if text[i].isspace() or text[i] in (LPAREN, RPAREN):
                break
            if text.startswith((AND, OR), i):
                break
            i += 1
        return i

    def _cron_end(self, start: int) -> int:
        # Cron specs contain spaces, so only parentheses and operators end them
        text = self.expression
        i = start
        while i < len(text):
            if text[i] in (LPAREN, RPAREN) or text.startswith((AND, OR), i):
                break
            i += 1
        return i

    # -- parsing --

    def _current_is(self, kind: str, value: str | None = None) -> bool:
        if self._position >= len(self._lexemes):
            return False
        lexeme = self._lexemes[self._position]
        return lexeme.kind == kind and (value is None or lexeme.value == value)

    def _parse_or(self) -> Node:
        left = self._parse_and()
        while self._current_is("operator", OR):
            self._position += 1
            left = OrNode(left, self._parse_and())
        return left

    def _parse_and(self) -> Node:
        left = self._parse_not()
        while self._current_is("operator", AND):
            self._position += 1
            left = AndNode(left, self._parse_not())
        return left

    def _parse_not(self) -> Node:
        if self._current_is("operator", NOT):
            self._position += 1
            return NotNode(self._parse_not())
        return self._parse_primary()

    def _parse_primary(self) -> Node:
        if self._current_is("lparen"):
            self._position += 1
            node = self._parse_or()
            if not self._current_is("rparen"):
                raise InvalidSyntaxError(
                    "Missing closing parenthesis", self.expression, self._position
                )
            self._position += 1
            return node

        if self._current_is("condition"):
            value = self._lexemes[self._position].value
            self._position += 1
            return self._parse_condition(value)

        found = (
            self._lexemes[self._position].value
            if self._position < len(self._lexemes)
            else "end of expression"
        )
        raise InvalidSyntaxError(
            "Expected condition or grouped expression at position "
            f"{self._position}, got: {found}",
            self.expression,
            self._position,
        )

    def _parse_condition(self, value: str) -> Node:
        if value.startswith(CRON_PREFIX):
            return CronNode(value[len(CRON_PREFIX) :])
        if value.startswith(NTH_PREFIX):
            return self._parse_nth_weekday(value)
        if value.startswith(LAST_PREFIX):
            return LastWeekdayNode(value[len(LAST_PREFIX) :])
        if TIME_RANGE_PATTERN.fullmatch(value):
            return TimeRangeNode(value)
        if value in BUILTIN_KEYWORDS:
            return KeywordNode(value)
        return CustomNode(value)

    def _parse_nth_weekday(self, value: str) -> NthWeekdayNode:
        parts = value.split(":")
        if len(parts) != 3:
            raise InvalidSyntaxError(
                f'Invalid nth weekday syntax: "{value}". '
                "Expected nth:DAY:N or nth:DAY:N,M",
                self.expression,
            )
        try:
            occurrences = tuple(int(part.strip()) for part in parts[2].split(","))
        except ValueError as e:
            raise InvalidSyntaxError(
                f'Invalid nth weekday occurrences: "{parts[2]}"', self.expression
            ) from e
        return NthWeekdayNode(parts[1], occurrences)
