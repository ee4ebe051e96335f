"""Exceptions raised while resolving tokens to values."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from mustache_resolver.exceptions.base import MustacheError

if TYPE_CHECKING:
    from mustache_resolver.tokens.token import Token


def _encode(value: Any) -> str:
    return json.dumps(value, default=str)


class ResolutionError(MustacheError):
    """Base exception for failures while turning a token into a value.

    Attributes:
        message: Human-readable error message.
        token: The token being resolved (if known).
    """

    def __init__(self, message: str, token: Token | None = None) -> None:
        self.token = token
        super().__init__(message)

    @classmethod
    def for_token(cls, token: Token, reason: str) -> ResolutionError:
        return cls(f"Failed to resolve token '{token.raw}': {reason}", token)


class UnresolvableError(MustacheError):
    """Raised when no resolver in the pipeline claims a token."""

    def __init__(self, message: str, token: Token | None = None) -> None:
        self.token = token
        super().__init__(message)

    @classmethod
    def for_token(cls, token: Token) -> UnresolvableError:
        return cls(
            f"No resolver found for token: {token.raw} (type: {token.type.value})",
            token,
        )


class ConditionNotMetError(ResolutionError):
    """Raised when a USE variable's inline condition rejects its value.

    Kept distinct from ``VariableNotResolvedError`` so callers may swallow
    only this failure (see ``CompoundResolver.try_resolve``).

    Attributes:
        variable_name: Name of the USE variable.
        actual_value: The resolved value that failed the condition.
        condition: Condition text, e.g. ``"> 0"`` or ``"BETWEEN 1 AND 5"``.
        expression: The mustache expression the variable was bound to.
    """

    def __init__(
        self,
        variable_name: str,
        actual_value: Any,
        condition: str,
        expression: str,
    ) -> None:
        self.variable_name = variable_name
        self.actual_value = actual_value
        self.condition = condition
        self.expression = expression
        super().__init__(
            f'Condition failed for variable "{variable_name}": value '
            f'{_encode(actual_value)} did not satisfy condition "{condition}"'
        )

    @property
    def context(self) -> dict[str, Any]:
        return {
            "variable": self.variable_name,
            "value": self.actual_value,
            "condition": self.condition,
            "expression": self.expression,
        }


class VariableNotResolvedError(ResolutionError):
    """Raised when a USE variable's mustache expression yields nothing."""

    def __init__(
        self,
        variable_name: str,
        expression: str,
        reason: str | None = None,
    ) -> None:
        self.variable_name = variable_name
        self.expression = expression
        self.reason = reason
        message = (
            f'Could not resolve variable "{variable_name}" '
            f'from expression "{expression}"'
        )
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)


class FormatterError(ResolutionError):
    """Raised when a formatter rejects or fails to process a value.

    Attributes:
        formatter_name: Name of the formatter.
        input_value: Value handed to the formatter (if known).
        reason: Why formatting failed.
    """

    def __init__(
        self,
        formatter_name: str,
        input_value: Any = None,
        reason: str | None = None,
    ) -> None:
        self.formatter_name = formatter_name
        self.input_value = input_value
        self.reason = reason
        message = (
            f'Formatter "{formatter_name}" failed to process value '
            f"{_encode(input_value)}"
        )
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)

    @classmethod
    def not_allowed(cls, name: str, allowed_names: list[str]) -> FormatterError:
        return cls(
            name,
            None,
            "Formatter is not in the allowed list. Allowed formatters: "
            + ", ".join(allowed_names),
        )

    @classmethod
    def not_registered(cls, name: str) -> FormatterError:
        return cls(
            name,
            None,
            "Formatter is not registered. Use FormatterRegistry.register() first.",
        )

    @classmethod
    def unsupported_type(cls, name: str, type_name: str) -> FormatterError:
        return cls(
            name, None, f'Formatter does not support values of type "{type_name}"'
        )

    @classmethod
    def formatting_failed(cls, name: str, error_message: str) -> FormatterError:
        return cls(name, None, error_message)
