"""Security-policy exceptions.

Everything that enforces a structural bound or an allow/deny list raises a
``SecurityError`` subclass, including the arithmetic evaluator's limits.
"""

from __future__ import annotations

from mustache_resolver.exceptions.base import MustacheError


class SecurityError(MustacheError):
    """Base exception for security-policy violations."""

    @classmethod
    def unregistered_function(cls, function_name: str) -> SecurityError:
        return cls(f"Function not registered: {function_name}")

    @classmethod
    def restricted_path(cls, path: str) -> SecurityError:
        return cls(f"Access to path '{path}' is restricted")

    @classmethod
    def dangerous_expression(cls, expression: str) -> SecurityError:
        return cls(f"Expression contains dangerous patterns: {expression}")


class ModelNotAllowedError(SecurityError):
    """Raised when a data source type is not in the configured allow-list."""

    def __init__(self, model_class: str, allowed_models: list[str]) -> None:
        self.model_class = model_class
        self.allowed_models = allowed_models
        allowed = ", ".join(allowed_models) if allowed_models else "(all)"
        super().__init__(
            f'Model "{model_class}" is not in the allowed models list. '
            f"Allowed: {allowed}"
        )


class AttributeBlacklistedError(SecurityError):
    """Raised when a path starts with a deny-listed attribute name."""

    def __init__(self, attribute: str, path: str) -> None:
        self.attribute = attribute
        self.path = path
        super().__init__(f"Attribute '{attribute}' is blacklisted (path: {path})")


class DepthExceededError(SecurityError):
    """Raised when a lookup path is deeper than the configured maximum."""

    def __init__(self, path: str, depth: int, max_depth: int) -> None:
        self.path = path
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Path '{path}' has depth {depth}, exceeding the maximum of {max_depth}"
        )


class MathExpressionError(SecurityError):
    """Raised when an arithmetic expression is rejected or cannot be evaluated.

    Attributes:
        expression: The arithmetic source text.
        reason: Why it was rejected.
    """

    def __init__(self, expression: str, reason: str) -> None:
        self.expression = expression
        self.reason = reason
        super().__init__(f'Invalid math expression "{expression}": {reason}')

    @classmethod
    def too_long(cls, expression: str, max_length: int) -> MathExpressionError:
        return cls(
            expression,
            f"Expression exceeds maximum length of {max_length} characters",
        )

    @classmethod
    def too_deep(cls, expression: str, max_depth: int) -> MathExpressionError:
        return cls(
            expression, f"Expression exceeds maximum nesting depth of {max_depth}"
        )

    @classmethod
    def invalid_operator(cls, expression: str, operator: str) -> MathExpressionError:
        return cls(expression, f'Operator "{operator}" is not allowed')

    @classmethod
    def division_by_zero(cls, expression: str) -> MathExpressionError:
        return cls(expression, "Division by zero")
