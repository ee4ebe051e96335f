"""Exceptions raised while parsing templates and expressions.

Syntax errors are always fatal to parsing and are never recovered from
inside the library.
"""

from __future__ import annotations

from mustache_resolver.exceptions.base import MustacheError


class ParseError(MustacheError):
    """Base exception for template and expression parsing failures.

    Attributes:
        message: Human-readable error message.
        template: The template or expression being parsed (if known).
        position: Character offset of the offending text (if known).
    """

    def __init__(
        self,
        message: str,
        template: str | None = None,
        position: int | None = None,
    ) -> None:
        self.template = template
        self.position = position
        super().__init__(message)


class InvalidSyntaxError(ParseError):
    """Raised for malformed placeholders and malformed temporal syntax.

    The factory methods build the placeholder-specific variants; temporal,
    cron and time-range syntax problems are raised with a plain message.
    """

    @classmethod
    def unclosed_mustache(cls, template: str, position: int) -> InvalidSyntaxError:
        return cls(
            f"Unclosed mustache starting at position {position}",
            template,
            position,
        )

    @classmethod
    def empty_mustache(cls, template: str, position: int) -> InvalidSyntaxError:
        return cls(f"Empty mustache at position {position}", template, position)

    @classmethod
    def nested_mustache(cls, template: str, position: int) -> InvalidSyntaxError:
        return cls(
            f"Nested mustache braces at position {position}",
            template,
            position,
        )


class InvalidUseSyntaxError(ParseError):
    """Raised when a ``USE ... && ...`` compound template is malformed.

    Attributes:
        template: The full compound template.
        hint: Short description of what is wrong.
    """

    _MAX_TEMPLATE_LENGTH = 100

    def __init__(self, template: str, hint: str | None = None) -> None:
        self.hint = hint
        message = (
            f"Invalid USE clause syntax in template: {self._truncate(template)}"
        )
        if hint is not None:
            message += f" Hint: {hint}"
        super().__init__(message, template=template)

    @classmethod
    def _truncate(cls, text: str) -> str:
        if len(text) <= cls._MAX_TEMPLATE_LENGTH:
            return text
        return text[: cls._MAX_TEMPLATE_LENGTH - 3] + "..."
