"""Translation outcome."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mustache_resolver.tokens import Token

__all__ = ["TranslationResult"]


@dataclass(frozen=True, slots=True)
class TranslationResult:
    """Outcome of translating one template.

    Build instances with ``succeeded`` or ``failed``. A failed result has
    no ``translated`` text and names the tokens that could not be resolved
    in ``missing_fields``.
    """

    success: bool
    original: str
    translated: str | None
    tokens: tuple[Token, ...] = ()
    resolved_values: dict[str, Any] = field(default_factory=dict)
    missing_fields: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    errors: tuple[str, ...] = ()

    @classmethod
    def succeeded(
        cls,
        original: str,
        translated: str,
        tokens: tuple[Token, ...] | list[Token] = (),
        resolved_values: dict[str, Any] | None = None,
        warnings: tuple[str, ...] | list[str] = (),
    ) -> TranslationResult:
        return cls(
            success=True,
            original=original,
            translated=translated,
            tokens=tuple(tokens),
            resolved_values=dict(resolved_values or {}),
            warnings=tuple(warnings),
        )

    @classmethod
    def failed(
        cls,
        original: str,
        missing_fields: tuple[str, ...] | list[str],
        errors: tuple[str, ...] | list[str] = (),
        warnings: tuple[str, ...] | list[str] = (),
    ) -> TranslationResult:
        return cls(
            success=False,
            original=original,
            translated=None,
            missing_fields=tuple(missing_fields),
            warnings=tuple(warnings),
            errors=tuple(errors),
        )

    @property
    def is_failed(self) -> bool:
        return not self.success

    @property
    def failure_reason(self) -> str | None:
        if self.success:
            return None
        if self.missing_fields:
            return "Missing fields: " + ", ".join(self.missing_fields)
        if self.errors:
            return "; ".join(self.errors)
        return "Unknown error"

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "original": self.original,
            "translated": self.translated,
            "tokens": [token.raw for token in self.tokens],
            "resolved_values": self.resolved_values,
            "missing_fields": list(self.missing_fields),
            "warnings": list(self.warnings),
            "errors": list(self.errors),
            "failure_reason": self.failure_reason,
        }
