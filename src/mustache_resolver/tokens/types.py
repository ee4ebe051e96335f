"""Token type enumeration."""

from __future__ import annotations

from enum import Enum

_ACCESSOR_TYPES = frozenset({"model", "table", "relation", "dynamic", "collection"})
_COMPOUND_TYPES = frozenset(
    {"compound", "use_declaration", "local_variable", "formatter"}
)


class TokenType(str, Enum):
    """Classification of a placeholder's content.

    Attributes:
        MODEL: ``Model.field`` access (PascalCase prefix, two segments).
        TABLE: ``table.column`` access (snake_case prefix).
        RELATION: ``Model.relation.field`` chain (PascalCase prefix, 3+ segments).
        DYNAMIC: path containing a ``$segment`` whose value names the field.
        COLLECTION: path with a numeric index, ``*``, ``first`` or ``last``.
        FUNCTION: ``name(args)`` call.
        VARIABLE: ``$name`` lookup in the context variables.
        MATH: arithmetic source text.
        NULL_COALESCE: ``path ?? default``.
        TEMPORAL: ``TEMPORAL:``, ``NOW`` and ``TODAY`` expressions.
    """

    MODEL = "model"
    TABLE = "table"
    RELATION = "relation"
    DYNAMIC = "dynamic"
    COLLECTION = "collection"
    FUNCTION = "function"
    VARIABLE = "variable"
    MATH = "math"
    NULL_COALESCE = "null_coalesce"
    TEMPORAL = "temporal"
    LITERAL = "literal"
    UNKNOWN = "unknown"
    COMPOUND = "compound"
    USE_DECLARATION = "use_declaration"
    LOCAL_VARIABLE = "local_variable"
    FORMATTER = "formatter"

    @property
    def requires_accessor(self) -> bool:
        """True for types resolved against a data accessor."""
        return self.value in _ACCESSOR_TYPES

    @property
    def supports_nesting(self) -> bool:
        """True for types whose path may descend into nested data."""
        return self.value in _ACCESSOR_TYPES

    @property
    def is_compound_related(self) -> bool:
        return self.value in _COMPOUND_TYPES

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[TokenType, str] = {
    TokenType.MODEL: "Model field access",
    TokenType.TABLE: "Direct table access",
    TokenType.RELATION: "Relation chain navigation",
    TokenType.DYNAMIC: "Dynamic field resolution",
    TokenType.COLLECTION: "Collection/array access",
    TokenType.FUNCTION: "Function call",
    TokenType.VARIABLE: "Variable reference",
    TokenType.MATH: "Math expression",
    TokenType.NULL_COALESCE: "Null coalesce expression",
    TokenType.TEMPORAL: "Temporal expression",
    TokenType.LITERAL: "Literal value",
    TokenType.UNKNOWN: "Unknown token type",
    TokenType.COMPOUND: "Compound expression with USE clause",
    TokenType.USE_DECLARATION: "USE clause variable declaration",
    TokenType.LOCAL_VARIABLE: "Local variable reference",
    TokenType.FORMATTER: "Formatter function call",
}
