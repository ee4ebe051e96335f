"""Shared constants for mustache-resolver.

This module is the single source of truth for resolver priorities, parsing
limits and keyword sets used across the package.
"""

from __future__ import annotations

# =============================================================================
# Resolver Priorities
# =============================================================================

#: Higher priorities are tried first by the pipeline
PRIORITY_TEMPORAL: int = 90
PRIORITY_NULL_COALESCE: int = 90
PRIORITY_MATH: int = 80
PRIORITY_FUNCTION: int = 70
PRIORITY_VARIABLE: int = 60
PRIORITY_DYNAMIC: int = 50
PRIORITY_COLLECTION: int = 40
PRIORITY_RELATION: int = 30
PRIORITY_MODEL: int = 20
PRIORITY_TABLE: int = 10

# =============================================================================
# Path Segments
# =============================================================================

COLLECTION_WILDCARD: str = "*"

#: Positional segments understood by the collection resolver
COLLECTION_KEYWORDS: frozenset[str] = frozenset({"first", "last"})

DYNAMIC_MARKER: str = "$"

# =============================================================================
# Limits
# =============================================================================

#: Maximum accepted length of an arithmetic expression
MATH_MAX_LENGTH: int = 500

#: Maximum parenthesis nesting in an arithmetic expression
MATH_MAX_DEPTH: int = 10

#: Default maximum relation/path depth enforced by the security validator
DEFAULT_MAX_DEPTH: int = 10

DEFAULT_BLACKLISTED_ATTRIBUTES: tuple[str, ...] = (
    "password",
    "remember_token",
    "api_token",
    "secret",
)

# =============================================================================
# Cache
# =============================================================================

DEFAULT_CACHE_TTL: int = 3600
DEFAULT_CACHE_PREFIX: str = "mustache_resolver_"

# =============================================================================
# Date Formats
# =============================================================================

#: Format used for datetimes rendered without an explicit format
DATETIME_FORMAT: str = "Y-m-d H:i:s"
DATE_FORMAT: str = "Y-m-d"
