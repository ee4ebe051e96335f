"""Substitution of ``{name}`` references in compound statements."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from mustache_resolver.compound.parser import LOCAL_VARIABLE_PATTERN
from mustache_resolver.values import to_statement_string

__all__ = ["LocalVariableReplacer"]

_REFERENCE_PATTERN = re.compile(r"\{[a-zA-Z_]\w*\}")


class LocalVariableReplacer:
    """Replaces ``{name}`` with resolved values; unknown names stay as-is."""

    def replace(self, statement: str, variables: Mapping[str, Any]) -> str:
        result = statement
        for name, value in variables.items():
            result = result.replace("{" + name + "}", to_statement_string(value))
        return result

    def has_variables(self, statement: str) -> bool:
        return _REFERENCE_PATTERN.search(statement) is not None

    def extract_variable_names(self, statement: str) -> list[str]:
        return list(dict.fromkeys(LOCAL_VARIABLE_PATTERN.findall(statement)))
