"""``USE {var} => {{expr}} [condition] && statement`` parsing."""

from __future__ import annotations

import re

from mustache_resolver.compound.models import CompoundExpression, UseVariable
from mustache_resolver.exceptions import InvalidUseSyntaxError

__all__ = ["CompoundExpressionParser", "LOCAL_VARIABLE_PATTERN"]

USE_KEYWORD = "USE "

USE_PATTERN = re.compile(r"^USE\s+(.+?)\s*&&\s*(.*)$", re.DOTALL)

VAR_PATTERN = re.compile(
    r"\{(\w+)\}\s*=>\s*(\{\{[^}]+\}\})"
    r"(\s*(?:[><=!]+|BETWEEN)\s*[^\s,]+(?:\s+AND\s+[^\s,]+)?)?",
    re.IGNORECASE,
)

#: Single-brace local references in a statement
LOCAL_VARIABLE_PATTERN = re.compile(r"\{(\w+)\}")


class CompoundExpressionParser:
    """Parses compound templates into ``CompoundExpression`` objects.

    Example:
        >>> parser = CompoundExpressionParser()
        >>> expr = parser.parse("USE {p} => {{Device.power}} > 0 && SET {p}")
        >>> expr.variables[0].condition, expr.statement
        ('> 0', 'SET {p}')
    """

    def is_compound(self, template: str) -> bool:
        return template.strip().startswith(USE_KEYWORD)

    def parse(self, template: str) -> CompoundExpression:
        """Parse ``template``.

        Raises:
            InvalidUseSyntaxError: If the USE clause or separator is missing,
                the statement is empty, or a declaration is malformed or
                duplicated.
        """
        trimmed = template.strip()
        if not self.is_compound(trimmed):
            raise InvalidUseSyntaxError(template, 'Template must start with "USE "')

        match = USE_PATTERN.match(trimmed)
        if match is None:
            raise InvalidUseSyntaxError(
                template, 'Missing "&&" separator between USE clause and statement'
            )

        use_block = match.group(1).strip()
        statement = match.group(2).strip()
        if not statement:
            raise InvalidUseSyntaxError(
                template, 'Statement after "&&" cannot be empty'
            )

        variables = self._parse_variables(use_block, template)
        return CompoundExpression(
            variables=tuple(variables), statement=statement, original=template
        )

    def _parse_variables(self, use_block: str, template: str) -> list[UseVariable]:
        matches = list(VAR_PATTERN.finditer(use_block))
        if not matches:
            raise InvalidUseSyntaxError(
                template,
                "Invalid variable declaration format. "
                "Expected: {varname} => {{expression}}",
            )

        variables: list[UseVariable] = []
        seen: set[str] = set()
        for match in matches:
            name, expression = match.group(1), match.group(2)
            condition = (match.group(3) or "").strip() or None
            if name in seen:
                raise InvalidUseSyntaxError(
                    template, f"Duplicate variable name: {{{name}}}"
                )
            seen.add(name)
            variables.append(UseVariable(name, expression, condition))
        return variables

    def extract_local_variables(self, statement: str) -> list[str]:
        return list(dict.fromkeys(LOCAL_VARIABLE_PATTERN.findall(statement)))
