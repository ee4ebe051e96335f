"""Template parsing: syntax validation and placeholder extraction."""

from __future__ import annotations

import re

from mustache_resolver.exceptions import InvalidSyntaxError
from mustache_resolver.logging import get_logger
from mustache_resolver.tokens import Token, TokenClassifier, TokenCollection

__all__ = ["MUSTACHE_PATTERN", "MustacheParser"]

logger = get_logger(__name__)

# Placeholder contents may not contain braces themselves
MUSTACHE_PATTERN = re.compile(r"\{\{([^{}]+)\}\}")

_EMPTY_PATTERN = re.compile(r"\{\{\s*\}\}")
_NESTED_PATTERN = re.compile(r"\{\{[^}]*\{\{")


class MustacheParser:
    """Validates templates and turns their placeholders into tokens.

    Args:
        classifier: Classifier used for placeholder contents. A default
            ``TokenClassifier`` is created when omitted.

    Example:
        >>> parser = MustacheParser()
        >>> [t.raw for t in parser.parse("Hi {{ User.name }}!")]
        ['User.name']
    """

    def __init__(self, classifier: TokenClassifier | None = None) -> None:
        self._classifier = classifier or TokenClassifier()

    def parse(self, template: str) -> list[Token]:
        """Validate ``template`` and classify every placeholder in order.

        Raises:
            InvalidSyntaxError: For unbalanced, empty or nested placeholders.
        """
        self.validate(template)

        tokens = []
        for match in MUSTACHE_PATTERN.finditer(template):
            content = match.group(1).strip()
            if content:
                tokens.append(self._classifier.classify(content))

        logger.debug("template_parsed", tokens=len(tokens))
        return tokens

    def parse_to_collection(self, template: str) -> TokenCollection:
        return TokenCollection(self.parse(template))

    def has_mustaches(self, template: str) -> bool:
        return MUSTACHE_PATTERN.search(template) is not None

    def extract_raw(self, template: str) -> list[str]:
        """Return every placeholder span, braces included."""
        return [match.group(0) for match in MUSTACHE_PATTERN.finditer(template)]

    def validate(self, template: str) -> None:
        """Check placeholder syntax without classifying anything.

        Raises:
            InvalidSyntaxError: With the offset of the offending braces.
        """
        open_count = template.count("{{")
        close_count = template.count("}}")
        if open_count != close_count:
            if open_count > close_count:
                position = template.rfind("{{")
            else:
                position = template.rfind("}}")
            raise InvalidSyntaxError.unclosed_mustache(template, position)

        empty = _EMPTY_PATTERN.search(template)
        if empty is not None:
            raise InvalidSyntaxError.empty_mustache(template, empty.start())

        nested = _NESTED_PATTERN.search(template)
        if nested is not None:
            raise InvalidSyntaxError.nested_mustache(template, nested.start())
