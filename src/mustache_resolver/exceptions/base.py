from __future__ import annotations


class MustacheError(Exception):
    """Base exception class for all mustache-resolver errors.

    This is the root of the exception hierarchy. Host applications can catch
    ``MustacheError`` at their boundary to handle every library failure while
    letting system exceptions propagate naturally.

    Attributes:
        message: Human-readable error message describing what went wrong.

    Example:
        ```python
        try:
            result = resolver.translate(template, data)
        except MustacheError as e:
            logger.error("template_failed", error=e.message)
        ```
    """

    def __init__(self, message: str) -> None:
        """Initialize the MustacheError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)
