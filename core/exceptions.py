"""
Kennel Report exception hierarchy.

- KennelReportError: base class for every known error
- InvalidInputError: caller broke the input contract (bad type, negative duration, ...)
- UnknownTemplateError: template key not in the registry
"""
from typing import Optional


class KennelReportError(Exception):
    """Kennel Report base exception.

    Catching this class handles every expected failure of the engine.
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        """
        Args:
            message: error description
            hint: suggestion shown to the operator
        """
        super().__init__(message)
        self.message = message
        self.hint = hint

    def get_user_message(self) -> str:
        """Return an operator-friendly message."""
        if self.hint:
            return f"{self.message}\nHint: {self.hint}"
        return self.message


class InvalidInputError(KennelReportError):
    """Raised at the boundary when an activity, assessment or dog record is malformed."""

    def __init__(self, message: str, field: Optional[str] = None):
        hint = f"Check the '{field}' field of the submitted data" if field else None
        super().__init__(message, hint)
        self.field = field


class UnknownTemplateError(InvalidInputError):
    """Template key is not one of the canned scenarios."""

    def __init__(self, key: str, available: Optional[list] = None):
        super().__init__(f"Unknown report template: {key}", field="template_key")
        self.key = key
        if available:
            self.hint = f"Available templates: {', '.join(available)}"

