"""Errors reported by signature composition."""

from __future__ import annotations


class SignatureServiceError(Exception):
    """Raised when a signature cannot be composed."""
    code = "signature_error"


class InvalidProfileError(SignatureServiceError):
    """Raised when a required profile field is missing or settings are unreadable."""
    code = "invalid_profile"

    def __init__(self, message: str, missing_fields: tuple[str, ...] = ()):
        super().__init__(message)
        self.missing_fields = missing_fields


class MissingTemplatePreferenceError(SignatureServiceError):
    """Raised when strict selection finds no template for a compose category."""
    code = "missing_template_preference"

    def __init__(self, category):
        super().__init__(f"No template preference recorded for '{category.value}'")
        self.category = category
