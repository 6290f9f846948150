"""Set Signature package."""

from .models import (
    ComposeCategory,
    ComposeContext,
    ItemType,
    SignatureResult,
    TemplateId,
    TemplatePreference,
    UserProfile,
)
from .services import (
    ComposeOutcome,
    InvalidProfileError,
    MissingTemplatePreferenceError,
    SignatureServiceError,
    compose,
)

__all__ = [
    "UserProfile",
    "ComposeCategory",
    "ComposeContext",
    "ItemType",
    "TemplateId",
    "TemplatePreference",
    "SignatureResult",
    "ComposeOutcome",
    "SignatureServiceError",
    "InvalidProfileError",
    "MissingTemplatePreferenceError",
    "compose",
]
