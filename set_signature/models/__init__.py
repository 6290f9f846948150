"""Data models - Pure data structures with no business logic."""

from .context import ComposeCategory, ComposeContext, ItemType, TemplateId, TemplatePreference
from .profile import UserProfile
from .signature import SignatureResult

__all__ = [
    "UserProfile",
    "ComposeCategory",
    "ComposeContext",
    "ItemType",
    "TemplateId",
    "TemplatePreference",
    "SignatureResult",
]
