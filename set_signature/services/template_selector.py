"""Template selection from compose context and stored preferences."""

from __future__ import annotations

from set_signature.config import DEFAULT_TEMPLATE
from set_signature.models import ComposeCategory, ComposeContext, TemplateId, TemplatePreference
from set_signature.services.errors import MissingTemplatePreferenceError


def resolve_category(category: ComposeCategory) -> ComposeCategory:
    """Appointments have no reply/forward distinction and use the new-message choice."""
    if category is ComposeCategory.APPOINTMENT:
        return ComposeCategory.NEW_MESSAGE
    return category


def select_template(
    context: ComposeContext,
    prefs: TemplatePreference,
    *,
    strict: bool = False,
    default: TemplateId | None = None,
) -> TemplateId:
    """Pick the template for a compose context.

    Args:
        context: Item being composed
        prefs: Per-user template preferences
        strict: Raise instead of falling back when no preference is recorded
        default: Fallback template. If None, uses the configured default.

    Returns:
        TemplateId: The template to render

    Raises:
        MissingTemplatePreferenceError: If strict and no preference exists
    """
    category = resolve_category(context.category)
    template = prefs.get(category)
    if template is not None:
        return template
    if strict:
        raise MissingTemplatePreferenceError(category)
    return default or TemplateId.parse(DEFAULT_TEMPLATE) or TemplateId.TEMPLATE_B
