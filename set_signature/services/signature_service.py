"""Signature Service - Composition of the final signature.

This module handles:
- Required-field validation of the user profile
- Template selection for the compose context
- Rendering (with a closing quote for the branded template)

Interface Contract:
- compose(context, profile, prefs) -> ComposeOutcome
- Composition failures are returned in the outcome, never raised
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from set_signature.config import STRICT_TEMPLATE_PREFERENCES
from set_signature.models import (
    ComposeContext,
    SignatureResult,
    TemplateId,
    TemplatePreference,
    UserProfile,
)
from set_signature.services.errors import InvalidProfileError, SignatureServiceError
from set_signature.services.fields import is_valid
from set_signature.services.quote_service import QuoteService
from set_signature.services.template_selector import select_template
from set_signature.services.template_service import Branding, render_template_a, render_template_b

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "job_title", "email")
OPTIONAL_FIELDS = ("phone", "blog_link", "linkedin_link", "follow_research_link", "greeting")
QUOTE_FIELDS = ("group1_quotes", "group2_quotes")


@dataclass(frozen=True)
class ComposeOutcome:
    """Result of a composition: either a signature or the reason there is none."""
    result: SignatureResult | None = None
    error: SignatureServiceError | None = None
    template: TemplateId | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.result is not None


def validate_profile(profile: UserProfile) -> None:
    """Raise InvalidProfileError if a field is not text or a required field is missing."""
    wrong_type = tuple(
        name for name in REQUIRED_FIELDS
        if not isinstance(getattr(profile, name), str)
    ) + tuple(
        name for name in OPTIONAL_FIELDS + QUOTE_FIELDS
        if getattr(profile, name) is not None and not isinstance(getattr(profile, name), str)
    )
    if wrong_type:
        raise InvalidProfileError(f"Profile fields must be strings: {', '.join(wrong_type)}")

    missing = tuple(name for name in REQUIRED_FIELDS if not is_valid(getattr(profile, name)))
    if missing:
        raise InvalidProfileError(
            f"Profile is missing required fields: {', '.join(missing)}",
            missing_fields=missing,
        )


class SignatureService:
    """Service for composing signatures."""

    def __init__(
        self,
        quote_service: QuoteService | None = None,
        *,
        branding: Branding | None = None,
        strict: bool = STRICT_TEMPLATE_PREFERENCES,
        default_template: TemplateId | None = None,
    ):
        """Initialize with optional collaborators.

        Args:
            quote_service: Quote picker for the branded template. If None, creates default.
            branding: Company boilerplate. If None, uses the configured defaults.
            strict: Fail instead of falling back when a preference is missing.
            default_template: Fallback template. If None, uses the configured default.
        """
        self._quotes = quote_service or QuoteService()
        self.branding = branding or Branding()
        self.strict = strict
        self.default_template = default_template

    def render(self, template: TemplateId, profile: UserProfile) -> str:
        """Render a profile with the given template."""
        if template is TemplateId.TEMPLATE_A:
            quote = self._quotes.select(profile.group1_quotes, profile.group2_quotes)
            return render_template_a(profile, quote, self.branding)
        return render_template_b(profile)

    def compose(
        self,
        context: ComposeContext,
        profile: UserProfile,
        prefs: TemplatePreference,
    ) -> ComposeOutcome:
        """Compose the signature for a compose context.

        Args:
            context: Item being composed
            profile: Signature owner's details
            prefs: Per-user template preferences

        Returns:
            ComposeOutcome: The signature, or the error that prevented it
        """
        template = None
        try:
            validate_profile(profile)
            template = select_template(
                context, prefs, strict=self.strict, default=self.default_template
            )
            html = self.render(template, profile)
        except SignatureServiceError as e:
            logger.warning("[compose] failed category=%s error=%s", context.category.value, e)
            return ComposeOutcome(error=e, template=template)

        logger.info("[compose] template=%s category=%s", template.value, context.category.value)
        return ComposeOutcome(result=SignatureResult(html=html), template=template)


def compose(
    context: ComposeContext,
    profile: UserProfile,
    prefs: TemplatePreference,
) -> ComposeOutcome:
    """Compose with a default-configured ``SignatureService``."""
    return SignatureService().compose(context, profile, prefs)
