"""Service layer - Signature composition logic.

Each service module has a clear interface and can be tested independently.
"""

from .errors import InvalidProfileError, MissingTemplatePreferenceError, SignatureServiceError
from .event_service import DictSettingsStore, EventResponse, EventService, SettingsStore
from .quote_service import QuoteService, select_quote
from .signature_service import ComposeOutcome, SignatureService, compose
from .template_selector import select_template
from .template_service import Branding, render_template_a, render_template_b

__all__ = [
    "SignatureServiceError",
    "InvalidProfileError",
    "MissingTemplatePreferenceError",
    "QuoteService",
    "select_quote",
    "Branding",
    "render_template_a",
    "render_template_b",
    "select_template",
    "ComposeOutcome",
    "SignatureService",
    "compose",
    "SettingsStore",
    "DictSettingsStore",
    "EventResponse",
    "EventService",
]
