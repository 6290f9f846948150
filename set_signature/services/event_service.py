"""Event Service - Handling of a newly opened compose item.

This module handles:
- Reading the serialized profile and template choices from a settings store
- Building the setup notification when no profile has been saved yet
- Translating the host's compose type into a compose context and composing

Interface Contract:
- handle(store, compose_type, item_type) -> EventResponse
- A response carries either a notification or a ComposeOutcome
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from set_signature.models import ComposeContext, ItemType, TemplatePreference, UserProfile
from set_signature.services.errors import InvalidProfileError
from set_signature.services.signature_service import ComposeOutcome, SignatureService

logger = logging.getLogger(__name__)

PROFILE_KEY = "user_info"

NOTIFICATION_ID = "fd90eb33431b46f58a68720c36154b4a"
NOTIFICATION_TEXT = "Please set your signature with the Office Add-ins sample."

COMMAND_IDS = {
    ItemType.MESSAGE: "MRCS_TpBtn0",
    ItemType.APPOINTMENT: "MRCS_TpBtn1",
}


class SettingsStore(ABC):
    """Read-only access to the user's roaming settings."""

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the stored value for key, or None."""
        pass


class DictSettingsStore(SettingsStore):
    """Settings store backed by an in-memory mapping."""

    def __init__(self, values: dict[str, Any] | None = None):
        self._values = dict(values or {})

    def get(self, key: str) -> Any:
        return self._values.get(key)


def command_id_for(item_type: ItemType) -> str:
    """Task pane command matching the item type."""
    return COMMAND_IDS.get(item_type, COMMAND_IDS[ItemType.MESSAGE])


@dataclass(frozen=True)
class NotificationMessage:
    """Information bar asking the user to set up a signature."""
    command_id: str
    id: str = NOTIFICATION_ID
    message: str = NOTIFICATION_TEXT
    icon: str = "Icon.16x16"
    action_text: str = "Set signatures"

    def to_dict(self) -> dict[str, Any]:
        """Convert to the host's notification message shape."""
        return {
            "id": self.id,
            "type": "insightMessage",
            "message": self.message,
            "icon": self.icon,
            "actions": [
                {
                    "actionType": "showTaskPane",
                    "actionText": self.action_text,
                    "commandId": self.command_id,
                    "contextData": "{''}",
                }
            ],
        }


@dataclass(frozen=True)
class EventResponse:
    """What the shell should do with the compose item."""
    outcome: ComposeOutcome | None = None
    notification: NotificationMessage | None = None


def load_profile(store: SettingsStore) -> UserProfile | None:
    """Read the saved profile, or None when nothing has been saved.

    Raises:
        InvalidProfileError: If the saved value is not a JSON object of strings
    """
    raw = store.get(PROFILE_KEY)
    if not raw:
        return None
    if isinstance(raw, dict):
        data = raw
    else:
        try:
            data = json.loads(raw)
        except (TypeError, json.JSONDecodeError) as e:
            raise InvalidProfileError(f"Saved profile is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise InvalidProfileError("Saved profile must be a JSON object")
    try:
        return UserProfile.from_dict(data)
    except ValueError as e:
        raise InvalidProfileError(f"Saved profile is invalid: {e}") from e


class EventService:
    """Service reacting to a new compose item."""

    def __init__(self, signature_service: SignatureService | None = None):
        """Initialize with optional signature service dependency.

        Args:
            signature_service: Composer to use. If None, creates default.
        """
        self._signatures = signature_service

    @property
    def signatures(self) -> SignatureService:
        """Lazy load signature service."""
        if self._signatures is None:
            self._signatures = SignatureService()
        return self._signatures

    def handle(
        self,
        store: SettingsStore,
        compose_type: str | None,
        item_type: ItemType | str = ItemType.MESSAGE,
    ) -> EventResponse:
        """Decide between a setup notification and a composed signature.

        Args:
            store: User settings
            compose_type: Host compose type ("newMail", "reply", "forward"),
                None when the host reports none (appointments)
            item_type: Host item type

        Returns:
            EventResponse: Notification or composition outcome
        """
        context = ComposeContext.from_compose_type(compose_type, item_type)

        try:
            profile = load_profile(store)
        except InvalidProfileError as e:
            logger.warning("[event] unreadable profile error=%s", e)
            return EventResponse(outcome=ComposeOutcome(error=e))

        if profile is None:
            logger.info("[event] no profile saved item_type=%s", context.item_type.value)
            return EventResponse(
                notification=NotificationMessage(command_id=command_id_for(context.item_type))
            )

        prefs = TemplatePreference.from_dict(store)
        logger.debug("[event] category=%s prefs=%s", context.category.value, prefs.to_dict())
        return EventResponse(outcome=self.signatures.compose(context, profile, prefs))
