"""Compose context and template preference models.

Pure data structures for describing the item being composed and the
per-user choice of template for each kind of item.
"""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Any


class ComposeCategory(Enum):
    """Kind of item being composed. Values match the host's compose types."""
    NEW_MESSAGE = "newMail"
    REPLY = "reply"
    FORWARD = "forward"
    APPOINTMENT = "appointment"


class ItemType(Enum):
    """Host item type."""
    MESSAGE = "message"
    APPOINTMENT = "appointment"


class TemplateId(Enum):
    """Available signature templates."""
    TEMPLATE_A = "templateA"
    TEMPLATE_B = "templateB"

    @classmethod
    def parse(cls, value: Any) -> "TemplateId | None":
        """Return the matching template, or None for unknown/empty values."""
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        return None


# Settings keys that carry a template choice; appointments reuse NEW_MESSAGE
PREFERENCE_CATEGORIES = (
    ComposeCategory.NEW_MESSAGE,
    ComposeCategory.REPLY,
    ComposeCategory.FORWARD,
)


@dataclass(frozen=True)
class ComposeContext:
    """Item being composed when a signature is requested."""
    category: ComposeCategory
    item_type: ItemType = ItemType.MESSAGE

    @classmethod
    def from_compose_type(
        cls,
        compose_type: str | None,
        item_type: ItemType | str = ItemType.MESSAGE,
    ) -> "ComposeContext":
        """Translate the host's compose type into a context.

        A missing compose type means the host could not report one, which
        only happens for appointments. Unrecognized compose types are
        treated as new messages.
        """
        if not isinstance(item_type, ItemType):
            item_type = ItemType(item_type)
        if not compose_type:
            return cls(category=ComposeCategory.APPOINTMENT, item_type=item_type)
        if compose_type == ComposeCategory.REPLY.value:
            category = ComposeCategory.REPLY
        elif compose_type == ComposeCategory.FORWARD.value:
            category = ComposeCategory.FORWARD
        else:
            category = ComposeCategory.NEW_MESSAGE
        return cls(category=category, item_type=item_type)


@dataclass(frozen=True)
class TemplatePreference:
    """Per-user template choice for each compose category."""
    choices: dict[ComposeCategory, TemplateId] = dataclass_field(default_factory=dict)

    def get(self, category: ComposeCategory) -> TemplateId | None:
        return self.choices.get(category)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary keyed like the stored settings."""
        return {category.value: template.value for category, template in self.choices.items()}

    @classmethod
    def from_dict(cls, data: Any) -> "TemplatePreference":
        """Create from a dict or any settings object exposing ``get(key)``.

        Unknown template names count as no preference for that category.
        """
        choices: dict[ComposeCategory, TemplateId] = {}
        for category in PREFERENCE_CATEGORIES:
            template = TemplateId.parse(data.get(category.value))
            if template is not None:
                choices[category] = template
        return cls(choices=choices)
