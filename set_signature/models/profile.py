"""User profile data model.

Pure data structure with no business logic.
Stored settings have used several spellings for the same field over time;
``UserProfile.from_dict`` folds them into one shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


# Accepted keys per field, first match wins
_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "name": ("name",),
    "job_title": ("jobTitle", "job_title", "job"),
    "email": ("email",),
    "phone": ("phone",),
    "blog_link": ("blogLink", "blog_link"),
    "linkedin_link": ("linkedinLink", "linkedin_link"),
    "follow_research_link": ("followResearchLink", "follow_research_link", "follow_reseach_link"),
    "greeting": ("greeting",),
    "group1_quotes": ("group1Quotes", "group_1_quotes", "nerdy_quotes"),
    "group2_quotes": ("group2Quotes", "group_2_quotes", "philosophical_quotes"),
}


def _pick(data: dict[str, Any], field_name: str) -> Any:
    for key in _FIELD_ALIASES[field_name]:
        if key in data:
            value = data[key]
            if value is not None and not isinstance(value, str):
                raise ValueError(f"Field '{key}' must be a string, got {type(value).__name__}")
            return value
    return None


@dataclass(frozen=True)
class UserProfile:
    """Signature owner's details plus the two closing-quote pools."""
    name: str = ""
    job_title: str = ""
    email: str = ""
    phone: str | None = None
    blog_link: str | None = None
    linkedin_link: str | None = None
    follow_research_link: str | None = None
    greeting: str | None = None
    group1_quotes: str = ""
    group2_quotes: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "jobTitle": self.job_title,
            "email": self.email,
            "phone": self.phone,
            "blogLink": self.blog_link,
            "linkedinLink": self.linkedin_link,
            "followResearchLink": self.follow_research_link,
            "greeting": self.greeting,
            "group1Quotes": self.group1_quotes,
            "group2Quotes": self.group2_quotes,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserProfile":
        """Create from dictionary (camelCase or legacy snake_case keys).

        Raises:
            ValueError: If a field holds something other than a string or null
        """
        return cls(
            name=_pick(data, "name") or "",
            job_title=_pick(data, "job_title") or "",
            email=_pick(data, "email") or "",
            phone=_pick(data, "phone"),
            blog_link=_pick(data, "blog_link"),
            linkedin_link=_pick(data, "linkedin_link"),
            follow_research_link=_pick(data, "follow_research_link"),
            greeting=_pick(data, "greeting"),
            group1_quotes=_pick(data, "group1_quotes") or "",
            group2_quotes=_pick(data, "group2_quotes") or "",
        )
