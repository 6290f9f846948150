"""Signature result data model."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SignatureResult:
    """HTML signature plus optional inline logo, ready to apply to an item."""
    html: str
    logo_data: bytes | None = None
    logo_file_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the dictionary shape the signature applier consumes."""
        return {
            "signature": self.html,
            "logoBase64": base64.b64encode(self.logo_data).decode("ascii") if self.logo_data else None,
            "logoFileName": self.logo_file_name,
        }
