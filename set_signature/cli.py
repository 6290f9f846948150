from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path

from set_signature.config import LOG_LEVEL
from set_signature.models import ComposeCategory, ItemType
from set_signature.services import DictSettingsStore, EventService, QuoteService, SignatureService


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compose the HTML signature for a compose item from saved signature settings."
    )
    parser.add_argument(
        "--settings",
        type=Path,
        required=True,
        help="Path to a JSON file of saved settings (user_info, newMail, reply, forward)",
    )
    parser.add_argument(
        "--compose-type",
        choices=[c.value for c in ComposeCategory if c is not ComposeCategory.APPOINTMENT],
        help="Compose type of the item; omit for appointments",
    )
    parser.add_argument(
        "--item-type",
        choices=[t.value for t in ItemType],
        default=ItemType.MESSAGE.value,
        help="Item type (default: message)",
    )
    parser.add_argument("--seed", type=int, help="Seed for closing quote selection")
    return parser.parse_args(argv)


def _load_settings(path: Path) -> dict:
    with path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise SystemExit(f"Failed to parse JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit(f"Settings in {path} must be a JSON object")
    return data


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, stream=sys.stderr)

    store = DictSettingsStore(_load_settings(args.settings))
    quotes = QuoteService(rng=random.Random(args.seed)) if args.seed is not None else None
    service = EventService(SignatureService(quote_service=quotes))

    response = service.handle(store, args.compose_type, args.item_type)
    if response.notification is not None:
        print(response.notification.message, file=sys.stderr)
        return 2

    outcome = response.outcome
    if not outcome.ok:
        print(f"error: {outcome.error}", file=sys.stderr)
        return 1

    print(outcome.result.html)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
