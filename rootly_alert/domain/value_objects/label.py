"""
Label Value Object

Architectural Intent:
- Immutable key/value pair attached to an alert
- Parses the flat "key1:value1,key2:value2" form used by action inputs

Design Decisions:
- Only the first two colon-separated segments are used; anything after a
  second colon is dropped (so "url:https://x" becomes url -> "https")
- A label is only sent to the API when both trimmed fields are non-empty
"""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Label:
    """A single alert label."""

    key: str
    value: str

    def is_valid(self) -> bool:
        return bool(self.key.strip()) and bool(self.value.strip())

    def to_dict(self) -> dict[str, str]:
        return {"key": self.key, "value": self.value}

    def __str__(self) -> str:
        return f"{self.key}:{self.value}"


def parse_labels(text: str) -> list[Label]:
    """Parse a comma-separated list of key:value pairs.

    Blank input yields an empty list. A pair without a colon becomes a label
    with an empty value. Never raises.
    """
    labels: list[Label] = []
    if not text.strip():
        return labels

    for pair in text.split(","):
        parts = pair.split(":")
        key = parts[0].strip()
        value = parts[1].strip() if len(parts) > 1 else ""
        labels.append(Label(key=key, value=value))
    return labels


def format_labels(labels: Iterable[Label]) -> str:
    """Render labels back into the key:value,key:value form."""
    return ",".join(str(label) for label in labels)
