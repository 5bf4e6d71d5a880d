"""
Attribute-Array Filter

Drops blank entries from an optional list and attaches what is left to the
alert attribute map. Strings count as blank when they are empty after
stripping; labels count as blank unless both key and value are non-empty.
"""

from typing import Any, MutableMapping, Optional, Sequence, Union

from rootly_alert.domain.value_objects.label import Label

AttributeItem = Union[str, Label]


def _is_present(item: AttributeItem) -> bool:
    if isinstance(item, Label):
        return item.is_valid()
    return bool(item.strip())


def add_non_empty(
    items: Optional[Sequence[AttributeItem]],
    key: str,
    attributes: MutableMapping[str, Any],
) -> None:
    """Attach the non-blank items under ``key`` if any survive.

    The surviving items are kept as given (untrimmed) in a new list, so the
    caller's sequence is never modified. An existing ``key`` is left alone.
    """
    if not items:
        return

    kept = [item for item in items if _is_present(item)]
    if kept:
        attributes.setdefault(key, kept)
