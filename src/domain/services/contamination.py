"""Domain helpers describing site contamination."""

import json
from collections.abc import Iterable, Mapping

from src.domain.constants import CONTAMINATION_SUBSTANCE_GROUPS, MISSING_LABEL
from src.domain.models import ContaminationItem

OTHER_CONTAMINATION_LABEL = "기타오염"


def _coerce_item(raw) -> ContaminationItem | None:
    if isinstance(raw, ContaminationItem):
        return raw
    if not isinstance(raw, Mapping):
        return None
    substance = raw.get("type")
    value = raw.get("value")
    if not isinstance(substance, str):
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return ContaminationItem(type=substance, value=float(value))


def to_contamination_items(raw) -> tuple[ContaminationItem, ...]:
    """Normalize stored contamination info into items.

    Accepts a list of items or mappings, or a JSON string holding such a
    list. Anything that is not entirely well-formed yields no items.

    Args:
        raw: Value of the contamination_info column.

    Returns:
        tuple[ContaminationItem, ...]: Parsed items, possibly empty.
    """
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            return ()
    if not isinstance(raw, (list, tuple)):
        return ()
    items = [_coerce_item(entry) for entry in raw]
    if any(item is None for item in items):
        return ()
    return tuple(items)


def contamination_groups(raw) -> list[str]:
    """Return the substance groups found in the contamination info."""
    items = to_contamination_items(raw)
    if items:
        text = ", ".join(item.type for item in items)
    elif isinstance(raw, str):
        text = raw
    else:
        text = ""
    lowered = text.lower()
    if not lowered:
        return []
    return [
        group
        for group, substances in CONTAMINATION_SUBSTANCE_GROUPS.items()
        if _contains_any(lowered, substances)
    ]


def _contains_any(text: str, substances: Iterable[str]) -> bool:
    return any(substance.lower() in text for substance in substances)


def contamination_display(raw) -> str:
    """Return the short label shown in the orders table.

    Args:
        raw: Contamination items or the raw stored value.

    Returns:
        str: Group name, two group names, "N종 복합" for three or more,
        the other-contamination label when nothing matches, or the missing
        label when there is no information.
    """
    items = to_contamination_items(raw)
    has_text = isinstance(raw, str) and raw.strip() != ""
    if not items and not has_text:
        return MISSING_LABEL
    groups = contamination_groups(items if items else raw)
    if not groups:
        return OTHER_CONTAMINATION_LABEL
    if len(groups) <= 2:
        return ", ".join(groups)
    return f"{len(groups)}종 복합"


__all__ = [
    "OTHER_CONTAMINATION_LABEL",
    "to_contamination_items",
    "contamination_groups",
    "contamination_display",
]
