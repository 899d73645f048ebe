from __future__ import annotations

import re
from typing import List, Optional, Tuple

from apple_model_names.catalog.model_def import MODEL_FAMILIES, MODEL_NAMES, DeviceFamily

# <FamilyName><Major>,<Minor>; only used for ordering, never for validation
_ID_RE = re.compile(r"^(?P<family>[A-Za-z]+)(?P<major>\d+),(?P<minor>\d+)$")


def _natural_key(identifier: str) -> Tuple[int, str, int, int, str]:
    m = _ID_RE.match(identifier)
    if not m:
        return (1, identifier, 0, 0, identifier)
    return (0, m.group("family"), int(m.group("major")), int(m.group("minor")), identifier)


def name_for(identifier: str) -> Optional[str]:
    """Marketing name for an exact hardware identifier, or None when unknown."""
    return MODEL_NAMES.get(identifier)


def family_for(identifier: str) -> Optional[DeviceFamily]:
    return MODEL_FAMILIES.get(identifier)


def identifiers_for(name: str) -> List[str]:
    """All identifiers sold under `name`, in (family, major, minor) order."""
    return sorted((i for i, n in MODEL_NAMES.items() if n == name), key=_natural_key)


def known_identifiers(family: Optional[DeviceFamily] = None) -> List[str]:
    ids = MODEL_NAMES.keys() if family is None else (
        i for i, f in MODEL_FAMILIES.items() if f is family
    )
    return sorted(ids, key=_natural_key)
