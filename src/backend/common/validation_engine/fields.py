from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

FieldAliases = Mapping[str, Sequence[str]]


def resolve_field(row: Mapping[str, str], candidates: Sequence[str]) -> str:
    """Return the value of the first candidate header present in ``row``.

    Header names are compared case-insensitively but otherwise exactly; no
    partial or fuzzy matching. Missing headers and empty values both yield "".
    """
    lowered: Dict[str, str] = {}
    for key in row.keys():
        lowered.setdefault(str(key).lower(), key)

    for candidate in candidates:
        hit = lowered.get(candidate.lower())
        if hit is not None:
            return row.get(hit) or ""
    return ""


def candidate_names(field: str, aliases: Optional[FieldAliases] = None) -> List[str]:
    names = [field]
    if aliases:
        names.extend(aliases.get(field, ()))

    seen: set[str] = set()
    out: List[str] = []
    for name in names:
        key = name.strip().lower()
        if not key or key in seen:
            continue
        seen.add(key)
        out.append(name.strip())
    return out
