from __future__ import annotations

import json
from typing import List, Optional


def parse_name_list(raw: Optional[str]) -> List[str]:
    """Parse directory names from a JSON array or CSV.

    Accepts either:
    - JSON array: e.g., "[\"Family\", \"Work\", \"Emergency\"]"
    - CSV (commas/newlines treated as separators): "Family, Work, Emergency"

    Spaces are kept inside names ("Directory 1" is one name). Order is preserved
    and duplicates are kept so callers can reject them. Empty input yields [].
    """
    if not raw or not isinstance(raw, str):
        return []

    # Try JSON first
    try:
        data = json.loads(raw)
    except ValueError:
        data = None
    if isinstance(data, list):
        out: List[str] = []
        for item in data:
            if isinstance(item, bool) or item is None:
                continue
            s = str(item).strip()
            if s:
                out.append(s)
        return out

    # Fallback to CSV parsing; newlines count as commas
    norm = raw.replace("\n", ",")
    names: List[str] = []
    for tok in norm.split(","):
        tok = tok.strip()
        if (tok.startswith('"') and tok.endswith('"')) or (tok.startswith("'") and tok.endswith("'")):
            tok = tok[1:-1].strip()
        if tok:
            names.append(tok)
    return names


def parse_int(raw: Optional[str], what: str) -> Optional[int]:
    """Parse an integer setting; None for unset/blank, ValueError if malformed."""
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"Invalid integer for {what}: {raw!r}") from exc


__all__ = [
    "parse_name_list",
    "parse_int",
]
