"""Role matching between candidate position titles and open roles.

Swiss job titles carry qualification suffixes ("Elektroinstallateur EFZ",
"Dipl. Ing. HF") that say nothing about the trade itself, so they are dropped
before comparing.
"""

import re

from models.schemas.contact import Role

# Qualification words ignored when comparing titles
IGNORE_WORDS = frozenset({"efz", "eba", "hf", "bp", "dipl", "ing", "bsc", "msc"})

_WORD_RE = re.compile(r"\s+")


def core_role_name(title: str | None) -> str:
    """Lowercased title without qualification words ("Maurer EFZ" -> "maurer")."""
    if not title:
        return ""
    words = _WORD_RE.split(title.lower().strip())
    return " ".join(w for w in words if w and w.rstrip(".") not in IGNORE_WORDS).strip()


def roles_match(position_title: str | None, role_name: str | None) -> bool:
    """True when one core name contains the other."""
    core_position = core_role_name(position_title)
    core_role = core_role_name(role_name)
    if not core_position or not core_role:
        return False
    return core_role in core_position or core_position in core_role


def find_best_matching_role(position_title: str | None, roles: list[Role]) -> Role | None:
    """Most specific related role: the longest matching core role name wins."""
    core_position = core_role_name(position_title)
    if not core_position:
        return None

    best: Role | None = None
    best_length = 0
    for role in roles:
        core_role = core_role_name(role.name)
        if not core_role:
            continue
        if core_role in core_position or core_position in core_role:
            if len(core_role) > best_length:
                best_length = len(core_role)
                best = role
    return best


def resolve_role(role_name: str, roles: list[Role]) -> Role | None:
    """Look up a requested role name in the known role set.

    Exact case-insensitive name first, then equal core names, so
    "Zimmermann" resolves to "Zimmermann EFZ".
    """
    wanted = role_name.strip().lower()
    if not wanted:
        return None
    for role in roles:
        if role.name.strip().lower() == wanted:
            return role

    wanted_core = core_role_name(role_name)
    if not wanted_core:
        return None
    for role in roles:
        if core_role_name(role.name) == wanted_core:
            return role
    return None
