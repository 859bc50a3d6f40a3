from models.schemas.contact import Role
from services.role_match import core_role_name, find_best_matching_role, resolve_role, roles_match

ROLES = [
    Role(id="1", name="Elektroinstallateur EFZ"),
    Role(id="2", name="Montage-Elektriker EFZ"),
    Role(id="3", name="Elektro"),
    Role(id="4", name="Zimmermann EFZ"),
]


def test_core_role_name_strips_qualifications():
    assert core_role_name("Elektroinstallateur EFZ") == "elektroinstallateur"
    assert core_role_name("Dipl. Ing. HF Holzbau") == "holzbau"
    assert core_role_name("  Maurer   EBA ") == "maurer"
    assert core_role_name(None) == ""
    assert core_role_name("EFZ") == ""


def test_roles_match_contains_either_way():
    assert roles_match("Zimmermann", "Zimmermann EFZ")
    assert roles_match("Zimmermann EFZ mit Erfahrung", "zimmermann")
    assert roles_match("Elektro", "Elektroinstallateur EFZ")


def test_roles_match_unrelated_or_empty():
    assert not roles_match("Maler", "Zimmermann")
    assert not roles_match(None, "Zimmermann")
    assert not roles_match("EFZ", "Zimmermann EFZ")
    assert not roles_match("Maler", "")


def test_find_best_matching_role_prefers_most_specific():
    best = find_best_matching_role("Elektroinstallateur", ROLES)
    assert best.id == "1"


def test_find_best_matching_role_none():
    assert find_best_matching_role("Koch", ROLES) is None
    assert find_best_matching_role(None, ROLES) is None
    assert find_best_matching_role("Zimmermann", []) is None


def test_resolve_role_exact_then_core():
    assert resolve_role("zimmermann efz", ROLES).id == "4"
    assert resolve_role("Zimmermann", ROLES).id == "4"
    assert resolve_role("Montage-Elektriker", ROLES).id == "2"


def test_resolve_role_unknown():
    assert resolve_role("Bäcker", ROLES) is None
    assert resolve_role("   ", ROLES) is None
    assert resolve_role("EFZ", ROLES) is None
