"""Partial-update merge semantics."""
from types import SimpleNamespace

import pytest

from app.core.errors import ValidationError
from app.core.store.service import merge_changes, require_text


def make_entity():
    return SimpleNamespace(name="Dashboard", description="Panel", order=3, is_active=True)


def test_only_present_fields_are_applied():
    entity = make_entity()

    applied = merge_changes(entity, {"order": 5})

    assert applied == ["order"]
    assert entity.order == 5
    assert entity.name == "Dashboard"
    assert entity.description == "Panel"
    assert entity.is_active is True


@pytest.mark.parametrize(
    "field, value",
    [("is_active", False), ("order", 0), ("description", "")],
)
def test_falsy_values_still_apply(field, value):
    entity = make_entity()

    merge_changes(entity, {field: value})

    assert getattr(entity, field) == value


def test_empty_changes_are_a_no_op():
    entity = make_entity()

    assert merge_changes(entity, {}) == []
    assert entity == make_entity()


def test_null_is_rejected():
    entity = make_entity()

    with pytest.raises(ValidationError):
        merge_changes(entity, {"order": None})

    assert entity.order == 3


@pytest.mark.parametrize("value", [None, "", "   "])
def test_required_field_cannot_be_blanked(value):
    entity = make_entity()

    with pytest.raises(ValidationError) as exc_info:
        merge_changes(entity, {"name": value}, required={"name": "Module name is required"})

    assert exc_info.value.message == "Module name is required"
    assert entity.name == "Dashboard"


def test_required_text_is_trimmed():
    entity = make_entity()

    merge_changes(entity, {"name": "  Reportes "}, required={"name": "Module name is required"})

    assert entity.name == "Reportes"


def test_require_text():
    assert require_text(" x ", "missing") == "x"
    with pytest.raises(ValidationError):
        require_text(None, "missing")
    with pytest.raises(ValidationError):
        require_text(" \t", "missing")


def test_rejected_update_leaves_entity_untouched():
    entity = make_entity()

    with pytest.raises(ValidationError):
        merge_changes(entity, {"order": 5, "name": " "}, required={"name": "Module name is required"})

    assert entity == make_entity()


def test_null_error_uses_wire_name():
    with pytest.raises(ValidationError) as exc_info:
        merge_changes(make_entity(), {"is_active": None}, wire_names={"is_active": "activo"})

    assert exc_info.value.message == "Field 'activo' cannot be null"
