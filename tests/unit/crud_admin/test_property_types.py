"""Unit tests for property type renderers."""

from datetime import datetime

import pytest

from crud_admin.exceptions import PropertyTypeException
from crud_admin.models import Property, Record
from crud_admin.property_types import (
    DatePropertyType,
    DateTimePropertyType,
    DefaultPropertyType,
    PropertyTypeRegistry,
)


@pytest.fixture
def created_at():
    return Property(name="createdAt", type="datetime")


@pytest.fixture
def empty_record():
    return Record(id="1", params={"createdAt": None})


def rendered_call(renderer):
    """Return (template_id, context) of the last render call."""
    template_id, context = renderer.render.call_args.args
    return template_id, context


class TestDateTimePropertyType:
    """Tests for the datetime property type with a stub renderer."""

    def test_list(self, stub_renderer, view_helpers, created_at, user_record):
        DateTimePropertyType(stub_renderer).list(created_at, user_record, view_helpers)

        template_id, context = rendered_call(stub_renderer)
        assert template_id == "property-types/default/list"
        assert context["value"] == "2024-03-05 14:07"
        assert context["record"] is user_record
        assert context["property"] is created_at
        assert context["h"] is view_helpers

    def test_show(self, stub_renderer, view_helpers, created_at, user_record):
        DateTimePropertyType(stub_renderer).show(created_at, user_record, view_helpers)

        template_id, context = rendered_call(stub_renderer)
        assert template_id == "property-types/default/show"
        assert context == {"value": "2024-03-05 14:07", "property": created_at, "h": view_helpers}

    def test_edit_passes_error(self, stub_renderer, view_helpers, created_at, user_record):
        DateTimePropertyType(stub_renderer).edit(created_at, user_record, view_helpers)

        template_id, context = rendered_call(stub_renderer)
        assert template_id == "property-types/date/edit"
        assert context["value"] == "2024-03-05 14:07"
        assert context["error"].message == "Must be in the past"

    def test_filter_key(self, stub_renderer, view_helpers, created_at):
        filters = {"createdAt": {"from": "2024-01-01"}}

        DateTimePropertyType(stub_renderer).filter(created_at, filters, view_helpers)

        template_id, context = rendered_call(stub_renderer)
        assert template_id == "property-types/date/filter"
        assert context["filter_key"] == "filters.createdAt"
        assert context["filters"] is filters

    def test_head_comes_from_date_type(self, stub_renderer, view_helpers, created_at):
        DateTimePropertyType(stub_renderer).head(created_at, view_helpers)

        template_id, context = rendered_call(stub_renderer)
        assert template_id == "property-types/date/head"
        assert context == {"property": created_at, "h": view_helpers}
        assert DateTimePropertyType.head is DatePropertyType.head

    @pytest.mark.parametrize("view", ["list", "show", "edit"])
    def test_missing_value_renders_invalid_date(self, stub_renderer, view_helpers, created_at, empty_record, view):
        getattr(DateTimePropertyType(stub_renderer), view)(created_at, empty_record, view_helpers)

        _, context = rendered_call(stub_renderer)
        assert context["value"] == "Invalid date"

    def test_unparseable_value_renders_invalid_date(self, stub_renderer, view_helpers, created_at):
        record = Record(id="1", params={"createdAt": "soon"})

        DateTimePropertyType(stub_renderer).list(created_at, record, view_helpers)

        _, context = rendered_call(stub_renderer)
        assert context["value"] == "Invalid date"


class TestDatePropertyType:
    def test_list_uses_date_format(self, stub_renderer, view_helpers, user_record):
        birthday = Property(name="birthday", type="date")

        DatePropertyType(stub_renderer).list(birthday, user_record, view_helpers)

        _, context = rendered_call(stub_renderer)
        assert context["value"] == "1990-07-21"


class TestDefaultPropertyType:
    def test_list_renders_raw_value(self, stub_renderer, view_helpers, user_record):
        email = Property(name="email")

        DefaultPropertyType(stub_renderer).list(email, user_record, view_helpers)

        template_id, context = rendered_call(stub_renderer)
        assert template_id == "property-types/default/list"
        assert context["value"] == "jane@example.com"

    def test_nested_param(self, stub_renderer, view_helpers, user_record):
        city = Property(name="address.city")

        DefaultPropertyType(stub_renderer).show(city, user_record, view_helpers)

        _, context = rendered_call(stub_renderer)
        assert context["value"] == "Utrecht"

    def test_filter_key(self, stub_renderer, view_helpers):
        DefaultPropertyType(stub_renderer).filter(Property(name="email"), {}, view_helpers)

        template_id, context = rendered_call(stub_renderer)
        assert template_id == "property-types/default/filter"
        assert context["filter_key"] == "filters.email"


class TestRenderedTemplates:
    """Property types rendered through the real Jinja2 templates."""

    def test_datetime_list_html(self, template_renderer, view_helpers, created_at, user_record):
        html = DateTimePropertyType(template_renderer).list(created_at, user_record, view_helpers)

        assert "2024-03-05 14:07" in html

    def test_datetime_edit_html_shows_error(self, template_renderer, view_helpers, created_at, user_record):
        html = DateTimePropertyType(template_renderer).edit(created_at, user_record, view_helpers)

        assert 'name="createdAt"' in html
        assert "Must be in the past" in html
        assert "is-danger" in html

    def test_datetime_filter_html(self, template_renderer, view_helpers, created_at):
        html = DateTimePropertyType(template_renderer).filter(
            created_at, {"createdAt": {"from": "2024-01-01"}}, view_helpers
        )

        assert 'name="filters.createdAt~~from"' in html
        assert 'value="2024-01-01"' in html

    def test_missing_value_html(self, template_renderer, view_helpers, created_at, empty_record):
        html = DateTimePropertyType(template_renderer).show(created_at, empty_record, view_helpers)

        assert "Invalid date" in html

    def test_values_are_escaped(self, template_renderer, view_helpers):
        record = Record(id="1", params={"email": "<script>"})

        html = DefaultPropertyType(template_renderer).list(Property(name="email"), record, view_helpers)

        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_head_uses_label(self, template_renderer, view_helpers):
        html = DatePropertyType(template_renderer).head(Property(name="created_at", type="date"), view_helpers)

        assert "Created At" in html


class TestPropertyTypeRegistry:
    def test_builtin_types(self, stub_renderer):
        registry = PropertyTypeRegistry(stub_renderer)

        assert registry.type_names() == ["date", "datetime", "default", "string"]
        assert isinstance(registry.get("datetime"), DateTimePropertyType)
        assert isinstance(registry.get("date"), DatePropertyType)

    def test_unknown_type_falls_back_to_default(self, stub_renderer):
        registry = PropertyTypeRegistry(stub_renderer)

        assert registry.get("richtext") is registry.get("default")
        assert "richtext" not in registry

    def test_for_property(self, stub_renderer, created_at):
        registry = PropertyTypeRegistry(stub_renderer)

        assert isinstance(registry.for_property(created_at), DateTimePropertyType)

    def test_register_replaces(self, stub_renderer):
        registry = PropertyTypeRegistry(stub_renderer)
        custom = DefaultPropertyType(stub_renderer)

        registry.register("datetime", custom)

        assert registry.get("datetime") is custom

    def test_register_rejects_empty_name(self, stub_renderer):
        registry = PropertyTypeRegistry(stub_renderer)

        with pytest.raises(PropertyTypeException) as exc_info:
            registry.register("", DefaultPropertyType(stub_renderer))

        assert exc_info.value.details == {"type_name": "", "implementation": "DefaultPropertyType"}

    def test_renderer_is_shared(self, stub_renderer):
        registry = PropertyTypeRegistry(stub_renderer)

        assert registry.get("date").renderer is stub_renderer
        assert registry.get("datetime").renderer is stub_renderer


def test_datetime_naive_value_keeps_wall_clock(stub_renderer, view_helpers, created_at):
    record = Record(id="1", params={"createdAt": datetime(2023, 12, 31, 23, 59)})

    DateTimePropertyType(stub_renderer).show(created_at, record, view_helpers)

    _, context = rendered_call(stub_renderer)
    assert context["value"] == "2023-12-31 23:59"
