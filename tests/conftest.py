"""Pytest configuration and shared fixtures."""

from datetime import datetime
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from markupsafe import Markup

from crud_admin.config import AdminSettings
from crud_admin.core.app_factory import create_app
from crud_admin.models import Property, Record, RecordError, Resource
from crud_admin.views.template_renderer import TemplateRenderer
from crud_admin.views.view_helpers import ViewHelpers


@pytest.fixture
def admin_settings():
    """AdminSettings with test values, independent of the environment."""
    return AdminSettings(
        _env_file=None,
        root_path="/admin",
        login_path="/admin/login",
        logout_path="/admin/logout",
        branding={"company_name": "Test Co"},
        assets={"styles": ["/custom.css"], "scripts": ["/custom.js"]},
    )


@pytest.fixture
def view_helpers(admin_settings):
    return ViewHelpers(admin_settings)


@pytest.fixture
def template_renderer():
    return TemplateRenderer()


@pytest.fixture
def stub_renderer():
    """Renderer stub that records calls instead of rendering."""
    renderer = MagicMock()
    renderer.render = MagicMock(return_value=Markup("<rendered>"))
    return renderer


@pytest.fixture
def users_resource():
    return Resource(
        id="users",
        name="Users",
        properties=[
            Property(name="email"),
            Property(name="createdAt", type="datetime"),
            Property(name="birthday", type="date"),
        ],
    )


@pytest.fixture
def user_record():
    return Record(
        id="42",
        params={
            "email": "jane@example.com",
            "createdAt": datetime(2024, 3, 5, 14, 7, 9),
            "birthday": "1990-07-21",
            "address": {"city": "Utrecht"},
        },
        errors={"createdAt": RecordError(message="Must be in the past", type="validation")},
    )


@pytest.fixture
def user_records():
    """Twelve users, enough for two list pages."""
    return [
        Record(id=str(index), params={"email": f"user{index}@example.com", "createdAt": datetime(2024, 1, index, 9, 30)})
        for index in range(1, 13)
    ]


@pytest.fixture
def test_client(admin_settings, users_resource, user_records):
    """FastAPI test client with lifespan context."""
    app = create_app(admin_settings, resources=[users_resource], records={"users": user_records})
    with TestClient(app) as client:
        yield client
