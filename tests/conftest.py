"""Shared fixtures: an app built from test settings, with mail delivery recorded instead of sent."""

from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from backend.app import create_app
from backend.config import Settings
from backend.dependencies import get_mailer
from helpers import RecordingMailer


@pytest.fixture
def settings(tmp_path):
    return Settings(
        smtp_user="tickets@example.com",
        smtp_password="app-password",
        upload_dir=str(tmp_path / "uploads"),
    )


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
def make_client(mailer):
    def _make(settings, mailer=mailer, raise_server_exceptions=True):
        app = create_app(settings)
        app.dependency_overrides[get_mailer] = lambda: mailer
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make


@pytest.fixture
def client(make_client, settings):
    with make_client(settings) as test_client:
        yield test_client


@pytest.fixture
def small_upload_settings(settings):
    return replace(settings, max_upload_bytes=1024)


@pytest.fixture
def booking_form():
    return {"name": "Jane Doe", "email": "jane@example.com", "phone": "1234567890"}
