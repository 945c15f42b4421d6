"""Tests for settings and the error taxonomy."""

import pytest

from .errors import (
    ErrorCode,
    InternalError,
    NotFoundError,
    ValidationError,
    error_code_to_status,
)
from .settings import Settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PORT", raising=False)
    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.cors_origins == ["*"]
    assert settings.contact_delay_seconds == 1.0


def test_settings_port_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    assert Settings(_env_file=None).port == 8080


@pytest.mark.parametrize(
    ("error", "status"),
    [
        (ValidationError("All fields are required"), 400),
        (NotFoundError(), 404),
        (InternalError("Server error. Please try again later."), 500),
    ],
)
def test_error_status(error, status: int) -> None:
    assert error.http_status == status
    assert error.to_dict()["success"] is False


def test_error_body_hides_details() -> None:
    error = InternalError("Server error. Please try again later.", {"cause": "secret"})
    assert error.to_dict() == {
        "success": False,
        "message": "Server error. Please try again later.",
    }
    assert "INTERNAL_ERROR" in str(error)


def test_not_found_default_message() -> None:
    assert NotFoundError().message == "API endpoint not found"


def test_every_code_has_status() -> None:
    for code in ErrorCode:
        assert error_code_to_status(code) in (400, 404, 500)
