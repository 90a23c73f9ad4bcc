"""Settings coercion and the error envelope."""

from app.core.config import Settings
from app.core.errors import AppError, BadRequestError, NotFoundError, UnauthorizedError


def test_plain_postgres_url_switches_to_asyncpg(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/jobly")

    assert Settings().DATABASE_URL == "postgresql+asyncpg://u:p@db:5432/jobly"


def test_asyncpg_url_left_alone(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db:5432/jobly")

    assert Settings().DATABASE_URL == "postgresql+asyncpg://u:p@db:5432/jobly"


def test_error_status_codes():
    assert BadRequestError().status_code == 400
    assert UnauthorizedError().status_code == 401
    assert NotFoundError().status_code == 404
    assert AppError().status_code == 500


def test_error_envelope():
    assert NotFoundError("No job: 7").to_response() == {
        "error": {"message": "No job: 7", "status": 404},
    }


def test_message_may_be_a_list():
    err = BadRequestError(["title: Field required"])
    assert err.to_response()["error"]["message"] == ["title: Field required"]


def test_explicit_status_code_overrides_class_default():
    assert AppError("Conflict", status_code=409).to_response() == {
        "error": {"message": "Conflict", "status": 409},
    }
    assert AppError("Boom", status_code=None).status_code == 500
