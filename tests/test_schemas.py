import pytest
from pydantic import ValidationError

from echoverse.auth import PasswordReset, UserCreate, UserUpdate, error_list
from echoverse.errors import ValidationFailed


def test_user_create_accepts_wire_names():
    user = UserCreate.model_validate(
        {"username": "ada", "email": "ada@example.com", "password": "secret1", "confirmPassword": "secret1"}
    )
    assert user.confirm_password == "secret1"


def test_password_length_bounds():
    with pytest.raises(ValidationError) as info:
        UserCreate.model_validate(
            {"username": "ada", "email": "ada@example.com", "password": "x" * 21, "confirmPassword": "x" * 21}
        )
    locs = {tuple(e["loc"]) for e in error_list(info.value)}
    assert locs == {("password",), ("confirmPassword",)}


def test_update_only_checks_confirmation_when_both_given():
    assert UserUpdate.model_validate({"username": "grace"}).password is None
    assert UserUpdate.model_validate({"password": "secret1"}).confirm_password is None

    with pytest.raises(ValidationError):
        UserUpdate.model_validate({"password": "secret1", "confirmPassword": "secret2"})


def test_password_reset_mismatch_points_at_confirmation():
    with pytest.raises(ValidationError) as info:
        PasswordReset.model_validate(
            {"email": "ada@example.com", "newPassword": "secret1", "confirmPassword": "secret9"}
        )
    errors = error_list(info.value)
    assert errors[0]["loc"] == ["confirmPassword"]
    assert "Passwords do not match" in errors[0]["msg"]


def test_field_errors_groups_by_field():
    failed = ValidationFailed(
        [
            {"loc": ["email"], "msg": "bad email"},
            {"loc": ["password"], "msg": "too short"},
            {"loc": ["password"], "msg": "too simple"},
            {"loc": [], "msg": "whole payload"},
        ]
    )
    assert failed.field_errors() == {
        "email": ["bad email"],
        "password": ["too short", "too simple"],
        "": ["whole payload"],
    }
