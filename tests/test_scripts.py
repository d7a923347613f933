"""
Operator scripts exercised end to end against a temporary SQLite database.
"""
from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

import pytest

import users_api.services.notification_service as notification_service
from users_api.repositories.sql_repository import SQLUserRepository

SCRIPTS = Path(__file__).resolve().parents[1] / "scripts"


def _load(name: str):
    spec = importlib.util.spec_from_file_location(f"scripts_{name}", SCRIPTS / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture()
def no_smtp(monkeypatch):
    monkeypatch.setattr(notification_service, "send_email", lambda *a, **kw: False)


def _run(monkeypatch, name: str, *args: str) -> None:
    monkeypatch.setattr(sys, "argv", [f"{name}.py", *args])
    _load(name).main()


def test_create_user_script_registers_user(temp_db, no_smtp, monkeypatch, capsys):
    _run(monkeypatch, "create_user", "--email", "john@example.com", "--name", "John Doe")

    out = capsys.readouterr().out
    assert "OK: user created" in out
    assert "john@example.com" in out
    users = SQLUserRepository().find_all()
    assert [(u.email, u.name, u.active) for u in users] == [("john@example.com", "John Doe", True)]


def test_create_user_script_duplicate_exits_with_message(temp_db, no_smtp, monkeypatch):
    _run(monkeypatch, "create_user", "--email", "john@example.com", "--name", "John Doe")

    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "create_user", "--email", "john@example.com", "--name", "Other")

    assert exc.value.code == "User with email john@example.com already exists"
    assert len(SQLUserRepository().find_all()) == 1


def test_create_user_script_blank_name(temp_db, no_smtp, monkeypatch):
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "create_user", "--email", "john@example.com", "--name", "  ")

    assert exc.value.code == "Name is required"
    assert SQLUserRepository().find_all() == []


def test_deactivate_user_script(temp_db, no_smtp, monkeypatch, capsys):
    _run(monkeypatch, "create_user", "--email", "john@example.com", "--name", "John Doe")
    user_id = SQLUserRepository().find_all()[0].id

    _run(monkeypatch, "deactivate_user", "--id", user_id)

    assert f"OK: user {user_id} deactivated" in capsys.readouterr().out
    assert SQLUserRepository().find_by_id(user_id).active is False


def test_deactivate_user_script_unknown_id(temp_db, no_smtp, monkeypatch):
    with pytest.raises(SystemExit) as exc:
        _run(monkeypatch, "deactivate_user", "--id", "missing-id")

    assert exc.value.code == "User not found with id: missing-id"
