from unittest.mock import patch

import pytest

from cli import main as cli
from data.db import Database


@pytest.fixture
def cli_env(monkeypatch, tmp_path):
    db_path = tmp_path / "cli.db"
    monkeypatch.setenv("JWT_SECRET", "c" * 32)
    monkeypatch.setenv("DATABASE_PATH", str(db_path))
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    return ["--env-file", str(tmp_path / "missing.env")], db_path


def _count(db_path, table):
    db = Database(str(db_path))
    return db.execute_query(f"SELECT COUNT(*) as count FROM {table}")[0]["count"]


def test_init_db_creates_settings_row(cli_env, capsys):
    args, db_path = cli_env
    cli.main(args + ["init-db"])

    assert "Database ready" in capsys.readouterr().out
    assert _count(db_path, "settings") == 1


def test_seed_inserts_requested_records(cli_env, capsys):
    args, db_path = cli_env
    cli.main(args + ["seed", "--count", "3"])

    assert "Generated 3 traffic records" in capsys.readouterr().out
    assert _count(db_path, "traffic_logs") == 3


def test_seed_rejects_non_positive_count(cli_env):
    args, _ = cli_env
    with pytest.raises(SystemExit):
        cli.main(args + ["seed", "--count", "0"])


def test_create_user_prompts_for_password(cli_env, capsys):
    args, db_path = cli_env
    with patch.object(cli, "getpass", side_effect=["hunter222", "hunter222"]):
        cli.main(args + ["create-user", "--username", "ops", "--email", "ops@example.com"])

    assert "User 'ops' created" in capsys.readouterr().out
    assert _count(db_path, "users") == 1


def test_create_user_duplicate_exits(cli_env):
    args, _ = cli_env
    with patch.object(cli, "getpass", side_effect=["hunter222"] * 4):
        cli.main(args + ["create-user", "--username", "ops", "--email", "ops@example.com"])
        with pytest.raises(SystemExit):
            cli.main(args + ["create-user", "--username", "ops", "--email", "ops@example.com"])


def test_help_names_socketio_client(monkeypatch, capsys):
    monkeypatch.setenv("COLUMNS", "200")
    with pytest.raises(SystemExit):
        cli.main(["--help"])

    assert "viewers need a Socket.IO client" in capsys.readouterr().out
