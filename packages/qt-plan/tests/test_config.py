"""Tests for settings and row source factory."""

import json

import pytest

from qt_plan.config import Settings, get_settings
from qt_plan.execution import (
    SQLAlchemyRowSource,
    StaticRowSource,
    create_row_source,
    create_row_source_from_file,
    mask_url,
    normalize_database_url,
)


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.database_url == ""
        assert settings.dialect == "mysql"
        assert settings.explain_prefix == "EXPLAIN EXTENDED "
        assert settings.log_level == "INFO"
        assert settings.db_echo is False
        assert not settings.has_database

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("QT_PLAN_DATABASE_URL", "sqlite://")
        monkeypatch.setenv("QT_PLAN_DB_ECHO", "true")
        settings = Settings(_env_file=None)
        assert settings.database_url == "sqlite://"
        assert settings.db_echo is True
        assert settings.has_database

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestFactory:
    @pytest.mark.parametrize("url, expected", [
        ("mysql://u:p@h/db", "mysql+pymysql://u:p@h/db"),
        ("mariadb://u@h/db", "mariadb+pymysql://u@h/db"),
        ("mysql+mysqldb://u@h/db", "mysql+mysqldb://u@h/db"),
        ("sqlite://", "sqlite://"),
    ])
    def test_normalize_database_url(self, url, expected):
        assert normalize_database_url(url) == expected

    def test_mask_url_hides_password(self):
        masked = mask_url("mysql+pymysql://app:secret@db:3306/shop")
        assert "secret" not in masked
        assert masked == "mysql+pymysql://app:***@db:3306/shop"

    def test_create_row_source_from_dsn(self):
        with create_row_source("sqlite://") as source:
            assert isinstance(source, SQLAlchemyRowSource)
            assert source.execute_for_rows("SELECT 2 AS id") == [{"id": 2}]

    def test_create_row_source_from_env(self, monkeypatch):
        monkeypatch.setenv("QT_PLAN_DATABASE_URL", "sqlite://")
        get_settings.cache_clear()
        with create_row_source() as source:
            assert source.name == "sqlite://"

    @pytest.mark.parametrize("dsn", ["not a url", "nosuchdb://u@h/db"])
    def test_create_row_source_rejects_bad_url(self, dsn):
        with pytest.raises(ValueError, match="Invalid database URL") as exc_info:
            create_row_source(dsn)
        assert exc_info.value.__cause__ is not None

    def test_create_row_source_missing_driver(self, monkeypatch):
        cause = ModuleNotFoundError("No module named 'pymysql'")

        def _no_driver(*args, **kwargs):
            raise cause

        monkeypatch.setattr("qt_plan.execution.factory.SQLAlchemyRowSource", _no_driver)
        with pytest.raises(ValueError, match="driver not installed") as exc_info:
            create_row_source("mysql://u:p@localhost/db")
        assert exc_info.value.__cause__ is cause

    def test_create_row_source_requires_dsn(self, monkeypatch):
        monkeypatch.setattr(get_settings(), "database_url", "")
        with pytest.raises(ValueError, match="QT_PLAN_DATABASE_URL"):
            create_row_source()


class TestStaticRowSource:
    def test_rows_are_copied(self):
        rows = [{"id": 1, "table": "t"}]
        source = StaticRowSource(rows)
        out = source.execute_for_rows("ignored")
        out[0]["table"] = "changed"
        assert source.execute_for_rows("ignored") == [{"id": 1, "table": "t"}]
        assert len(source) == 1

    def test_from_json_list(self, tmp_path, union_rows):
        path = tmp_path / "rows.json"
        path.write_text(json.dumps(union_rows))
        source = create_row_source_from_file(path)
        assert source.execute_for_rows("") == union_rows
        assert source.name == str(path)

    def test_from_json_object(self, tmp_path, union_rows):
        path = tmp_path / "rows.json"
        path.write_text(json.dumps({"query": "select ...", "rows": union_rows}))
        assert StaticRowSource.from_json_file(path).execute_for_rows("") == union_rows

    def test_from_json_rejects_other_shapes(self, tmp_path):
        path = tmp_path / "rows.json"
        path.write_text(json.dumps([1, 2, 3]))
        with pytest.raises(ValueError):
            StaticRowSource.from_json_file(path)
