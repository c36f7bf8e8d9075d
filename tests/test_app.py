"""
BookStore API — Configuration & Lifecycle Tests
================================================

What:  Settings loading, engine options, and startup behavior.
"""

import pytest
from pydantic import ValidationError

from bookstore_api.config import Settings
from bookstore_api.main import create_app


class TestSettings:
    """Environment-driven configuration."""

    def test_reads_required_values_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "3000")
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db:5432/books")

        settings = Settings(_env_file=None)

        assert settings.port == 3000
        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/books"

    def test_missing_port_rejected(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///x.db")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_missing_database_url_rejected(self, monkeypatch):
        monkeypatch.setenv("PORT", "3000")
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError, match="Invalid log_level"):
            Settings(port=8000, database_url="sqlite+aiosqlite:///x.db", log_level="LOUD", _env_file=None)

    def test_log_level_normalized(self):
        settings = Settings(port=8000, database_url="sqlite+aiosqlite:///x.db", log_level="debug", _env_file=None)
        assert settings.log_level == "DEBUG"

    def test_cors_origins_list(self):
        settings = Settings(
            port=8000,
            database_url="sqlite+aiosqlite:///x.db",
            cors_origins="http://a.test, http://b.test",
            _env_file=None,
        )
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_sqlite_engine_options_skip_pool_sizing(self):
        settings = Settings(port=8000, database_url="sqlite+aiosqlite:///x.db", _env_file=None)
        assert "pool_size" not in settings.engine_options()

    def test_server_engine_options_include_pool_sizing(self):
        settings = Settings(
            port=8000,
            database_url="postgresql+asyncpg://u:p@db/books",
            db_pool_size=7,
            _env_file=None,
        )
        options = settings.engine_options()
        assert options["pool_size"] == 7
        assert options["pool_pre_ping"] is True


class TestLifecycle:
    """Startup and route registration."""

    def test_routes_registered_for_both_resources(self, test_app):
        paths = {route.path for route in test_app.routes}
        for base in ("/api/bookstores", "/api/documents"):
            assert f"{base}/" in paths
            assert f"{base}/{{record_id}}" in paths
            assert f"{base}/add" in paths
            assert f"{base}/update/{{record_id}}" in paths
            assert f"{base}/delete/{{record_id}}" in paths

    @pytest.mark.asyncio
    async def test_startup_fails_when_database_unreachable(self, tmp_path):
        settings = Settings(
            port=8000,
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'dir' / 'db.sqlite'}",
            log_level="WARNING",
            _env_file=None,
        )
        app = create_app(settings)

        with pytest.raises(Exception):
            async with app.router.lifespan_context(app):
                pass
