"""Integration tests for the embedded database lifecycle on the file engine."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from firebird_embedded.adapters.outbound import FileEngineManager
from firebird_embedded.application import EmbeddedFirebirdConfigurer, embedded_database
from firebird_embedded.domain import ConfigurationError, EngineState
from firebird_embedded.ports import ConnectionProperties


def use_workdir(monkeypatch: pytest.MonkeyPatch, path: Path) -> None:
    """Run in ``path`` with the file engine selected."""
    monkeypatch.chdir(path)
    monkeypatch.setenv("FIREBIRD_EMBEDDED_ENGINE__BACKEND", "file")
    # setenv records the original value so the published path is undone.
    monkeypatch.setenv("FIREBIRD", "")
    monkeypatch.delenv("FIREBIRD")


@pytest.fixture
def workdir(monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> Path:
    use_workdir(monkeypatch, temp_dir)
    return temp_dir


@pytest.mark.integration
class TestEmbeddedLifecycle:
    """Full configure/shutdown through the process-wide configurer."""

    def test_configure_then_shutdown(self, workdir: Path) -> None:
        configurer = EmbeddedFirebirdConfigurer.get_instance()
        assert isinstance(configurer.engine, FileEngineManager)
        properties = ConnectionProperties()

        configurer.configure_connection_properties(properties, "testdb")

        db_file = workdir / "target" / "embedded-example.fdb"
        assert properties.url == "jdbc:firebirdsql:embedded:target/embedded-example.fdb?charSet=utf-8"
        assert properties.username == "sysdba"
        assert properties.password == ""
        assert db_file.is_file()
        assert configurer.engine.is_running
        assert Path(os.environ["FIREBIRD"]).name == "firebird"

        configurer.shutdown(None, "testdb")

        assert not db_file.exists()
        assert not configurer.engine.is_running
        assert configurer.state is EngineState.STOPPED
        assert EmbeddedFirebirdConfigurer.get_instance() is configurer

    def test_restart_within_process(self, workdir: Path) -> None:
        configurer = EmbeddedFirebirdConfigurer.get_instance()
        configurer.configure_connection_properties(ConnectionProperties(), "testdb")
        configurer.shutdown(None, "testdb")

        with embedded_database("testdb"):
            assert (workdir / "target" / "embedded-example.fdb").is_file()

        assert not (workdir / "target" / "embedded-example.fdb").exists()

    def test_target_is_a_file(self, workdir: Path) -> None:
        (workdir / "target").write_text("occupied")
        configurer = EmbeddedFirebirdConfigurer.get_instance()

        with pytest.raises(ConfigurationError):
            configurer.configure_connection_properties(ConnectionProperties(), "testdb")

        assert configurer.state is EngineState.STARTED
        assert (workdir / "target").is_file()

    def test_published_path_does_not_outlive_workdir(self, temp_dir: Path) -> None:
        before = os.environ.get("FIREBIRD")

        with pytest.MonkeyPatch.context() as monkeypatch:
            use_workdir(monkeypatch, temp_dir)
            with embedded_database("testdb"):
                assert "FIREBIRD" in os.environ

        assert os.environ.get("FIREBIRD") == before
