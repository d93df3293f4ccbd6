"""Pytest configuration and fixtures for firebird_embedded tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Generator

import pytest
from prometheus_client import CollectorRegistry

from firebird_embedded.application.configurer import EmbeddedFirebirdConfigurer
from firebird_embedded.infrastructure.config import (
    Config,
    DatabaseConfig,
    EngineConfig,
    get_config,
)
from firebird_embedded.infrastructure.metrics import MetricsRegistry


class RecordingEngineManager:
    """EngineManager fake that records calls and fails on request."""

    def __init__(self, plugin: str = "EMBEDDED", fail_on: set[str] | None = None) -> None:
        self.plugin = plugin
        self.fail_on = fail_on or set()
        self.calls: list[tuple] = []

    def _record(self, name: str, *args: object) -> None:
        self.calls.append((name, *args))
        if name in self.fail_on:
            raise OSError(f"{name} failed")

    @property
    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]

    def start(self) -> None:
        self._record("start")

    def create_database(self, path: Path, user: str, password: str) -> None:
        self._record("create_database", path, user, password)

    def drop_database(self, path: Path, user: str, password: str) -> None:
        self._record("drop_database", path, user, password)

    def stop(self) -> None:
        self._record("stop")


class StaticResourceResolver:
    """ResourceResolver fake returning a fixed directory."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.requested: list[str] = []

    def resolve(self, name: str) -> Path:
        self.requested.append(name)
        return self.path


@pytest.fixture(autouse=True)
def isolated_globals() -> Generator[None, None, None]:
    """Reset the configurer singleton and cached config around every test."""
    EmbeddedFirebirdConfigurer.reset_instance()
    get_config.cache_clear()
    yield
    EmbeddedFirebirdConfigurer.reset_instance()
    get_config.cache_clear()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_config(temp_dir: Path) -> Config:
    """Provide a test configuration with the database under a temp directory."""
    return Config(
        database=DatabaseConfig(path=temp_dir / "target" / "embedded-example.fdb"),
        engine=EngineConfig(backend="file", page_size=4096),
    )


@pytest.fixture
def collector_registry() -> CollectorRegistry:
    """Provide a private Prometheus registry."""
    return CollectorRegistry(auto_describe=True)


@pytest.fixture
def metrics_registry(collector_registry: CollectorRegistry) -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    return MetricsRegistry(registry=collector_registry)


@pytest.fixture
def engine() -> RecordingEngineManager:
    """Provide a recording engine manager."""
    return RecordingEngineManager()


@pytest.fixture
def published_paths() -> list[Path]:
    """Collect native library paths instead of touching the environment."""
    return []


@pytest.fixture
def native_dir(temp_dir: Path) -> Path:
    path = temp_dir / "native"
    path.mkdir()
    return path


@pytest.fixture
def configurer(
    engine: RecordingEngineManager,
    test_config: Config,
    native_dir: Path,
    published_paths: list[Path],
    metrics_registry: MetricsRegistry,
) -> EmbeddedFirebirdConfigurer:
    """Provide an isolated configurer around the recording engine."""
    return EmbeddedFirebirdConfigurer(
        engine,
        config=test_config,
        resource_resolver=StaticResourceResolver(native_dir),
        native_library_publisher=published_paths.append,
        metrics=metrics_registry,
    )


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Slow tests")
