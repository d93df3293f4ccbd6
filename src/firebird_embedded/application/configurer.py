"""Embedded Firebird configurer - lifecycle of the single embedded database.

This module provides the process-wide EmbeddedFirebirdConfigurer that
populates connection properties, starts the embedded engine and creates
the database file, and tears both down on shutdown.

Usage:
    from firebird_embedded.application import EmbeddedFirebirdConfigurer
    from firebird_embedded.ports import ConnectionProperties

    configurer = EmbeddedFirebirdConfigurer.get_instance()
    properties = ConnectionProperties()
    configurer.configure_connection_properties(properties, "testdb")
    # ... connect using properties.url / username / password ...
    configurer.shutdown(None, "testdb")

Only one database is managed per process. The ``database_name`` argument is
accepted for interface compatibility; the file location always comes from
``database.path`` in the configuration.
"""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import Any, ClassVar, Iterator

from firebird_embedded.adapters.outbound.file_engine_manager import FileEngineManager
from firebird_embedded.adapters.outbound.firebird_engine_manager import FirebirdEngineManager
from firebird_embedded.adapters.outbound.package_resource_resolver import (
    PackageResourceResolver,
)
from firebird_embedded.domain.errors import (
    ConfigurationError,
    EngineCreateError,
    EngineDropError,
    EngineStartError,
    EngineStopError,
    LifecycleStateError,
)
from firebird_embedded.domain.value_objects import DatabaseLocation, EngineState
from firebird_embedded.infrastructure.config import Config, get_config
from firebird_embedded.infrastructure.logging import database_context, get_logger
from firebird_embedded.infrastructure.metrics import MetricsRegistry, get_metrics
from firebird_embedded.infrastructure.native_library import (
    NativeLibraryPublisher,
    publish_native_library_path,
)
from firebird_embedded.infrastructure.tracing import lifecycle_span
from firebird_embedded.ports.inbound.embedded_database_configurer import ConnectionProperties
from firebird_embedded.ports.outbound.engine_manager import EngineManager
from firebird_embedded.ports.outbound.resource_resolver import ResourceResolver


logger = get_logger(__name__)


def default_engine_factory(plugin: str) -> EngineManager:
    """Build the engine manager selected by ``engine.backend``."""
    if get_config().engine.backend == "file":
        return FileEngineManager(plugin=plugin)
    return FirebirdEngineManager(plugin=plugin)


class EmbeddedFirebirdConfigurer:
    """Lifecycle of the single embedded Firebird database in this process.

    Use :meth:`get_instance` to obtain the shared configurer. The constructor
    is public so that tests can build isolated instances around a fake
    engine manager.

    Lifecycle:
        configure_connection_properties: UNINITIALIZED/STOPPED -> STARTED -> DATABASE_CREATED
        shutdown: DATABASE_CREATED -> DATABASE_DROPPED -> STOPPED

    A failed step raises and leaves the state at the last step that
    succeeded. Nothing is rolled back or retried.

    Thread Safety:
        Only :meth:`get_instance` is safe to race. Callers serialize
        configure/shutdown pairs.
    """

    _instance: ClassVar[EmbeddedFirebirdConfigurer | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        engine: EngineManager,
        config: Config | None = None,
        resource_resolver: ResourceResolver | None = None,
        native_library_publisher: NativeLibraryPublisher | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Initialize the configurer. No I/O happens here.

        Args:
            engine: The engine manager this configurer owns.
            config: Configuration (default: global config).
            resource_resolver: Lookup for the bundled native directory.
            native_library_publisher: Publishes the native library path
                (default: sets the configured environment variable).
            metrics: Metrics registry (default: global registry).
        """
        self._config = config or get_config()
        self._engine = engine
        self._resource_resolver = resource_resolver or PackageResourceResolver()
        self._publish_native_library_path = (
            native_library_publisher or publish_native_library_path
        )
        self._metrics_override = metrics
        self._location = DatabaseLocation(self._config.database.path)
        self._state = EngineState.UNINITIALIZED

    @classmethod
    def get_instance(cls) -> EmbeddedFirebirdConfigurer:
        """Get the process-wide configurer, creating it on first use."""
        instance = cls._instance
        if instance is None:
            with cls._instance_lock:
                instance = cls._instance
                if instance is None:
                    config = get_config()
                    instance = cls(default_engine_factory(config.engine.plugin), config=config)
                    cls._instance = instance
        return instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the process-wide configurer (useful for testing)."""
        with cls._instance_lock:
            cls._instance = None

    @property
    def engine(self) -> EngineManager:
        return self._engine

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def location(self) -> DatabaseLocation:
        return self._location

    @property
    def _metrics(self) -> MetricsRegistry:
        # Resolved per use so that a later setup_metrics() is picked up.
        return self._metrics_override or get_metrics()

    def configure_connection_properties(
        self, properties: ConnectionProperties, database_name: str
    ) -> None:
        """Populate ``properties``, start the engine and create the database.

        Args:
            properties: Record to fill in with driver, URL and credentials.
            database_name: Logical name; logged but not used for the path.

        Raises:
            ConfigurationError: If the native resource directory cannot be
                resolved, or the database's parent is not a directory.
            EngineStartError: If the engine fails to start.
            EngineCreateError: If the database cannot be created.
        """
        database = self._config.database
        with database_context(str(self._location), database.user), lifecycle_span(
            "configure", database_name, self._engine.plugin
        ), self._timed("configure"):
            properties.driver = database.driver
            properties.url = self._config.url
            properties.username = database.user
            properties.password = database.password

            logger.debug(
                "database_name.ignored", database_name=database_name, path=str(self._location)
            )
            if self._state.is_running():
                logger.warning("embedded_firebird.already_running", state=self._state.name)

            self._configure_native_library()
            self._open()

    def shutdown(self, data_source: Any, database_name: str) -> None:
        """Drop the database, then stop the engine.

        A failed drop raises immediately and the engine is left running.

        Args:
            data_source: Accepted for interface compatibility; unused.
            database_name: Accepted for interface compatibility; unused.

        Raises:
            LifecycleStateError: If no database was created by this configurer.
            EngineDropError: If the database cannot be dropped.
            EngineStopError: If the engine fails to stop.
        """
        if self._state is not EngineState.DATABASE_CREATED:
            raise LifecycleStateError(
                f"Cannot shut down embedded Firebird in state {self._state.name}"
            )

        database = self._config.database
        with database_context(str(self._location), database.user), lifecycle_span(
            "shutdown", database_name, self._engine.plugin
        ), self._timed("shutdown"):
            logger.info("embedded_firebird.closing")
            try:
                self._engine.drop_database(self._location.path, database.user, database.password)
            except Exception as e:
                logger.error("embedded_firebird.drop_failed", error=str(e))
                raise EngineDropError("Error deleting embedded Firebird") from e
            self._set_state(EngineState.DATABASE_DROPPED)

            try:
                self._engine.stop()
            except Exception as e:
                logger.error("embedded_firebird.stop_failed", error=str(e))
                raise EngineStopError("Error stopping embedded Firebird") from e
            self._set_state(EngineState.STOPPED)
            logger.info("embedded_firebird.closed")

    def _configure_native_library(self) -> None:
        try:
            path = self._resource_resolver.resolve(self._config.native.resource_name)
        except ConfigurationError as e:
            logger.error("embedded_firebird.native_library_unresolved", error=str(e))
            raise
        logger.info("embedded_firebird.native_library_path", path=str(path))
        self._publish_native_library_path(path)

    def _open(self) -> None:
        database = self._config.database
        logger.info("embedded_firebird.starting", plugin=self._engine.plugin)

        try:
            self._engine.start()
        except Exception as e:
            logger.error("embedded_firebird.start_failed", error=str(e))
            raise EngineStartError("Error starting embedded Firebird") from e
        self._set_state(EngineState.STARTED)

        try:
            self._location.ensure_parent()
        except ConfigurationError as e:
            logger.error("embedded_firebird.location_invalid", error=str(e))
            raise

        try:
            self._engine.create_database(self._location.path, database.user, database.password)
        except Exception as e:
            logger.error("embedded_firebird.create_failed", error=str(e))
            raise EngineCreateError("Error creating embedded Firebird") from e
        self._set_state(EngineState.DATABASE_CREATED)

        logger.info("embedded_firebird.started")

    def _set_state(self, state: EngineState) -> None:
        if not self._state.can_transition_to(state):
            logger.error(
                "engine_state.illegal_transition", source=self._state.name, target=state.name
            )
            raise LifecycleStateError(
                f"Illegal engine state transition {self._state.name} -> {state.name}"
            )
        logger.debug("engine_state.transition", source=self._state.name, target=state.name)
        self._state = state
        self._metrics.engine_state.set(state.value)

    @contextmanager
    def _timed(self, operation: str) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        except Exception:
            self._metrics.record_operation(operation, success=False)
            raise
        else:
            self._metrics.record_operation(operation, success=True)
        finally:
            self._metrics.lifecycle_duration_seconds.labels(operation=operation).observe(
                time.perf_counter() - start
            )
