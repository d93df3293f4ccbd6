"""Unit tests for lifecycle states and the database location."""

from __future__ import annotations

from pathlib import Path

import pytest

from firebird_embedded.domain import ConfigurationError, DatabaseLocation, EngineState


@pytest.mark.unit
class TestEngineState:
    """Tests for EngineState transitions."""

    @pytest.mark.parametrize(
        ("source", "target"),
        [
            (EngineState.UNINITIALIZED, EngineState.STARTED),
            (EngineState.STARTED, EngineState.DATABASE_CREATED),
            (EngineState.DATABASE_CREATED, EngineState.DATABASE_DROPPED),
            (EngineState.DATABASE_DROPPED, EngineState.STOPPED),
            (EngineState.STOPPED, EngineState.STARTED),
        ],
    )
    def test_happy_path_transitions(self, source: EngineState, target: EngineState) -> None:
        assert source.can_transition_to(target)

    def test_no_skipped_predecessor(self) -> None:
        assert not EngineState.UNINITIALIZED.can_transition_to(EngineState.DATABASE_CREATED)
        assert not EngineState.STARTED.can_transition_to(EngineState.STOPPED)
        assert not EngineState.DATABASE_CREATED.can_transition_to(EngineState.STOPPED)
        assert not EngineState.DATABASE_DROPPED.can_transition_to(EngineState.DATABASE_CREATED)

    def test_is_running(self) -> None:
        running = {state for state in EngineState if state.is_running()}

        assert running == {
            EngineState.STARTED,
            EngineState.DATABASE_CREATED,
            EngineState.DATABASE_DROPPED,
        }


@pytest.mark.unit
class TestDatabaseLocation:
    """Tests for DatabaseLocation."""

    def test_parent(self) -> None:
        location = DatabaseLocation(Path("target/embedded-example.fdb"))

        assert location.parent == Path("target")
        assert str(location) == "target/embedded-example.fdb"

    def test_ensure_parent_creates_ancestors(self, temp_dir: Path) -> None:
        location = DatabaseLocation(temp_dir / "a" / "b" / "test.fdb")

        parent = location.ensure_parent()

        assert parent == temp_dir / "a" / "b"
        assert parent.is_dir()

    def test_ensure_parent_existing_directory(self, temp_dir: Path) -> None:
        location = DatabaseLocation(temp_dir / "test.fdb")

        assert location.ensure_parent() == temp_dir

    def test_ensure_parent_not_a_directory(self, temp_dir: Path) -> None:
        (temp_dir / "target").write_text("occupied")
        location = DatabaseLocation(temp_dir / "target" / "test.fdb")

        with pytest.raises(ConfigurationError, match="is not a directory"):
            location.ensure_parent()

    def test_ensure_parent_ancestor_is_a_file(self, temp_dir: Path) -> None:
        (temp_dir / "target").write_text("occupied")
        location = DatabaseLocation(temp_dir / "target" / "nested" / "test.fdb")

        with pytest.raises(ConfigurationError) as exc_info:
            location.ensure_parent()

        assert isinstance(exc_info.value.__cause__, OSError)
