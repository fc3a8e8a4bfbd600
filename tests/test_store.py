"""Tests for preform.store package."""

import pytest

from preform.exceptions import StoreError
from preform.store import (
    DEFAULT_TYPES,
    get_components_dir,
    get_scopes_file,
    get_store_dir,
    load_scope_history,
    load_types,
    persist_new_scope,
    persist_new_type,
)


class TestPaths:
    """Tests for store path functions."""

    def test_layout(self, temp_dir):
        """Test that all paths live under .pre-form-git."""
        assert get_store_dir(temp_dir) == temp_dir / ".pre-form-git"
        assert get_components_dir(temp_dir) == temp_dir / ".pre-form-git" / "components"
        assert get_scopes_file(temp_dir) == temp_dir / ".pre-form-git" / "scopes.txt"

    def test_does_not_create_directories(self, temp_dir):
        """Test that looking up paths has no side effects."""
        get_components_dir(temp_dir)
        assert not get_store_dir(temp_dir).exists()


class TestLoadTypes:
    """Tests for load_types function."""

    def test_missing_directory_gives_defaults(self, temp_dir):
        """Test fallback when nothing was persisted."""
        assert load_types(temp_dir) == [
            "feat", "fix", "docs", "style", "refactor", "test", "chore",
        ]

    def test_empty_directory_gives_defaults(self, temp_dir):
        """Test fallback for an empty components directory."""
        get_components_dir(temp_dir).mkdir(parents=True)
        assert load_types(temp_dir) == DEFAULT_TYPES

    def test_unreadable_directory_gives_defaults(self, temp_dir):
        """Test fallback when the components path is not a directory."""
        get_store_dir(temp_dir).mkdir()
        get_components_dir(temp_dir).write_text("not a directory")
        assert load_types(temp_dir) == DEFAULT_TYPES

    def test_returns_a_copy_of_defaults(self, temp_dir):
        """Test that callers cannot mutate DEFAULT_TYPES."""
        types = load_types(temp_dir)
        types.append("perf")
        assert "perf" not in DEFAULT_TYPES

    def test_lists_persisted_types(self, temp_dir):
        """Test that marker files become the type list."""
        components = get_components_dir(temp_dir)
        components.mkdir(parents=True)
        for name in ("feat", "perf", "ci"):
            (components / name).touch()

        assert sorted(load_types(temp_dir)) == ["ci", "feat", "perf"]


class TestPersistNewType:
    """Tests for persist_new_type function."""

    def test_creates_directory_and_marker(self, temp_dir):
        """Test that the marker is created with its directory."""
        marker = persist_new_type(temp_dir, "perf")
        assert marker == get_components_dir(temp_dir) / "perf"
        assert marker.is_file()
        assert load_types(temp_dir) == ["perf"]

    def test_idempotent(self, temp_dir):
        """Test that persisting twice keeps one marker."""
        persist_new_type(temp_dir, "perf")
        persist_new_type(temp_dir, "perf")
        assert list(get_components_dir(temp_dir).iterdir()) == [
            get_components_dir(temp_dir) / "perf"
        ]

    def test_directory_failure_raises(self, temp_dir):
        """Test that a blocked components directory raises StoreError."""
        get_store_dir(temp_dir).write_text("in the way")

        with pytest.raises(StoreError) as exc_info:
            persist_new_type(temp_dir, "perf")

        assert "creating components directory failed" in str(exc_info.value)


class TestPersistNewScope:
    """Tests for persist_new_scope function."""

    def test_creates_log(self, temp_dir):
        """Test that the log is created on first use."""
        path = persist_new_scope(temp_dir, "api")
        assert path.read_text() == "api\n"

    def test_appends_without_dedup(self, temp_dir):
        """Test that repeated scopes are all kept."""
        persist_new_scope(temp_dir, "api")
        persist_new_scope(temp_dir, "ui")
        persist_new_scope(temp_dir, "api")
        assert get_scopes_file(temp_dir).read_text() == "api\nui\napi\n"

    def test_keeps_existing_lines(self, temp_dir):
        """Test that prior content is never rewritten."""
        get_store_dir(temp_dir).mkdir()
        get_scopes_file(temp_dir).write_text("legacy\n")

        persist_new_scope(temp_dir, "core")

        assert get_scopes_file(temp_dir).read_text() == "legacy\ncore\n"

    def test_open_failure_raises(self, temp_dir):
        """Test that an unopenable log raises StoreError."""
        get_scopes_file(temp_dir).mkdir(parents=True)

        with pytest.raises(StoreError) as exc_info:
            persist_new_scope(temp_dir, "api")

        assert "opening scopes file failed" in str(exc_info.value)


class TestLoadScopeHistory:
    """Tests for load_scope_history function."""

    def test_missing_log(self, temp_dir):
        """Test that a missing log is empty."""
        assert load_scope_history(temp_dir) == []

    def test_reads_in_order(self, temp_dir):
        """Test that entries come back oldest first."""
        for name in ("api", "ui", "api"):
            persist_new_scope(temp_dir, name)
        assert load_scope_history(temp_dir) == ["api", "ui", "api"]
