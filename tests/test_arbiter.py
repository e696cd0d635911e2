"""
Tests for the version arbiter.
"""

import pytest

from yamlconf.core.services.arbiter import ReloadVerdict, VersionArbiter

from conftest import SampleConfig


class TestVersionArbiter:
    """Test cases for VersionArbiter class."""

    @pytest.fixture
    def arbiter(self) -> VersionArbiter:
        return VersionArbiter()

    def test_first_load_has_no_known_state(self, arbiter: VersionArbiter) -> None:
        verdict = arbiter.judge_reload(None, SampleConfig(version=5))

        assert verdict is ReloadVerdict.NO_KNOWN_STATE

    def test_version_conflict(self, arbiter: VersionArbiter) -> None:
        verdict = arbiter.judge_reload(SampleConfig(version=2), SampleConfig(version=3))

        assert verdict is ReloadVerdict.VERSION_CONFLICT

    def test_version_conflict_wins_over_equal_content(self, arbiter: VersionArbiter) -> None:
        verdict = arbiter.judge_reload(SampleConfig(version=2, name="a"),
                                       SampleConfig(version=1, name="a"))

        assert verdict is ReloadVerdict.VERSION_CONFLICT

    def test_unchanged(self, arbiter: VersionArbiter) -> None:
        verdict = arbiter.judge_reload(SampleConfig(version=2, name="a"),
                                       SampleConfig(version=2, name="a"))

        assert verdict is ReloadVerdict.UNCHANGED

    def test_content_changed(self, arbiter: VersionArbiter) -> None:
        verdict = arbiter.judge_reload(SampleConfig(version=2, name="a"),
                                       SampleConfig(version=2, name="b"))

        assert verdict is ReloadVerdict.CONTENT_CHANGED

    def test_next_version(self, arbiter: VersionArbiter) -> None:
        assert arbiter.next_version(None) == 0
        assert arbiter.next_version(SampleConfig(version=0)) == 1
        assert arbiter.next_version(SampleConfig(version=41)) == 42

    def test_save_without_original_is_never_noop(self, arbiter: VersionArbiter) -> None:
        assert arbiter.is_save_noop(None, SampleConfig()) is False

    def test_save_noop(self, arbiter: VersionArbiter) -> None:
        assert arbiter.is_save_noop(SampleConfig(name="a"), SampleConfig(name="a")) is True

    def test_save_with_changes(self, arbiter: VersionArbiter) -> None:
        assert arbiter.is_save_noop(SampleConfig(name="a"), SampleConfig(name="b")) is False
