"""Unit tests for infrastructure.persistence.paths module."""

import pytest

from infrastructure.persistence import StoreError, resolve_data_dir


@pytest.fixture(autouse=True)
def clear_resolved_dir():
    resolve_data_dir.cache_clear()
    yield
    resolve_data_dir.cache_clear()


@pytest.mark.unit
class TestResolveDataDir:
    """Resolution order: override, default, then fallback."""

    def test_override_wins_and_is_created(self, tmp_path):
        override = tmp_path / "explicit" / "nested"

        result = resolve_data_dir(
            str(override), str(tmp_path / "default"), str(tmp_path / "fallback")
        )

        assert result == override
        assert override.is_dir()
        assert not (tmp_path / "default").exists()

    def test_default_used_without_override(self, tmp_path):
        result = resolve_data_dir(
            None, str(tmp_path / "default"), str(tmp_path / "fallback")
        )

        assert result == tmp_path / "default"
        assert result.is_dir()

    def test_fallback_used_when_default_cannot_be_created(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        result = resolve_data_dir(
            None, str(blocker / "data"), str(tmp_path / "fallback")
        )

        assert result == tmp_path / "fallback"
        assert result.is_dir()

    def test_unusable_override_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(StoreError):
            resolve_data_dir(
                str(blocker / "data"), str(tmp_path / "default"), str(tmp_path / "fb")
            )

    def test_result_is_cached(self, tmp_path):
        default = tmp_path / "default"

        first = resolve_data_dir(None, str(default), str(tmp_path / "fallback"))
        default.rmdir()
        second = resolve_data_dir(None, str(default), str(tmp_path / "fallback"))

        assert first is second
        assert not default.exists()

    def test_cache_clear_re_resolves(self, tmp_path):
        default = tmp_path / "default"
        resolve_data_dir(None, str(default), str(tmp_path / "fallback"))
        default.rmdir()

        resolve_data_dir.cache_clear()
        resolve_data_dir(None, str(default), str(tmp_path / "fallback"))

        assert default.is_dir()
