import pytest

from config import Settings, load_settings, resolve_options
from errors import ReindentError


@pytest.fixture
def base(monkeypatch):
    for name in ("SMART", "TAB_SIZE", "RECURSIVE", "HOME_DIRECTORY", "ENCODING", "VERBOSE"):
        monkeypatch.delenv(f"TABBY_{name}", raising=False)
    return Settings(_env_file=None)


def test_default_tab_size(base):
    assert resolve_options(base).tab_size == 4


def test_smart_defaults_to_tab_size_one(base):
    opts = resolve_options(base, smart=True)
    assert opts.smart is True
    assert opts.tab_size == 1


def test_environment_is_read(monkeypatch):
    monkeypatch.setenv("TABBY_TAB_SIZE", "3")
    monkeypatch.setenv("TABBY_RECURSIVE", "true")
    s = Settings(_env_file=None)
    assert s.TAB_SIZE == 3
    opts = resolve_options(s)
    assert opts.tab_size == 3
    assert opts.recursive is True


def test_cli_value_beats_settings():
    s = Settings(_env_file=None, TAB_SIZE=8, SMART=True)
    opts = resolve_options(s, tab_size=2, smart=False, home_directory="src")
    assert opts.tab_size == 2
    assert opts.smart is False
    assert opts.home_directory == "src"


def test_zero_tab_size_is_config_error(base):
    with pytest.raises(ReindentError) as exc_info:
        resolve_options(base, tab_size=0)
    assert exc_info.value.stage == "config"
    assert "tab_size" in exc_info.value.error


def test_malformed_environment_value(monkeypatch):
    monkeypatch.setenv("TABBY_TAB_SIZE", "abc")
    with pytest.raises(ReindentError) as exc_info:
        load_settings()
    assert exc_info.value.stage == "config"
    assert "TAB_SIZE" in exc_info.value.error


def test_options_load_settings_when_not_given(monkeypatch):
    monkeypatch.setenv("TABBY_SMART", "1")
    monkeypatch.delenv("TABBY_TAB_SIZE", raising=False)
    opts = resolve_options(smart=None)
    assert opts.smart is True
    assert opts.tab_size == 1
