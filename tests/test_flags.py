import pytest

from plotnav.app import flags


@pytest.fixture(autouse=True)
def _reset_cache(monkeypatch):
    monkeypatch.delenv(flags.ENV_VAR, raising=False)
    flags.reload()
    yield
    flags.reload()


def _set(monkeypatch, value):
    monkeypatch.setenv(flags.ENV_VAR, value)
    flags.reload()


def test_unset_variable_uses_defaults():
    assert flags.all_enabled() == {}
    assert flags.is_enabled("scrollzoom") is False
    assert flags.is_enabled("scrollzoom", default=True) is True


def test_tokens_enable_and_disable(monkeypatch):
    _set(monkeypatch, "debug-overlay, !scrollzoom, -dragpan, limitreset=on, rectanglezoom=no")
    assert flags.all_enabled() == {
        "debug_overlay": True,
        "scrollzoom": False,
        "dragpan": False,
        "limitreset": True,
        "rectanglezoom": False,
    }
    assert flags.is_enabled("Debug-Overlay")


def test_unparseable_value_is_ignored(monkeypatch):
    _set(monkeypatch, "scrollzoom=maybe")
    assert flags.is_enabled("scrollzoom", default=True) is True


def test_cache_requires_reload(monkeypatch):
    _set(monkeypatch, "dragpan")
    monkeypatch.setenv(flags.ENV_VAR, "!dragpan")
    assert flags.is_enabled("dragpan")
    flags.reload()
    assert not flags.is_enabled("dragpan", default=True)


def test_empty_flag_name_rejected():
    with pytest.raises(ValueError):
        flags.is_enabled("")
