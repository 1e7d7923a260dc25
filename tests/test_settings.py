import pytest

from plotnav.app.settings import InteractionSettings
from plotnav.interactions.events import Key, MouseButton


def test_defaults_match_builtin_bindings():
    s = InteractionSettings()
    assert s.scroll_speed == 0.1
    assert s.reset_delay == 0.2
    assert (s.xzoomkey, s.yzoomkey) == (Key.x, Key.y)
    assert (s.xpankey, s.ypankey) == (Key.x, Key.y)
    assert s.panbutton is MouseButton.right
    assert s.limit_reset_modifier is Key.left_control


@pytest.mark.parametrize("kwargs", [{"scroll_speed": 0}, {"scroll_speed": -1}, {"reset_delay": -0.1}])
def test_invalid_values_raise(kwargs):
    with pytest.raises(ValueError):
        InteractionSettings(**kwargs)


def test_from_dict_ignores_unknown_keys():
    s = InteractionSettings.from_dict({"scroll_speed": 0.3, "colour": "red"})
    assert s.scroll_speed == 0.3
    assert s.to_dict()["scroll_speed"] == 0.3
    assert "colour" not in s.to_dict()
