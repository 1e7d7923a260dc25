"""Default interaction settings used when building an Axis."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from plotnav.interactions.events import Key, KeyBinding, MouseButton

__all__ = ["InteractionSettings"]


@dataclass
class InteractionSettings:
    """Speeds, delays and key bindings for the built-in interactions."""

    scroll_speed: float = 0.1
    reset_delay: float = 0.2
    xzoomkey: KeyBinding = Key.x
    yzoomkey: KeyBinding = Key.y
    xpankey: KeyBinding = Key.x
    ypankey: KeyBinding = Key.y
    panbutton: KeyBinding = MouseButton.right
    limit_reset_modifier: KeyBinding = Key.left_control
    xrectzoom: bool = True
    yrectzoom: bool = True
    autolimit_margin: tuple[float, float] = field(default=(0.05, 0.05))

    def __post_init__(self) -> None:
        if self.scroll_speed <= 0:
            raise ValueError(f"scroll_speed must be positive, got {self.scroll_speed}")
        if self.reset_delay < 0:
            raise ValueError(f"reset_delay must be non-negative, got {self.reset_delay}")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InteractionSettings:
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)
