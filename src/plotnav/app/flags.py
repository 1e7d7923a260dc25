"""Feature switches read from the ``PLOTNAV_FEATURES`` environment variable.

The value is a comma separated list of switches: ``scrollzoom`` or
``scrollzoom=on`` turns a feature on, ``!scrollzoom``, ``-scrollzoom`` or
``scrollzoom=off`` turns it off. Later switches override earlier ones.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

log = logging.getLogger(__name__)

ENV_VAR = "PLOTNAV_FEATURES"

_ON = frozenset({"1", "true", "on", "yes", "enable", "enabled"})
_OFF = frozenset({"0", "false", "off", "no", "disable", "disabled"})


def flag_key(name: str) -> str:
    """Canonical lookup key: case-insensitive, ``-`` and ``_`` interchangeable."""

    return name.strip().lower().replace("-", "_")


def parse_switches(raw: str) -> dict[str, bool]:
    switches: dict[str, bool] = {}
    for token in (part.strip() for part in raw.split(",")):
        if not token:
            continue
        name, sep, value = token.partition("=")
        if not sep:
            negated = name.startswith(("!", "-"))
            key = flag_key(name[1:] if negated else name)
            if key:
                switches[key] = not negated
            continue
        state = value.strip().lower()
        if state in _ON:
            switches[flag_key(name)] = True
        elif state in _OFF:
            switches[flag_key(name)] = False
        else:
            log.warning("Ignoring feature switch %r: unknown state %r", name, value)
    return switches


@lru_cache(maxsize=1)
def _switches() -> dict[str, bool]:
    return parse_switches(os.environ.get(ENV_VAR, ""))


def reload() -> None:
    """Forget the cached switches so the next lookup re-reads the environment."""

    _switches.cache_clear()


def all_enabled() -> dict[str, bool]:
    return dict(_switches())


def is_enabled(flag: str, *, default: bool = False) -> bool:
    """Return the switch for ``flag``, or ``default`` when it was not mentioned."""

    if not flag:
        raise ValueError("Flag name must be a non-empty string")
    return _switches().get(flag_key(flag), default)
