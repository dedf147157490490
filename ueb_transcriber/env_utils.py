import os
from typing import Any

_TRUTHY = {"true", "1", "yes", "on"}
_FALSY = {"false", "0", "no", "off"}


def _flag(name: str, default: bool) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in _TRUTHY


def parse_flag(value: Any) -> bool:
    """Coerce a config value such as ``True``, ``"off"`` or ``1`` to a bool."""
    if isinstance(value, bool):
        return value
    key = str(value).strip().lower()
    if key in _TRUTHY:
        return True
    if key in _FALSY:
        return False
    raise ValueError(f"expected a boolean flag, got {value!r}")


def use_grade2() -> bool:
    """Return True if Grade 2 contractions should be applied by default."""
    return _flag("UEB_TRANSCRIBER_GRADE2", True)


def inline_styles_everywhere() -> bool:
    """Return True if bold/italic markup is rendered inside structural lines."""
    return _flag("UEB_TRANSCRIBER_INLINE_STYLES_EVERYWHERE", False)
