"""
Harness configuration loaded from the environment.
"""

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

START_URL = "http://www.google.com"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _get_float(name: str, default: float, allow_zero: bool = True) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value < 0 or (value == 0 and not allow_zero):
        limit = ">= 0" if allow_zero else "> 0"
        raise ValueError(f"{name} must be {limit}, got {value}")
    return value


def _get_window_size(name: str, default: Tuple[int, int]) -> Tuple[int, int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        width, height = (int(part) for part in raw.split(","))
    except ValueError:
        raise ValueError(f"{name} must look like 'WIDTH,HEIGHT', got {raw!r}") from None
    if width <= 0 or height <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return width, height


@dataclass(frozen=True)
class HarnessConfig:
    """Settings shared by every scenario"""
    headless: bool = False
    wait_timeout: float = 3.0
    poll_frequency: float = 0.5
    implicit_wait: float = 0.0
    page_load_timeout: float = 30.0
    window_size: Tuple[int, int] = (1920, 1080)
    report_path: str = os.path.join("reports", "displayed_report.json")

    @classmethod
    def from_env(cls) -> "HarnessConfig":
        """Build a config from environment variables, reading .env first.

        Returns:
            HarnessConfig with defaults for every unset variable

        Raises:
            ValueError: If a variable is set to a malformed value
        """
        load_dotenv()

        defaults = cls()
        return cls(
            headless=_get_bool("DISPLAYED_HEADLESS", defaults.headless),
            wait_timeout=_get_float("DISPLAYED_WAIT_TIMEOUT", defaults.wait_timeout, allow_zero=False),
            poll_frequency=_get_float("DISPLAYED_POLL_FREQUENCY", defaults.poll_frequency, allow_zero=False),
            implicit_wait=_get_float("DISPLAYED_IMPLICIT_WAIT", defaults.implicit_wait),
            page_load_timeout=_get_float("DISPLAYED_PAGE_LOAD_TIMEOUT", defaults.page_load_timeout, allow_zero=False),
            window_size=_get_window_size("DISPLAYED_WINDOW_SIZE", defaults.window_size),
            report_path=os.getenv("DISPLAYED_REPORT_PATH") or defaults.report_path,
        )
