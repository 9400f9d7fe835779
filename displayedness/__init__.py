"""
Element displayedness harness.
Drives Chrome and Firefox through Selenium and probes element visibility.
"""

from .config import START_URL, HarnessConfig
from .errors import (
    BrowserSetupError,
    ElementNotFoundError,
    HarnessError,
    SessionStateError,
    UnsupportedConfigurationError,
    WaitTimeoutError,
)
from .browser import BrowserKind, BrowserManager
from .scenarios import SCENARIOS, ScenarioResult

__all__ = [
    'START_URL',
    'HarnessConfig',
    'HarnessError',
    'BrowserSetupError',
    'ElementNotFoundError',
    'SessionStateError',
    'UnsupportedConfigurationError',
    'WaitTimeoutError',
    'BrowserKind',
    'BrowserManager',
    'SCENARIOS',
    'ScenarioResult',
]
