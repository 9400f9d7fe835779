"""
Browser session lifecycle for displayedness scenarios.
"""

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Callable, Dict, Iterator, Optional

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.remote.webdriver import WebDriver

from displayedness.config import START_URL, HarnessConfig
from displayedness.errors import (
    BrowserSetupError,
    SessionStateError,
    UnsupportedConfigurationError,
)

logger = logging.getLogger("displayedness.browser.browser_manager")


class BrowserKind(str, Enum):
    """Browsers the harness can drive"""
    CHROME = "Chrome"
    FIREFOX = "Firefox"

    @classmethod
    def parse(cls, value) -> "BrowserKind":
        """Resolve a browser kind from an enum member or its exact name.

        Raises:
            UnsupportedConfigurationError: If the value names no supported browser
        """
        if isinstance(value, cls):
            return value
        for kind in cls:
            if kind.value == value:
                return kind
        raise UnsupportedConfigurationError(f"driver not supported for test's purpose: {value!r}")


DriverFactory = Callable[[object], WebDriver]


def _chrome_options(config: HarnessConfig):
    options = webdriver.ChromeOptions()
    if config.headless:
        options.add_argument("--headless=new")
        options.add_argument(f"--window-size={config.window_size[0]},{config.window_size[1]}")
    return options


def _firefox_options(config: HarnessConfig):
    options = webdriver.FirefoxOptions()
    if config.headless:
        options.add_argument("-headless")
        options.add_argument(f"--width={config.window_size[0]}")
        options.add_argument(f"--height={config.window_size[1]}")
    return options


_OPTION_BUILDERS = {
    BrowserKind.CHROME: _chrome_options,
    BrowserKind.FIREFOX: _firefox_options,
}

DEFAULT_DRIVER_FACTORIES: Dict[BrowserKind, DriverFactory] = {
    BrowserKind.CHROME: lambda options: webdriver.Chrome(options=options),
    BrowserKind.FIREFOX: lambda options: webdriver.Firefox(options=options),
}


class BrowserManager:
    """Owns at most one live WebDriver session at a time."""

    def __init__(self, config: HarnessConfig, driver_factories: Optional[Dict[BrowserKind, DriverFactory]] = None):
        self.config = config
        self.driver_factories = dict(DEFAULT_DRIVER_FACTORIES)
        if driver_factories:
            self.driver_factories.update(driver_factories)
        self.driver: Optional[WebDriver] = None
        self.kind: Optional[BrowserKind] = None

    def launch_browser(self, kind) -> WebDriver:
        """Start a browser, open the start page and maximize the window.

        Args:
            kind: A BrowserKind or its name ("Chrome", "Firefox")

        Returns:
            WebDriver: The live session

        Raises:
            UnsupportedConfigurationError: If kind is not a supported browser
            SessionStateError: If a session is already running
            BrowserSetupError: If Selenium could not start the browser
        """
        kind = BrowserKind.parse(kind)
        if self.driver is not None:
            raise SessionStateError(f"{self.kind.value} session already running")

        options = _OPTION_BUILDERS[kind](self.config)
        logger.info(f"Launching {kind.value} (headless={self.config.headless})")
        try:
            driver = self.driver_factories[kind](options)
        except WebDriverException as e:
            raise BrowserSetupError(f"Could not start {kind.value}: {e.msg or e}") from e

        try:
            if self.config.implicit_wait:
                driver.implicitly_wait(self.config.implicit_wait)
            driver.set_page_load_timeout(self.config.page_load_timeout)
            driver.get(START_URL)
            driver.maximize_window()
        except BaseException:
            logger.error(f"Setup of {kind.value} session failed, quitting driver")
            self._quit(driver, kind, suppress=True)
            raise

        self.driver = driver
        self.kind = kind
        logger.debug(f"{kind.value} session ready at {START_URL}")
        return driver

    def close_browser(self) -> None:
        """Quit the current session, if any."""
        if self.driver is None:
            return
        driver, kind = self.driver, self.kind
        self.driver = None
        self.kind = None
        self._quit(driver, kind, suppress=False)

    @contextmanager
    def browser_session(self, kind) -> Iterator[WebDriver]:
        """Yield a live session and always quit it on exit."""
        driver = self.launch_browser(kind)
        try:
            yield driver
        except BaseException:
            # keep the body's exception as the reported failure
            launched_kind = self.kind
            self.driver = None
            self.kind = None
            self._quit(driver, launched_kind, suppress=True)
            raise
        else:
            self.close_browser()

    @staticmethod
    def _quit(driver: WebDriver, kind: Optional[BrowserKind], suppress: bool) -> None:
        name = kind.value if kind else "browser"
        try:
            driver.quit()
            logger.info(f"Closed {name} session")
        except Exception as e:
            if not suppress:
                raise
            logger.warning(f"Failed to quit {name} session: {str(e)}")
