import os

import pytest
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from displayedness.browser.browser_manager import BrowserManager
from displayedness.config import HarnessConfig
from displayedness.reporting.probe_reporter import ProbeReporter


def pytest_addoption(parser):
    parser.addoption(
        "--run-browser",
        action="store_true",
        default=False,
        help="run tests that launch real Chrome/Firefox sessions",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "browser: test launches a real browser session")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-browser") or os.getenv("DISPLAYED_RUN_BROWSER") == "1":
        return
    skip_browser = pytest.mark.skip(reason="needs --run-browser or DISPLAYED_RUN_BROWSER=1")
    for item in items:
        if "browser" in item.keywords:
            item.add_marker(skip_browser)


@pytest.fixture
def harness_config():
    """Harness settings read from the environment."""
    return HarnessConfig.from_env()


@pytest.fixture(scope="session")
def reporter():
    """Collect probe observations across the session and write them out at the end."""
    reporter = ProbeReporter(HarnessConfig.from_env().report_path)
    yield reporter
    reporter.generate_report()


@pytest.fixture
def driver(browser_kind, harness_config):
    """A fresh browser session for one test, quit on every exit path."""
    manager = BrowserManager(harness_config)
    with manager.browser_session(browser_kind) as driver:
        yield driver


@pytest.fixture
def mock_driver(mocker):
    """Create a mock WebDriver for testing."""
    driver = mocker.Mock(spec=WebDriver)
    return driver


@pytest.fixture
def make_element(mocker, mock_driver):
    """Build mock elements bound to mock_driver."""
    def _make(displayed=False):
        element = mocker.Mock(spec=WebElement)
        element.parent = mock_driver
        if isinstance(displayed, list):
            element.is_displayed.side_effect = displayed
        else:
            element.is_displayed.return_value = displayed
        return element
    return _make
