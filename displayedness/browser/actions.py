"""
Page actions used by the displayedness scenarios.
"""

import logging
from typing import Tuple

from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from displayedness.errors import ElementNotFoundError

logger = logging.getLogger("displayedness.browser.actions")

Locator = Tuple[str, str]

SEARCH_INPUT: Locator = (By.NAME, "q")
PAGE_NAVIGATION: Locator = (By.CSS_SELECTOR, "table#nav")
SEARCH_QUERY = "Selenium displayed element property"
SCROLL_TO_BOTTOM_SCRIPT = "window.scrollTo(0, document.body.scrollHeight)"


def find_element(driver: WebDriver, locator: Locator) -> WebElement:
    """Resolve a locator to a single element on the current page.

    Raises:
        ElementNotFoundError: If nothing on the page matches the locator
    """
    by, value = locator
    try:
        return driver.find_element(by, value)
    except NoSuchElementException as e:
        raise ElementNotFoundError(locator) from e


def search_for(driver: WebDriver, query: str) -> None:
    """Type a query into the search box and submit it."""
    logger.debug(f"Searching for {query!r}")
    search_input = find_element(driver, SEARCH_INPUT)
    search_input.send_keys(query)
    search_input.submit()


def scroll_to_bottom(driver: WebDriver) -> None:
    logger.debug("Scrolling to the bottom of the page")
    driver.execute_script(SCROLL_TO_BOTTOM_SCRIPT)
