"""
Strategies for checking whether an element is displayed.

Each strategy answers "is this element displayed?" with a different contract:

* is_displayed: instantaneous read of an element handle already held.
* wait_until_visible: bounded polling on a held handle, reported as a WaitOutcome.
* visible_element_or_none: one-shot locator lookup that yields the element
  only if it is currently visible, otherwise None.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from selenium.common.exceptions import NoSuchElementException, TimeoutException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from displayedness.browser.actions import Locator
from displayedness.errors import WaitTimeoutError

logger = logging.getLogger("displayedness.validation.visibility")

DEFAULT_POLL_FREQUENCY = 0.5


@dataclass
class WaitOutcome:
    """Result of a bounded wait for visibility"""
    visible: bool
    timed_out: bool
    timeout: float
    elapsed: float

    def raise_for_timeout(self) -> None:
        """Raise WaitTimeoutError if the wait expired."""
        if self.timed_out:
            raise WaitTimeoutError(self.timeout, self.elapsed)

    def to_dict(self):
        return {
            "visible": self.visible,
            "timed_out": self.timed_out,
            "timeout": self.timeout,
            "elapsed": round(self.elapsed, 3),
        }


def is_displayed(element: WebElement) -> bool:
    """Read the element's displayed state right now.

    Args:
        element: The element handle to check

    Returns:
        bool: True if the driver reports the element as displayed
    """
    displayed = element.is_displayed()
    logger.debug(f"Element displayed: {displayed}")
    return displayed


def wait_until_visible(element: WebElement, timeout: float, poll_frequency: Optional[float] = None) -> WaitOutcome:
    """Poll an element until it becomes visible or the timeout expires.

    Args:
        element: The element handle to poll
        timeout: Upper bound in seconds
        poll_frequency: Seconds between polls

    Returns:
        WaitOutcome: visible=True on success, timed_out=True if the bound expired

    Raises:
        ValueError: If timeout or poll_frequency is not positive
    """
    if timeout <= 0:
        raise ValueError(f"Timeout must be positive, got {timeout}")
    if poll_frequency is None:
        poll_frequency = DEFAULT_POLL_FREQUENCY
    if poll_frequency <= 0:
        raise ValueError(f"Poll frequency must be positive, got {poll_frequency}")

    # WebDriverWait sleeps before checking its deadline, so stop it one poll early
    poll_frequency = min(poll_frequency, timeout)
    condition = EC.visibility_of(element)
    wait = WebDriverWait(element.parent, max(timeout - poll_frequency, 0), poll_frequency=poll_frequency)
    started = time.monotonic()
    try:
        wait.until(condition)
        visible = True
    except TimeoutException:
        # the last sleep ended at or before the bound, check once more
        visible = bool(condition(element.parent))
    elapsed = time.monotonic() - started

    if visible:
        logger.debug(f"Element visible after {elapsed:.2f}s")
    else:
        logger.info(f"Element not visible within {timeout}s")
    return WaitOutcome(visible=visible, timed_out=not visible, timeout=timeout, elapsed=elapsed)


def visible_element_or_none(driver: WebDriver, locator: Locator) -> Optional[WebElement]:
    """Evaluate the visibility-of-located-element condition once.

    Args:
        driver: The live session
        locator: (By, value) pair to resolve

    Returns:
        Optional[WebElement]: The element if it is currently visible, else None
    """
    try:
        result = EC.visibility_of_element_located(locator)(driver)
    except NoSuchElementException:
        # a missing element counts as not visible, like a hidden one
        logger.debug(f"No element matches {locator!r}")
        return None

    if not result:
        logger.debug(f"Element for {locator!r} is not visible")
        return None
    return result
