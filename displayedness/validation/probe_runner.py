"""
Probe runner that dispatches visibility checks to a strategy.
This layer resolves locators and records each observation.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from displayedness.browser.actions import Locator, find_element
from displayedness.config import HarnessConfig
from .visibility import WaitOutcome, is_displayed, visible_element_or_none, wait_until_visible

logger = logging.getLogger("displayedness.validation.probe_runner")


class ProbeStrategy(str, Enum):
    """Ways of asking whether an element is displayed"""
    DIRECT = "direct"
    BOUNDED_WAIT = "bounded_wait"
    CONDITIONAL_LOOKUP = "conditional_lookup"


@dataclass
class ProbeRequest:
    """Request for a single visibility probe"""
    strategy: ProbeStrategy
    locator: Optional[Locator] = None
    element: Optional[WebElement] = None
    timeout: Optional[float] = None
    label: str = ""


@dataclass
class ProbeResult:
    """Observation produced by a probe"""
    strategy: ProbeStrategy
    label: str
    displayed: Optional[bool] = None
    element: Optional[WebElement] = None
    wait: Optional[WaitOutcome] = None

    @property
    def value(self) -> Any:
        """The strategy's native answer: bool, WaitOutcome or element/None."""
        if self.strategy == ProbeStrategy.BOUNDED_WAIT:
            return self.wait
        if self.strategy == ProbeStrategy.CONDITIONAL_LOOKUP:
            return self.element
        return self.displayed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strategy": self.strategy.value,
            "label": self.label,
            "displayed": self.displayed,
            "element_found": self.element is not None,
            "wait": self.wait.to_dict() if self.wait else None,
        }


class ProbeRunner:
    """Runs probe requests against one session"""

    def __init__(self, driver: WebDriver, config: HarnessConfig, reporter=None):
        self.driver = driver
        self.config = config
        self.reporter = reporter

    def _resolve(self, request: ProbeRequest) -> WebElement:
        if request.element is not None:
            return request.element
        if request.locator is None:
            raise ValueError(f"{request.strategy.value} probe needs an element or a locator")
        return find_element(self.driver, request.locator)

    def run(self, request: ProbeRequest) -> ProbeResult:
        """Run a single probe and report it"""
        logger.debug(f"Running {request.strategy.value} probe {request.label!r}")

        if request.strategy == ProbeStrategy.DIRECT:
            element = self._resolve(request)
            result = ProbeResult(
                strategy=request.strategy,
                label=request.label,
                displayed=is_displayed(element),
                element=element
            )

        elif request.strategy == ProbeStrategy.BOUNDED_WAIT:
            element = self._resolve(request)
            timeout = request.timeout if request.timeout is not None else self.config.wait_timeout
            outcome = wait_until_visible(element, timeout, poll_frequency=self.config.poll_frequency)
            result = ProbeResult(
                strategy=request.strategy,
                label=request.label,
                displayed=outcome.visible,
                element=element,
                wait=outcome
            )

        elif request.strategy == ProbeStrategy.CONDITIONAL_LOOKUP:
            if request.locator is None:
                raise ValueError("conditional_lookup probe needs a locator")
            element = visible_element_or_none(self.driver, request.locator)
            result = ProbeResult(
                strategy=request.strategy,
                label=request.label,
                element=element
            )

        else:
            raise ValueError(f"Unknown probe strategy: {request.strategy}")

        if self.reporter is not None:
            self.reporter.log_probe(result)
        return result
