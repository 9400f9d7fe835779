"""
Displayedness scenarios.

Every scenario receives a live session, runs search -> probe -> (scroll) ->
probe and returns what it observed. Assertions are left to the caller.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from selenium.webdriver.remote.webdriver import WebDriver

from displayedness.browser.actions import (
    PAGE_NAVIGATION,
    SEARCH_QUERY,
    find_element,
    scroll_to_bottom,
    search_for,
)
from displayedness.config import HarnessConfig
from displayedness.validation.probe_runner import ProbeRequest, ProbeResult, ProbeRunner, ProbeStrategy
from displayedness.validation.visibility import WaitOutcome

logger = logging.getLogger("displayedness.scenarios")


def _observed_value(value: Any) -> Any:
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, WaitOutcome):
        return value.to_dict()
    return {"element_found": True}


@dataclass
class ScenarioResult:
    """Observations made by one scenario run"""
    name: str
    before: Any
    after: Any
    browser: Optional[str] = None
    observations: List[ProbeResult] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "browser": self.browser,
            "before": _observed_value(self.before),
            "after": _observed_value(self.after),
            "observations": [observation.to_dict() for observation in self.observations],
        }


def _runner(driver: WebDriver, config: Optional[HarnessConfig], reporter) -> ProbeRunner:
    return ProbeRunner(driver, config or HarnessConfig(), reporter=reporter)


def _finish(result: ScenarioResult, reporter) -> ScenarioResult:
    logger.info(f"Scenario {result.name} ({result.browser}): before={result.before!r} after={result.after!r}")
    if reporter is not None:
        reporter.log_scenario(result)
    return result


def single_element_object(driver: WebDriver, config: Optional[HarnessConfig] = None,
                          reporter=None, browser: Optional[str] = None) -> ScenarioResult:
    """Read is_displayed on one handle before and after scrolling."""
    runner = _runner(driver, config, reporter)
    search_for(driver, SEARCH_QUERY)

    element = find_element(driver, PAGE_NAVIGATION)
    before = runner.run(ProbeRequest(ProbeStrategy.DIRECT, element=element, label="before scroll"))

    scroll_to_bottom(driver)

    # same handle, read again
    after = runner.run(ProbeRequest(ProbeStrategy.DIRECT, element=element, label="after scroll"))

    return _finish(ScenarioResult(
        name="single_element_object",
        before=before.displayed,
        after=after.displayed,
        browser=browser,
        observations=[before, after]
    ), reporter)


def two_element_objects(driver: WebDriver, config: Optional[HarnessConfig] = None,
                        reporter=None, browser: Optional[str] = None) -> ScenarioResult:
    """Read is_displayed on a handle fetched before and another fetched after scrolling."""
    runner = _runner(driver, config, reporter)
    search_for(driver, SEARCH_QUERY)

    before = runner.run(ProbeRequest(ProbeStrategy.DIRECT, locator=PAGE_NAVIGATION, label="before scroll"))

    scroll_to_bottom(driver)

    after = runner.run(ProbeRequest(ProbeStrategy.DIRECT, locator=PAGE_NAVIGATION, label="after scroll"))

    return _finish(ScenarioResult(
        name="two_element_objects",
        before=before.displayed,
        after=after.displayed,
        browser=browser,
        observations=[before, after]
    ), reporter)


def wait_for_visibility(driver: WebDriver, config: Optional[HarnessConfig] = None,
                        reporter=None, browser: Optional[str] = None,
                        timeout: Optional[float] = None) -> ScenarioResult:
    """Wait for the off-screen navigation table to become visible, without scrolling."""
    runner = _runner(driver, config, reporter)
    search_for(driver, SEARCH_QUERY)

    element = find_element(driver, PAGE_NAVIGATION)
    waited = runner.run(ProbeRequest(
        ProbeStrategy.BOUNDED_WAIT,
        element=element,
        timeout=timeout,
        label="no scroll"
    ))

    return _finish(ScenarioResult(
        name="wait_for_visibility",
        before=None,
        after=waited.wait,
        browser=browser,
        observations=[waited]
    ), reporter)


def conditional_lookup(driver: WebDriver, config: Optional[HarnessConfig] = None,
                       reporter=None, browser: Optional[str] = None) -> ScenarioResult:
    """Look up the navigation table only if it is visible, without scrolling."""
    runner = _runner(driver, config, reporter)
    search_for(driver, SEARCH_QUERY)

    looked_up = runner.run(ProbeRequest(
        ProbeStrategy.CONDITIONAL_LOOKUP,
        locator=PAGE_NAVIGATION,
        label="no scroll"
    ))

    return _finish(ScenarioResult(
        name="conditional_lookup",
        before=None,
        after=looked_up.element,
        browser=browser,
        observations=[looked_up]
    ), reporter)


SCENARIOS: Dict[str, Callable[..., ScenarioResult]] = {
    "single_element_object": single_element_object,
    "two_element_objects": two_element_objects,
    "wait_for_visibility": wait_for_visibility,
    "conditional_lookup": conditional_lookup,
}
