"""
Shared readiness protocol for pages and components.

A page object is only usable once ``verify_loaded()`` has passed: every entry
of its ``READY_CHECKLIST`` was found, in order, and every child component it
owns has passed its own check.
"""
from __future__ import annotations

from typing import Sequence

from loguru import logger
from selenium.common.exceptions import NoSuchElementException, WebDriverException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.ui import WebDriverWait

from framework.exceptions import PageNotLoadedError

Locator = tuple[str, str]


class _Loadable:
    # Ordered (description, locator) pairs that must all be present
    READY_CHECKLIST: Sequence[tuple[str, Locator]] = ()
    NOT_LOADED_MESSAGE = "The page object was not loaded correctly"

    driver: WebDriver

    @property
    def _scope(self):
        raise NotImplementedError

    def verify_loaded(self):
        self._verify_checklist(self.READY_CHECKLIST, self.NOT_LOADED_MESSAGE)
        self._load_components()
        logger.debug(f"{type(self).__name__} was loaded correctly")
        return self

    def _load_components(self) -> None:
        """Build and verify owned child components. Nothing to do by default."""

    def _verify_checklist(self, checklist: Sequence[tuple[str, Locator]], message: str) -> None:
        for description, locator in checklist:
            try:
                self._scope.find_element(*locator)
            except WebDriverException as exc:
                raise PageNotLoadedError(message, element=description) from exc
            logger.debug(f"{description} is displayed")

    def _wait(self, timeout: float) -> WebDriverWait:
        return WebDriverWait(self.driver, timeout)

    def _is_displayed(self, locator: Locator, scope=None) -> bool:
        scope = self._scope if scope is None else scope
        try:
            return scope.find_element(*locator).is_displayed()
        except NoSuchElementException:
            logger.debug(f"{locator[1]} was not found")
            return False


class BaseComponent(_Loadable):
    """A UI fragment; every lookup is scoped to its container element."""

    NOT_LOADED_MESSAGE = "The component was not loaded correctly"

    def __init__(self, driver: WebDriver, container: WebElement | None) -> None:
        self.driver = driver
        self.container = container

    @property
    def _scope(self):
        return self.container


class BasePage(_Loadable):
    """A full screen; lookups are scoped to the whole document."""

    NOT_LOADED_MESSAGE = "The page was not loaded correctly"

    def __init__(self, driver: WebDriver) -> None:
        self.driver = driver

    @property
    def _scope(self):
        return self.driver

    def load(self):
        """Navigate to the page, if it has somewhere to go, then verify it."""
        self._navigate()
        return self.verify_loaded()

    def _navigate(self) -> None:
        pass
