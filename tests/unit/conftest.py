"""
Browser-free doubles for the page objects.

FakeElement subclasses Selenium's WebElement so expected_conditions treat it
as a real element; lookups resolve against locators registered with add().
"""
from __future__ import annotations

import itertools

import pytest
from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.remote.webelement import WebElement

from framework import reporting
from pages.components.footer import Footer
from pages.components.header_no_search import HeaderNoSearch
from pages.components.search_component import SearchComponent
from pages.components.search_result_item import SearchResultItem
from pages.components.search_result_list import SearchResultList
from pages.components.sidebar_logged_in import SidebarLoggedIn
from pages.components.sidebar_not_logged_in import SidebarNotLoggedIn
from pages.home_page import HomePage
from pages.search_page import SearchPage

_ids = itertools.count(1)


class FakeScope:
    def __init__(self) -> None:
        self._children: dict[tuple[str, str], list] = {}

    def add(self, locator, *elements):
        self._children.setdefault(tuple(locator), []).extend(elements)
        return elements[0] if len(elements) == 1 else list(elements)

    def remove(self, locator) -> None:
        self._children.pop(tuple(locator), None)

    def find_element(self, by="id", value=None):
        matches = self._children.get((by, value))
        if not matches:
            raise NoSuchElementException(f"no element for {by}={value!r}")
        return matches[0]

    def find_elements(self, by="id", value=None):
        return list(self._children.get((by, value), []))


class FakeElement(FakeScope, WebElement):
    def __init__(self, driver=None, text="", value="", displayed=True, enabled=True, tag="div", on_click=None):
        FakeScope.__init__(self)
        WebElement.__init__(self, driver, f"fake-{next(_ids)}")
        self._text = text
        self.attributes = {"value": value}
        self.displayed = displayed
        self.enabled = enabled
        self._tag = tag
        self.on_click = on_click
        self.clicks = 0
        self.typed: list[str] = []

    def __repr__(self) -> str:
        return f"<FakeElement {self._id} text={self._text!r}>"

    @property
    def text(self) -> str:
        return self._text

    @property
    def tag_name(self) -> str:
        return self._tag

    @property
    def value(self) -> str:
        return self.attributes.get("value") or ""

    def click(self) -> None:
        self.clicks += 1
        if self.on_click is not None:
            self.on_click(self)

    def send_keys(self, *value) -> None:
        text = "".join(value)
        self.typed.append(text)
        self.attributes["value"] = self.value + text

    def clear(self) -> None:
        self.attributes["value"] = ""

    def get_attribute(self, name):
        return self.attributes.get(name)

    def get_dom_attribute(self, name):
        return self.attributes.get(name)

    def is_displayed(self) -> bool:
        return self.displayed

    def is_enabled(self) -> bool:
        return self.enabled

    def is_selected(self) -> bool:
        return False


class FakeDriver(FakeScope):
    session_id = "fake-session"

    def __init__(self) -> None:
        super().__init__()
        self.visited: list[str] = []
        self.refreshes = 0
        self.cookies_deleted = 0

    def get(self, url: str) -> None:
        self.visited.append(url)

    def refresh(self) -> None:
        self.refreshes += 1

    def delete_all_cookies(self) -> None:
        self.cookies_deleted += 1

    def save_screenshot(self, path: str) -> bool:
        return False

    def quit(self) -> None:
        pass


class FakeDom:
    """Builds fake DOM trees shaped like the pages under test."""

    def __init__(self) -> None:
        self.driver = FakeDriver()

    def element(self, text="", **kwargs) -> FakeElement:
        return FakeElement(self.driver, text=text, **kwargs)

    def populate(self, scope, checklist) -> dict[str, FakeElement]:
        """Register one element for every (description, locator) pair."""
        found = {}
        for description, locator in checklist:
            found[description] = scope.add(locator, self.element(description))
        return found

    def component(self, component_cls) -> FakeElement:
        container = self.element(component_cls.__name__)
        self.populate(container, component_cls.READY_CHECKLIST)
        return container

    def shared(self, container, locator, **kwargs) -> FakeElement:
        """An element reachable from both the container and the document."""
        el = self.element(**kwargs)
        container.remove(locator)
        container.add(locator, el)
        self.driver.add(locator, el)
        return el

    # -------- Search results --------

    def timeslot(self, text: str, offer: str | None = None) -> FakeElement:
        slot = self.element(text)
        if offer is not None:
            slot.add(SearchResultItem.TIMESLOT_OFFER, self.element(offer))
        return slot

    def result_card(self, name="Le Restaurant", slots=()) -> FakeElement:
        card = self.component(SearchResultItem)
        card.remove(SearchResultItem.RESTAURANT_NAME)
        card.add(SearchResultItem.RESTAURANT_NAME, self.element(name))
        if slots:
            card.add(SearchResultItem.TIMESLOTS, *slots)
        return card

    def result_list(self, cards) -> FakeElement:
        container = self.element("results")
        if cards:
            container.add(SearchResultList.RESULT_ITEMS, *cards)
        return container

    # -------- Pages --------

    def home_page(self) -> FakeDriver:
        self.populate(self.driver, (("Tag line", HomePage.TAGLINE),))
        self.driver.add(HomePage.HEADER, self.component(HeaderNoSearch))
        self.driver.add(HomePage.FOOTER, self.component(Footer))
        self.driver.add(HomePage.SEARCH_CONTAINER, self.component(SearchComponent))
        # search button is waited on at document level
        search = self.driver.find_element(*HomePage.SEARCH_CONTAINER)
        self.driver.add(SearchComponent.SEARCH_BUTTON, search.find_element(*SearchComponent.SEARCH_BUTTON))
        return self.driver

    def search_page(self, cards=None, empty_message=False) -> FakeDriver:
        self.populate(self.driver, SearchPage.DHP_CHECKLIST)
        for description, locator in SearchPage.READY_CHECKLIST:
            if locator == SearchPage.FOOTER_CONTAINER:
                self.driver.add(locator, self.component(Footer))
            else:
                self.driver.add(locator, self.element(description))
        if cards is not None:
            self.driver.add(SearchPage.RESULT_LIST_CONTAINER, self.result_list(cards))
        if empty_message:
            self.driver.add(SearchPage.EMPTY_LIST_MESSAGE, self.element("No restaurants found"))
        return self.driver

    def sidebar_logged_in(self, username="Jane D.", yums="1200") -> FakeElement:
        panel = self.component(SidebarLoggedIn)
        panel.remove(SidebarLoggedIn.USERNAME)
        panel.add(SidebarLoggedIn.USERNAME, self.element(username))
        panel.remove(SidebarLoggedIn.TOTAL_YUMS)
        panel.add(SidebarLoggedIn.TOTAL_YUMS, self.element(yums))
        return panel

    def sidebar_not_logged_in(self) -> FakeElement:
        return self.component(SidebarNotLoggedIn)


def hide(element: FakeElement) -> None:
    element.displayed = False


class _StepRecorder:
    def __init__(self) -> None:
        self.steps: list[str] = []

    def add_step(self, message: str) -> None:
        self.steps.append(message)


@pytest.fixture
def dom():
    return FakeDom()


@pytest.fixture
def fake_hide():
    return hide


@pytest.fixture
def narration():
    """Capture narrated steps instead of sending them to the run reporter."""
    previous = reporting.get_active_reporter()
    recorder = _StepRecorder()
    reporting.set_active_reporter(recorder)
    try:
        yield recorder.steps
    finally:
        reporting.set_active_reporter(previous)


@pytest.fixture
def fast_waits(monkeypatch):
    """Shrink every bounded wait so timeout paths fail quickly."""
    for cls, names in (
        (HeaderNoSearch, ("TIMEOUT_TO_OPEN_SIDEBAR",)),
        (SearchComponent, ("TIMEOUT_FOR_AUTOCOMPLETE", "TIMEOUT_CLEAR_BUTTON", "TIMEOUT_SEARCH_BUTTON_CLICKABLE")),
        (SidebarLoggedIn, ("TIMEOUT_TO_CLOSE_SIDEBAR",)),
        (SidebarNotLoggedIn, ("TIMEOUT_TO_BUTTON_ENABLED", "TIMEOUT_TO_CHANGE_SCREEN", "TIMEOUT_TO_CLOSE_SIDEBAR")),
    ):
        for name in names:
            monkeypatch.setattr(cls, name, 0.1)
