from __future__ import annotations

from urllib.parse import urlparse

from loguru import logger
from selenium.webdriver.common.by import By

from framework.exceptions import PageNotLoadedError
from framework.reporting import add_info_to_report
from framework.urls import home_url
from pages.base import BasePage
from pages.components.footer import Footer
from pages.components.header_no_search import HeaderNoSearch
from pages.components.search_component import SearchComponent
from pages.search_page import SearchPage


class HomePage(BasePage):
    """Landing page, e.g. https://www.thefork.com"""

    HEADER = (By.TAG_NAME, "header")
    FOOTER = (By.TAG_NAME, "footer")
    TAGLINE = (By.CSS_SELECTOR, "div[data-test='homepage-tagline'] > h1")
    SEARCH_CONTAINER = (By.CSS_SELECTOR, "div[data-test='search-component']")

    READY_CHECKLIST = (
        ("Tag line", TAGLINE),
        ("Header container", HEADER),
        ("Footer container", FOOTER),
        ("Search container", SEARCH_CONTAINER),
    )
    NOT_LOADED_MESSAGE = "The Home page was not loaded correctly"

    def __init__(self, driver, url: str | None = None, *, navigate: bool = True) -> None:
        """
        url      -> page to open; defaults to the configured THEFORK_URL
        navigate -> False when another page already brought the browser here
                    (e.g. after logging out), so nothing is reloaded
        """
        super().__init__(driver)
        self.navigate = navigate
        self.url = url or home_url()
        if navigate:
            parsed = urlparse(self.url)
            if parsed.scheme not in {"http", "https"} or not parsed.netloc:
                logger.error(f"The URL format '{self.url}' is not correct.")
                raise PageNotLoadedError("The home page could not be opened")
            logger.debug(f"Set home page url to: '{self.url}'")

        self._header: HeaderNoSearch | None = None
        self._footer: Footer | None = None
        self._search_component: SearchComponent | None = None

    def _navigate(self) -> None:
        if not self.navigate:
            add_info_to_report("Opening Home Page when coming from another page")
            return
        add_info_to_report(f"Opening Home Page: {self.url}")
        self.driver.get(self.url)
        self.driver.refresh()

    def _load_components(self) -> None:
        find = self.driver.find_element
        self._header = HeaderNoSearch(self.driver, find(*self.HEADER)).verify_loaded()
        self._footer = Footer(self.driver, find(*self.FOOTER)).verify_loaded()
        self._search_component = SearchComponent(self.driver, find(*self.SEARCH_CONTAINER)).verify_loaded()

    # -------- Components --------

    def header(self) -> HeaderNoSearch:
        return self._header

    def footer(self) -> Footer:
        return self._footer

    def search_component(self) -> SearchComponent:
        return self._search_component

    # -------- Search --------

    def search(self, what: str, where: str) -> SearchPage:
        return self._search_component.search(what, where)

    def enter_what(self, what: str) -> HomePage:
        add_info_to_report(f"Enter what: {what}")
        self._search_component.enter_what(what)
        return self

    def enter_where(self, where: str) -> HomePage:
        add_info_to_report(f"Enter where: {where}")
        self._search_component.enter_where(where)
        return self

    def launch_search(self) -> SearchPage:
        add_info_to_report("Launch search")
        return self._search_component.launch_search()

    def select_search_all_restaurants(self) -> HomePage:
        add_info_to_report("Select All Restaurants in the search what field")
        self._search_component.select_all_restaurants()
        return self

    def select_search_near_me(self) -> HomePage:
        add_info_to_report("Select Near Me in the search where field")
        self._search_component.select_near_me()
        return self

    def select_from_autocomplete(self, text: str) -> HomePage:
        self._search_component.select_from_autocomplete(text)
        return self

    def is_text_present_in_autocomplete_result(self, text: str) -> bool:
        add_info_to_report(f"Check if autocomplete result contains text {text}")
        return self._search_component.autocomplete_contains(text)

    # -------- Account --------

    def login(self, email: str, password: str) -> HomePage:
        self._header.open_sidebar_not_logged_in().login(email, password).close_sidebar()
        return self
