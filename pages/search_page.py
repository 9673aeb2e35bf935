from __future__ import annotations

from loguru import logger
from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By

from framework.exceptions import PageNotLoadedError
from framework.reporting import add_info_to_report
from framework.urls import search_url
from pages.base import BasePage
from pages.components.footer import Footer
from pages.components.search_result_list import SearchResultList

NARROW_NO_BREAK_SPACE = "\u202f"


class SearchPage(BasePage):
    """Search results, e.g. https://www.thefork.com/search/?cityId=415144"""

    NUMBER_OF_RESULTS = (By.CSS_SELECTOR, ".container > div > div > p")
    HEADER_CONTAINER = (By.TAG_NAME, "header")
    FOOTER_CONTAINER = (By.TAG_NAME, "footer")
    MAP_CONTAINER = (By.ID, "map")
    RESULT_LIST_CONTAINER = (By.CSS_SELECTOR, "div[data-test='result-list-restaurants']")
    EMPTY_LIST_MESSAGE = (By.CSS_SELECTOR, ".withMap h1")
    DHP = (By.CSS_SELECTOR, "[data-test='dhp-selector']")
    CLOSE_DHP_REGION = (By.CSS_SELECTOR, "[data-tracking-region='DHP and filters'] > div > div > div")
    SORT_BY_BUTTON = (By.CSS_SELECTOR, "#root fieldset legend")
    BEST_RESTAURANTS_IN_CITY_LABEL = (By.CSS_SELECTOR, "div > h1")
    SPECIAL_OFFERS_BUTTON = (By.CSS_SELECTOR, "[data-test='quick-filter-special-offer']")
    SPECIAL_OFFERS_BUTTON_SPAN = (By.TAG_NAME, "span")
    MARKETING_BANNER = (By.CSS_SELECTOR, "header[data-test='search-marketing-banner-header']")
    RESULT_COUNT = (By.CSS_SELECTOR, "[data-test='result-count']")

    # The DHP (date / hour / people) selector renders first
    DHP_CHECKLIST = (("Dhp container", DHP),)
    READY_CHECKLIST = (
        ("Number of results", NUMBER_OF_RESULTS),
        ("Header container", HEADER_CONTAINER),
        ("Footer container", FOOTER_CONTAINER),
        ("GoogleMap container", MAP_CONTAINER),
        ("Sort by button", SORT_BY_BUTTON),
    )
    NOT_LOADED_MESSAGE = "The Search page was not loaded correctly"

    def __init__(self, driver, query: str | None = None) -> None:
        super().__init__(driver)
        self.query = query
        self._footer: Footer | None = None
        self._search_result_list: SearchResultList | None = None

    def _navigate(self) -> None:
        # Reached from the search bar unless a query was given
        if self.query is None:
            return
        url = search_url(self.query)
        add_info_to_report(f"Opening Search Page: {url}")
        self.driver.get(url)

    def verify_loaded(self):
        self._verify_checklist(self.DHP_CHECKLIST, self.NOT_LOADED_MESSAGE)
        return super().verify_loaded()

    def _load_components(self) -> None:
        self._footer = Footer(self.driver, self.driver.find_element(*self.FOOTER_CONTAINER)).verify_loaded()
        self._search_result_list = self._load_result_list()

    def _load_result_list(self) -> SearchResultList:
        # With no results the list container is not rendered at all
        try:
            container = self.driver.find_element(*self.RESULT_LIST_CONTAINER)
        except NoSuchElementException:
            logger.debug("Search list result is not displayed, checking for empty list message")
        else:
            logger.debug("Search list result is displayed")
            return SearchResultList(self.driver, container).verify_loaded()

        try:
            self.driver.find_element(*self.EMPTY_LIST_MESSAGE)
        except NoSuchElementException as exc:
            raise PageNotLoadedError(self.NOT_LOADED_MESSAGE, element="Search result list or empty list message") from exc
        logger.debug("Empty restaurant list message is displayed, using an empty result list")
        return SearchResultList.empty(self.driver)

    # -------- Components --------

    def footer(self) -> Footer:
        return self._footer

    def search_result_list(self) -> SearchResultList:
        return self._search_result_list

    # -------- Probes --------

    def is_google_map_displayed(self) -> bool:
        return self._is_displayed(self.MAP_CONTAINER)

    def is_list_of_restaurants_empty(self) -> bool:
        return self._is_displayed(self.EMPTY_LIST_MESSAGE)

    def is_best_restaurants_in_city_label_displayed(self) -> bool:
        """The "The Best Restaurants in <city>" heading."""
        return self._is_displayed(self.BEST_RESTAURANTS_IN_CITY_LABEL)

    def is_marketing_banner_displayed(self) -> bool:
        logger.debug("Is the marketing banner displayed")
        return self._is_displayed(self.MARKETING_BANNER)

    def get_number_of_restaurants(self) -> int:
        """Parse the leading number of e.g. "1\u202f234 restaurants"."""
        logger.info("Get number of restaurants")
        text = self.driver.find_element(*self.RESULT_COUNT).text.strip()
        number = text.split(" ")[0].replace(NARROW_NO_BREAK_SPACE, "")
        logger.debug(f"Converting {number!r} to the number of restaurants")
        return int(number)

    # -------- Actions --------

    def close_dhp(self) -> SearchPage:
        self.driver.find_element(*self.CLOSE_DHP_REGION).click()
        return self

    def enable_special_offers(self) -> SearchPage:
        add_info_to_report("Enable special offers only")
        if self._special_offers_enabled():
            logger.debug("The special offers button is already enabled")
            return self
        logger.debug("Click the white special offers button")
        return self._toggle_special_offers()

    def disable_special_offers(self) -> SearchPage:
        add_info_to_report("Disable special offers only")
        if not self._special_offers_enabled():
            logger.debug("The special offers button is already disabled")
            return self
        logger.debug("Click the black special offers button")
        return self._toggle_special_offers()

    def _special_offers_enabled(self) -> bool:
        # the disabled (white) button holds a single span, the enabled one more
        button = self.driver.find_element(*self.SPECIAL_OFFERS_BUTTON)
        return len(button.find_elements(*self.SPECIAL_OFFERS_BUTTON_SPAN)) != 1

    def _toggle_special_offers(self) -> SearchPage:
        self.driver.find_element(*self.SPECIAL_OFFERS_BUTTON).click()
        return SearchPage(self.driver).load()
