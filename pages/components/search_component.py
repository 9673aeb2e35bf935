from __future__ import annotations

from loguru import logger
from selenium.common.exceptions import NoSuchElementException, TimeoutException
from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions as EC

from framework.reporting import add_info_to_report
from pages.base import BaseComponent
from pages.search_page import SearchPage

AUTOCOMPLETE_VISIBLE = "Autocomplete is visible"


def autocomplete_option_locator(text: str):
    """Locator for the autocomplete entry labelled exactly ``text``."""
    label = text.replace("\\", "\\\\").replace("'", "\\'")
    return (By.CSS_SELECTOR, f"a[aria-label='{label}'], button[aria-label='{label}']")


class SearchComponent(BaseComponent):
    """
    The what/where search bar.

    A search goes: enter what -> confirm it from the autocomplete -> enter
    where -> confirm it -> launch. Entering a value always clears what the
    field held before.
    """

    WHAT_INPUT = (By.ID, "whatinput")
    WHERE_INPUT = (By.ID, "whereinput")
    SEARCH_BUTTON = (By.CSS_SELECTOR, "button[type='submit']")
    LABEL_WHAT = (By.CSS_SELECTOR, "label[for='whatinput']")
    LABEL_WHERE = (By.CSS_SELECTOR, "label[for='whereinput']")
    CLEAR_WHAT_BUTTON = (By.CSS_SELECTOR, "label[for='whatinput']+span button")
    CLEAR_WHERE_BUTTON = (By.CSS_SELECTOR, "label[for='whereinput']+span button")
    AUTOCOMPLETE = (By.CSS_SELECTOR, "ul[data-test='search-autocomplete-results']")
    AUTOCOMPLETE_FIRST_ENTRY = (By.CSS_SELECTOR, "ul > a, ul > button")

    TIMEOUT_FOR_AUTOCOMPLETE = 10
    TIMEOUT_CLEAR_BUTTON = 2
    TIMEOUT_SEARCH_BUTTON_CLICKABLE = 10

    READY_CHECKLIST = (
        ("What input", WHAT_INPUT),
        ("Where input", WHERE_INPUT),
        ("Search button", SEARCH_BUTTON),
        ("Where label", LABEL_WHERE),
        ("What label", LABEL_WHAT),
    )
    NOT_LOADED_MESSAGE = "The search component was not loaded correctly"

    # -------- Field entry --------

    def enter_what(self, what: str) -> None:
        logger.debug(f"Enter what: {what}")
        what_input = self.container.find_element(*self.WHAT_INPUT)
        if what_input.get_attribute("value"):
            self._clear_what_field()

        what_input.send_keys(what)
        logger.debug(f"Entered '{what}' in what field")
        self.container.find_element(*self.LABEL_WHAT).click()

    def enter_where(self, where: str) -> None:
        logger.debug(f"Enter where: {where}")
        where_input = self.container.find_element(*self.WHERE_INPUT)
        if where_input.get_attribute("value"):
            self._clear_where_field()

        # click outside to drop the focus
        self.container.find_element(*self.LABEL_WHERE).click()
        where_input.send_keys(where)
        logger.debug(f"Entered '{where}' in where field")
        self._wait_for_autocomplete()

    # -------- Autocomplete --------

    def select_from_autocomplete(self, text: str) -> None:
        logger.debug(f"Select '{text}' from autocomplete")
        self._wait_for_autocomplete()
        option = self._wait(self.TIMEOUT_FOR_AUTOCOMPLETE).until(
            EC.presence_of_element_located(autocomplete_option_locator(text))
        )
        option_text = option.text
        add_info_to_report(f"Click on autocomplete option with text '{option_text}'")
        option.click()
        logger.debug(f"Clicked on the autocomplete option with text: {option_text}")
        self._wait_until_search_button_is_clickable()

    def autocomplete_contains(self, text: str) -> bool:
        self._wait_for_autocomplete()
        locator = autocomplete_option_locator(text)
        logger.debug(f"Autocomplete option selector: {locator[1]}")
        try:
            return self._wait(self.TIMEOUT_FOR_AUTOCOMPLETE).until(
                EC.presence_of_element_located(locator)
            ).is_displayed()
        except (NoSuchElementException, TimeoutException):
            logger.debug(f"The autocomplete option '{text}' was not found")
            return False

    def select_near_me(self) -> None:
        logger.debug("Select Near Me")
        where_input = self.container.find_element(*self.WHERE_INPUT)
        if where_input.get_attribute("value"):
            self._clear_where_field()

        self.container.find_element(*self.LABEL_WHERE).click()
        where_input.click()
        self._wait_for_autocomplete().find_element(*self.AUTOCOMPLETE_FIRST_ENTRY).click()
        logger.debug("Selected Near Me")
        self._wait_until_search_button_is_clickable()

    def select_all_restaurants(self) -> None:
        logger.debug("Select all restaurants")
        what_input = self.container.find_element(*self.WHAT_INPUT)
        if what_input.get_attribute("value"):
            self._clear_what_field()

        what_input.click()
        self._wait_for_autocomplete().find_element(*self.AUTOCOMPLETE_FIRST_ENTRY).click()
        logger.debug("Selected all restaurants")
        self._wait(self.TIMEOUT_FOR_AUTOCOMPLETE).until(EC.invisibility_of_element_located(self.AUTOCOMPLETE))
        logger.debug("Autocomplete is closed")
        self._wait_until_search_button_is_clickable()

    # -------- Submission --------

    def launch_search(self) -> SearchPage:
        logger.debug("Click search button")
        self._wait_until_search_button_is_clickable()
        self.container.find_element(*self.SEARCH_BUTTON).click()
        logger.debug("Clicked on search button")
        return SearchPage(self.driver).load()

    def search(self, what: str, where: str) -> SearchPage:
        add_info_to_report(f"Search what: '{what}', where: '{where}'")
        self.enter_what(what)
        self.select_from_autocomplete(what)
        self.enter_where(where)
        self.select_from_autocomplete(where)
        return self.launch_search()

    # -------- Helpers --------

    def _clear_what_field(self) -> None:
        logger.debug("Clear what field")
        self._clear_field(self.WHAT_INPUT, self.CLEAR_WHAT_BUTTON)

    def _clear_where_field(self) -> None:
        logger.debug("Clear where field")
        self._clear_field(self.WHERE_INPUT, self.CLEAR_WHERE_BUTTON)

    def _clear_field(self, input_locator, clear_button_locator) -> None:
        self.container.find_element(*input_locator).click()
        self.container.find_element(*clear_button_locator).click()
        logger.debug("Wait until clear button is not visible")
        self._wait(self.TIMEOUT_CLEAR_BUTTON).until(EC.invisibility_of_element_located(clear_button_locator))
        logger.debug("Clear button is not visible")

    def _wait_for_autocomplete(self):
        autocomplete = self._wait(self.TIMEOUT_FOR_AUTOCOMPLETE).until(
            EC.visibility_of_element_located(self.AUTOCOMPLETE)
        )
        logger.debug(AUTOCOMPLETE_VISIBLE)
        return autocomplete

    def _wait_until_search_button_is_clickable(self) -> None:
        logger.debug("Wait until the search button is clickable")
        self._wait(self.TIMEOUT_SEARCH_BUTTON_CLICKABLE).until(EC.element_to_be_clickable(self.SEARCH_BUTTON))
        logger.debug("The search button is clickable")
