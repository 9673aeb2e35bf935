from __future__ import annotations

import re

from loguru import logger
from selenium.common.exceptions import NoSuchElementException, TimeoutException
from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import Select

from framework.exceptions import PageNotLoadedError
from framework.reporting import add_info_to_report
from pages.base import BaseComponent
from pages.components.sidebar_logged_in import SidebarLoggedIn

_ALPHA2 = re.compile(r"^[A-Za-z]{2}$")


class SidebarNotLoggedIn(BaseComponent):
    """User-space panel as shown to an anonymous visitor (login / sign-up)."""

    EMAIL_INPUT = (By.ID, "identification_email")
    PASSWORD_INPUT = (By.NAME, "password")
    CONTINUE_TO_PASSWORD_BUTTON = (By.CSS_SELECTOR, "button[data-testid='checkout-submit-email']")
    FIRST_NAME_INPUT = (By.NAME, "firstName")
    LAST_NAME_INPUT = (By.NAME, "lastName")
    COUNTRY_CODE_DROPDOWN = (By.ID, "PHONE_CODE_FIELD")
    PHONE_INPUT = (By.NAME, "phoneNumber.nationalNumber")
    LOGIN_BUTTON = (By.CSS_SELECTOR, "button[data-testid='submit-password']")
    CLOSE_SIDEBAR_BUTTON = (By.CSS_SELECTOR, "button[aria-controls='USER_SPACE_FIRST_PANEL']")
    LOGGED_IN_SIDEBAR_CONTAINER = (By.ID, "USER_SPACE_FIRST_PANEL")
    REGISTER_BUTTON = (By.CSS_SELECTOR, "section button[type='submit']")

    REQUEST_CREATE_PASSWORD = (By.CSS_SELECTOR, "[data-test='user-space-request-create-password-step']")
    CREATE_PASSWORD_PAGE = (By.CSS_SELECTOR, "[data-testid='create-password-page']")
    ACCOUNT_CREATION_SECTION = (By.CSS_SELECTOR, "section div.pageContent")
    INVALID_PASSWORD_LABEL = (By.CSS_SELECTOR, ".inputLabel + span")
    FORGOT_PASSWORD_BUTTON = (By.CSS_SELECTOR, "button[data-testid='reset-password-link']")
    RESET_PASSWORD_MESSAGE = (By.CSS_SELECTOR, "div[data-testid='reset-password-page']")

    TIMEOUT_TO_BUTTON_ENABLED = 20
    TIMEOUT_TO_CHANGE_SCREEN = 20
    TIMEOUT_TO_CLOSE_SIDEBAR = 5

    READY_CHECKLIST = (
        ("Email input", EMAIL_INPUT),
        ("Continue to password screen button", CONTINUE_TO_PASSWORD_BUTTON),
        ("Close sidebar button", CLOSE_SIDEBAR_BUTTON),
    )
    NOT_LOADED_MESSAGE = "The sidebar not logged in component was not loaded correctly"

    # -------- Login --------

    def enter_email(self, email: str) -> SidebarNotLoggedIn:
        add_info_to_report(f"Enter email: {email}")
        self.container.find_element(*self.EMAIL_INPUT).send_keys(email)
        return self

    def enter_password(self, password: str) -> SidebarNotLoggedIn:
        add_info_to_report("Enter password")
        self.container.find_element(*self.PASSWORD_INPUT).send_keys(password)
        return self

    def continue_to_password_screen(self) -> SidebarNotLoggedIn:
        add_info_to_report("Continue to password screen")
        self._click_when_clickable(self.CONTINUE_TO_PASSWORD_BUTTON)
        logger.debug("Wait until password input is visible")
        self._wait(self.TIMEOUT_TO_CHANGE_SCREEN).until(EC.visibility_of_element_located(self.PASSWORD_INPUT))
        # an unknown email lands on the sign-up form instead
        if self.is_account_creation_section_displayed():
            raise PageNotLoadedError("Password screen was not displayed")
        return self

    def click_login_button_successful(self) -> SidebarLoggedIn:
        add_info_to_report("Click on log in button and log in successfully")
        self._click_when_clickable(self.LOGIN_BUTTON)
        return self._wait_for_logged_in_sidebar()

    def click_login_button_unsuccessful(self) -> SidebarNotLoggedIn:
        add_info_to_report("Click on log in button and doesn't log in")
        self._click_when_clickable(self.LOGIN_BUTTON)
        return self

    def login(self, email: str, password: str) -> SidebarLoggedIn:
        logger.debug(f"Log in with email {email}")
        self.enter_email(email)
        self.continue_to_password_screen()
        self.enter_password(password)
        return self.click_login_button_successful()

    def continue_to_create_password_request_screen(self) -> SidebarNotLoggedIn:
        add_info_to_report("Continue to request password screen")
        self._click_when_clickable(self.CONTINUE_TO_PASSWORD_BUTTON)
        logger.debug("Wait until create password request message is visible")
        self._wait(self.TIMEOUT_TO_CHANGE_SCREEN).until(
            EC.visibility_of_element_located(self.REQUEST_CREATE_PASSWORD)
        )
        return self

    def click_forgot_password(self) -> SidebarNotLoggedIn:
        add_info_to_report("Click on forgot password")
        self._click_when_clickable(self.FORGOT_PASSWORD_BUTTON)
        return self

    # -------- State probes --------

    def is_create_password_message_displayed(self) -> bool:
        """Only shown when the account was created through the booking flow."""
        logger.debug("Validating if the Create Password message is displayed")
        return self._is_displayed(self.CREATE_PASSWORD_PAGE)

    def is_account_creation_section_displayed(self) -> bool:
        """Only shown when the email has no account yet."""
        logger.debug("Validating if the Account Creation section is displayed")
        return self._is_displayed(self.ACCOUNT_CREATION_SECTION)

    def is_invalid_password_displayed(self) -> bool:
        logger.debug("Check if the invalid password message is displayed")
        return self._is_visible_within(self.INVALID_PASSWORD_LABEL, self.TIMEOUT_TO_BUTTON_ENABLED)

    def is_reset_password_msg_displayed(self) -> bool:
        logger.debug("Check if the reset password message is displayed")
        return self._is_visible_within(self.RESET_PASSWORD_MESSAGE, self.TIMEOUT_TO_BUTTON_ENABLED)

    # -------- Registration --------

    def enter_first_name(self, first_name: str) -> SidebarNotLoggedIn:
        add_info_to_report(f"Enter first name: {first_name}")
        self._retype(self.FIRST_NAME_INPUT, first_name)
        return self

    def enter_last_name(self, last_name: str) -> SidebarNotLoggedIn:
        add_info_to_report(f"Enter last name: {last_name}")
        self._retype(self.LAST_NAME_INPUT, last_name)
        return self

    def select_country_code(self, country_code: str) -> SidebarNotLoggedIn:
        """Select the phone prefix by ISO 3166-1 alpha-2 code, e.g. "FR"."""
        code = (country_code or "").strip()
        if not _ALPHA2.match(code):
            raise ValueError(f"country_code must be an ISO 3166-1 alpha-2 code, got {country_code!r}")
        code = code.upper()
        add_info_to_report(f"Select country code: {code}")
        Select(self.container.find_element(*self.COUNTRY_CODE_DROPDOWN)).select_by_value(code)
        return self

    def enter_phone_number(self, phone_number: str) -> SidebarNotLoggedIn:
        add_info_to_report(f"Enter phone number: {phone_number}")
        self._retype(self.PHONE_INPUT, phone_number)
        return self

    def register_account(self) -> SidebarLoggedIn:
        add_info_to_report("Click on button register the account")
        self._click_when_clickable(self.REGISTER_BUTTON)
        return self._wait_for_logged_in_sidebar()

    def close_sidebar(self) -> None:
        add_info_to_report("Close sidebar")
        self.container.find_element(*self.CLOSE_SIDEBAR_BUTTON).click()
        self._wait(self.TIMEOUT_TO_CLOSE_SIDEBAR).until(EC.invisibility_of_element(self.container))

    # -------- Helpers --------

    def _click_when_clickable(self, locator) -> None:
        logger.debug(f"Wait until {locator[1]} is clickable")
        self._wait(self.TIMEOUT_TO_BUTTON_ENABLED).until(EC.element_to_be_clickable(locator))
        self.container.find_element(*locator).click()

    def _retype(self, locator, value: str) -> None:
        field = self.container.find_element(*locator)
        field.clear()
        field.send_keys(value)

    def _wait_for_logged_in_sidebar(self) -> SidebarLoggedIn:
        wait = self._wait(self.TIMEOUT_TO_BUTTON_ENABLED)
        logger.debug("Wait until not logged in sidebar is closed")
        wait.until(EC.invisibility_of_element(self.container))
        logger.debug("Wait until logged in sidebar is displayed")
        panel = wait.until(EC.visibility_of_element_located(self.LOGGED_IN_SIDEBAR_CONTAINER))
        return SidebarLoggedIn(self.driver, panel).verify_loaded()

    def _is_visible_within(self, locator, timeout: float) -> bool:
        try:
            return self._wait(timeout).until(EC.visibility_of_element_located(locator)).is_displayed()
        except (NoSuchElementException, TimeoutException):
            logger.debug(f"{locator[1]} was not displayed within {timeout}s")
            return False
