from loguru import logger
from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions as EC

from framework.reporting import add_info_to_report
from pages.base import BaseComponent


def _panel_button(panel: str):
    return (By.CSS_SELECTOR, f"button[aria-controls='{panel}']")


class SidebarLoggedIn(BaseComponent):
    CLOSE_SIDEBAR_BUTTON = _panel_button("USER_SPACE_FIRST_PANEL")
    PERSONAL_INFORMATION_BUTTON = _panel_button("user-space-user-information")
    RESERVATIONS_BUTTON = _panel_button("user-space-user-bookings")
    FAVORITES_BUTTON = _panel_button("user-space-user-favorites")
    REVIEWS_BUTTON = _panel_button("user-space-user-reviews")
    LOYALTY_SPACE_BUTTON = _panel_button("user-space-fidelity-space")
    LOGOUT_BUTTON = (By.CSS_SELECTOR, "button[data-test='LOGOUT_BTN']")
    USERNAME = (By.TAG_NAME, "h1")
    TOTAL_YUMS = (By.CSS_SELECTOR, "li[data-test='USER_PROFILE_TOTAL_YUMS'] > span")

    TIMEOUT_TO_CLOSE_SIDEBAR = 5

    READY_CHECKLIST = (
        ("Close sidebar button", CLOSE_SIDEBAR_BUTTON),
        ("My personal information button", PERSONAL_INFORMATION_BUTTON),
        ("My reservations button", RESERVATIONS_BUTTON),
        ("My favorites button", FAVORITES_BUTTON),
        ("My reviews button", REVIEWS_BUTTON),
        ("My loyalty space button", LOYALTY_SPACE_BUTTON),
        ("Logout button", LOGOUT_BUTTON),
        ("Username", USERNAME),
        ("Total yums", TOTAL_YUMS),
    )
    NOT_LOADED_MESSAGE = "The sidebar logged in component was not loaded correctly"

    def get_username(self) -> str:
        logger.debug("Get username")
        return self.container.find_element(*self.USERNAME).text

    def get_yums(self) -> str:
        logger.debug("Get yums")
        return self.container.find_element(*self.TOTAL_YUMS).text

    def log_out(self):
        """Log out and land back on the home page (no new navigation)."""
        from pages.home_page import HomePage

        add_info_to_report("Log out")
        self.container.find_element(*self.LOGOUT_BUTTON).click()
        self._wait_until_closed()
        logger.debug("Delete all cookies")
        self.driver.delete_all_cookies()
        return HomePage(self.driver, navigate=False).load()

    def close_sidebar(self) -> None:
        add_info_to_report("Close sidebar")
        self.container.find_element(*self.CLOSE_SIDEBAR_BUTTON).click()
        self._wait_until_closed()

    def _wait_until_closed(self) -> None:
        logger.debug("Wait until sidebar is not displayed")
        self._wait(self.TIMEOUT_TO_CLOSE_SIDEBAR).until(EC.invisibility_of_element(self.container))
        logger.debug("Sidebar is not displayed")
