from loguru import logger
from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions as EC

from framework.reporting import add_info_to_report
from pages.base import BaseComponent
from pages.components.sidebar_logged_in import SidebarLoggedIn
from pages.components.sidebar_not_logged_in import SidebarNotLoggedIn


class HeaderNoSearch(BaseComponent):
    LOGO = (By.CSS_SELECTOR, "[data-test='brand-logo']")
    LOGIN_BUTTON = (By.CSS_SELECTOR, "button[data-test='user-space']")
    SIDEBAR_CONTAINER = (By.ID, "USER_SPACE_FIRST_PANEL")

    TIMEOUT_TO_OPEN_SIDEBAR = 10

    READY_CHECKLIST = (
        ("Logo", LOGO),
        ("Login button", LOGIN_BUTTON),
    )
    NOT_LOADED_MESSAGE = "The header no search component was not loaded correctly"

    def open_sidebar_not_logged_in(self) -> SidebarNotLoggedIn:
        add_info_to_report("Open sidebar when not logged in")
        return self._open_sidebar(SidebarNotLoggedIn)

    def open_sidebar_logged_in(self) -> SidebarLoggedIn:
        add_info_to_report("Open sidebar when logged in")
        return self._open_sidebar(SidebarLoggedIn)

    def _open_sidebar(self, sidebar_cls):
        self.container.find_element(*self.LOGIN_BUTTON).click()
        logger.debug("Wait until sidebar container is displayed")
        panel = self._wait(self.TIMEOUT_TO_OPEN_SIDEBAR).until(
            EC.visibility_of_element_located(self.SIDEBAR_CONTAINER)
        )
        logger.debug("Sidebar container is displayed")
        return sidebar_cls(self.driver, panel).verify_loaded()
