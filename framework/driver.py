from __future__ import annotations

from loguru import logger
from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.remote.webdriver import WebDriver

from framework.config import Settings, get_settings

WINDOW_WIDTH = 1400
WINDOW_HEIGHT = 900


def _chrome(headless: bool) -> webdriver.Chrome:
    opts = ChromeOptions()

    opts.add_argument(f"--window-size={WINDOW_WIDTH},{WINDOW_HEIGHT}")
    opts.add_argument("--disable-infobars")
    opts.add_argument("--disable-extensions")
    opts.add_argument("--disable-gpu")
    opts.add_argument("--no-sandbox")
    opts.add_argument("--disable-dev-shm-usage")

    if headless:
        opts.add_argument("--headless=new")

    return webdriver.Chrome(options=opts)


def _firefox(headless: bool) -> webdriver.Firefox:
    opts = FirefoxOptions()
    opts.add_argument(f"--width={WINDOW_WIDTH}")
    opts.add_argument(f"--height={WINDOW_HEIGHT}")

    if headless:
        opts.add_argument("-headless")

    return webdriver.Firefox(options=opts)


_FACTORIES = {
    "chrome": _chrome,
    "firefox": _firefox,
}


def make_driver(settings: Settings | None = None, *, headless: bool | None = None) -> WebDriver:
    """
    Create the browser session used by one scenario.
    - settings=None  -> read from the environment
    - headless=None  -> use settings.headless
    - headless=True/False -> force the mode

    The implicit wait is what lets readiness checks find elements that render
    shortly after navigation, so it is always set.
    """
    settings = settings or get_settings()
    if headless is None:
        headless = settings.headless

    factory = _FACTORIES.get(settings.browser)
    if factory is None:
        raise ValueError(f"Unsupported browser {settings.browser!r}; expected one of {sorted(_FACTORIES)}")

    logger.debug(f"Starting {settings.browser} (headless={headless})")
    driver = factory(headless)
    driver.set_page_load_timeout(settings.page_load_timeout)
    driver.implicitly_wait(settings.implicit_wait)
    return driver
