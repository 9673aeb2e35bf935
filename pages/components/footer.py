from selenium.webdriver.common.by import By

from pages.base import BaseComponent


def _footer_link(name: str):
    return (By.CSS_SELECTOR, f"[data-test='tf_web_footer_{name}']")


class Footer(BaseComponent):
    ABOUT_US = _footer_link("aboutUs")
    LOYALTY_PROGRAM = _footer_link("loyaltyProgram")
    CONTACT = _footer_link("contact")
    CGU = _footer_link("CGU")
    ARE_YOU_A_RESTAURANT = _footer_link("restaurant")
    COOKIE_POLICY = _footer_link("cookiePolicy")
    COOKIE_CONSENT = _footer_link("evidon")
    FAQ = _footer_link("faq")
    CAREERS = _footer_link("weRecruit")
    MICHELIN = _footer_link("michelin")

    READY_CHECKLIST = (
        ("The about page link", ABOUT_US),
        ("The loyalty page link", LOYALTY_PROGRAM),
        ("The contact page link", CONTACT),
        ("The CGU page link", CGU),
        ("The are you a restaurant page link", ARE_YOU_A_RESTAURANT),
        ("The cookie policy page link", COOKIE_POLICY),
        ("The cookie consent page link", COOKIE_CONSENT),
        ("The FAQ page link", FAQ),
        ("The careers page link", CAREERS),
        ("The michelin page link", MICHELIN),
    )
    NOT_LOADED_MESSAGE = "The footer component was not loaded correctly"
