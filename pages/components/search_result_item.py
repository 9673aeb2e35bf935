from __future__ import annotations

from loguru import logger
from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webelement import WebElement

from pages.base import BaseComponent


class SearchResultItem(BaseComponent):
    """One restaurant card of the search results."""

    PICTURE = (By.TAG_NAME, "img")
    INSIDER_PICTURE_TAG = (By.CSS_SELECTOR, "[data-test='insider-medal']")
    TIMESLOTS = (By.CSS_SELECTOR, "li > a")
    TIMESLOT_OFFER = (By.TAG_NAME, "span")
    IMAGE_CONTAINER = (By.CSS_SELECTOR, "div > div")
    RESTAURANT_CONTAINER = (By.CSS_SELECTOR, "div > div + div")
    RESTAURANT_NAME = (By.TAG_NAME, "a")
    CUISINE_TAG = (By.CSS_SELECTOR, "[data-test='search-restaurant-tags-DEFAULT']")

    READY_CHECKLIST = (
        ("The restaurant name", RESTAURANT_NAME),
        ("The restaurant image", IMAGE_CONTAINER),
        ("The restaurant data", RESTAURANT_CONTAINER),
    )
    NOT_LOADED_MESSAGE = "The search result item was not loaded correctly"

    def has_picture(self) -> bool:
        return self._is_displayed(self.PICTURE)

    def has_insider_picture_tag(self) -> bool:
        """The small "IN" medal over the restaurant picture."""
        return self._is_displayed(self.INSIDER_PICTURE_TAG)

    def get_restaurant_name(self) -> str:
        return self.container.find_element(*self.RESTAURANT_NAME).text.strip()

    def get_cuisine_tag(self) -> str:
        logger.debug("Get the cuisine tag")
        return self.container.find_element(*self.CUISINE_TAG).text

    def get_number_of_timeslots(self) -> int:
        return len(self._timeslots())

    def get_time_slot_hour(self, index: int) -> str:
        """Slot label without its promotional offer, e.g. "19:30 -20% on food" -> "19:30"."""
        logger.debug(f"Get the hour on the timeslot index {index}")
        slot = self._timeslot(index)
        text = slot.text or ""
        offer = self._offer_text(slot)
        if offer:
            text = text.replace(offer, "")
        return text.strip()

    def get_time_slot_offer(self, index: int) -> str:
        logger.debug(f"Get the offer on the timeslot index {index}")
        return self._offer_text(self._timeslot(index))

    def has_time_slot_offer(self, index: int) -> bool:
        logger.debug(f"Has timeslot offer {index}")
        return self._is_displayed(self.TIMESLOT_OFFER, scope=self._timeslot(index))

    def _timeslots(self) -> list[WebElement]:
        slots = self.container.find_elements(*self.TIMESLOTS)
        logger.debug(f"There are {len(slots)} timeslots")
        return slots

    def _timeslot(self, index: int) -> WebElement:
        slots = self._timeslots()
        if not slots:
            logger.error("The list of timeslots is empty")
            raise IndexError(f"Time slot {index} requested but the restaurant has no time slots")
        if not 0 <= index < len(slots):
            logger.error(f"The index {index} is out of range for {len(slots)} timeslots")
            raise IndexError(f"Time slot index {index} out of range (0..{len(slots) - 1})")
        return slots[index]

    def _offer_text(self, slot: WebElement) -> str:
        try:
            offer = slot.find_element(*self.TIMESLOT_OFFER)
        except NoSuchElementException:
            return ""
        return offer.text if offer.is_displayed() else ""
