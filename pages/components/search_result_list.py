from __future__ import annotations

from typing import Iterator

from loguru import logger
from selenium.webdriver.common.by import By

from pages.base import BaseComponent
from pages.components.search_result_item import SearchResultItem


class SearchResultList(BaseComponent):
    """
    Restaurant cards of a search, snapshotted when the list is verified.
    Cards rendered afterwards are not picked up; load a new SearchPage instead.
    """

    RESULT_ITEMS = (By.CSS_SELECTOR, ".card")
    TAG_YUMS_X2 = (By.CSS_SELECTOR, "span[data-test='search-restaurant-tags-SUPER_YUMS']")

    READY_CHECKLIST = (("Search result item", RESULT_ITEMS),)
    NOT_LOADED_MESSAGE = "The search result list was not loaded correctly"

    def __init__(self, driver, container) -> None:
        super().__init__(driver, container)
        self._results: list[SearchResultItem] = []

    @classmethod
    def empty(cls, driver) -> SearchResultList:
        """A list with no results and no backing container."""
        return cls(driver, None)

    def _load_components(self) -> None:
        results = []
        for i, card in enumerate(self.container.find_elements(*self.RESULT_ITEMS)):
            logger.debug(f"Adding search result item {i} to the search result list")
            results.append(SearchResultItem(self.driver, card).verify_loaded())
        self._results = results

    def get_result(self, index: int) -> SearchResultItem:
        logger.debug(f"Get search result item: {index}")
        if not 0 <= index < len(self._results):
            raise IndexError(f"Search result {index} out of range ({len(self._results)} results)")
        return self._results[index]

    def get_number_of_results(self) -> int:
        return len(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[SearchResultItem]:
        return iter(self._results)

    def is_yums_x2_present_in_search_result(self) -> bool:
        logger.debug("Check whether the tag yumsX2 is present in the search list")
        if self.container is None:
            return False
        return self._is_displayed(self.TAG_YUMS_X2)
