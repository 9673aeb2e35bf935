import pytest

from pages.components.search_result_item import SearchResultItem
from pages.components.search_result_list import SearchResultList


@pytest.fixture
def item(dom):
    card = dom.result_card(
        name=" Chez Marcel ",
        slots=[dom.timeslot("19:30 -20% on food", offer="-20% on food"), dom.timeslot("20:00")],
    )
    card.add(SearchResultItem.CUISINE_TAG, dom.element("French"))
    return SearchResultItem(dom.driver, card).verify_loaded()


def test_time_slot_hour_strips_offer(item):
    assert item.get_time_slot_hour(0) == "19:30"


def test_time_slot_hour_without_offer(item):
    assert item.get_time_slot_hour(1) == "20:00"


def test_time_slot_offer(item):
    assert item.has_time_slot_offer(0) is True
    assert item.get_time_slot_offer(0) == "-20% on food"
    assert item.has_time_slot_offer(1) is False
    assert item.get_time_slot_offer(1) == ""


def test_hidden_offer_is_ignored(dom, item):
    item.container.find_elements(*SearchResultItem.TIMESLOTS)[0].find_element(
        *SearchResultItem.TIMESLOT_OFFER
    ).displayed = False

    assert item.has_time_slot_offer(0) is False
    assert item.get_time_slot_hour(0) == "19:30 -20% on food"


def test_number_of_timeslots(item):
    assert item.get_number_of_timeslots() == 2


@pytest.mark.parametrize("index", [2, 5, -1])
@pytest.mark.parametrize(
    "method",
    [SearchResultItem.get_time_slot_hour, SearchResultItem.get_time_slot_offer, SearchResultItem.has_time_slot_offer],
    ids=lambda m: m.__name__,
)
def test_out_of_range_time_slot_is_rejected(item, method, index):
    with pytest.raises(IndexError):
        method(item, index)


def test_time_slot_access_on_restaurant_without_slots(dom):
    item = SearchResultItem(dom.driver, dom.result_card()).verify_loaded()

    assert item.get_number_of_timeslots() == 0
    with pytest.raises(IndexError):
        item.get_time_slot_hour(0)


def test_restaurant_details(dom, item):
    assert item.get_restaurant_name() == "Chez Marcel"
    assert item.get_cuisine_tag() == "French"
    assert item.has_picture() is False

    item.container.add(SearchResultItem.PICTURE, dom.element())
    item.container.add(SearchResultItem.INSIDER_PICTURE_TAG, dom.element(displayed=False))

    assert item.has_picture() is True
    assert item.has_insider_picture_tag() is False


def test_result_list_builds_one_item_per_card(dom):
    cards = [dom.result_card(name=n) for n in ("A", "B", "C")]
    results = SearchResultList(dom.driver, dom.result_list(cards)).verify_loaded()

    assert results.get_number_of_results() == 3
    assert len(results) == 3
    assert [r.get_restaurant_name() for r in results] == ["A", "B", "C"]
    assert results.get_result(2).container is cards[2]


def test_result_list_is_a_snapshot(dom):
    container = dom.result_list([dom.result_card()])
    results = SearchResultList(dom.driver, container).verify_loaded()

    container.add(SearchResultList.RESULT_ITEMS, dom.result_card())

    assert results.get_number_of_results() == 1
    with pytest.raises(IndexError):
        results.get_result(1)


def test_empty_result_list(dom):
    results = SearchResultList.empty(dom.driver)

    assert results.get_number_of_results() == 0
    assert list(results) == []
    assert results.is_yums_x2_present_in_search_result() is False
    with pytest.raises(IndexError):
        results.get_result(0)


def test_yums_x2_tag(dom):
    container = dom.result_list([dom.result_card()])
    results = SearchResultList(dom.driver, container).verify_loaded()
    assert results.is_yums_x2_present_in_search_result() is False

    container.add(SearchResultList.TAG_YUMS_X2, dom.element("x2"))
    assert results.is_yums_x2_present_in_search_result() is True
