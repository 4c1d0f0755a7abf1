import pytest

from photothing.db.pagination import DEFAULT_PER_PAGE, Page, Pagination


def test_new_defaults_page_size():
    assert Pagination.new().per_page == DEFAULT_PER_PAGE
    assert Pagination.new(per_page=0).per_page == DEFAULT_PER_PAGE
    assert Pagination.new(per_page=-5).per_page == DEFAULT_PER_PAGE
    assert Pagination.new(per_page=7).per_page == 7


def test_first_and_page_helpers():
    assert Pagination.first() == Pagination(key=None, per_page=DEFAULT_PER_PAGE)
    assert Pagination.page(12) == Pagination(key=12, per_page=DEFAULT_PER_PAGE)
    assert Pagination.first().lower_bound == 0
    assert Pagination.page(12).lower_bound == 12


@pytest.mark.parametrize("params, expected", [
    ({}, Pagination(None, DEFAULT_PER_PAGE)),
    ({"key": "10"}, Pagination(10, DEFAULT_PER_PAGE)),
    ({"key": "10", "page_size": "5"}, Pagination(10, 5)),
    ({"key": "ten", "page_size": "five"}, Pagination(None, DEFAULT_PER_PAGE)),
    ({"page_size": "0", "sort": "name"}, Pagination(None, DEFAULT_PER_PAGE)),
    ({"key": None, "page_size": None}, Pagination(None, DEFAULT_PER_PAGE)),
    ({"key": str(2**70), "page_size": str(2**40)}, Pagination(None, DEFAULT_PER_PAGE)),
    ({"key": str(-2**31), "page_size": "5"}, Pagination(-2**31, 5)),
    ({"key": str(2**31 - 1)}, Pagination(2**31 - 1, DEFAULT_PER_PAGE)),
])
def test_from_query(params, expected):
    assert Pagination.from_query(params) == expected


def test_empty_page():
    page = Page.empty()
    assert page.is_empty()
    assert page.remaining == 0
    assert page.key is None
    assert page.next_key is None


def test_map_preserves_paging_fields():
    page = Page(key=3, next_key=9, remaining=4, items=[1, 2, 3])

    mapped = page.map(lambda x: x * 10)
    assert mapped.items == [10, 20, 30]
    assert (mapped.key, mapped.next_key, mapped.remaining) == (3, 9, 4)

    reversed_page = page.map_items(lambda items: list(reversed(items)))
    assert reversed_page.items == [3, 2, 1]
    assert (reversed_page.key, reversed_page.next_key, reversed_page.remaining) == (3, 9, 4)
    assert not reversed_page.is_empty()
