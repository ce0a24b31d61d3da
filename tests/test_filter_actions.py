"""Tests for filter panel state transitions."""
from config import ALL_USERS
from src.models import DESC, FilterState, SortState
from src.services import (
    clear_search, filter_products, reset_filters, set_search_term, set_user, toggle_category,
)


class TestToggleCategory:
    def test_appends_in_click_order(self, state):
        toggle_category(state, "Drinks")
        toggle_category(state, "Grocery")
        assert state.selected_categories == ["Drinks", "Grocery"]

    def test_removes_when_present(self, state):
        state.selected_categories = ["Drinks", "Grocery", "Clothes"]
        toggle_category(state, "Grocery")
        assert state.selected_categories == ["Drinks", "Clothes"]

    def test_removes_every_occurrence(self, state):
        state.selected_categories = ["Drinks", "Grocery", "Drinks"]
        toggle_category(state, "Drinks")
        assert state.selected_categories == ["Grocery"]

    def test_is_its_own_inverse(self, state):
        state.selected_categories = ["Clothes"]
        toggle_category(state, "Drinks")
        toggle_category(state, "Drinks")
        assert set(state.selected_categories) == {"Clothes"}

    def test_toggle_twice_restores_unfiltered_rows(self, views, state):
        toggle_category(state, "Electronics")
        assert [v.id for v in filter_products(views, state)] == [7, 8]
        toggle_category(state, "Electronics")
        assert state.selected_categories == []
        assert filter_products(views, state) == views


class TestUserAndSearch:
    def test_set_user(self, state):
        set_user(state, "Max")
        assert state.selected_user == "Max"
        set_user(state, ALL_USERS)
        assert not state.has_user_filter

    def test_set_search_term_keeps_text_as_typed(self, state):
        set_search_term(state, " Pho ")
        assert state.search_term == " Pho "

    def test_set_search_term_none_clears(self, state):
        """A cleared input reports None; the term becomes empty."""
        state.search_term = "milk"
        set_search_term(state, None)
        assert state.search_term == ""

    def test_clear_search_only_touches_search(self):
        state = FilterState(selected_user="Anna", search_term="br", selected_categories=["Grocery"])
        clear_search(state)
        assert state == FilterState(selected_user="Anna", selected_categories=["Grocery"])


class TestResetFilters:
    def test_resets_user_search_and_categories(self):
        state = FilterState(selected_user="Roma", search_term="x", selected_categories=["Drinks"])
        reset_filters(state)
        assert state.selected_user == ALL_USERS
        assert state.search_term == ""
        assert state.selected_categories == []

    def test_keeps_sort(self):
        state = FilterState(selected_user="Roma", sort=SortState("name", DESC))
        reset_filters(state)
        assert state.sort == SortState("name", DESC)
