"""Tests for the pure presentation mappings used by the UI components."""
from src.models import ASC, DESC, UNSORTED, Category, SortState, User
from src.ui.components.helpers import (
    NO_MATCH_MESSAGE, all_categories_button_props, category_button_props,
    category_label, sort_icon, user_text_class,
)


class TestSortIcon:
    def test_inactive_column(self):
        assert sort_icon("name", UNSORTED) == "unfold_more"
        assert sort_icon("name", SortState("id", ASC)) == "unfold_more"

    def test_active_column(self):
        assert sort_icon("id", SortState("id", ASC)) == "arrow_upward"
        assert sort_icon("id", SortState("id", DESC)) == "arrow_downward"


class TestRowMappings:
    def test_user_text_class_by_gender(self):
        assert user_text_class(User(id=1, name="Max", gender="male")) == "text-blue"
        assert user_text_class(User(id=2, name="Anna", gender="female")) == "text-red"

    def test_category_label(self):
        assert category_label(Category(id=1, name="Grocery", icon="🍞", owner_id=2)) == "🍞 - Grocery"

    def test_no_match_message(self):
        assert NO_MATCH_MESSAGE == "No products matching selected criteria"


class TestButtonProps:
    def test_category_button_highlight(self):
        assert "color=info" in category_button_props(True)
        assert "outline" in category_button_props(False)

    def test_all_categories_outlined_only_with_selection(self):
        assert "outline" not in all_categories_button_props([])
        assert "outline" in all_categories_button_props(["Drinks"])
