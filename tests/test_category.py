"""Tests for Category (category.py)"""
import pytest

from aacboard import Category, AACPage, UNNAMED_CATEGORY
from aacboard.errors import InvalidArgumentError, NotFoundError


class TestAddAndSelect:

    def test_added_item_is_selectable(self):
        cat = Category("food", "img/food/plate.png")
        cat.add_item("img/food/apple.png", "apple")
        assert cat.has_image("img/food/apple.png")
        assert cat.select("img/food/apple.png") == "apple"

    def test_repeated_image_overwrites(self):
        cat = Category("food")
        cat.add_item("img/food/apple.png", "apple")
        cat.add_item("img/food/pear.png", "pear")
        cat.add_item("img/food/apple.png", "green apple")
        assert len(cat.get_image_locs()) == 2
        assert cat.select("img/food/apple.png") == "green apple"

    def test_image_locs_keep_insertion_order(self):
        cat = Category("food")
        for name in ["c", "a", "b"]:
            cat.add_item(f"img/{name}.png", name)
        assert cat.get_image_locs() == ["img/c.png", "img/a.png", "img/b.png"]

    def test_empty_category_has_no_images(self):
        cat = Category("empty")
        assert cat.get_image_locs() == []
        assert len(cat) == 0

    def test_select_missing_raises_not_found(self):
        cat = Category("food")
        cat.add_item("img/food/apple.png", "apple")
        with pytest.raises(NotFoundError):
            cat.select("img/food/banana.png")

    def test_not_found_is_a_key_error(self):
        with pytest.raises(KeyError):
            Category("food").select("img/nothing.png")


class TestInvalidArguments:

    @pytest.mark.parametrize("image_id, text", [
        (None, "apple"),
        ("", "apple"),
        ("   ", "apple"),
        ("img/apple.png", None),
        ("img/apple.png", ""),
        ("img/apple.png", 42),
    ])
    def test_rejected_and_count_unchanged(self, image_id, text):
        cat = Category("food")
        cat.add_item("img/food/pear.png", "pear")
        with pytest.raises(InvalidArgumentError):
            cat.add_item(image_id, text)
        assert len(cat) == 1
        assert cat.get_image_locs() == ["img/food/pear.png"]

    def test_invalid_argument_is_a_value_error(self):
        with pytest.raises(ValueError):
            Category("food").add_item("img/a.png", "")


class TestReadPath:

    def test_has_image_never_raises(self):
        cat = Category("food")
        assert not cat.has_image("img/x.png")
        assert not cat.has_image(None)
        assert not cat.has_image(["unhashable"])

    def test_category_name(self):
        assert Category("food").get_category() == "food"

    def test_blank_name_shows_fallback_but_is_kept(self):
        cat = Category("   ")
        assert cat.get_category() == UNNAMED_CATEGORY
        assert cat.name == "   "

    def test_items_in_order(self):
        cat = Category("food")
        cat.add_item("img/a.png", "a")
        cat.add_item("img/b.png", "b")
        assert list(cat.items()) == [("img/a.png", "a"), ("img/b.png", "b")]

    def test_is_a_page(self):
        assert isinstance(Category("food"), AACPage)
