import pytest
from datetime import date
from pydantic import ValidationError

from modules.wardrobe.models import DashboardStats, Item, NewItem, Outfit


class TestItem:
    def test_serializes_camel_case(self):
        item = Item(
            id="i1",
            user_id="u1",
            name="Tee",
            image_url="https://img/tee.png",
            category="Tops",
            sub_category="T-shirt",
        )
        data = item.model_dump(by_alias=True)
        assert data["userId"] == "u1"
        assert data["imageUrl"] == "https://img/tee.png"
        assert data["subCategory"] == "T-shirt"
        assert data["isClean"] is True
        assert data["lastWorn"] is None

    @pytest.mark.parametrize("warmth", [0, 11])
    def test_warmth_bounds(self, warmth):
        with pytest.raises(ValidationError):
            NewItem(user_id="u1", name="Tee", image_url="x", category="Tops", warmth=warmth)


class TestOutfit:
    def test_shape(self):
        outfit = Outfit(id="o1", user_id="u1", date=date(2026, 3, 1), item_ids=["b", "a"], note="brunch")
        assert outfit.worn_on == date(2026, 3, 1)
        assert outfit.item_ids == ["b", "a"]
        assert outfit.model_dump(by_alias=True)["date"] == date(2026, 3, 1)


class TestDashboardStats:
    def test_serializes_camel_case(self):
        stats = DashboardStats(name="Ada Lovelace", total_items=0, dirty_items=0, is_new_user=True)
        assert stats.model_dump(by_alias=True) == {
            "name": "Ada Lovelace",
            "totalItems": 0,
            "dirtyItems": 0,
            "isNewUser": True,
        }
