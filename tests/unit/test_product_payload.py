"""Unit tests for product payload validation."""
import pytest
from pydantic import ValidationError

from catalog.schemas.product import ProductPayload


class TestProductPayload:
    """Tests for ProductPayload."""

    def test_minimal_payload_defaults(self):
        payload = ProductPayload(item_id="123", product_name="Desk lamp")

        assert payload.price == 0.0
        assert payload.category_id is None
        assert payload.source == "backend"
        assert payload.campaign_active is False

    def test_item_id_number_and_whitespace(self):
        payload = ProductPayload(item_id=987654321, product_name="  Desk lamp  ")

        assert payload.item_id == "987654321"
        assert payload.product_name == "Desk lamp"

    @pytest.mark.parametrize("field", ["item_id", "product_name"])
    def test_required_text_must_not_be_blank(self, field):
        data = {"item_id": "1", "product_name": "Desk lamp", field: "   "}

        with pytest.raises(ValidationError):
            ProductPayload(**data)

    def test_blank_numbers_become_zero(self):
        payload = ProductPayload(
            item_id="1",
            product_name="Desk lamp",
            price="",
            sales_count=None,
            rating_star=" ",
        )

        assert payload.price == 0
        assert payload.sales_count == 0
        assert payload.rating_star == 0

    def test_blank_price_bounds_become_none(self):
        payload = ProductPayload(item_id="1", product_name="Desk lamp", price_min="", price_max="")

        assert payload.price_min is None
        assert payload.price_max is None

    @pytest.mark.parametrize("value", [0, "", "0", None])
    def test_unset_category_values(self, value):
        payload = ProductPayload(item_id="1", product_name="Desk lamp", category_id=value)

        assert payload.category_id is None

    def test_category_from_string(self):
        payload = ProductPayload(item_id="1", product_name="Desk lamp", category_id="5")

        assert payload.category_id == 5

    def test_frontend_percentage_commission_converted(self):
        payload = ProductPayload(
            item_id="1", product_name="Desk lamp", commission_rate=15, source="frontend"
        )

        assert payload.commission_rate == pytest.approx(0.15)

    def test_frontend_fraction_commission_kept(self):
        payload = ProductPayload(
            item_id="1", product_name="Desk lamp", commission_rate=0.15, source="frontend"
        )

        assert payload.commission_rate == pytest.approx(0.15)

    def test_backend_commission_untouched(self):
        payload = ProductPayload(item_id="1", product_name="Desk lamp", commission_rate=15)

        assert payload.commission_rate == 15

    def test_negative_sales_rejected(self):
        with pytest.raises(ValidationError):
            ProductPayload(item_id="1", product_name="Desk lamp", sales_count=-1)

    def test_unknown_source_rejected(self):
        with pytest.raises(ValidationError):
            ProductPayload(item_id="1", product_name="Desk lamp", source="api")
