"""Unit tests for ProductService."""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from catalog.schemas.product import ProductPayload
from catalog.services.classification import CategoryClassifier
from catalog.services.product_service import ProductService


@pytest.fixture
def mock_repo() -> MagicMock:
    repo = MagicMock()
    repo.get_by_item_id = AsyncMock(return_value=None)
    repo.upsert = AsyncMock()
    repo.list_uncategorized = AsyncMock(return_value=[])
    repo.assign_category = AsyncMock(return_value=True)
    return repo


@pytest.fixture
def service_factory(mock_session, mock_repo):
    def _build(classifier) -> ProductService:
        with patch(
            "catalog.services.product_service.ProductsRepository",
            return_value=mock_repo,
        ):
            return ProductService(mock_session, classifier)

    return _build


def _product(id: int, item_id: str, product_name: str) -> MagicMock:
    product = MagicMock()
    product.id = id
    product.item_id = item_id
    product.product_name = product_name
    return product


class TestSaveProduct:
    """Tests for ProductService.save_product."""

    @pytest.mark.asyncio
    async def test_explicit_category_skips_classifier(self, service_factory, mock_repo):
        classifier = MagicMock()
        classifier.classify = AsyncMock(return_value=1)
        service = service_factory(classifier)

        result = await service.save_product(
            ProductPayload(item_id="100", product_name="Samsung smartphone", category_id=7)
        )

        classifier.classify.assert_not_awaited()
        assert result.category_id == 7
        assert result.auto_classified is False
        assert mock_repo.upsert.await_args.args[0]["category_id"] == 7

    @pytest.mark.asyncio
    async def test_auto_classifies_when_category_missing(
        self, service_factory, mock_repo, storefront_store
    ):
        service = service_factory(CategoryClassifier(storefront_store))

        result = await service.save_product(
            ProductPayload(item_id="101", product_name="Cat food for kittens")
        )

        assert result.category_id == 4
        assert result.auto_classified is True
        assert result.action == "inserted"
        assert mock_repo.upsert.await_args.args[0]["category_id"] == 4

    @pytest.mark.asyncio
    async def test_unmatched_product_saved_uncategorized(
        self, service_factory, mock_repo, storefront_store
    ):
        service = service_factory(CategoryClassifier(storefront_store))

        result = await service.save_product(
            ProductPayload(item_id="102", product_name="random unrelated text")
        )

        assert result.category_id is None
        assert result.auto_classified is False
        mock_repo.upsert.assert_awaited_once()
        assert mock_repo.upsert.await_args.args[0]["category_id"] is None

    @pytest.mark.asyncio
    async def test_existing_product_reported_as_updated(
        self, service_factory, mock_repo, storefront_store
    ):
        mock_repo.get_by_item_id.return_value = _product(1, "103", "old title")
        service = service_factory(CategoryClassifier(storefront_store))

        result = await service.save_product(
            ProductPayload(item_id="103", product_name="Samsung smartphone case")
        )

        assert result.action == "updated"
        assert result.category_id == 1

    @pytest.mark.asyncio
    async def test_upsert_values_include_listing_fields(self, service_factory, mock_repo):
        classifier = MagicMock()
        classifier.classify = AsyncMock(return_value=None)
        service = service_factory(classifier)

        await service.save_product(
            ProductPayload(
                item_id="104",
                product_name="Desk lamp",
                price=199.0,
                commission_rate=12,
                source="frontend",
            )
        )

        values = mock_repo.upsert.await_args.args[0]
        assert values["item_id"] == "104"
        assert values["price"] == 199.0
        assert values["commission_rate"] == pytest.approx(0.12)
        assert values["source"] == "frontend"


class TestClassifyUnassigned:
    """Tests for ProductService.classify_unassigned."""

    @pytest.mark.asyncio
    async def test_assigns_matching_products(self, service_factory, mock_repo, storefront_store):
        mock_repo.list_uncategorized.return_value = [
            _product(10, "a", "Samsung smartphone case"),
            _product(11, "b", "random unrelated text"),
            _product(12, "c", "Cat food for kittens"),
        ]
        service = service_factory(CategoryClassifier(storefront_store))

        report = await service.classify_unassigned(limit=50)

        assert report.scanned == 3
        assert report.assigned == 2
        assert report.unmatched == 1
        assert report.last_id == 12
        assert report.assignments == {"a": 1, "c": 4}
        mock_repo.list_uncategorized.assert_awaited_once_with(limit=50, after_id=0)
        assert mock_repo.assign_category.await_count == 2

    @pytest.mark.asyncio
    async def test_blank_names_counted_unmatched(
        self, service_factory, mock_repo, storefront_store
    ):
        mock_repo.list_uncategorized.return_value = [_product(20, "x", "   ")]
        service = service_factory(CategoryClassifier(storefront_store))

        report = await service.classify_unassigned()

        assert report.unmatched == 1
        assert report.last_id == 20
        mock_repo.assign_category.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_nothing_to_do(self, service_factory, mock_repo):
        classifier = MagicMock()
        classifier.load_snapshot = AsyncMock()
        service = service_factory(classifier)

        report = await service.classify_unassigned(after_id=99)

        assert report.scanned == 0
        assert report.last_id == 99
        classifier.load_snapshot.assert_not_awaited()
