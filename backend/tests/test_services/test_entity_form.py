"""
Unit tests for EntityForm

The API client is an AsyncMock; navigation goes to the RecordingRouter
from conftest.
"""
import asyncio
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from store_admin.connectors.resource_api import (
    ApiConflictError,
    ApiResponseError,
    ApiTransportError,
)
from store_admin.domain.catalog import Category, Size
from store_admin.domain.billboard import Billboard
from store_admin.domain.product import Image, Product
from store_admin.services.entity_form import NEW_ENTITY_ID, EntityForm, FormModeError
from store_admin.services.form_mode import Create, Edit, mode_from_initial_data
from store_admin.services.resources import CATEGORIES, PRODUCTS, SIZES
from store_admin.services.results import ResultStatus


@pytest.fixture
def api():
    api = AsyncMock()
    api.create.return_value = {"id": "new-id"}
    api.update.return_value = {"id": "cat-1"}
    api.delete.return_value = {"id": "cat-1"}
    return api


@pytest.fixture
def billboards(created_at):
    return [
        Billboard(id="bb-1", store_id="store-1", label="Summer Sale", image_url="https://x/1.png", created_at=created_at),
        Billboard(id="bb-2", store_id="store-1", label="Winter Sale", image_url="https://x/2.png", created_at=created_at),
    ]


@pytest.fixture
def category(created_at):
    return Category(id="cat-1", store_id="store-1", billboard_id="bb-1", name="Vitamins", created_at=created_at)


@pytest.fixture
def product(created_at):
    return Product(
        id="prod-1",
        store_id="store-1",
        category_id="cat-1",
        size_id="size-1",
        color_id="color-1",
        name="Vitamin C",
        price=Decimal("15000.00"),
        is_featured=True,
        images=[Image(id="img-1", product_id="prod-1", url="https://x/vitc.png", created_at=created_at)],
        created_at=created_at,
    )


def category_form(context, api, router, record=None, billboards=()):
    return EntityForm(
        CATEGORIES,
        mode_from_initial_data(record),
        context,
        api,
        router,
        references={"billboards": list(billboards)},
    )


class TestFormMode:

    def test_null_initial_data_is_create(self):
        assert isinstance(mode_from_initial_data(None), Create)

    def test_record_is_edit(self, category):
        mode = mode_from_initial_data(category)
        assert isinstance(mode, Edit)
        assert mode.entity_id == "cat-1"
        assert mode.is_edit is True


class TestLabelsAndInitialValues:

    def test_create_mode_labels_and_blank_values(self, context, api, router):
        form = category_form(context, api, router)

        assert form.labels.title == "Create category"
        assert form.labels.action == "Create"
        assert form.labels.toast_message == "Category created."
        assert form.values == {"name": "", "billboardId": ""}
        assert form.show_delete_button is False
        assert form.entity_id is None

    def test_edit_mode_labels_and_prepopulated_values(self, context, api, router, category):
        form = category_form(context, api, router, record=category)

        assert form.labels.title == "Edit category"
        assert form.labels.action == "Save changes"
        assert form.labels.toast_message == "Category updated."
        assert form.values == {"name": "Vitamins", "billboardId": "bb-1"}
        assert form.show_delete_button is True
        assert form.entity_id == "cat-1"

    def test_product_edit_values(self, context, api, router, product):
        form = EntityForm(PRODUCTS, Edit(product), context, api, router)

        assert form.values["price"] == Decimal("15000.00")
        assert form.values["images"] == [{"url": "https://x/vitc.png"}]
        assert form.values["isFeatured"] is True
        assert form.values["isArchived"] is False

    def test_reference_options(self, context, api, router, billboards):
        form = category_form(context, api, router, billboards=billboards)

        assert form.options("billboardId") == [("bb-1", "Summer Sale"), ("bb-2", "Winter Sale")]
        with pytest.raises(KeyError):
            form.options("name")


class TestValidation:

    @pytest.mark.asyncio
    async def test_empty_required_fields_block_submission(self, context, api, router):
        form = category_form(context, api, router)

        result = await form.submit()

        assert result.status == ResultStatus.INVALID
        assert set(result.field_errors) == {"name", "billboardId"}
        assert result.message is None
        api.create.assert_not_called()
        api.update.assert_not_called()
        assert router.pushes == []
        assert form.notifications == []

    @pytest.mark.asyncio
    async def test_product_price_must_be_positive_number(self, context, api, router):
        form = EntityForm(PRODUCTS, Create(), context, api, router)
        values = {"name": "Vitamin C", "categoryId": "c", "sizeId": "s", "colorId": "k"}

        zero = await form.submit({**values, "price": 0})
        text = await form.submit({**values, "price": "abc"})

        assert zero.status == ResultStatus.INVALID
        assert "price" in zero.field_errors
        assert text.status == ResultStatus.INVALID
        assert set(text.field_errors) == {"price"}
        api.create.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("price", ["0.001", "12.345", "1234567890123"])
    async def test_product_price_must_fit_stored_precision(self, context, api, router, price):
        form = EntityForm(PRODUCTS, Create(), context, api, router)

        result = await form.submit({
            "name": "Vitamin C", "price": price, "categoryId": "c", "sizeId": "s", "colorId": "k",
        })

        assert result.status == ResultStatus.INVALID
        assert set(result.field_errors) == {"price"}
        api.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_product_price_coerced_from_text(self, context, api, router):
        form = EntityForm(PRODUCTS, Create(), context, api, router)

        result = await form.submit({
            "name": "Vitamin C", "price": "12500.5", "categoryId": "c", "sizeId": "s", "colorId": "k",
        })

        assert result.ok
        body = api.create.await_args.args[2]
        assert body["price"] == 12500.5
        assert body["images"] == []
        assert body["isFeatured"] is False

    @pytest.mark.asyncio
    async def test_field_errors_cleared_after_valid_submit(self, context, api, router):
        form = category_form(context, api, router)
        await form.submit()
        assert form.field_errors

        await form.submit({"name": "Vitamins", "billboardId": "bb-1"})

        assert form.field_errors == {}


class TestSubmit:

    @pytest.mark.asyncio
    async def test_create_posts_and_navigates_once(self, context, api, router):
        form = category_form(context, api, router)
        form.set_value("name", "Vitamins")
        form.set_value("billboardId", "bb-1")

        result = await form.submit()

        api.create.assert_awaited_once_with("store-1", "categories", {"name": "Vitamins", "billboardId": "bb-1"})
        api.update.assert_not_called()
        assert result.ok
        assert result.message == "Category created."
        assert result.navigated_to == "/store-1/categories"
        assert router.refreshes == 1
        assert router.pushes == ["/store-1/categories"]
        assert form.loading is False
        assert form.notifications == [result]

    @pytest.mark.asyncio
    async def test_edit_patches_existing_record(self, context, api, router, category):
        form = category_form(context, api, router, record=category)

        result = await form.submit({"name": "Herbal"})

        api.update.assert_awaited_once_with(
            "store-1", "categories", "cat-1", {"name": "Herbal", "billboardId": "bb-1"}
        )
        api.create.assert_not_called()
        assert result.message == "Category updated."
        assert router.pushes == ["/store-1/categories"]

    @pytest.mark.asyncio
    async def test_failure_keeps_values_and_does_not_navigate(self, context, api, router):
        api.create.side_effect = ApiTransportError("connection refused")
        form = category_form(context, api, router)

        result = await form.submit({"name": "Vitamins", "billboardId": "bb-1"})

        assert result.status == ResultStatus.FAILED
        assert result.is_error
        assert result.message == "Something went wrong."
        assert router.pushes == []
        assert router.refreshes == 0
        assert form.loading is False
        assert form.values == {"name": "Vitamins", "billboardId": "bb-1"}

    @pytest.mark.asyncio
    async def test_server_error_is_generic_failure(self, context, api, router):
        api.create.side_effect = ApiResponseError(500, "boom")
        form = EntityForm(SIZES, Create(), context, api, router)

        result = await form.submit({"name": "Small", "value": "S"})

        assert result.status == ResultStatus.FAILED
        assert form.loading is False

    @pytest.mark.asyncio
    async def test_no_double_submit_while_pending(self, context, api, router):
        release = asyncio.Event()

        async def slow_create(*args):
            await release.wait()
            return {"id": "new-id"}

        api.create.side_effect = slow_create
        form = category_form(context, api, router)
        values = {"name": "Vitamins", "billboardId": "bb-1"}

        first = asyncio.create_task(form.submit(values))
        await asyncio.sleep(0)

        assert form.loading is True
        assert form.disabled is True
        second = await form.submit(values)
        assert second.status == ResultStatus.IGNORED
        assert form.set_value("name", "Other") is False

        release.set()
        first_result = await first

        assert first_result.ok
        assert api.create.await_count == 1
        assert router.pushes == ["/store-1/categories"]
        assert form.loading is False
        assert form.values["name"] == "Vitamins"

    @pytest.mark.asyncio
    async def test_submit_ignored_while_delete_confirmation_open(self, context, api, router, category):
        form = category_form(context, api, router, record=category)
        form.request_delete()

        result = await form.submit({"name": "Herbal"})

        assert result.status == ResultStatus.IGNORED
        api.update.assert_not_called()

        await form.modal.confirm()

        api.delete.assert_awaited_once()
        assert router.pushes == ["/store-1/categories"]

    @pytest.mark.asyncio
    async def test_delete_confirm_ignored_while_save_in_flight(self, context, api, router, category):
        release = asyncio.Event()

        async def slow_update(*args):
            await release.wait()
            return {"id": "cat-1"}

        api.update.side_effect = slow_update
        form = category_form(context, api, router, record=category)

        saving = asyncio.create_task(form.submit({"name": "Herbal"}))
        await asyncio.sleep(0)
        form.modal.open()

        deleted = await form.modal.confirm()

        assert deleted.status == ResultStatus.IGNORED
        api.delete.assert_not_called()

        release.set()
        saved = await saving

        assert saved.ok
        assert api.update.await_count == 1
        assert router.pushes == ["/store-1/categories"]
        assert form.loading is False


class TestDelete:

    def test_delete_not_available_in_create_mode(self, context, api, router):
        form = category_form(context, api, router)

        with pytest.raises(FormModeError):
            form.request_delete()

        assert form.modal.is_open is False

    @pytest.mark.asyncio
    async def test_delete_requires_confirmation(self, context, api, router, category):
        form = category_form(context, api, router, record=category)

        form.request_delete()
        assert form.modal.is_open is True
        api.delete.assert_not_called()

        form.modal.close()
        assert await form.modal.confirm() is None
        api.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_confirmed_delete_navigates_to_list(self, context, api, router, category):
        form = category_form(context, api, router, record=category)

        form.request_delete()
        result = await form.modal.confirm()

        api.delete.assert_awaited_once_with("store-1", "categories", "cat-1")
        assert result.ok
        assert result.message == "Category deleted."
        assert router.pushes == ["/store-1/categories"]
        assert form.modal.is_open is False
        assert form.loading is False

    @pytest.mark.asyncio
    async def test_conflict_shows_dependents_message(self, context, api, router, category):
        api.delete.side_effect = ApiConflictError(409, "Category cat-1 is still used by 3 products")
        form = category_form(context, api, router, record=category)

        form.request_delete()
        result = await form.modal.confirm()

        assert result.status == ResultStatus.CONFLICT
        assert result.message == "Make sure you removed all products using this category first."
        assert router.pushes == []
        assert form.modal.is_open is False
        assert form.loading is False

    @pytest.mark.asyncio
    async def test_transport_failure_on_delete_is_generic(self, context, api, router, category):
        api.delete.side_effect = ApiTransportError("timeout")
        form = category_form(context, api, router, record=category)

        form.request_delete()
        result = await form.modal.confirm()

        assert result.status == ResultStatus.FAILED
        assert result.message == "Something went wrong."
        assert form.modal.is_open is False


class TestLoad:

    @pytest.mark.asyncio
    async def test_new_page_opens_create_form_with_references(self, context, api, router, created_at):
        api.list.return_value = [
            {"id": "bb-1", "storeId": "store-1", "label": "Summer Sale", "imageUrl": "x", "createdAt": created_at.isoformat()},
        ]

        form = await EntityForm.load(CATEGORIES, context.for_entity(NEW_ENTITY_ID), api, router)

        assert isinstance(form.mode, Create)
        api.get.assert_not_called()
        api.list.assert_awaited_once_with("store-1", "billboards")
        assert form.options("billboardId") == [("bb-1", "Summer Sale")]

    @pytest.mark.asyncio
    async def test_existing_record_opens_edit_form(self, context, api, router, category):
        api.get.return_value = category.to_dict()
        api.list.return_value = []

        form = await EntityForm.load(CATEGORIES, context.for_entity("cat-1"), api, router)

        assert isinstance(form.mode, Edit)
        assert form.values == {"name": "Vitamins", "billboardId": "bb-1"}

    @pytest.mark.asyncio
    async def test_unknown_record_opens_create_form(self, context, api, router):
        api.get.side_effect = ApiResponseError(404, "Size x not found")

        form = await EntityForm.load(SIZES, context.for_entity("x"), api, router)

        assert isinstance(form.mode, Create)
        api.list.assert_not_called()

    @pytest.mark.asyncio
    async def test_product_form_loads_each_reference_list(self, context, api, router):
        api.list.return_value = []

        await EntityForm.load(PRODUCTS, context.for_entity(NEW_ENTITY_ID), api, router)

        sources = [call.args[1] for call in api.list.await_args_list]
        assert sources == ["categories", "sizes", "colors"]


class TestImages:

    def test_add_and_remove_image(self, context, api, router):
        form = EntityForm(PRODUCTS, Create(), context, api, router)

        form.add_image("https://x/a.png")
        form.add_image("https://x/b.png")
        form.remove_image("https://x/a.png")

        assert form.values["images"] == [{"url": "https://x/b.png"}]
