"""Unit tests for the ProductService and ServiceProfileService."""

import pytest

from fitit.application.schemas import (
    ProductCreate,
    ProductUpdate,
    ServiceProfileCreate,
    ServiceProfileUpdate,
)
from fitit.application.services import ProductService, ServiceProfileService
from fitit.domain.exceptions import NotFoundError, ValidationError
from fitit.infrastructure.dynamodb.repositories import (
    DynamoProductRepository,
    DynamoServiceProfileRepository,
)


@pytest.fixture
def products(store, tables, clock) -> ProductService:
    return ProductService(DynamoProductRepository(store, tables["Product"], clock=clock))


@pytest.fixture
def profiles(store, tables, clock) -> ServiceProfileService:
    return ServiceProfileService(DynamoServiceProfileRepository(store, tables["ServiceProfile"], clock=clock))


@pytest.mark.asyncio
async def test_create_product_assigns_id_and_timestamps(products):
    product = await products.create_product(ProductCreate(name="Claw Hammer", category="General", price=19.99))

    assert product.id
    assert product.created_at == product.updated_at
    assert await products.get_product(product.id) == product


@pytest.mark.asyncio
async def test_update_product_applies_only_set_fields(products):
    product = await products.create_product(
        ProductCreate(name="Claw Hammer", category="General", price=19.99, description="Steel head")
    )

    updated = await products.update_product(product.id, ProductUpdate(price=24.99))

    assert updated.price == 24.99
    assert updated.description == "Steel head"


@pytest.mark.asyncio
async def test_update_missing_product_raises_not_found(products):
    with pytest.raises(NotFoundError):
        await products.update_product("missing", ProductUpdate(price=1.0))


@pytest.mark.asyncio
async def test_blank_search_is_rejected(products):
    with pytest.raises(ValidationError):
        await products.search_products("   ")


@pytest.mark.asyncio
async def test_search_and_category(products):
    await products.create_product(ProductCreate(name="Voltage Tester", category="Electrical", price=9.5))
    await products.create_product(ProductCreate(name="Plunger", category="Plumbing", price=7.0))

    assert [p.name for p in await products.search_products(" Voltage ")] == ["Voltage Tester"]
    assert [p.name for p in await products.list_by_category("Plumbing")] == ["Plunger"]


@pytest.mark.asyncio
async def test_delete_product(products):
    product = await products.create_product(ProductCreate(name="Plunger", category="Plumbing", price=7.0))

    await products.delete_product(product.id)

    with pytest.raises(NotFoundError):
        await products.get_product(product.id)


@pytest.mark.asyncio
async def test_profile_availability_toggle(profiles):
    profile = await profiles.create_profile(
        ServiceProfileCreate(name="Dana Electric", profession="Electrician", hourly_rate=65.0)
    )

    await profiles.set_availability(profile.id, False)

    assert await profiles.list_available() == []
    assert (await profiles.get_profile(profile.id)).available is False


@pytest.mark.asyncio
async def test_profile_update_and_profession_listing(profiles):
    profile = await profiles.create_profile(
        ServiceProfileCreate(name="Dana Electric", profession="Electrician", hourly_rate=65.0)
    )

    updated = await profiles.update_profile(profile.id, ServiceProfileUpdate(hourly_rate=70.0, location="Leeds"))

    assert updated.hourly_rate == 70.0
    assert updated.location == "Leeds"
    assert [p.id for p in await profiles.list_by_profession("Electrician")] == [profile.id]
