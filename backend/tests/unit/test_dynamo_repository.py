"""Unit tests for the generic DynamoRepository against the in-memory store."""

import logging

import pytest

from fitit.application.interfaces import StoreError
from fitit.domain.entities import Product
from fitit.domain.exceptions import (
    ConflictError,
    DuplicateEntityError,
    NotFoundError,
    StorageError,
    ValidationError,
    is_operational_error,
)
from fitit.infrastructure.dynamodb.repository import DynamoRepository, utc_timestamp


@pytest.fixture
def repo(store, tables, clock) -> DynamoRepository[Product]:
    return DynamoRepository(store, tables["Product"], Product, clock=clock)


def _hammer(**overrides) -> Product:
    data = {"id": "p1", "name": "Hammer", "category": "General", "price": 19.99}
    data.update(overrides)
    return Product(**data)


# ── create / get ──


@pytest.mark.asyncio
async def test_create_injects_equal_timestamps(repo):
    created = await repo.create(_hammer())

    assert created.created_at is not None
    assert created.created_at == created.updated_at
    assert created.name == "Hammer"


@pytest.mark.asyncio
async def test_create_stores_camel_case_attributes(repo, store):
    await repo.create(_hammer(image_url="https://img/h.png"))

    raw = store.raw("fitit-products", "p1")
    assert raw["imageUrl"] == "https://img/h.png"
    assert "createdAt" in raw and "updatedAt" in raw
    assert "image_url" not in raw


@pytest.mark.asyncio
async def test_round_trip(repo):
    created = await repo.create(_hammer())

    assert await repo.get_by_id("p1") == created


@pytest.mark.asyncio
async def test_create_duplicate_id_fails_and_keeps_first_payload(repo, store):
    first = await repo.create(_hammer())

    with pytest.raises(DuplicateEntityError) as exc_info:
        await repo.create(_hammer(name="Sledgehammer", price=99.0))

    assert isinstance(exc_info.value, StorageError)
    assert exc_info.value.resource_id == "p1"
    assert await repo.get_by_id("p1") == first
    assert store.raw("fitit-products", "p1")["name"] == "Hammer"


@pytest.mark.asyncio
async def test_create_other_failure_is_non_operational_storage_error(repo, store):
    store.fail_on("put_item")

    with pytest.raises(StorageError) as exc_info:
        await repo.create(_hammer())

    assert not isinstance(exc_info.value, DuplicateEntityError)
    assert not is_operational_error(exc_info.value)
    assert isinstance(exc_info.value.__cause__, StoreError)


@pytest.mark.asyncio
async def test_get_by_id_missing_returns_none(repo):
    assert await repo.get_by_id("missing") is None


@pytest.mark.asyncio
async def test_get_by_id_or_throw_missing_raises_not_found(repo):
    with pytest.raises(NotFoundError) as exc_info:
        await repo.get_by_id_or_throw("missing")

    assert exc_info.value.resource == "Product"
    assert exc_info.value.resource_id == "missing"
    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_get_by_id_store_failure_raises_storage_error(repo, store, caplog):
    store.fail_on("get_item")

    with caplog.at_level(logging.ERROR), pytest.raises(StorageError):
        await repo.get_by_id("p1")

    assert "Failed to get Product" in caplog.text
    assert "id=p1" in caplog.text


# ── get_all ──


@pytest.mark.asyncio
async def test_get_all_returns_every_entity(repo):
    for i in range(3):
        await repo.create(_hammer(id=f"p{i}"))

    assert {p.id for p in await repo.get_all()} == {"p0", "p1", "p2"}


@pytest.mark.asyncio
async def test_get_all_respects_limit(repo):
    for i in range(5):
        await repo.create(_hammer(id=f"p{i}"))

    assert len(await repo.get_all(limit=2)) == 2


@pytest.mark.asyncio
async def test_get_all_is_a_single_unpaginated_scan(repo, store):
    """Listing issues exactly one scan; larger tables are not paged through."""
    for i in range(3):
        await repo.create(_hammer(id=f"p{i}"))
    store.calls.clear()

    await repo.get_all()

    assert store.calls == ["scan"]


@pytest.mark.asyncio
async def test_get_all_store_failure(repo, store):
    store.fail_on("scan")

    with pytest.raises(StorageError):
        await repo.get_all()


# ── update ──


@pytest.mark.asyncio
async def test_price_update_scenario(repo):
    created = await repo.create(_hammer())

    updated = await repo.update("p1", {"price": 24.99})

    assert updated.price == 24.99
    assert updated.name == "Hammer"
    assert updated.category == "General"
    assert updated.updated_at > updated.created_at
    assert updated.created_at == created.created_at


@pytest.mark.asyncio
async def test_update_never_changes_id(repo):
    await repo.create(_hammer())

    updated = await repo.update("p1", {"id": "other", "name": "x"})

    assert updated.id == "p1"
    assert updated.name == "x"
    assert await repo.get_by_id("other") is None


@pytest.mark.asyncio
async def test_update_ignores_timestamp_fields(repo):
    created = await repo.create(_hammer())

    updated = await repo.update("p1", {"created_at": "1999-01-01T00:00:00Z", "name": "Mallet"})

    assert updated.created_at == created.created_at
    assert updated.name == "Mallet"


@pytest.mark.asyncio
async def test_update_accepts_stored_attribute_names(repo):
    await repo.create(_hammer())

    updated = await repo.update("p1", {"inStock": False, "image_url": "https://img/x.png"})

    assert updated.in_stock is False
    assert updated.image_url == "https://img/x.png"


@pytest.mark.asyncio
@pytest.mark.parametrize("changes", [{}, {"id": "ignored"}, {"name": None}])
async def test_empty_update_short_circuits_without_write(repo, store, changes):
    created = await repo.create(_hammer())
    store.calls.clear()

    result = await repo.update("p1", changes)

    assert result == created
    assert store.writes == []


@pytest.mark.asyncio
async def test_empty_update_on_missing_id_raises_not_found(repo):
    with pytest.raises(NotFoundError):
        await repo.update("missing", {})


@pytest.mark.asyncio
async def test_update_missing_id_raises_not_found_without_creating(repo, store):
    with pytest.raises(NotFoundError):
        await repo.update("ghost", {"name": "x"})

    assert store.raw("fitit-products", "ghost") is None


@pytest.mark.asyncio
async def test_timestamps_are_monotonic_across_updates(repo):
    created = await repo.create(_hammer())
    first = await repo.update("p1", {"price": 1.0})
    second = await repo.update("p1", {"price": 2.0})

    assert created.updated_at <= first.updated_at <= second.updated_at
    assert created.created_at == first.created_at == second.created_at


@pytest.mark.asyncio
async def test_update_store_failure(repo, store):
    await repo.create(_hammer())
    store.fail_on("update_item")

    with pytest.raises(StorageError) as exc_info:
        await repo.update("p1", {"name": "x"})

    assert not isinstance(exc_info.value, NotFoundError)


# ── delete ──


@pytest.mark.asyncio
async def test_delete_removes_entity(repo, caplog):
    await repo.create(_hammer())

    with caplog.at_level(logging.INFO):
        await repo.delete("p1")

    assert await repo.get_by_id("p1") is None
    assert "Deleted Product id=p1" in caplog.text


@pytest.mark.asyncio
async def test_delete_missing_id_raises_not_found(repo):
    with pytest.raises(NotFoundError):
        await repo.delete("missing")


@pytest.mark.asyncio
async def test_delete_store_failure(repo, store):
    store.fail_on("delete_item")

    with pytest.raises(StorageError):
        await repo.delete("p1")


# ── secondary index / filters ──


@pytest.mark.asyncio
async def test_query_by_index_returns_exact_matches(repo):
    e1 = await repo.create(_hammer(id="e1", category="Electrical"))
    await repo.create(_hammer(id="e2", category="Plumbing"))

    result = await repo.query_by_index("category-index", "category", "Electrical")

    assert result == [e1]


@pytest.mark.asyncio
async def test_query_by_index_no_matches_is_empty(repo):
    assert await repo.query_by_index("category-index", "category", "Nope") == []


@pytest.mark.asyncio
async def test_query_by_unknown_index_raises_storage_error(repo):
    with pytest.raises(StorageError):
        await repo.query_by_index("missing-index", "category", "General")


@pytest.mark.asyncio
async def test_scan_with_filter(repo):
    await repo.create(_hammer(id="a", in_stock=True))
    await repo.create(_hammer(id="b", in_stock=False))

    result = await repo._scan_with_filter("#f0 = :v0", {"#f0": "inStock"}, {":v0": False})

    assert [p.id for p in result] == ["b"]


@pytest.mark.asyncio
async def test_scan_with_filter_store_failure(repo, store):
    store.fail_on("scan")

    with pytest.raises(StorageError):
        await repo._scan_with_filter("#f0 = :v0", {"#f0": "name"}, {":v0": "x"})


def test_utc_timestamp_is_iso_8601_utc():
    stamp = utc_timestamp()

    assert stamp.endswith("Z")
    assert "T" in stamp


# ── validation and expected values ──


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "changes",
    [{"price": -5}, {"rating": 7}, {"price": "cheap"}, {"in_stock": "sometimes"}],
)
async def test_invalid_update_is_rejected_without_write(repo, store, changes):
    created = await repo.create(_hammer())
    store.calls.clear()

    with pytest.raises(ValidationError) as exc_info:
        await repo.update("p1", changes)

    assert exc_info.value.status_code == 400
    assert store.writes == []
    assert await repo.get_by_id("p1") == created
    assert len(await repo.get_all()) == 1


@pytest.mark.asyncio
async def test_update_with_unknown_field_is_rejected(repo, store):
    await repo.create(_hammer())
    store.calls.clear()

    with pytest.raises(ValidationError):
        await repo.update("p1", {"colour": "red"})

    assert store.writes == []


@pytest.mark.asyncio
async def test_update_coerces_values_to_stored_form(repo, store):
    await repo.create(_hammer())

    await repo.update("p1", {"price": "24.5"})

    assert store.raw("fitit-products", "p1")["price"] == 24.5


@pytest.mark.asyncio
async def test_update_with_matching_expected_values(repo):
    await repo.create(_hammer())

    updated = await repo.update("p1", {"price": 30.0}, expected={"name": "Hammer"})

    assert updated.price == 30.0


@pytest.mark.asyncio
async def test_update_with_stale_expected_values_conflicts(repo, store):
    await repo.create(_hammer())
    await repo.update("p1", {"name": "Mallet"})

    with pytest.raises(ConflictError):
        await repo.update("p1", {"price": 30.0}, expected={"name": "Hammer"})

    assert store.raw("fitit-products", "p1")["price"] == 19.99


@pytest.mark.asyncio
async def test_update_with_expected_values_on_missing_id_is_not_found(repo):
    with pytest.raises(NotFoundError):
        await repo.update("ghost", {"price": 30.0}, expected={"name": "Hammer"})
