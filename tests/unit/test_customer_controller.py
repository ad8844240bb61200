"""Unit tests for the StandardCustomerController."""

import logging
from datetime import date, datetime, timezone

import pytest

from storefront.application.context import RequestContext
from storefront.application.controllers import StandardCustomerController
from storefront.application.criteria import Condition, SearchCriteria
from storefront.application.schemas import CustomerValues
from storefront.domain.entities import (
    Customer,
    CustomerAddress,
    CustomerListItem,
    CustomerListType,
    CustomerStatus,
)
from storefront.domain.exceptions import (
    EntityNotFoundError,
    PermissionDeniedError,
    ValidationFailedError,
)
from tests.unit.fakes.in_memory_managers import FakeManagers


@pytest.fixture
def managers() -> FakeManagers:
    managers = FakeManagers()
    managers.customers.add(Customer(id="1", code="me@example.com", lastname="Me"))
    managers.customers.add(Customer(id="2", code="other@example.com", lastname="Other"))
    managers.addresses.add(CustomerAddress(id="a1", parent_id="1", city="Hamburg"))
    managers.addresses.add(CustomerAddress(id="a2", parent_id="2", city="Berlin"))
    managers.list_types.add(CustomerListType(id="t1", code="favorite", domain="product"))
    managers.list_types.add(CustomerListType(id="t2", code="watch", domain="product"))
    managers.lists.add(
        CustomerListItem(id="l1", parent_id="1", domain="product", type_id="t1", ref_id="p1")
    )
    managers.lists.add(
        CustomerListItem(id="l2", parent_id="2", domain="product", type_id="t1", ref_id="p2")
    )
    return managers


@pytest.fixture
def controller(managers: FakeManagers) -> StandardCustomerController:
    return StandardCustomerController(RequestContext(user_id="1"), managers.registry)


# ── Ownership ────────────────────────────────────────────────────────


def test_check_user_accepts_own_id(controller: StandardCustomerController):
    controller._check_user("1")


@pytest.mark.parametrize("item_id", ["2", "", None, "10"])
def test_check_user_rejects_other_ids(controller: StandardCustomerController, item_id):
    with pytest.raises(PermissionDeniedError) as exc_info:
        controller._check_user(item_id)
    assert exc_info.value.entity_id == item_id
    assert f'ID "{item_id}"' in str(exc_info.value)


# ── Customer ─────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_add_item_ignores_supplied_id(
    controller: StandardCustomerController, managers: FakeManagers
):
    item = await controller.add_item({"id": "99", "code": "new@example.com", "lastname": "New"})

    assert item.id is not None
    assert item.id != "99"
    assert item.code == "new@example.com"
    assert (await managers.customers.get_item(item.id)).lastname == "New"


@pytest.mark.asyncio
async def test_changes_are_not_logged_without_audit_decorator(
    controller: StandardCustomerController, caplog
):
    with caplog.at_level(logging.INFO, logger="storefront.application.controllers"):
        item = await controller.add_item({"code": "quiet@example.com"})
        await controller.delete_item("1")

    assert item.id is not None
    assert caplog.records == []


def test_create_item_forces_enabled_status_and_unset_id(
    controller: StandardCustomerController, managers: FakeManagers
):
    item = controller.create_item({"id": "5", "status": 0, "firstname": "Jane"})

    assert item.id is None
    assert item.status == CustomerStatus.ENABLED
    assert item.firstname == "Jane"
    assert managers.customers.calls == []


def test_create_item_without_values(controller: StandardCustomerController):
    item = controller.create_item()
    assert item.id is None
    assert item.status == CustomerStatus.ENABLED


@pytest.mark.asyncio
async def test_get_item_without_id_returns_current_customer(
    controller: StandardCustomerController, managers: FakeManagers
):
    item = await controller.get_item(domains=["customer/address"])

    assert item.id == "1"
    assert managers.customers.calls == [("get_item", "1", ("customer/address",), True)]


@pytest.mark.asyncio
async def test_get_item_own_id(controller: StandardCustomerController):
    item = await controller.get_item("1")
    assert item.code == "me@example.com"


@pytest.mark.asyncio
async def test_get_item_other_id_is_denied_before_loading(
    controller: StandardCustomerController, managers: FakeManagers
):
    with pytest.raises(PermissionDeniedError):
        await controller.get_item("2")
    assert managers.customers.calls == []


@pytest.mark.asyncio
async def test_find_item_does_not_check_ownership(controller: StandardCustomerController):
    item = await controller.find_item("other@example.com", ["product"])
    assert item.id == "2"


@pytest.mark.asyncio
async def test_find_item_unknown_code_propagates_not_found(controller: StandardCustomerController):
    with pytest.raises(EntityNotFoundError):
        await controller.find_item("nobody@example.com")


@pytest.mark.asyncio
async def test_edit_item_ignores_supplied_id(
    controller: StandardCustomerController, managers: FakeManagers
):
    item = await controller.edit_item("1", {"id": "2", "firstname": "Jo"})

    assert item.id == "1"
    assert item.firstname == "Jo"
    assert item.lastname == "Me"
    assert (await managers.customers.get_item("2")).firstname == ""


@pytest.mark.asyncio
async def test_edit_item_accepts_schema_values(controller: StandardCustomerController):
    item = await controller.edit_item("1", CustomerValues(city="Hamburg"))
    assert item.city == "Hamburg"
    assert item.code == "me@example.com"


@pytest.mark.asyncio
async def test_edit_item_clears_fields_set_to_none(
    controller: StandardCustomerController, managers: FakeManagers
):
    managers.customers.add(
        Customer(
            id="1",
            code="me@example.com",
            lastname="Me",
            birthday=date(1990, 1, 1),
            country_id="DE",
        )
    )

    item = await controller.edit_item(
        "1", {"birthday": None, "country_id": None, "lastname": None}
    )

    assert item.birthday is None
    assert item.country_id is None
    assert item.lastname == ""
    assert item.code == "me@example.com"


@pytest.mark.asyncio
async def test_edit_item_leaves_unset_fields_alone(controller: StandardCustomerController):
    item = await controller.edit_item("1", CustomerValues(city="Kiel"))
    assert item.lastname == "Me"
    assert item.status == CustomerStatus.ENABLED


@pytest.mark.asyncio
async def test_edit_item_other_id_is_denied(
    controller: StandardCustomerController, managers: FakeManagers
):
    with pytest.raises(PermissionDeniedError):
        await controller.edit_item("2", {"firstname": "Mallory"})
    assert managers.customers.calls == []


@pytest.mark.asyncio
async def test_delete_item(controller: StandardCustomerController, managers: FakeManagers):
    await controller.delete_item("1")
    assert await managers.customers.get_item("1", required=False) is None


@pytest.mark.asyncio
async def test_delete_item_other_id_is_denied(
    controller: StandardCustomerController, managers: FakeManagers
):
    with pytest.raises(PermissionDeniedError):
        await controller.delete_item("2")
    assert await managers.customers.get_item("2", required=False) is not None


@pytest.mark.asyncio
async def test_save_item_checks_ownership_of_existing_items(
    controller: StandardCustomerController,
):
    with pytest.raises(PermissionDeniedError):
        await controller.save_item(Customer(id="2", code="other@example.com"))


@pytest.mark.asyncio
async def test_save_item_stores_created_item(controller: StandardCustomerController):
    item = controller.create_item({"code": "fresh@example.com"})
    saved = await controller.save_item(item)
    assert saved.id is not None


# ── Addresses ────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_add_address_item_forces_parent_id(controller: StandardCustomerController):
    item = await controller.add_address_item(
        {"id": "a2", "parent_id": "2", "city": "Paris", "country_id": "FR"}
    )

    assert item.parent_id == "1"
    assert item.id not in (None, "a2")
    assert item.city == "Paris"


def test_create_address_item_is_not_stored(
    controller: StandardCustomerController, managers: FakeManagers
):
    item = controller.create_address_item({"parent_id": "2", "postal": "20095"})

    assert item.id is None
    assert item.parent_id == "1"
    assert item.postal == "20095"
    assert managers.addresses.calls == []


@pytest.mark.asyncio
async def test_get_address_item_own(controller: StandardCustomerController):
    item = await controller.get_address_item("a1")
    assert item.city == "Hamburg"


@pytest.mark.asyncio
async def test_get_address_item_of_other_customer_stops_after_load(
    controller: StandardCustomerController, managers: FakeManagers
):
    with pytest.raises(PermissionDeniedError):
        await controller.get_address_item("a2")
    assert managers.addresses.calls == [("get_item", "a2", (), True)]


@pytest.mark.asyncio
async def test_edit_address_item_ignores_id_and_parent(
    controller: StandardCustomerController, managers: FakeManagers
):
    item = await controller.edit_address_item(
        "a1", {"id": "a2", "parent_id": "2", "city": "Bremen"}
    )

    assert item.id == "a1"
    assert item.parent_id == "1"
    assert item.city == "Bremen"
    assert (await managers.addresses.get_item("a2")).city == "Berlin"


@pytest.mark.asyncio
async def test_edit_address_item_of_other_customer_is_denied(
    controller: StandardCustomerController, managers: FakeManagers
):
    with pytest.raises(PermissionDeniedError):
        await controller.edit_address_item("a2", {"city": "Bremen"})
    assert [c[0] for c in managers.addresses.calls] == ["get_item"]


@pytest.mark.asyncio
async def test_delete_address_item(
    controller: StandardCustomerController, managers: FakeManagers
):
    await controller.delete_address_item("a1")
    assert await managers.addresses.get_item("a1", required=False) is None

    with pytest.raises(PermissionDeniedError):
        await controller.delete_address_item("a2")
    assert await managers.addresses.get_item("a2", required=False) is not None


@pytest.mark.asyncio
async def test_save_address_item_keeps_stored_parent(
    controller: StandardCustomerController, managers: FakeManagers
):
    item = await controller.get_address_item("a1")
    item.parent_id = "2"
    item.city = "Kiel"

    saved = await controller.save_address_item(item)

    assert saved.parent_id == "1"
    assert saved.city == "Kiel"


@pytest.mark.asyncio
async def test_save_address_item_of_other_customer_is_denied(
    controller: StandardCustomerController,
):
    with pytest.raises(PermissionDeniedError):
        await controller.save_address_item(CustomerAddress(id="a2", parent_id="1"))


@pytest.mark.asyncio
async def test_save_new_address_item_gets_current_parent(controller: StandardCustomerController):
    saved = await controller.save_address_item(CustomerAddress(parent_id="2", city="Ulm"))
    assert saved.parent_id == "1"


# ── List items ───────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_add_list_item_resolves_type_code(
    controller: StandardCustomerController, managers: FakeManagers
):
    item = await controller.add_list_item(
        {"id": "l2", "type": "watch", "domain": "product", "ref_id": "p9"}
    )

    assert item.type_id == "t2"
    assert item.parent_id == "1"
    assert item.id not in (None, "l2")
    assert managers.list_types.calls == [("find_item", "watch", (), "product")]


@pytest.mark.asyncio
async def test_add_list_item_with_type_id_skips_lookup(
    controller: StandardCustomerController, managers: FakeManagers
):
    item = await controller.add_list_item({"type_id": "t1", "domain": "product", "ref_id": "p3"})

    assert item.type_id == "t1"
    assert managers.list_types.calls == []


@pytest.mark.asyncio
async def test_add_list_item_without_type_code_fails(controller: StandardCustomerController):
    with pytest.raises(ValidationFailedError, match="No customer lists type code"):
        await controller.add_list_item({"domain": "product", "ref_id": "p3"})


@pytest.mark.asyncio
async def test_add_list_item_without_domain_fails(
    controller: StandardCustomerController, managers: FakeManagers
):
    with pytest.raises(ValidationFailedError, match="No customer lists domain") as exc_info:
        await controller.add_list_item({"type": "favorite", "ref_id": "p3"})
    assert exc_info.value.field == "domain"
    assert managers.lists.calls == []


@pytest.mark.asyncio
async def test_add_list_item_with_unknown_type_propagates_not_found(
    controller: StandardCustomerController,
):
    with pytest.raises(EntityNotFoundError):
        await controller.add_list_item({"type": "wishlist", "domain": "product", "ref_id": "p3"})


@pytest.mark.asyncio
async def test_edit_list_item_ignores_id_and_resolves_type(
    controller: StandardCustomerController,
):
    item = await controller.edit_list_item(
        "l1", {"id": "l2", "type": "watch", "domain": "product", "position": 3}
    )

    assert item.id == "l1"
    assert item.type_id == "t2"
    assert item.position == 3


@pytest.mark.asyncio
async def test_edit_list_item_clears_dates_and_config(
    controller: StandardCustomerController, managers: FakeManagers
):
    managers.lists.add(
        CustomerListItem(
            id="l1",
            parent_id="1",
            domain="product",
            type_id="t1",
            ref_id="p1",
            config={"qty": 2},
            date_end=datetime(2030, 1, 1, tzinfo=timezone.utc),
        )
    )

    item = await controller.edit_list_item(
        "l1", {"type_id": "t1", "date_end": None, "config": None}
    )

    assert item.date_end is None
    assert item.config == {}
    assert item.ref_id == "p1"


@pytest.mark.asyncio
async def test_edit_list_item_without_type_information_fails(
    controller: StandardCustomerController,
):
    with pytest.raises(ValidationFailedError):
        await controller.edit_list_item("l1", {"position": 3})


@pytest.mark.asyncio
async def test_edit_list_item_of_other_customer_is_denied_before_type_lookup(
    controller: StandardCustomerController, managers: FakeManagers
):
    with pytest.raises(PermissionDeniedError):
        await controller.edit_list_item("l2", {"type": "watch", "domain": "product"})
    assert managers.list_types.calls == []


@pytest.mark.asyncio
async def test_get_and_delete_list_item_check_stored_parent(
    controller: StandardCustomerController, managers: FakeManagers
):
    assert (await controller.get_list_item("l1")).ref_id == "p1"

    with pytest.raises(PermissionDeniedError):
        await controller.get_list_item("l2")
    with pytest.raises(PermissionDeniedError):
        await controller.delete_list_item("l2")

    await controller.delete_list_item("l1")
    assert await managers.lists.get_item("l1", required=False) is None


def test_create_lists_filter_is_scoped_to_current_customer(
    controller: StandardCustomerController,
):
    criteria = controller.create_lists_filter()
    assert criteria.conditions == [Condition(operator="==", key="parent_id", value="1")]


@pytest.mark.asyncio
async def test_search_list_items_delegates_with_total(
    controller: StandardCustomerController, managers: FakeManagers
):
    criteria = controller.create_lists_filter()

    items, total = await controller.search_list_items(criteria)

    assert [item.id for item in items] == ["l1"]
    assert total == 1
    assert managers.lists.calls[-1] == ("search_items", criteria, ())


@pytest.mark.asyncio
async def test_search_list_items_does_not_rescope_criteria(
    controller: StandardCustomerController,
):
    items, total = await controller.search_list_items(SearchCriteria())
    assert total == 2
