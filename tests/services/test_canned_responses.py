"""Canned responses: fresh records, identical content on every call."""

from datadip_mock.services.canned_responses import (
    build_account_response,
    build_contact_response,
)


def test_account_is_built_fresh_each_call():
    first = build_account_response()
    second = build_account_response()
    assert first is not second
    assert first.account is not second.account
    assert first == second


def test_account_dump_is_stable():
    assert (
        build_account_response().model_dump_json(by_alias=True)
        == build_account_response().model_dump_json(by_alias=True)
    )


def test_account_carries_two_addresses_in_order():
    addresses = build_account_response().account.addresses.address
    assert [a.type for a in addresses] == ["MY", "US"]
    assert addresses[1].line2 is None


def test_account_identity_fields():
    account = build_account_response().account
    assert (account.id, account.name, account.number) == (
        "123", "Ng Sze Min", "123",
    )
    assert account.custom_attribute == "Custom data here"


def test_contact_identity_fields():
    contact = build_contact_response().contact
    assert contact.id == "1234567890"
    assert contact.full_name == "Ng Sze Min"
    assert contact.custom_attribute is None


def test_contact_address_has_no_type():
    dumped = build_contact_response().model_dump(by_alias=True)
    assert "Type" not in dumped["Contact"]["Address"]
    assert dumped["Contact"]["Address"]["City"] == "Kuala Lumpur"


def test_contact_phone_numbers():
    phones = build_contact_response().contact.phone_numbers.phone_number
    assert [(p.number, p.phone_type) for p in phones] == [
        ("+60327763333", 1), ("+60327763324", 2),
    ]
