"""Connector Contract Schemas: Pydantic records mirroring the Data Dip response shapes.

Invariants:
    - Wire names are PascalCase (Id, EmailAddresses, PostalCode); Python attributes snake_case
    - Empty fields (None, "", 0, [], all-empty nested records) are omitted on serialization
    - Field declaration order is the wire order
    - Records are frozen once built

Design Decisions:
    - Nested-object form only (Account.PhoneNumbers.PhoneNumber[]): the flattened
      dotted-key experiments are not part of the contract
    - Numeric discriminators typed int | float so integral values stay integral on
      the wire (PhoneType: 1, not 1.0)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_serializer
from pydantic.alias_generators import to_pascal


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, dict)):
        return not value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False


class ContractModel(BaseModel):
    """Base for every record exchanged with the connector."""

    model_config = ConfigDict(
        alias_generator=to_pascal, populate_by_name=True, frozen=True,
    )

    @model_serializer(mode="wrap")
    def omit_empty_fields(self, handler):
        data = handler(self)
        return {k: v for k, v in data.items() if not _is_empty(v)}


# --- Leaf value records -------------------------------------------------------

class Address(ContractModel):
    city: str | None = None
    country: str | None = None
    line1: str | None = None
    line2: str | None = None
    line3: str | None = None
    postal_code: str | None = None
    state: str | None = None
    type: str | None = None


class EmailAddress(ContractModel):
    email_address: str | None = None
    email_type: int | float | None = None


class PhoneNumber(ContractModel):
    number: str | None = None
    phone_type: int | float | None = None


# --- List wrappers ------------------------------------------------------------

class Addresses(ContractModel):
    address: list[Address] = []


class EmailAddresses(ContractModel):
    email_address: list[EmailAddress] = []


class PhoneNumbers(ContractModel):
    phone_number: list[PhoneNumber] = []


# --- Entities -----------------------------------------------------------------

class Account(ContractModel):
    """Customer account as returned by GetAccountBy* lookups."""
    id: str | None = None
    name: str | None = None
    number: str | None = None
    email_addresses: EmailAddresses | None = None
    phone_numbers: PhoneNumbers | None = None
    addresses: Addresses | None = None
    custom_attribute: str | None = None


class Contact(ContractModel):
    """Customer contact as returned by GetContactBy* lookups."""
    email_addresses: EmailAddresses | None = None
    first_name: str | None = None
    last_name: str | None = None
    full_name: str | None = None
    id: str | None = None
    phone_numbers: PhoneNumbers | None = None
    address: Address | None = None
    custom_attribute: str | None = None


# --- Response envelopes -------------------------------------------------------

class AccountResponse(ContractModel):
    account: Account


class ContactResponse(ContractModel):
    contact: Contact
