"""Request Envelopes: lookup bodies the Data Dip Connector POSTs to this service.

Invariants:
    - One lookup key per envelope plus an optional CustomAttribute
    - Missing or null keys decode to "" (the connector's decoder is lenient)
    - A value of the wrong JSON type is a decode failure
    - Unknown fields are ignored

Design Decisions:
    - Values are decoded but never read: the mock only proves the body is well-formed
"""

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_pascal


class DataDipRequest(BaseModel):
    """Common envelope fields."""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    custom_attribute: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        return "" if v is None else v


class AccountByAccountNumberRequest(DataDipRequest):
    account_number: str = ""


class AccountByContactIdRequest(DataDipRequest):
    contact_id: str = ""


class ContactByPhoneNumberRequest(DataDipRequest):
    phone_number: str = ""
