"""Canned Responses: statically-valued records returned by the implemented lookups.

Invariants:
    - Every call builds a fresh record; nothing is cached or shared between requests
    - Output never depends on the request: identical bytes on every call
"""

from datadip_mock.schemas.contract import (
    Account,
    AccountResponse,
    Address,
    Addresses,
    Contact,
    ContactResponse,
    EmailAddress,
    EmailAddresses,
    PhoneNumber,
    PhoneNumbers,
)

_FULL_NAME = "Ng Sze Min"
_EMAIL = "szemin.ng@inin.com"
_KL_OFFICE_LINE1 = "Unit 9.1, Level 9, Menara Prestige"
_KL_OFFICE_LINE2 = "No. 1, Jalan Pinang"


def _email_addresses() -> EmailAddresses:
    return EmailAddresses(email_address=[
        EmailAddress(email_address=_EMAIL, email_type=1),
    ])


def _kuala_lumpur_office(address_type: str | None = None) -> Address:
    return Address(
        city="Kuala Lumpur",
        country="Malaysia",
        line1=_KL_OFFICE_LINE1,
        line2=_KL_OFFICE_LINE2,
        postal_code="50450",
        state="FT",
        type=address_type,
    )


def build_account_response() -> AccountResponse:
    """Account returned by /GetAccountByAccountNumber."""
    return AccountResponse(account=Account(
        id="123",
        name=_FULL_NAME,
        number="123",
        email_addresses=_email_addresses(),
        phone_numbers=PhoneNumbers(phone_number=[
            PhoneNumber(number="+60327763333", phone_type=1),
            PhoneNumber(number="+18002671364", phone_type=2),
        ]),
        addresses=Addresses(address=[
            _kuala_lumpur_office("MY"),
            Address(
                city="Indianapolis",
                country="United States",
                line1="7601 Interactive Way",
                postal_code="46278",
                state="IN",
                type="US",
            ),
        ]),
        custom_attribute="Custom data here",
    ))


def build_contact_response() -> ContactResponse:
    """Contact returned by /GetContactByPhoneNumber."""
    return ContactResponse(contact=Contact(
        email_addresses=_email_addresses(),
        first_name="Sze Min",
        last_name="Ng",
        full_name=_FULL_NAME,
        id="1234567890",
        phone_numbers=PhoneNumbers(phone_number=[
            PhoneNumber(number="+60327763333", phone_type=1),
            PhoneNumber(number="+60327763324", phone_type=2),
        ]),
        address=_kuala_lumpur_office(),
    ))
