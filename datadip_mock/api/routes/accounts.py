"""Account Lookups: GetAccountBy* endpoints of the connector contract.

Invariants:
    - POST only; any other method on these paths is a 405 from the router
    - /GetAccountByAccountNumber replies with the canned account whatever the input
    - /GetAccountByContactId and /GetAccountByPhoneNumber are stubs (501), body never read
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import PlainTextResponse

from datadip_mock.api.request_decoding import decode_request
from datadip_mock.core.errors import EndpointNotImplementedError
from datadip_mock.schemas.contract import AccountResponse
from datadip_mock.schemas.requests import AccountByAccountNumberRequest
from datadip_mock.services.canned_responses import build_account_response

logger = logging.getLogger(__name__)
router = APIRouter(tags=["accounts"])

ACCOUNT_BY_ACCOUNT_NUMBER = "/GetAccountByAccountNumber"
ACCOUNT_BY_CONTACT_ID = "/GetAccountByContactId"
ACCOUNT_BY_PHONE_NUMBER = "/GetAccountByPhoneNumber"


@router.post(
    ACCOUNT_BY_ACCOUNT_NUMBER, response_model=AccountResponse,
    status_code=status.HTTP_200_OK,
)
async def get_account_by_account_number(request: Request):
    """Look up an account by account number."""
    logger.info(
        f"Processing {ACCOUNT_BY_ACCOUNT_NUMBER}...",
        extra={"route": ACCOUNT_BY_ACCOUNT_NUMBER, "method": request.method},
    )
    await decode_request(request, AccountByAccountNumberRequest)
    response = build_account_response()
    logger.info(
        f"Sending reply from {ACCOUNT_BY_ACCOUNT_NUMBER}...",
        extra={
            "route": ACCOUNT_BY_ACCOUNT_NUMBER, "method": request.method, "status_code": 200,
        },
    )
    return response


@router.post(
    ACCOUNT_BY_CONTACT_ID, response_class=PlainTextResponse,
    status_code=status.HTTP_501_NOT_IMPLEMENTED,
)
async def get_account_by_contact_id():
    raise EndpointNotImplementedError(ACCOUNT_BY_CONTACT_ID)


@router.post(
    ACCOUNT_BY_PHONE_NUMBER, response_class=PlainTextResponse,
    status_code=status.HTTP_501_NOT_IMPLEMENTED,
)
async def get_account_by_phone_number():
    raise EndpointNotImplementedError(ACCOUNT_BY_PHONE_NUMBER)
