"""Contact Lookups: GetContactBy* endpoints of the connector contract."""

import logging

from fastapi import APIRouter, Request, status

from datadip_mock.api.request_decoding import decode_request
from datadip_mock.schemas.contract import ContactResponse
from datadip_mock.schemas.requests import ContactByPhoneNumberRequest
from datadip_mock.services.canned_responses import build_contact_response

logger = logging.getLogger(__name__)
router = APIRouter(tags=["contacts"])

CONTACT_BY_PHONE_NUMBER = "/GetContactByPhoneNumber"


@router.post(
    CONTACT_BY_PHONE_NUMBER, response_model=ContactResponse,
    status_code=status.HTTP_200_OK,
)
async def get_contact_by_phone_number(request: Request):
    """Look up a contact by phone number."""
    logger.info(
        f"Processing {CONTACT_BY_PHONE_NUMBER}...",
        extra={"route": CONTACT_BY_PHONE_NUMBER, "method": request.method},
    )
    await decode_request(request, ContactByPhoneNumberRequest)
    response = build_contact_response()
    logger.info(
        f"Sending reply from {CONTACT_BY_PHONE_NUMBER}...",
        extra={
            "route": CONTACT_BY_PHONE_NUMBER, "method": request.method, "status_code": 200,
        },
    )
    return response
