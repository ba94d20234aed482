"""Case Lookups: GetMostRecentOpenCaseBy* endpoints (stubbed)."""

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from datadip_mock.core.errors import EndpointNotImplementedError

router = APIRouter(tags=["cases"])

MOST_RECENT_OPEN_CASE_BY_CONTACT_ID = "/GetMostRecentOpenCaseByContactId"


@router.post(
    MOST_RECENT_OPEN_CASE_BY_CONTACT_ID, response_class=PlainTextResponse,
    status_code=status.HTTP_501_NOT_IMPLEMENTED,
)
async def get_most_recent_open_case_by_contact_id():
    raise EndpointNotImplementedError(MOST_RECENT_OPEN_CASE_BY_CONTACT_ID)
