"""
Agent sales report.
"""

from fastapi import APIRouter, Depends, Query
from typing import List

from homehunt.services.report import ReportService
from homehunt.schemas.payment import SoldPropertyResponse
from homehunt.schemas.error import get_common_error_responses
from homehunt.utils.auth import Identity
from homehunt.utils.dependencies import get_identity, get_report_service


router = APIRouter(tags=["Reports"])


@router.get(
    "/sold-properties",
    response_model=List[SoldPropertyResponse],
    summary="Properties sold by an agent",
    responses=get_common_error_responses()
)
async def sold_properties(
    agent_email: str = Query(..., alias="agentEmail", min_length=1),
    identity: Identity = Depends(get_identity),
    report_service: ReportService = Depends(get_report_service)
) -> List[SoldPropertyResponse]:
    rows = await report_service.sold_properties(agent_email, identity)
    return [SoldPropertyResponse.model_validate(row) for row in rows]
