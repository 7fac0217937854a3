"""
Reports API endpoint.
Handles GET /api/v1/reports/driver-rank for distance rankings.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from delivery_dispatch.api.catalog import driver_response
from delivery_dispatch.database import get_db
from delivery_dispatch.repository import DispatchRepository
from delivery_dispatch.schemas.delivery import DriverDistanceResponse, DriverRankReportResponse
from delivery_dispatch.services.dispatch_service import DispatchService

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get(
    "/driver-rank",
    response_model=DriverRankReportResponse,
    summary="Driver rank report",
    description="Drivers ordered by total whole-km distance traveled, highest first.",
)
async def get_driver_rank_report(
    city: Optional[str] = Query(None, description="Only rank drivers based in this city"),
    db: AsyncSession = Depends(get_db),
) -> DriverRankReportResponse:
    repo = DispatchRepository(db)
    
    scope = None
    if city is not None:
        scope = await repo.find_city_by_name(city)
        if not scope:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"City {city} not found",
            )
    
    report = await DispatchService(repo).get_driver_rank_report(scope)
    return DriverRankReportResponse(
        city=city,
        drivers=[
            DriverDistanceResponse(
                driver=driver_response(line.driver),
                total_distance=line.total_distance,
            )
            for line in report
        ],
    )
