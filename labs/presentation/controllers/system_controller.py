"""Liveness route, mounted outside `/api`."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Response, status

from labs.application.dtos.health_dto import SystemHealthDTO
from labs.application.use_cases.health_use_cases import GetHealthStatusUseCase
from labs.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get(
    "/health",
    response_model=SystemHealthDTO,
    responses={503: {"model": SystemHealthDTO}},
)
@inject
async def health(
    response: Response,
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> SystemHealthDTO:
    """Report MongoDB availability; answers 503 while it is down."""
    try:
        report = await get_health_status_use_case.execute()
    except Exception as exc:
        logger.error("health.check.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Unable to retrieve system health status",
        ) from exc

    if report.is_down:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("health.check.down")
    return report
