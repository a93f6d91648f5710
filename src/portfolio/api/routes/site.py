"""Public site-wide endpoints."""

from fastapi import APIRouter

from src.portfolio.api.dependencies import DashboardServiceDep
from src.portfolio.schemas import ApiResponse, SiteStats

router = APIRouter(tags=["site"])


@router.get("/stats", response_model=ApiResponse[SiteStats], summary="Public content counts")
async def get_stats(service: DashboardServiceDep) -> ApiResponse[SiteStats]:
    return ApiResponse[SiteStats](data=await service.get_site_stats())
