"""Region endpoints: root bounds and grid precision per region."""

from fastapi import APIRouter, HTTPException, status

from pindrop.schemas.pin import RegionResponse
from pindrop.services import pin_service

regions_router = APIRouter(prefix="/regions", tags=["regions"])


@regions_router.get("", response_model=list[RegionResponse])
async def list_regions() -> list[RegionResponse]:
    """List every region a PIN can be issued in."""
    return pin_service.list_regions()


@regions_router.get("/{region}", response_model=RegionResponse)
async def get_region(region: str) -> RegionResponse:
    """Return one region's bounds and cell precision."""
    try:
        return pin_service.describe_region(region)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
