from fastapi import APIRouter, Depends

from ..config import Settings, get_settings
from ..schemas import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse, summary="Healthcheck")
def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", service=settings.APP_NAME)
