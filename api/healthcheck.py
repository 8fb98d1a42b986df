from fastapi import APIRouter, Depends
from api.availability import get_settings
from core.config_store import BookingSettings
from utils.local_day import today_local

router = APIRouter(prefix="/health", tags=["Health Check"])


@router.get("/check", summary="Health Check")
def healthcheck(settings: BookingSettings = Depends(get_settings)):
    return {"status": "ok", "today": today_local(settings.utc_offset_minutes).isoformat()}
