from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from jobtrack.schemas.integration import SyncResult
from jobtrack.services.integrations import integration_sync_service
from ..dependencies import get_user_id
import logging

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/sync", response_model=SyncResult)
def sync_integrations(user_id: str = Depends(get_user_id)):
    """
    Pull job applications from all of the user's active integrations
    """
    try:
        result = integration_sync_service.sync_all_integrations(user_id)
    except Exception as e:
        logger.error(f"❌ Error syncing integrations: {e}")
        failure = SyncResult(success=False, imported=0, message="Failed to sync integrations")
        return JSONResponse(status_code=500, content=failure.model_dump())

    if result.success:
        logger.info(f"✅ {result.message}")
        return result

    logger.warning(f"⚠️ Sync failed for user {user_id}: {result.message}")
    return JSONResponse(status_code=400, content=result.model_dump())
