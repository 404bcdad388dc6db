import logging

from fastapi import APIRouter, Depends

from api.deps import get_store
from errors import DeskError, InternalError
from services.loans import group_loans_for_sanctions
from services.record_store import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sanctions", tags=["sanctions"])


@router.get("", response_model=dict)
async def list_sanctions(store: RecordStore = Depends(get_store)):
    """All loans grouped into the initiated / approved / rejected tabs (plus other statuses)."""
    try:
        groups = await group_loans_for_sanctions(store)
        return {
            tab: [s.model_dump(mode="json", by_alias=True) for s in summaries]
            for tab, summaries in groups.items()
        }
    except DeskError:
        raise
    except Exception as e:
        logger.exception("Error listing sanctions")
        raise InternalError() from e
