from fastapi import APIRouter, Depends

from rentx.api.deps import get_store
from rentx.db.store import Store

router = APIRouter()

@router.get("/")
def health_check(store: Store = Depends(get_store)):
    """
    Health check endpoint that verifies API and database status.

    Returns:
        dict: Health status of the API and database
    """
    database_online = store.health_check()
    return {
        "status": "healthy" if database_online else "unhealthy",
        "api": "online",
        "database": "online" if database_online else "offline",
    }
