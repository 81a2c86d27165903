import time
from fastapi import APIRouter
from ..config import database
from ..database import current_store
from ..models.response import HealthResponse

router = APIRouter()

# Track application start time
start_time = time.time()

@router.get("/health", response_model=HealthResponse)
@router.head("/health")
async def health_check():
    """Report uptime and whether the score store is open"""
    store = current_store()
    store_open = store is not None and store.is_open
    return HealthResponse(
        status="healthy" if store_open else "unavailable",
        uptime=time.time() - start_time,
        store=store.backend if store is not None else database.BACKEND,
        store_open=store_open
    )
