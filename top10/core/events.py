from ..database import close_store, get_store
from ..logger import get_logger
import asyncio

logger = get_logger()

async def startup_event():
    """Open the score store"""
    try:
        await get_store()
        logger.info("Score store ready")
    except Exception as e:
        logger.error(f"Failed to initialize score store: {e}")
        raise

async def shutdown_event():
    """Close the score store"""
    try:
        async with asyncio.timeout(5.0):
            await close_store()
            logger.info("Score store closed")
    except asyncio.TimeoutError:
        logger.warning("Shutdown timed out, store may not have closed cleanly")
    except Exception as e:
        logger.error(f"Error during shutdown: {e}")
