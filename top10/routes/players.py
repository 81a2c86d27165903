from typing import List, Optional
from fastapi import APIRouter, HTTPException, Query
from ..models.player import PlayerRequest
from ..models.response import PlayerResponse
from ..database import get_store
from ..logger import get_logger

logger = get_logger()
router = APIRouter(prefix="/players")

@router.get("/add", response_model=PlayerResponse)
async def add_player(name: Optional[str] = Query(None, max_length=100)):
    """
    Register a player with a zero score.

    - **name**: Display name of the player
    """
    try:
        if name is None or not name.strip():
            raise ValueError("name not null")
        store = await get_store()
        rec = await store.save(name.strip(), 0)
        logger.info(f"Added player {rec.id} ({rec.name})")
        return PlayerResponse(**rec.to_dict())
    except ValueError as e:
        logger.error(f"Validation error: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error adding player: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

@router.post("/add_post", response_model=PlayerResponse)
async def add_player_post(data: PlayerRequest):
    """
    Store a finished game's player and score.

    - **name**: Display name of the player
    - **score**: Non-negative final score
    """
    try:
        store = await get_store()
        rec = await store.save(data.name, data.score)
        logger.info(f"Saved player {rec.id} ({rec.name}) with score {rec.score}")
        return PlayerResponse(**rec.to_dict())
    except Exception as e:
        logger.error(f"Error saving player: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

@router.get("/find_score_top10", response_model=List[PlayerResponse])
async def find_score_top10():
    """Get the ten highest scoring players, highest first."""
    try:
        store = await get_store()
        players = await store.find_score_top10()
        logger.info(f"Successfully retrieved {len(players)} top players")
        return [PlayerResponse(**rec.to_dict()) for rec in players]
    except Exception as e:
        logger.error(f"Error getting top 10: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to get leaderboard")
