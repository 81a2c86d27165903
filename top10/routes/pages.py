from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse, PlainTextResponse
from ..config import viewer
from ..database import get_store
from ..models.player import PlayerScoreEntry
from ..viewer.render import build_rows, render_page
from ..logger import get_logger

logger = get_logger()
router = APIRouter()

@router.get("/hello", response_class=PlainTextResponse)
async def hello():
    return "hello world"

@router.get("/top10", response_class=HTMLResponse)
async def top10_page():
    """Leaderboard page with the top 10 table already filled in"""
    try:
        store = await get_store()
        players = await store.find_score_top10()
        entries = [PlayerScoreEntry(name=rec.name, score=rec.score) for rec in players]
        return render_page(build_rows(entries), viewer.container_id)
    except Exception as e:
        logger.error(f"Error rendering top 10 page: {e}")
        raise HTTPException(status_code=500, detail="Failed to render leaderboard")
