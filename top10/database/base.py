import asyncio
from typing import List, Optional
from ..models.data import PlayerRec
from ..config import database
from ..logger import get_logger

logger = get_logger()

class ScoreStore:
    """Interface shared by the player score backends"""
    backend: str = ''

    async def initialize(self):
        raise NotImplementedError

    async def close(self):
        raise NotImplementedError

    @property
    def is_open(self) -> bool:
        raise NotImplementedError

    async def save(self, name: str, score: int) -> PlayerRec:
        raise NotImplementedError

    async def find_top(self, limit: int) -> List[PlayerRec]:
        raise NotImplementedError

    async def find_score_top10(self) -> List[PlayerRec]:
        """Players holding the highest scores, highest first"""
        return await self.find_top(database.TOP_LIMIT)

_store: Optional[ScoreStore] = None
_lock = asyncio.Lock()

def create_store(backend: str) -> ScoreStore:
    if backend == 'memory':
        from .memory import MemoryScoreStore
        return MemoryScoreStore()
    if backend == 'postgres':
        from .score_manager import PostgresScoreStore
        return PostgresScoreStore()
    raise ValueError(f"Unknown store backend: {backend}")

def current_store() -> Optional[ScoreStore]:
    """The singleton store if it has been opened, without opening it"""
    return _store

async def get_store() -> ScoreStore:
    """Get the initialized singleton store for the configured backend"""
    global _store
    if _store is None:
        async with _lock:
            if _store is None:
                store = create_store(database.BACKEND)
                await store.initialize()
                logger.info(f"Score store initialized ({database.BACKEND})")
                _store = store
    return _store

async def close_store():
    """Close the singleton store, if one was opened"""
    global _store
    if _store is not None:
        await _store.close()
        _store = None
