import asyncio
from typing import List
from sortedcontainers import SortedList
from ..models.data import PlayerRec
from .base import ScoreStore

class MemoryScoreStore(ScoreStore):
    """In-process store; ties on score keep insertion order"""
    backend = 'memory'

    def __init__(self):
        self._players = SortedList(key=lambda rec: (-rec.score, rec.id))
        self._next_id = 1
        self._lock = asyncio.Lock()
        self._open = False

    async def initialize(self):
        self._open = True

    async def close(self):
        self._players.clear()
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    async def save(self, name: str, score: int) -> PlayerRec:
        async with self._lock:
            rec = PlayerRec(self._next_id, name, score)
            self._next_id += 1
            self._players.add(rec)
            return rec

    async def find_top(self, limit: int) -> List[PlayerRec]:
        return list(self._players.islice(0, limit))
