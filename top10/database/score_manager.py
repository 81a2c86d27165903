from typing import List
from ..models.data import PlayerRec
from .base import ScoreStore
from .connection import DatabaseConnection

class PostgresScoreStore(ScoreStore):
    backend = 'postgres'

    def __init__(self, db_connection: DatabaseConnection = None):
        self.db = db_connection or DatabaseConnection()

    async def initialize(self):
        await self.db.initialize()

    async def close(self):
        await self.db.close()

    @property
    def is_open(self) -> bool:
        return self.db.is_open

    async def save(self, name: str, score: int) -> PlayerRec:
        """Insert a player and return the stored row"""
        async with self.db.semaphore:  # Limit concurrent DB operations
            async with self.db.pool.acquire() as conn:
                row = await conn.fetchrow('''
                    INSERT INTO players (name, score)
                    VALUES ($1, $2)
                    RETURNING id, name, score
                ''', name, score)
                return PlayerRec(row['id'], row['name'], row['score'])

    async def find_top(self, limit: int) -> List[PlayerRec]:
        """Get the highest scoring players, highest first"""
        async with self.db.semaphore:
            async with self.db.pool.acquire() as conn:
                rows = await conn.fetch('''
                    SELECT id, name, score
                    FROM players
                    ORDER BY score DESC, id
                    LIMIT $1
                ''', limit)
                return [PlayerRec(row['id'], row['name'], row['score']) for row in rows]
