import asyncpg
import asyncio
from ..config import database
from ..logger import get_logger

logger = get_logger()

class DatabaseConnection:
    def __init__(self, max_concurrency: int = 10):
        self.pool = None
        self.semaphore = asyncio.Semaphore(max_concurrency)
        self.max_concurrency = max_concurrency
        self._initialized = False
        self._init_lock = asyncio.Lock()

    async def initialize(self):
        """Open the connection pool and create the players table"""
        if self._initialized:
            return

        async with self._init_lock:
            if self._initialized:  # Double check after acquiring lock
                return

            try:
                self.pool = await asyncpg.create_pool(
                    host=database.HOST,
                    port=database.PORT,
                    database=database.DB,
                    user=database.USER,
                    password=database.PASSWORD,
                    min_size=1,
                    max_size=self.max_concurrency,
                    command_timeout=10,
                    max_inactive_connection_lifetime=300.0,
                    setup=self._setup_connection
                )

                async with self.pool.acquire() as conn:
                    await conn.execute('''
                        CREATE TABLE IF NOT EXISTS players (
                            id SERIAL PRIMARY KEY,
                            name VARCHAR(100) NOT NULL,
                            score INTEGER NOT NULL DEFAULT 0
                        )
                    ''')
                    await conn.execute('''
                        CREATE INDEX IF NOT EXISTS idx_players_score
                        ON players(score DESC, id)
                    ''')

                self._initialized = True
                logger.info("Database connection initialized successfully")
            except Exception as e:
                logger.error(f"Failed to initialize database connection: {e}")
                await self.close()
                raise

    async def _setup_connection(self, connection):
        """Setup connection with proper settings"""
        await connection.execute('SET statement_timeout = 30000')
        await connection.execute('SET lock_timeout = 10000')

    async def close(self):
        """Close database connections"""
        if self.pool:
            await self.pool.close()
            self.pool = None
        self._initialized = False

    @property
    def is_open(self) -> bool:
        return self._initialized
