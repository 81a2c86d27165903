from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from . import __version__
from .core.events import shutdown_event, startup_event
from .routes import health, pages, players

@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup_event()
    yield
    await shutdown_event()

def create_app() -> FastAPI:
    app = FastAPI(
        default_response_class=ORJSONResponse,
        title="Top 10 Leaderboard",
        description="Player score storage and the top 10 leaderboard page",
        version=__version__,
        lifespan=lifespan
    )
    app.include_router(health.router)
    app.include_router(players.router)
    app.include_router(pages.router)
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "top10.main:app",
        host="0.0.0.0",
        port=8000,
        log_level="info"
    )
