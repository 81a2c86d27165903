from enum import Enum
from typing import Optional, Union

import httpx
from pydantic import ValidationError

from ..config import ViewerConfig, viewer as viewer_config
from ..logger import get_logger
from ..models.player import top10_adapter
from .container import DisplayContainer
from .diagnostics import DiagnosticLog, LoadError
from .render import build_rows, render_rows
from .result import Err, Ok

logger = get_logger()

class ViewerState(str, Enum):
    IDLE = "idle"
    REQUESTING = "requesting"
    RENDERED = "rendered"
    FAILED = "failed"

def create_client(config: ViewerConfig = viewer_config) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=config.base_url, timeout=config.timeout)

class LeaderboardViewer:
    """Fetches the top-10 players and renders them into a display container.

    The host application calls ``initialize()`` once at startup. Each
    ``load_top10()`` issues exactly one GET; on success the container content
    is replaced in full, on failure the container is left as it was and one
    diagnostic record is written.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        container: Optional[DisplayContainer] = None,
        diagnostics: Optional[DiagnosticLog] = None,
        config: ViewerConfig = viewer_config,
    ):
        self.client = client
        self.config = config
        self.container = container or DisplayContainer(config.container_id)
        self.diagnostics = diagnostics or DiagnosticLog()
        self.state = ViewerState.IDLE
        self._initialized = False

    async def initialize(self) -> Union[Ok, Err]:
        """Run the single page-load fetch"""
        if self._initialized:
            raise RuntimeError("LeaderboardViewer is already initialized")
        self._initialized = True
        return await self.load_top10()

    async def load_top10(self) -> Union[Ok, Err]:
        self.state = ViewerState.REQUESTING
        try:
            entries = await self._fetch()
        except LoadError as e:
            self.diagnostics.record(e)
            self.state = ViewerState.FAILED
            return Err(e)

        rows = build_rows(entries)
        self.container.replace_content(render_rows(rows))
        self.state = ViewerState.RENDERED
        logger.info(f"Rendered {len(rows)} leaderboard rows into #{self.container.element_id}")
        return Ok(rows)

    async def _fetch(self):
        try:
            response = await self.client.get(
                self.config.path,
                headers={"Content-Type": self.config.content_type},
            )
        except httpx.HTTPError as e:
            logger.debug(f"Transport error fetching top 10: {e}")
            raise LoadError(0, "") from e

        if not response.is_success:
            raise LoadError(response.status_code, response.text)

        try:
            return top10_adapter.validate_json(response.content)
        except ValidationError as e:
            raise LoadError(response.status_code, response.text) from e
