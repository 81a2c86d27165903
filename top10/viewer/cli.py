import asyncio
import sys

import click

from ..config import ViewerConfig, viewer as viewer_config
from .viewer import LeaderboardViewer, create_client

async def run_viewer(config: ViewerConfig):
    async with create_client(config) as client:
        viewer = LeaderboardViewer(client, config=config)
        result = await viewer.initialize()
    return viewer, result

@click.command()
@click.option("--base-url", default=viewer_config.base_url, show_default=True,
              help="Server hosting /players/find_score_top10")
@click.option("--timeout", default=viewer_config.timeout, type=float, show_default=True,
              help="Request timeout in seconds")
def main(base_url, timeout):
    """Fetch the top 10 players and print the rendered table rows."""
    config = ViewerConfig(base_url=base_url, timeout=timeout)
    viewer, result = asyncio.run(run_viewer(config))
    if not result.ok:
        click.secho(f"Failed to load top 10 (status {result.error.status})", fg="red", err=True)
        sys.exit(1)
    click.echo(viewer.container.content)

if __name__ == "__main__":
    main()
