from pathlib import Path
from typing import Iterable, List, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from ..models.data import RenderedRow
from ..models.player import PlayerScoreEntry

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

def js_number(value: Union[int, float]) -> str:
    """Print integral floats below 1e21 without the trailing ``.0``.

    Other values use Python's own formatting, so exponent notation
    differs from a browser's (``1.5e-07`` rather than ``1.5e-7``).
    """
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)

env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
)
env.filters["js_number"] = js_number

def build_rows(entries: Iterable[PlayerScoreEntry]) -> List[RenderedRow]:
    """Rank entries by their position in the response, 1-based"""
    return [
        RenderedRow(rank=idx + 1, name=entry.name, score=entry.score)
        for idx, entry in enumerate(entries)
    ]

def render_rows(rows: Iterable[RenderedRow]) -> str:
    """Render rows as concatenated <tr> markup. Names are HTML-escaped."""
    return env.get_template("rows.html").render(rows=rows)

def render_page(rows: Iterable[RenderedRow], container_id: str) -> str:
    """Render the full leaderboard page with the table body pre-filled"""
    return env.get_template("leaderboard.html").render(
        container_id=container_id,
        rows_markup=Markup(render_rows(rows)),
    )
