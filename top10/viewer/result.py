from typing import List
from ..models.data import RenderedRow
from .diagnostics import LoadError

class Ok:
    __slots__ = ('rows',)
    ok = True
    def __init__(self, rows: List[RenderedRow]):
        self.rows = rows

class Err:
    __slots__ = ('error',)
    ok = False
    def __init__(self, error: LoadError):
        self.error = error
