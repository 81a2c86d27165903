from .container import DisplayContainer
from .diagnostics import DiagnosticLog, LoadError
from .result import Err, Ok
from .viewer import LeaderboardViewer, ViewerState, create_client

__all__ = [
    'DiagnosticLog',
    'DisplayContainer',
    'Err',
    'LeaderboardViewer',
    'LoadError',
    'Ok',
    'ViewerState',
    'create_client',
]
