"""Top-10 leaderboard service and viewer."""

__version__ = "1.0.0"
