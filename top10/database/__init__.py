from .base import ScoreStore, close_store, create_store, current_store, get_store

__all__ = ['ScoreStore', 'close_store', 'create_store', 'current_store', 'get_store']
