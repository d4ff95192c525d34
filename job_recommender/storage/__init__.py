"""
Persistence for engine state.
"""

from .engine_store import EngineStore, StoreError

__all__ = [
    "EngineStore",
    "StoreError",
]
