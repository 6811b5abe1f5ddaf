"""Peer compatibility matching module."""

from .matching_engine import (
    MatchingEngine,
    get_matching_engine,
    reset_matching_engine,
)
from .match_service import (
    MatchService,
    get_match_service,
    reset_match_service,
)

__all__ = [
    "MatchingEngine",
    "get_matching_engine",
    "reset_matching_engine",
    "MatchService",
    "get_match_service",
    "reset_match_service",
]
