"""Synchronization layer: cross-concept orchestration and authorization."""

from .app import Concepts, build_concepts
from .events import EventBus, ItemCreated, ScoreFanout
from .ownership import OwnershipGuard
from .parents import ParentResolver, Probe
from .responses import Responses
from .routes import Synchronizations

__all__ = [
    "Concepts",
    "EventBus",
    "ItemCreated",
    "OwnershipGuard",
    "ParentResolver",
    "Probe",
    "Responses",
    "ScoreFanout",
    "Synchronizations",
    "build_concepts",
]
