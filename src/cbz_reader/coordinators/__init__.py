"""Coordinators - Orchestration layer connecting UI with business logic."""

from .navigation_controller import NavigationController
from .render_pipeline import LazyRenderPipeline

__all__ = [
    "NavigationController",
    "LazyRenderPipeline",
]
