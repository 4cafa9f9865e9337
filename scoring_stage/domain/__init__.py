"""
Domain Layer Package

Specification entities, errors and the pure evaluation services.
Nothing here depends on frameworks or I/O.
"""

from scoring_stage.domain import entities, services

__all__ = ["entities", "services"]
