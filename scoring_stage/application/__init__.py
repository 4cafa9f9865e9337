"""
Application Layer Package

Holds the ScoringStage, the use cases built on top of it and the DTOs
they return.
"""

from .scoring_stage import ScoringStage

__all__ = ["ScoringStage"]
