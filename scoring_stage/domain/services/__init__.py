"""Domain services: specification parsing and record evaluation."""

from .evaluator import evaluate, score
from .specification_parser import parse_specification

__all__ = ["evaluate", "score", "parse_specification"]
