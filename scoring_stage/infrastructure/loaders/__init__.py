from .specification_loader import SpecificationSource, load_specification

__all__ = ["SpecificationSource", "load_specification"]
