"""
Pastel background colors: constrained random RGB generation plus the sinks that show it.
"""
from .generator import ColorGenerator

__all__ = ["ColorGenerator"]
