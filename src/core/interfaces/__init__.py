"""Core interfaces/abstractions.

Contracts (Protocol) that concrete strategies satisfy, so the harness depends
on the shape of a builder rather than on a specific function.
"""

from core.interfaces.builder import TriangleBuilder

__all__ = ["TriangleBuilder"]
