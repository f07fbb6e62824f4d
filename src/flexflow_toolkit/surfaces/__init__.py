"""
Module: surfaces

Purpose:
    Reference rendering surfaces implementing the flow collaborator
    protocols.
"""

from .memory import MemorySurface, SurfaceContainer, SurfaceNode

__all__ = ["MemorySurface", "SurfaceContainer", "SurfaceNode"]
