"""Single-precision 3D vectors with component-wise arithmetic."""

__version__ = "0.1.0"
__all__ = ["vector3"]