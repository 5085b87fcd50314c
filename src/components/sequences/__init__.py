"""
Sequences component - Joining sequences end to end.
"""

from .component import concatenate_arrays

__all__ = ["concatenate_arrays"]
