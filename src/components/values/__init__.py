"""
Values component - Type-discriminated value processing.
"""

from .component import Value, process_value

__all__ = ["Value", "process_value"]
