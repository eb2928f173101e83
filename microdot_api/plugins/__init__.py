"""
Exporter contracts - abstract base classes for graph exporters.
"""
from .base import GraphExporter

__all__ = ['GraphExporter']
