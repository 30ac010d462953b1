"""Marketplace identity and reputation core."""

__version__ = "0.1.0"
