"""Asyncio helpers for parallel work, deadlines and three-way results, plus simple thread primitives."""

__version__ = "0.1.0"