"""Tastematch - taste-profile music matching backend."""

__version__ = "0.1.0"
