"""Algorithms and data structures for competitive programming: graphs, flows, strings, geometry and number theory."""

__version__ = "0.1.0"