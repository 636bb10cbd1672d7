"""Cluster Dash - three-channel instrument cluster for composite displays."""

__version__ = "0.1.0"
