"""Lazy, shared inventory cache for GCE instances and GKE clusters."""

__version__ = "0.1.0"
