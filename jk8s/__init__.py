"""Workspace resource model, type registry and command-line option parsing for Jupyter on Kubernetes."""

__version__ = "0.1.0"