"""Storenav - navigation generation for page-builder storefronts."""

__version__ = "0.1.0"
