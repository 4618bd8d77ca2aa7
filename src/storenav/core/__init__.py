"""Navigation core.

Pure, synchronous transformation from page descriptors to header and
footer navigation. Nothing in this package performs I/O.
"""

from .navigation import (
    FooterConfig,
    GeneratedNavigation,
    HeaderConfig,
    NavigationConfig,
    NavigationItem,
    NavigationManager,
    ValidationReport,
)
from .pages import LegacyPolicies, PageDescriptor

__all__ = [
    "FooterConfig",
    "GeneratedNavigation",
    "HeaderConfig",
    "LegacyPolicies",
    "NavigationConfig",
    "NavigationItem",
    "NavigationManager",
    "PageDescriptor",
    "ValidationReport",
]
