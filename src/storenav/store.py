"""File-backed page store.

Loads page descriptors and legacy policies from a JSON export of the
persisted page records:

    {
        "pages": [{"id": "...", "name": "...", "slug": "/...", "status": "published"}],
        "policies": {"privacy_policy": "...", "about_us": "..."}
    }

A top-level list is read as pages without policies.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from storenav.core.pages import LegacyPolicies, PageDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteData:
    """Pages and policies loaded for one store."""

    pages: list[PageDescriptor] = field(default_factory=list)
    policies: LegacyPolicies | None = None


class PageStore:
    """Reads site data from a JSON file on every load.

    No caching: navigation is recomputed from current data each time.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> SiteData:
        """Load pages and policies.

        Returns:
            SiteData with parsed pages and policies

        Raises:
            FileNotFoundError: If the pages file doesn't exist
            ValueError: If the file is not valid JSON or has the wrong shape.
                Individual page records that are not objects are skipped.
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Pages file not found: {self._path}")

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {self._path}: {e}") from e

        if isinstance(data, list):
            raw_pages, raw_policies = data, None
        elif isinstance(data, dict):
            raw_pages = data.get("pages", [])
            raw_policies = data.get("policies")
        else:
            raise ValueError("Pages file must contain an object or a list")

        if not isinstance(raw_pages, list):
            raise ValueError("pages must be a list")

        pages = []
        for i, record in enumerate(raw_pages):
            if not isinstance(record, dict):
                logger.warning(f"Skipping malformed page record at index {i}")
                continue
            pages.append(PageDescriptor.from_dict(record))
        policies = LegacyPolicies.from_dict(raw_policies) if raw_policies is not None else None

        logger.info(f"Loaded {len(pages)} pages from {self._path}")
        return SiteData(pages=pages, policies=policies)
