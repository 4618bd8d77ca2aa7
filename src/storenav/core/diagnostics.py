"""Publish and navigation health checks.

Runs the navigation generator against loaded page data and reports whether
slugs are well formed and every eligible page is reachable.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from storenav.core.navigation import NavigationItem, NavigationManager
from storenav.core.pages import LegacyPolicies, PageDescriptor

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Outcome of a single check."""

    success: bool
    message: str
    details: Any = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"success": self.success, "message": self.message}
        if self.details is not None:
            result["details"] = self.details
        return result


@dataclass
class DiagnosticsReport:
    """All check results; overall is true only when every check passed."""

    results: list[CheckResult] = field(default_factory=list)

    @property
    def overall(self) -> bool:
        return all(result.success for result in self.results)

    def to_dict(self) -> dict[str, Any]:
        return {
            "overall": self.overall,
            "results": [result.to_dict() for result in self.results],
        }


@dataclass
class SlugReport:
    """Slug status counts for a page set."""

    total: int
    with_slugs: int
    without_slugs: list[PageDescriptor]
    published: list[PageDescriptor]
    published_with_slugs: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "withSlugs": self.with_slugs,
            "withoutSlugs": [_page_summary(page) for page in self.without_slugs],
            "published": len(self.published),
            "publishedWithSlugs": self.published_with_slugs,
        }


def run_navigation_checks(
    pages: Sequence[PageDescriptor],
    manager: NavigationManager,
    policies: LegacyPolicies | None = None,
) -> DiagnosticsReport:
    """Run publish and navigation checks over a page set.

    Args:
        pages: All pages, drafts included
        manager: Manager holding the navigation config to check against
        policies: Legacy policy texts, if any

    Returns:
        DiagnosticsReport with one result per check
    """
    report = DiagnosticsReport()
    report.results.append(
        CheckResult(
            success=True,
            message=f"Loaded {len(pages)} total pages",
            details=[_page_summary(page) for page in pages],
        ),
    )

    missing = [page for page in pages if not page.slug]
    if missing:
        report.results.append(
            CheckResult(
                success=False,
                message=f"Found {len(missing)} pages without slugs",
                details=[_page_summary(page) for page in missing],
            ),
        )
    else:
        report.results.append(CheckResult(success=True, message="All pages have slugs"))

    published = [page for page in pages if page.status == "published"]
    if not published:
        report.results.append(
            CheckResult(success=True, message="No published pages to generate navigation"),
        )
        return report

    navigation = manager.generate_navigation(published, policies)
    report.results.append(
        CheckResult(
            success=True,
            message=(
                f"Generated navigation with {len(navigation.header)} header items "
                f"and {len(navigation.footer)} footer items"
            ),
            details={
                "headerItems": [_item_summary(item) for item in navigation.header],
                "footerItems": [_item_summary(item) for item in navigation.footer],
            },
        ),
    )

    all_items = navigation.all_items()
    malformed = [item for item in all_items if not item.slug.startswith("/")]
    if malformed:
        report.results.append(
            CheckResult(
                success=False,
                message=f"Found {len(malformed)} navigation items with malformed slugs",
                details=[_item_summary(item) for item in malformed],
            ),
        )
    else:
        report.results.append(
            CheckResult(success=True, message="All navigation items have slugs"),
        )

    reachable_ids = {item.id for item in all_items}
    unreachable = [
        page
        for page in published
        if page.is_navigable
        and page.navigation_placement != "none"
        and page.id not in reachable_ids
    ]
    if unreachable:
        report.results.append(
            CheckResult(
                success=False,
                message=f"Found {len(unreachable)} published pages missing from navigation",
                details=[_page_summary(page) for page in unreachable],
            ),
        )
    else:
        report.results.append(
            CheckResult(success=True, message="Every published page is reachable"),
        )

    validation = manager.validate_navigation(all_items)
    report.results.append(
        CheckResult(
            success=validation.is_valid,
            message=(
                "Navigation structure is valid"
                if validation.is_valid
                else f"Navigation structure has {len(validation.errors)} error(s)"
            ),
            details=validation.to_dict(),
        ),
    )

    logger.info(
        f"Navigation checks finished: {sum(r.success for r in report.results)}"
        f"/{len(report.results)} passed",
    )
    return report


def slug_report(pages: Sequence[PageDescriptor]) -> SlugReport:
    """Count pages with and without slugs."""
    published = [page for page in pages if page.status == "published"]
    return SlugReport(
        total=len(pages),
        with_slugs=sum(1 for page in pages if page.slug),
        without_slugs=[page for page in pages if not page.slug],
        published=published,
        published_with_slugs=sum(1 for page in published if page.slug),
    )


def _page_summary(page: PageDescriptor) -> dict[str, Any]:
    return {"id": page.id, "name": page.name, "slug": page.slug, "status": page.status}


def _item_summary(item: NavigationItem) -> dict[str, str]:
    return {"name": item.name, "slug": item.slug}
