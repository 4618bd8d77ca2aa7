"""Navigation generation for page-builder pages.

Derives header and footer navigation from independently authored pages.
Pages are categorized by keyword, placed by explicit setting or by
category heuristic, ranked by a static order table, merged with synthetic
entries for legacy policy texts, and finally split into header, footer and
footer columns.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, TypedDict, cast

from storenav.core.pages import FOOTER_COLUMNS, LegacyPolicies, PageDescriptor
from storenav.core.types import Category, Location

logger = logging.getLogger(__name__)

# Lower numbers appear first. Order of entries matters: the substring pass
# in navigation_order() takes the first key contained in the page slug/name.
NAVIGATION_ORDER: tuple[tuple[str, int], ...] = (
    # Header (primary)
    ("home", 1),
    ("about", 2),
    ("about-us", 2),
    ("products", 3),
    ("products-services", 3),
    ("services", 4),
    ("case-studies", 5),
    ("portfolio", 6),
    ("blog", 7),
    ("testimonials", 8),
    ("contact", 9),
    ("contact-us", 9),
    # Footer (secondary/legal)
    ("privacy", 50),
    ("privacy-policy", 50),
    ("terms", 51),
    ("terms-of-service", 51),
    ("returns", 52),
    ("returns-policy", 52),
    ("shipping", 53),
    ("faq", 54),
    ("help", 55),
    ("support", 55),
    ("careers", 56),
    ("press", 57),
    ("sitemap", 58),
    # Team/company
    ("team", 20),
    ("our-team", 20),
    ("leadership", 21),
    ("history", 22),
    ("mission", 23),
    ("custom", 100),
)

_ORDER_INDEX = dict(NAVIGATION_ORDER)

# First matching group wins
CATEGORY_KEYWORDS: tuple[tuple[Category, tuple[str, ...]], ...] = (
    (
        "primary",
        (
            "home",
            "products",
            "services",
            "case studies",
            "case-studies",
            "testimonials",
            "team",
            "our team",
            "portfolio",
            "blog",
        ),
    ),
    ("legal", ("privacy", "terms", "returns", "legal", "policy")),
    ("support", ("contact", "support", "help", "faq", "feedback")),
    (
        "company",
        (
            "about",
            "about us",
            "team",
            "staff",
            "leadership",
            "careers",
            "jobs",
            "history",
            "mission",
        ),
    ),
)

CATEGORY_DEFAULT_ORDER: dict[str, int] = {
    "primary": 10,
    "support": 30,
    "company": 40,
    "legal": 50,
    "custom": 100,
}
UNMATCHED_ORDER = 999

FOOTER_GROUP_ORDER: tuple[Category, ...] = (
    "primary",
    "support",
    "company",
    "custom",
    "legal",
)

UNASSIGNED_FOOTER_COLUMN = 2

ESSENTIAL_PAGES = ("contact", "about", "privacy")
HEADER_WARNING_THRESHOLD = 8

_EXPLICIT_LOCATIONS = ("header", "footer", "both")
_HEADER_LOCATIONS = ("header", "both")
_FOOTER_LOCATIONS = ("footer", "both")


class NavigationItemDict(TypedDict):
    """Dictionary representation of a navigation item."""

    id: str
    name: str
    slug: str
    order: int
    location: str
    category: str
    footerColumn: int | None
    isActive: bool


@dataclass(frozen=True)
class NavigationItem:
    """Resolved navigation entry."""

    id: str
    name: str
    slug: str
    order: int
    location: Location
    category: Category
    footer_column: int | None = None
    is_active: bool = True

    @property
    def is_synthetic(self) -> bool:
        """Item was synthesized from a legacy policy, not a real page."""
        return self.id.startswith("policy-")

    def to_dict(self) -> NavigationItemDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "order": self.order,
            "location": self.location,
            "category": self.category,
            "footerColumn": self.footer_column,
            "isActive": self.is_active,
        }


@dataclass(frozen=True)
class HeaderConfig:
    """Header layout options."""

    max_items: int = 7
    show_dropdowns: bool = True
    mobile_collapse: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "maxItems": self.max_items,
            "showDropdowns": self.show_dropdowns,
            "mobileCollapse": self.mobile_collapse,
        }


@dataclass(frozen=True)
class FooterConfig:
    """Footer layout options."""

    columns: int = 4
    show_social_links: bool = True
    show_copyright: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "columns": self.columns,
            "showSocialLinks": self.show_social_links,
            "showCopyright": self.show_copyright,
        }


@dataclass(frozen=True)
class NavigationConfig:
    """Layout configuration supplied by the settings UI.

    Only header.max_items affects generation. The remaining flags are
    passed through to render layers.
    """

    header: HeaderConfig = field(default_factory=HeaderConfig)
    footer: FooterConfig = field(default_factory=FooterConfig)

    def to_dict(self) -> dict[str, Any]:
        return {"header": self.header.to_dict(), "footer": self.footer.to_dict()}


@dataclass
class GeneratedNavigation:
    """Header, footer and footer column lists from one generation pass."""

    header: list[NavigationItem]
    footer: list[NavigationItem]
    footer_columns: dict[int, list[NavigationItem]]

    def all_items(self) -> list[NavigationItem]:
        """Items from header then footer, each item listed once."""
        seen: set[int] = set()
        items: list[NavigationItem] = []
        for item in (*self.header, *self.footer):
            if id(item) not in seen:
                seen.add(id(item))
                items.append(item)
        return items

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "header": [item.to_dict() for item in self.header],
            "footer": [item.to_dict() for item in self.footer],
            "footerColumns": {
                str(column): [item.to_dict() for item in items]
                for column, items in self.footer_columns.items()
            },
        }


@dataclass
class ValidationReport:
    """Advisory structural report for a navigation list."""

    is_valid: bool
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "warnings": list(self.warnings),
            "errors": list(self.errors),
        }


def categorize_page(name: str | None, slug: str | None) -> Category:
    """Determine navigation category from page name and slug."""
    normalized_name = (name or "").lower()
    normalized_slug = _strip_leading_slash((slug or "").lower())

    for category, terms in CATEGORY_KEYWORDS:
        if any(term in normalized_name or term in normalized_slug for term in terms):
            return category
    return "custom"


def determine_location(category: Category, name: str | None) -> Location:
    """Heuristic placement for pages without an explicit setting."""
    if category == "primary":
        return "header"
    if category == "legal":
        return "footer"
    if "contact" in (name or "").lower():
        return "both"
    if category in ("support", "company"):
        return "both"
    return "header"


def resolve_location(page: PageDescriptor, category: Category) -> Location | None:
    """Resolve final placement for a page.

    Returns:
        Location, or None when the page opted out of navigation
    """
    placement = page.navigation_placement
    if placement == "none":
        return None
    if placement in _EXPLICIT_LOCATIONS:
        return cast(Location, placement)
    return determine_location(category, page.name)


def navigation_order(name: str | None, slug: str | None, category: str) -> int:
    """Rank a page for sorting; lower sorts first.

    Lookup sequence: exact slug key, exact name key, first table key
    contained in slug or name, then the category default.
    """
    normalized_slug = _strip_leading_slash((slug or "").lower())
    normalized_name = re.sub(r"\s+", "-", (name or "").lower())

    if normalized_slug in _ORDER_INDEX:
        return _ORDER_INDEX[normalized_slug]
    if normalized_name in _ORDER_INDEX:
        return _ORDER_INDEX[normalized_name]

    for key, order in NAVIGATION_ORDER:
        if key in normalized_slug or key in normalized_name:
            return order

    return CATEGORY_DEFAULT_ORDER.get(category, UNMATCHED_ORDER)


def slugify(name: str) -> str:
    """Build a public path from a page name."""
    slug = re.sub(r"[^a-z0-9\s-]", "", name.lower())
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug).strip("-")
    return f"/{slug}"


def merge_legacy_policies(
    items: Sequence[NavigationItem],
    policies: LegacyPolicies | None,
) -> list[NavigationItem]:
    """Add synthetic entries for legacy policies without an authored page.

    About Us and Returns are suppressed only by real page-builder pages.
    Privacy and Terms are suppressed by any item whose name mentions them.
    """
    merged = list(items)
    if policies is None:
        return merged

    if policies.has("about_us") and not any(
        _is_real_page(item, names=("about us", "about"), slug="/about")
        for item in merged
    ):
        merged.append(
            NavigationItem(
                id="policy-about-us",
                name="About Us",
                slug="/about",
                order=_ORDER_INDEX.get("about-us", 2),
                location="both",
                category="primary",
                footer_column=2,
            ),
        )

    if policies.has("privacy_policy") and not _any_name_contains(merged, "privacy"):
        merged.append(
            NavigationItem(
                id="policy-privacy",
                name="Privacy Policy",
                slug="/privacy",
                order=_ORDER_INDEX.get("privacy", 50),
                location="footer",
                category="legal",
                footer_column=4,
            ),
        )

    if policies.has("terms_of_service") and not _any_name_contains(merged, "terms"):
        merged.append(
            NavigationItem(
                id="policy-terms",
                name="Terms & Conditions",
                slug="/terms",
                order=_ORDER_INDEX.get("terms", 51),
                location="footer",
                category="legal",
                footer_column=4,
            ),
        )

    if policies.has("returns_policy") and not any(
        _is_real_page(item, names=("returns", "returns policy"), slug="/returns")
        for item in merged
    ):
        merged.append(
            NavigationItem(
                id="policy-returns",
                name="Returns Policy",
                slug="/returns",
                order=_ORDER_INDEX.get("returns", 52),
                location="footer",
                category="legal",
                footer_column=4,
            ),
        )

    return merged


def organize_footer(items: Iterable[NavigationItem]) -> list[NavigationItem]:
    """Group footer items by category, legal last.

    Relative order inside each group is preserved.
    """
    grouped: dict[str, list[NavigationItem]] = {
        category: [] for category in FOOTER_GROUP_ORDER
    }
    for item in items:
        grouped[item.category].append(item)
    return [item for category in FOOTER_GROUP_ORDER for item in grouped[category]]


def bucket_footer_columns(
    items: Sequence[NavigationItem],
) -> dict[int, list[NavigationItem]]:
    """Split footer items into the four footer columns.

    Unassigned items follow the natively assigned items of column 2.
    """
    columns: dict[int, list[NavigationItem]] = {
        column: [item for item in items if item.footer_column == column]
        for column in FOOTER_COLUMNS
    }
    columns[UNASSIGNED_FOOTER_COLUMN].extend(
        item for item in items if item.footer_column not in FOOTER_COLUMNS
    )
    return columns


class NavigationManager:
    """Generates and inspects navigation for a set of pages.

    Holds only the current NavigationConfig; every other operation is a
    pure function of the config and its arguments.
    """

    def __init__(self, config: NavigationConfig | None = None) -> None:
        self._config = config if config is not None else NavigationConfig()

    @property
    def config(self) -> NavigationConfig:
        return self._config

    def update_config(
        self,
        *,
        header: HeaderConfig | Mapping[str, Any] | None = None,
        footer: FooterConfig | Mapping[str, Any] | None = None,
    ) -> NavigationConfig:
        """Merge a partial configuration into the current one.

        Each section may be a complete config object, which replaces the
        section, or a mapping of field overrides, which is merged into it.

        Args:
            header: Header section or overrides
            footer: Footer section or overrides

        Returns:
            The new configuration

        Raises:
            ValueError: If overrides name unknown fields or carry bad values
        """
        new_header = _merge_section(self._config.header, header, "header")
        new_footer = _merge_section(self._config.footer, footer, "footer")
        _check_header(new_header)
        _check_footer(new_footer)
        self._config = replace(self._config, header=new_header, footer=new_footer)
        logger.debug(f"Navigation config updated: {asdict(self._config)}")
        return self._config

    def generate_navigation(
        self,
        pages: Iterable[PageDescriptor],
        policies: LegacyPolicies | None = None,
    ) -> GeneratedNavigation:
        """Convert pages into header, footer and footer column lists.

        Drafts and pages without a slug are skipped, as are pages whose
        placement is "none". Never raises for malformed page data.

        Args:
            pages: Page descriptors from the page store
            policies: Legacy policy texts, if any

        Returns:
            GeneratedNavigation for the current config
        """
        items: list[NavigationItem] = []
        skipped = 0
        for page in pages:
            item = self._build_item(page)
            if item is None:
                skipped += 1
                continue
            items.append(item)

        items = merge_legacy_policies(items, policies)
        items.sort(key=lambda item: item.order)

        max_items = max(self._config.header.max_items, 0)
        header = [item for item in items if item.location in _HEADER_LOCATIONS]
        footer_items = [item for item in items if item.location in _FOOTER_LOCATIONS]

        logger.debug(
            f"Generated navigation from {len(items)} items "
            f"({skipped} pages skipped, header capped at {max_items})",
        )

        return GeneratedNavigation(
            header=header[:max_items],
            footer=organize_footer(footer_items),
            footer_columns=bucket_footer_columns(footer_items),
        )

    def find_navigation_item(
        self,
        slug: str,
        navigation: Iterable[NavigationItem],
    ) -> NavigationItem | None:
        """Get navigation item by exact slug."""
        return next((item for item in navigation if item.slug == slug), None)

    def get_breadcrumbs(
        self,
        current_slug: str,
        navigation: Sequence[NavigationItem],
    ) -> list[NavigationItem]:
        """Build breadcrumbs for a page.

        The model is flat: at most Home followed by the current page.
        Home itself has no breadcrumbs.
        """
        if current_slug == "/":
            return []

        breadcrumbs: list[NavigationItem] = []
        home = next((item for item in navigation if _is_home(item)), None)
        if home is not None:
            breadcrumbs.append(home)

        current = self.find_navigation_item(current_slug, navigation)
        if current is not None:
            breadcrumbs.append(current)

        return breadcrumbs

    def validate_navigation(
        self,
        navigation: Sequence[NavigationItem],
    ) -> ValidationReport:
        """Check navigation structure.

        Errors: missing home page, duplicate slugs.
        Warnings: missing essential pages, oversized header.
        """
        warnings: list[str] = []
        errors: list[str] = []

        if not any(_is_home(item) for item in navigation):
            errors.append("No home page found in navigation")

        seen: set[str] = set()
        duplicates: list[str] = []
        for item in navigation:
            if item.slug in seen:
                duplicates.append(item.slug)
            seen.add(item.slug)
        if duplicates:
            errors.append(f"Duplicate page slugs found: {', '.join(duplicates)}")

        for essential in ESSENTIAL_PAGES:
            if not any(
                essential in item.name.lower() or essential in item.slug.lower()
                for item in navigation
            ):
                warnings.append(
                    f"Consider adding a {essential} page for better user experience",
                )

        header_count = sum(1 for item in navigation if item.location in _HEADER_LOCATIONS)
        if header_count > HEADER_WARNING_THRESHOLD:
            warnings.append(
                "Header navigation has many items - "
                "consider using dropdowns or reducing items",
            )

        return ValidationReport(
            is_valid=not errors,
            warnings=warnings,
            errors=errors,
        )

    def _build_item(self, page: PageDescriptor) -> NavigationItem | None:
        if not page.is_navigable:
            return None

        category = categorize_page(page.name, page.slug)
        location = resolve_location(page, category)
        if location is None:
            return None

        slug = page.slug or ""
        if not slug.strip():
            slug = slugify(page.name)

        return NavigationItem(
            id=page.id,
            name=page.name,
            slug=slug,
            order=navigation_order(page.name, page.slug, category),
            location=location,
            category=category,
            footer_column=page.footer_column,
        )


def _strip_leading_slash(value: str) -> str:
    return value[1:] if value.startswith("/") else value


def _is_home(item: NavigationItem) -> bool:
    return item.slug == "/" or item.name.lower() == "home"


def _is_real_page(item: NavigationItem, *, names: tuple[str, ...], slug: str) -> bool:
    matches = item.name.lower() in names or item.slug.lower() == slug
    return matches and not item.is_synthetic


def _any_name_contains(items: Iterable[NavigationItem], term: str) -> bool:
    return any(term in item.name.lower() for item in items)


def _merge_section(current: Any, change: Any, section: str) -> Any:
    if change is None:
        return current
    if isinstance(change, type(current)):
        return change
    if not isinstance(change, Mapping):
        raise ValueError(f"{section} must be a dictionary")

    known = {f.name for f in fields(current)}
    unknown = sorted(set(change) - known)
    if unknown:
        raise ValueError(f"Unknown {section} option(s): {', '.join(unknown)}")

    for f in fields(current):
        if f.name not in change:
            continue
        value = change[f.name]
        expected = type(getattr(current, f.name))
        # bool is an int subclass
        if type(value) is not expected:
            raise ValueError(f"{section}.{f.name} must be {_type_name(expected)}")

    return replace(current, **change)


def _check_header(header: HeaderConfig) -> None:
    if header.max_items < 0:
        raise ValueError("header.max_items must not be negative")


def _check_footer(footer: FooterConfig) -> None:
    if footer.columns not in FOOTER_COLUMNS:
        raise ValueError("footer.columns must be between 1 and 4")


def _type_name(expected: type) -> str:
    return {bool: "a boolean", int: "an integer"}.get(expected, expected.__name__)
