"""Page descriptors and legacy policies.

Read-only views over records owned by the external page store. Parsing is
permissive: malformed fields degrade to "absent" rather than failing, so a
single bad record never breaks navigation for the whole site.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

POLICY_FIELDS = ("privacy_policy", "terms_of_service", "returns_policy", "about_us")

FOOTER_COLUMNS = (1, 2, 3, 4)


@dataclass(frozen=True)
class PageDescriptor:
    """Page metadata needed for navigation."""

    id: str
    name: str
    slug: str | None = None
    status: str = "draft"
    navigation_placement: str | None = None
    footer_column: int | None = None

    @property
    def is_navigable(self) -> bool:
        """Published pages with a slug are eligible for navigation."""
        return self.status == "published" and bool(self.slug)

    @classmethod
    def from_dict(cls, data: object) -> PageDescriptor:
        """Build descriptor from a persisted page record.

        Accepts both camelCase and snake_case keys for the optional
        placement fields.

        Args:
            data: Raw page record

        Returns:
            PageDescriptor instance

        Raises:
            ValueError: If the record is not a mapping
        """
        if not isinstance(data, Mapping):
            raise ValueError("page record must be a dictionary")

        placement = _first(data, "navigationPlacement", "navigation_placement")
        column = _first(data, "footerColumn", "footer_column")

        return cls(
            id=_as_str(data.get("id")) or "",
            name=_as_str(data.get("name")) or "",
            slug=_as_str(data.get("slug")),
            status=_as_str(data.get("status")) or "draft",
            navigation_placement=_as_str(placement),
            footer_column=_parse_footer_column(column),
        )


@dataclass(frozen=True)
class LegacyPolicies:
    """Policy texts stored outside the page builder."""

    privacy_policy: str | None = None
    terms_of_service: str | None = None
    returns_policy: str | None = None
    about_us: str | None = None

    def has(self, field: str) -> bool:
        """Check whether a policy field carries any content."""
        if field not in POLICY_FIELDS:
            raise ValueError(f"Unknown policy field: {field}")
        value = getattr(self, field)
        return bool(value)

    @classmethod
    def from_dict(cls, data: object) -> LegacyPolicies:
        """Build policies from a settings record, ignoring unknown keys."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError("policies must be a dictionary")
        return cls(**{name: _as_str(data.get(name)) for name in POLICY_FIELDS})

    def to_dict(self) -> dict[str, str]:
        return {
            name: value
            for name in POLICY_FIELDS
            if (value := getattr(self, name)) is not None
        }


def _first(data: Mapping, *keys: str) -> object:
    for key in keys:
        if key in data:
            return data[key]
    return None


def _as_str(value: object) -> str | None:
    return value if isinstance(value, str) else None


def _parse_footer_column(value: object) -> int | None:
    # bool is an int subclass
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int):
        return None
    return value if value in FOOTER_COLUMNS else None
