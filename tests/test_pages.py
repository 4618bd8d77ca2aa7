"""Tests for page descriptors and legacy policies."""

import pytest
from storenav.core.pages import LegacyPolicies, PageDescriptor


class TestPageDescriptorFromDict:
    """Tests for PageDescriptor.from_dict()."""

    def test__camel_case_record(self) -> None:
        page = PageDescriptor.from_dict(
            {
                "id": "p1",
                "name": "FAQ",
                "slug": "/faq",
                "status": "published",
                "navigationPlacement": "footer",
                "footerColumn": 3,
            },
        )

        assert page == PageDescriptor(
            id="p1",
            name="FAQ",
            slug="/faq",
            status="published",
            navigation_placement="footer",
            footer_column=3,
        )

    def test__snake_case_record(self) -> None:
        page = PageDescriptor.from_dict(
            {
                "id": "p1",
                "name": "FAQ",
                "slug": "/faq",
                "status": "published",
                "navigation_placement": "both",
                "footer_column": 1,
            },
        )

        assert page.navigation_placement == "both"
        assert page.footer_column == 1

    def test__missing_fields__defaults(self) -> None:
        page = PageDescriptor.from_dict({})

        assert page.id == ""
        assert page.name == ""
        assert page.slug is None
        assert page.status == "draft"
        assert page.navigation_placement is None
        assert page.footer_column is None

    @pytest.mark.parametrize("column", [0, 5, "2", True, None, 2.5, 5.0])
    def test__invalid_footer_column__unassigned(self, column: object) -> None:
        page = PageDescriptor.from_dict({"id": "p1", "footerColumn": column})

        assert page.footer_column is None

    def test__integral_float_footer_column__accepted(self) -> None:
        page = PageDescriptor.from_dict({"id": "p1", "footerColumn": 3.0})

        assert page.footer_column == 3

    def test__non_string_slug__absent(self) -> None:
        page = PageDescriptor.from_dict({"id": "p1", "slug": 42})

        assert page.slug is None

    def test__non_mapping__raises(self) -> None:
        with pytest.raises(ValueError, match="page record must be a dictionary"):
            PageDescriptor.from_dict(["not", "a", "record"])


class TestPageDescriptorIsNavigable:
    """Tests for PageDescriptor.is_navigable."""

    def test__published_with_slug(self) -> None:
        page = PageDescriptor(id="p", name="About", slug="/about", status="published")

        assert page.is_navigable

    def test__draft(self) -> None:
        page = PageDescriptor(id="p", name="About", slug="/about", status="draft")

        assert not page.is_navigable

    @pytest.mark.parametrize("slug", [None, ""])
    def test__missing_slug(self, slug: str | None) -> None:
        page = PageDescriptor(id="p", name="About", slug=slug, status="published")

        assert not page.is_navigable


class TestLegacyPolicies:
    """Tests for LegacyPolicies."""

    def test__from_dict__reads_known_fields(self) -> None:
        policies = LegacyPolicies.from_dict(
            {"privacy_policy": "p", "about_us": "a", "shipping_policy": "s"},
        )

        assert policies == LegacyPolicies(privacy_policy="p", about_us="a")
        assert policies.to_dict() == {"privacy_policy": "p", "about_us": "a"}

    def test__from_dict__none__empty(self) -> None:
        assert LegacyPolicies.from_dict(None) == LegacyPolicies()

    def test__from_dict__non_string_values__absent(self) -> None:
        policies = LegacyPolicies.from_dict({"terms_of_service": 12})

        assert policies.terms_of_service is None

    def test__from_dict__non_mapping__raises(self) -> None:
        with pytest.raises(ValueError, match="policies must be a dictionary"):
            LegacyPolicies.from_dict("privacy")

    def test__has__requires_non_empty_text(self) -> None:
        policies = LegacyPolicies(
            privacy_policy="text",
            terms_of_service="  ",
            about_us="",
        )

        assert policies.has("privacy_policy")
        assert policies.has("terms_of_service")
        assert not policies.has("about_us")
        assert not policies.has("returns_policy")

    def test__has__unknown_field__raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown policy field"):
            LegacyPolicies().has("shipping_policy")
