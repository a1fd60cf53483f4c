"""Tests for slug derivation and slug maps."""

from types import SimpleNamespace

import pytest

from dancer.slugs import build_slug_map, slugify


def ws(workspace_id, name):
    return SimpleNamespace(id=workspace_id, name=name)


class TestSlugify:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Foo Bar!", "foo-bar"),
            ("foo--bar", "foo-bar"),
            ("  BIBFRAME Monograph  ", "bibframe-monograph"),
            ("Rare_Books & Manuscripts (2024)", "rare-books-manuscripts-2024"),
            ("already-a-slug", "already-a-slug"),
            ("Café Noir", "caf-noir"),
        ],
    )
    def test_slugify(self, name, expected):
        assert slugify(name) == expected

    @pytest.mark.parametrize("name", ["", "   ", "!!!", "---", "éàü", "\t\n"])
    def test_unslugifiable_names_yield_empty(self, name):
        assert slugify(name) == ""

    @pytest.mark.parametrize("name", ["Foo Bar!", "--a--b--", "", "x", "Profile: Serials / v2"])
    def test_idempotent(self, name):
        once = slugify(name)
        assert slugify(once) == once


class TestBuildSlugMap:
    def test_first_in_listing_order_claims_slug(self):
        listing = [ws("id-1", "Foo Bar!"), ws("id-2", "foo--bar")]

        slug_map = build_slug_map(listing)

        assert slug_map.slug_to_id == {"foo-bar": "id-1"}
        assert slug_map.duplicate_slugs == {"foo-bar"}

    def test_order_decides_the_claim(self):
        listing = [ws("id-2", "foo--bar"), ws("id-1", "Foo Bar!")]

        assert build_slug_map(listing).resolve("foo-bar") == "id-2"

    def test_third_duplicate_does_not_overwrite(self):
        listing = [ws("a", "Same"), ws("b", "same"), ws("c", "SAME!")]

        slug_map = build_slug_map(listing)

        assert slug_map.resolve("same") == "a"
        assert slug_map.is_duplicate("same")

    def test_empty_slugs_are_skipped(self):
        listing = [ws("a", "???"), ws("b", "!!!"), ws("c", "Real")]

        slug_map = build_slug_map(listing)

        assert slug_map.slug_to_id == {"real": "c"}
        assert slug_map.duplicate_slugs == set()
        assert not slug_map.is_duplicate("")

    def test_unknown_slug(self):
        assert build_slug_map([ws("a", "Alpha")]).resolve("beta") is None

    def test_empty_listing(self):
        slug_map = build_slug_map([])
        assert slug_map.slug_to_id == {}
        assert slug_map.duplicate_slugs == set()
