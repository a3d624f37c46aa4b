"""
Tests for site profiles and the profile registry.
"""

from unittest.mock import Mock

import pytest

from link_preview import LinkPreview, extract_generic
from link_preview.html import html_from_bytes, parse_document
from link_preview.profiles import (
    DEFAULT_REGISTRY,
    PROFILES,
    YOUTUBE_PROFILE,
    Profile,
    ProfileRegistry,
    domain_matcher,
    get_profile_for_url,
    url_host,
)

YOUTUBE_DESCRIPTION = (
    "This year, we're celebrating the Breakout Searches of 2024. From iconic "
    "performances, to history-making breakthroughs, see the moments that shaped our year i..."
)


class TestDomainMatcher:
    """Tests for domain_matcher and url_host."""

    def test_matches_host_substring(self):
        fits = domain_matcher("example.com")
        assert fits("https://www.example.com/page")
        assert fits("https://EXAMPLE.COM/")

    def test_ignores_path_matches(self):
        """The domain must be in the host, not anywhere in the URL."""
        fits = domain_matcher("youtube.com")
        assert not fits("https://example.com/redirect?to=youtube.com")

    def test_rejects_urls_without_host(self):
        fits = domain_matcher("example.com")
        assert not fits("/just/a/path")
        assert not fits("not a url")

    def test_url_host(self):
        assert url_host("https://Sub.Example.com:8443/x") == "sub.example.com"
        assert url_host("relative/path") is None


class TestYouTubeProfile:
    """Tests for the built-in YouTube profile."""

    @pytest.mark.parametrize("url", [
        "https://youtu.be/61JHONRXhjs",
        "https://www.youtube.com/watch?v=61JHONRXhjs",
        "https://m.youtube.com/shorts/abc123",
    ])
    def test_fits_youtube_urls(self, url):
        assert YOUTUBE_PROFILE.fits(url)

    def test_does_not_fit_other_sites(self):
        assert not YOUTUBE_PROFILE.fits("https://vimeo.com/12345")

    def test_extract_rewrites_image_host(self, youtube_html):
        document = html_from_bytes(youtube_html)
        preview = YOUTUBE_PROFILE.extract(document)

        assert preview.title == "Google — Year in Search 2024"
        assert preview.description == YOUTUBE_DESCRIPTION
        assert preview.image_url_str == "https://i.ytimg.com/vi/61JHONRXhjs/maxresdefault.jpg"
        assert preview.domain == "www.youtube.com"

    def test_path_is_preserved_exactly(self, youtube_html):
        document = html_from_bytes(youtube_html)
        generic = extract_generic(document)
        preview = YOUTUBE_PROFILE.extract(document)

        assert generic.image_url.hostname == "www.youtube.com"
        assert preview.image_url.hostname == "i.ytimg.com"
        assert preview.image_url.path == generic.image_url.path == "/vi/61JHONRXhjs/maxresdefault.jpg"

    def test_other_fields_untouched(self, youtube_html):
        document = html_from_bytes(youtube_html)
        generic = extract_generic(document)
        preview = YOUTUBE_PROFILE.extract(document)

        assert (preview.title, preview.description, preview.domain) == (
            generic.title, generic.description, generic.domain
        )

    def test_no_image_leaves_preview_alone(self):
        document = parse_document("<title>Video without thumbnail</title>")
        preview = YOUTUBE_PROFILE.extract(document)
        assert preview == LinkPreview(title="Video without thumbnail")


class TestRegistry:
    """Tests for ProfileRegistry selection and fallback."""

    def test_default_registry_contains_youtube(self):
        assert PROFILES[0] is YOUTUBE_PROFILE
        assert DEFAULT_REGISTRY.names == ["youtube"]
        assert get_profile_for_url("https://youtu.be/x") is YOUTUBE_PROFILE
        assert get_profile_for_url("https://example.com/") is None

    def test_first_fitting_profile_wins(self):
        first = Profile(name="first", fits=lambda url: True, extract=lambda doc: LinkPreview(title="first"))
        second = Profile(name="second", fits=lambda url: True, extract=lambda doc: LinkPreview(title="second"))
        registry = ProfileRegistry([first, second])

        assert registry.select("https://example.com/") is first
        assert registry.extract(parse_document(""), "https://example.com/").title == "first"

    def test_register_appends_at_lowest_priority(self):
        registry = ProfileRegistry()
        registry.register(Profile(name="a", fits=domain_matcher("a.test"), extract=Mock()))
        registry.register(Profile(name="b", fits=domain_matcher("b.test"), extract=Mock()))
        assert registry.names == ["a", "b"]
        assert registry.select("https://b.test/").name == "b"

    def test_no_match_uses_generic_extraction(self, full_featured_document):
        registry = ProfileRegistry()
        preview = registry.extract(full_featured_document, "https://example.com/")
        assert preview == extract_generic(full_featured_document)

    def test_profile_returning_none_falls_back(self, full_featured_document):
        registry = ProfileRegistry([Profile(name="none", fits=lambda url: True, extract=lambda doc: None)])
        preview = registry.extract(full_featured_document, "https://example.com/")
        assert preview == extract_generic(full_featured_document)

    def test_failing_profile_falls_back(self, full_featured_document):
        extract = Mock(side_effect=RuntimeError("boom"))
        registry = ProfileRegistry([Profile(name="broken", fits=lambda url: True, extract=extract)])

        preview = registry.extract(full_featured_document, "https://example.com/")

        extract.assert_called_once_with(full_featured_document)
        assert preview == extract_generic(full_featured_document)

    def test_profile_does_not_mutate_document(self, youtube_html):
        document = html_from_bytes(youtube_html)
        before = str(document)
        DEFAULT_REGISTRY.extract(document, "https://youtu.be/61JHONRXhjs")
        assert str(document) == before


class TestSourceUrlDispatch:
    """Tests for profile selection through LinkPreview entry points."""

    def test_source_url_selects_profile(self, youtube_html):
        preview = LinkPreview.from_bytes(youtube_html, url="https://youtu.be/61JHONRXhjs")
        assert preview.image_url_str == "https://i.ytimg.com/vi/61JHONRXhjs/maxresdefault.jpg"

    def test_without_source_url_profiles_are_skipped(self, youtube_html):
        preview = LinkPreview.from_bytes(youtube_html)
        assert preview.image_url.hostname == "www.youtube.com"

    def test_non_matching_url_is_generic(self, youtube_html):
        preview = LinkPreview.from_bytes(youtube_html, url="https://example.com/mirror")
        assert preview == LinkPreview.from_bytes(youtube_html)
