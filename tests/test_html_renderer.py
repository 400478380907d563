import logging
from datetime import timedelta

import pytest
from jinja2 import TemplateSyntaxError

from adapters import html_renderer
from adapters.html_renderer import (
    TemplatesNotFoundError,
    build_environment,
    check_templates,
    export_listing_html,
    render_listing_html,
)
from core.config import AppSettings
from core.domain.models import ListingContext
from core.services.listing_renderer import render_listing


def test_templates_are_valid(settings):
    names = check_templates(settings)
    assert "releases.html" in names
    assert "base.html" in names


def test_recent_listing_html(settings, make_release, now):
    releases = [
        make_release("serde", "1.0.0"),
        make_release("failing", "0.1.0", rustdoc_status=False, description="no <docs>"),
    ]
    context = ListingContext(release_type="recent", page_number=5, show_previous_page=True)
    html = render_listing_html(page=render_listing(releases, context, now=now), settings=settings)

    assert '<a href="/serde/1.0.0/serde" class="release">' in html
    assert '<a href="/crate/failing/0.1.0" class="release">' in html
    assert '<div class="name">serde-1.0.0</div>' in html
    assert '<div class="date" title="2024-06-07T12:00:00Z">3 days ago</div>' in html
    assert "no &lt;docs&gt;" in html
    assert 'href="/releases/recent/4"' in html
    assert "Next Page" not in html
    assert html.index("serde-1.0.0") < html.index("failing-0.1.0")


def test_author_listing_html_shows_stars(settings, make_release, now):
    context = ListingContext(release_type="author", author="dtolnay", title="dtolnay's releases")
    page = render_listing([make_release(stars=42)], context, now=now)
    html = render_listing_html(page=page, settings=settings)

    assert '<div class="date" title="Published 3 days ago">42 <span class="star">' in html
    assert 'class="author-title"' in html
    assert "dtolnay" in html
    assert "<title>dtolnay&#39;s releases</title>" in html


def test_search_listing_html_keeps_query(settings, now):
    context = ListingContext(release_type="search", page_number=2, show_next_page=True, search_query="tokio runtime")
    html = render_listing_html(page=render_listing([], context, now=now), settings=settings)
    assert 'href="/releases/search/3?search=tokio%20runtime"' in html


def test_empty_listing_renders_no_message(settings, now):
    page = render_listing([], ListingContext(release_type="recent"), now=now)
    html = render_listing_html(page=page, settings=settings)
    assert "<li>" not in html
    assert "<h1>Releases</h1>" in html
    assert 'class="pagination"' in html
    assert "pure-button" not in html


def test_globals_come_from_settings(now):
    settings = AppSettings(
        _env_file=None,
        global_alert="Builds are delayed",
        site_version="9.9.9",
        rustc_resource_suffix="-nightly",
    )
    html = render_listing_html(page=render_listing([], ListingContext(release_type="recent"), now=now), settings=settings)
    assert '<div class="global-alert">Builds are delayed</div>' in html
    assert "docs-listing 9.9.9" in html
    assert 'data-rustc-suffix="-nightly"' in html


def test_missing_resource_suffix_degrades(now, caplog):
    html_renderer._warn_missing_suffix.cache_clear()
    settings = AppSettings(_env_file=None, rustc_resource_suffix=None)
    page = render_listing([], ListingContext(release_type="recent"), now=now)

    with caplog.at_level(logging.WARNING, logger="adapters.html_renderer"):
        first = render_listing_html(page=page, settings=settings)
        second = render_listing_html(page=page, settings=settings)

    assert 'data-rustc-suffix="???"' in first
    assert 'data-rustc-suffix="???"' in second
    suffix_records = [r for r in caplog.records if "resource suffix" in r.getMessage()]
    assert len(suffix_records) == 1
    assert suffix_records[0].levelno == logging.WARNING


def test_timeformat_and_dedent_filters(settings, now):
    env = build_environment(settings)
    template = env.from_string(
        "{{ value | timeformat(relative=true, now=now) }}|{{ 90 | timeformat }}|{{ text | dedent }}"
    )
    rendered = template.render(value=now - timedelta(hours=3), now=now, text="  a\n  b")
    assert rendered == "3 hours ago|1.5 minutes|a\nb"


@pytest.mark.parametrize(
    "value",
    ["2024-06-10T09:00:00Z", "2024-06-10T11:00:00+02:00", "2024-06-10T09:00:00"],
)
def test_timeformat_accepts_serialized_timestamps(settings, now, value):
    env = build_environment(settings)
    template = env.from_string("{{ value | timeformat(relative=true, now=now) }}")
    assert template.render(value=value, now=now) == "3 hours ago"


def test_export_listing_html(tmp_path, settings, make_release, now):
    page = render_listing([make_release()], ListingContext(release_type="recent"), now=now)
    out = export_listing_html(page=page, output_path=tmp_path / "out" / "releases.html", settings=settings)
    assert out.exists()
    assert "serde-1.0.0" in out.read_text(encoding="utf-8")


def test_missing_templates_dir_raises(tmp_path):
    settings = AppSettings(_env_file=None, templates_dir=tmp_path / "missing")
    with pytest.raises(TemplatesNotFoundError):
        check_templates(settings)


def test_broken_template_is_reported(tmp_path):
    (tmp_path / "releases.html").write_text("{% for row in page.rows %}", encoding="utf-8")
    settings = AppSettings(_env_file=None, templates_dir=tmp_path, rustc_resource_suffix="x")
    with pytest.raises(TemplateSyntaxError):
        check_templates(settings)


def test_packaged_templates_dir_exists():
    assert (html_renderer._TEMPLATES_DIR / "releases.html").is_file()
