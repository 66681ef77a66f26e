from __future__ import annotations

from apphub_core.apps.discovery import DEFAULT_ICON, AppTile
from apphub_core.config import PageConfig
from apphub_core.ui.router import render_page


def _tile(name: str, title: str, *, favicon: bool = False) -> AppTile:
    icon = f"{name}/favicon.ico" if favicon else DEFAULT_ICON
    return AppTile(name=name, title=title, icon_source=icon, link_target=f"{name}/")


def test_render_page_one_tile_per_app() -> None:
    html = render_page([_tile("my-app", "My App", favicon=True), _tile("other", "Other")])

    assert html.startswith("<!DOCTYPE html>")
    assert html.count('class="app-tile"') == 2
    assert '<a href="my-app/" class="app-tile">' in html
    assert '<img src="my-app/favicon.ico" alt="My App icon">' in html
    assert "<span>Other</span>" in html
    assert f'src="{DEFAULT_ICON}"' in html
    assert "no-apps" not in html.split("</style>", 1)[1]


def test_render_page_empty_shows_placeholder() -> None:
    html = render_page([])

    assert 'class="app-tile"' not in html
    assert (
        '<p class="no-apps">No speed test applications found in the web root.</p>' in html
    )


def test_render_page_uses_page_text() -> None:
    page = PageConfig(title="Lab", heading="Pick a tool", empty_message="Nothing here")
    html = render_page([], page=page)

    assert "<title>Lab</title>" in html
    assert "<h1>Pick a tool</h1>" in html
    assert "Nothing here" in html


def test_render_page_escapes_untrusted_names() -> None:
    name = '"><script>alert(1)</script>'
    html = render_page([_tile(name, name)])

    body = html.split("</style>", 1)[1]
    assert "<script>" not in body
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in body
    assert 'alt="&#34;&gt;&lt;script&gt;alert(1)&lt;/script&gt; icon"' in body
    assert 'href="%22%3E%3Cscript%3Ealert%281%29%3C/script%3E/"' in body


def test_render_page_escapes_page_text() -> None:
    page = PageConfig(heading="<b>Apps</b>", empty_message="<i>none</i>")
    html = render_page([], page=page)

    assert "<b>Apps</b>" not in html
    assert "&lt;b&gt;Apps&lt;/b&gt;" in html
    assert "&lt;i&gt;none&lt;/i&gt;" in html


def test_render_page_error_replaces_grid() -> None:
    html = render_page([_tile("a", "A")], error="Cannot read apps")

    assert '<p class="hub-error">Cannot read apps</p>' in html
    assert 'class="app-tile"' not in html
    assert '<p class="no-apps">' not in html
