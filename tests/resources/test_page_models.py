from __future__ import annotations

import datetime as dt
import logging

from helpers.site import page


def test_page_title_defaults_to_titleized_slug(site):
    site.write("base", "pages/about-us.md", "Hello")
    ctx = site.context(config={})

    record = ctx.collection("pages").generate()["about-us.md"]

    assert record["title"] == "About Us"
    assert record["url"] == "/about-us"
    assert record["id"] == "about-us.md"
    assert record["pointer"]["resource"] == "pages"


def test_front_matter_title_is_kept(site):
    site.write("base", "pages/about.md", page({"title": "Who we are", "layout": "page"}, "Body"))
    ctx = site.context(config={})

    record = ctx.collection("pages").generate()["about.md"]

    assert record["title"] == "Who we are"
    assert record["layout"] == "page"


def test_index_pages_map_to_their_directory(site):
    site.write("base", "pages/index.md")
    site.write("base", "pages/docs/index.md")
    ctx = site.context(config={"base_url": "/blog/"})

    records = ctx.collection("pages").generate()

    assert records["index.md"]["url"] == "/blog/"
    assert records["docs/index.md"]["url"] == "/blog/docs"


def test_malformed_front_matter_falls_back_to_body(site, caplog):
    site.write("base", "pages/broken.md", "---\ntitle: [unclosed\n---\nBody")
    ctx = site.context(config={})

    with caplog.at_level(logging.WARNING):
        record = ctx.collection("pages").generate()["broken.md"]

    assert record["title"] == "Broken"
    assert "ignoring front matter" in caplog.text


def test_post_date_and_url_come_from_filename(site):
    site.write("base", "posts/2024-03-05-hello-world.md", "Hi")
    ctx = site.context(config={})

    record = ctx.collection("posts").generate()["2024-03-05-hello-world.md"]

    assert record["date"] == dt.date(2024, 3, 5)
    assert record["url"] == "/posts/hello-world"
    assert record["title"] == "Hello World"


def test_post_front_matter_date_wins(site):
    site.write("base", "posts/2024-03-05-note.md", page({"date": "2023-12-31"}))
    site.write("base", "posts/undated.md", "x")
    ctx = site.context(config={})

    records = ctx.collection("posts").generate()

    assert records["2024-03-05-note.md"]["date"] == dt.date(2023, 12, 31)
    assert records["undated.md"]["date"] is None


def test_latest_orders_newest_first_with_undated_last(site):
    site.write("base", "posts/2023-01-01-old.md")
    site.write("base", "posts/2024-06-01-new.md")
    site.write("base", "posts/loose.md")
    ctx = site.context(config={})
    view = ctx.collection_view("posts")

    assert [r["id"] for r in view.latest()] == [
        "2024-06-01-new.md",
        "2023-01-01-old.md",
        "loose.md",
    ]
    assert [r["id"] for r in view["latest"](1)] == ["2024-06-01-new.md"]


def test_collection_view_exposes_generic_operations(site):
    site.write("base", "pages/b.md")
    site.write("base", "pages/a.md", page({"title": "A"}, "Alpha body"))
    ctx = site.context(config={})
    view = ctx.collection_view("pages")

    assert view.ids() == ["a.md", "b.md"]
    assert view.find_by_id("a.md")["title"] == "A"
    assert view.find_by_id("zzz.md") is None
    assert view.content_for(view.find_by_id("a.md")["pointer"]) == "Alpha body"
    assert view.resolve("latest") is None


def test_undecodable_file_is_skipped_and_reported(site, caplog):
    site.write("base", "pages/about.md", "About")
    (site.base / "pages" / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR")
    ctx = site.context(config={})

    with caplog.at_level(logging.WARNING):
        records = ctx.collection("pages").generate()

    assert list(records) == ["about.md"]
    report = ctx.reporter.latest("pages")
    assert report.has_issues
    assert "logo.png: unreadable, skipped (UnicodeDecodeError" in report.warnings[0]
    assert "logo.png" in caplog.text


def test_file_removed_after_discovery_is_skipped(site, monkeypatch):
    site.write("base", "posts/2024-01-01-kept.md", "x")
    site.write("base", "posts/2024-01-02-gone.md", "y")
    ctx = site.context(config={})
    collection = ctx.collection("posts")
    discovered = collection.files()
    (site.base / "posts" / "2024-01-02-gone.md").unlink()
    monkeypatch.setattr(collection, "files", lambda id=None: [dict(p) for p in discovered])

    records = collection.generate()

    assert list(records) == ["2024-01-01-kept.md"]
    assert "FileNotFoundError" in ctx.reporter.latest("posts").warnings[0]
