"""Tests for generate(): cascade override, models and caching."""
from __future__ import annotations

import logging

from strata.core.resources import BUILTIN_RESOURCES
from strata.core.resources.base import BaseCollection, BaseModel
from strata.core.resources.registry import ResourceRegistry, ResourceType

from helpers.site import page


class Collection(BaseCollection):
    resource_name = "notes"
    glob = "*.txt"


class Model(BaseModel):
    """One record per non-empty line, keyed ``<file>#<n>``."""

    def generate(self):
        records = {}
        for n, line in enumerate(self.content().splitlines()):
            if line.strip():
                records[f"{self.id}#{n}"] = {"text": line.strip(), "layer": self.realpath.parts[-3]}
        return records


NOTES = ResourceType.define(Collection, model=Model)


def _notes_context(site):
    return site.context(config={}, resources=ResourceRegistry([*BUILTIN_RESOURCES, NOTES]))


def test_later_layer_wins_on_same_id(site):
    site.write("system", "partials/a.html", "system a")
    site.write("system", "partials/b.html", "system b")
    site.write("base", "partials/a.html", "base a")
    ctx = site.context(config={})

    dictionary = ctx.collection("partials").generate()

    assert set(dictionary) == {"a.html", "b.html"}
    assert dictionary["a.html"]["realpath"] == str((site.base / "partials/a.html").resolve())
    assert dictionary["b.html"]["realpath"] == str((site.system / "partials/b.html").resolve())


def test_theme_layer_beats_base(site):
    site.write("base", "partials/footer.html", "base")
    site.write("theme", "partials/footer.html", "theme")
    ctx = site.context(config={"theme": site.theme_name})

    dictionary = ctx.collection("partials").generate()

    assert dictionary["footer.html"]["realpath"] == str((site.theme / "partials/footer.html").resolve())


def test_records_without_model_are_file_pointers(site):
    site.write("base", "layouts/post.html", "<article>{{ content }}</article>")
    ctx = site.context(config={})

    dictionary = ctx.collection("layouts").generate()

    assert dictionary == {
        "post.html": {
            "id": "post.html",
            "realpath": str((site.base / "layouts/post.html").resolve()),
            "resource": "layouts",
        }
    }


def test_generate_with_id_limits_processing(site):
    site.write("base", "pages/about.md", page({"title": "About us"}))
    site.write("base", "pages/contact.md", page({"title": "Contact"}))
    ctx = site.context(config={})

    dictionary = ctx.collection("pages").generate("about.md")

    assert list(dictionary) == ["about.md"]
    assert dictionary["about.md"]["title"] == "About us"


def test_model_may_emit_several_records_per_file(site):
    site.write("system", "notes/todo.txt", "buy milk\n\nwalk dog\n")
    site.write("base", "notes/todo.txt", "buy bread\n")
    ctx = _notes_context(site)

    dictionary = ctx.collection("notes").generate()

    # The base file replaces record 0 and leaves the system-only record 2.
    assert dictionary["todo.txt#0"] == {"text": "buy bread", "layer": "site"}
    assert dictionary["todo.txt#2"] == {"text": "walk dog", "layer": "system"}
    assert "todo.txt#1" not in dictionary


def test_custom_collection_glob_is_honoured(site):
    site.write("base", "notes/keep.txt", "x")
    site.write("base", "notes/skip.md", "y")
    site.write("base", "notes/sub/deep.txt", "z")
    ctx = _notes_context(site)

    assert [p["id"] for p in ctx.collection("notes").files()] == ["keep.txt"]


def test_generate_reports_the_dictionary(site, caplog):
    site.write("base", "partials/a.html")
    site.write("base", "partials/b.html")
    ctx = site.context(config={})

    with caplog.at_level(logging.INFO, logger="strata.core.resources.report"):
        ctx.collection("partials").generate()

    report = ctx.reporter.latest("partials")
    assert report is not None
    assert report.ids == ["a.html", "b.html"]
    assert report.count == 2
    assert not report.has_issues
    assert "generated partials: 2 resource(s)" in caplog.text


def test_generate_with_no_directories_returns_empty(site):
    ctx = site.context(config={})

    assert ctx.collection("pages").generate() == {}
    assert ctx.reporter.latest("pages").count == 0


def test_all_is_cached_until_cleared(site):
    site.write("base", "partials/a.html")
    ctx = site.context(config={})
    collection = ctx.collection("partials")

    first = collection.all()
    site.write("base", "partials/b.html")

    assert collection.all() is first
    assert "partials" in ctx.cache

    ctx.cache.clear("partials")
    assert set(collection.all()) == {"a.html", "b.html"}


def test_reset_drops_cache_and_reports(site):
    site.write("base", "partials/a.html")
    ctx = site.context(config={})
    ctx.collection("partials").all()

    ctx.reset()

    assert len(ctx.cache) == 0
    assert ctx.reporter.reports() == []
