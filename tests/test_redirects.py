"""
Tests for the CodePen redirect page generator.
"""

import json
from dataclasses import replace
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from code_repls.markdown.config import ReplOptions
from code_repls.markdown.errors import ConfigError
from code_repls.redirects import (
    CODEPEN_DEFINE_URL,
    RedirectPage,
    collect_codepen_redirects,
    render_redirect_page,
    write_redirect_pages,
)

from tests.conftest import HELLO_JS


class TestCollect:

    def test_one_page_per_example(self, options):
        pages = collect_codepen_redirects(options)
        assert [page.path for page in pages] == [
            "redirect-to-codepen/app",
            "redirect-to-codepen/hello",
            "redirect-to-codepen/nested/deep",
        ]
        assert all(page.action == CODEPEN_DEFINE_URL for page in pages)

    def test_only_js_examples(self, options, examples_dir: Path):
        # codepen:// links always resolve to a .js file, so nothing else gets a page
        (examples_dir / "widget.jsx").write_text("<Widget />\n")
        paths = [page.path for page in collect_codepen_redirects(options)]
        assert "redirect-to-codepen/widget" not in paths
        assert "redirect-to-codepen/styles" not in paths

    def test_payload(self, options):
        options = replace(options, externals=("https://a.test/react.js", "https://a.test/dom.js"))
        page = next(p for p in collect_codepen_redirects(options) if p.path.endswith("/hello"))
        payload = json.loads(page.payload)
        assert payload == {
            "title": "example",
            "editors": "0010",
            "html": '<div id="root"></div>',
            "js_external": "https://a.test/react.js;https://a.test/dom.js",
            "js_pre_processor": "babel",
            "js": HELLO_JS,
        }

    def test_empty_directory_warns(self, tmp_path: Path, caplog):
        with caplog.at_level("WARNING"):
            pages = collect_codepen_redirects(ReplOptions(directory=str(tmp_path)))
        assert pages == []
        assert "No example files found" in caplog.text

    def test_invalid_directory(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            collect_codepen_redirects(ReplOptions(directory=str(tmp_path / "missing")))


class TestRender:

    def test_form_posts_payload(self):
        payload = json.dumps({"js": 'alert("<b>&</b>")'})
        html = render_redirect_page(RedirectPage(path="redirect-to-codepen/x", action=CODEPEN_DEFINE_URL, payload=payload))

        soup = BeautifulSoup(html, "html.parser")
        form = soup.find("form", id="form")
        assert form["action"] == CODEPEN_DEFINE_URL
        assert form["method"] == "POST"
        data = form.find("input", attrs={"name": "data"})
        assert data["type"] == "hidden"
        assert json.loads(data["value"]) == {"js": 'alert("<b>&</b>")'}
        assert 'getElementById("form").submit()' in soup.script.string


class TestWrite:

    def test_writes_index_files(self, options, tmp_path: Path):
        output = tmp_path / "public"
        written = write_redirect_pages(collect_codepen_redirects(options), output)

        assert output / "redirect-to-codepen" / "nested" / "deep" / "index.html" in written
        page = (output / "redirect-to-codepen" / "hello" / "index.html").read_text(encoding="utf-8")
        value = BeautifulSoup(page, "html.parser").find("input")["value"]
        assert json.loads(value)["js"] == HELLO_JS
