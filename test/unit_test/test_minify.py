"""Unit tests for the output minifiers."""

from physics_demos.site.minify import minify_css_text, minify_file, minify_html_text, minify_js_text, minify_tree


def test_minify_html_drops_comments_and_whitespace():
    html = "<html>\n  <body>\n    <!-- note -->\n    <p>hello</p>\n  </body>\n</html>\n"
    result = minify_html_text(html)
    assert "note" not in result
    assert "hello" in result
    assert len(result) < len(html)


def test_minify_css():
    css = "a {\n  color: red;\n}\n\n/* comment */\n"
    result = minify_css_text(css)
    assert "comment" not in result
    assert result.startswith("a{color:red")


def test_minify_js():
    js = "// comment\nconst  value = 1;\n\nfunction f() {\n  return value;\n}\n"
    result = minify_js_text(js)
    assert "comment" not in result
    assert "return value" in result
    assert len(result) < len(js)


def test_minify_file_only_touches_known_types(tmp_path):
    text = tmp_path / "notes.txt"
    text.write_text("a   b\n", encoding="utf-8")
    assert not minify_file(text)
    assert text.read_text(encoding="utf-8") == "a   b\n"


def test_minify_tree_counts_rewritten_files(tmp_path):
    (tmp_path / "css").mkdir()
    (tmp_path / "css" / "site.css").write_text("body {  margin: 0; }\n", encoding="utf-8")
    (tmp_path / "app.js").write_text("const a = 1;\n\n", encoding="utf-8")
    (tmp_path / "index.html").write_text("<p>  x  </p>\n", encoding="utf-8")
    (tmp_path / "preview.svg").write_text("<svg/>", encoding="utf-8")

    assert minify_tree(tmp_path) == 3
    assert (tmp_path / "preview.svg").read_text(encoding="utf-8") == "<svg/>"


def test_minify_file_skips_non_utf8(tmp_path):
    legacy = tmp_path / "legacy.css"
    raw = "a   { content: 'é'; }\n".encode("latin-1")
    legacy.write_bytes(raw)
    assert not minify_file(legacy)
    assert legacy.read_bytes() == raw
