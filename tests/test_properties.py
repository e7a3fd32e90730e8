"""Unit tests for core/properties.py -- parse_property."""

from core.properties import (
    FileRef,
    FilesProperty,
    TextProperty,
    UnsupportedProperty,
    UrlProperty,
    parse_property,
)
from tests.factories import external_file, files_prop, hosted_file, rich_text_prop, title_prop, url_prop


class TestParseProperty:
    def test_title(self):
        prop = parse_property(title_prop("Hello"))
        assert prop == TextProperty(kind="title", texts=("Hello",))
        assert prop.first_text() == "Hello"

    def test_rich_text_keeps_entry_order(self):
        raw = {"type": "rich_text", "rich_text": [{"plain_text": "a"}, {"plain_text": "b"}]}
        assert parse_property(raw).texts == ("a", "b")

    def test_empty_text_list(self):
        prop = parse_property({"type": "rich_text", "rich_text": []})
        assert isinstance(prop, TextProperty)
        assert prop.first_text() is None

    def test_text_payload_not_a_list(self):
        prop = parse_property({"type": "title", "title": None})
        assert prop == TextProperty(kind="title", texts=())

    def test_entry_without_plain_text(self):
        prop = parse_property({"type": "title", "title": [{"type": "mention"}]})
        assert prop.first_text() is None

    def test_url(self):
        assert parse_property(url_prop("https://x.test")) == UrlProperty(url="https://x.test")

    def test_null_url(self):
        assert parse_property(url_prop(None)) == UrlProperty(url=None)

    def test_files_hosted_and_external(self):
        prop = parse_property(files_prop(hosted_file("https://h.test/a"), external_file("https://e.test/b")))
        assert prop == FilesProperty(
            files=(FileRef(kind="file", url="https://h.test/a"), FileRef(kind="external", url="https://e.test/b"))
        )

    def test_file_reads_only_its_own_holder(self):
        raw = {"type": "external", "file": {"url": "https://wrong.test"}, "external": {"url": "https://right.test"}}
        prop = parse_property(files_prop(raw))
        assert prop.files[0] == FileRef(kind="external", url="https://right.test")

    def test_unknown_file_kind(self):
        prop = parse_property(files_prop({"type": "file_upload", "file_upload": {"id": "x"}}))
        assert prop.files[0] == FileRef(kind="file_upload", url=None)

    def test_unknown_type(self):
        assert parse_property({"type": "number", "number": 3}) == UnsupportedProperty(kind="number")

    def test_missing_and_non_object(self):
        assert isinstance(parse_property(None), UnsupportedProperty)
        assert isinstance(parse_property("title"), UnsupportedProperty)
        assert isinstance(parse_property([1, 2]), UnsupportedProperty)

    def test_untagged_single_payload_is_inferred(self):
        assert parse_property({"url": None}) == UrlProperty(url=None)
        assert parse_property({"files": []}) == FilesProperty(files=())
        assert parse_property({"rich_text": [{"plain_text": "x"}]}).kind == "rich_text"

    def test_untagged_ambiguous_payload(self):
        assert parse_property({"title": [], "url": "x"}) == UnsupportedProperty(kind="untagged")

    def test_rich_text_fixture(self):
        assert parse_property(rich_text_prop("Ann")).first_text() == "Ann"
