"""Tests for file -> entry normalization."""
from figma_index.entries import DEFAULT_TITLE, figma_design_url, to_entry


def test_full_entry(sample_files):
    entry = to_entry(sample_files[0], "Alpha")

    assert entry.to_dict() == {
        "id": "abc123",
        "title": "My File",
        "org": "Redmond",
        "brandKey": None,
        "category": [],
        "path": [],
        "status": "active",
        "tags": [],
        "thumb": None,
        "figmaUrl": "https://www.figma.com/design/abc123/My%20File",
        "updatedAt": "2024-06-01T10:00:00Z",
        "_project": "Alpha",
    }


def test_key_order():
    keys = list(to_entry({"key": "k"}, None).to_dict())
    assert keys == [
        "id", "title", "org", "brandKey", "category", "path",
        "status", "tags", "thumb", "figmaUrl", "updatedAt", "_project",
    ]


def test_missing_name_defaults_to_untitled():
    entry = to_entry({"key": "abc123"}, "Alpha")

    assert entry.title == DEFAULT_TITLE == "Untitled"
    assert entry.figma_url == "https://www.figma.com/design/abc123/Untitled"


def test_empty_name_defaults_to_untitled():
    assert to_entry({"key": "abc123", "name": ""}, None).title == "Untitled"


def test_missing_timestamp_and_project_are_null():
    entry = to_entry({"key": "abc123", "name": "X", "last_modified": ""}, "")

    assert entry.updated_at is None
    assert entry.project is None


def test_timestamp_passes_through_unchanged():
    entry = to_entry({"key": "k", "last_modified": "2024-06-01T10:00:00.123Z"}, None)
    assert entry.updated_at == "2024-06-01T10:00:00.123Z"


def test_thumbnail_is_not_mapped(sample_files):
    assert to_entry(sample_files[0], None).thumb is None


def test_url_escapes_title_only():
    assert figma_design_url("abc123", "My File") == "https://www.figma.com/design/abc123/My%20File"
    assert figma_design_url("abc123", "UI/UX & Icons") == (
        "https://www.figma.com/design/abc123/UI%2FUX%20%26%20Icons"
    )


def test_url_matches_encode_uri_component():
    # unreserved marks stay, non-ASCII is percent-encoded UTF-8
    assert figma_design_url("k", "a-b_c.d!e~f*g'h(i)") == "https://www.figma.com/design/k/a-b_c.d!e~f*g'h(i)"
    assert figma_design_url("k", "Дизайн") == "https://www.figma.com/design/k/%D0%94%D0%B8%D0%B7%D0%B0%D0%B9%D0%BD"
