"""
Tests for reading git ls-tree listings
"""
import pytest

from revtree.core.git_item import ItemType
from revtree.core.ls_tree import LsTreeParser, parse_ls_tree, unquote_path
from revtree.utils.exceptions import LsTreeParseException


def test_parse_top_level_items(sample_listing):
    items = parse_ls_tree(sample_listing)

    assert [item.name for item in items] == ["README.md", "docs", "src", "vendor", "Makefile"]
    assert [item.item_type for item in items] == [
        ItemType.BLOB, ItemType.TREE, ItemType.TREE, ItemType.COMMIT, ItemType.BLOB
    ]
    assert items[0].file_name == "README.md"
    assert items[0].guid == "8ab686eafeb1f44702738c8b0f24f2567c36da6d"
    assert items[0].mode == "100644"
    assert items[1].file_name == ""
    assert items[3].file_name == ""


def test_sub_items_come_from_the_listing(sample_listing):
    docs = parse_ls_tree(sample_listing)[1]

    children = docs.sub_items

    assert [child.name for child in children] == ["index.rst", "guide.rst"]
    assert [child.file_name for child in children] == ["docs/index.rst", "docs/guide.rst"]


def test_recursive_listing_without_trees_synthesizes_directories():
    listing = "\n".join([
        "100644 blob aaa\tsrc/pkg/mod.py",
        "100644 blob bbb\tsrc/main.py",
        "100644 blob ccc\tsetup.cfg",
    ])

    items = parse_ls_tree(listing)

    assert [(item.name, item.item_type) for item in items] == [
        ("src", ItemType.TREE), ("setup.cfg", ItemType.BLOB)
    ]
    src_children = items[0].sub_items
    assert [child.name for child in src_children] == ["pkg", "main.py"]
    assert src_children[0].item_type is ItemType.TREE
    assert src_children[0].guid == ""
    assert [child.file_name for child in src_children[0].sub_items] == ["src/pkg/mod.py"]


def test_tree_listed_after_synthesized_parent_is_not_duplicated():
    listing = "\n".join([
        "100644 blob aaa\tsrc/a.py",
        "040000 tree bbb\tsrc",
    ])

    items = parse_ls_tree(listing)

    assert [item.name for item in items] == ["src"]


def test_parse_null_terminated_records():
    listing = "100644 blob aaa\tname with\nnewline.txt\0" "040000 tree bbb\tdir\0"

    items = parse_ls_tree(listing, null_terminated=True)

    assert [item.name for item in items] == ["name with\nnewline.txt", "dir"]


def test_parse_long_format():
    listing = "100644 blob aaa      1234\tbig.bin\n040000 tree bbb       -\tdir"

    items = parse_ls_tree(listing)

    assert [item.name for item in items] == ["big.bin", "dir"]
    assert items[0].guid == "aaa"


def test_quoted_paths_are_unquoted():
    items = parse_ls_tree('100644 blob aaa\t"caf\\303\\251 \\"menu\\".txt"')

    assert items[0].name == 'café "menu".txt'


def test_unquote_leaves_plain_paths_alone():
    assert unquote_path("plain.txt") == "plain.txt"
    assert unquote_path('"') == '"'


def test_unknown_object_types_are_kept_as_unknown():
    items = parse_ls_tree("100644 weird aaa\tthing")

    assert items[0].item_type is ItemType.UNKNOWN
    assert items[0].file_name == ""


def test_blank_lines_are_ignored():
    assert [item.name for item in parse_ls_tree("\n100644 blob aaa\ta.txt\n\n")] == ["a.txt"]


def test_malformed_line_raises_in_strict_mode():
    with pytest.raises(LsTreeParseException) as exc_info:
        parse_ls_tree("100644 blob aaa\ta.txt\nthis is not a record")

    assert exc_info.value.line_number == 2
    assert exc_info.value.error_code == "INVALID_LISTING"


def test_malformed_lines_are_skipped_when_not_strict(caplog):
    parser = LsTreeParser(strict=False)

    items = parser.parse("garbage\n100644 blob aaa\ta.txt\n100644 blob\tb.txt")

    assert [item.name for item in items] == ["a.txt"]
    assert parser.skipped_lines == 2
    assert "Skipping listing line 1" in caplog.text


def test_items_keep_their_own_listing_after_reparse():
    parser = LsTreeParser()
    first = parser.parse("100644 blob aaa\tdir/one.txt")
    parser.parse("100644 blob bbb\tdir/two.txt")

    assert [child.name for child in first[0].sub_items] == ["one.txt"]
