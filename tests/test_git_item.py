import pytest
from unittest.mock import Mock

from revtree.core.git_item import Directory, File, GitItem, ItemType, Submodule, classify


@pytest.mark.parametrize("raw, expected", [
    ("tree", ItemType.TREE),
    ("blob", ItemType.BLOB),
    ("commit", ItemType.COMMIT),
    ("COMMIT ", ItemType.COMMIT),
    ("tag", ItemType.UNKNOWN),
    ("", ItemType.UNKNOWN),
    (None, ItemType.UNKNOWN),
])
def test_item_type_parse(raw, expected):
    assert ItemType.parse(raw) is expected


def test_classify_tree_as_directory():
    assert classify(GitItem("src", ItemType.TREE)) == Directory()


def test_classify_commit_as_submodule():
    assert classify(GitItem("vendor", ItemType.COMMIT)) == Submodule()


def test_classify_blob_as_file_with_its_file_name():
    item = GitItem("app.py", ItemType.BLOB, file_name="src/app.py")
    assert classify(item) == File("src/app.py")


def test_classify_unknown_degrades_to_file():
    assert classify(GitItem("odd.txt")) == File("")


def test_sub_items_are_loaded_on_access_only():
    child = GitItem("child.txt", ItemType.BLOB, file_name="child.txt")
    loader = Mock(return_value=iter([child]))
    item = GitItem("dir", ItemType.TREE, load_sub_items=loader)

    loader.assert_not_called()
    assert item.sub_items == [child]
    loader.assert_called_once_with()


def test_item_without_loader_has_no_sub_items():
    item = GitItem("dir", ItemType.TREE)
    assert item.sub_items == []
    assert item.is_tree
    assert not item.is_blob
    assert not item.is_commit
