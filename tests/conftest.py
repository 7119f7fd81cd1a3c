# conftest.py

import pytest
from unittest.mock import Mock

from revtree.core.git_item import GitItem, ItemType
from revtree.core.tree_builder import RevisionFileTreeController
from revtree.resources.resources_manager import ResourcesManager
from revtree.ui.tree_node import ImageCollection, TreeNodeCollection


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep configuration files out of the real home directory"""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    ResourcesManager.clear()
    yield home
    ResourcesManager.clear()


@pytest.fixture
def icon_provider():
    """Provide an icon provider that has no icons unless told otherwise"""
    provider = Mock()
    provider.get.return_value = None
    return provider


@pytest.fixture
def controller(icon_provider):
    return RevisionFileTreeController(icon_provider, working_dir="/repo")


@pytest.fixture
def nodes():
    return TreeNodeCollection()


@pytest.fixture
def images():
    return ImageCollection()


def create_git_item(name, item_type, sub_items=None, file_name=None):
    """Build a GitItem the way the repository layer reports it"""
    item_type = ItemType.parse(item_type) if isinstance(item_type, str) else item_type
    if file_name is None:
        file_name = name if item_type is ItemType.BLOB else ""
    return GitItem(
        name=name,
        item_type=item_type,
        file_name=file_name,
        load_sub_items=(lambda: list(sub_items)) if sub_items is not None else (lambda: []),
    )


SAMPLE_LISTING = "\n".join([
    "100644 blob 8ab686eafeb1f44702738c8b0f24f2567c36da6d\tREADME.md",
    "040000 tree 3c4e9cd789d88d8d89c1073707c3585e41b0e614\tdocs",
    "100644 blob 5716ca5987cbf97d6bb54920bea6adde242d87e6\tdocs/index.rst",
    "100644 blob 7e0e0a4c8c3b1b2a2b6f0a2b8f9e37e5b1d6f4a1\tdocs/guide.rst",
    "040000 tree 9fceb02d0ae598e95dc970b74767f19372d61af8\tsrc",
    "100644 blob e69de29bb2d1d6434b8b29ae775ad8c2e48c5391\tsrc/app.py",
    "160000 commit 1f7a7a472abf3dd9643fd615f6da379c4acb3e3a\tvendor",
    "100755 blob d670460b4b4aece5915caf5c68d12f560a9fe3e4\tMakefile",
])


@pytest.fixture
def make_item():
    return create_git_item


@pytest.fixture
def sample_listing():
    return SAMPLE_LISTING
