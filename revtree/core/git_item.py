from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, List, Optional, Union


class ItemType(str, Enum):
    """Object types reported by the repository for a tree entry"""

    TREE = "tree"
    BLOB = "blob"
    COMMIT = "commit"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "ItemType":
        """Map a raw type string to an ItemType, unknown values degrade to UNKNOWN"""
        try:
            return cls((raw or "").strip().lower())
        except ValueError:
            return cls.UNKNOWN


def _no_sub_items() -> List["GitItem"]:
    return []


@dataclass(frozen=True)
class GitItem:
    """One entry of a repository tree listing.

    ``sub_items`` is produced on demand by ``load_sub_items`` so that large
    trees are only enumerated when a node is expanded.
    """

    name: str
    item_type: ItemType = ItemType.UNKNOWN
    file_name: str = ""
    guid: str = ""
    mode: str = ""
    load_sub_items: Callable[[], Iterable["GitItem"]] = field(
        default=_no_sub_items, repr=False, compare=False
    )

    @property
    def sub_items(self) -> List["GitItem"]:
        return list(self.load_sub_items())

    @property
    def is_tree(self) -> bool:
        return self.item_type is ItemType.TREE

    @property
    def is_commit(self) -> bool:
        return self.item_type is ItemType.COMMIT

    @property
    def is_blob(self) -> bool:
        return self.item_type is ItemType.BLOB


@dataclass(frozen=True)
class Directory:
    pass


@dataclass(frozen=True)
class Submodule:
    pass


@dataclass(frozen=True)
class File:
    file_name: str


ItemClassification = Union[Directory, Submodule, File]


def classify(item: GitItem) -> ItemClassification:
    """Classify an item as a directory, a submodule or a plain file"""
    if item.item_type is ItemType.TREE:
        return Directory()
    if item.item_type is ItemType.COMMIT:
        return Submodule()
    return File(item.file_name)
