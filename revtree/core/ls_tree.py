"""
Reads `git ls-tree` listings into GitItem hierarchies.

Accepts the default output (``<mode> SP <type> SP <object> TAB <path>``),
``--long`` output (object size before the tab), recursive listings with or
without ``-t`` and NUL-terminated (``-z``) records.
"""
import logging
import posixpath
from collections import OrderedDict
from typing import Dict, Iterable, List, Optional, Set

from revtree.core.git_item import GitItem, ItemType
from revtree.utils.exceptions import LsTreeParseException


def unquote_path(path: str) -> str:
    """Undo git's C-style quoting of paths with special characters"""
    if len(path) < 2 or not (path.startswith('"') and path.endswith('"')):
        return path
    raw = path[1:-1].encode('utf-8').decode('unicode_escape')
    try:
        return raw.encode('latin-1').decode('utf-8')
    except (UnicodeEncodeError, UnicodeDecodeError):
        return raw


class LsTreeParser:
    def __init__(self, strict: bool = True):
        self.strict = strict
        self._children: Dict[str, List[GitItem]] = OrderedDict()
        self._known_dirs: Set[str] = set()
        self.skipped_lines = 0

    def parse(self, text: str, null_terminated: bool = False) -> List[GitItem]:
        """Parse a complete listing and return the top level items"""
        records = text.split('\0') if null_terminated else text.splitlines()
        return self.parse_lines(records, quoted=not null_terminated)

    def parse_lines(self, lines: Iterable[str], quoted: bool = True) -> List[GitItem]:
        self._children = OrderedDict()
        self._known_dirs = set()
        self.skipped_lines = 0

        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                self._add_record(line, quoted)
            except LsTreeParseException as e:
                if self.strict:
                    raise LsTreeParseException(str(e.detail), line_number)
                self.skipped_lines += 1
                logging.warning(f"Skipping listing line {line_number}: {e.detail}")

        return self._items_in("")

    def _items_in(self, directory: str) -> List[GitItem]:
        return list(self._children.get(directory, []))

    def _add_record(self, line: str, quoted: bool) -> None:
        meta, tab, path = line.partition('\t')
        fields = meta.split()
        if not tab or len(fields) not in (3, 4) or not path:
            raise LsTreeParseException(f"Malformed record: {line!r}")

        mode, raw_type, guid = fields[:3]
        path = unquote_path(path) if quoted else path
        path = path.rstrip('/')
        item_type = ItemType.parse(raw_type)

        parent = self._ensure_parents(path)
        if item_type is ItemType.TREE:
            if path in self._known_dirs:
                return
            self._known_dirs.add(path)

        self._children.setdefault(parent, []).append(
            self._make_item(path, item_type, guid, mode)
        )

    def _ensure_parents(self, path: str) -> str:
        """Create tree items for directories only implied by ``path``"""
        parent = posixpath.dirname(path)
        if parent and parent not in self._known_dirs:
            grandparent = self._ensure_parents(parent)
            self._known_dirs.add(parent)
            self._children.setdefault(grandparent, []).append(
                self._make_item(parent, ItemType.TREE)
            )
        return parent

    def _make_item(self, path: str, item_type: ItemType, guid: str = "", mode: str = "") -> GitItem:
        # bound to this parse's index, a later parse builds a new one
        children = self._children
        return GitItem(
            name=posixpath.basename(path),
            item_type=item_type,
            file_name=path if item_type is ItemType.BLOB else "",
            guid=guid,
            mode=mode,
            load_sub_items=lambda: list(children.get(path, [])),
        )


def parse_ls_tree(text: str, null_terminated: bool = False, strict: bool = True) -> List[GitItem]:
    """Parse ``git ls-tree`` output into top level GitItems"""
    return LsTreeParser(strict=strict).parse(text, null_terminated=null_terminated)
