import logging
from typing import Iterable, Optional

from revtree.core.git_item import Directory, File, GitItem, Submodule, classify
from revtree.ui.file_icons import IconCache, IconProvider, get_extension
from revtree.ui.tree_node import ImageCollection, TreeNode, TreeNodeCollection, TreeNodeImages


SUBMODULE_SUFFIX = " (Submodule)"


class RevisionFileTreeController:
    """Populates a file tree from repository items, one level at a time.

    Directories get a placeholder child and are only filled in when
    expanded; files get an icon looked up by extension; submodules are leaves.
    """

    def __init__(self, icon_provider: IconProvider, working_dir: str = ""):
        self.icon_provider = icon_provider
        self.working_dir = working_dir
        self._icon_cache: Optional[IconCache] = None

    def _cache_for(self, images: ImageCollection) -> IconCache:
        if self._icon_cache is None or self._icon_cache.images is not images:
            self._icon_cache = IconCache(self.icon_provider, images, self.working_dir)
        return self._icon_cache

    def reset_cache(self) -> None:
        """Forget resolved icons, the next population pass starts afresh"""
        self._icon_cache = None

    def load_items_in_tree_view(
        self,
        items: Iterable[GitItem],
        nodes: TreeNodeCollection,
        images: ImageCollection
    ) -> None:
        """Append one node per item to ``nodes``, adding new file icons to ``images``"""
        icon_cache = self._cache_for(images)

        for item in items:
            kind = classify(item)
            node = TreeNode(item.name, tag=item)

            if isinstance(kind, Directory):
                node.image_index = TreeNodeImages.FOLDER
                node.nodes.add_placeholder()
            elif isinstance(kind, Submodule):
                node.text = f"{item.name}{SUBMODULE_SUFFIX}"
                node.image_index = TreeNodeImages.SUBMODULE
            elif isinstance(kind, File):
                extension = get_extension(kind.file_name)
                slot = icon_cache.resolve(extension, kind.file_name)
                if slot is not None:
                    node.image_index = slot
                    node.image_key = extension

            nodes.add(node)

    def expand(self, node: TreeNode, images: ImageCollection) -> int:
        """Replace the placeholder of ``node`` with its real children.

        Returns the number of children added, 0 if the node was not waiting
        for its children.
        """
        if not node.has_placeholder or not isinstance(node.tag, GitItem):
            return 0

        node.nodes.clear()
        self.load_items_in_tree_view(node.tag.sub_items, node.nodes, images)
        node.is_expanded = True
        logging.debug(f"Expanded {node.text}: {len(node.nodes)} items")
        return len(node.nodes)

    def expand_all(
        self,
        nodes: TreeNodeCollection,
        images: ImageCollection,
        max_depth: Optional[int] = None,
        _level: int = 0
    ) -> None:
        """Expand directories recursively, stopping at ``max_depth`` levels"""
        if max_depth is not None and _level >= max_depth:
            return
        for node in nodes:
            self.expand(node, images)
            if node.is_expanded:
                self.expand_all(node.nodes, images, max_depth, _level + 1)
