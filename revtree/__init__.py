"""
revtree - Lazily expandable repository file trees with per-extension icons
"""
from .core.git_item import GitItem, ItemType, classify
from .core.ls_tree import LsTreeParser, parse_ls_tree
from .core.tree_builder import RevisionFileTreeController, TreeNodeImages
from .ui.file_icons import FileTypeIcons, IconCache, get_extension
from .ui.tree_node import ImageCollection, TreeNode, TreeNodeCollection

__version__ = "1.0.0"
__all__ = [
    'GitItem',
    'ItemType',
    'classify',
    'LsTreeParser',
    'parse_ls_tree',
    'RevisionFileTreeController',
    'TreeNodeImages',
    'FileTypeIcons',
    'IconCache',
    'get_extension',
    'ImageCollection',
    'TreeNode',
    'TreeNodeCollection'
]
