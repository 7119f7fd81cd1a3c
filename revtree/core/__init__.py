"""
Core functionality for revtree
"""
from revtree.core.git_item import GitItem, ItemType, classify
from revtree.core.tree_builder import RevisionFileTreeController, TreeNodeImages


__all__ = [
    'GitItem',
    'ItemType',
    'classify',
    'RevisionFileTreeController',
    'TreeNodeImages'
]
