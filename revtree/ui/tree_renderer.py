import logging
from typing import Dict, Optional

from rich.markup import escape
from rich.tree import Tree

from revtree.ui.file_icons import FileTypeIcons
from revtree.ui.tree_node import ImageCollection, TreeNode, TreeNodeCollection, TreeNodeImages


class TreeRenderer:
    """Renders populated tree nodes as a Rich tree"""

    def __init__(
        self,
        theme: Dict[str, str],
        icons: Optional[FileTypeIcons] = None,
        show_icons: bool = True,
        color: bool = True
    ):
        self.theme = theme
        self.icons = icons or FileTypeIcons()
        self.show_icons = show_icons
        self.color = color

    def _style(self, name: str) -> str:
        return self.theme.get(name, "") if self.color else ""

    def _styled(self, text: str, style_name: str) -> str:
        style = self._style(style_name)
        return f"[{style}]{text}[/]" if style else text

    def node_icon(self, node: TreeNode, images: ImageCollection) -> str:
        """Glyph shown in front of a node, reserved slots fall back to the packaged glyphs"""
        if node.image_index is None:
            return ""
        image = images[node.image_index]
        if image:
            return image
        if node.image_index == TreeNodeImages.FOLDER:
            return self.icons.get_special('directory')
        if node.image_index == TreeNodeImages.SUBMODULE:
            return self.icons.get_special('submodule')
        return ""

    def node_label(self, node: TreeNode, images: ImageCollection) -> str:
        if node.is_placeholder:
            return self._styled(self.icons.get_special('placeholder') or "...", 'placeholder')

        if node.image_index == TreeNodeImages.FOLDER and not node.image_key:
            style_name, text = 'directory', f"{escape(node.text)}/"
        elif node.image_index == TreeNodeImages.SUBMODULE and not node.image_key:
            style_name, text = 'submodule', escape(node.text)
        else:
            style_name, text = 'file', escape(node.text)

        icon = self.node_icon(node, images) if self.show_icons else ""
        return self._styled(f"{icon} {text}" if icon else text, style_name)

    def _add_branch(self, parent: Tree, nodes: TreeNodeCollection, images: ImageCollection) -> None:
        for node in nodes:
            try:
                branch = parent.add(self.node_label(node, images))
                self._add_branch(branch, node.nodes, images)
            except Exception as e:
                logging.warning(f"Error rendering node {node.text}: {str(e)}")

    def render(self, nodes: TreeNodeCollection, images: ImageCollection, root_label: str = ".") -> Tree:
        """Build a Rich tree below a root labelled ``root_label``"""
        root = Tree(self._styled(escape(root_label), 'root'))
        self._add_branch(root, nodes, images)
        return root
