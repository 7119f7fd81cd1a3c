import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Union

from jinja2 import Environment, TemplateError

from revtree.core.git_item import Directory, GitItem, Submodule, classify
from revtree.resources.resources_manager import ResourcesManager
from revtree.ui.tree_node import ImageCollection, TreeNode, TreeNodeCollection
from revtree.utils.exceptions import ExportException, RevTreeException


def node_type(node: TreeNode) -> str:
    """Kind of entry a node stands for"""
    if node.is_placeholder:
        return 'placeholder'
    if not isinstance(node.tag, GitItem):
        return 'file'
    kind = classify(node.tag)
    if isinstance(kind, Directory):
        return 'directory'
    if isinstance(kind, Submodule):
        return 'submodule'
    return 'file'


class TreeExporter:
    """Handles exporting populated trees in various formats"""

    def __init__(self, nodes: TreeNodeCollection, images: ImageCollection, root_label: str = "."):
        self.nodes = nodes
        self.images = images
        self.root_label = root_label

    def _node_to_dict(self, node: TreeNode) -> Dict[str, Any]:
        data = {
            "name": node.text,
            "type": node_type(node),
            "icon_key": node.image_key or None,
            "icon": self.images.get(node.image_key) if node.image_key else None,
        }
        if isinstance(node.tag, GitItem):
            data["path"] = node.tag.file_name or None
            data["object"] = node.tag.guid or None
        if len(node.nodes) or data["type"] == 'directory':
            data["loaded"] = not node.has_placeholder
            data["children"] = [
                self._node_to_dict(child) for child in node.nodes if not child.is_placeholder
            ]
        return data

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.root_label,
            "type": "root",
            "children": [self._node_to_dict(node) for node in self.nodes],
            "icons": len(self.images),
        }

    def to_json(self, indent: int = 4) -> str:
        return json.dumps({"file_tree": self.to_dict()}, indent=indent, ensure_ascii=False)

    def to_markdown(self) -> str:
        """Nested bullet list, unloaded directories end with an ellipsis item"""
        lines: List[str] = [f"# {self.root_label}", ""]

        def walk(nodes: TreeNodeCollection, indent: int) -> None:
            for node in nodes:
                prefix = '  ' * indent
                kind = node_type(node)
                if kind == 'placeholder':
                    lines.append(f"{prefix}- …")
                elif kind == 'directory':
                    lines.append(f"{prefix}- 📁 {node.text}/")
                elif kind == 'submodule':
                    lines.append(f"{prefix}- 🔗 {node.text}")
                else:
                    icon = self.images.get(node.image_key) if node.image_key else None
                    lines.append(f"{prefix}- {icon or '📄'} {node.text}")
                walk(node.nodes, indent + 1)

        walk(self.nodes, 0)
        return "\n".join(lines)

    def export_html(self, output_path: Union[str, Path], template: str = 'file_tree.html') -> Path:
        """Render the tree with the packaged HTML template and write it to ``output_path``"""
        output_path = Path(output_path)
        try:
            template_content = ResourcesManager.get_template(template)
            env = Environment(autoescape=True)
            rendered_html = env.from_string(template_content).render(
                root=self.to_dict(),
                generated_at=datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
            )
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(rendered_html)
        except (OSError, TemplateError, RevTreeException) as e:
            logging.error(f"Error in HTML export: {str(e)}")
            raise ExportException(f"Failed to export HTML: {str(e)}")
        return output_path
