from typing import Any, Dict, Iterator, List, Optional


class TreeNode:
    """A node of the visual file tree"""

    def __init__(self, text: str = "", tag: Any = None, placeholder: bool = False):
        self.text = text
        self.tag = tag
        self.placeholder = placeholder
        self.image_index: Optional[int] = None
        self.image_key = ""
        self.is_expanded = False
        self.nodes = TreeNodeCollection()

    @property
    def is_placeholder(self) -> bool:
        return self.placeholder

    @property
    def has_placeholder(self) -> bool:
        """True while the node is expandable but its children are not loaded"""
        return len(self.nodes) == 1 and self.nodes[0].is_placeholder

    def __repr__(self) -> str:
        return f"TreeNode({self.text!r}, image_index={self.image_index}, image_key={self.image_key!r})"


class TreeNodeCollection:
    """Ordered children of a node, or the top level of a tree"""

    def __init__(self):
        self._nodes: List[TreeNode] = []

    def add(self, node: TreeNode) -> TreeNode:
        self._nodes.append(node)
        return node

    def add_placeholder(self) -> TreeNode:
        return self.add(TreeNode(placeholder=True))

    def clear(self) -> None:
        self._nodes.clear()

    def __getitem__(self, index: int) -> TreeNode:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[TreeNode]:
        return iter(self._nodes)


class TreeNodeImages:
    """Reserved image slots provided by the tree widget itself"""

    FOLDER = 1
    SUBMODULE = 2

    FIRST_FILE_SLOT = SUBMODULE + 1


class ImageCollection:
    """Icons shared by all nodes of a tree, addressable by slot index or key.

    Slots below ``TreeNodeImages.FIRST_FILE_SLOT`` belong to the widget;
    icons added by key are numbered after them and only those are counted.
    """

    def __init__(self, folder_image: Any = None, submodule_image: Any = None):
        self._reserved: Dict[int, Any] = {
            TreeNodeImages.FOLDER: folder_image,
            TreeNodeImages.SUBMODULE: submodule_image,
        }
        self._images: List[Any] = []
        self._keys: Dict[str, int] = {}

    def add(self, key: str, image: Any) -> int:
        """Add an image under ``key`` and return its slot index"""
        if key in self._keys:
            raise KeyError(f"Image key already present: {key}")
        self._images.append(image)
        self._keys[key] = TreeNodeImages.FIRST_FILE_SLOT + len(self._images) - 1
        return self._keys[key]

    def index_of_key(self, key: str) -> Optional[int]:
        return self._keys.get(key)

    def get(self, key: str) -> Any:
        index = self._keys.get(key)
        return None if index is None else self[index]

    def contains_key(self, key: str) -> bool:
        return key in self._keys

    def __getitem__(self, index: int) -> Any:
        if index < TreeNodeImages.FIRST_FILE_SLOT:
            return self._reserved.get(index)
        return self._images[index - TreeNodeImages.FIRST_FILE_SLOT]

    def __len__(self) -> int:
        return len(self._images)
