import logging
import posixpath
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Union

from revtree.resources.resources_manager import ResourcesManager
from revtree.ui.tree_node import ImageCollection


class IconProvider(Protocol):
    """Anything able to produce an icon for a file, or None when it has none"""

    def get(self, context: str, file_name: str) -> Optional[Any]:
        ...


def get_extension(file_name: str) -> Optional[str]:
    """Return the extension of ``file_name`` including its dot, or None.

    ``"a.txt"`` gives ``".txt"``; ``"a"`` and ``"a."`` have no extension.
    """
    base_name = posixpath.basename(file_name.replace("\\", "/"))
    _, dot, extension = base_name.rpartition(".")
    if not dot or not extension:
        return None
    return f".{extension}"


class FileTypeIcons:
    """Manage file type icons for enhanced visualization"""

    def __init__(self, json_path: Union[str, Path] = None):
        self.json_path = json_path
        self._icons: Optional[Dict[str, str]] = None

    def load_icons(self) -> Dict[str, str]:
        """Load icons from JSON file, but only once."""
        if self._icons is None:
            icons_data = ResourcesManager.get_icons(self.json_path)
            self._icons = {
                **icons_data.get('file_types', {}),
                **icons_data.get('special', {})
            }
        return self._icons

    def get(self, context: str, file_name: str) -> Optional[str]:
        """Icon for ``file_name`` by extension, None when the extension is unknown"""
        extension = get_extension(file_name)
        if extension is None:
            return None
        return self.load_icons().get(extension.lower())

    def get_special(self, name: str) -> str:
        """Icon for one of the special entries (directory, submodule, placeholder)"""
        return self.load_icons().get(name, "")


class IconCache:
    """Resolves file icons by extension, asking the provider once per extension.

    Resolved icons go into ``images`` under the extension key. Misses are
    remembered too, so the provider is never asked twice for the same
    extension. The cache lives as long as the image collection it fills.
    """

    def __init__(self, provider: IconProvider, images: ImageCollection, context: str = ""):
        self.provider = provider
        self.images = images
        self.context = context
        self._slots: Dict[str, Optional[int]] = {}

    def resolve(self, extension: Optional[str], sample_file_name: str) -> Optional[int]:
        """Slot index of the icon for ``extension``, or None if there is none"""
        if not extension:
            return None
        if extension in self._slots:
            return self._slots[extension]

        slot = self.images.index_of_key(extension)
        if slot is None:
            icon = self.provider.get(self.context, sample_file_name)
            if icon is None:
                logging.debug(f"No icon available for {extension} ({sample_file_name})")
            else:
                slot = self.images.add(extension, icon)

        self._slots[extension] = slot
        return slot

    def __contains__(self, extension: str) -> bool:
        return extension in self._slots

    def __len__(self) -> int:
        return len(self._slots)
