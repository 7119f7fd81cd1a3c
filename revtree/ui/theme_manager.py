import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from revtree.resources.resources_manager import ResourcesManager
from revtree.utils.exceptions import RevTreeException


class ThemeManager:
    """Select the style set used to render trees"""

    DEFAULT_THEME = {
        "name": "default",
        "description": "Default fallback theme",
        "root": "bold red",
        "directory": "bold light_green",
        "submodule": "bold magenta",
        "file": "yellow",
        "placeholder": "dim"
    }

    def __init__(self, theme_name: Optional[str] = None, theme_path: Union[str, Path] = None):
        self.theme_path = theme_path
        self.themes = self._load_themes()
        self.theme = self.get_theme(theme_name or "default")

    def _load_themes(self) -> Dict[str, Dict[str, str]]:
        try:
            themes = dict(ResourcesManager.get_themes())
            if self.theme_path:
                themes.update(ResourcesManager.get_themes(self.theme_path))
            return themes
        except RevTreeException as e:
            logging.warning(f"Could not load themes: {e}")
            return {"default": self.DEFAULT_THEME}

    def get_theme(self, name: str) -> Dict[str, str]:
        """Theme by name, missing styles filled from the default theme"""
        theme = self.themes.get(name)
        if theme is None:
            logging.warning(f"Theme '{name}' not found, using default theme")
            return {**self.DEFAULT_THEME, **self.themes.get("default", {})}
        return {**self.DEFAULT_THEME, **theme, "name": name}

    def available_themes(self) -> List[str]:
        return sorted(self.themes)
