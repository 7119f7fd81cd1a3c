import json
import importlib.resources
from pathlib import Path
from typing import Union, Dict

from revtree.utils.exceptions import InvalidConfigException, ResourceNotFoundException


class ResourcesManager:
    """Centralized manager to load and store resources like icons, themes, templates etc."""

    _resources = {}  # Store loaded resources here

    @classmethod
    def _read_package_text(cls, *parts: str) -> str:
        resource = importlib.resources.files('revtree.resources')
        for part in parts:
            resource = resource.joinpath(part)
        return resource.read_text(encoding='utf-8')

    @classmethod
    def _load_json_resource(cls, resource_name: str, json_path: Union[str, Path] = None) -> Dict:
        """Load a JSON resource and cache it."""
        cache_key = str(json_path) if json_path is not None else resource_name
        if cache_key in cls._resources:
            return cls._resources[cache_key]

        try:
            if json_path is None:
                data = json.loads(cls._read_package_text(resource_name))
            else:
                with open(json_path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
        except FileNotFoundError:
            where = json_path if json_path is not None else "package resources"
            raise ResourceNotFoundException(f"{resource_name} not found in {where}")
        except json.JSONDecodeError:
            raise InvalidConfigException(f"Invalid JSON format in {resource_name}")

        cls._resources[cache_key] = data
        return data

    @classmethod
    def get_template(cls, template_name: str) -> str:
        """Get template content from resources."""
        cache_key = f"templates/{template_name}"
        if cache_key in cls._resources:
            return cls._resources[cache_key]

        try:
            template_content = cls._read_package_text('templates', template_name)
        except FileNotFoundError:
            raise ResourceNotFoundException(f"Template {template_name} not found in package resources")
        cls._resources[cache_key] = template_content
        return template_content

    @classmethod
    def get_icons(cls, json_path: Union[str, Path] = None) -> Dict:
        """Get icons data."""
        return cls._load_json_resource('icons.json', json_path)

    @classmethod
    def get_themes(cls, json_path: Union[str, Path] = None) -> Dict:
        """Get themes data."""
        return cls._load_json_resource('themes.json', json_path)

    @classmethod
    def clear(cls) -> None:
        cls._resources = {}
