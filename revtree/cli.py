"""
revtree - Revision File Tree
Command Line Interface
"""
import click
import os
import sys
from pathlib import Path
from rich.console import Console

from revtree.config.config_manager import ConfigManager, config_command
from revtree.core.ls_tree import parse_ls_tree
from revtree.core.tree_builder import RevisionFileTreeController
from revtree.ui.file_icons import FileTypeIcons
from revtree.ui.theme_manager import ThemeManager
from revtree.ui.tree_node import ImageCollection, TreeNodeCollection
from revtree.ui.tree_renderer import TreeRenderer
from revtree.utils.exceptions import RevTreeException
from revtree.utils.exporters import TreeExporter
from revtree.utils.logging_setup import setup_logging


def _merge_config_with_kwargs(saved_config: dict, kwargs: dict) -> dict:
    """Merge saved config with CLI kwargs, prioritizing values given on the command line"""
    final_config = saved_config.copy()
    for key, value in kwargs.items():
        if value is not None:
            final_config[key] = value
    return final_config


def _write_or_echo(content: str, output_file) -> None:
    if output_file:
        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(content)
        click.echo(f"File tree exported to {output_path}")
    else:
        click.echo(content)


@click.group(context_settings=dict(help_option_names=['-h', '--help']))
def cli():
    """revtree - Browse repository trees with file icons"""
    pass


@cli.command()
@click.argument('listing', type=click.File('r', encoding='utf-8'), default='-', required=False)
@click.option('--depth', 'expand_depth', type=click.IntRange(min=0), help='Directory levels to expand')
@click.option('--all', 'expand_everything', is_flag=True, help='Expand every directory')
@click.option('-z', 'null_terminated', is_flag=True, help='Records are NUL terminated (git ls-tree -z)')
@click.option('--root', 'root_label', default='.', help='Label of the tree root')
@click.option('--icons/--no-icons', default=None, help='Show file icons')
@click.option('--icons-path', type=click.Path(exists=True), help='Custom icons file path')
@click.option('--color/--no-color', default=None, help='Enable colored output')
@click.option('--theme', help='Theme name')
@click.option('--theme-path', type=click.Path(exists=True), help='Custom theme path')
@click.option('--output-format', type=click.Choice(ConfigManager.OUTPUT_FORMATS))
@click.option('--output-file', type=click.Path(), help='Output file path')
@click.option('--strict/--no-strict', default=None, help='Fail on malformed listing lines')
@click.option('--log', 'log_path', type=click.Path(), help='Log file path')
def show(listing, expand_everything, null_terminated, root_label, **kwargs):
    """Show the tree of a `git ls-tree` listing read from LISTING or stdin.

    Examples:
        git ls-tree HEAD | revtree show
        git ls-tree -r -t -z HEAD | revtree show -z --all
        revtree show listing.txt --output-format html --output-file tree.html
    """
    saved_config = ConfigManager.load_config()
    final_config = _merge_config_with_kwargs(saved_config, kwargs)
    setup_logging(final_config.get('log_path'))

    try:
        items = parse_ls_tree(
            listing.read(),
            null_terminated=null_terminated,
            strict=final_config['strict']
        )

        icons = FileTypeIcons(final_config.get('icons_path'))
        controller = RevisionFileTreeController(icons, working_dir=os.getcwd())
        nodes = TreeNodeCollection()
        images = ImageCollection()
        controller.load_items_in_tree_view(items, nodes, images)
        controller.expand_all(
            nodes,
            images,
            max_depth=None if expand_everything else final_config.get('expand_depth')
        )

        output_format = final_config['output_format']
        exporter = TreeExporter(nodes, images, root_label)
        if output_format == 'text':
            theme_manager = ThemeManager(
                theme_name=final_config.get('theme'),
                theme_path=final_config.get('theme_path')
            )
            if final_config.get('theme') and theme_manager.theme['name'] != final_config['theme']:
                click.echo(f"Warning: Theme '{final_config['theme']}' not found, using default theme", err=True)
            renderer = TreeRenderer(
                theme_manager.theme,
                icons=icons,
                show_icons=final_config['icons'],
                color=final_config['color']
            )
            console = Console(color_system="auto" if final_config['color'] else None)
            console.print(renderer.render(nodes, images, root_label))
        elif output_format == 'json':
            _write_or_echo(exporter.to_json(), final_config.get('output_file'))
        elif output_format == 'markdown':
            _write_or_echo(exporter.to_markdown(), final_config.get('output_file'))
        elif output_format == 'html':
            if not final_config.get('output_file'):
                click.echo("Error: --output-file is required for html format", err=True)
                sys.exit(2)
            output_path = exporter.export_html(final_config['output_file'])
            click.echo(f"File tree exported to {output_path}")
    except RevTreeException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.option('--theme-path', type=click.Path(exists=True), help='Custom theme path')
def themes(theme_path):
    """List available themes."""
    theme_manager = ThemeManager(theme_path=theme_path)
    for name in theme_manager.available_themes():
        description = theme_manager.themes[name].get('description', '')
        click.echo(f"{name}: {description}" if description else name)


@cli.command()
@click.argument('action', type=click.Choice(['view', 'reset', 'set']), required=False)
@click.argument('key', required=False)
@click.argument('value', required=False)
def config(action, key=None, value=None):
    """Manage revtree configuration."""
    if not action:
        click.echo("Usage: revtree config [view|reset|set] [key] [value]")
        return
    config_command(action, key, value)


def main():
    """Entry point for the CLI."""
    cli(prog_name="revtree")


if __name__ == '__main__':
    main()
