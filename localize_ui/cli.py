"""Command-line interface for localize-ui."""

import sys
import argparse
import yaml
from pathlib import Path
from typing import Optional

from .__version__ import __version__
from .core.resolver import KeyResolver
from .core.segments import key_for_segment, segment_keys
from .core.types import FontSpec
from .sources.strings_catalog import StringsCatalog
from .utils.colors import Colors
from .utils.config import CONFIG_FILE_NAME, Config, ConfigValidationError, create_default_config
from .utils.logging import configure_logging


def load_and_validate_config(
    config_path: Optional[Path] = None,
    validate: bool = True,
    verbose: bool = False
) -> Config:
    """
    Load configuration and optionally validate it.

    Args:
        config_path: Explicit config file (default: ./.localize.yml if present)
        validate: Whether to validate the config
        verbose: Whether to print warnings

    Returns:
        Loaded Config object

    Raises:
        ConfigValidationError: If the file is not a valid config or validation fails
        yaml.YAMLError: If the file is not valid YAML
    """
    try:
        config = Config.from_file(config_path)
    except ConfigValidationError as e:
        print(f"{Colors.error('❌')} Invalid configuration file:")
        for error in e.errors:
            print(f"   • {error}")
        raise

    if validate:
        errors, warnings = config.validate()

        if verbose and warnings:
            for warning in warnings:
                print(f"{Colors.warning('⚠️')}  Config warning: {warning}")

        if errors:
            print(f"{Colors.error('❌')} Configuration errors:")
            for error in errors:
                print(f"   • {error}")
            raise ConfigValidationError(errors)

    return config


def _prepare(args) -> Optional[Config]:
    """Load config and configure logging for a command; None on config errors."""
    config_path = Path(args.config) if getattr(args, 'config', None) else None
    verbose = getattr(args, 'verbose', False)

    try:
        config = load_and_validate_config(config_path, validate=True, verbose=verbose)
    except (ConfigValidationError, yaml.YAMLError, OSError) as e:
        if not isinstance(e, ConfigValidationError):
            print(f"{Colors.error('❌')} Could not load configuration: {e}")
        return None

    log_file = getattr(args, 'log_file', None) or config.logging.file
    configure_logging(
        verbose=verbose or config.logging.verbose,
        quiet=getattr(args, 'quiet', False) or config.logging.quiet,
        log_file=Path(log_file) if log_file else None,
    )
    return config


def _open_catalog(config: Config, language: Optional[str]) -> Optional[StringsCatalog]:
    catalog = config.build_catalog()
    if language and not catalog.update_language(language):
        print(f"{Colors.error('❌')} Language not available: {language}")
        available = catalog.available_languages()
        if available:
            print(f"   Available: {', '.join(available)}")
        return None
    return catalog


def cmd_init(args):
    """Initialize configuration file (--config PATH, default ./.localize.yml)."""
    config_arg = getattr(args, 'config', None)
    config_path = Path(config_arg) if config_arg else Path.cwd() / CONFIG_FILE_NAME

    if config_path.exists() and not args.force:
        print(f"{Colors.error('❌')} Config already exists: {config_path}")
        print("   Use --force to overwrite")
        return 1

    config = create_default_config(args.name)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config.save(config_path)

    print(f"{Colors.success('✅')} Created: {config_path}")
    print(f"\nEdit {config_path.name} to point 'paths.resources' at your *.lproj folders.")
    return 0


def cmd_languages(args):
    """List languages found in the resources directory."""
    config = _prepare(args)
    if config is None:
        return 1

    catalog = config.build_catalog()
    languages = catalog.available_languages()
    if not languages:
        print(f"{Colors.error('❌')} No localization files found in {config.paths.resources}")
        return 1

    for code in languages:
        marker = '*' if code == catalog.language else ' '
        files = len(catalog.files.get(code, []))
        print(f" {marker} {Colors.key(code)}: {len(catalog.keys(code))} keys in {files} tables")
    return 0


def cmd_text(args):
    """Resolve a text value and/or key."""
    config = _prepare(args)
    if config is None:
        return 1

    catalog = _open_catalog(config, args.lang)
    if catalog is None:
        return 1

    resolver = KeyResolver(catalog, default_font_size=config.fonts.default_size)
    result = resolver.resolve_text(args.key, args.value, update_key=not args.no_update_key)

    print(result.text)
    if result.key != args.key:
        print(f"{Colors.muted('key captured:')} {Colors.key(result.key)}")
    return 0


def cmd_font(args):
    """Resolve a font from a style key, size key and/or current font."""
    config = _prepare(args)
    if config is None:
        return 1

    catalog = _open_catalog(config, args.lang)
    if catalog is None:
        return 1

    current = None
    if args.name:
        size = args.size if args.size is not None else config.fonts.default_size
        current = FontSpec(name=args.name, point_size=size)

    resolver = KeyResolver(catalog, default_font_size=config.fonts.default_size)
    font = resolver.resolve_font(args.key, args.size_key, current)

    if font is None or font is current:
        print(Colors.muted('unchanged'))
        return 0

    print(f"{font.name} {font.point_size:g}pt")
    return 0


def cmd_segment(args):
    """Expand a segmented key spec."""
    if args.index is not None:
        key = key_for_segment(args.index, args.spec)
        print(key if key is not None else Colors.muted('(unchanged)'))
        return 0

    for index, key in enumerate(segment_keys(args.spec, args.count)):
        print(f"{index}: {key if key is not None else Colors.muted('(unchanged)')}")
    return 0


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='localize-ui',
        description='Resolve localized text, fonts and images for UI components',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--config', metavar='PATH', help=f'Config file (default: ./{CONFIG_FILE_NAME})')
    parser.add_argument('--verbose', '-v', action='store_true', help='Show debug output')
    parser.add_argument('--quiet', '-q', action='store_true', help='Only show warnings and errors')
    parser.add_argument('--log-file', metavar='PATH', help='Also write logs to a file')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # init command
    init_parser = subparsers.add_parser('init', help='Create a configuration file')
    init_parser.add_argument('--name', default='Unnamed Project', help='Project name')
    init_parser.add_argument('--force', action='store_true', help='Overwrite existing config')

    # languages command
    subparsers.add_parser('languages', help='List available languages')

    # text command
    text_parser = subparsers.add_parser('text', help='Resolve a text value or key')
    text_parser.add_argument('value', nargs='?', help='Text currently displayed')
    text_parser.add_argument('--key', '-k', help='Stored localization key')
    text_parser.add_argument('--lang', '-l', metavar='CODE', help='Language to resolve in')
    text_parser.add_argument('--no-update-key', action='store_true',
                             help='Do not capture the value as key')

    # font command
    font_parser = subparsers.add_parser('font', help='Resolve a font')
    font_parser.add_argument('--key', '-k', help='Font style key (e.g. font.bold)')
    font_parser.add_argument('--size-key', '-s', help='Font size key or literal size')
    font_parser.add_argument('--name', '-n', help='Current font name')
    font_parser.add_argument('--size', type=float, help='Current font point size')
    font_parser.add_argument('--lang', '-l', metavar='CODE', help='Language to resolve in')

    # segment command
    segment_parser = subparsers.add_parser('segment', help='Expand a segmented key spec')
    segment_parser.add_argument('spec', help='Spec such as "nav: one, two"')
    segment_group = segment_parser.add_mutually_exclusive_group(required=True)
    segment_group.add_argument('--index', '-i', type=int, help='Segment index')
    segment_group.add_argument('--count', '-c', type=int, help='Number of segments')

    args = parser.parse_args()

    if args.command == 'init':
        return cmd_init(args)
    elif args.command == 'languages':
        return cmd_languages(args)
    elif args.command == 'text':
        return cmd_text(args)
    elif args.command == 'font':
        return cmd_font(args)
    elif args.command == 'segment':
        return cmd_segment(args)
    else:
        parser.print_help()
        return 0


if __name__ == '__main__':
    sys.exit(main())
