"""Project configuration (`.localize.yml`)."""

import re
import yaml
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple
from dataclasses import asdict, dataclass, field, fields

if TYPE_CHECKING:
    from ..sources.strings_catalog import StringsCatalog
    from ..widgets.notifications import LocaleNotifier

CONFIG_FILE_NAME = '.localize.yml'

LANGUAGE_CODE_PATTERN = re.compile(r'[A-Za-z]{2}(?:-[A-Za-z0-9]{2,4})?')


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Configuration validation failed: {'; '.join(errors)}")


class ConfigValidationWarning:
    """Represents a configuration warning (non-fatal)."""

    def __init__(self, message: str):
        self.message = message

    def __str__(self):
        return self.message


@dataclass
class ProjectConfig:
    """Project metadata."""
    name: str = "Unnamed Project"


@dataclass
class PathsConfig:
    """Where the .lproj folders and images live."""
    resources: str = "."
    images: str = ""
    exclude: List[str] = field(default_factory=lambda: [
        'build/', '.build/', 'DerivedData/', 'Pods/', 'Carthage/', 'vendor/', '.git/',
    ])


@dataclass
class LanguagesConfig:
    """Primary (fallback) and current language."""
    primary: str = "en"  # fallback for keys missing in the current language
    current: str = ""  # empty -> primary
    supported: List[str] = field(default_factory=lambda: ["en"])

    @property
    def active(self) -> str:
        return self.current or self.primary


@dataclass
class FontsConfig:
    """Fonts available to the host application."""
    available: List[str] = field(default_factory=list)
    default_size: float = 12.0


@dataclass
class LoggingConfig:
    """Defaults for the CLI logging flags."""
    verbose: bool = False
    quiet: bool = False
    file: str = ""


@dataclass
class Config:
    """Main configuration class; one attribute per YAML section."""
    project: ProjectConfig = field(default_factory=ProjectConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    languages: LanguagesConfig = field(default_factory=LanguagesConfig)
    fonts: FontsConfig = field(default_factory=FontsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from YAML.

        Without an explicit path ``./.localize.yml`` is used when present,
        otherwise the defaults.

        Raises:
            OSError: An explicit file that cannot be read
            yaml.YAMLError: Malformed YAML
            ConfigValidationError: The document or a section is not a
                mapping, or a section has unknown keys
        """
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILE_NAME
            if not config_path.exists():
                return cls()

        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigValidationError([
                f"{config_path}: expected a mapping of sections, got {type(data).__name__}"
            ])

        sections = {}
        for section in fields(cls):
            values = data.get(section.name) or {}
            if not isinstance(values, dict):
                raise ConfigValidationError([
                    f"Section '{section.name}' must be a mapping, got {type(values).__name__}"
                ])
            known = [f.name for f in fields(section.default_factory)]
            unknown = sorted(str(key) for key in values if key not in known)
            if unknown:
                raise ConfigValidationError([
                    f"Unknown key(s) in section '{section.name}': {', '.join(unknown)} "
                    f"(allowed: {', '.join(known)})"
                ])
            sections[section.name] = section.default_factory(**values)
        return cls(**sections)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict in the YAML layout (section order preserved)."""
        return asdict(self)

    def save(self, config_path: Optional[Path] = None):
        """Write the configuration as YAML (default: ./.localize.yml)."""
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILE_NAME

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def validate(self, raise_on_error: bool = False) -> Tuple[List[str], List[ConfigValidationWarning]]:
        """
        Validate configuration and return errors and warnings.

        Missing paths and languages outside ``supported`` are warnings;
        malformed language codes, a non-positive default font size and
        conflicting logging flags are errors.

        Args:
            raise_on_error: If True, raise ConfigValidationError on validation errors

        Returns:
            Tuple of (errors, warnings) lists
        """
        errors: List[str] = []
        warnings: List[ConfigValidationWarning] = []

        self._check_paths(warnings)
        self._check_languages(errors, warnings)

        size = self.fonts.default_size
        if isinstance(size, bool) or not isinstance(size, (int, float)) or size <= 0:
            errors.append(f"fonts.default_size must be a positive number, got {size!r}")

        if self.logging.verbose and self.logging.quiet:
            errors.append("logging.verbose and logging.quiet cannot both be enabled")

        if raise_on_error and errors:
            raise ConfigValidationError(errors)

        return errors, warnings

    def _check_paths(self, warnings: List[ConfigValidationWarning]) -> None:
        checked = [('Resources', self.paths.resources), ('Images', self.paths.images)]
        for label, path in checked:
            if path and not Path(path).exists():
                warnings.append(ConfigValidationWarning(f"{label} path does not exist: {path}"))

    def _check_languages(self, errors: List[str], warnings: List[ConfigValidationWarning]) -> None:
        languages = self.languages

        if not self._is_valid_lang_code(languages.primary):
            errors.append(
                f"Invalid primary language code: '{languages.primary}'. "
                f"Use ISO 639-1 format (e.g., 'en', 'es', 'pt-BR')"
            )
        if languages.current and not self._is_valid_lang_code(languages.current):
            errors.append(f"Invalid current language code: '{languages.current}'")
        for code in languages.supported:
            if not self._is_valid_lang_code(code):
                errors.append(f"Invalid supported language code: '{code}'. Use ISO 639-1 format")

        if languages.primary not in languages.supported:
            warnings.append(ConfigValidationWarning(
                f"Primary language '{languages.primary}' not in supported languages list"
            ))
        if languages.current and languages.current not in languages.supported:
            warnings.append(ConfigValidationWarning(
                f"Current language '{languages.current}' not in supported languages list"
            ))

    @staticmethod
    def _is_valid_lang_code(code: str) -> bool:
        """Two-letter code with an optional region or script (en, pt-BR, zh-Hans)."""
        return isinstance(code, str) and LANGUAGE_CODE_PATTERN.fullmatch(code) is not None

    def build_catalog(self, notifier: Optional['LocaleNotifier'] = None) -> 'StringsCatalog':
        """Create a StringsCatalog from the configured paths and languages."""
        from ..sources.strings_catalog import StringsCatalog

        return StringsCatalog(
            resources_dir=Path(self.paths.resources),
            default_language=self.languages.primary,
            language=self.languages.active,
            images_dir=Path(self.paths.images) if self.paths.images else None,
            fonts=self.fonts.available,
            notifier=notifier,
            exclude=[entry.strip('/') for entry in self.paths.exclude],
        )


def create_default_config(project_name: str = "Unnamed Project") -> Config:
    """Create default configuration for a project."""
    config = Config()
    config.project.name = project_name
    config.paths.resources = './Resources'
    config.paths.images = './Resources/Images'
    return config
