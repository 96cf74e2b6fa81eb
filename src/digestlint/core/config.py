"""
Configuration module for digestlint.

Supports loading from YAML/JSON files with environment variable overrides.
Default values are loaded from defaults.yaml for maintainability.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from digestlint.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Path to the default configuration file
_DEFAULTS_CONFIG_PATH = Path(__file__).parent / "defaults.yaml"

# Cache for default values
_defaults_cache: dict[str, Any] | None = None


def _load_defaults() -> dict[str, Any]:
    """Load default configuration values from defaults.yaml."""
    global _defaults_cache

    if _defaults_cache is not None:
        return _defaults_cache

    if not _DEFAULTS_CONFIG_PATH.exists():
        logger.warning(f"Defaults config not found: {_DEFAULTS_CONFIG_PATH}")
        _defaults_cache = {}
        return _defaults_cache

    try:
        content = _DEFAULTS_CONFIG_PATH.read_text(encoding="utf-8")
        _defaults_cache = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse defaults config: {e}")
        _defaults_cache = {}

    return _defaults_cache


def _get_default(section: str, key: str, fallback: Any = None) -> Any:
    """Get a default value from the defaults config."""
    defaults = _load_defaults()
    section_defaults = defaults.get(section) or {}
    value = section_defaults.get(key, fallback)
    # Never hand out the cached list itself
    if isinstance(value, list):
        return list(value)
    return value


@dataclass
class ScanConfig:
    """Configuration for directory scans."""

    skip_patterns: list[str] = field(
        default_factory=lambda: _get_default("scan", "skip_patterns", [])
    )


@dataclass
class ReportConfig:
    """Configuration for report output."""

    verbose: bool = field(default_factory=lambda: _get_default("report", "verbose", False))


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = field(default_factory=lambda: _get_default("logging", "level", "ERROR"))
    format: str = field(
        default_factory=lambda: _get_default("logging", "format", "%(message)s")
    )


@dataclass
class DigestLintConfig:
    """Main configuration class for digestlint."""

    scan: ScanConfig = field(default_factory=ScanConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, path: Path | str) -> "DigestLintConfig":
        """
        Load configuration from a YAML or JSON file.

        Args:
            path: Path to the configuration file (.yaml, .yml, or .json)

        Returns:
            DigestLintConfig instance with loaded values

        Raises:
            FileNotFoundError: If the config file doesn't exist
            ConfigurationError: If the file format is unsupported or the
                contents are invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        content = path.read_text(encoding="utf-8")

        try:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(content) or {}
            elif path.suffix == ".json":
                data = json.loads(content) if content.strip() else {}
            else:
                raise ConfigurationError(f"Unsupported config file format: {path.suffix}")
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to parse config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> "DigestLintConfig":
        """Create DigestLintConfig from a dictionary."""
        config = cls()

        sections = {
            "scan": ScanConfig,
            "report": ReportConfig,
            "logging": LoggingConfig,
        }
        for name, section_cls in sections.items():
            if name not in data:
                continue
            values = data[name] or {}
            if not isinstance(values, dict):
                raise ConfigurationError(f"Invalid '{name}' section: expected a mapping")
            try:
                setattr(config, name, section_cls(**values))
            except TypeError as e:
                raise ConfigurationError(f"Invalid '{name}' section: {e}") from e

        unknown = set(data) - set(sections)
        if unknown:
            raise ConfigurationError(f"Unknown config sections: {', '.join(sorted(unknown))}")

        config._check_types()
        return config

    def _check_types(self) -> None:
        """Reject values whose type would be silently misread."""
        patterns = self.scan.skip_patterns
        if not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns):
            raise ConfigurationError("scan.skip_patterns must be a list of strings")
        if not isinstance(self.report.verbose, bool):
            raise ConfigurationError("report.verbose must be true or false")
        for key in ("level", "format"):
            if not isinstance(getattr(self.logging, key), str):
                raise ConfigurationError(f"logging.{key} must be a string")

    def apply_env_overrides(self) -> "DigestLintConfig":
        """
        Apply environment variable overrides to the configuration.

        Environment variables follow the pattern: DIGESTLINT_<SECTION>_<KEY>
        Examples:
            - DIGESTLINT_SCAN_SKIP_PATTERNS (one pattern per line)
            - DIGESTLINT_REPORT_VERBOSE
            - DIGESTLINT_LOGGING_LEVEL

        Returns:
            Self with environment overrides applied
        """
        env_mappings = {
            "DIGESTLINT_SCAN_SKIP_PATTERNS": ("scan", "skip_patterns", _parse_lines),
            "DIGESTLINT_REPORT_VERBOSE": ("report", "verbose", _parse_bool),
            "DIGESTLINT_LOGGING_LEVEL": ("logging", "level", str),
            "DIGESTLINT_LOGGING_FORMAT": ("logging", "format", str),
        }

        for env_var, (section, key, converter) in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                section_obj = getattr(self, section)
                setattr(section_obj, key, converter(value))

        return self

    def to_dict(self) -> dict:
        """Convert configuration to a dictionary."""
        return asdict(self)

    def to_yaml(self) -> str:
        """Serialize configuration to YAML string."""
        return yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)

    def to_json(self) -> str:
        """Serialize configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    def save(self, path: Path | str) -> None:
        """
        Save configuration to a file.

        Args:
            path: Path to save the configuration (.yaml, .yml, or .json)

        Raises:
            ConfigurationError: If the file format is unsupported
        """
        path = Path(path)

        if path.suffix in (".yaml", ".yml"):
            content = self.to_yaml()
        elif path.suffix == ".json":
            content = self.to_json()
        else:
            raise ConfigurationError(f"Unsupported config file format: {path.suffix}")

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


def _parse_bool(value: str) -> bool:
    """Parse a string to boolean."""
    return value.lower() in ("true", "1", "yes", "on")


def _parse_lines(value: str) -> list[str]:
    """Split a newline-separated list, dropping blank lines."""
    return [line for line in value.splitlines() if line.strip()]


def load_config(
    config_path: Optional[Path | str] = None, apply_env: bool = True
) -> DigestLintConfig:
    """
    Load configuration with optional environment variable overrides.

    Args:
        config_path: Optional path to config file. If None, uses defaults.
        apply_env: Whether to apply environment variable overrides.

    Returns:
        DigestLintConfig instance
    """
    if config_path:
        config = DigestLintConfig.from_file(config_path)
    else:
        config = DigestLintConfig()

    if apply_env:
        config.apply_env_overrides()

    return config
