"""
Compliance Configuration Loader.

Loads the static compliance tables from YAML configuration files, enabling:
- Checklist and blackout policy updates without code changes
- Audit trail through per-file ``_metadata`` blocks
- Fail-fast validation of required keys at load time
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from domain.exceptions import ComplianceConfigError

logger = logging.getLogger(__name__)

# Default config directory
CONFIG_DIR = Path(__file__).parent / "compliance_parameters"

CHECKLIST_TEMPLATES_FILE = "checklist_templates.yaml"
BLACKOUT_PERIODS_FILE = "blackout_periods.yaml"
COMMENT_LETTER_TYPES_FILE = "comment_letter_types.yaml"

# Top-level keys each file must carry
REQUIRED_KEYS: Dict[str, List[str]] = {
    BLACKOUT_PERIODS_FILE: ["blackout_periods"],
    COMMENT_LETTER_TYPES_FILE: ["comment_letter_types"],
}


@dataclass
class ConfigMetadata:
    """Metadata about a configuration file."""
    version: str
    effective_date: str
    source: str  # "SEC", "custom"
    sec_references: List[str] = field(default_factory=list)
    last_updated: str = ""
    updated_by: str = ""
    notes: str = ""


class ComplianceConfigLoader:
    """
    Loads and caches the compliance YAML tables.

    Each file is read at most once per loader instance.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize the config loader.

        Args:
            config_dir: Directory containing YAML config files.
                       Defaults to src/config/compliance_parameters/
        """
        self.config_dir = Path(config_dir) if config_dir else CONFIG_DIR
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._metadata: Dict[str, ConfigMetadata] = {}

    def load_file(self, filename: str) -> Dict[str, Any]:
        """
        Load one configuration file.

        Args:
            filename: File name relative to the config directory

        Returns:
            Parsed mapping without its ``_metadata`` block

        Raises:
            FileNotFoundError: If the file does not exist
            ComplianceConfigError: If the file is not a valid mapping or
                misses a required key
        """
        if filename in self._configs:
            return self._configs[filename]

        path = self.config_dir / filename
        if not path.exists():
            raise FileNotFoundError(f"Compliance config file not found: {path}")

        logger.info(f"Loading compliance config from {path}")
        with open(path, 'r') as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ComplianceConfigError(
                    f"Could not parse {filename}: {e}", {"file": filename}
                ) from e

        if not isinstance(config, dict):
            raise ComplianceConfigError(
                f"{filename} must contain a mapping at the top level", {"file": filename}
            )

        if '_metadata' in config:
            try:
                self._metadata[filename] = ConfigMetadata(**config.pop('_metadata'))
            except TypeError as e:
                raise ComplianceConfigError(
                    f"Invalid _metadata block in {filename}: {e}", {"file": filename}
                ) from e

        self._validate_config(config, filename)
        self._configs[filename] = config
        return config

    def _validate_config(self, config: Dict[str, Any], filename: str) -> None:
        """Check that the file carries every required top-level key."""
        missing = [k for k in REQUIRED_KEYS.get(filename, []) if k not in config]
        if missing:
            raise ComplianceConfigError(
                f"Missing required keys in {filename}: {missing}",
                {"file": filename, "missing": missing},
            )

    def get_metadata(self, filename: str) -> Optional[ConfigMetadata]:
        """Get metadata for a configuration file."""
        self.load_file(filename)  # Ensure loaded
        return self._metadata.get(filename)

    def get_checklist_templates(self) -> Dict[str, Any]:
        """Raw checklist templates keyed by filing type value."""
        return self.load_file(CHECKLIST_TEMPLATES_FILE)

    def get_blackout_periods(self) -> List[Dict[str, Any]]:
        """Raw blackout period records."""
        return self.load_file(BLACKOUT_PERIODS_FILE)["blackout_periods"]

    def get_comment_letter_types(self) -> List[Dict[str, Any]]:
        """Raw SEC comment letter type records."""
        return self.load_file(COMMENT_LETTER_TYPES_FILE)["comment_letter_types"]


# Global singleton
_config_loader: Optional[ComplianceConfigLoader] = None


def get_config_loader() -> ComplianceConfigLoader:
    """Get the global config loader instance."""
    global _config_loader
    if _config_loader is None:
        _config_loader = ComplianceConfigLoader()
    return _config_loader


def clear_config_cache() -> None:
    """Clear the configuration cache (useful for testing)."""
    global _config_loader
    _config_loader = None
