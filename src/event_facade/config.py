"""Alias preset loader for event_facade."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

import yaml

from event_facade.errors import AliasConfigError
from event_facade.settings import get_settings

logger = logging.getLogger(__name__)


class Config:
    """
    Named alias maps loaded from YAML.

    Each preset is an ordinary alias map for Identify.traits(),
    Track.traits() or Track.properties(), e.g.:

        crm_contact:
          firstName: first_name
          lastName: last_name
    """

    @classmethod
    def alias_config_path(cls) -> Path:
        """Return the configured path of the alias presets file."""
        return get_settings().ALIAS_CONFIG_PATH

    @classmethod
    def load_alias_presets(cls, path: Optional[Path] = None) -> Dict[str, Dict[str, str]]:
        """
        Load and validate all alias presets.

        Args:
            path: YAML file to read. Defaults to the configured path.

        Returns:
            Mapping of preset name to alias map. A fresh copy on every call.

        Raises:
            AliasConfigError: If the file is missing or not shaped as
                name -> {source: destination}
        """
        resolved = Path(path).resolve() if path else cls.alias_config_path().resolve()
        presets = cls._read_alias_presets(resolved)
        return {name: dict(aliases) for name, aliases in presets.items()}

    @classmethod
    @lru_cache
    def _read_alias_presets(cls, path: Path) -> Dict[str, Dict[str, str]]:
        """Read and validate the presets at an absolute path, cached per path."""
        if not path.exists():
            raise AliasConfigError(f"Missing alias config at {path}")

        with open(path, encoding="utf-8") as f:
            try:
                content = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise AliasConfigError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(content, dict):
            raise AliasConfigError(f"Alias config {path} must be a mapping of presets")

        presets: Dict[str, Dict[str, str]] = {}
        for name, aliases in content.items():
            if not isinstance(aliases, dict):
                raise AliasConfigError(f"Preset {name!r} must be a mapping")
            for source, dest in aliases.items():
                if not isinstance(source, str) or not isinstance(dest, str):
                    raise AliasConfigError(
                        f"Preset {name!r} has a non-string alias {source!r}: {dest!r}"
                    )
            presets[str(name)] = dict(aliases)

        logger.info(f"Loaded {len(presets)} alias presets from {path}")
        return presets

    @classmethod
    def get_alias_preset(cls, name: str, path: Optional[Path] = None) -> Dict[str, str]:
        """
        Return a copy of one alias preset.

        Raises:
            AliasConfigError: If no preset is called ``name``
        """
        presets = cls.load_alias_presets(path)
        if name not in presets:
            raise AliasConfigError(f"Unknown alias preset {name!r}")
        return presets[name]
