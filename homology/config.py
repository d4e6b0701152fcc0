"""
Configuration for persistence calculations.
"""

import logging
import math
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional, Union

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PersistenceConfig:
    """Knobs of the reduction and of the Rips feeder."""
    twist: bool = True                 # clear creator columns while reducing
    use_union_find: bool = True        # settle dimension 0 without a matrix
    unpaired_value: float = math.inf   # death assigned to features that never die
    max_dimension: int = 2             # Rips expansion limit
    epsilon: Optional[float] = None    # Rips edge length limit, None means no limit

    def replace(self, **overrides) -> "PersistenceConfig":
        overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **overrides)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "PersistenceConfig":
        """Create configuration from dictionary; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            logger.warning(f"Ignoring unknown persistence config keys: {unknown}")
        values = {k: v for k, v in config_dict.items() if k in known}
        if values.get('unpaired_value') is not None:
            values['unpaired_value'] = float(values['unpaired_value'])
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "PersistenceConfig":
        """Load configuration from YAML file, optionally under a `persistence` key."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r") as f:
            yaml_config = yaml.safe_load(f) or {}

        return cls.from_dict(yaml_config.get("persistence", yaml_config))
