# AAC board configuration
# Override paths and behaviour via aacboard.yaml, AACBOARD_CONFIG or CLI args.

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_PATH = Path("aacboard.yaml")
CONFIG_ENV = "AACBOARD_CONFIG"


@dataclass
class Config:
    """Runtime configuration for the board tools."""

    # Board file to load (and save to, unless save_path is set)
    board_path: str = "~/.local/share/aacboard/board.txt"
    save_path: str = ""

    # Behaviour
    reset_on_load: bool = True    # Select the first category after loading
    strict_load: bool = False     # Raise on the first load problem

    log_level: str = "INFO"

    def resolve_paths(self):
        """Expand ~ and default save_path to board_path."""
        self.board_path = str(Path(self.board_path).expanduser())
        if not self.save_path:
            self.save_path = self.board_path
        self.save_path = str(Path(self.save_path).expanduser())

    @classmethod
    def load(cls, path: Optional[str] = None) -> "Config":
        """Load config from YAML file, falling back to defaults."""
        if path:
            cfg_path = Path(path)
        elif os.environ.get(CONFIG_ENV):
            cfg_path = Path(os.environ[CONFIG_ENV])
        else:
            cfg_path = CONFIG_PATH

        known = {f.name for f in fields(cls)}
        cfg = cls()
        if cfg_path.exists():
            try:
                with open(cfg_path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
                if not isinstance(data, dict):
                    raise ValueError("top level must be a mapping")
                cfg = cls(**{k: v for k, v in data.items() if k in known})
            except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
                logger.warning(f"Ignoring config {cfg_path}: {e}")
                cfg = cls()
        cfg.resolve_paths()
        return cfg
