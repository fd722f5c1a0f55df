# AGPL-3.0 License

"""
Loading of label rule files from disk.

The historical format is a JSON object mapping label names to lists of path
prefixes (`.github/labels.json`). Files ending in `.toml` are read as TOML
with the same top-level shape.
"""

import json
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pr_labeler.config_loader import _find_repository_root
from pr_labeler.labeling.label_rules import ConfigurationError, LabelRules
from pr_labeler.log import get_logger


def _reject_duplicate_labels(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    result = {}
    for key, value in pairs:
        if key in result:
            raise ConfigurationError(f"Duplicate label '{key}' in label configuration")
        result[key] = value
    return result


class RulesLoader:
    """
    Reads, decodes and validates a label configuration file.
    """

    def __init__(self, repo_root: Optional[Path] = None):
        """
        Initialize the loader.

        Args:
            repo_root: Directory relative paths are resolved against
                (defaults to the enclosing git checkout, else the working directory)
        """
        self.repo_root = Path(repo_root or _find_repository_root() or Path.cwd()).resolve()
        self.logger = get_logger()

    def resolve_path(self, config_path: str) -> Path:
        path = Path(config_path)
        if not path.is_absolute():
            path = self.repo_root / path
        return path

    def load(self, config_path: str) -> LabelRules:
        """
        Load and validate the label configuration at the given path.

        Args:
            config_path: Path to the configuration file (absolute or relative to repo root)

        Returns:
            Validated LabelRules

        Raises:
            ConfigurationError: If the file is missing, unreadable, unparsable or invalid
        """
        if not config_path:
            raise ConfigurationError("Config path is required but not provided.")

        path = self.resolve_path(config_path)
        if not path.is_file():
            raise ConfigurationError(f"Config file not found at path: {config_path}")

        data = self._decode(path)
        rules = LabelRules.from_mapping(data)

        self.logger.info(
            f"Loaded {len(rules)} label rules",
            extra={"config_path": str(path), "label_count": len(rules)}
        )
        return rules

    def _decode(self, path: Path) -> Any:
        try:
            if path.suffix.lower() == ".toml":
                with open(path, "rb") as f:
                    return tomllib.load(f)
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f, object_pairs_hook=_reject_duplicate_labels)
        except ConfigurationError:
            raise
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Could not read config file {path}: {e}") from e
        except (json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"Could not parse config file {path}: {e}") from e


def load_label_rules(config_path: str, repo_root: Optional[Path] = None) -> LabelRules:
    """Shortcut for `RulesLoader(repo_root).load(config_path)`."""
    return RulesLoader(repo_root).load(config_path)
