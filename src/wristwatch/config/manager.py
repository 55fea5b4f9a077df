"""Loading and saving of WristWatch YAML configuration files.

Files are parsed with PyYAML and validated against WristWatchConfig;
writes go through a temporary file in the target directory so a reader
never sees a half-written configuration.
"""

import logging
import tempfile
from pathlib import Path

import yaml

from ..utils.core.exceptions import ConfigurationError
from .schema import WristWatchConfig


logger = logging.getLogger(__name__)


def _read_mapping(config_path: Path) -> dict[str, object]:
    """Read a YAML file whose top level must be a mapping (empty allowed)."""
    try:
        with config_path.open("r", encoding="utf-8") as stream:
            document: object = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"{config_path} is not valid YAML: {e}") from e

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ConfigurationError(
            f"{config_path} must contain a YAML dictionary at the top level, "
            + f"found {type(document).__name__}",
            context=str(config_path),
        )
    return document


class ConfigManager:
    """
    Reads and writes WristWatch configuration files.

    All methods are static; the manager holds no state of its own.
    """

    @staticmethod
    def load_config(config_path: Path) -> WristWatchConfig:
        """
        Load a configuration file.

        Args:
            config_path: YAML file to read

        Returns:
            WristWatchConfig: The validated configuration

        Raises:
            FileNotFoundError: If ``config_path`` does not exist
            yaml.YAMLError: On malformed YAML
            ConfigurationError: If the top level is not a mapping
            pydantic.ValidationError: If a value fails validation
        """
        if not config_path.is_file():
            raise FileNotFoundError(f"No configuration file at {config_path}")

        config = WristWatchConfig.model_validate(_read_mapping(config_path))
        logger.debug(f"Configuration loaded from {config_path}")
        return config

    @staticmethod
    def load_or_default(config_path: Path | None) -> WristWatchConfig:
        """Load ``config_path``, or return the defaults when it is None."""
        if config_path is None:
            return WristWatchConfig()
        return ConfigManager.load_config(config_path)

    @staticmethod
    def save_config(config: WristWatchConfig, config_path: Path) -> None:
        """
        Write a configuration file atomically.

        The YAML is written to a hidden temporary file next to
        ``config_path`` and then renamed over it.

        Raises:
            OSError: If the file cannot be written
        """
        document = yaml.safe_dump(
            config.model_dump(mode="json"),
            sort_keys=False,
            allow_unicode=True,
            indent=2,
        )

        staging: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=config_path.parent,
                prefix=f".{config_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                staging = Path(handle.name)
                _ = handle.write(document)

            _ = staging.replace(config_path)
        except OSError as e:
            if staging is not None:
                staging.unlink(missing_ok=True)
            raise OSError(f"Could not write configuration to {config_path}: {e}") from e

        logger.info(f"Configuration written to {config_path}")
