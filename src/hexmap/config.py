"""Map configuration loading from TOML files.

A config file holds a single ``[map]`` table whose keys are MapConfig
fields, e.g.::

    [map]
    size = "duel"
    seed = 7
"""

import tomllib
from pathlib import Path

from pydantic import BaseModel

from .terrain.config import MapConfig

CONFIG_SUFFIX = ".toml"


class ConfigFile(BaseModel):
    """Top-level layout of a map TOML file."""

    map: MapConfig = MapConfig()


def load_config(config_path: Path) -> MapConfig:
    """Read a MapConfig from a TOML file.

    Keys absent from the ``[map]`` table keep their MapConfig defaults.

    Args:
        config_path: TOML file to read.

    Returns:
        The validated MapConfig.

    Raises:
        FileNotFoundError: If the file is missing.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        pydantic.ValidationError: If a value has the wrong type or range.
    """
    with Path(config_path).open("rb") as fh:
        raw = tomllib.load(fh)
    return ConfigFile.model_validate(raw).map


def configs_dir() -> Path:
    """Directory holding the bundled config files (repo-root ``configs/``)."""
    return Path(__file__).parent.parent.parent / "configs"


def find_config(name: str) -> Path:
    """Resolve a config name or path to an existing file.

    Anything that looks like a path (contains a slash or ends in .toml) is
    used as given. A bare name is looked up in configs_dir(), first with the
    .toml suffix appended and then verbatim.

    Raises:
        FileNotFoundError: If nothing matches.
    """
    if "/" in name or name.endswith(CONFIG_SUFFIX):
        candidate = Path(name)
        if not candidate.exists():
            raise FileNotFoundError(f"No config file at {name}")
        return candidate

    directory = configs_dir()
    for candidate in (directory / f"{name}{CONFIG_SUFFIX}", directory / name):
        if candidate.exists():
            return candidate

    raise FileNotFoundError(
        f"No config named '{name}' in {directory} (known: {', '.join(list_configs())})"
    )


def list_configs() -> list[str]:
    """Names of the bundled configs, sorted."""
    directory = configs_dir()
    if not directory.is_dir():
        return []
    return sorted(path.stem for path in directory.glob(f"*{CONFIG_SUFFIX}"))
