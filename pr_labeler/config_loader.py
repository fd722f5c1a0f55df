# AGPL-3.0 License

from os.path import abspath, dirname, join
from pathlib import Path
from typing import Optional

from dynaconf import Dynaconf

current_dir = dirname(abspath(__file__))
global_settings = Dynaconf(
    envvar_prefix=False,
    merge_enabled=True,
    load_dotenv=False,
    settings_files=[join(current_dir, f) for f in [
        "settings/configuration.toml",
    ]]
)


def get_settings():
    """
    Retrieve the current settings.

    Returns:
        Dynaconf: The settings object shared by the whole process.
    """
    return global_settings


def _find_repository_root(start: Optional[Path] = None) -> Optional[Path]:
    """
    Identify the root directory of the current git checkout.

    Args:
        start: Directory to start searching from (defaults to the working directory)

    Returns:
        The first directory walking upward that contains a .git entry, or None
    """
    cwd = Path(start or Path.cwd()).resolve()
    no_way_up = False
    while not no_way_up:
        no_way_up = cwd == cwd.parent
        if (cwd / ".git").exists():
            return cwd
        cwd = cwd.parent
    return None
