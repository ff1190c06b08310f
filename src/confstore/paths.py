"""Path resolution for confstore configuration files."""

import os
import sys
from pathlib import Path
from typing import Optional

from .errors import ConfigDirError
from .utils.names import DEFAULT_PROFILE, validate_profile_name

_ERROR_PREFIX = "configuration dir"


def user_config_dir() -> Path:
    """
    Get the root directory for user-specific configuration files.

    Environment variables are read on every call. Resolution follows the
    platform convention:

    - Windows: %AppData%
    - macOS: $HOME/Library/Application Support
    - Everything else: $XDG_CONFIG_HOME if set and non-empty, otherwise
      $HOME/.config

    Returns:
        Path: Absolute configuration root

    Raises:
        ConfigDirError: If none of the expected environment variables are set,
            or $XDG_CONFIG_HOME holds a relative path
    """
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA", "")
        if not appdata:
            raise ConfigDirError(f"{_ERROR_PREFIX} %AppData% is not defined")
        return Path(appdata)

    if sys.platform == "darwin":
        home = os.environ.get("HOME", "")
        if not home:
            raise ConfigDirError(f"{_ERROR_PREFIX} $HOME is not defined")
        return Path(home) / "Library" / "Application Support"

    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg:
        if not os.path.isabs(xdg):
            raise ConfigDirError(f"{_ERROR_PREFIX} path in $XDG_CONFIG_HOME is relative")
        return Path(xdg)

    home = os.environ.get("HOME", "")
    if not home:
        raise ConfigDirError(
            f"{_ERROR_PREFIX} neither $XDG_CONFIG_HOME nor $HOME are defined"
        )
    return Path(home) / ".config"


def program_name() -> str:
    """Get the base name of the running program, used to namespace its config directory"""
    argv0 = sys.argv[0] if sys.argv and sys.argv[0] else "python"
    return Path(argv0).name


def resolve_config_path(
    profile: str = DEFAULT_PROFILE,
    program: Optional[str] = None,
    config_dir: Optional[Path] = None,
) -> Path:
    """
    Resolve the file path of a configuration profile.

    Args:
        profile: Profile name, used as the file name
        program: Program name used as the sub-directory.
                 If None, the base name of sys.argv[0] is used.
        config_dir: Configuration root. If None, user_config_dir() is used.

    Returns:
        Path: <config root>/<program>/<profile>

    Example:
        >>> resolve_config_path("dev", program="myapp", config_dir=Path("/home/me/.config"))
        PosixPath('/home/me/.config/myapp/dev')
    """
    validate_profile_name(profile)
    root = config_dir if config_dir is not None else user_config_dir()
    return Path(root) / (program or program_name()) / profile
