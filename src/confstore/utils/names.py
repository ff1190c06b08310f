"""Utilities for validating profile names"""

import os

DEFAULT_PROFILE = "config"


def is_valid_profile_name(name: str) -> bool:
    """Check if a string can be used as a single file name inside the config directory"""
    if not name or name in (".", ".."):
        return False

    separators = {"/", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    return not any(sep in name for sep in separators) and "\0" not in name


def validate_profile_name(name: str) -> str:
    """Return the profile name unchanged, raising ValueError if it is not usable"""
    if not isinstance(name, str) or not is_valid_profile_name(name):
        raise ValueError(
            f"Invalid profile name: {name!r}. "
            "Profile names must be a non-empty single path component "
            "(no path separators, not '.' or '..')."
        )
    return name
