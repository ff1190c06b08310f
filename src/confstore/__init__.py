"""
confstore - typed per-user configuration files

Code is organized in layers
- paths resolves <user config dir>/<program>/<profile>
- codec turns typed values into YAML bytes and back
- store ties both together and memoizes each profile in memory
"""

from confstore.codec import Encoded, YamlCodec
from confstore.errors import (
    CodecError,
    ConfigDirError,
    ConfigStoreError,
    StorageError,
    TypeMismatchError,
)
from confstore.paths import program_name, resolve_config_path, user_config_dir
from confstore.store import ConfigStore, default_store, get, save
from confstore.utils import DEFAULT_PROFILE

__version__ = "0.1.0"
__all__ = [
    # Store
    "ConfigStore",
    "default_store",
    "get",
    "save",
    "DEFAULT_PROFILE",
    # Paths
    "user_config_dir",
    "program_name",
    "resolve_config_path",
    # Codec
    "YamlCodec",
    "Encoded",
    # Errors
    "ConfigStoreError",
    "ConfigDirError",
    "StorageError",
    "CodecError",
    "TypeMismatchError",
]
