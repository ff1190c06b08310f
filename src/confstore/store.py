"""Typed configuration store with per-profile memoization"""

import copy
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from .codec import YamlCodec
from .errors import CodecError, StorageError, TypeMismatchError
from .paths import program_name, resolve_config_path, user_config_dir
from .utils.names import DEFAULT_PROFILE, validate_profile_name

logger = logging.getLogger(__name__)

T = TypeVar("T")

FILE_MODE = 0o600
_CHMOD_FD = os.chmod in os.supports_fd


@dataclass
class CacheEntry:
    """A cached configuration value and the type it is bound to"""

    config_type: Any
    value: Any


class ConfigStore:
    """
    Saves and loads typed configuration values, one YAML file per profile.

    Files live at <user config dir>/<program name>/<profile>. The first get()
    for a profile reads its file; later calls are served from memory. Once a
    profile is cached with a type, get() only accepts that exact type until a
    save() replaces the entry.

    The store is not thread-safe. Callers sharing one store across threads
    must serialize their calls.

    Example:
        >>> store = ConfigStore(program="myapp")
        >>> path = store.save(AppConfig(name="demo", count=3))
        >>> store.get(AppConfig)
        AppConfig(name='demo', count=3)
    """

    def __init__(
        self,
        program: Optional[str] = None,
        codec: Optional[YamlCodec] = None,
        config_dir: Optional[Callable[[], Path]] = None,
    ):
        """Initialize an empty store; nothing is read until the first get()"""
        self._program = program
        self._codec = codec if codec is not None else YamlCodec()
        self._config_dir = config_dir if config_dir is not None else user_config_dir
        self._cache: Dict[str, CacheEntry] = {}

    @property
    def program(self) -> str:
        """Program name used as the config sub-directory"""
        return self._program or program_name()

    def path(self, profile: str = DEFAULT_PROFILE) -> Path:
        """Resolve the file path for a profile without touching the file"""
        return resolve_config_path(profile, program=self.program, config_dir=self._config_dir())

    def cached_type(self, profile: str = DEFAULT_PROFILE) -> Optional[Any]:
        """Type the profile's cache entry is bound to, or None when not yet cached"""
        entry = self._cache.get(validate_profile_name(profile))
        return entry.config_type if entry is not None else None

    def get(self, config_type: Type[T], profile: str = DEFAULT_PROFILE) -> T:
        """
        Return the configuration for a profile as an instance of config_type.

        The first call for a profile reads and decodes its file and caches the
        result. Later calls return a copy of the cached value without I/O.

        Args:
            config_type: Type to decode into. Must match the cached type exactly
                         once the profile is cached.
            profile: Profile name, defaults to "config"

        Returns:
            A copy of the cached value; mutating it does not affect the cache

        Raises:
            ConfigDirError: If the configuration root cannot be determined
            StorageError: If the file is missing or unreadable
            CodecError: If the file content cannot be decoded into config_type
            TypeMismatchError: If the profile is cached with a different type
        """
        entry = self._cache.get(profile)
        if entry is None:
            logger.debug("Cache miss for profile %r, loading from file", profile)
            entry = CacheEntry(config_type, self._load(config_type, profile))
            self._cache[profile] = entry
        elif entry.config_type != config_type:
            raise TypeMismatchError(profile, config_type, entry.config_type)

        return copy.deepcopy(entry.value)

    def save(
        self,
        value: Any,
        profile: str = DEFAULT_PROFILE,
        config_type: Optional[Any] = None,
    ) -> Path:
        """
        Write a configuration value to its profile file and cache it.

        The file is written with mode 0600. Its parent directory must already
        exist. On success the profile's cache entry is replaced, rebinding it
        to config_type. On any failure the cache is left unchanged.

        Args:
            value: Configuration value to store
            profile: Profile name, defaults to "config"
            config_type: Type the profile is bound to and serialized as.
                         Defaults to type(value); pass it for values whose
                         runtime type is less specific, such as TypedDicts
                         (dict) or list[int] (list).

        Returns:
            Path: The file that was written

        Raises:
            ConfigDirError: If the configuration root cannot be determined
            CodecError: If value cannot be encoded; no file is written
            StorageError: If the file cannot be written
        """
        if config_type is None:
            config_type = type(value)
        path = self.path(profile)
        data = self._encode(value, config_type)
        snapshot = copy.deepcopy(value)

        self._write(path, data)

        self._cache[profile] = CacheEntry(config_type, snapshot)
        logger.debug("Saved profile %r to %s", profile, path)
        return path

    def _encode(self, value: Any, config_type: Any) -> bytes:
        """Encode a value, converting every encoder failure into CodecError"""
        try:
            encoded = self._codec.encode(value, config_type)
        except Exception as e:
            raise CodecError(f"encoder failed on {type(value).__qualname__}: {e}") from e

        if not encoded.ok or encoded.data is None:
            raise CodecError(encoded.reason or "encoder returned no data")
        return encoded.data

    def _load(self, config_type: Type[T], profile: str) -> T:
        """Read and decode a profile file"""
        path = self.path(profile)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise StorageError(f"read config file {path}: {e.strerror or e}", path) from e

        value = self._codec.decode(data, config_type)
        logger.debug("Loaded profile %r from %s", profile, path)
        return value

    @staticmethod
    def _write(path: Path, data: bytes) -> None:
        """Write bytes to path, creating the file owner read/write only"""

        def opener(file: str, flags: int) -> int:
            return os.open(file, flags, FILE_MODE)

        try:
            with open(path, "wb", opener=opener) as f:
                # an existing file keeps its old mode through os.open
                os.chmod(f.fileno() if _CHMOD_FD else path, FILE_MODE)
                f.write(data)
        except OSError as e:
            raise StorageError(f"unable to write file {path}: {e.strerror or e}", path) from e

    def __repr__(self) -> str:
        """String representation"""
        return f"ConfigStore(program={self.program!r}, profiles={sorted(self._cache)})"


_default_store: Optional[ConfigStore] = None


def default_store() -> ConfigStore:
    """Get the process-wide store used by the module-level get() and save()"""
    global _default_store
    if _default_store is None:
        _default_store = ConfigStore()
    return _default_store


def get(config_type: Type[T], profile: str = DEFAULT_PROFILE) -> T:
    """Load a profile from the default store, see ConfigStore.get"""
    return default_store().get(config_type, profile)


def save(value: Any, profile: str = DEFAULT_PROFILE, config_type: Optional[Any] = None) -> Path:
    """Save a profile through the default store, see ConfigStore.save"""
    return default_store().save(value, profile, config_type)
