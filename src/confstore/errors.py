"""Exception types raised by confstore"""

from pathlib import Path
from typing import Any, Optional, Union


class ConfigStoreError(Exception):
    """Base class for all confstore errors"""


class ConfigDirError(ConfigStoreError):
    """The user configuration root directory cannot be determined"""


class StorageError(ConfigStoreError):
    """A configuration file could not be read or written

    Raised from the underlying ``OSError``, which ``cause`` returns.
    """

    def __init__(self, message: str, path: Union[str, Path]):
        super().__init__(message)
        self.path = Path(path)

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__


class CodecError(ConfigStoreError):
    """Data could not be encoded to, or decoded from, YAML"""

    PREFIX = "unable to (un)marshal data to/from yaml"

    def __init__(self, reason: str):
        super().__init__(f"{self.PREFIX}: {reason}")
        self.reason = reason


class TypeMismatchError(ConfigStoreError):
    """The requested type differs from the type a profile was cached with"""

    PREFIX = "interface conversion"

    def __init__(self, profile: str, requested: Any, cached: Any):
        super().__init__(
            f"{self.PREFIX}: profile {profile!r} wanted {_type_name(requested)} "
            f"but cached type is {_type_name(cached)}"
        )
        self.profile = profile
        self.requested = requested
        self.cached = cached


def _type_name(tp: Any) -> str:
    if isinstance(tp, type):
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)
