"""YAML encoding and decoding of typed configuration values"""

from dataclasses import dataclass
from datetime import date, datetime
from functools import lru_cache
from typing import Any, Optional, Type, TypeVar

import yaml
from pydantic import TypeAdapter
from pydantic_core import to_jsonable_python

from .errors import CodecError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(config_type: Any) -> TypeAdapter:
    """Build (once per type) the pydantic adapter used to validate and dump values"""
    return TypeAdapter(config_type)


# Scalars yaml.safe_dump writes natively and yaml.safe_load reads back as the same type
_YAML_SCALARS = (str, int, float, bool, type(None), bytes, date, datetime)


def _yaml_native(obj: Any) -> Any:
    """Reduce pydantic's python-mode output to data yaml.safe_dump can represent

    Mapping keys and native scalars are kept as they are. Anything else
    (enums, paths, decimals, UUIDs...) takes its JSON-compatible form.
    """
    if isinstance(obj, dict):
        return {_yaml_native(k): _yaml_native(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set, frozenset)):
        return [_yaml_native(v) for v in obj]
    if type(obj) in _YAML_SCALARS:
        return obj
    return to_jsonable_python(obj)


@dataclass(frozen=True)
class Encoded:
    """Outcome of encoding a value: either the YAML bytes or the reason it failed"""

    data: Optional[bytes] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def success(cls, data: bytes) -> "Encoded":
        return cls(data=data)

    @classmethod
    def failure(cls, reason: str) -> "Encoded":
        return cls(reason=reason)


class YamlCodec:
    """Converts configuration values to and from YAML bytes

    Values are first converted to plain data with pydantic, so any type
    pydantic can validate works as a configuration type: dataclasses,
    pydantic models, TypedDicts, dicts, lists and scalars.
    """

    def __init__(self, encoding: str = "utf-8", sort_keys: bool = False):
        self.encoding = encoding
        self.sort_keys = sort_keys

    def encode(self, value: Any, config_type: Optional[Any] = None) -> Encoded:
        """
        Encode a value, reporting unencodable input as a failed result instead of raising.

        Args:
            value: Value to encode
            config_type: Type whose schema drives serialization, defaults to type(value)
        """
        config_type = config_type if config_type is not None else type(value)
        name = config_type.__qualname__ if isinstance(config_type, type) else repr(config_type)
        try:
            plain = _adapter(config_type).dump_python(value, mode="python", warnings="error")
            plain = _yaml_native(plain)
        except (ValueError, TypeError, RecursionError) as e:
            return Encoded.failure(f"cannot serialize {name}: {e}")

        try:
            text = yaml.safe_dump(plain, sort_keys=self.sort_keys, allow_unicode=True)
        except yaml.YAMLError as e:
            return Encoded.failure(str(e))

        return Encoded.success(text.encode(self.encoding))

    def decode(self, data: bytes, config_type: Type[T]) -> T:
        """
        Decode YAML bytes into a fresh instance of config_type.

        Raises:
            CodecError: If data is not valid YAML or does not validate as config_type
        """
        try:
            loaded = yaml.safe_load(data.decode(self.encoding))
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise CodecError(str(e)) from e

        try:
            return _adapter(config_type).validate_python(loaded)
        except (ValueError, TypeError) as e:
            raise CodecError(
                f"cannot decode into {getattr(config_type, '__qualname__', config_type)}: {e}"
            ) from e
