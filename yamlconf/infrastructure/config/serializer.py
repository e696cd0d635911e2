"""
YAML serializer for configuration values.

Encodes a config through its to_dict form with PyYAML and decodes by
rebuilding a config of the same type as a supplied empty instance.
"""

from typing import Any

import yaml

from ...core.exceptions import ConfigDecodeError, ConfigEncodeError
from ...core.interfaces.config import IConfig, ISerializer


class YamlSerializer(ISerializer):
    """Serializer producing UTF-8 YAML documents."""

    def __init__(self, encoding: str = 'utf-8'):
        self._encoding = encoding

    def encode(self, config: IConfig) -> bytes:
        try:
            text = yaml.safe_dump(config.to_dict(), default_flow_style=False,
                                  sort_keys=False, allow_unicode=True)
            return text.encode(self._encoding)
        except (yaml.YAMLError, TypeError, ValueError) as e:
            raise ConfigEncodeError(f"Unable to marshal config yaml: {e}") from e

    def decode(self, data: bytes, empty: IConfig) -> IConfig:
        try:
            document: Any = yaml.safe_load(data.decode(self._encoding))
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise ConfigDecodeError(f"Invalid YAML: {e}") from e

        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise ConfigDecodeError(
                f"Expected a YAML mapping, got {type(document).__name__}")

        try:
            return empty.from_dict(document)
        except (TypeError, ValueError, KeyError) as e:
            raise ConfigDecodeError(f"YAML does not match {type(empty).__name__}: {e}") from e
