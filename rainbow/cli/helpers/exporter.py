from decimal import Decimal
from enum import Enum
from json import dumps
from typing import Any, Optional

from pydantic import BaseModel
from yaml import dump, SafeDumper


class ConversionError(RuntimeError):
    """ Raised when the data conversion fails """


def normalize(content: Any) -> Any:
    """
    Turn the content into plain data for JSON, YAML and CSV

    Decimals become strings so that no precision is lost. Enums are represented by their names.
    """
    if isinstance(content, Decimal):
        return str(content)
    elif isinstance(content, Enum):
        return content.name
    elif isinstance(content, BaseModel):
        return normalize(content.model_dump())
    elif isinstance(content, dict):
        return {normalize_key(k): normalize(v) for k, v in content.items()}
    elif isinstance(content, (tuple, list, set)):
        return [normalize(i) for i in content]
    else:
        return content


def normalize_key(key: Any) -> Any:
    """ Enum and boolean keys, e.g. from "group_by" or "partition_by", become strings """
    if isinstance(key, Enum):
        return key.name
    elif isinstance(key, bool):
        return str(key).lower()
    else:
        return key


def to_json(content: Any, indent: Optional[int] = 2) -> str:
    try:
        return dumps(normalize(content), indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise ConversionError(f'Failed to convert {type(content).__name__} to JSON: {e}') from e


def to_yaml(content: Any) -> str:
    try:
        return dump(normalize(content), Dumper=SafeDumper, allow_unicode=True, sort_keys=False)
    except Exception as e:
        raise ConversionError(f'Failed to convert {type(content).__name__} to YAML: {e}') from e
