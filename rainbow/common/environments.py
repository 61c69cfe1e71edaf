import logging
import os
from typing import Any, Callable, Optional, Set


def boolean(value: Optional[str]) -> bool:
    return str(value or '').strip().lower() in ('1', 'true')


def optional_int(value: Optional[str]) -> Optional[int]:
    value = str(value or '').strip()
    return int(value) if value else None


# The logger module reads its level through this module, so this module keeps its own logger.
_logger = logging.getLogger('rainbow.environment')
if boolean(os.getenv('RAINBOW_DEBUG')):
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter('[ %(asctime)s | %(levelname)s ] %(name)s: %(message)s'))
    _logger.addHandler(_handler)
    _logger.setLevel(logging.DEBUG)

_reported_keys: Set[str] = set()


class EnvironmentVariableRequired(RuntimeError):
    def __init__(self, key: str, hint: Optional[str] = None):
        super().__init__(f'Environment variable required: {key}' + (f' ({hint})' if hint else ''))


def env(key: str,
        default: Any = None,
        required: bool = False,
        transform: Optional[Callable[[str], Any]] = None,
        hint: Optional[str] = None,
        description: Optional[str] = None) -> Any:
    """ Read an environment variable

        The raw value goes through "transform" when the variable is set. Otherwise, the default value is returned.
        Each variable is reported once, at debug level, on its first read.
    """
    raw_value = os.getenv(key)

    if raw_value is None:
        if required:
            _logger.error(f'Missing "{key}" ({description or "no description"})')
            raise EnvironmentVariableRequired(key, hint)
        value = default
    else:
        value = transform(raw_value) if transform else raw_value

    if key not in _reported_keys:
        _reported_keys.add(key)
        _logger.debug(f'{key} = {value!r}' + (f' ({description})' if description else ''))

    return value


def flag(key: str, description: Optional[str] = None) -> bool:
    return env(key, default=False, transform=boolean, description=description)
