import logging
from sys import stderr
from typing import Optional

from rainbow.common.environments import env
from rainbow.feature_flags import in_global_debug_mode

LOG_FORMAT = '[ %(asctime)s | %(levelname)s ] %(name)s: %(message)s'
LEVEL_NAMES = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


def resolve_logging_level(level_name: Optional[str], debug: bool = False) -> int:
    """ The debug mode always means DEBUG. An unknown or missing level name means WARNING. """
    if debug:
        return logging.DEBUG

    level_name = str(level_name or '').strip().upper()

    return getattr(logging, level_name) if level_name in LEVEL_NAMES else logging.WARNING


default_logging_level = resolve_logging_level(
    env('RAINBOW_LOG_LEVEL', description='Log level: DEBUG, INFO, WARNING or ERROR'),
    in_global_debug_mode,
)


class TraceableLogger(logging.Logger):
    """ Logger tagged with an optional trace ID, e.g., "rainbow.demos.operator.StreamOperatorDemo,operator/sorted" """
    def __init__(self, name: str, level: int = logging.NOTSET, trace_id: Optional[str] = None):
        super().__init__(f'{name},{trace_id}' if trace_id else name, level)
        self.actual_name = name
        self.trace_id = trace_id

    def fork(self, level: Optional[int] = None, trace_id: Optional[str] = None) -> 'TraceableLogger':
        return self.make(self.actual_name, level or self.level, trace_id)

    @classmethod
    def make(cls, name: str, level: Optional[int] = None, trace_id: Optional[str] = None) -> 'TraceableLogger':
        handler = logging.StreamHandler(stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

        logger = cls(name, level or default_logging_level, trace_id)
        logger.addHandler(handler)

        return logger


def get_logger(name: str, level: Optional[int] = None) -> TraceableLogger:
    return TraceableLogger.make(name, level)


def get_logger_for(ref: object, level: Optional[int] = None) -> TraceableLogger:
    """ Logger named after the class of the given object """
    return TraceableLogger.make(f'{type(ref).__module__}.{type(ref).__name__}', level)
