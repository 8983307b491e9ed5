import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass, replace, asdict
from typing import Iterator, Optional, Union

logger = logging.getLogger(__name__)

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off'}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES: return True
    if value in _FALSE_VALUES: return False
    raise ValueError(f"{name} must be one of {sorted(_TRUE_VALUES | _FALSE_VALUES)}, got '{raw}'")


@dataclass(frozen=True)
class SequenceConfig:
    """runtime configuration for seqstream"""
    use_numpy: bool = True  # numpy path for numeric max/min
    log_level: str = 'WARNING'

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> 'SequenceConfig':
        """
        build a config from SEQSTREAM_* environment variables.
        unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        config = cls()
        if 'SEQSTREAM_USE_NUMPY' in env:
            config = replace(config, use_numpy=_parse_bool('SEQSTREAM_USE_NUMPY', env['SEQSTREAM_USE_NUMPY']))
        if 'SEQSTREAM_LOG_LEVEL' in env:
            config = replace(config, log_level=env['SEQSTREAM_LOG_LEVEL'].strip().upper())
        return config


_active_config = SequenceConfig.from_env()


def get_config() -> SequenceConfig:
    return _active_config


def set_config(config: SequenceConfig) -> None:
    global _active_config
    if not isinstance(config, SequenceConfig):
        raise TypeError(f"expected SequenceConfig, got {type(config).__name__}")
    logger.debug(f"config: {asdict(config)}")
    _active_config = config


@contextmanager
def override(**changes) -> Iterator[SequenceConfig]:
    """temporarily apply config changes, restoring the previous config on exit"""
    previous = get_config()
    set_config(replace(previous, **changes))
    try:
        yield get_config()
    finally:
        set_config(previous)


def configure_logging(level: Union[int, str, None] = None) -> None:
    """install a minimal console handler for the seqstream loggers"""
    resolved = level if level is not None else get_config().log_level
    logging.basicConfig(level=resolved, format='%(asctime)s - %(message)s')
    logging.getLogger('seqstream').setLevel(resolved)
