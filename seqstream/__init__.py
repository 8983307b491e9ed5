r"""
   ___ ___  __ _ ___| |_ _ __ ___  __ _ _ __ ___
  / __/ _ \/ _` / __| __| '__/ _ \/ _` | '_ ` _ \
  \__ \  __/ (_| \__ \ |_| | |  __/ (_| | | | | | |
  |___/\___|\__, |___/\__|_|  \___|\__,_|_| |_| |_|
               |_|
"""
import logging

# expose the main classes
from .sequence import Sequence, IntSequence, FloatSequence, LongSequence

# expose the factory functions
from .factories import (
    from_iterable,
    of,
    empty,
    of_ints,
    of_longs,
    of_floats,
    int_range,
    long_range,
    seq,
    S
)

# expose supporting types
from .types import (
    SequenceState,
    OptionalValue,
    OptionalInt,
    OptionalFloat,
    OptionalLong
)
from .errors import SeqStreamError, StateError, NoSuchElementError
from .comparators import natural_order, reverse_order, comparing
from .config import SequenceConfig, get_config, set_config, override, configure_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Sequence",
    "IntSequence",
    "FloatSequence",
    "LongSequence",
    "from_iterable",
    "of",
    "empty",
    "of_ints",
    "of_longs",
    "of_floats",
    "int_range",
    "long_range",
    "seq",
    "S",
    "SequenceState",
    "OptionalValue",
    "OptionalInt",
    "OptionalFloat",
    "OptionalLong",
    "SeqStreamError",
    "StateError",
    "NoSuchElementError",
    "natural_order",
    "reverse_order",
    "comparing",
    "SequenceConfig",
    "get_config",
    "set_config",
    "override",
    "configure_logging"
]
