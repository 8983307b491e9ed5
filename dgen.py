'''
seeded test data for seqstream: faker-backed records and numpy-backed numbers.
'''

import numpy as np
from faker import Faker
from seqstream import from_iterable, Sequence
from typing import Any, Dict, List, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict) -> Any:
        provider = config["_provider"]
        if provider == "choice":
            # numpy scalars become native python values
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result
        if provider == "literal":
            if "value" not in config:
                raise ValueError("_provider 'literal' requires a 'value' key.")
            return config["value"]
        raise ValueError(f"unknown _provider: '{provider}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_provider" in schema:
                return self._resolve_provider(schema)
            return {k: self.create(v) for k, v in schema.items()}

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema

    def integers(self, count: int, low: int, high: int) -> List[int]:
        """count python ints drawn from [low, high]"""
        return [int(x) for x in self._rng.integers(low, high, size=count, endpoint=True)]

    def floats(self, count: int, low: float, high: float) -> List[float]:
        """count python floats drawn from [low, high)"""
        return [float(x) for x in self._rng.uniform(low, high, size=count)]


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def records(self, count: int) -> List[Any]:
        """generate count records as a plain list, reusable across sequences"""
        return [self._generator.create(self._schema) for _ in range(count)]

    def take(self, count: int) -> Sequence:
        return from_iterable(self.records(count))


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
