'''
schema-driven fake records for the seqy test suites.

a schema is a dict of field -> spec, where a spec is one of:
  - a faker provider name, e.g. 'word'
  - a (provider, kwargs) tuple, e.g. ('pyint', {'min_value': 1, 'max_value': 9})
  - {'_qen_provider': 'choice', 'from': [...]}
  - {'_qen_provider': 'ref', 'key': 'other_field'}
  - anything else, used as a literal
'''

import numpy as np
from faker import Faker
from seqy import from_iterable, Sequence
from typing import Any, Dict, Optional


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
            raise ValueError(f"faker has no provider '{method_name}'") from None
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, record: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            # numpy scalars are converted back to native python values
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result
        if provider == "ref":
            if config["key"] not in record:
                raise ValueError(f"reference to '{config['key']}' not found in record.")
            return record[config["key"]]
        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        # fields are generated in order so refs can see earlier fields
        record: Dict[str, Any] = {}
        for field, spec in schema.items():
            record[field] = self._create_value(spec, record)
        return record

    def _create_value(self, spec: Any, record: Dict) -> Any:
        if isinstance(spec, dict) and "_qen_provider" in spec:
            return self._resolve_provider(spec, record)
        if isinstance(spec, str) and hasattr(self._fake, spec):
            return self._resolve_faker_method(spec)
        if isinstance(spec, tuple) and len(spec) == 2 and isinstance(spec[1], dict):
            return self._resolve_faker_method(spec[0], spec[1])
        return spec


class _SchemaProvider:
    def __init__(self, schema: Dict[str, Any], seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Sequence:
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Dict[str, Any], seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
