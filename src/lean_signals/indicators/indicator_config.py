"""
Indicator configuration snapshots for Lean-Signals.

This module provides the immutable description of an indicator instance
used by callers for introspection, display and serialization.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping

from ..data.bars import SourceField
from ..serialization import JSONSerializable


@dataclass(frozen=True)
class IndicatorConfig(JSONSerializable):
    """
    Immutable description of an indicator instance.

    ``parameters`` is stored as a read-only copy, so neither the mapping the
    config was built from nor the snapshot itself can alter a live indicator.
    """
    name: str
    kind: str
    parameters: Mapping[str, Any] = field(default_factory=dict)
    source: SourceField = SourceField.CLOSE

    def __post_init__(self):
        """Freeze parameters and normalize the source field."""
        if not self.name or not isinstance(self.name, str):
            raise ValueError("Indicator name must be a non-empty string")
        if not self.kind or not isinstance(self.kind, str):
            raise ValueError("Indicator kind must be a non-empty string")

        object.__setattr__(self, 'parameters', MappingProxyType(dict(self.parameters)))
        object.__setattr__(self, 'source', SourceField.parse(self.source))

    @property
    def period(self) -> Any:
        """The ``period`` parameter, or None if absent."""
        return self.parameters.get('period')

    def with_name(self, name: str) -> 'IndicatorConfig':
        """Return a copy of this config under a different name."""
        return replace(self, name=name, parameters=dict(self.parameters))

    def __hash__(self) -> int:
        return hash((self.name, self.kind, tuple(sorted(self.parameters.items())), self.source))

    def __eq__(self, other) -> bool:
        if not isinstance(other, IndicatorConfig):
            return NotImplemented
        return (self.name == other.name and
                self.kind == other.kind and
                dict(self.parameters) == dict(other.parameters) and
                self.source == other.source)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'name': self.name,
            'kind': self.kind,
            'parameters': dict(self.parameters),
            'source': self.source.value
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'IndicatorConfig':
        """Create IndicatorConfig from dictionary."""
        kind = data.get('kind') or data.get('type')
        return cls(
            name=data.get('name') or kind,
            kind=kind,
            parameters=data.get('parameters', {}),
            source=SourceField.parse(data.get('source'))
        )
