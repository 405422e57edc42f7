"""
JSON helpers for Lean-Signals records.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict


class JSONSerializable(ABC):
    """Abstract base class for JSON serializable objects."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert object to dictionary for JSON serialization."""
        pass

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]):
        """Create object from dictionary."""
        pass

    def to_json(self) -> str:
        """Convert object to JSON string."""
        return json.dumps(self.to_dict(), indent=2, default=str)

    @classmethod
    def from_json(cls, json_str: str):
        """Create object from JSON string."""
        return cls.from_dict(json.loads(json_str))
