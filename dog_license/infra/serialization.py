"""
Infrastructure layer - serialization.

JSON helpers shared by the storage adapters.
"""

import json
from datetime import datetime, date
from enum import Enum
from typing import Any


class Serializer:
    """JSON serialization helpers"""

    @staticmethod
    def dumps(obj: Any, **kwargs) -> str:
        """
        Serialize ``obj`` to a compact JSON string (same shape a browser's
        ``JSON.stringify`` produces: no whitespace between tokens).

        Args:
            obj: object to serialize
            **kwargs: forwarded to ``json.dumps``

        Returns:
            JSON string

        Raises:
            TypeError: when an object cannot be represented in JSON
        """
        def safe_serialize(o):
            if isinstance(o, (datetime, date)):
                return o.isoformat()
            elif isinstance(o, Enum):
                return o.value
            elif isinstance(o, (set, frozenset)):
                return list(o)
            raise TypeError(f"Object of type {type(o).__name__} is not JSON serializable")

        json_kwargs = {
            'ensure_ascii': False,
            'separators': (',', ':'),
            'default': safe_serialize
        }
        json_kwargs.update(kwargs)
        return json.dumps(obj, **json_kwargs)

    @staticmethod
    def serialize_for_logging(obj: Any) -> str:
        """
        Short, log-friendly representation.

        Args:
            obj: object to describe

        Returns:
            a summary string
        """
        try:
            if isinstance(obj, dict):
                return f"Dict with keys: {list(obj.keys())}"
            elif isinstance(obj, (list, tuple)):
                return f"{type(obj).__name__} with {len(obj)} items"
            elif isinstance(obj, str) and len(obj) > 100:
                return f"String({len(obj)} chars): {obj[:50]}..."
            else:
                return Serializer.dumps(obj)
        except (TypeError, ValueError):
            return f"<{type(obj).__name__}>"
