"""Payload serializers - values are stored as text."""

import base64
import json
import pickle
from typing import Any, Protocol


class Serializer(Protocol):
    def dumps(self, value: Any) -> str: ...

    def loads(self, text: str) -> Any: ...


class JsonSerializer:
    """JSON payloads (default)."""

    def dumps(self, value: Any) -> str:
        return json.dumps(value)

    def loads(self, text: str) -> Any:
        return json.loads(text)


class PickleSerializer:
    """Pickled payloads for arbitrary Python objects, base64 encoded.

    Only use with a database you trust: unpickling runs arbitrary code.
    """

    def dumps(self, value: Any) -> str:
        return base64.b64encode(pickle.dumps(value)).decode("ascii")

    def loads(self, text: str) -> Any:
        return pickle.loads(base64.b64decode(text))
