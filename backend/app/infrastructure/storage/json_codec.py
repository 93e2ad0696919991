"""Stable, human-readable JSON codec for collection documents."""

import json
from typing import Any

from app.application.interfaces import CollectionCodec
from app.domain.exceptions import CorruptCollectionError


class JsonCollectionCodec(CollectionCodec):
    """Encodes collections as indented UTF-8 JSON with sorted keys.

    Sorted keys and a fixed indent keep the files byte-stable across
    rewrites of the same value, so they diff cleanly.
    """

    def decode(self, data: bytes) -> Any:
        try:
            return json.loads(data.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise CorruptCollectionError(f"not valid UTF-8 ({exc.reason})") from exc
        except json.JSONDecodeError as exc:
            raise CorruptCollectionError(
                f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}"
            ) from exc

    def encode(self, value: Any) -> bytes:
        try:
            text = json.dumps(value, indent=2, sort_keys=True, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise CorruptCollectionError(f"value cannot be encoded as JSON: {exc}") from exc
        return (text + "\n").encode("utf-8")
