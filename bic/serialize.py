"""
Persisted form of a BIC.

Only the original input is stored. Loading always goes back through the
constructor, so the canonical form is recomputed and corrupted data is
rejected with the same errors as fresh input.
"""

from __future__ import annotations

from typing import Union

from pydantic import TypeAdapter, ValidationError

from .errors import BicError
from .models import Bic
from .normalize import decode_persisted

_ADAPTER = TypeAdapter(Bic)


def dumps(bic: Bic) -> bytes:
    return bic.original.encode("ascii")


def loads(raw: Union[bytes, bytearray, memoryview, str]) -> Bic:
    """
    Rebuild a BIC from its persisted form.

    Raises the same ``BicError`` subclasses as ``Bic(...)``.
    """
    return Bic(decode_persisted(raw))


def to_json(bic: Bic) -> str:
    return _ADAPTER.dump_json(bic).decode("utf-8")


def from_json(text: Union[str, bytes]) -> Bic:
    """
    Parse a JSON string literal.

    Malformed JSON, or JSON that is not a string, raises pydantic's
    ``ValidationError``; a string that is not a valid BIC raises the same
    ``BicError`` subclass as ``Bic(...)``.
    """
    try:
        return _ADAPTER.validate_json(text)
    except ValidationError as exc:
        errors = exc.errors()
        if len(errors) == 1 and errors[0]["type"] == "value_error":
            cause = errors[0].get("ctx", {}).get("error")
            if isinstance(cause, BicError):
                raise cause from exc
        raise
