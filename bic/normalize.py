"""
Core BIC validation logic.

Responsibilities:
- length check (8 or 11)
- per-segment alphabet checks, fail fast in layout order
- canonical form derivation (drop the primary branch marker)
- decoding of the persisted byte form
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Optional, Union

from . import rules
from .errors import (
    BicError,
    InvalidBranch,
    InvalidCountry,
    InvalidLength,
    InvalidPrefix,
    InvalidSuffix,
)

logger = logging.getLogger(__name__)


def _region_in(value: str, start: int, end: int, alphabet: FrozenSet[str]) -> bool:
    return all(ch in alphabet for ch in value[start:end])


def _reject(error: type[BicError], value: str, message: str) -> BicError:
    logger.debug("rejected BIC %r: invalid %s", value, error.segment)
    return error(value, message)


def validate(value: str) -> None:
    """
    Check the structural grammar of a BIC8 or BIC11.

    Rules are applied in layout order and the first violation is raised:
    length, prefix, country, suffix, then branch (only for 11 characters).
    Only uppercase ASCII letters and digits are accepted; nothing is
    upper-cased or stripped on the caller's behalf.
    """
    if not isinstance(value, str):
        raise TypeError(f"BIC must be a str, got {type(value).__name__}")

    if len(value) not in (rules.LENGTH, rules.EXTENDED_LENGTH):
        raise _reject(
            InvalidLength,
            value,
            f"BIC must be {rules.LENGTH} or {rules.EXTENDED_LENGTH} long "
            f"but got {value!r} which is {len(value)} long.",
        )

    if not _region_in(value, rules.PREFIX_START, rules.PREFIX_END, rules.ALNUM):
        raise _reject(
            InvalidPrefix,
            value,
            f"BIC business party prefix must consist of upper-alphanumeric ASCII chars only, got: {value!r}",
        )

    if not _region_in(value, rules.COUNTRY_START, rules.COUNTRY_END, rules.ALPHA):
        raise _reject(
            InvalidCountry,
            value,
            f"BIC country code must consist of upper-alphabetic ASCII chars only, got: {value!r}",
        )

    if not _region_in(value, rules.SUFFIX_START, rules.SUFFIX_END, rules.ALNUM):
        raise _reject(
            InvalidSuffix,
            value,
            f"BIC business party suffix must consist of upper-alphanumeric ASCII chars only, got: {value!r}",
        )

    if len(value) == rules.EXTENDED_LENGTH and not _region_in(
        value, rules.BRANCH_START, rules.BRANCH_END, rules.ALNUM
    ):
        raise _reject(
            InvalidBranch,
            value,
            f"BIC branch code must consist of upper-alphanumeric ASCII chars only, got: {value!r}",
        )


def canonicalize(value: str) -> str:
    """
    Validate and return the canonical form.

    The canonical form is 8 characters when the branch is the primary
    marker ("XXX"), otherwise the input unchanged.
    """
    validate(value)
    if len(value) == rules.EXTENDED_LENGTH and value[rules.BRANCH_START:] == rules.PRIMARY_BRANCH:
        return value[: rules.LENGTH]
    return value


def concat_parts(prefix: str, country: str, suffix: str, branch: Optional[str] = None) -> str:
    # Part sizes are not checked individually, the composite validation catches them.
    return f"{prefix}{country}{suffix}{branch or ''}"


def decode_persisted(raw: Union[bytes, bytearray, memoryview, str]) -> str:
    """
    Decode the persisted form of a BIC back into text.

    Undecodable bytes become U+FFFD, one per byte, so that corruption keeps
    the length and is reported by validation as a bad segment instead of
    a decoding fault.
    """
    if isinstance(raw, str):
        return raw
    if not isinstance(raw, (bytes, bytearray, memoryview)):
        raise TypeError(f"persisted BIC must be bytes or str, got {type(raw).__name__}")
    return bytes(raw).decode("ascii", errors="replace")
