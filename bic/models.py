from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import PydanticCustomError, core_schema

from . import rules
from .normalize import canonicalize, concat_parts


@total_ordering
@dataclass(frozen=True, eq=False, repr=False, slots=True)
class Bic:
    """
    Business Identifier Code (ISO 9362:2014).

    A BIC is 8 characters (the business party identifier: prefix, country,
    suffix) optionally followed by a 3 character branch code. The branch
    "XXX" denotes the primary office and is dropped from the canonical form,
    so "NTSBDEB1" and "NTSBDEB1XXX" are the same BIC.

    Construction validates the grammar and raises a ``BicError`` subclass
    naming the first invalid segment. Instances are immutable; equality,
    hashing and ordering use ``canonical`` only.

        >>> Bic("NTSBDEB1XXX") == Bic("NTSBDEB1")
        True
    """

    original: str
    canonical: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "canonical", canonicalize(self.original))

    @classmethod
    def from_parts(cls, prefix: str, country: str, suffix: str, branch: Optional[str] = None) -> Bic:
        """Build from individual parts; the branch is optional."""
        return cls(concat_parts(prefix, country, suffix, branch))

    @property
    def full(self) -> str:
        """Always 11 characters, padded with the primary branch if needed."""
        return self.canonical if self.has_branch else self.canonical + rules.PRIMARY_BRANCH

    @property
    def id(self) -> str:
        """Business party identifier: prefix + country + suffix."""
        return self.canonical[rules.PREFIX_START:rules.SUFFIX_END]

    @property
    def prefix(self) -> str:
        return self.canonical[rules.PREFIX_START:rules.PREFIX_END]

    @property
    def country(self) -> str:
        """ISO 3166-1 alpha-2 country code."""
        return self.canonical[rules.COUNTRY_START:rules.COUNTRY_END]

    @property
    def suffix(self) -> str:
        return self.canonical[rules.SUFFIX_START:rules.SUFFIX_END]

    @property
    def branch(self) -> str:
        if self.has_branch:
            return self.canonical[rules.BRANCH_START:rules.BRANCH_END]
        return rules.PRIMARY_BRANCH

    @property
    def has_branch(self) -> bool:
        return not self.is_primary_branch

    @property
    def is_primary_branch(self) -> bool:
        return len(self.canonical) == rules.LENGTH

    @property
    def is_test(self) -> bool:
        """Test & Training codes have a "0" at position 8."""
        return self.canonical[rules.TEST_MARKER_INDEX] == rules.TEST_MARKER

    @property
    def is_bank_of_germany(self) -> bool:
        return self.canonical == rules.BANK_OF_GERMANY

    @property
    def is_bank_of_germany_test(self) -> bool:
        return self.canonical == rules.BANK_OF_GERMANY_TEST

    @property
    def is_n26(self) -> bool:
        return self.canonical == rules.N26

    @property
    def is_n26_test(self) -> bool:
        return self.canonical == rules.N26_TEST

    @classmethod
    def bank_of_germany(cls) -> Bic:
        return cls(rules.BANK_OF_GERMANY)

    @classmethod
    def bank_of_germany_test(cls) -> Bic:
        return cls(rules.BANK_OF_GERMANY_TEST)

    @classmethod
    def n26(cls) -> Bic:
        return cls(rules.N26)

    @classmethod
    def n26_test(cls) -> Bic:
        return cls(rules.N26_TEST)

    def describe(self) -> BicDescription:
        return BicDescription(
            original=self.original,
            canonical=self.canonical,
            full=self.full,
            id=self.id,
            prefix=self.prefix,
            country=self.country,
            suffix=self.suffix,
            branch=self.branch,
            has_branch=self.has_branch,
            is_test=self.is_test,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bic):
            return NotImplemented
        return self.canonical == other.canonical

    def __lt__(self, other: object) -> bool:
        # Sorting on canonical keeps a primary office ahead of its branches.
        if not isinstance(other, Bic):
            return NotImplemented
        return self.canonical < other.canonical

    def __hash__(self) -> int:
        return hash(self.canonical)

    def __str__(self) -> str:
        return self.canonical

    def __repr__(self) -> str:
        return f"BIC(original={self.original!r}, canonical={self.canonical!r}, full={self.full!r})"

    def __reduce__(self):
        # Only the original is persisted; unpickling re-runs validation.
        return (type(self), (self.original,))

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(lambda bic: bic.original),
        )

    @classmethod
    def _coerce(cls, value: Any) -> Bic:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise PydanticCustomError("bic_type", "Input should be a valid string or Bic")
        return cls(value)

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "type": "string",
            "pattern": rules.PATTERN,
            "minLength": rules.LENGTH,
            "maxLength": rules.EXTENDED_LENGTH,
        }


class BicDescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    original: str
    canonical: str = Field(examples=["NTSBDEB1"])
    full: str = Field(examples=["NTSBDEB1XXX"])
    id: str
    prefix: str
    country: str
    suffix: str
    branch: str = Field(examples=[rules.PRIMARY_BRANCH])
    has_branch: bool
    is_test: bool
