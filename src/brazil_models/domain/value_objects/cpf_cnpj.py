from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar

from brazil_models.domain.errors import DocumentError, FormatError, NullOrMissingInputError
from brazil_models.domain.value_objects import digits
from brazil_models.domain.value_objects.checksum import (
    CNPJ_LENGTH,
    CPF_LENGTH,
    validate_cnpj,
    validate_cpf,
)
from brazil_models.domain.value_objects.cnpj import Cnpj
from brazil_models.domain.value_objects.cpf import Cpf
from brazil_models.domain.value_objects.document import (
    DigitDocument,
    RawInput,
    coerce_text,
    ordinal_compare,
)
from brazil_models.domain.value_objects.document_type import DocumentType

DOCUMENT_CLASSES: dict[DocumentType, type[DigitDocument]] = {
    DocumentType.CNPJ: Cnpj,
    DocumentType.CPF: Cpf,
}


def infer_kind(value: RawInput | None) -> DocumentType | None:
    """Tells whether ``value`` holds a valid CNPJ, a valid CPF or neither.

    Only the digit count decides which checksum applies; no zero padding is
    done here, so left-trimmed numbers are not recognized.
    """
    if value is None:
        return None
    try:
        cleared = digits.remove_non_digits(coerce_text("CpfCnpj", value))
    except FormatError:
        return None
    if len(cleared) == CNPJ_LENGTH and validate_cnpj(cleared):
        return DocumentType.CNPJ
    if len(cleared) == CPF_LENGTH and validate_cpf(cleared):
        return DocumentType.CPF
    return None


@total_ordering
@dataclass(frozen=True, eq=False, repr=False)
class CpfCnpj:
    """Either a CPF or a CNPJ, the kind being inferred from the input.

    The empty sentinel has no digits and no kind, unlike ``Cpf.EMPTY`` and
    ``Cnpj.EMPTY`` which keep their fixed width.
    """

    value: str
    kind: DocumentType | None

    EMPTY: ClassVar[CpfCnpj]

    def __init__(self, value: RawInput) -> None:
        if value is None:
            raise NullOrMissingInputError("CpfCnpj")
        text = coerce_text("CpfCnpj", value)
        kind = infer_kind(text)
        if kind is None:
            raise FormatError("CpfCnpj", value)
        object.__setattr__(self, "value", digits.remove_non_digits(text))
        object.__setattr__(self, "kind", kind)

    @classmethod
    def _build(cls, value: str, kind: DocumentType | None) -> CpfCnpj:
        doc = object.__new__(cls)
        object.__setattr__(doc, "value", value)
        object.__setattr__(doc, "kind", kind)
        return doc

    @classmethod
    def from_text(cls, value: RawInput) -> CpfCnpj:
        return cls(value)

    @classmethod
    def try_parse(cls, value: RawInput | None) -> CpfCnpj:
        if value is None:
            return cls.EMPTY
        try:
            return cls(value)
        except DocumentError:
            return cls.EMPTY

    @classmethod
    def parse(cls, value: RawInput | None) -> CpfCnpj:
        if value is None:
            raise NullOrMissingInputError("CpfCnpj")
        parsed = cls.try_parse(value)
        if parsed.is_empty:
            raise FormatError("CpfCnpj", value)
        return parsed

    @classmethod
    def from_number(cls, number: int, kind: DocumentType) -> CpfCnpj:
        """Builds from a number, restoring the leading zeros of ``kind``."""
        if isinstance(number, bool) or not isinstance(number, int):
            raise FormatError("CpfCnpj", number)
        if not 0 <= number < 10**kind.length:
            raise FormatError("CpfCnpj", number)
        parsed = cls(str(number).rjust(kind.length, "0"))
        if parsed.kind is not kind:
            raise FormatError("CpfCnpj", number)
        return parsed

    @classmethod
    def from_document(cls, document: DigitDocument) -> CpfCnpj:
        if document.is_empty:
            return cls.EMPTY
        return cls._build(document.value, document.kind)

    @classmethod
    def validate(cls, value: RawInput | None) -> DocumentType | None:
        return infer_kind(value)

    @classmethod
    def format_text(cls, value: RawInput | None, masked: bool = False) -> str:
        kind = infer_kind(value)
        if kind is None:
            return ""
        return DOCUMENT_CLASSES[kind].format_text(coerce_text("CpfCnpj", value), masked)

    @property
    def is_empty(self) -> bool:
        return not self.value

    @property
    def is_cpf(self) -> bool:
        return self.kind is DocumentType.CPF

    @property
    def is_cnpj(self) -> bool:
        return self.kind is DocumentType.CNPJ

    def format(self, masked: bool = False) -> str:
        if self.kind is None:
            return ""
        return DOCUMENT_CLASSES[self.kind].format_text(self.value, masked)

    def to_text(self) -> str:
        return self.value

    def to_bytes(self, masked: bool = False) -> bytes:
        return self.format(masked).encode("utf-8")

    def to_number(self) -> int:
        if self.is_empty:
            raise FormatError("CpfCnpj", self.value)
        return int(self.value)

    def to_document(self) -> DigitDocument:
        if self.kind is None:
            raise FormatError("CpfCnpj", self.value)
        return DOCUMENT_CLASSES[self.kind](self.value)

    def to_cpf(self) -> Cpf:
        if self.kind is not DocumentType.CPF:
            raise FormatError("Cpf", self.value)
        return Cpf(self.value)

    def to_cnpj(self) -> Cnpj:
        if self.kind is not DocumentType.CNPJ:
            raise FormatError("Cnpj", self.value)
        return Cnpj(self.value)

    def compare(self, other: CpfCnpj) -> int:
        if not isinstance(other, CpfCnpj):
            raise TypeError(f"Cannot compare CpfCnpj with {type(other).__name__}")
        return ordinal_compare(self.value, other.value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (CpfCnpj, DigitDocument)):
            return self.kind is other.kind and ordinal_compare(self.value, other.value) == 0
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CpfCnpj):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash(self.value.upper())

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        if self.kind is None:
            return "CpfCnpj.EMPTY"
        return f"CpfCnpj({self.format(masked=True)!r}, kind={self.kind.name})"


CpfCnpj.EMPTY = CpfCnpj._build("", None)
