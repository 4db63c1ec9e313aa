from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import total_ordering
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from brazil_models.domain.errors import DocumentError, FormatError, NullOrMissingInputError
from brazil_models.domain.value_objects import digits
from brazil_models.domain.value_objects.checksum import CNPJ_LENGTH
from brazil_models.domain.value_objects.document_type import DocumentType

if TYPE_CHECKING:
    from brazil_models.domain.value_objects.cpf_cnpj import CpfCnpj

RawInput = str | bytes | bytearray | memoryview | int

# no document has more digits than a CNPJ
MAX_NUMBER = 10**CNPJ_LENGTH - 1

D = TypeVar("D", bound="DigitDocument")


def coerce_text(document: str, value: Any) -> str:
    """Turns any accepted raw input (text, UTF-8 bytes, int) into text."""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError:
            raise FormatError(document, value) from None
    if isinstance(value, int) and not isinstance(value, bool):
        if not 0 <= value <= MAX_NUMBER:
            raise FormatError(document, value)
        return str(value)
    raise FormatError(document, value)


def ordinal_compare(left: str, right: str) -> int:
    a, b = left.upper(), right.upper()
    return (a > b) - (a < b)


@total_ordering
@dataclass(frozen=True, eq=False, repr=False)
class DigitDocument:
    """Fixed-width, checksum-validated digit identifier.

    Subclasses only declare ``length``, ``mask``, ``kind`` and ``checksum``.
    The stored ``value`` is always the canonical digit string: either a
    checksum-valid number or the all-zero ``EMPTY`` sentinel.
    """

    value: str

    length: ClassVar[int]
    mask: ClassVar[str]
    kind: ClassVar[DocumentType]
    checksum: ClassVar[Callable[[str], bool]]
    EMPTY: ClassVar[Any]

    def __init__(self, value: RawInput) -> None:
        name = type(self).__name__
        if value is None:
            raise NullOrMissingInputError(name)
        normalized = digits.normalize(coerce_text(name, value), self.length)
        if not self.checksum(normalized):
            raise FormatError(name, value)
        object.__setattr__(self, "value", normalized)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "length" in cls.__dict__:
            empty = object.__new__(cls)
            object.__setattr__(empty, "value", "0" * cls.length)
            cls.EMPTY = empty

    # -- construction -------------------------------------------------

    @classmethod
    def from_text(cls: type[D], value: RawInput) -> D:
        return cls(value)

    @classmethod
    def try_parse(cls: type[D], value: RawInput | None) -> D:
        """Like ``parse`` but returns ``EMPTY`` instead of raising."""
        if value is None:
            return cls.EMPTY
        try:
            return cls(value)
        except DocumentError:
            return cls.EMPTY

    @classmethod
    def parse(cls: type[D], value: RawInput | None) -> D:
        if value is None:
            raise NullOrMissingInputError(cls.__name__)
        parsed = cls.try_parse(value)
        if parsed.is_empty:
            raise FormatError(cls.__name__, value)
        return parsed

    @classmethod
    def from_number(cls: type[D], number: int) -> D:
        if isinstance(number, bool) or not isinstance(number, int):
            raise FormatError(cls.__name__, number)
        return cls(number)

    # -- class level helpers ------------------------------------------

    @classmethod
    def validate(cls, value: RawInput | None) -> bool:
        """Checks masked, unmasked or left-trimmed input."""
        if value is None:
            return False
        try:
            text = coerce_text(cls.__name__, value)
        except FormatError:
            return False
        return cls.checksum(digits.normalize(text, cls.length))

    @classmethod
    def format_text(cls, value: str | None, masked: bool = False) -> str:
        """Formats any text without validating it; blank input gives ``""``."""
        return digits.format_digits(value, cls.length, cls.mask if masked else None)

    # -- instance API -------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return self.value == "0" * self.length

    def format(self, masked: bool = False) -> str:
        return digits.apply_mask(self.value, self.mask) if masked else self.value

    def to_text(self) -> str:
        return self.value

    def to_bytes(self, masked: bool = False) -> bytes:
        return self.format(masked).encode("utf-8")

    def to_number(self) -> int:
        # leading zeros are lost, the text form stays canonical
        return int(self.value)

    def to_cpf_cnpj(self) -> CpfCnpj:
        from brazil_models.domain.value_objects.cpf_cnpj import CpfCnpj

        return CpfCnpj.from_document(self)

    def compare(self, other: DigitDocument) -> int:
        if type(other) is not type(self):
            raise TypeError(f"Cannot compare {type(self).__name__} with {type(other).__name__}")
        return ordinal_compare(self.value, other.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitDocument):
            return NotImplemented
        return type(other) is type(self) and ordinal_compare(self.value, other.value) == 0

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.compare(other) < 0  # type: ignore[arg-type]

    def __hash__(self) -> int:
        return hash(self.value.upper())

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        name = type(self).__name__
        if self.is_empty:
            return f"{name}.EMPTY"
        return f"{name}({self.format(masked=True)!r})"
