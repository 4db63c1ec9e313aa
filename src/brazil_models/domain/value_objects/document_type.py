from __future__ import annotations

from enum import Enum

from brazil_models.domain.errors import InvalidArgumentError
from brazil_models.domain.value_objects.checksum import CNPJ_LENGTH, CPF_LENGTH


class DocumentType(Enum):
    """Kind of a Brazilian taxpayer document."""

    CNPJ = 1
    CPF = 2

    @property
    def length(self) -> int:
        return CNPJ_LENGTH if self is DocumentType.CNPJ else CPF_LENGTH

    @classmethod
    def from_name(cls, name: str) -> "DocumentType":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise InvalidArgumentError(f"Unknown document type: {name!r}") from None
