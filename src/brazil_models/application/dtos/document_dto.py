from __future__ import annotations

from dataclasses import dataclass

from brazil_models.domain.value_objects.cpf_cnpj import CpfCnpj
from brazil_models.domain.value_objects.document import DigitDocument


@dataclass(frozen=True)
class DocumentDTO:
    valid: bool
    kind: str | None
    value: str | None
    masked: str | None

    @classmethod
    def from_domain(cls, doc: DigitDocument | CpfCnpj) -> "DocumentDTO":
        if doc.is_empty:
            return cls.invalid()
        return cls(
            valid=True,
            kind=doc.kind.name if doc.kind else None,
            value=doc.format(masked=False),
            masked=doc.format(masked=True),
        )

    @classmethod
    def invalid(cls) -> "DocumentDTO":
        return cls(valid=False, kind=None, value=None, masked=None)
