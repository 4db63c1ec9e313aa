from __future__ import annotations

from brazil_models.domain.value_objects.checksum import CPF_LENGTH, validate_cpf
from brazil_models.domain.value_objects.document import DigitDocument
from brazil_models.domain.value_objects.document_type import DocumentType


class Cpf(DigitDocument):
    """Value Object para CPF (Cadastro de Pessoas Físicas, 11 dígitos)."""

    length = CPF_LENGTH
    mask = "###.###.###-##"
    kind = DocumentType.CPF
    checksum = staticmethod(validate_cpf)
