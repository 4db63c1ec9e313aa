from __future__ import annotations

from brazil_models.domain.value_objects.checksum import CNPJ_LENGTH, validate_cnpj
from brazil_models.domain.value_objects.document import DigitDocument
from brazil_models.domain.value_objects.document_type import DocumentType


class Cnpj(DigitDocument):
    """Value Object para CNPJ (Cadastro Nacional da Pessoa Jurídica, 14 dígitos)."""

    length = CNPJ_LENGTH
    mask = "##.###.###/####-##"
    kind = DocumentType.CNPJ
    checksum = staticmethod(validate_cnpj)
