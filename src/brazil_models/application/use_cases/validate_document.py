from __future__ import annotations

import logging

from brazil_models.application.dtos.document_dto import DocumentDTO
from brazil_models.application.dtos.requests import ValidateRequestDTO
from brazil_models.application.ports.validation_observer_port import ValidationObserverPort
from brazil_models.domain.value_objects.cpf_cnpj import DOCUMENT_CLASSES, CpfCnpj
from brazil_models.domain.value_objects.document import DigitDocument
from brazil_models.domain.value_objects.document_type import DocumentType

logger = logging.getLogger(__name__)


def document_class(kind: str) -> type[DigitDocument] | type[CpfCnpj]:
    """Maps ``auto``, ``cpf`` or ``cnpj`` to the class that parses it."""
    if kind.strip().lower() == "auto":
        return CpfCnpj
    return DOCUMENT_CLASSES[DocumentType.from_name(kind)]


class ValidateDocumentUseCase:
    def __init__(self, observer: ValidationObserverPort | None = None) -> None:
        self.observer = observer

    def execute(self, req: ValidateRequestDTO) -> DocumentDTO:
        cls = document_class(req.kind)
        doc = cls.try_parse(req.value)
        if self.observer:
            self.observer.record(cls.__name__, not doc.is_empty)
        if doc.is_empty:
            logger.debug("Rejected %s input %r", cls.__name__, req.value)
            return DocumentDTO.invalid()
        return DocumentDTO.from_domain(doc)
