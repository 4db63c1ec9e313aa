from __future__ import annotations

import logging
import random

from brazil_models.application.dtos.document_dto import DocumentDTO
from brazil_models.application.dtos.requests import GenerateRequestDTO
from brazil_models.config import settings
from brazil_models.domain.errors import InvalidArgumentError
from brazil_models.domain.value_objects.checksum import cnpj_check_digits, cpf_check_digits
from brazil_models.domain.value_objects.cpf_cnpj import DOCUMENT_CLASSES
from brazil_models.domain.value_objects.document import DigitDocument
from brazil_models.domain.value_objects.document_type import DocumentType

logger = logging.getLogger(__name__)

_CHECK_DIGITS = {
    DocumentType.CPF: cpf_check_digits,
    DocumentType.CNPJ: cnpj_check_digits,
}


class GenerateDocumentUseCase:
    """Derives random valid documents, mostly for fixtures and demos."""

    def __init__(self, *, limit: int | None = None) -> None:
        self.limit = settings.generate_limit if limit is None else limit

    def execute(self, req: GenerateRequestDTO) -> list[DocumentDTO]:
        if not 1 <= req.count <= self.limit:
            raise InvalidArgumentError(f"count must be between 1 and {self.limit}, got {req.count}")
        rng = random.Random(req.seed)
        if req.kind.strip().lower() == "auto":
            kinds = [rng.choice(list(DocumentType)) for _ in range(req.count)]
        else:
            kinds = [DocumentType.from_name(req.kind)] * req.count
        logger.info("Generating %d document(s) of kind %s", req.count, req.kind)
        return [DocumentDTO.from_domain(self._generate(kind, rng)) for kind in kinds]

    @staticmethod
    def _generate(kind: DocumentType, rng: random.Random) -> DigitDocument:
        cls = DOCUMENT_CLASSES[kind]
        while True:
            base = "".join(str(rng.randrange(10)) for _ in range(kind.length - 2))
            # bases with repeated digits yield rejected numbers, draw again
            doc = cls.try_parse(base + _CHECK_DIGITS[kind](base))
            if not doc.is_empty:
                return doc
