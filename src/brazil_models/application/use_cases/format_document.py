from brazil_models.application.dtos.requests import FormatRequestDTO
from brazil_models.application.use_cases.validate_document import document_class


class FormatDocumentUseCase:
    def execute(self, req: FormatRequestDTO) -> str:
        doc = document_class(req.kind).parse(req.value)
        return doc.format(masked=req.masked)
