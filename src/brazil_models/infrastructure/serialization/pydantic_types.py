"""Pydantic field types for documents.

Usage::

    class Customer(BaseModel):
        document: CpfCnpjField
        cpf: CpfField | None = None

Fields accept text, UTF-8 bytes, numbers or document instances, dump as the
canonical digit string (``null`` for empty documents) and appear in OpenAPI
as plain strings.
"""
from __future__ import annotations

from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, core_schema

from brazil_models.domain.interfaces import is_document_type
from brazil_models.domain.value_objects.cnpj import Cnpj
from brazil_models.domain.value_objects.cpf import Cpf
from brazil_models.domain.value_objects.cpf_cnpj import CpfCnpj
from brazil_models.infrastructure.serialization.json_codec import from_json_value, to_json_value


class DocumentAnnotation:
    def __init__(self, document_cls: type) -> None:
        if not is_document_type(document_cls):
            raise TypeError(f"{document_cls!r} is not a document type")
        self.document_cls = document_cls

    def _validate(self, value: Any) -> Any:
        if isinstance(value, self.document_cls):
            return value
        if isinstance(value, (bytes, bytearray)):
            return self.document_cls.from_text(value)
        return from_json_value(self.document_cls, value)

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            self._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(to_json_value),
        )

    def __get_pydantic_json_schema__(
        self, schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "title": self.document_cls.__name__}


CpfField = Annotated[Cpf, DocumentAnnotation(Cpf)]
CnpjField = Annotated[Cnpj, DocumentAnnotation(Cnpj)]
CpfCnpjField = Annotated[CpfCnpj, DocumentAnnotation(CpfCnpj)]
