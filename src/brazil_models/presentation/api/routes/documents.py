from __future__ import annotations

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter
from prometheus_client import CollectorRegistry
from pydantic import BaseModel

from brazil_models.application.dtos.requests import (
    FormatRequestDTO,
    GenerateRequestDTO,
    ValidateRequestDTO,
)
from brazil_models.application.use_cases.format_document import FormatDocumentUseCase
from brazil_models.application.use_cases.generate_document import GenerateDocumentUseCase
from brazil_models.application.use_cases.validate_document import ValidateDocumentUseCase
from brazil_models.config import settings
from brazil_models.infrastructure.adapters.metrics_adapter import PrometheusValidationObserver
from brazil_models.infrastructure.serialization.pydantic_types import (
    CnpjField,
    CpfCnpjField,
    CpfField,
)

router = APIRouter(prefix="/v1/documents", tags=["documents"])

registry = CollectorRegistry()
_observer = PrometheusValidationObserver(registry)


def _masked(requested: bool | None) -> bool:
    return settings.mask_output if requested is None else requested


class ValidateBody(BaseModel):
    value: str | None = None
    kind: str = "auto"


class GenerateBody(BaseModel):
    kind: str = "cpf"
    count: int = 1
    seed: int | None = None
    masked: bool | None = None


class TaxpayerDocuments(BaseModel):
    document: CpfCnpjField
    cpf: CpfField | None = None
    cnpj: CnpjField | None = None


@router.post("/validate")
def validate_document(body: ValidateBody) -> dict[str, Any]:  # type: ignore[misc]
    uc = ValidateDocumentUseCase(observer=_observer)
    result = uc.execute(ValidateRequestDTO(value=body.value, kind=body.kind))
    return asdict(result)


@router.get("/format")
def format_document(value: str, kind: str = "auto", masked: bool | None = None) -> dict[str, str]:  # type: ignore[misc]
    uc = FormatDocumentUseCase()
    req = FormatRequestDTO(value=value, kind=kind, masked=_masked(masked))
    return {"value": uc.execute(req)}


@router.post("/generate")
def generate_documents(body: GenerateBody) -> dict[str, Any]:  # type: ignore[misc]
    uc = GenerateDocumentUseCase()
    docs = uc.execute(GenerateRequestDTO(kind=body.kind, count=body.count, seed=body.seed))
    items = [d.masked if _masked(body.masked) else d.value for d in docs]
    return {"items": items, "count": len(items)}


@router.post("/echo")
def echo_documents(body: TaxpayerDocuments) -> TaxpayerDocuments:  # type: ignore[misc]
    return body
