from fastapi import APIRouter

from brazil_models.domain.value_objects.document_type import DocumentType

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, object]:  # type: ignore[misc]
    return {"status": "ok", "documents": [kind.name for kind in DocumentType]}
