from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter


class PrometheusValidationObserver:
    """Counts validations per document type and outcome."""

    def __init__(self, registry: CollectorRegistry) -> None:
        self.validations = Counter(
            "brazil_models_validations",
            "Document validations by type and result",
            labelnames=("kind", "result"),
            registry=registry,
        )

    def record(self, document: str, valid: bool) -> None:
        self.validations.labels(kind=document, result="valid" if valid else "invalid").inc()
