from typing import Protocol


class ValidationObserverPort(Protocol):
    """Receives the outcome of every validation (metrics, audit...)."""

    def record(self, document: str, valid: bool) -> None: ...
