from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from brazil_models.domain.value_objects.cnpj import Cnpj
from brazil_models.domain.value_objects.cpf import Cpf
from brazil_models.domain.value_objects.cpf_cnpj import CpfCnpj

# =========================
# Capabilities
# =========================
@runtime_checkable
class Parseable(Protocol):
    @classmethod
    def from_text(cls, value: Any) -> Any: ...
    @classmethod
    def try_parse(cls, value: Any) -> Any: ...
    @classmethod
    def parse(cls, value: Any) -> Any: ...


@runtime_checkable
class Formattable(Protocol):
    @property
    def is_empty(self) -> bool: ...
    def format(self, masked: bool = False) -> str: ...
    def to_text(self) -> str: ...
    def to_bytes(self, masked: bool = False) -> bytes: ...
    def to_number(self) -> int: ...


@runtime_checkable
class Comparable(Protocol):
    def compare(self, other: Any) -> int: ...


DOCUMENT_TYPES: frozenset[type] = frozenset({Cpf, Cnpj, CpfCnpj})


def is_document_type(obj: Any) -> bool:
    """True for the identifier classes and their instances.

    Schema layers use it to render these types as plain strings.
    """
    cls = obj if isinstance(obj, type) else type(obj)
    return cls in DOCUMENT_TYPES
