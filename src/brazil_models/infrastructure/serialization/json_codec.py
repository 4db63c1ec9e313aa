"""JSON adapter for documents: canonical text when present, ``null`` when empty."""
from __future__ import annotations

import json
from typing import Any, TypeVar

from brazil_models.domain.errors import FormatError
from brazil_models.domain.value_objects.cpf_cnpj import CpfCnpj
from brazil_models.domain.value_objects.document import DigitDocument

T = TypeVar("T", DigitDocument, CpfCnpj)


def to_json_value(doc: DigitDocument | CpfCnpj | None) -> str | None:
    if doc is None or doc.is_empty:
        return None
    return doc.to_text()


def from_json_value(cls: type[T], raw: Any) -> T:
    """Reads a JSON scalar back into ``cls``; ``null`` gives ``cls.EMPTY``."""
    if raw is None:
        return cls.EMPTY
    if isinstance(raw, bool) or not isinstance(raw, (str, int)):
        raise FormatError(cls.__name__, raw)
    if isinstance(raw, int):
        if cls is CpfCnpj:
            raise FormatError(cls.__name__, raw)
        return cls.from_number(raw)
    return cls.from_text(raw)


class DocumentJSONEncoder(json.JSONEncoder):
    def default(self, o: Any) -> Any:
        if isinstance(o, (DigitDocument, CpfCnpj)):
            return to_json_value(o)
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    return json.dumps(obj, cls=DocumentJSONEncoder, **kwargs)
