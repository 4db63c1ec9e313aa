import pytest
from pydantic import BaseModel, ValidationError

from brazil_models.domain.value_objects.cnpj import Cnpj
from brazil_models.domain.value_objects.cpf import Cpf
from brazil_models.domain.value_objects.cpf_cnpj import CpfCnpj
from brazil_models.domain.value_objects.document_type import DocumentType
from brazil_models.infrastructure.serialization.pydantic_types import (
    CnpjField,
    CpfCnpjField,
    CpfField,
    DocumentAnnotation,
)


class Customer(BaseModel):
    document: CpfCnpjField
    cpf: CpfField | None = None
    cnpj: CnpjField | None = None


def test_parses_masked_input():
    c = Customer(document="529.982.247-25", cpf="52998224725", cnpj="49.020.406/0001-25")
    assert c.document.kind is DocumentType.CPF
    assert c.cpf == Cpf("52998224725")
    assert c.cnpj == Cnpj("49020406000125")


def test_accepts_instances_bytes_and_numbers():
    c = Customer(document=CpfCnpj("49020406000125"), cpf=b"529.982.247-25", cnpj=11222333000181)
    assert c.document.is_cnpj
    assert c.cpf.value == "52998224725"
    assert c.cnpj.value == "11222333000181"


def test_dumps_canonical_digits():
    c = Customer(document="49.020.406/0001-25", cpf="529.982.247-25")
    assert c.model_dump(mode="json") == {
        "document": "49020406000125",
        "cpf": "52998224725",
        "cnpj": None,
    }


def test_empty_document_dumps_null():
    c = Customer(document=CpfCnpj.EMPTY, cpf=Cpf.EMPTY)
    assert c.model_dump(mode="json")["document"] is None
    assert c.model_dump(mode="json")["cpf"] is None


def test_json_round_trip():
    c = Customer(document="11.222.333/0001-81")
    again = Customer.model_validate_json(c.model_dump_json())
    assert again == c


@pytest.mark.parametrize("field, raw", [("document", "123"), ("cpf", "52998224724"), ("cnpj", 3.5)])
def test_invalid_value_raises(field, raw):
    data = {"document": "52998224725", field: raw}
    with pytest.raises(ValidationError):
        Customer(**data)


def test_schema_is_plain_string():
    props = Customer.model_json_schema()["properties"]
    assert props["document"]["type"] == "string"
    assert props["document"]["title"] == "CpfCnpj"


def test_annotation_rejects_other_types():
    with pytest.raises(TypeError):
        DocumentAnnotation(str)
