import pytest

from brazil_models.domain.errors import FormatError, NullOrMissingInputError
from brazil_models.domain.interfaces import Comparable, Formattable, Parseable, is_document_type
from brazil_models.domain.value_objects.cnpj import Cnpj
from brazil_models.domain.value_objects.cpf import Cpf
from brazil_models.domain.value_objects.cpf_cnpj import CpfCnpj, infer_kind
from brazil_models.domain.value_objects.document_type import DocumentType
from tests.unit._samples import BLANKS, INVALID_CNPJS, INVALID_CPFS, VALID_CNPJS, VALID_CPFS


def test_empty_cpf_cnpj_has_no_kind():
    assert CpfCnpj.EMPTY.value == ""
    assert CpfCnpj.EMPTY.kind is None
    assert CpfCnpj.EMPTY.format() == ""
    assert CpfCnpj.EMPTY.format(masked=True) == ""
    assert CpfCnpj.EMPTY.is_empty


@pytest.mark.parametrize("cnpj", VALID_CNPJS)
def test_infer_cnpj(cnpj):
    assert infer_kind(cnpj) is DocumentType.CNPJ
    doc = CpfCnpj(cnpj)
    assert doc.kind is DocumentType.CNPJ
    assert doc.is_cnpj and not doc.is_cpf
    assert doc.value == cnpj


@pytest.mark.parametrize("cpf", VALID_CPFS)
def test_infer_cpf(cpf):
    assert infer_kind(cpf) is DocumentType.CPF
    doc = CpfCnpj(cpf)
    assert doc.kind is DocumentType.CPF
    assert doc.format(masked=True) == Cpf(cpf).format(masked=True)


@pytest.mark.parametrize("value", INVALID_CPFS + INVALID_CNPJS + ["12345601", "1123456000101"])
def test_infer_nothing(value):
    assert infer_kind(value) is None
    with pytest.raises(FormatError):
        CpfCnpj(value)
    assert CpfCnpj.try_parse(value) is CpfCnpj.EMPTY


@pytest.mark.parametrize("value", BLANKS + [None])
def test_try_parse_blank(value):
    assert CpfCnpj.try_parse(value) is CpfCnpj.EMPTY


def test_parse():
    assert CpfCnpj.parse("49.020.406/0001-25").value == "49020406000125"
    assert CpfCnpj.parse(b"529.982.247-25").kind is DocumentType.CPF
    with pytest.raises(FormatError):
        CpfCnpj.parse("")
    with pytest.raises(NullOrMissingInputError):
        CpfCnpj.parse(None)
    with pytest.raises(NullOrMissingInputError):
        CpfCnpj(None)  # type: ignore[arg-type]


def test_masked_cnpj_round_trip():
    doc = CpfCnpj("49.020.406/0001-25")
    assert doc.value == "49020406000125"
    assert doc.format(masked=True) == "49.020.406/0001-25"
    assert repr(doc) == "CpfCnpj('49.020.406/0001-25', kind=CNPJ)"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("49.020.406/0001-25", "49.020.406/0001-25"),
        ("00123456000149", "00.123.456/0001-49"),
        ("00012345601", "000.123.456-01"),
        ("31981812083", "319.818.120-83"),
        ("12345601", ""),
        ("", ""),
    ],
)
def test_format_text(value, expected):
    assert CpfCnpj.format_text(value, masked=True) == expected


def test_format_text_clean():
    assert CpfCnpj.format_text("7.3285.396/0001-34") == "73285396000134"
    assert CpfCnpj.format_text("319.818.120-83") == "31981812083"


def test_from_number():
    assert CpfCnpj.from_number(12345601, DocumentType.CPF).value == "00012345601"
    assert CpfCnpj.from_number(123456000149, DocumentType.CNPJ).value == "00123456000149"
    # 00000012345601 is a CNPJ, never a CPF
    with pytest.raises(FormatError):
        CpfCnpj.from_number(12345601, DocumentType.CNPJ).to_cpf()
    with pytest.raises(FormatError):
        CpfCnpj.from_number(0, DocumentType.CPF)
    with pytest.raises(FormatError):
        CpfCnpj.from_number(52998224725, DocumentType.CNPJ)


def test_widening_keeps_kind():
    cpf, cnpj = Cpf("52998224725"), Cnpj("49020406000125")
    assert CpfCnpj.from_document(cpf).kind is DocumentType.CPF
    assert CpfCnpj.from_document(cnpj).kind is DocumentType.CNPJ
    assert CpfCnpj.from_document(cnpj) == cnpj
    assert CpfCnpj.from_document(Cnpj.EMPTY) is CpfCnpj.EMPTY


def test_narrowing():
    doc = CpfCnpj("529.982.247-25")
    assert doc.to_cpf() == Cpf("52998224725")
    assert doc.to_document() == Cpf("52998224725")
    with pytest.raises(FormatError):
        doc.to_cnpj()
    with pytest.raises(FormatError):
        CpfCnpj.EMPTY.to_cpf()
    assert CpfCnpj("49020406000125").to_cnpj() == Cnpj("49020406000125")


@pytest.mark.parametrize("cpf", VALID_CPFS)
def test_cpf_kind_never_equals_a_cnpj(cpf):
    doc = CpfCnpj(cpf)
    assert doc.kind is DocumentType.CPF
    assert doc == Cpf(cpf)
    assert Cpf(cpf) == doc
    for cnpj in VALID_CNPJS:
        assert doc != Cnpj(cnpj)
        assert Cnpj(cnpj) != doc


def test_equality_requires_kind():
    assert CpfCnpj("00012345601") != Cnpj("12345601")
    assert CpfCnpj("00000012345601") == Cnpj("12345601")
    assert CpfCnpj.EMPTY != Cpf.EMPTY
    assert CpfCnpj("52998224725") == CpfCnpj("529.982.247-25")
    assert hash(CpfCnpj("52998224725")) == hash(Cpf("52998224725"))


def test_compare_and_order():
    a, b = CpfCnpj("00012345601"), CpfCnpj("49020406000125")
    assert a.compare(b) == -1
    assert b.compare(a) == 1
    assert a.compare(CpfCnpj("000.123.456-01")) == 0
    assert sorted([b, a]) == [a, b]
    with pytest.raises(TypeError):
        a.compare(Cpf("00012345601"))  # type: ignore[arg-type]


def test_numeric_view():
    assert CpfCnpj("00012345601").to_number() == 12345601
    with pytest.raises(FormatError):
        CpfCnpj.EMPTY.to_number()


def test_bytes_view():
    doc = CpfCnpj("01123456000101")
    assert doc.to_bytes() == b"01123456000101"
    assert doc.to_bytes(masked=True) == b"01.123.456/0001-01"
    assert doc.to_text() == str(doc)


def test_capabilities():
    for doc in (Cpf("52998224725"), Cnpj("49020406000125"), CpfCnpj("52998224725")):
        assert isinstance(doc, Parseable)
        assert isinstance(doc, Formattable)
        assert isinstance(doc, Comparable)
        assert is_document_type(doc)
        assert is_document_type(type(doc))
    assert not is_document_type("52998224725")
    assert not is_document_type(str)


def test_huge_numbers_are_rejected():
    assert CpfCnpj.try_parse(10**5000) is CpfCnpj.EMPTY
    assert CpfCnpj.validate(10**5000) is None
    with pytest.raises(FormatError):
        CpfCnpj.from_number(10**5000, DocumentType.CNPJ)
    with pytest.raises(FormatError):
        CpfCnpj.from_number(10**11, DocumentType.CPF)


def test_class_helpers_accept_bytes():
    assert CpfCnpj.validate(b"529.982.247-25") is DocumentType.CPF
    assert CpfCnpj.validate(bytearray(b"49020406000125")) is DocumentType.CNPJ
    assert CpfCnpj.validate(b"\xff\xfe") is None
    assert CpfCnpj.format_text(b"49020406000125", masked=True) == "49.020.406/0001-25"
    assert CpfCnpj.format_text(b"123") == ""
    assert infer_kind(52998224725) is DocumentType.CPF
