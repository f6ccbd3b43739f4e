import uuid

import pytest

from catalog.errors import DataCorrupted, KeyNotFound, TypeMismatch, ValueNotFound
from catalog.logo import RemoteLogo, SymbolLogo
from catalog.models import Department, decode_department, decode_departments, encode_department


def _raw(**overrides):
    raw = {
        "name": "Department\nof Testing",
        "description": "A test department.",
        "logoSource": {"type": "sfSymbol", "value": "hammer.fill"},
        "datasetCount": 42,
    }
    raw.update(overrides)
    return raw


def test_decode_department():
    dept = decode_department(_raw())
    assert dept.name == "Department\nof Testing"
    assert dept.description == "A test department."
    assert dept.logo_source == SymbolLogo("hammer.fill")
    assert dept.dataset_count == 42
    assert isinstance(dept.id, uuid.UUID)


def test_decode_generates_fresh_id_and_ignores_input_id():
    supplied = str(uuid.uuid4())
    first = decode_department(_raw(id=supplied))
    second = decode_department(_raw(id=supplied))
    assert str(first.id) != supplied
    assert first != second


@pytest.mark.parametrize("missing", ["name", "description", "logoSource", "datasetCount"])
def test_decode_missing_field(missing):
    raw = _raw()
    del raw[missing]
    with pytest.raises(KeyNotFound) as excinfo:
        decode_department(raw)
    assert excinfo.value.key == missing


def test_missing_fields_reported_in_declaration_order():
    with pytest.raises(KeyNotFound) as excinfo:
        decode_department({"datasetCount": 1})
    assert excinfo.value.key == "name"


def test_decode_null_name():
    with pytest.raises(ValueNotFound) as excinfo:
        decode_department(_raw(name=None))
    assert excinfo.value.coding_path[-1] == "name"


@pytest.mark.parametrize("count", ["not a number", 1.5, True])
def test_decode_dataset_count_type_mismatch(count):
    with pytest.raises(TypeMismatch) as excinfo:
        decode_department(_raw(datasetCount=count))
    assert excinfo.value.coding_path[-1] == "datasetCount"


def test_decode_string_count_message():
    with pytest.raises(TypeMismatch, match="Expected to decode Int but found a string"):
        decode_department(_raw(datasetCount="not a number"))


def test_decode_negative_count():
    with pytest.raises(DataCorrupted):
        decode_department(_raw(datasetCount=-1))


def test_nested_logo_errors_extend_path():
    with pytest.raises(KeyNotFound) as excinfo:
        decode_department(_raw(logoSource={"type": "sfSymbol"}))
    assert excinfo.value.coding_path == ("logoSource", "value")

    with pytest.raises(DataCorrupted) as excinfo:
        decode_department(_raw(logoSource={"type": "remoteURL", "value": ""}))
    assert excinfo.value.coding_path == ("logoSource", "value")


def test_equality_uses_id_only():
    shared = uuid.uuid4()
    a = Department(id=shared, name="Dept A", description="Desc A", logo_source=SymbolLogo("a.circle"), dataset_count=1)
    b = Department(id=shared, name="Dept B", description="Desc B", logo_source=SymbolLogo("b.circle"), dataset_count=2)
    c = Department(name="Dept A", description="Desc A", logo_source=SymbolLogo("a.circle"), dataset_count=1)

    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_department_is_immutable():
    dept = decode_department(_raw())
    with pytest.raises(AttributeError):
        dept.name = "other"  # type: ignore[misc]


def test_decode_departments_list():
    depts = decode_departments([_raw(), _raw(name="Other", logoSource={"type": "remoteURL", "value": "https://example.com/a.png"})])
    assert [d.name for d in depts] == ["Department\nof Testing", "Other"]
    assert depts[1].logo_source == RemoteLogo("https://example.com/a.png")


def test_decode_departments_rejects_object():
    with pytest.raises(TypeMismatch, match="Expected to decode Array<Department>"):
        decode_departments(_raw())


def test_decode_departments_fails_whole_batch():
    with pytest.raises(KeyNotFound) as excinfo:
        decode_departments([_raw(), {"name": "x"}])
    assert excinfo.value.coding_path == ("1", "description")


def test_encode_department_round_trip():
    dept = decode_department(_raw())
    again = decode_department(encode_department(dept))
    assert encode_department(again) == encode_department(dept)
    assert "id" not in encode_department(dept)
