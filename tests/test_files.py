import pytest

from puzzle_proof.files import constructor_fields, load_json, save_bytes, save_json


def test_save_and_load_json(tmp_path):
    path = tmp_path / "nested" / "artifact.json"
    data = {"constructor": 0, "fields": [{"bytes": "acab"}]}
    save_json(path, data)

    assert load_json(path) == data
    assert path.read_text() == '{\n  "constructor": 0,\n  "fields": [\n    {\n      "bytes": "acab"\n    }\n  ]\n}'


def test_save_bytes(tmp_path):
    path = tmp_path / "nested" / "proof.cbor"
    save_bytes(path, b"\x01\x02")
    assert path.read_bytes() == b"\x01\x02"


def test_constructor_fields():
    data = {"constructor": 0, "fields": [{"bytes": "aa"}, {"bytes": "bb"}]}
    assert constructor_fields(data, 2) == ["aa", "bb"]


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"constructor": 1, "fields": [{"bytes": "aa"}]},
        {"constructor": 0, "fields": []},
        {"constructor": 0, "fields": [{"int": 1}]},
        {"constructor": 0},
    ],
)
def test_constructor_fields_rejects_bad_shapes(data):
    with pytest.raises(ValueError):
        constructor_fields(data, 1)


if __name__ == "__main__":
    pytest.main()
