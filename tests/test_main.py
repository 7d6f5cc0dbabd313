import json

import pytest

from owner_mapping import cli
from owner_mapping.config import get_settings
from owner_mapping.main import OUTPUT_FILENAME, load_property_input, run


def write_json(path, data):
    path.write_text(json.dumps(data), encoding='utf-8')


@pytest.fixture
def input_dir(tmp_path):
    directory = tmp_path / "input"
    directory.mkdir()
    write_json(directory / "12-34.json", {
        "sales": [
            {"date": "05/01/2019", "grantee": "John Smith"},
            {"date": "2021-07-10", "grantee": "XYZ TRUST"},
        ],
        "current_owners": ["DOE JANE"],
    })
    write_json(directory / "other.json", {
        "property_id": "99",
        "sales": [{"date": "2010-01-01", "grantee": "SMITH JOHN & MARY"}],
    })
    return directory


def test_load_property_input_defaults_to_file_stem(input_dir):
    property_id, sales, current = load_property_input(str(input_dir / "12-34.json"))
    assert property_id == "12-34"
    assert sales == [("05/01/2019", "John Smith"), ("2021-07-10", "XYZ TRUST")]
    assert current == ["DOE JANE"]


def test_run_writes_owner_data(input_dir, tmp_path):
    output_dir = tmp_path / "owners"
    assert run(str(input_dir), str(output_dir)) == 0

    result = json.loads((output_dir / OUTPUT_FILENAME).read_text(encoding='utf-8'))
    assert sorted(result) == ["property_12-34", "property_99"]

    owners_by_date = result["property_12-34"]["owners_by_date"]
    assert list(owners_by_date) == ["2019-05-01", "2021-07-10", "current"]
    assert owners_by_date["current"] == [{'type': 'company', 'name': 'Xyz Trust'}]

    joint = result["property_99"]["owners_by_date"]["2010-01-01"]
    assert [o['first_name'] for o in joint] == ["John", "Mary"]
    assert result["property_99"]["invalid_owners"] == []


def test_broken_file_is_skipped(input_dir, tmp_path):
    (input_dir / "broken.json").write_text("{not json", encoding='utf-8')
    write_json(input_dir / "no_sales.json", {"current_owners": ["SMITH JOHN"]})
    output_dir = tmp_path / "owners"

    assert run(str(input_dir), str(output_dir)) == 2

    result = json.loads((output_dir / OUTPUT_FILENAME).read_text(encoding='utf-8'))
    assert sorted(result) == ["property_12-34", "property_99"]


def test_numeric_date_and_null_current_owners_do_not_stop_the_run(input_dir, tmp_path):
    write_json(input_dir / "numeric_date.json", {
        "sales": [{"date": 20190501, "grantee": "SMITH JOHN"}],
    })
    write_json(input_dir / "null_current.json", {
        "sales": [{"date": "2019-05-01", "grantee": "DOE JANE"}],
        "current_owners": None,
    })
    output_dir = tmp_path / "owners"

    assert run(str(input_dir), str(output_dir)) == 0

    result = json.loads((output_dir / OUTPUT_FILENAME).read_text(encoding='utf-8'))
    assert result["property_numeric_date"]["owners_by_date"] == {"current": []}
    assert result["property_null_current"]["owners_by_date"]["current"] == [
        {'type': 'person', 'first_name': 'Jane', 'last_name': 'Doe',
         'middle_name': None, 'prefix_name': None, 'suffix_name': None},
    ]


def test_current_owners_of_wrong_type_skips_file(input_dir, tmp_path):
    write_json(input_dir / "bad_current.json", {
        "sales": [{"date": "2019-05-01", "grantee": "DOE JANE"}],
        "current_owners": {"name": "DOE JANE"},
    })
    output_dir = tmp_path / "owners"

    assert run(str(input_dir), str(output_dir)) == 1

    result = json.loads((output_dir / OUTPUT_FILENAME).read_text(encoding='utf-8'))
    assert sorted(result) == ["property_12-34", "property_99"]


def test_single_current_owner_string_is_one_line(tmp_path):
    path = tmp_path / "single.json"
    write_json(path, {"sales": [], "current_owners": "SMITH JOHN & MARY"})
    _, sales, current = load_property_input(str(path))
    assert sales == []
    assert current == ["SMITH JOHN & MARY"]


def test_missing_input_dir(tmp_path):
    assert run(str(tmp_path / "nope"), str(tmp_path / "owners")) == 1


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OWNER_MAPPING_INPUT_DIR", "/data/in")
    monkeypatch.setenv("OWNER_MAPPING_EXTRA_COMPANY_KEYWORDS", "ranch, farms")
    settings = get_settings()
    assert settings.input_dir == "/data/in"
    assert settings.extra_company_keywords == ("ranch", "farms")
    assert {"RANCH", "FARMS"} <= settings.vocabulary().company_keywords


def test_cli_exit_code(monkeypatch, input_dir, tmp_path):
    monkeypatch.chdir(tmp_path)
    output_dir = tmp_path / "out"
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--input-dir", str(input_dir), "--output-dir", str(output_dir)])
    assert excinfo.value.code == 0
    assert (output_dir / OUTPUT_FILENAME).exists()
    assert list((tmp_path / "logs").glob("owner_mapping_*.log"))
