import json

import pytest

from table_normalizer.errors import EmptyInput, InvalidShape, IoFailure, ParseFailure, UnsupportedFormat
from table_normalizer.io_utils import file_name_from_path
from table_normalizer.models import FileType
from table_normalizer.readers import (
    parse_csv,
    parse_file,
    parse_json,
    parse_jsonl,
    table_from_csv_text,
    table_from_json_text,
    table_from_jsonl_text,
)


def write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_parse_json_dictionary_of_objects(tmp_path):
    path = write(tmp_path, "people.json", '{"alice":{"age":30},"bob":{"age":25}}')
    table = parse_json(path)
    assert table.headers == ["Name", "age"]
    assert table.rows == [["alice", "30"], ["bob", "25"]]
    assert table.file_name == "people.json"
    assert table.file_type is FileType.JSON


def test_parse_json_api_envelope():
    text = json.dumps({"meta": {"page": 1}, "items": [{"id": 1, "tags": ["a", "b"]}, {"id": 2}]})
    table = table_from_json_text(text)
    assert table.headers == ["id", "tags"]
    assert table.rows == [["1", "a, b"], ["2", ""]]


def test_parse_json_single_object():
    table = table_from_json_text('{"a": 1, "b": 2}')
    assert table.headers == ["a", "b"]
    assert table.rows == [["1", "2"]]


def test_parse_json_keeps_document_key_order():
    table = table_from_json_text('[{"z": 1, "a": 2}]')
    assert table.headers == ["z", "a"]


def test_parse_json_empty_array():
    with pytest.raises(EmptyInput):
        table_from_json_text("[]")


def test_parse_json_scalar_root():
    with pytest.raises(InvalidShape, match="JSON must be an object or an array of objects"):
        table_from_json_text("42")


def test_parse_json_syntax_error():
    with pytest.raises(ParseFailure, match="Failed to parse JSON"):
        table_from_json_text('{"a": ')


def test_parse_json_rejects_nan():
    with pytest.raises(ParseFailure):
        table_from_json_text('[{"a": NaN}]')


def test_parse_json_strips_bom(tmp_path):
    path = tmp_path / "bom.json"
    path.write_bytes(b'\xef\xbb\xbf[{"a": 1}]')
    assert parse_json(path).rows == [["1"]]


def test_missing_file_is_an_io_failure(tmp_path):
    with pytest.raises(IoFailure, match="Failed to read file"):
        parse_json(tmp_path / "missing.json")


def test_parse_csv(tmp_path):
    path = write(tmp_path, "data.csv", 'name,city\nAlice,"Paris, FR"\nBob,Rome\n')
    table = parse_csv(path)
    assert table.headers == ["name", "city"]
    assert table.rows == [["Alice", "Paris, FR"], ["Bob", "Rome"]]
    assert table.file_type is FileType.CSV
    assert table.file_name == "data.csv"


def test_csv_headers_only_is_a_zero_row_table():
    table = table_from_csv_text("a,b\n")
    assert table.headers == ["a", "b"]
    assert table.rows == []
    assert table.row_count == 0


def test_csv_without_header_is_empty_input():
    with pytest.raises(EmptyInput):
        table_from_csv_text("")


def test_csv_ragged_row_is_a_parse_failure():
    with pytest.raises(ParseFailure, match="line 3"):
        table_from_csv_text("a,b\n1,2\n3\n")


def test_parse_jsonl(tmp_path):
    content = '{"id": 1, "name": "a", "meta": {"x": 1}}\n\n{"name": "b", "id": 2, "extra": true}\n{"id": null}\n'
    table = parse_jsonl(write(tmp_path, "rows.jsonl", content))
    assert table.headers == ["id", "name", "meta"]
    assert table.rows == [
        ["1", "a", '{"x":1}'],
        ["2", "b", ""],
        ["", "", ""],
    ]
    assert table.file_type is FileType.JSONL


def test_jsonl_blank_file_is_empty_input():
    with pytest.raises(EmptyInput, match="JSONL file is empty"):
        table_from_jsonl_text("\n  \n")


def test_jsonl_bad_line_reports_line_number():
    with pytest.raises(ParseFailure, match="Failed to parse line 3"):
        table_from_jsonl_text('{"a": 1}\n\n{"a": \n')


def test_jsonl_non_object_line_is_invalid_shape():
    with pytest.raises(InvalidShape, match="line 2"):
        table_from_jsonl_text('{"a": 1}\n[1, 2]\n')


def test_parse_file_dispatches_on_extension(tmp_path):
    assert parse_file(write(tmp_path, "x.CSV", "a\n1\n")).file_type is FileType.CSV
    assert parse_file(write(tmp_path, "x.json", '[{"a": 1}]')).file_type is FileType.JSON
    assert parse_file(write(tmp_path, "x.jsonl", '{"a": 1}\n')).file_type is FileType.JSONL


def test_parse_file_rejects_other_extensions(tmp_path):
    with pytest.raises(UnsupportedFormat):
        parse_file(write(tmp_path, "x.txt", "a"))


def test_file_name_comes_from_last_path_segment():
    assert file_name_from_path("/data/in/people.json") == "people.json"
    assert file_name_from_path("") == "unknown"
    assert file_name_from_path("/") == "unknown"
    assert table_from_json_text('[{"a": 1}]').file_name == "unknown"


@pytest.mark.parametrize("separator", ["\u2028", "\u2029", "\x85"])
def test_jsonl_only_breaks_records_on_newline(separator):
    text = json.dumps({"a": f"x{separator}y"}, ensure_ascii=False) + "\n" + '{"a": "z"}\n'
    table = table_from_jsonl_text(text)
    assert table.rows == [[f"x{separator}y"], ["z"]]


def test_jsonl_crlf_line_endings():
    table = table_from_jsonl_text('{"a": 1}\r\n{"a": 2}\r\n')
    assert table.rows == [["1"], ["2"]]


def test_jsonl_line_numbers_ignore_unicode_separators():
    text = json.dumps({"a": "x\u2028y"}, ensure_ascii=False) + '\n{"a": \n'
    with pytest.raises(ParseFailure, match="Failed to parse line 2"):
        table_from_jsonl_text(text)


def test_deeply_nested_json_is_a_parse_failure():
    text = '{"a":' * 100000 + '1' + '}' * 100000
    with pytest.raises(ParseFailure):
        table_from_json_text(text)


def test_deeply_nested_jsonl_line_is_a_parse_failure():
    text = '{"a":' * 100000 + '1' + '}' * 100000 + "\n"
    with pytest.raises(ParseFailure, match="line 1"):
        table_from_jsonl_text(text)
