from datetime import datetime, timedelta, timezone

from commitstat.core.filters import FIELD_SEP
from commitstat.core.parser import parse_line, parse_log, parse_refs

HASH = "3f2a9c1e5b7d4f6a8c0e2b4d6f8a0c2e4b6d8f0a"


def _line(*fields):
    return FIELD_SEP.join(fields)


def test_parse_full_line():
    line = _line(HASH, "Alice", "2024-03-20T12:00:00+02:00", "Fix the parser",
                 " (HEAD -> main, origin/main, tag: v1.0)", "alice@example.com")

    record = parse_line(line, "/repos/app")

    assert record.hash == HASH
    assert record.author_name == "Alice"
    assert record.author_email == "alice@example.com"
    assert record.date == datetime(2024, 3, 20, 12, 0, tzinfo=timezone(timedelta(hours=2)))
    assert record.subject == "Fix the parser"
    assert record.refs == ("HEAD → main", "origin/main", "tag: v1.0")
    assert record.repository_path == "/repos/app"


def test_short_line_uses_placeholders():
    record = parse_line(HASH, "/repos/app")

    assert record.hash == HASH
    assert record.author_name == "Unknown"
    assert record.date is None
    assert record.subject == "No message"
    assert record.refs == ()
    assert record.author_email == "N/A"


def test_partial_line_keeps_present_fields():
    record = parse_line(_line(HASH, "Bob", "yesterday-ish"), "/r")

    assert record.author_name == "Bob"
    assert record.date is None
    assert record.subject == "No message"


def test_empty_fields_use_placeholders():
    record = parse_line(_line("", "", "", "", "", ""), "/r")

    assert record.hash == "N/A"
    assert record.author_name == "Unknown"
    assert record.to_dict()["date"] == "N/A"
    assert record.to_dict()["branch"] == "N/A"


def test_subject_may_contain_pipes():
    line = _line(HASH, "Alice", "2024-01-01T00:00:00Z", "a || b ||| c", "", "a@x")
    assert parse_line(line, "/r").subject == "a || b ||| c"


def test_parse_log_skips_blank_lines_and_keeps_order():
    output = "\n".join([
        _line("c" * 40, "Carol", "2024-03-01T00:00:00Z", "third", "", "c@x"),
        "",
        "   ",
        _line("b" * 40, "Bob", "2024-02-01T00:00:00Z", "second", "", "b@x"),
        _line("a" * 40, "Alice", "2024-01-01T00:00:00Z", "first", "", "a@x"),
    ])

    records = parse_log(output, "/r")

    assert [r.subject for r in records] == ["third", "second", "first"]


def test_parse_log_empty_output():
    assert parse_log("", "/r") == []


def test_parse_refs_without_decoration():
    assert parse_refs("") == ()
    assert parse_refs(" ()") == ()
