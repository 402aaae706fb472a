# tests/test_line_parser.py

from __future__ import annotations

from famtext.loader import LineRecord, iter_lines, parse_line, parse_text, split_names


def test_parse_line_name_only() -> None:
    record = parse_line("NAME: Alice", lineno=3)
    assert record == LineRecord(lineno=3, name="Alice", raw="NAME: Alice")
    assert record.parents == ()
    assert record.children == ()


def test_parse_line_all_fields_case_insensitive() -> None:
    record = parse_line("name: Alice; Parents: Bob, Carol; spouses: Dan; SIBLINGS: Eve; children: Fay, Gus")
    assert record is not None
    assert record.name == "Alice"
    assert record.parents == ("Bob", "Carol")
    assert record.spouses == ("Dan",)
    assert record.siblings == ("Eve",)
    assert record.children == ("Fay", "Gus")


def test_parse_line_drops_empty_tokens_and_trims() -> None:
    record = parse_line("NAME:  Alice Smith ;PARENTS: Bob , , Carol ,")
    assert record.name == "Alice Smith"
    assert record.parents == ("Bob", "Carol")


def test_parse_line_without_name_yields_nothing() -> None:
    assert parse_line("PARENTS: Bob; CHILDREN: Carol") is None
    assert parse_line("just some prose about the family") is None


def test_parse_line_with_empty_name_yields_nothing() -> None:
    assert parse_line("NAME: ; PARENTS: Bob") is None
    assert parse_line("NAME:") is None


def test_parse_line_repeated_label_last_wins() -> None:
    record = parse_line("NAME: Alice; PARENTS: X; PARENTS: Y")
    assert record.parents == ("Y",)


def test_parse_line_ignores_label_inside_word() -> None:
    assert parse_line("SURNAME: Smith") is None


def test_split_names() -> None:
    assert split_names(" a, b ,,c ") == ["a", "b", "c"]
    assert split_names("") == []


def test_iter_lines_handles_mixed_line_breaks() -> None:
    text = "a\r\n\r\n  b  \rc\n"
    assert list(iter_lines(text)) == [(1, "a"), (3, "b"), (4, "c")]


def test_parse_text_skips_unlabeled_lines() -> None:
    text = "NAME: Bob\nnot a record\nNAME: Alice; PARENTS: Bob\n"
    records = list(parse_text(text))
    assert [r.name for r in records] == ["Bob", "Alice"]
    assert [r.lineno for r in records] == [1, 3]
