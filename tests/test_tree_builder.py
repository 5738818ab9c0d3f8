# tests/test_tree_builder.py

from __future__ import annotations

from typing import List

from gedcom_lossless.loader import RecordNode, build_forest, tokenize_line


def _nodes(*lines: str) -> List[RecordNode]:
    return [tokenize_line(line, lineno=i) for i, line in enumerate(lines, start=1)]


def test_build_forest_nests_by_level() -> None:
    roots = build_forest(
        _nodes(
            "0 HEAD",
            "1 GEDC",
            "2 VERS 5.5.1",
            "0 @I1@ INDI",
            "1 NAME John /Doe/",
            "1 BIRT",
            "2 DATE 1900",
            "0 TRLR",
        )
    )

    assert [r.tag for r in roots] == ["HEAD", "INDI", "TRLR"]
    indi = roots[1]
    assert [c.tag for c in indi.children] == ["NAME", "BIRT"]
    assert indi.children[1].children[0].value == "1900"


def test_build_forest_tolerates_level_jumps() -> None:
    roots = build_forest(_nodes("0 @I1@ INDI", "3 _DEEP x", "1 SEX M"))

    indi = roots[0]
    assert [c.tag for c in indi.children] == ["_DEEP", "SEX"]


def test_child_level_always_exceeds_parent_level() -> None:
    roots = build_forest(
        _nodes(
            "0 @F1@ FAM",
            "1 MARR",
            "3 PLAC Somewhere",
            "2 DATE 1900",
            "1 CHIL @I3@",
            "0 @I1@ INDI",
        )
    )

    for root in roots:
        for node in root.iter_subtree():
            for child in node.children:
                assert child.level > node.level


def test_build_forest_orphan_deeper_line_becomes_root() -> None:
    roots = build_forest(_nodes("1 NOTE orphan", "0 HEAD"))
    assert [r.tag for r in roots] == ["NOTE", "HEAD"]


def test_build_forest_empty() -> None:
    assert build_forest([]) == []


def test_record_node_child_queries():
    roots = build_forest(
        _nodes("0 @I1@ INDI", "1 NAME A /B/", "1 SEX M", "1 NAME C /D/")
    )

    indi = roots[0]
    assert [n.value for n in indi.find_children("NAME")] == ["A /B/", "C /D/"]
    assert indi.find_children("BIRT") == []
    assert indi.find_first("SEX").value == "M"
    assert indi.find_first("DEAT") is None
