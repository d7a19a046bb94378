"""Tests for the ``bst_demo`` command line driver."""

from __future__ import annotations

import pytest

import bst_demo

EXPECTED_DEFAULT_OUTPUT = [
    "Tree 1 traversals:",
    "Pre-order: 8 5 1 6 10 9",
    "In-order: 1 5 6 8 9 10",
    "Post-order: 1 6 5 9 10 8",
    "",
    "Tree 1:",
    "depth 0: 8",
    "depth 1: 5 10",
    "depth 2: 1 6 9",
    "",
    "Tree 2:",
    "depth 0: 8",
    "depth 1: 5 10",
    "depth 2: 1 6 9",
    "",
    "Tree 3:",
    "depth 0: 8",
    "depth 1: 5 10",
    "depth 2: 1 6",
    "depth 3: 7",
    "",
    "Node with value 6 in Tree 1 found.",
    "",
    "Node with value 13 in Tree 2 not found.",
    "",
    "Are tree1 and tree2 equal? Yes",
    "Are tree1 and tree3 equal? No",
]


def test_cli_outputs_expected_demo_lines(capsys: pytest.CaptureFixture[str]) -> None:
    assert bst_demo.main([]) == 0
    assert capsys.readouterr().out.splitlines() == EXPECTED_DEFAULT_OUTPUT


def test_render_report_matches_cli_output() -> None:
    cases = list(bst_demo._iter_demo_cases())
    assert bst_demo.render_report(cases) == EXPECTED_DEFAULT_OUTPUT


def test_custom_trees_and_searches(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = bst_demo.main(
        ["--tree", "2", "1", "3", "--tree", "1", "2", "3", "--search", "3", "--search", "4"]
    )
    assert exit_code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:4] == [
        "Tree 1 traversals:",
        "Pre-order: 2 1 3",
        "In-order: 1 2 3",
        "Post-order: 1 3 2",
    ]
    assert "depth 2: 3" in lines
    assert "Node with value 3 in Tree 1 found." in lines
    assert "Node with value 4 in Tree 1 not found." in lines
    assert lines[-1] == "Are tree1 and tree2 equal? No"


def test_searches_for_missing_tree_are_skipped(
    capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
) -> None:
    assert bst_demo.main(["--tree", "5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "Node with value 6 in Tree 1 not found." in lines
    assert not any("13" in line for line in lines)
    assert "no tree #2" in caplog.text
    assert not any(line.startswith("Are ") for line in lines)


def test_rich_flag_renders_table(capsys: pytest.CaptureFixture[str]) -> None:
    assert bst_demo.main(["--rich"]) == 0
    output = capsys.readouterr().out
    assert "Tree 1 traversals" in output
    assert "8 5 1 6 10 9" in output
    assert "Pre-order: 8 5 1 6 10 9" not in output
    assert "Are tree1 and tree3 equal? No" in output


def test_expectation_mismatch_returns_error_status(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def fake_cases():  # noqa: ANN202 - simple generator stub
        yield bst_demo.DemoCase("Tree 1", (1, 2), ("depth 0: 2",))

    monkeypatch.setattr(bst_demo, "_iter_demo_cases", fake_cases)
    assert bst_demo.main([]) == 3
    assert capsys.readouterr().out == ""


def test_render_report_raises_on_mismatch() -> None:
    case = bst_demo.DemoCase("Broken", (3, 1), ("depth 0: 1",))
    with pytest.raises(bst_demo.DemoExpectationError):
        bst_demo.render_report([case])


def test_invalid_tree_values_are_rejected() -> None:
    with pytest.raises(SystemExit) as excinfo:
        bst_demo.main(["--tree", "one"])
    assert excinfo.value.code == 2
