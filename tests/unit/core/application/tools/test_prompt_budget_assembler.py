"""Unit tests — PromptBudgetAssembler greedy packing."""

from pathlib import Path

from sdk_util_generator.core.application.tools import PromptBudgetAssembler, WorkspaceScanner
from sdk_util_generator.core.domain.workspace import ScannedFile


def _file(path: str, content: str) -> ScannedFile:
    return ScannedFile(path=path, name=path.rsplit("/", 1)[-1], content=content)


def test_formats_each_file_as_labeled_fenced_block() -> None:
    budget = PromptBudgetAssembler().assemble([_file("src/app.py", "x = 1")])

    assert budget.assembled_text == "File: src/app.py\n```\nx = 1\n```\n\n"
    assert budget.included_count == 1
    assert budget.total_files_seen == 1
    assert budget.summary == "(All 1 files included)"


def test_text_stays_strictly_below_budget() -> None:
    block = PromptBudgetAssembler.format_block(_file("a.py", "a"))
    files = [_file("a.py", "a")] * 3

    # Exactly two blocks would equal the budget, which is not allowed
    budget = PromptBudgetAssembler().assemble(files, max_context_length=2 * len(block))

    assert budget.included_count == 1
    assert len(budget.assembled_text) < 2 * len(block)


def test_stops_at_first_file_that_does_not_fit() -> None:
    files = [_file("small.py", "a"), _file("huge.py", "b" * 500), _file("tiny.py", "c")]

    budget = PromptBudgetAssembler().assemble(files, max_context_length=200)

    assert budget.included_count == 1
    assert "tiny.py" not in budget.assembled_text
    assert budget.omitted_count == 2
    assert budget.summary == "(Showing 1 of 3 files due to size limits)"


def test_first_file_too_big_yields_empty_text() -> None:
    budget = PromptBudgetAssembler().assemble([_file("huge.py", "b" * 100)], max_context_length=50)

    assert budget.assembled_text == ""
    assert budget.included_count == 0


def test_empty_input() -> None:
    budget = PromptBudgetAssembler().assemble([])

    assert budget.included_count == 0
    assert budget.total_files_seen == 0
    assert budget.assembled_text == ""


def test_constructor_budget_is_default() -> None:
    files = [_file("a.py", "a" * 40), _file("b.py", "b" * 40)]

    assert PromptBudgetAssembler(max_context_length=80).assemble(files).included_count == 1
    assert PromptBudgetAssembler(max_context_length=80).assemble(files, 1000).included_count == 2


def test_scan_then_assemble_small_workspace(tmp_path: Path) -> None:
    (tmp_path / "a.py").write_text("a" * 60, encoding="utf-8")
    (tmp_path / "b.md").write_text("b" * 70, encoding="utf-8")
    (tmp_path / "c.json").write_text("c" * 70, encoding="utf-8")

    files = WorkspaceScanner().scan(tmp_path)
    budget = PromptBudgetAssembler().assemble(files, max_context_length=50_000)

    assert len(files) == 3
    assert sum(len(f.content) for f in files) == 200
    assert budget.included_count == 3
    assert [line for line in budget.assembled_text.splitlines() if line.startswith("File: ")] == [
        f"File: {f.path}" for f in files
    ]


def test_budget_counts_characters_not_encoded_bytes() -> None:
    accented = _file("e.py", "é" * 30)
    block = PromptBudgetAssembler.format_block(accented)
    assert len(block) == 51
    assert len(block.encode("utf-8")) == 81

    budget = PromptBudgetAssembler().assemble([accented], max_context_length=60)

    assert budget.included_count == 1
    assert budget.assembled_text == block
