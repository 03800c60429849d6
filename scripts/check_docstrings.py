"""Check that all code blocks in docstrings are properly closed."""

import ast
import re
from pathlib import Path
from typing import NamedTuple

import rich
import rich.table
import rich.text

import pyovariant as pv

SRC_DIR = Path().joinpath("src", "pyovariant")
CODE_BLOCK_PATTERN = re.compile(r"^```(\w*)", re.MULTILINE)
MARKER = "```"


class ErrorDetail(NamedTuple):
    """Detail of an error with its line number."""

    line_no: int
    message: str


class DocstringError(NamedTuple):
    """Error found in a docstring."""

    file_path: Path
    func_name: str
    errors: list[ErrorDetail]


def _check_file(file_path: Path) -> list[DocstringError]:
    tree = pv.into_result(ast.parse, file_path.read_text(encoding="utf-8"))
    if tree.is_err():
        rich.print(f"[yellow]Skipping {file_path}: {tree.unwrap_err()}[/yellow]")
        return []
    return [
        error
        for node in ast.walk(tree.unwrap())
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef))
        for error in _process_node(file_path, node)
    ]


def _process_node(
    file_path: Path, node: ast.FunctionDef | ast.AsyncFunctionDef | ast.ClassDef
) -> pv.Option[DocstringError]:
    return (
        pv.Option.from_(ast.get_docstring(node, clean=False))
        .map(lambda doc: _check_code_blocks(doc, node.lineno))
        .and_then(lambda result: result.err())
        .map(lambda errors: DocstringError(file_path, node.name, errors))
    )


def _check_code_blocks(docstring: str, start_line: int) -> pv.Result[None, list[ErrorDetail]]:
    """Check that every opening ``` marker has a matching closing marker."""
    errors: list[ErrorDetail] = []
    stack: list[tuple[int, str]] = []
    for line_num, line in enumerate(docstring.split("\n")):
        stripped = line.strip()
        match = CODE_BLOCK_PATTERN.search(stripped)
        if match is None:
            continue
        if stripped == MARKER:
            if stack:
                stack.pop()
            else:
                errors.append(
                    ErrorDetail(
                        start_line + line_num,
                        "Closing block ``` without matching opening",
                    )
                )
            continue
        stack.append((line_num, match.group(1) or "plaintext"))
    errors.extend(
        ErrorDetail(start_line + idx, f"Unclosed ```{lang} block") for idx, lang in stack
    )
    return pv.Err(errors) if errors else pv.Ok(None)


def main() -> None:
    """Check all docstrings in the project."""
    rich.print(
        rich.text.Text(
            "Checking docstrings for properly closed code blocks...", style="cyan bold"
        )
    )
    files = sorted(SRC_DIR.rglob("*.py"))
    rich.print(f"Checking {len(files)} py files...")
    all_errors = [error for file_path in files for error in _check_file(file_path)]

    if not all_errors:
        rich.print(rich.text.Text("[OK] No issues found!", style="green"))
        return

    table = rich.table.Table(title="Issues Found", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Function", style="magenta")
    table.add_column("Error", style="red")
    for error in all_errors:
        table.add_row(
            f"{error.file_path}:{error.errors[0].line_no}",
            error.func_name,
            "\n".join(detail.message for detail in error.errors),
        )
    rich.print(table)
    rich.print(rich.text.Text(f"\n[FAILED] Found {len(all_errors)} issue(s)", style="red"))


if __name__ == "__main__":
    main()
