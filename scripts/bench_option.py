"""Benchmarks for Option and Result chains against plain `None` / `try` Python code."""

import statistics
import timeit
from collections.abc import Callable
from enum import IntEnum, StrEnum, auto
from functools import wraps
from typing import Final, NamedTuple

import typer
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)
from rich.table import Table
from rich.text import Text

import pyovariant as pv

app = typer.Typer(help="Option/Result benchmarks: pyovariant vs plain Python")


class Runs(IntEnum):
    """Cost category for benchmarks, determining iteration counts."""

    CHEAP = 5_000
    NORMAL = 2_500
    EXPENSIVE = 500


class Implementation(StrEnum):
    """Implementation type for benchmarks."""

    WRAPPED = auto()
    PLAIN = auto()


class BenchmarkResult(NamedTuple):
    """Result of a single benchmark comparison."""

    category: str
    name: str
    wrapped_median: float
    plain_median: float
    overhead: float


class BenchmarkMetadata(NamedTuple):
    """Metadata for a benchmark function."""

    category: str
    name: str
    cost: Runs
    implementation: Implementation


TEST_VALUE: Final[int] = 42
CHAIN_THRESHOLD: Final[int] = 5
NULLABLE_DATA: Final = [x if x % 3 != 0 else None for x in range(100)]
NUMERIC_STRINGS: Final = [str(x) if x % 4 != 0 else "n/a" for x in range(100)]
type BenchFn = Callable[[], object]

CONSOLE: Final = Console()
RESULTS: list[BenchmarkResult] = []
BENCHMARK_REGISTRY: dict[BenchFn, BenchmarkMetadata] = {}


def bench(
    category: str,
    name: str,
    implementation: Implementation,
    cost: Runs = Runs.CHEAP,
) -> Callable[[BenchFn], BenchFn]:
    """Decorator to register a benchmark function with its metadata.

    Args:
        category (str): The category of the benchmark (e.g., "Instantiation").
        name (str): The name of the benchmark (e.g., "Some(value)").
        implementation (Implementation): Whether the function uses pyovariant or plain Python.
        cost (Runs): The cost category, defaults to CHEAP.

    Returns:
        Callable: The decorated function.
    """

    def decorator(func: BenchFn) -> BenchFn:
        BENCHMARK_REGISTRY[func] = BenchmarkMetadata(
            category=category, name=name, cost=cost, implementation=implementation
        )

        @wraps(func)
        def wrapper() -> object:
            return func()

        return wrapper

    return decorator


# =============================================================================
# BENCHMARKS
# =============================================================================


@bench("Instantiation", "Some(value)", Implementation.WRAPPED)
def _wrapped_some() -> object:
    return pv.Some(TEST_VALUE)


@bench("Instantiation", "Some(value)", Implementation.PLAIN)
def _plain_some() -> object:
    return TEST_VALUE


@bench("Chaining", "and_then/map/unwrap_or", Implementation.WRAPPED)
def _wrapped_chain() -> object:
    return (
        pv.Some(TEST_VALUE)
        .and_then(lambda x: pv.Some(x * 2) if x > CHAIN_THRESHOLD else pv.Nothing())
        .map(lambda x: x + 1)
        .unwrap_or(0)
    )


@bench("Chaining", "and_then/map/unwrap_or", Implementation.PLAIN)
def _plain_chain() -> object:
    value: int | None = TEST_VALUE
    value = value * 2 if value is not None and value > CHAIN_THRESHOLD else None
    value = value + 1 if value is not None else None
    return value if value is not None else 0


@bench("Nullable", "from_/map over list", Implementation.WRAPPED, Runs.EXPENSIVE)
def _wrapped_nullable() -> object:
    return [pv.Option.from_(x).map(lambda v: v * 2).unwrap_or(0) for x in NULLABLE_DATA]


@bench("Nullable", "from_/map over list", Implementation.PLAIN, Runs.EXPENSIVE)
def _plain_nullable() -> object:
    return [x * 2 if x is not None else 0 for x in NULLABLE_DATA]


@bench("Fallible", "into_result(int)", Implementation.WRAPPED, Runs.EXPENSIVE)
def _wrapped_parse() -> object:
    return [pv.into_result(int, raw).unwrap_or(-1) for raw in NUMERIC_STRINGS]


def _parse_or_default(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        return -1


@bench("Fallible", "into_result(int)", Implementation.PLAIN, Runs.EXPENSIVE)
def _plain_parse() -> object:
    return [_parse_or_default(raw) for raw in NUMERIC_STRINGS]


def bench_one(wrapped_fn: BenchFn, plain_fn: BenchFn) -> None:
    """Run a single benchmark multiple times and store median results.

    Uses metadata from the BENCHMARK_REGISTRY to determine category, name, and iteration counts.
    """
    meta = BENCHMARK_REGISTRY[wrapped_fn]
    n_calls = meta.cost.value // 10
    repeats = meta.cost.value // 50

    wrapped_times = [
        timeit.timeit(wrapped_fn, number=n_calls) for _ in range(repeats)
    ]
    plain_times = [timeit.timeit(plain_fn, number=n_calls) for _ in range(repeats)]
    wrapped_median = statistics.median(wrapped_times)
    plain_median = statistics.median(plain_times)
    RESULTS.append(
        BenchmarkResult(
            category=meta.category,
            name=meta.name,
            wrapped_median=wrapped_median,
            plain_median=plain_median,
            overhead=wrapped_median / plain_median,
        )
    )


def _run_all_benchmarks() -> None:
    """Run all registered benchmarks by pairing wrapped and plain implementations."""
    benchmark_pairs: dict[tuple[str, str], dict[Implementation, BenchFn]] = {}
    for func, meta in BENCHMARK_REGISTRY.items():
        benchmark_pairs.setdefault((meta.category, meta.name), {})[
            meta.implementation
        ] = func

    benchmarks: list[tuple[BenchFn, BenchFn]] = []
    for (category, name), impls in benchmark_pairs.items():
        if Implementation.WRAPPED not in impls or Implementation.PLAIN not in impls:
            CONSOLE.print(
                f"[yellow]Warning: Skipping {category}/{name} - missing implementation[/yellow]"
            )
            continue
        benchmarks.append((impls[Implementation.WRAPPED], impls[Implementation.PLAIN]))

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=len(benchmarks))
        for wrapped_fn, plain_fn in benchmarks:
            meta = BENCHMARK_REGISTRY[wrapped_fn]
            progress.update(task, description=f"[cyan]{meta.category}: {meta.name}")
            bench_one(wrapped_fn, plain_fn)
            progress.advance(task)


def _display_results() -> None:
    """Display benchmark results in a formatted table."""
    table = Table(title="Option/Result Benchmark Results (pyovariant vs plain)")
    table.add_column("Category", style="cyan")
    table.add_column("Operation", style="white")
    table.add_column("pyovariant (s, median)", justify="right", style="green")
    table.add_column("plain (s, median)", justify="right", style="yellow")
    table.add_column("Overhead", justify="right")

    for result in RESULTS:
        overhead_style = "green bold" if result.overhead < 2 else "red bold"
        table.add_row(
            result.category,
            result.name,
            f"{result.wrapped_median:.4f}",
            f"{result.plain_median:.4f}",
            Text(f"{result.overhead:.2f}x", style=overhead_style),
        )

    CONSOLE.print(table)
    CONSOLE.print()
    median_overhead = statistics.median([r.overhead for r in RESULTS])
    CONSOLE.print(
        Text("Median overhead: ", style="bold")
        + Text(f"{median_overhead:.2f}x", style="green bold")
    )


@app.command()
def all_benchmarks() -> None:
    """Run all benchmarks (default)."""
    CONSOLE.print(Text("Running Option/Result benchmarks...", style="bold blue"))
    CONSOLE.print()
    _run_all_benchmarks()
    _display_results()


@app.command()
def category(name: str) -> None:
    """Run the benchmarks of a single category."""
    for func, meta in list(BENCHMARK_REGISTRY.items()):
        if meta.category != name:
            del BENCHMARK_REGISTRY[func]
    _run_all_benchmarks()
    _display_results()


if __name__ == "__main__":
    app()
