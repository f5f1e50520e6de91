"""Benchmark: prattle parse and format throughput.

Measures how many expressions can be parsed, and how many trees can be
rendered back to infix text, per second using the public prattle API.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import prattle

_ITERATIONS: int = 5_000
_FORMAT_ITERATIONS: int = 5_000

_SAMPLE_EXPRESSION = (
    "total = subtotal * (1 + rate) - discount / (2 - -quantity) "
    "+ 3.75 * (a - (b + (c * (d / e))))"
)


def _result(operation: str, iterations: int, total: float) -> dict[str, object]:
    result: dict[str, object] = {
        "operation": operation,
        "iterations": iterations,
        "total_seconds": round(total, 4),
        "ops_per_second": round(iterations / total, 1),
        "avg_latency_ms": round(total / iterations * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_parse_throughput(iterations: int = _ITERATIONS) -> dict[str, object]:
    """Benchmark tokenize-and-parse throughput.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    start = time.perf_counter()
    for _ in range(iterations):
        prattle.parse(_SAMPLE_EXPRESSION)
    total = time.perf_counter() - start
    return _result("prattle_parse_throughput", iterations, total)


def bench_format_throughput(iterations: int = _FORMAT_ITERATIONS) -> dict[str, object]:
    """Benchmark rendering a parsed tree back to canonical infix text.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    tree = prattle.parse(_SAMPLE_EXPRESSION)

    start = time.perf_counter()
    for _ in range(iterations):
        prattle.format(tree)
    total = time.perf_counter() - start
    return _result("prattle_format_throughput", iterations, total)


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_parse_throughput, "parse_throughput_baseline.json"),
        (bench_format_throughput, "format_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
