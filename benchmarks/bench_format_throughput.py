"""Benchmark: Format validation throughput and latency.

Measures FormatValidator.validate_format() over a mix of valid, invalid
and unsupported numbers from every registered country.
"""
from __future__ import annotations

import sys
import time
import tracemalloc
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from vat_validator.validation.format_validator import FormatValidator

_WARMUP: int = 100
_ITERATIONS: int = 5_000

_SAMPLES: list[str] = [
    "DE123456789",
    "de12345678",
    "ATU12345678",
    "ESA1234567B",
    "NL123456789B01",
    "IE1234567AB",
    "FRAB123456789",
    "DK12 34 56 78",
    "CHCHE123456789MWST",
    "NOORGNR123456789MVA",
    "XX123456789",
    "",
]


def bench_format_validation() -> dict[str, object]:
    """Benchmark FormatValidator.validate_format() per-call latency.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p99_latency_ms, memory_peak_mb.
    """
    validator = FormatValidator()

    for _ in range(_WARMUP):
        for sample in _SAMPLES:
            validator.validate_format(sample)

    latencies_ms: list[float] = []
    for i in range(_ITERATIONS):
        sample = _SAMPLES[i % len(_SAMPLES)]
        t0 = time.perf_counter()
        validator.validate_format(sample)
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    # Measured in a separate pass so tracing does not skew the latencies.
    tracemalloc.start()
    for sample in _SAMPLES:
        validator.validate_format(sample)
    _, peak_bytes = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = max(sum(latencies_ms) / 1000, 1e-9)

    result: dict[str, object] = {
        "operation": "format_validation",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p99_latency_ms": round(sorted_lats[min(int(n * 0.99), n - 1)], 4),
        "memory_peak_mb": round(peak_bytes / (1024 * 1024), 6),
    }
    print(
        f"[bench_format_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"p99={result['p99_latency_ms']:.4f}ms"
    )
    return result


def run_benchmark() -> dict[str, object]:
    """Entry point returning the benchmark result dict."""
    return bench_format_validation()


if __name__ == "__main__":
    run_benchmark()
