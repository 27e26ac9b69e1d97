"""Text formatting for session output."""
from __future__ import annotations

from hll_lite.estimator.hyperloglog import HyperLogLog

REGISTER_DUMP_HEADER = "value of register (regs[j])"


def format_report_line(exact: int | None, estimate: float) -> str:
    """Format one `real,estimate` comparison line."""
    real = "?" if exact is None else str(exact)
    return f"real,estimate = {real},{estimate}"


def format_register_dump(hll: HyperLogLog) -> str:
    lines = [
        REGISTER_DUMP_HEADER,
        hll.dump_registers(),
    ]
    return "\n".join(lines)


def format_summary(
    batches: int,
    elements_added: int,
    exact_count: int | None,
    final_estimate: float | None,
) -> str:
    """Format an end-of-session summary block."""
    lines = [
        "=== Session ===",
        f"Batches:           {batches:,}",
        f"Elements added:    {elements_added:,}",
    ]
    if exact_count is not None:
        lines.append(f"Distinct (exact):  {exact_count:,}")
    if final_estimate is not None:
        lines.append(f"Distinct (est.):   {final_estimate:,.1f}")
        if exact_count:
            err = abs(final_estimate - exact_count) / exact_count * 100
            lines.append(f"Relative error:    {err:.2f}%")
    return "\n".join(lines)
