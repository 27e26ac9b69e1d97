"""Line-oriented stream session driving a HyperLogLog.

Each input line names a string length. For every valid length the
session adds batch_size random strings of that length to the
estimator and, every report_every insertions, writes the exact
distinct count next to the estimate so the two can be compared by
eye. After each batch the register array is dumped.

Malformed lines are logged and skipped. The session ends on end of
input, on an explicit `quit`/`exit` line, or (with once=True) right
after the first valid line.
"""
from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from hll_lite.driver.generator import StringGenerator
from hll_lite.driver.report import format_register_dump, format_report_line
from hll_lite.estimator.hyperloglog import HyperLogLog

log = logging.getLogger(__name__)

QUIT_COMMANDS = frozenset({"quit", "exit"})


@dataclass(slots=True)
class SessionConfig:
    """Knobs for one stream session."""
    precision: int = 10
    batch_size: int = 100_000
    report_every: int = 100
    seed: int | None = None
    once: bool = False
    dump_registers: bool = True


@dataclass(slots=True)
class SessionResult:
    """What a finished session saw."""
    batches: int
    elements_added: int
    exact_count: int | None
    final_estimate: float | None
    ignored_lines: int


def parse_length(line: str) -> int | None:
    """Parse a requested string length. Returns None for malformed input."""
    try:
        value = int(line.strip())
    except ValueError:
        return None
    if value < 0:
        return None
    return value


class StreamSession:
    """Feed random string batches into one estimator, line by line.

    Args:
        config: session settings (default SessionConfig())
        out: where report lines go (default sys.stdout)
    """

    def __init__(
        self,
        config: SessionConfig | None = None,
        out: TextIO | None = None,
    ) -> None:
        self._config = config or SessionConfig()
        if self._config.report_every <= 0:
            raise ValueError(
                f"report_every must be > 0, got {self._config.report_every}"
            )
        if self._config.batch_size <= 0:
            raise ValueError(
                f"batch_size must be > 0, got {self._config.batch_size}"
            )
        self._out = out or sys.stdout
        self._hll = HyperLogLog(self._config.precision, track_exact=True)
        self._generator = StringGenerator(self._config.seed)
        self._batches = 0
        self._ignored = 0
        self._done = False

    @property
    def estimator(self) -> HyperLogLog:
        return self._hll

    @property
    def done(self) -> bool:
        return self._done

    def feed_line(self, line: str) -> bool:
        """Process one input line. Returns False once the session is over."""
        if self._done:
            return False
        text = line.strip()
        if text.lower() in QUIT_COMMANDS:
            log.debug("Quit requested")
            self._done = True
            return False

        length = parse_length(text)
        if length is None:
            self._ignored += 1
            log.debug("Ignoring malformed length %r", text)
            return True

        self._run_batch(length)
        if self._config.once:
            self._done = True
            return False
        return True

    def _run_batch(self, length: int) -> None:
        cfg = self._config
        log.debug("Batch %d: %d strings of length %d", self._batches, cfg.batch_size, length)
        strings = self._generator.generate(length, cfg.batch_size)
        for i, s in enumerate(strings):
            self._hll.add(s)
            if i % cfg.report_every == 0:
                self._report()
        self._batches += 1
        if cfg.dump_registers:
            self._out.write(format_register_dump(self._hll) + "\n")

    def _report(self) -> None:
        estimate = self._hll.estimate()
        self._out.write(format_report_line(self._hll.exact_count, estimate) + "\n")

    def run(self, lines: Iterable[str]) -> SessionResult:
        """Feed lines until end of input or until the session ends."""
        for line in lines:
            if not self.feed_line(line):
                break
        return self.result()

    def result(self) -> SessionResult:
        final = self._hll.estimate() if self._batches else None
        return SessionResult(
            batches=self._batches,
            elements_added=self._hll.elements_added,
            exact_count=self._hll.exact_count,
            final_estimate=final,
            ignored_lines=self._ignored,
        )
