# faces/prof.py
from time import perf_counter
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Optional
import csv
import os


@dataclass
class Prof:
    """Wall-clock timings of named extraction stages."""
    enabled: bool = True
    events: List[Tuple[str, float]] = field(default_factory=list)
    accum: Dict[str, float] = field(default_factory=dict)
    start_times: Dict[str, float] = field(default_factory=dict)
    out_csv: Optional[str] = None  # e.g. "timings.csv"

    def start(self, name: str):
        if not self.enabled: return
        self.start_times[name] = perf_counter()

    def stop(self, name: str):
        if not self.enabled: return
        t0 = self.start_times.pop(name, None)
        if t0 is None: return
        dt = perf_counter() - t0
        self.events.append((name, dt))
        self.accum[name] = self.accum.get(name, 0.0) + dt

    @contextmanager
    def section(self, name: str):
        self.start(name)
        try:
            yield
        finally:
            self.stop(name)

    def total(self) -> float:
        return sum(self.accum.values())

    def report_lines(self) -> List[str]:
        lines = ["=== TIME REPORT ==="]
        for k, v in sorted(self.accum.items(), key=lambda kv: -kv[1]):
            lines.append(f"{k:<24s} {v:10.6f} s")
        return lines

    def report_console(self):
        if not self.enabled: return
        print("\n".join(self.report_lines()))

    def dump_csv(self, path: Optional[str] = None):
        if not self.enabled: return
        p = path or self.out_csv
        if not p: return
        os.makedirs(os.path.dirname(p) or ".", exist_ok=True)
        with open(p, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["name", "dt_sec"])
            for name, dt in self.events:
                w.writerow([name, f"{dt:.6f}"])
