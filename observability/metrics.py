"""Request counting and latency tracking for API calls."""

from __future__ import annotations

from collections import Counter

from schemas.observability import RequestRecord


class RequestMetrics:
    """Collects request records over the lifetime of a client."""

    def __init__(self) -> None:
        self.records: list[RequestRecord] = []

    def record(self, rec: RequestRecord) -> None:
        self.records.append(rec)

    @property
    def total_requests(self) -> int:
        return len(self.records)

    @property
    def failed_requests(self) -> int:
        return sum(1 for r in self.records if not r.success)

    @property
    def avg_latency_ms(self) -> float:
        if not self.records:
            return 0.0
        return round(sum(r.latency_ms for r in self.records) / len(self.records), 2)

    @property
    def status_counts(self) -> dict[int, int]:
        # Transport failures carry no status and are left out.
        return dict(Counter(r.status_code for r in self.records if r.status_code is not None))

    def summary(self) -> dict:
        return {
            "total_requests": self.total_requests,
            "failed_requests": self.failed_requests,
            "avg_latency_ms": self.avg_latency_ms,
            "status_counts": self.status_counts,
        }
