from typing import Optional

from .metrics import gemini_failures_total, gemini_request_latency_ms, gemini_requests_total


def record_call(model: str, latency_ms: Optional[int], failure_kind: Optional[str] = None) -> None:
	outcome = "ok" if failure_kind is None else "error"
	gemini_requests_total.labels(model=model, outcome=outcome).inc()
	if latency_ms is not None:
		gemini_request_latency_ms.labels(model=model).observe(latency_ms)
	if failure_kind is not None:
		gemini_failures_total.labels(kind=failure_kind).inc()
