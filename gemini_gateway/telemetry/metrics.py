from prometheus_client import Counter, Histogram

gemini_requests_total = Counter("gemini_requests_total", "generateContent calls", ["model", "outcome"])  # outcome=ok|error
gemini_request_latency_ms = Histogram("gemini_request_latency_ms", "generateContent latency (ms)", ["model"])
gemini_failures_total = Counter("gemini_failures_total", "generateContent failures", ["kind"])
