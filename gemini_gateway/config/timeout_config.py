import os
from dataclasses import dataclass

import httpx

DEFAULT_TIMEOUT_SECONDS = "120.0"


@dataclass(frozen=True)
class HTTPTimeoutConfig:
	connect: float
	read: float
	write: float
	total: float

	@staticmethod
	def from_env(prefix: str) -> "HTTPTimeoutConfig":
		def _seconds(phase: str) -> float:
			return float(os.getenv(f"{prefix}_HTTP_{phase}_TIMEOUT", DEFAULT_TIMEOUT_SECONDS))

		return HTTPTimeoutConfig(
			connect=_seconds("CONNECT"),
			read=_seconds("READ"),
			write=_seconds("WRITE"),
			total=_seconds("TOTAL"),
		)

	def to_httpx_timeout(self) -> httpx.Timeout:
		# total bounds the pool wait; the phases override it individually
		return httpx.Timeout(self.total, connect=self.connect, read=self.read, write=self.write)
