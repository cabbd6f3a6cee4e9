from __future__ import annotations

from typing import Optional


class GatewayError(Exception):
	pass


class InvalidMessageError(GatewayError, ValueError):
	pass


class ProviderCallError(GatewayError):
	def __init__(self, message: str, kind: str = "transport", status_code: Optional[int] = None) -> None:
		super().__init__(message)
		self.kind = kind
		self.status_code = status_code
