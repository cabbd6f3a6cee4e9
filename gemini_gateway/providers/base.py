from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from gemini_gateway.contracts import ProviderMessage
from gemini_gateway.domain.models import GenerationSuccess


class BaseProvider(ABC):
	@property
	@abstractmethod
	def name(self) -> str:
		raise NotImplementedError

	@abstractmethod
	def generate(self, contents: Sequence[ProviderMessage], model_name: str, token: str, proxy: Optional[str]) -> GenerationSuccess:
		raise NotImplementedError

	@abstractmethod
	async def agenerate(self, contents: Sequence[ProviderMessage], model_name: str, token: str, proxy: Optional[str]) -> GenerationSuccess:
		raise NotImplementedError
