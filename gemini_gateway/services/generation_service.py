from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from gemini_gateway.domain.errors import InvalidMessageError, ProviderCallError
from gemini_gateway.domain.models import FailureKind, GenerationFailure, GenerationOutcome, GenerationSuccess, Message
from gemini_gateway.providers.base import BaseProvider
from gemini_gateway.providers.gemini_provider import GeminiProvider
from gemini_gateway.services.message_mapper import to_provider_messages
from gemini_gateway.telemetry.decorators import record_call

MessagesIn = Sequence[Union[Message, Mapping[str, Any]]]

logger = logging.getLogger(__name__)


class GenerationService:
	def __init__(self, provider: BaseProvider) -> None:
		self._provider = provider

	def get_response(
		self,
		messages: MessagesIn,
		model_name: str,
		token: str,
		proxy: Optional[str],
		system_message: Optional[str] = None,
	) -> GenerationOutcome:
		try:
			contents = to_provider_messages(messages, system_message)
		except InvalidMessageError as exc:
			return self._fail(model_name, FailureKind.INVALID_MESSAGE, str(exc))
		try:
			result = self._provider.generate(contents, model_name, token, proxy)
		except ProviderCallError as exc:
			return self._fail(model_name, FailureKind(exc.kind), str(exc), exc.status_code)
		return self._ok(model_name, result)

	async def aget_response(
		self,
		messages: MessagesIn,
		model_name: str,
		token: str,
		proxy: Optional[str],
		system_message: Optional[str] = None,
	) -> GenerationOutcome:
		try:
			contents = to_provider_messages(messages, system_message)
		except InvalidMessageError as exc:
			return self._fail(model_name, FailureKind.INVALID_MESSAGE, str(exc))
		try:
			result = await self._provider.agenerate(contents, model_name, token, proxy)
		except ProviderCallError as exc:
			return self._fail(model_name, FailureKind(exc.kind), str(exc), exc.status_code)
		return self._ok(model_name, result)

	def _ok(self, model_name: str, result: GenerationSuccess) -> GenerationSuccess:
		record_call(model_name, result.latency_ms)
		logger.info("gemini_request_ok", extra={"provider": self._provider.name, "model": model_name, "latency_ms": result.latency_ms})
		return result

	def _fail(self, model_name: str, kind: FailureKind, detail: str, status_code: Optional[int] = None) -> GenerationFailure:
		return record_failure(self._provider.name, model_name, kind, detail, status_code)


def record_failure(
	provider_name: str,
	model_name: str,
	kind: FailureKind,
	detail: str,
	status_code: Optional[int] = None,
) -> GenerationFailure:
	record_call(model_name, None, failure_kind=kind.value)
	logger.error(
		"gemini_request_failed",
		extra={
			"provider": provider_name,
			"model": model_name,
			"kind": kind.value,
			"status_code": status_code,
			"detail": detail,
		},
	)
	return GenerationFailure(kind=kind, detail=detail, status_code=status_code)


def get_response(
	messages: MessagesIn,
	model_name: str,
	token: str,
	proxy: Optional[str],
	system_message: Optional[str] = None,
	provider: Optional[BaseProvider] = None,
) -> GenerationOutcome:
	service = GenerationService(provider or GeminiProvider())
	return service.get_response(messages, model_name, token, proxy, system_message)


async def aget_response(
	messages: MessagesIn,
	model_name: str,
	token: str,
	proxy: Optional[str],
	system_message: Optional[str] = None,
	provider: Optional[BaseProvider] = None,
) -> GenerationOutcome:
	service = GenerationService(provider or GeminiProvider())
	return await service.aget_response(messages, model_name, token, proxy, system_message)
