from __future__ import annotations

import json
from typing import Any, Optional, Sequence

from pydantic import BaseModel

from gemini_gateway.domain.models import FailureKind, GenerationFailure, GenerationOutcome, Message, Role
from gemini_gateway.providers.base import BaseProvider
from gemini_gateway.services import generation_service
from gemini_gateway.services.generation_service import MessagesIn

INTENTS_HEADER = "\nIntents:\n"
DIALOGUE_HEADER = "\nDialogue:\n"


def _json_default(value: Any) -> Any:
	if isinstance(value, BaseModel):
		return value.model_dump(mode="json")
	raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _compact_json(value: Any) -> str:
	return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_json_default)


def build_intent_prompt(messages: MessagesIn, intents: Sequence[Any], prompt: str) -> str:
	"""Embed intents and dialogue as compact JSON, exactly as the caller passed them.

	The dialogue is only quoted into the prompt text, so its roles are not checked.
	Raises ``TypeError``/``ValueError`` when a value cannot be serialised.
	"""
	return f"{prompt}{INTENTS_HEADER}{_compact_json(list(intents))}{DIALOGUE_HEADER}{_compact_json(list(messages))}"


def _build_query(messages: MessagesIn, intents: Sequence[Any], prompt: str, model_name: str, provider: Optional[BaseProvider]) -> str | GenerationFailure:
	try:
		return build_intent_prompt(messages, intents, prompt)
	except (TypeError, ValueError) as exc:
		provider_name = provider.name if provider is not None else "gemini"
		return generation_service.record_failure(provider_name, model_name, FailureKind.INVALID_MESSAGE, f"intent prompt: {exc}")


def get_user_intent(
	messages: MessagesIn,
	intents: Sequence[Any],
	prompt: str,
	model_name: str,
	token: str,
	proxy: Optional[str],
	provider: Optional[BaseProvider] = None,
) -> GenerationOutcome:
	query = _build_query(messages, intents, prompt, model_name, provider)
	if isinstance(query, GenerationFailure):
		return query
	return generation_service.get_response(
		[Message(role=Role.USER, content=query)],
		model_name,
		token,
		proxy,
		provider=provider,
	)


async def aget_user_intent(
	messages: MessagesIn,
	intents: Sequence[Any],
	prompt: str,
	model_name: str,
	token: str,
	proxy: Optional[str],
	provider: Optional[BaseProvider] = None,
) -> GenerationOutcome:
	query = _build_query(messages, intents, prompt, model_name, provider)
	if isinstance(query, GenerationFailure):
		return query
	return await generation_service.aget_response(
		[Message(role=Role.USER, content=query)],
		model_name,
		token,
		proxy,
		provider=provider,
	)
