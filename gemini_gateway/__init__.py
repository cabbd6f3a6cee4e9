from gemini_gateway.domain import (
	FailureKind,
	GenerationFailure,
	GenerationOutcome,
	GenerationSuccess,
	InvalidMessageError,
	Message,
	Role,
)
from gemini_gateway.services.generation_service import aget_response, get_response
from gemini_gateway.services.intent_service import aget_user_intent, build_intent_prompt, get_user_intent
from gemini_gateway.services.message_mapper import to_provider_messages

__all__ = [
	"FailureKind",
	"GenerationFailure",
	"GenerationOutcome",
	"GenerationSuccess",
	"InvalidMessageError",
	"Message",
	"Role",
	"aget_response",
	"get_response",
	"aget_user_intent",
	"build_intent_prompt",
	"get_user_intent",
	"to_provider_messages",
]
