from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import InvalidMessageError


class Role(str, Enum):
	USER = "user"
	ASSISTANT = "assistant"


class ProviderRole(str, Enum):
	USER = "user"
	MODEL = "model"


class FailureKind(str, Enum):
	INVALID_MESSAGE = "invalid_message"
	TRANSPORT = "transport"
	HTTP_STATUS = "http_status"
	MALFORMED_RESPONSE = "malformed_response"


class Message(BaseModel):
	model_config = ConfigDict(frozen=True, extra="ignore")

	role: Role
	content: str


@dataclass(frozen=True)
class GenerationSuccess:
	text: str
	model: str = ""
	latency_ms: Optional[int] = None

	@property
	def ok(self) -> bool:
		return True


@dataclass(frozen=True)
class GenerationFailure:
	kind: FailureKind
	detail: str
	status_code: Optional[int] = None

	@property
	def ok(self) -> bool:
		return False


GenerationOutcome = Union[GenerationSuccess, GenerationFailure]


def normalize_messages(messages: Sequence[Union[Message, Mapping[str, Any]]]) -> List[Message]:
	normalized: List[Message] = []
	for index, item in enumerate(messages):
		if isinstance(item, Message):
			normalized.append(item)
			continue
		if not isinstance(item, Mapping):
			raise InvalidMessageError(f"message {index}: expected a mapping, got {type(item).__name__}")
		try:
			normalized.append(Message.model_validate(item))
		except ValidationError as exc:
			fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
			raise InvalidMessageError(f"message {index}: invalid {fields}") from exc
	return normalized
