from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from gemini_gateway.contracts import Part, ProviderMessage
from gemini_gateway.domain.models import Message, ProviderRole, Role, normalize_messages

ROLE_MAP: Dict[Role, ProviderRole] = {
	Role.USER: ProviderRole.USER,
	Role.ASSISTANT: ProviderRole.MODEL,
}


def to_provider_role(role: Role) -> ProviderRole:
	return ROLE_MAP[role]


def to_provider_messages(
	messages: Sequence[Union[Message, Mapping[str, Any]]],
	system_message: Optional[str] = None,
) -> List[ProviderMessage]:
	"""Map a dialogue onto Gemini ``contents``, one entry per message.

	A system message has no dedicated slot in the ``v1`` contents schema, so it
	is sent as a leading ``user`` turn. Raises ``InvalidMessageError`` for any
	role outside ``Role``.
	"""
	dialogue = normalize_messages(messages)
	if system_message is not None:
		dialogue = [Message(role=Role.USER, content=system_message)] + dialogue
	return [
		ProviderMessage(role=to_provider_role(message.role), parts=[Part(text=message.content)])
		for message in dialogue
	]
