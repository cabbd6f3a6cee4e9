from .errors import GatewayError, InvalidMessageError, ProviderCallError
from .models import (
	FailureKind,
	GenerationFailure,
	GenerationOutcome,
	GenerationSuccess,
	Message,
	ProviderRole,
	Role,
	normalize_messages,
)

__all__ = [
	"GatewayError",
	"InvalidMessageError",
	"ProviderCallError",
	"FailureKind",
	"GenerationFailure",
	"GenerationOutcome",
	"GenerationSuccess",
	"Message",
	"ProviderRole",
	"Role",
	"normalize_messages",
]
