from .gemini import (
	Candidate,
	CandidateContent,
	GenerateContentRequest,
	GenerateContentResponse,
	Part,
	ProviderMessage,
)

__all__ = [
	"Candidate",
	"CandidateContent",
	"GenerateContentRequest",
	"GenerateContentResponse",
	"Part",
	"ProviderMessage",
]
