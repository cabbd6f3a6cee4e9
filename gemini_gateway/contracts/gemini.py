from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from gemini_gateway.domain.models import ProviderRole


class Part(BaseModel):
	model_config = ConfigDict(extra="ignore")

	text: str


class ProviderMessage(BaseModel):
	model_config = ConfigDict(frozen=True)

	role: ProviderRole
	parts: List[Part]


class GenerateContentRequest(BaseModel):
	contents: List[ProviderMessage]

	def to_payload(self) -> dict:
		return self.model_dump(mode="json")


class CandidateContent(BaseModel):
	model_config = ConfigDict(extra="ignore")

	parts: List[Part] = Field(min_length=1)
	role: Optional[str] = None


class Candidate(BaseModel):
	model_config = ConfigDict(extra="ignore", populate_by_name=True)

	content: CandidateContent
	finish_reason: Optional[str] = Field(default=None, alias="finishReason")


class GenerateContentResponse(BaseModel):
	"""Subset of the generateContent response; only the first candidate is read."""

	model_config = ConfigDict(extra="ignore", populate_by_name=True)

	candidates: List[Candidate] = Field(min_length=1)
	model_version: Optional[str] = Field(default=None, alias="modelVersion")

	def first_text(self) -> str:
		return self.candidates[0].content.parts[0].text
