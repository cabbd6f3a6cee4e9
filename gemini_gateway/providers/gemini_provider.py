from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional, Sequence, Union

import httpx
from opentelemetry import trace
from pydantic import ValidationError

from gemini_gateway.config import GatewayConfig, get_config
from gemini_gateway.contracts import GenerateContentRequest, GenerateContentResponse, ProviderMessage
from gemini_gateway.domain.errors import ProviderCallError
from gemini_gateway.domain.models import FailureKind, GenerationSuccess
from gemini_gateway.providers.base import BaseProvider

GENERATE_CONTENT_PATH = "/{version}/models/{model}:generateContent"

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

Transport = Union[httpx.BaseTransport, httpx.AsyncBaseTransport]


class GeminiProvider(BaseProvider):
	"""Single-shot client for the Generative Language ``generateContent`` endpoint.

	A fresh ``httpx`` client is opened per call so that the proxy and the
	connection pool never outlive the request. Every failure is raised as
	``ProviderCallError`` with a ``kind`` the service layer turns into a
	``GenerationFailure``.
	"""

	def __init__(self, config: Optional[GatewayConfig] = None, transport: Optional[Transport] = None) -> None:
		self._config = config or get_config()
		self._transport = transport

	@property
	def name(self) -> str:
		return "gemini"

	def build_url(self, model_name: str) -> str:
		path = GENERATE_CONTENT_PATH.format(version=self._config.api_version, model=model_name)
		return f"{self._config.base_url}{path}"

	def generate(self, contents: Sequence[ProviderMessage], model_name: str, token: str, proxy: Optional[str]) -> GenerationSuccess:
		payload = GenerateContentRequest(contents=list(contents)).to_payload()
		url = self.build_url(model_name)
		start = time.perf_counter()
		with tracer.start_as_current_span("gemini.generate_content") as span:
			span.set_attribute("gemini.model", model_name)
			span.set_attribute("gemini.contents", len(payload["contents"]))
			logger.debug("gemini_request", extra={"url": url, "model": model_name, "via_proxy": bool(proxy)})
			try:
				with httpx.Client(**self._client_options(proxy)) as client:
					response = client.post(url, params={"key": token}, json=payload)
			except (httpx.HTTPError, httpx.InvalidURL) as exc:
				raise ProviderCallError(f"gemini transport error: {exc}", kind=FailureKind.TRANSPORT) from exc
			return self._to_result(response, model_name, start)

	async def agenerate(self, contents: Sequence[ProviderMessage], model_name: str, token: str, proxy: Optional[str]) -> GenerationSuccess:
		payload = GenerateContentRequest(contents=list(contents)).to_payload()
		url = self.build_url(model_name)
		start = time.perf_counter()
		with tracer.start_as_current_span("gemini.generate_content") as span:
			span.set_attribute("gemini.model", model_name)
			span.set_attribute("gemini.contents", len(payload["contents"]))
			logger.debug("gemini_request", extra={"url": url, "model": model_name, "via_proxy": bool(proxy)})
			try:
				async with httpx.AsyncClient(**self._client_options(proxy)) as client:
					response = await client.post(url, params={"key": token}, json=payload)
			except (httpx.HTTPError, httpx.InvalidURL) as exc:
				raise ProviderCallError(f"gemini transport error: {exc}", kind=FailureKind.TRANSPORT) from exc
			return self._to_result(response, model_name, start)

	def _client_options(self, proxy: Optional[str]) -> Dict[str, Any]:
		options: Dict[str, Any] = {
			"timeout": self._config.http_timeout.to_httpx_timeout(),
			"headers": {"Content-Type": "application/json"},
		}
		if self._transport is not None:
			options["transport"] = self._transport
		elif proxy:
			try:
				options["proxy"] = httpx.Proxy(proxy)
			except (ValueError, httpx.InvalidURL) as exc:
				raise ProviderCallError(f"gemini proxy error: {exc}", kind=FailureKind.TRANSPORT) from exc
		return options

	def _to_result(self, response: httpx.Response, model_name: str, start: float) -> GenerationSuccess:
		if not response.is_success:
			raise ProviderCallError(
				f"gemini http {response.status_code}: {_error_message(response)}",
				kind=FailureKind.HTTP_STATUS,
				status_code=response.status_code,
			)
		try:
			data = response.json()
		except ValueError as exc:
			raise ProviderCallError("gemini response is not JSON", kind=FailureKind.MALFORMED_RESPONSE) from exc
		try:
			parsed = GenerateContentResponse.model_validate(data)
		except ValidationError as exc:
			raise ProviderCallError(f"gemini response malformed: {_first_error(exc)}", kind=FailureKind.MALFORMED_RESPONSE) from exc

		return GenerationSuccess(
			text=parsed.first_text(),
			model=parsed.model_version or model_name,
			latency_ms=int((time.perf_counter() - start) * 1000),
		)


def _error_message(response: httpx.Response) -> str:
	try:
		body = response.json()
	except ValueError:
		return response.reason_phrase or "error"
	error = body.get("error") if isinstance(body, dict) else None
	if isinstance(error, dict) and error.get("message"):
		return str(error["message"])
	return response.reason_phrase or "error"


def _first_error(exc: ValidationError) -> str:
	err = exc.errors()[0]
	loc = ".".join(str(p) for p in err["loc"]) or "body"
	return f"{loc}: {err['msg']}"
