import json
from typing import Callable, List

import httpx
import pytest

from gemini_gateway.config import GatewayConfig, HTTPTimeoutConfig
from gemini_gateway.providers.gemini_provider import GeminiProvider


def candidate_body(text: str) -> dict:
	return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}, "finishReason": "STOP"}]}


@pytest.fixture
def gateway_config() -> GatewayConfig:
	return GatewayConfig(
		base_url="https://gemini.test",
		api_version="v1",
		log_level="INFO",
		http_timeout=HTTPTimeoutConfig(connect=5.0, read=5.0, write=5.0, total=5.0),
	)


@pytest.fixture
def captured() -> List[httpx.Request]:
	return []


@pytest.fixture
def make_provider(gateway_config, captured) -> Callable[[Callable[[httpx.Request], httpx.Response]], GeminiProvider]:
	def _make(handler: Callable[[httpx.Request], httpx.Response]) -> GeminiProvider:
		def _recording(request: httpx.Request) -> httpx.Response:
			captured.append(request)
			return handler(request)
		return GeminiProvider(config=gateway_config, transport=httpx.MockTransport(_recording))
	return _make


@pytest.fixture
def reply_with() -> Callable[[str], Callable[[httpx.Request], httpx.Response]]:
	def _reply(text: str) -> Callable[[httpx.Request], httpx.Response]:
		return lambda request: httpx.Response(200, json=candidate_body(text))
	return _reply


def request_body(request: httpx.Request) -> dict:
	return json.loads(request.content)
