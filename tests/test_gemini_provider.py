import httpx
import pytest

from conftest import candidate_body, request_body
from gemini_gateway.domain import FailureKind, ProviderCallError
from gemini_gateway.providers.gemini_provider import GeminiProvider
from gemini_gateway.services.message_mapper import to_provider_messages


CONTENTS = to_provider_messages([{"role": "user", "content": "hi"}, {"role": "assistant", "content": "hello"}])


def test_generate_posts_contents_to_model_endpoint(make_provider, reply_with, captured):
	provider = make_provider(reply_with("X"))
	result = provider.generate(CONTENTS, "gemini-pro", "secret-token", None)

	assert result.text == "X"
	assert result.model == "gemini-pro"
	request = captured[0]
	assert request.method == "POST"
	assert request.url.path == "/v1/models/gemini-pro:generateContent"
	assert request.url.params["key"] == "secret-token"
	assert request.headers["content-type"] == "application/json"
	assert request_body(request) == {
		"contents": [
			{"role": "user", "parts": [{"text": "hi"}]},
			{"role": "model", "parts": [{"text": "hello"}]},
		]
	}


def test_generate_reads_only_first_candidate(make_provider):
	body = candidate_body("first")
	body["candidates"].append({"content": {"parts": [{"text": "second"}]}})
	body["candidates"][0]["content"]["parts"].append({"text": "tail"})
	provider = make_provider(lambda request: httpx.Response(200, json=body))
	assert provider.generate(CONTENTS, "gemini-pro", "t", None).text == "first"


def test_generate_reports_model_version(make_provider):
	body = candidate_body("ok")
	body["modelVersion"] = "gemini-1.5-flash-002"
	provider = make_provider(lambda request: httpx.Response(200, json=body))
	assert provider.generate(CONTENTS, "gemini-1.5-flash", "t", None).model == "gemini-1.5-flash-002"


def test_http_error_carries_status_and_message(make_provider):
	body = {"error": {"code": 403, "message": "API key not valid", "status": "PERMISSION_DENIED"}}
	provider = make_provider(lambda request: httpx.Response(403, json=body))
	with pytest.raises(ProviderCallError) as info:
		provider.generate(CONTENTS, "gemini-pro", "bad", None)
	assert info.value.kind == FailureKind.HTTP_STATUS
	assert info.value.status_code == 403
	assert "API key not valid" in str(info.value)


def test_missing_candidates_is_malformed(make_provider):
	provider = make_provider(lambda request: httpx.Response(200, json={"promptFeedback": {"blockReason": "SAFETY"}}))
	with pytest.raises(ProviderCallError) as info:
		provider.generate(CONTENTS, "gemini-pro", "t", None)
	assert info.value.kind == FailureKind.MALFORMED_RESPONSE
	assert "candidates" in str(info.value)


def test_empty_parts_is_malformed(make_provider):
	body = {"candidates": [{"content": {"parts": []}}]}
	provider = make_provider(lambda request: httpx.Response(200, json=body))
	with pytest.raises(ProviderCallError) as info:
		provider.generate(CONTENTS, "gemini-pro", "t", None)
	assert info.value.kind == FailureKind.MALFORMED_RESPONSE


def test_non_json_body_is_malformed(make_provider):
	provider = make_provider(lambda request: httpx.Response(200, text="<html>gateway</html>"))
	with pytest.raises(ProviderCallError) as info:
		provider.generate(CONTENTS, "gemini-pro", "t", None)
	assert info.value.kind == FailureKind.MALFORMED_RESPONSE


def test_connection_error_is_transport(make_provider):
	def _refuse(request):
		raise httpx.ConnectError("connection refused", request=request)

	provider = make_provider(_refuse)
	with pytest.raises(ProviderCallError) as info:
		provider.generate(CONTENTS, "gemini-pro", "t", None)
	assert info.value.kind == FailureKind.TRANSPORT
	assert isinstance(info.value.__cause__, httpx.ConnectError)


def test_proxy_is_applied_to_client(gateway_config):
	provider = GeminiProvider(config=gateway_config)
	options = provider._client_options("http://proxy.internal:3128")
	assert options["proxy"].url == httpx.URL("http://proxy.internal:3128")
	assert options["headers"] == {"Content-Type": "application/json"}
	assert options["timeout"] == httpx.Timeout(5.0)


def test_no_proxy_means_direct_connection(gateway_config):
	provider = GeminiProvider(config=gateway_config)
	assert "proxy" not in provider._client_options(None)
	assert "proxy" not in provider._client_options("")


def test_unsupported_proxy_scheme_is_transport_error(gateway_config):
	provider = GeminiProvider(config=gateway_config)
	with pytest.raises(ProviderCallError) as info:
		provider.generate(CONTENTS, "gemini-pro", "t", "ftp://proxy.internal:21")
	assert info.value.kind == FailureKind.TRANSPORT


def test_build_url_uses_configured_base(gateway_config):
	provider = GeminiProvider(config=gateway_config)
	assert provider.build_url("gemini-1.5-pro") == "https://gemini.test/v1/models/gemini-1.5-pro:generateContent"


@pytest.mark.asyncio
async def test_agenerate_matches_sync_behaviour(make_provider, reply_with, captured):
	provider = make_provider(reply_with("async-X"))
	result = await provider.agenerate(CONTENTS, "gemini-pro", "t", None)
	assert result.text == "async-X"
	assert request_body(captured[0])["contents"][1]["role"] == "model"


@pytest.mark.asyncio
async def test_agenerate_http_error(make_provider):
	provider = make_provider(lambda request: httpx.Response(503, text="unavailable"))
	with pytest.raises(ProviderCallError) as info:
		await provider.agenerate(CONTENTS, "gemini-pro", "t", None)
	assert info.value.status_code == 503
