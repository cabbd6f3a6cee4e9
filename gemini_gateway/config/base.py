import os
from dataclasses import dataclass
from typing import Optional

from .timeout_config import HTTPTimeoutConfig

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"
DEFAULT_API_VERSION = "v1"


@dataclass(frozen=True)
class GatewayConfig:
	base_url: str
	api_version: str
	log_level: str
	http_timeout: HTTPTimeoutConfig

	@staticmethod
	def from_env() -> "GatewayConfig":
		return GatewayConfig(
			base_url=os.getenv("GEMINI_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
			api_version=os.getenv("GEMINI_API_VERSION", DEFAULT_API_VERSION).strip("/"),
			log_level=os.getenv("LOG_LEVEL", "INFO"),
			http_timeout=HTTPTimeoutConfig.from_env("GEMINI"),
		)


_config_instance: Optional[GatewayConfig] = None


def get_config() -> GatewayConfig:
	global _config_instance
	if _config_instance is None:
		_config_instance = GatewayConfig.from_env()
	return _config_instance


def reset_config() -> None:
	global _config_instance
	_config_instance = None
