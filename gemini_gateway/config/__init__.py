from .base import DEFAULT_API_VERSION, DEFAULT_BASE_URL, GatewayConfig, get_config, reset_config
from .timeout_config import HTTPTimeoutConfig

__all__ = [
	"DEFAULT_API_VERSION",
	"DEFAULT_BASE_URL",
	"GatewayConfig",
	"get_config",
	"reset_config",
	"HTTPTimeoutConfig",
]
