from .decorators import record_call
from .logger import OTELContextFilter, setup_json_logger

__all__ = ["record_call", "OTELContextFilter", "setup_json_logger"]
