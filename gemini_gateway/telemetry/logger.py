import logging
import sys
from typing import Optional

from opentelemetry.trace import get_current_span
from pythonjsonlogger import jsonlogger

from gemini_gateway.config import get_config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"


class OTELContextFilter(logging.Filter):
	"""Stamps records emitted inside a recording span with its trace and span ids."""

	def filter(self, record: logging.LogRecord) -> bool:
		ctx = get_current_span().get_span_context()
		if ctx.is_valid:
			record.trace_id = format(ctx.trace_id, "032x")
			record.span_id = format(ctx.span_id, "016x")
		return True


def setup_json_logger(level: Optional[str] = None) -> None:
	handler = logging.StreamHandler(sys.stdout)
	handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT))
	handler.addFilter(OTELContextFilter())
	root = logging.getLogger()
	root.setLevel((level or get_config().log_level).upper())
	root.handlers = [handler]
