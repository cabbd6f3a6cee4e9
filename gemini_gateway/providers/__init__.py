from .base import BaseProvider
from .gemini_provider import GeminiProvider

__all__ = ["BaseProvider", "GeminiProvider"]
