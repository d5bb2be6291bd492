"""
Lazy construction of the Gemini SDK client.
"""

import threading
from typing import Any, Callable, Optional

from google import genai

from ..config import GeminiConfig
from ..errors import ConfigurationError
from ..utils.logger import LoggerMixin


class ClientProvider(LoggerMixin):
    """
    Builds one ``genai.Client`` on first use and hands the same instance out afterwards.

    The credential is checked before anything is constructed, so a missing key
    surfaces as a ``ConfigurationError`` instead of an invalid-key error coming
    back from the network.
    """

    def __init__(
        self,
        config: GeminiConfig,
        client_factory: Callable[..., Any] = genai.Client,
    ):
        super().__init__()
        self.config = config
        self._client_factory = client_factory
        self._client: Optional[Any] = None
        self._lock = threading.Lock()

    def get_client(self) -> Any:
        """Return the memoized client, creating it on the first call."""
        if self._client is not None:
            return self._client

        with self._lock:
            if self._client is None:
                if not self.config.api_key:
                    self.log_warning("Gemini API key is not configured")
                    raise ConfigurationError()

                self._client = self._client_factory(api_key=self.config.api_key)
                self.log_info("Gemini client configured successfully")

        return self._client

    def reset(self) -> None:
        """Forget the memoized client so the next call builds a fresh one."""
        with self._lock:
            self._client = None
