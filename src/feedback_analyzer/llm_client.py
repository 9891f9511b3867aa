"""
Anthropic Messages API client for feedback analysis
"""

import requests
import logging
import time
from typing import Optional

from .exceptions import LLMClientError, UpstreamAPIError, ResponseFormatError

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.anthropic.com/v1/messages"
DEFAULT_API_VERSION = "2023-06-01"
DEFAULT_MODEL = "claude-3-5-sonnet-20241022"


class LLMClient:
    """Client for the Anthropic Messages API"""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        endpoint: str = DEFAULT_ENDPOINT,
        api_version: str = DEFAULT_API_VERSION,
        timeout: Optional[float] = None
    ):
        """
        Initialize LLM client

        Args:
            api_key: Anthropic API key, sent as the x-api-key header
            model: Model identifier
            endpoint: Messages API URL
            api_version: Value of the anthropic-version header
            timeout: Request timeout in seconds. None leaves it to the transport.
        """
        self.api_key = api_key
        self.model = model
        self.endpoint = endpoint
        self.api_version = api_version
        self.timeout = timeout

    def complete(self, prompt: str, max_tokens: int) -> str:
        """
        Send a single user message and return the reply text

        Args:
            prompt: Full prompt including the feedback and the expected JSON shape
            max_tokens: Token budget for the reply

        Returns:
            Text of the first content block

        Raises:
            UpstreamAPIError: non-success status, carries status and body
            LLMClientError: the request could not be sent or the body is not JSON
            ResponseFormatError: the body has no text content block
        """
        logger.info(f"Calling LLM: {self.model}")
        logger.debug(f"Prompt size: {len(prompt)} characters, max_tokens={max_tokens}")

        headers = {
            "Content-Type": "application/json",
            "x-api-key": self.api_key,
            "anthropic-version": self.api_version
        }

        payload = {
            "model": self.model,
            "max_tokens": max_tokens,
            "messages": [
                {
                    "role": "user",
                    "content": prompt
                }
            ]
        }

        start_time = time.time()
        try:
            response = requests.post(
                self.endpoint,
                headers=headers,
                json=payload,
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"API request failed: {e}")
            raise LLMClientError(f"LLM API call failed: {e}")

        elapsed_time = time.time() - start_time
        logger.info(f"API response received in {elapsed_time:.2f} seconds")

        if not 200 <= response.status_code < 300:
            logger.error(f"Claude API Error: {response.status_code} {response.text[:1000]}")
            raise UpstreamAPIError(response.status_code, response.text)

        try:
            result = response.json()
        except ValueError as e:
            logger.error(f"Failed to parse API response as JSON: {e}")
            raise LLMClientError(f"Invalid JSON response from API: {e}")

        try:
            text = result['content'][0]['text']
        except (KeyError, IndexError, TypeError):
            logger.error(f"Invalid API response format: {str(result)[:1000]}")
            raise ResponseFormatError("Invalid API response format", response.text)

        usage = result.get('usage')
        if usage:
            logger.info(
                f"Token usage - Input: {usage.get('input_tokens', 'N/A')}, "
                f"Output: {usage.get('output_tokens', 'N/A')}"
            )

        return text
