import asyncio
import json
import logging
import re
from typing import Any, Dict, Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from app.config import Settings
from app.errors import MalformedModelResponseError, UpstreamServiceError
from app.services.analysis_prompt import (
    MATCH_SYSTEM_INSTRUCTION,
    RESUME_SYSTEM_INSTRUCTION,
    build_match_prompt,
    build_resume_prompt,
)

logger = logging.getLogger(__name__)


def clean_gemini_output(text: str) -> str:
    """Removes markdown-style ```json and ``` from Gemini output."""
    text = re.sub(r"^```(?:json)?\s*", "", text.strip(), flags=re.IGNORECASE)
    text = re.sub(r"\s*```$", "", text.strip())
    return text.strip()


def parse_model_json(text: str) -> Dict[str, Any]:
    """Parse cleaned model output, which must be a single JSON object."""
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedModelResponseError(detail=f"Model returned invalid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise MalformedModelResponseError(
            detail=f"Expected a JSON object, got {type(parsed).__name__}"
        )
    return parsed


def build_http_options(timeout_seconds: Optional[float]) -> types.HttpOptions:
    """SDK request options; the SDK takes its timeout in milliseconds."""
    if not timeout_seconds:
        return types.HttpOptions()
    return types.HttpOptions(timeout=int(timeout_seconds * 1000))


class AnalysisRequester:
    """
    Sends resume analysis prompts to Gemini and returns the parsed JSON.

    ``client`` is anything exposing ``client.models.generate_content``;
    tests pass a fake in its place.
    """

    def __init__(
        self,
        client,
        model: str = "gemini-2.0-flash",
        temperature: float = 0.7,
        resume_max_output_tokens: int = 1000,
        match_max_output_tokens: int = 2000,
        timeout_seconds: Optional[float] = 60.0,
    ):
        self.client = client
        self.model = model
        self.temperature = temperature
        self.resume_max_output_tokens = resume_max_output_tokens
        self.match_max_output_tokens = match_max_output_tokens
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, settings: Settings, client=None) -> "AnalysisRequester":
        if client is None:
            client = genai.Client(
                api_key=settings.gemini_api_key,
                http_options=build_http_options(settings.gemini_timeout_seconds),
            )
        return cls(
            client,
            model=settings.gemini_model,
            temperature=settings.gemini_temperature,
            resume_max_output_tokens=settings.resume_max_output_tokens,
            match_max_output_tokens=settings.match_max_output_tokens,
            timeout_seconds=settings.gemini_timeout_seconds,
        )

    async def request_analysis(
        self, resume_text: str, job_description: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Resume-only mode when ``job_description`` is empty, comparative
        mode otherwise. Neither mode retries on failure.
        """
        if job_description:
            prompt = build_match_prompt(resume_text, job_description)
            text = await self._generate(
                prompt, MATCH_SYSTEM_INSTRUCTION, self.match_max_output_tokens
            )
        else:
            prompt = build_resume_prompt(resume_text)
            text = await self._generate(
                prompt, RESUME_SYSTEM_INSTRUCTION, self.resume_max_output_tokens
            )

        cleaned = clean_gemini_output(text)
        logger.debug("Cleaned Gemini response:\n%s", cleaned)
        return parse_model_json(cleaned)

    async def _generate(self, prompt: str, system_instruction: str, max_output_tokens: int) -> str:
        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=self.temperature,
            max_output_tokens=max_output_tokens,
        )
        logger.debug("Sending prompt to Gemini (%s):\n%s", self.model, prompt)

        try:
            response = await asyncio.wait_for(
                asyncio.to_thread(
                    self.client.models.generate_content,
                    model=self.model,
                    contents=prompt,
                    config=config,
                ),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            logger.error("Gemini call timed out after %ss", self.timeout_seconds)
            raise UpstreamServiceError(detail="Gemini call timed out") from e
        except genai_errors.APIError as e:
            logger.error("Gemini API error: %s", e)
            raise UpstreamServiceError(detail=f"Gemini API error: {e}") from e
        except Exception as e:
            logger.exception("Gemini call failed")
            raise UpstreamServiceError(detail=f"Gemini error: {e}") from e

        text = getattr(response, "text", None) or ""
        if not text.strip():
            raise UpstreamServiceError(detail="Gemini returned an empty response")
        return text
