import asyncio
import logging
import google.generativeai as genai

from resume_builder.services.config import Settings
from resume_builder.services.errors import ConfigurationError, GenerationFailure

logger = logging.getLogger("uvicorn.error")


class GeminiClient:
    """Thin async wrapper around a Gemini model returning raw response text."""

    def __init__(self, settings: Settings):
        if not settings.GEMINI_API_KEY:
            raise ConfigurationError("GEMINI_API_KEY not set in environment variables.")
        genai.configure(api_key=settings.GEMINI_API_KEY)
        self.model_name = settings.GEMINI_MODEL
        self.timeout = settings.GENERATION_TIMEOUT_SECONDS
        self._model = genai.GenerativeModel(
            self.model_name,
            generation_config=genai.GenerationConfig(
                temperature=settings.GENERATION_TEMPERATURE,
                top_p=settings.GENERATION_TOP_P,
                max_output_tokens=settings.GENERATION_MAX_OUTPUT_TOKENS,
                response_mime_type="application/json",
            ),
        )

    async def generate(self, prompt: str) -> str:
        try:
            response = await asyncio.wait_for(
                self._model.generate_content_async(prompt, request_options={"timeout": self.timeout}),
                timeout=self.timeout,
            )
            text = response.text
        except asyncio.TimeoutError as e:
            logger.error("Gemini call timed out after %ss", self.timeout)
            raise GenerationFailure(f"LLM generation timed out after {self.timeout}s") from e
        except Exception as e:
            logger.exception("Error calling Gemini model")
            raise GenerationFailure(f"LLM generation failed: {e}") from e

        if not text or not text.strip():
            raise GenerationFailure("Empty response from Gemini model")
        return text
