"""
Generative text provider used for service report narratives.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional
from openai import AsyncOpenAI, APIError, APITimeoutError
from autoservice.config import settings
from autoservice.exceptions import ProviderError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class AIProviderConfig:
    """Provider settings captured once at process start"""
    api_key: Optional[str]
    model: str
    timeout_seconds: float

    @classmethod
    def from_settings(cls) -> "AIProviderConfig":
        return cls(
            api_key=settings.OPENAI_API_KEY,
            model=settings.OPENAI_MODEL,
            timeout_seconds=settings.AI_TIMEOUT_SECONDS
        )

class TextGenerator:
    async def generate_content(self, prompt: str) -> str:
        raise NotImplementedError

class OpenAITextGenerator(TextGenerator):
    def __init__(self, config: AIProviderConfig):
        self.model = config.model
        self.client = AsyncOpenAI(
            api_key=config.api_key,
            timeout=config.timeout_seconds,
            max_retries=0
        )

    async def generate_content(self, prompt: str) -> str:
        """One completion per generator; the client is closed afterwards"""
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}]
            )
            text = response.choices[0].message.content if response.choices else None
        except APITimeoutError as e:
            logger.warning(f"Report provider timed out: {e}")
            raise ProviderError("Report generation timed out", retryable=True) from e
        except APIError as e:
            logger.error(f"Report provider error: {e}")
            raise ProviderError(f"Failed to generate service report: {e}") from e
        except Exception as e:
            logger.error(f"Unexpected report provider failure: {e}", exc_info=True)
            raise ProviderError(f"Failed to generate service report: {e}") from e
        finally:
            await self.client.close()

        if not text:
            raise ProviderError("Report provider returned an empty response")
        return text

# Builds a generator for a validated config; swapped out in tests
GeneratorFactory = Callable[[AIProviderConfig], TextGenerator]

def openai_generator_factory(config: AIProviderConfig) -> TextGenerator:
    return OpenAITextGenerator(config)
