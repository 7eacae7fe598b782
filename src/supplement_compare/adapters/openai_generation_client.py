"""OpenAI Responses API client for recommendation text."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from supplement_compare.services.recommendation import GenerationClient


@dataclass
class OpenAIGenerationClient(GenerationClient):
    """Generation client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(
        cls, api_key: str, timeout_seconds: float = 30.0, max_retries: int = 2
    ) -> "OpenAIGenerationClient":
        """Create an OpenAI generation client."""
        return cls(
            client=AsyncOpenAI(
                api_key=api_key, timeout=timeout_seconds, max_retries=max_retries
            )
        )

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> str:
        """Call OpenAI Responses API and return the output text as-is."""
        request_payload: dict[str, object] = {
            "model": model,
            "input": [{"role": "user", "content": prompt}],
            "store": store,
        }
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}

        response = await self.client.responses.create(**request_payload)
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return output_text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
