import asyncio

from app.core.config import get_settings
from app.core.deps import get_llm_client


class AIService:
    def __init__(self, client=None, settings=None):
        self.settings = settings or get_settings()
        self.client = client if client is not None else get_llm_client(self.settings)

    async def generate_completion(
        self,
        prompt: str,
        system_prompt: str | None = None,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        kwargs = {
            "model": model or self._default_model(),
            "messages": messages,
            "temperature": self.settings.llm_temperature if temperature is None else temperature,
            "max_tokens": max_tokens or self.settings.llm_max_tokens,
        }
        if self.settings.llm_provider == "openai":
            kwargs["response_format"] = {"type": "json_object"}

        # SDK clients are synchronous; keep the event loop free while waiting.
        response = await asyncio.to_thread(self.client.chat.completions.create, **kwargs)

        if not response or not getattr(response, "choices", None):
            return ""
        return response.choices[0].message.content or ""

    def _default_model(self) -> str:
        if self.settings.llm_provider == "openai":
            return "gpt-4o-mini"
        return self.settings.llm_model


def get_ai_service() -> AIService:
    return AIService()
