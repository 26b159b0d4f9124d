import logging
import os
from functools import lru_cache
from supabase import create_client, Client
from openai import OpenAI
from app.core.config import get_settings

_prompt_logger = logging.getLogger("studytrack.gemini_prompts")


@lru_cache
def get_supabase_client() -> Client:
    settings = get_settings()
    if not settings.supabase_url or not settings.supabase_service_key:
        raise RuntimeError("Supabase settings missing (SUPABASE_URL / SUPABASE_SERVICE_KEY)")
    return create_client(settings.supabase_url, settings.supabase_service_key)


@lru_cache
def get_openai_client() -> OpenAI:
    settings = get_settings()
    return OpenAI(api_key=settings.openai_api_key)


# ── Gemini adapter: mimics the OpenAI client interface ──────────────────────
# AIService calls client.chat.completions.create(...) for both providers; this
# adapter routes those calls to Gemini with a JSON response mime type.

class _GeminiMessage:
    def __init__(self, content: str):
        self.content = content


class _GeminiChoice:
    def __init__(self, content: str):
        self.message = _GeminiMessage(content)


class _GeminiResponse:
    def __init__(self, text: str):
        self.choices = [_GeminiChoice(text)]


class _GeminiCompletions:
    def __init__(self, api_key: str, default_model: str):
        self._api_key = api_key
        self._default_model = default_model

    def create(
        self,
        model=None,
        messages=None,
        temperature=0.7,
        max_tokens=None,
        **kwargs,
    ):
        from google import genai
        from google.genai import types

        system_parts = [
            m["content"] for m in (messages or []) if m.get("role") == "system"
        ]
        user_parts = [
            m["content"] for m in (messages or []) if m.get("role") != "system"
        ]

        system_instruction = "\n\n".join(system_parts) or None
        user_prompt = "\n\n".join(user_parts)
        model_name = model or self._default_model

        if os.environ.get("DEBUG_LLM_PROMPTS", "").lower() in ("1", "true"):
            _prompt_logger.warning(
                "\n\n%s\n"
                "── SYSTEM ──────────────────────────────────────────────\n%s\n"
                "── USER ────────────────────────────────────────────────\n%s\n"
                "── CONFIG ──────────────────────────────────────────────\n"
                "  model=%s  temp=%s  max_tokens=%s\n"
                "%s",
                "=" * 60,
                system_instruction or "(none)",
                user_prompt,
                model_name,
                temperature,
                max_tokens or 2048,
                "=" * 60,
            )

        client = genai.Client(api_key=self._api_key)

        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=temperature,
            max_output_tokens=max_tokens or 2048,
            response_mime_type="application/json",
            # Disable thinking; prevents preamble text before JSON output
            thinking_config=types.ThinkingConfig(thinking_budget=0),
        )
        response = client.models.generate_content(
            model=model_name,
            contents=user_prompt,
            config=config,
        )
        return _GeminiResponse(response.text or "")


class _GeminiChat:
    def __init__(self, api_key: str, default_model: str):
        self.completions = _GeminiCompletions(api_key, default_model)


class GeminiClientAdapter:
    def __init__(self, api_key: str, default_model: str = "gemini-2.5-flash"):
        self.chat = _GeminiChat(api_key, default_model)


def get_llm_client(settings=None):
    """Return the active LLM client based on llm_provider setting."""
    if settings is None:
        settings = get_settings()
    if settings.llm_provider == "openai":
        if settings is get_settings():
            return get_openai_client()
        return OpenAI(api_key=settings.openai_api_key)
    return GeminiClientAdapter(api_key=settings.gemini_api_key, default_model=settings.llm_model)
