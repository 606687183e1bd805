from __future__ import annotations

import json
import re
from typing import List, Optional

import google.generativeai as genai
from google.api_core.exceptions import GoogleAPIError
from google.generativeai.types import BlockedPromptException

from .errors import GenerationParseError, RemoteAPIError
from .models import ExistingPRContext, FileChange, GeneratedContent
from .prompt_builder import build_prompt

# Greedy: spans from the first "{" to the last "}" in the reply.
JSON_OBJECT_REGEX = re.compile(r"\{.*\}", re.DOTALL)


def get_gemini_model(api_key: str, model_name: str) -> genai.GenerativeModel:
    genai.configure(api_key=api_key)
    return genai.GenerativeModel(model_name)


def first_text_part(response) -> Optional[str]:
    for candidate in getattr(response, "candidates", None) or []:
        content = getattr(candidate, "content", None)
        for part in getattr(content, "parts", None) or []:
            text = getattr(part, "text", None)
            if text:
                return text
    return None


def call_gemini(model: genai.GenerativeModel, prompt: str, max_output_tokens: int = 2048) -> str:
    try:
        response = model.generate_content(
            prompt,
            generation_config={"max_output_tokens": max_output_tokens},
        )
    except (GoogleAPIError, BlockedPromptException) as e:
        raise RemoteAPIError(str(e), service="gemini") from e
    text = first_text_part(response)
    if text is None:
        raise GenerationParseError("Unexpected response format from Gemini API: no text content")
    print(f"   ✅ Generated {len(text)} characters")
    return text


def parse_generated_content(text: str) -> GeneratedContent:
    """Pull the ``{"title": ..., "description": ...}`` object out of a model reply.

    Prose around the object is tolerated, but a stray brace outside the JSON
    payload breaks the extraction.
    """
    match = JSON_OBJECT_REGEX.search(text or "")
    if not match:
        raise GenerationParseError("Could not parse JSON response from Gemini")
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise GenerationParseError(f"Malformed JSON from Gemini: {e}") from e
    if not isinstance(data, dict):
        raise GenerationParseError("Gemini response JSON is not an object")

    title = data.get("title")
    description = data.get("description")
    if not isinstance(title, str) or not title.strip():
        raise GenerationParseError("Gemini response is missing a 'title' string")
    if not isinstance(description, str) or not description.strip():
        raise GenerationParseError("Gemini response is missing a 'description' string")
    return GeneratedContent(title=title.strip(), description=description.strip())


def _preview(label: str, text: str, limit: int):
    if limit > 0:
        print(f"{label} ({len(text)} chars total):\n{text[:limit]}{'…' if len(text) > limit else ''}")


def generate_title_and_description(
    model: genai.GenerativeModel,
    files: List[FileChange],
    context: Optional[ExistingPRContext] = None,
    max_output_tokens: int = 2048,
    prompt_preview_chars: int = 0,
    output_preview_chars: int = 0,
) -> GeneratedContent:
    prompt = build_prompt(files, context)
    _preview("🧾 Prompt preview", prompt, prompt_preview_chars)
    text = call_gemini(model, prompt, max_output_tokens=max_output_tokens)
    _preview("📤 Model output preview", text, output_preview_chars)
    return parse_generated_content(text)
