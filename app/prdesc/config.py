from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import InvalidInputError, MissingCredentialError

GITHUB_TOKEN_VAR = "GITHUB_PRD_TOKEN"
GEMINI_KEY_VAR = "GEMINI_API_KEY"

DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
DEFAULT_GITHUB_API_URL = "https://api.github.com"


@dataclass
class Settings:
    github_token: str
    gemini_api_key: str
    gemini_model: str = DEFAULT_GEMINI_MODEL
    github_api_url: str = DEFAULT_GITHUB_API_URL
    max_output_tokens: int = 2048
    prompt_preview_chars: int = 0
    output_preview_chars: int = 0


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidInputError(f"{name} must be an integer, got {raw!r}")


def mask(secret: str) -> str:
    if len(secret) <= 8:
        return "*" * len(secret)
    return f"{secret[:4]}...{secret[-4:]}"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from the environment, failing before any client is built."""
    env = os.environ if environ is None else environ
    github_token = env.get(GITHUB_TOKEN_VAR)
    if not github_token:
        raise MissingCredentialError(GITHUB_TOKEN_VAR)
    gemini_api_key = env.get(GEMINI_KEY_VAR)
    if not gemini_api_key:
        raise MissingCredentialError(GEMINI_KEY_VAR)

    max_output_tokens = _int_setting(env, "MAX_OUTPUT_TOKENS", 2048)
    if max_output_tokens <= 0:
        raise InvalidInputError("MAX_OUTPUT_TOKENS must be a positive integer")

    return Settings(
        github_token=github_token,
        gemini_api_key=gemini_api_key,
        gemini_model=env.get("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL,
        github_api_url=env.get("GITHUB_API_URL") or DEFAULT_GITHUB_API_URL,
        max_output_tokens=max_output_tokens,
        prompt_preview_chars=_int_setting(env, "LOG_PROMPT_PREVIEW_CHARS", 0),
        output_preview_chars=_int_setting(env, "LOG_MODEL_OUTPUT_PREVIEW_CHARS", 0),
    )
