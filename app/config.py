"""
Configuration settings for the resume2record pipeline.

LLM provider, model, timeouts and storage locations all come from the
environment (or a local .env file) so the pipeline can switch between
OpenAI and a local Ollama server without code changes.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import logging
import os

# LLM Provider Configuration
# Set to "ollama" or "openai"
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "openai").lower()

DEFAULT_MODEL = {
    "ollama": "llama3.1",
    "openai": "gpt-4o-mini",
}

# OpenAI Configuration
# The key is only checked when an OpenAI client is actually built.
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL_PARAMS = {
    "temperature": 0.2,
    "max_tokens": 1800,
}

# Ollama Configuration
OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")

# Structuring call: one attempt, bounded wait (seconds)
STRUCTURING_TIMEOUT = float(os.getenv("STRUCTURING_TIMEOUT", "45"))

# Character budget for the section digest sent to the LLM
DIGEST_MAX_CHARS = int(os.getenv("DIGEST_MAX_CHARS", "8000"))

# Empty string disables the response cache / results store
CACHE_DIR = os.getenv("CACHE_DIR", ".cache")
RESULTS_PATH = os.getenv("RESULTS_PATH", "resumes.json")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def get_model_for_provider(provider: str = None) -> str:
    """Get the default model for the specified provider."""
    provider = provider or LLM_PROVIDER
    return DEFAULT_MODEL.get(provider, "gpt-4o-mini")


def configure_logging(level: str = None) -> None:
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
