from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from dotenv import load_dotenv


def ensure_env_loaded() -> None:
    # Prefer the .env next to this file, fall back to dotenv's own search
    env_path = Path(__file__).resolve().parent / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)
    else:
        load_dotenv(override=False)


ensure_env_loaded()

JOB_ROLES: List[str] = [
    "Software Engineer",
    "Product Manager",
    "Data Scientist",
    "UX Designer",
    "Marketing Specialist",
    "Sales Representative",
    "Human Resources Manager",
]


@dataclass(frozen=True)
class Settings:
    groq_api_key: str
    model_name: str
    groq_api_url: str
    temperature: float
    timeout_seconds: float
    api_url: str
    log_level: str


def load_settings() -> Settings:
    return Settings(
        groq_api_key=os.getenv("GROQ_API_KEY", ""),
        model_name=os.getenv("MODEL_NAME", "llama-3.3-70b-versatile"),
        groq_api_url=os.getenv(
            "GROQ_API_URL", "https://api.groq.com/openai/v1/chat/completions"
        ),
        temperature=float(os.getenv("LLM_TEMPERATURE", "0.4")),
        timeout_seconds=float(os.getenv("LLM_TIMEOUT_SECONDS", "60")),
        api_url=os.getenv("API_URL", "http://localhost:8000"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


settings = load_settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)
