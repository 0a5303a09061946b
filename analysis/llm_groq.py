import json
import logging
import time
from typing import Any, Dict, Optional, Type

import requests
from pydantic import BaseModel

from analysis.errors import ModelInvocationError, ModelOutputError
from analysis.prompts import render_output_contract
from config import settings

logger = logging.getLogger(__name__)


def _extract_content(data: Any) -> Any:
    try:
        return data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise ModelInvocationError(f"Unexpected response envelope from model backend: {e}") from e


def invoke(prompt_text: str, output_schema: Type[BaseModel]) -> Optional[Dict[str, Any]]:
    """Send one prompt to Groq in JSON mode and return the parsed object.

    Returns None when the model answers with nothing usable (empty content,
    null, or a JSON value that is not an object). Transport and backend
    failures raise ModelInvocationError; content that is not JSON at all
    raises ModelOutputError. No retries are attempted here.
    """
    if not settings.groq_api_key:
        raise ModelInvocationError("GROQ_API_KEY is not set.")

    headers = {
        "Authorization": f"Bearer {settings.groq_api_key}",
        "Content-Type": "application/json",
    }
    payload = {
        "model": settings.model_name,
        "messages": [
            {"role": "system", "content": render_output_contract(output_schema)},
            {"role": "user", "content": prompt_text},
        ],
        "temperature": settings.temperature,
        "response_format": {"type": "json_object"},
    }

    started = time.monotonic()
    try:
        response = requests.post(
            settings.groq_api_url,
            headers=headers,
            json=payload,
            timeout=settings.timeout_seconds,
        )
        response.raise_for_status()
        data = response.json()
    except requests.RequestException as e:
        logger.warning("Groq request for %s failed: %s", output_schema.__name__, e)
        raise ModelInvocationError(f"Model backend request failed: {e}") from e
    except ValueError as e:
        raise ModelInvocationError("Model backend returned a non-JSON envelope.") from e

    logger.info(
        "Groq %s for %s answered in %.2fs",
        settings.model_name,
        output_schema.__name__,
        time.monotonic() - started,
    )

    raw = _extract_content(data)
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None

    # Handle rare cases where the content is already decoded
    if isinstance(raw, str):
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ModelOutputError(f"Model returned text that is not JSON: {e}") from e
    else:
        parsed = raw

    if not isinstance(parsed, dict):
        logger.warning("Model returned %s instead of an object; treating as no output", type(parsed).__name__)
        return None
    return parsed
