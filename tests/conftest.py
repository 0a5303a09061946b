"""Global test configuration and fixtures."""

import os
import pytest
from typing import Any, Dict
from unittest.mock import patch

# Set test environment before the config module reads it
os.environ["GROQ_API_KEY"] = "test-groq-key"
os.environ["MODEL_NAME"] = "test-model"


@pytest.fixture
def analyze_payload() -> Dict[str, Any]:
    return {
        "candidateResponse": "I led the migration of our monolith to microservices over six months.",
        "jobDescription": "Senior backend engineer to own our distributed services platform.",
        "keywords": "microservices, ownership, Python",
    }


@pytest.fixture
def insights_payload() -> Dict[str, Any]:
    return {
        "jobDescription": "Backend role needing Go and gRPC experience",
        "candidateResponses": ["I built a payment service handling 10k req/s"],
    }


@pytest.fixture
def fake_invoke():
    """Replace the Groq call; set .return_value or .side_effect per test."""
    with patch("analysis.llm_groq.invoke") as mock_invoke:
        mock_invoke.return_value = None
        yield mock_invoke
