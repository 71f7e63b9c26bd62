"""Shared fixtures for the fetcher tests."""
from typing import Any, Dict, List

import pytest

from tests.helpers import repo_payload


@pytest.fixture
def octocat_payload() -> List[Dict[str, Any]]:
    return [
        repo_payload(1, "Hello-World", 5, language="C"),
        repo_payload(2, "Spoon-Knife", 2, fork=True, language=None),
    ]
