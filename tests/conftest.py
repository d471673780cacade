"""
Pytest fixtures shared across the suite.

No test talks to a real LLM: the structuring service is replaced by
FakeLLMClient, which replays canned replies and records each request.
"""
import json

import pytest

from llm_client import LLMClient, LLMResponse

SAMPLE_RESUME = """Jane Doe
Austin, TX
jane.doe@example.com | (512) 555-0199

WORK EXPERIENCE
Senior Software Engineer
(Acme Corp)
2020 - Present
Austin, TX
Led the platform team building internal developer tooling.
• Cut build times by 40%
• Mentored four engineers
• Cut build times by 40%
Data Analyst
(Initech)
2017 - 2020
Dallas, TX
- Automated weekly reporting

EDUCATION
Bachelor of Science in Computer Science
University of Texas at Austin
2013 - 2017
GPA 3.8, Magna Cum Laude

SKILLS
Backend:
Python, Go, SQL
Cloud:
Docker
AWS
"""


class FakeLLMClient(LLMClient):
    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def chat(self, model, messages):
        self.calls.append({"model": model, "messages": messages})
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return LLMResponse(reply)


def fenced(data) -> str:
    return f"Here you go:\n```json\n{json.dumps(data)}\n```\n"


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME


@pytest.fixture
def fake_client_factory():
    return FakeLLMClient
