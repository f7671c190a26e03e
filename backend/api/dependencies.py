"""Shared dependencies for API routes."""

from services.llm_client import LLMClient, get_llm_client
from services.matcher import InMemoryMatchStore, MatchStore

_store = InMemoryMatchStore()


def get_llm() -> LLMClient:
    return get_llm_client()


def get_match_store() -> MatchStore:
    return _store
