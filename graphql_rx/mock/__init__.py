"""In-memory GraphQL client exposing deterministic behaviour for tests."""

from .cache import ResultCache
from .cancellable import ClientCancellable
from .client import InMemoryGraphQLClient, Responder, ServerOutcome

__all__ = ["InMemoryGraphQLClient", "ResultCache", "ClientCancellable", "Responder", "ServerOutcome"]
