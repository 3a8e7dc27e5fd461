"""Collaborator contracts (public facade)."""

from .interfaces_parts import GraphQLClient, ResultHandler

__all__ = ["GraphQLClient", "ResultHandler"]
