"""Interface parts; prefer ``graphql_rx.base.interfaces``."""

from .graphql_client import GraphQLClient, ResultHandler

__all__ = ["GraphQLClient", "ResultHandler"]
