"""graphql_rx.config.defaults
==========================

Conservative default values for the bridge. Plain constants only; no I/O and
no imports from other graphql_rx packages.
"""

from __future__ import annotations

# Cache policy used by the reactive facade when a caller passes none.
DEFAULT_CACHE_POLICY = "return_cache_data_else_fetch"

# Seconds before ``Single.timeout()`` fails when called without an argument.
DEFAULT_TIMEOUT_SECONDS = 30.0
