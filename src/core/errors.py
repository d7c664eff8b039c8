"""Failures the viewer tolerates.

A network or parse failure on any fetch is logged and the flow stops there;
nothing is retried and nothing is shown to the user. Anything outside this
tuple is a bug and propagates.
"""

from __future__ import annotations

import httpx

# ValueError covers JSON decode errors and pydantic.ValidationError.
FETCH_ERRORS: tuple[type[Exception], ...] = (httpx.HTTPError, ValueError)
