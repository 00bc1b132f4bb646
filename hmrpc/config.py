"""Global configuration parameters."""

from __future__ import annotations

from hmrpc.const import BIDCOS_RF_PORT, DEFAULT_MAX_WORKERS, DEFAULT_TIMEOUT

DEFAULT_PORT = BIDCOS_RF_PORT
MAX_WORKERS = DEFAULT_MAX_WORKERS
TIMEOUT = DEFAULT_TIMEOUT
