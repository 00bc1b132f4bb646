"""
hmrpc is a Python 3 (>= 3.11) module to query HomeMatic backends via XML-RPC.

It decodes the untyped XML-RPC responses of a CCU / Homegear into typed
descriptions of devices, channels, parameters and service messages.
"""

from __future__ import annotations

import logging
import sys

if sys.stdout.isatty():
    logging.basicConfig(level=logging.INFO)