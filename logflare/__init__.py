# -*- coding: utf-8 -*-

__author__ = """Logflare"""
__email__ = 'support@logflare.app'

import os

ROOT = os.path.dirname(os.path.abspath(__file__))

with open(os.path.join(ROOT, 'VERSION')) as version_file:
    VERSION = version_file.read().strip()

from .client import LogflareClient  # noqa: E402
from .errors import ConfigurationError, LogflareError, NetworkError  # noqa: E402
from .models import ClientOptions, SendResult  # noqa: E402

__all__ = [
    "VERSION",
    "LogflareClient",
    "ClientOptions",
    "SendResult",
    "LogflareError",
    "ConfigurationError",
    "NetworkError",
]
