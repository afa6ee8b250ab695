"""
Development settings for LicenseGateway.
"""

import os

from .base import *  # noqa: F403, F401

DEBUG = True

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "0.0.0.0"]

# Local development usually runs the frontend on the CRA dev server
LICENSING["FRONTEND_URL"] = os.environ.get(  # noqa: F405
    "FRONTEND_URL", "http://localhost:3000"
)
