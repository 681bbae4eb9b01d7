"""
Log codes for the events client.
"""

CLIENT = "client"

# Configuration
CONFIG = f"{CLIENT}.config"
CONFIG_DEFAULT_API_URL = f"{CONFIG}.default_api_url"

# Dispatch
SEND = f"{CLIENT}.send"
SEND_DISPATCHED = f"{SEND}.dispatched"
SEND_SUCCEEDED = f"{SEND}.succeeded"
SEND_FAILED = f"{SEND}.failed"
SEND_ON_ERROR_FAILED = f"{SEND}.on_error_failed"
