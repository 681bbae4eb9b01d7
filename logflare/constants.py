# -*- coding: utf-8 -*-
from typing import Dict

DEFAULT_API_URL = "https://api.logflare.app"

LOGS_ENDPOINT = "/api/logs"

# Query parameters, in the order they are appended to the request URL
API_KEY_PARAM = "api_key"
SOURCE_PARAM = "source"

BATCH_KEY = "batch"

REQUEST_HEADERS: Dict[str, str] = {
    "Accept": "application/json, text/plain, */*",
    "Content-Type": "application/json",
}
