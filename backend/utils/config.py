import os
from typing import Any, Dict

from dotenv import load_dotenv

DEFAULT_PORT = 3000
AIRTABLE_API_URL = 'https://api.airtable.com/v0'
# Growth AI base
AIRTABLE_BASE_ID = 'appEZQLiRm9cfnVkP'


def _parse_port(value) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError):
        return DEFAULT_PORT
    return port if 0 < port < 65536 else DEFAULT_PORT


def load_config() -> Dict[str, Any]:
    """Read service settings from the environment (and `.env`, if present)."""
    load_dotenv()
    origins = os.getenv('CORS_ORIGINS', '*')
    return {
        'PORT': _parse_port(os.getenv('PORT', DEFAULT_PORT)),
        'AIRTABLE_PAT': os.getenv('AIRTABLE_PAT') or None,
        'AIRTABLE_API_URL': (os.getenv('AIRTABLE_API_URL') or AIRTABLE_API_URL).rstrip('/'),
        'CORS_ORIGINS': [o.strip() for o in origins.split(',') if o.strip()] or ['*'],
    }
