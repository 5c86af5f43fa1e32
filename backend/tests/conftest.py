import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import json

import pytest
import requests

from app import create_app


def make_response(status_code, payload=None, raw=None):
    """Build a real requests.Response carrying a canned body."""
    resp = requests.models.Response()
    resp.status_code = status_code
    resp.encoding = 'utf-8'
    if raw is not None:
        resp._content = raw.encode('utf-8')
    else:
        resp._content = json.dumps(payload).encode('utf-8') if payload is not None else b''
    return resp


@pytest.fixture
def app():
    return create_app({
        'TESTING': True,
        'PORT': 3000,
        'AIRTABLE_PAT': 'pat-test-token',
        'AIRTABLE_API_URL': 'https://api.airtable.test/v0',
    })


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def log_buffer(app):
    return app.extensions['log_buffer']
