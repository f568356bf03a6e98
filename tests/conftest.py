import socket

import pytest
from fastapi.testclient import TestClient

from loading_page_server.app import create_app

PAGE = b"<html><body>Loading...</body></html>"


@pytest.fixture
def free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@pytest.fixture
def page():
    return PAGE


@pytest.fixture
def client(page):
    return TestClient(create_app(page))
