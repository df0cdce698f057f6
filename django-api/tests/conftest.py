"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from theater.domain import Invoice, Performance, Play


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def plays() -> dict[str, Play]:
    return {
        "hamlet": Play(name="Hamlet", genre="tragedy"),
        "as-like": Play(name="As You Like It", genre="comedy"),
        "othello": Play(name="Othello", genre="tragedy"),
    }


@pytest.fixture
def big_co_invoice() -> Invoice:
    return Invoice(
        customer="BigCo",
        performances=(
            Performance(play_id="hamlet", audience=55),
            Performance(play_id="as-like", audience=35),
            Performance(play_id="othello", audience=40),
        ),
    )
