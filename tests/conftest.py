"""Shared fixtures for bigcolor tests."""

import pytest

from bigcolor import BigColor


@pytest.fixture
def red():
    return BigColor("red")


@pytest.fixture
def white():
    return BigColor("#ffffff")


@pytest.fixture
def black():
    return BigColor("#000000")
