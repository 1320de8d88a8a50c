"""Pytest fixtures for soapwire tests."""

import pytest

from samples import FakeExecutor, build_mtom_body, mtom_content_type


@pytest.fixture
def mtom_body():
    return build_mtom_body()


@pytest.fixture
def mtom_headers():
    return {"content-type": mtom_content_type()}


@pytest.fixture
def fake_executor():
    return FakeExecutor()
