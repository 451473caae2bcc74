"""Shared test fixtures."""

import pytest

from tests.fakes import FakeReader, FakeWallet, make_writer, token_responses


@pytest.fixture
def reader() -> FakeReader:
    return FakeReader(token_responses())


@pytest.fixture
def writer():
    return make_writer()


@pytest.fixture
def wallet() -> FakeWallet:
    return FakeWallet()
