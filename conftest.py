"""Configures pytest further."""
import random

import pytest

from cipherlab.rsa import PrivateKey
from cipherlab.rsa import PublicKey
from cipherlab.rsa import RsaKeyPair


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower tests")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run extreme bit width tests")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    if config.getoption("--skip-slow"):
        skipdict["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        skipdict["extreme"] = pytest.mark.skip(reason="Extreme test: needs --run-extreme option")
    for item in items:
        for k, v in skipdict.items():
            if k in item.keywords:
                item.add_marker(v)


@pytest.fixture
def rng() -> random.Random:
    """A seeded generator so key generation is reproducible."""
    return random.Random(20251019)


@pytest.fixture
def textbook_keys() -> RsaKeyPair:
    """The p=61, q=53 example found in every RSA textbook."""
    return RsaKeyPair(PublicKey("17", "3233"), PrivateKey("2753", "3233"))
