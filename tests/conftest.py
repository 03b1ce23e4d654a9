# conftest.py - pytest configuration
import os

import pytest

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))
TEST_FILES_DIR = os.path.join(TESTS_DIR, "files")


def read_fixture(name: str) -> str:
    # newline="" keeps the bytes exactly as stored
    with open(os.path.join(TEST_FILES_DIR, name), "r", encoding="utf-8", newline="") as f:
        return f.read()


@pytest.fixture
def zoo_text() -> str:
    return read_fixture("zoo.diff")
