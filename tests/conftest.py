"""Shared pytest fixtures for rollthetech tests."""

from unittest.mock import MagicMock

import pytest


# =============================================================================
# Sample documents
# =============================================================================

SAMPLE_README = """\
# Build Your Own X

## Table of Contents

* [3D Renderer](#build-your-own-3d-renderer)

## Tutorials

#### Build your own `3D Renderer`

* [**C++**: _Introduction to Ray Tracing_](https://example.com/a)
* [**Java**: _How to create your own simple 3D render engine in pure Java_](https://example.com/b)

#### Build your own `Blockchain`

* [**Go**: _Building Blockchain in Go_](https://example.com/c)

#### Other reading

* [**Rust**: _Still filed under blockchain_](https://example.com/d)

## Contribute

#### Build your own `Ghost`

* [**Python**: _Never listed_](https://example.com/e)
"""

MINIMAL_README = """\
#### Build your own `X`

* [**A**: _b_](https://example.com/x)

## Contribute
"""


@pytest.fixture
def sample_readme():
    return SAMPLE_README


@pytest.fixture
def minimal_readme():
    return MINIMAL_README


# =============================================================================
# Mock Factories
# =============================================================================

def create_mock_rng(*values: int) -> MagicMock:
    """Random source whose randrange returns ``values`` in order (0 forever if empty)."""
    rng = MagicMock()
    if values:
        rng.randrange.side_effect = list(values)
    else:
        rng.randrange.return_value = 0
    return rng


@pytest.fixture
def zero_rng():
    return create_mock_rng()
