"""Shared pytest fixtures for the polymer-init test suite.

Provides reusable fixtures for:
- Fake generator environments (metadata query + async run)
- Stubbed prompt facilities
- Descriptor samples for built-in and third-party templates
"""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from polymer_init.config import InitConfig
from polymer_init.init.models import GeneratorDescriptor


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------


@pytest.fixture
def element_descriptor() -> GeneratorDescriptor:
    """Built-in element template, as registered with no description."""
    return GeneratorDescriptor(namespace="polymer-init-element:app", resolved="unknown")


@pytest.fixture
def custom_descriptor() -> GeneratorDescriptor:
    """Third-party template with no description of its own."""
    return GeneratorDescriptor(namespace="polymer-init-custom-template:app")


@pytest.fixture
def config() -> InitConfig:
    return InitConfig()


# ---------------------------------------------------------------------------
# Fake environment
# ---------------------------------------------------------------------------


def make_fake_env(generators: dict[str, GeneratorDescriptor] | None = None) -> MagicMock:
    """Build an environment double with a sync metadata query and async run."""
    env = MagicMock()
    env.get_generators_meta = MagicMock(return_value=dict(generators or {}))
    env.run = AsyncMock(return_value=None)
    return env


@pytest.fixture
def fake_env(element_descriptor: GeneratorDescriptor) -> MagicMock:
    """Environment holding only ``polymer-init-element:app``."""
    return make_fake_env({element_descriptor.namespace: element_descriptor})


@pytest.fixture
def empty_env() -> MagicMock:
    return make_fake_env()


# ---------------------------------------------------------------------------
# Prompt facility
# ---------------------------------------------------------------------------


def make_prompt(answer: Any, field: str = "generator_name") -> AsyncMock:
    """Prompt double that answers every question with *answer*."""
    return AsyncMock(return_value={field: answer})


@pytest.fixture
def prompt_test() -> AsyncMock:
    """Prompt double answering ``TEST``, a name that is never registered."""
    return make_prompt("TEST")


@pytest.fixture
def env_factory():
    """Factory fixture: ``env_factory({identifier: descriptor})``."""
    return make_fake_env


@pytest.fixture
def prompt_factory():
    """Factory fixture: ``prompt_factory(answer)``."""
    return make_prompt
