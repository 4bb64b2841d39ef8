"""Shared pytest fixtures."""

import pytest
from typer.testing import CliRunner

from bubble_say.cli.app import create_app
from bubble_say.render.bubble import BubbleRenderer


@pytest.fixture
def renderer() -> BubbleRenderer:
    """Renderer at the default width."""
    return BubbleRenderer()


@pytest.fixture
def narrow_renderer() -> BubbleRenderer:
    """Renderer at the smallest allowed width."""
    return BubbleRenderer(4)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def app():
    """Fresh CLI application."""
    return create_app()
