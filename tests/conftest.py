"""Pytest configuration and fixtures for neo-auth-adapters tests."""

import asyncio
from types import SimpleNamespace
from typing import Any, Callable, Optional

import pytest

from neo_auth_adapters.features.auth import Strategy, StrategyRegistry


class StubStrategy(Strategy):
    """Strategy whose behaviour is a plain function of (strategy, request)."""
    
    def __init__(self, behaviour: Callable[[Any, Any], Any], name: Optional[str] = "stub"):
        self.behaviour = behaviour
        self.name = name
        # Shared with per-call copies, so invocations are visible here
        self.invocations = []
    
    def authenticate(self, request, **options):
        self.invocations.append((request, options))
        return self.behaviour(self, request)


class DelayedStrategy(Strategy):
    """Async strategy that reports the request's user after a delay."""
    
    name = "delayed"
    
    async def authenticate(self, request, **options):
        await asyncio.sleep(request.delay)
        if request.user_id is None:
            self.fail(f"no user after {request.delay}s")
        else:
            self.success({"id": request.user_id})


@pytest.fixture
def make_request():
    """Factory for plain request objects."""
    def _make(**fields):
        fields.setdefault("headers", {})
        return SimpleNamespace(**fields)
    return _make


@pytest.fixture
def stub_strategy_factory():
    """Factory for stub strategies."""
    return StubStrategy


@pytest.fixture
def delayed_strategy():
    return DelayedStrategy()


@pytest.fixture
def registry():
    """Fresh strategy registry."""
    return StrategyRegistry()
