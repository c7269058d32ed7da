"""Tests for the strategy adapter."""

import asyncio
import threading

import pytest

from neo_auth_adapters.core.exceptions import (
    StrategyInternalError,
    StrategyTimeoutError,
    StrategyUnauthorizedError,
)
from neo_auth_adapters.features.auth import (
    CompatibleRequest,
    Strategy,
    StrategyAdapter,
    UserProfile,
)


class TestStrategyAdapterOutcomes:
    """Test mapping of strategy outcomes to results and errors."""

    @pytest.mark.asyncio
    async def test_success_applies_converter(self, stub_strategy_factory, make_request):
        """Test success resolves with the converted user."""
        strategy = stub_strategy_factory(lambda s, req: s.success({"id": 7}))
        adapter = StrategyAdapter(
            strategy,
            "stub",
            lambda u: {"id": u["id"], "role": "user"},
        )

        result = await adapter.authenticate(make_request())

        assert result == {"id": 7, "role": "user"}

    @pytest.mark.asyncio
    async def test_success_with_default_converter_returns_raw_user(self, stub_strategy_factory, make_request):
        """Test the default converter passes the raw user through."""
        raw_user = {"id": 7, "email": "seven@example.com"}
        strategy = stub_strategy_factory(lambda s, req: s.success(raw_user))
        adapter = StrategyAdapter(strategy, "stub")

        result = await adapter.authenticate(make_request())

        assert result is raw_user

    @pytest.mark.asyncio
    async def test_success_with_profile_converter(self, stub_strategy_factory, make_request):
        """Test converting to a UserProfile."""
        strategy = stub_strategy_factory(
            lambda s, req: s.success({"id": 7, "email": "seven@example.com", "plan": "pro"})
        )
        adapter = StrategyAdapter(strategy, "stub", UserProfile.from_mapping)

        profile = await adapter.authenticate(make_request())

        assert profile == UserProfile(
            security_id="7", email="seven@example.com", attributes={"plan": "pro"}
        )

    @pytest.mark.asyncio
    async def test_fail_raises_unauthorized_with_challenge(self, stub_strategy_factory, make_request):
        """Test fail rejects with the challenge."""
        strategy = stub_strategy_factory(lambda s, req: s.fail("Bad credentials"))
        adapter = StrategyAdapter(strategy, "stub")

        with pytest.raises(StrategyUnauthorizedError) as exc_info:
            await adapter.authenticate(make_request())

        assert exc_info.value.challenge == "Bad credentials"
        assert exc_info.value.status == 401
        assert exc_info.value.message == "Bad credentials"

    @pytest.mark.asyncio
    async def test_fail_keeps_strategy_status(self, stub_strategy_factory, make_request):
        """Test a status passed to fail is preserved."""
        strategy = stub_strategy_factory(lambda s, req: s.fail("Forbidden realm", 403))
        adapter = StrategyAdapter(strategy, "stub")

        with pytest.raises(StrategyUnauthorizedError) as exc_info:
            await adapter.authenticate(make_request())

        assert exc_info.value.status == 403

    @pytest.mark.asyncio
    async def test_fail_without_challenge(self, stub_strategy_factory, make_request):
        """Test fail with no challenge still rejects as unauthorized."""
        strategy = stub_strategy_factory(lambda s, req: s.fail())
        adapter = StrategyAdapter(strategy, "stub")

        with pytest.raises(StrategyUnauthorizedError) as exc_info:
            await adapter.authenticate(make_request())

        assert exc_info.value.challenge is None
        assert exc_info.value.message == "Unauthorized"

    @pytest.mark.asyncio
    async def test_error_raises_internal_error(self, stub_strategy_factory, make_request):
        """Test error rejects with the strategy's error."""
        strategy = stub_strategy_factory(lambda s, req: s.error("LDAP unreachable"))
        adapter = StrategyAdapter(strategy, "stub")

        with pytest.raises(StrategyInternalError) as exc_info:
            await adapter.authenticate(make_request())

        assert exc_info.value.error == "LDAP unreachable"
        assert exc_info.value.message == "LDAP unreachable"

    @pytest.mark.asyncio
    async def test_error_with_exception_is_chained(self, stub_strategy_factory, make_request):
        """Test an exception passed to error becomes the cause."""
        failure = ConnectionError("socket closed")
        strategy = stub_strategy_factory(lambda s, req: s.error(failure))
        adapter = StrategyAdapter(strategy, "stub")

        with pytest.raises(StrategyInternalError) as exc_info:
            await adapter.authenticate(make_request())

        assert exc_info.value.error is failure
        assert exc_info.value.__cause__ is failure

    @pytest.mark.asyncio
    async def test_first_outcome_wins(self, stub_strategy_factory, make_request):
        """Test only the first reported outcome is observed."""
        def success_then_fail(s, req):
            s.success({"id": 1})
            s.fail("too late")
            s.error("also too late")

        adapter = StrategyAdapter(stub_strategy_factory(success_then_fail), "stub")

        assert await adapter.authenticate(make_request()) == {"id": 1}

    @pytest.mark.asyncio
    async def test_first_outcome_wins_for_fail(self, stub_strategy_factory, make_request):
        """Test a fail followed by success still rejects."""
        def fail_then_success(s, req):
            s.fail("nope")
            s.success({"id": 1})

        adapter = StrategyAdapter(stub_strategy_factory(fail_then_success), "stub")

        with pytest.raises(StrategyUnauthorizedError):
            await adapter.authenticate(make_request())


class TestStrategyAdapterInvocation:
    """Test how the adapter invokes strategies."""

    @pytest.mark.asyncio
    async def test_async_strategy(self, delayed_strategy, make_request):
        """Test coroutine strategies are awaited."""
        adapter = StrategyAdapter(delayed_strategy, "delayed")

        result = await adapter.authenticate(make_request(delay=0.01, user_id="u-1"))

        assert result == {"id": "u-1"}

    @pytest.mark.asyncio
    async def test_concurrent_calls_do_not_interfere(self, delayed_strategy, make_request):
        """Test concurrent calls on one adapter each get their own outcome."""
        adapter = StrategyAdapter(delayed_strategy, "delayed")

        slow, fast, rejected = await asyncio.gather(
            adapter.authenticate(make_request(delay=0.05, user_id="slow")),
            adapter.authenticate(make_request(delay=0.01, user_id="fast")),
            adapter.authenticate(make_request(delay=0.03, user_id=None)),
            return_exceptions=True,
        )

        assert slow == {"id": "slow"}
        assert fast == {"id": "fast"}
        assert isinstance(rejected, StrategyUnauthorizedError)
        assert rejected.challenge == "no user after 0.03s"

    @pytest.mark.asyncio
    async def test_shared_strategy_is_not_mutated(self, stub_strategy_factory, make_request):
        """Test outcome handlers are attached to a per-call copy only."""
        strategy = stub_strategy_factory(lambda s, req: s.success({"id": 1}))
        adapter = StrategyAdapter(strategy, "stub")

        await adapter.authenticate(make_request())

        for slot in ("success", "fail", "error"):
            assert slot not in vars(strategy)
        assert len(strategy.invocations) == 1

    @pytest.mark.asyncio
    async def test_strategy_receives_compatible_request_and_options(self, stub_strategy_factory, make_request):
        """Test the strategy gets a wrapped request and the options."""
        strategy = stub_strategy_factory(lambda s, req: s.success({"id": 1}))
        adapter = StrategyAdapter(strategy, "stub")
        request = make_request()

        await adapter.authenticate(request, scope="profile")

        received, options = strategy.invocations[0]
        assert isinstance(received, CompatibleRequest)
        assert received.request is request
        assert options == {"scope": "profile"}

    @pytest.mark.asyncio
    async def test_request_login_does_not_touch_original(self, stub_strategy_factory, make_request):
        """Test request helpers work without changing the original request."""
        def login_and_succeed(s, req):
            req.login({"id": req.headers["x-user"]})
            s.success(req.user)

        adapter = StrategyAdapter(stub_strategy_factory(login_and_succeed), "stub")
        request = make_request(headers={"x-user": "alice"}, path="/items")

        result = await adapter.authenticate(request)

        assert result == {"id": "alice"}
        assert request.headers == {"x-user": "alice"}
        assert request.path == "/items"
        assert not hasattr(request, "login")
        assert not hasattr(request, "user")

    @pytest.mark.asyncio
    async def test_outcome_from_another_thread(self, make_request):
        """Test a strategy may report its outcome from a worker thread."""
        class ThreadedStrategy(Strategy):
            def authenticate(self, request, **options):
                threading.Thread(target=self.success, args=({"id": "threaded"},)).start()

        adapter = StrategyAdapter(ThreadedStrategy(), "threaded", timeout=5)

        assert await adapter.authenticate(make_request()) == {"id": "threaded"}

    def test_strategy_without_authenticate_is_rejected(self):
        """Test construction fails for objects that are not strategies."""
        with pytest.raises(TypeError):
            StrategyAdapter(object(), "broken")

    def test_name_and_strategy_are_exposed(self, stub_strategy_factory):
        strategy = stub_strategy_factory(lambda s, req: None)
        adapter = StrategyAdapter(strategy, "stub")

        assert adapter.name == "stub"
        assert adapter.strategy is strategy


class TestStrategyAdapterFailures:
    """Test exceptions and timeouts."""

    @pytest.mark.asyncio
    async def test_strategy_exception_is_normalized(self, stub_strategy_factory, make_request):
        """Test exceptions raised by the strategy become internal errors."""
        failure = KeyError("missing header")

        def explode(s, req):
            raise failure

        adapter = StrategyAdapter(stub_strategy_factory(explode), "stub")

        with pytest.raises(StrategyInternalError) as exc_info:
            await adapter.authenticate(make_request())

        assert exc_info.value.error is failure
        assert exc_info.value.__cause__ is failure

    @pytest.mark.asyncio
    async def test_strategy_exception_propagates_when_not_normalized(self, stub_strategy_factory, make_request):
        """Test raw propagation when normalization is switched off."""
        def explode(s, req):
            raise KeyError("missing header")

        adapter = StrategyAdapter(stub_strategy_factory(explode), "stub", normalize_exceptions=False)

        with pytest.raises(KeyError):
            await adapter.authenticate(make_request())

    @pytest.mark.asyncio
    async def test_exception_after_outcome_keeps_outcome(self, stub_strategy_factory, make_request):
        """Test an outcome reported before an exception still wins."""
        def succeed_then_explode(s, req):
            s.success({"id": 1})
            raise RuntimeError("cleanup failed")

        adapter = StrategyAdapter(stub_strategy_factory(succeed_then_explode), "stub")

        assert await adapter.authenticate(make_request()) == {"id": 1}

    @pytest.mark.asyncio
    async def test_exception_after_threaded_outcome_keeps_outcome(self, make_request):
        """Test an outcome reported from a worker thread still wins over a later exception."""
        class ThreadedThenRaisingStrategy(Strategy):
            def authenticate(self, request, **options):
                worker = threading.Thread(target=self.success, args=({"id": 1},))
                worker.start()
                worker.join()
                raise RuntimeError("cleanup failed")

        adapter = StrategyAdapter(ThreadedThenRaisingStrategy(), "threaded", timeout=5)

        assert await adapter.authenticate(make_request()) == {"id": 1}

    @pytest.mark.asyncio
    async def test_timeout(self, stub_strategy_factory, make_request):
        """Test a strategy that never reports times out."""
        adapter = StrategyAdapter(stub_strategy_factory(lambda s, req: None), "silent")

        with pytest.raises(StrategyTimeoutError) as exc_info:
            await adapter.authenticate(make_request(), timeout=0.05)

        assert exc_info.value.strategy_name == "silent"
        assert exc_info.value.timeout == 0.05
        assert isinstance(exc_info.value, StrategyInternalError)

    @pytest.mark.asyncio
    async def test_adapter_default_timeout(self, delayed_strategy, make_request):
        """Test the adapter-level timeout applies to async strategies."""
        adapter = StrategyAdapter(delayed_strategy, "delayed", timeout=0.01)

        with pytest.raises(StrategyTimeoutError):
            await adapter.authenticate(make_request(delay=1, user_id="late"))
