import asyncio
import unittest

from conduit_state.core.errors import OperationFailure
from conduit_state.core.generation import ViewGeneration
from conduit_state.core.models import Action, ActionType
from conduit_state.pipeline.async_dispatch import AsyncDispatchMiddleware


async def _resolve(value):
    await asyncio.sleep(0)
    return value


async def _reject(exc: BaseException):
    await asyncio.sleep(0)
    raise exc


class AsyncDispatchTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.generation = ViewGeneration()
        self.dispatched: list[Action] = []
        self.forwarded: list[Action] = []
        self.middleware = AsyncDispatchMiddleware(dispatch=self.dispatched.append, generation=self.generation)

    def _forward(self, action: Action) -> str:
        self.forwarded.append(action)
        return "forwarded"

    async def test_plain_payload_is_forwarded_unchanged(self) -> None:
        action = Action(type=ActionType.UPDATE_FIELD_AUTH, key="email", value="a@b.com")
        result = self.middleware.handle(action, self._forward)
        self.assertEqual(result, "forwarded")
        self.assertEqual(self.forwarded, [action])
        self.assertEqual(self.dispatched, [])

    async def test_start_is_dispatched_before_handle_returns(self) -> None:
        settled = self.middleware.handle(Action(type=ActionType.LOGIN, payload=_resolve({"user": {}})), self._forward)
        self.assertEqual(self.dispatched, [Action(type=ActionType.ASYNC_START, subtype=ActionType.LOGIN)])
        self.assertEqual(self.forwarded, [])
        await settled

    async def test_settlement_is_never_synchronous(self) -> None:
        done = asyncio.get_running_loop().create_future()
        done.set_result({"user": {"token": "T1"}})
        settled = self.middleware.handle(Action(type=ActionType.LOGIN, payload=done), self._forward)
        self.assertEqual(self.forwarded, [])
        self.assertEqual(len(self.dispatched), 1)
        await settled
        self.assertEqual(len(self.forwarded), 1)

    async def test_success_forwards_resolved_payload(self) -> None:
        resolved = {"user": {"email": "a@b.com", "token": "T1"}}
        result = await self.middleware.handle(Action(type=ActionType.LOGIN, payload=_resolve(resolved)), self._forward)

        self.assertEqual(
            [a.type for a in self.dispatched],
            [ActionType.ASYNC_START, ActionType.ASYNC_END],
        )
        self.assertEqual(self.dispatched[1].subtype, ActionType.LOGIN)
        self.assertEqual(self.forwarded, [Action(type=ActionType.LOGIN, payload=resolved)])
        self.assertEqual(result, self.forwarded[0])
        self.assertFalse(result.error)

    async def test_operation_failure_forwards_error_body(self) -> None:
        failure = OperationFailure.from_errors({"email or password": ["is invalid"]})
        result = await self.middleware.handle(Action(type=ActionType.LOGIN, payload=_reject(failure)), self._forward)

        self.assertTrue(result.error)
        self.assertEqual(result.payload, {"errors": {"email or password": ["is invalid"]}})
        self.assertEqual([a.type for a in self.dispatched], [ActionType.ASYNC_START, ActionType.ASYNC_END])

    async def test_unexpected_exception_forwards_empty_error(self) -> None:
        with self.assertLogs("conduit_state.pipeline.async_dispatch", level="WARNING"):
            result = await self.middleware.handle(
                Action(type=ActionType.SET_PAGE, page=1, payload=_reject(ConnectionError("boom"))),
                self._forward,
            )
        self.assertTrue(result.error)
        self.assertIsNone(result.payload)
        self.assertEqual(result.page, 1)

    async def test_cancelled_operation_forwards_empty_error(self) -> None:
        pending = asyncio.get_running_loop().create_future()
        settled = self.middleware.handle(Action(type=ActionType.HOME_PAGE_LOADED, payload=pending), self._forward)
        pending.cancel()
        result = await settled
        self.assertTrue(result.error)
        self.assertIsNone(result.payload)

    async def test_stale_result_is_suppressed_but_end_still_emitted(self) -> None:
        settled = self.middleware.handle(Action(type=ActionType.LOGIN, payload=_resolve({"user": {}})), self._forward)
        self.generation.advance()

        result = await settled

        self.assertIsNone(result)
        self.assertEqual(self.forwarded, [])
        self.assertEqual(
            self.dispatched,
            [
                Action(type=ActionType.ASYNC_START, subtype=ActionType.LOGIN),
                Action(type=ActionType.ASYNC_END, subtype=ActionType.LOGIN),
            ],
        )

    async def test_stale_failure_is_suppressed(self) -> None:
        settled = self.middleware.handle(
            Action(type=ActionType.LOGIN, payload=_reject(OperationFailure({"errors": {}}))),
            self._forward,
        )
        self.generation.advance()
        self.assertIsNone(await settled)
        self.assertEqual(self.forwarded, [])

    async def test_stale_unexpected_failure_logs_no_warning(self) -> None:
        with self.assertNoLogs("conduit_state.pipeline.async_dispatch", level="WARNING"):
            settled = self.middleware.handle(
                Action(type=ActionType.SET_PAGE, page=1, payload=_reject(ConnectionError("reset"))),
                self._forward,
            )
            self.generation.advance()
            self.assertIsNone(await settled)
        self.assertEqual(self.forwarded, [])
        self.assertEqual(self.dispatched[-1], Action(type=ActionType.ASYNC_END, subtype=ActionType.SET_PAGE))

    async def test_concurrent_operations_balance(self) -> None:
        loop = asyncio.get_running_loop()
        first = loop.create_future()
        second = loop.create_future()
        settled_first = self.middleware.handle(Action(type=ActionType.SET_PAGE, page=1, payload=first), self._forward)
        settled_second = self.middleware.handle(Action(type=ActionType.SET_PAGE, page=2, payload=second), self._forward)

        second.set_result({"articles": [], "articlesCount": 0})
        await settled_second
        first.set_result({"articles": [], "articlesCount": 0})
        await settled_first

        starts = [a for a in self.dispatched if a.type == ActionType.ASYNC_START]
        ends = [a for a in self.dispatched if a.type == ActionType.ASYNC_END]
        self.assertEqual(len(starts), 2)
        self.assertEqual(len(ends), 2)
        self.assertEqual([a.page for a in self.forwarded], [2, 1])


class AsyncDispatchWithoutLoopTests(unittest.TestCase):
    def test_awaitable_outside_event_loop_raises(self) -> None:
        middleware = AsyncDispatchMiddleware(dispatch=lambda a: None, generation=ViewGeneration())
        coro = _resolve(1)
        try:
            with self.assertRaises(RuntimeError):
                middleware.handle(Action(type=ActionType.LOGIN, payload=coro), lambda a: a)
        finally:
            coro.close()


if __name__ == "__main__":
    unittest.main()
