"""Tests for cancellation contexts."""
from unittest.mock import MagicMock

from authok.management import DeadlineExceededError, RequestCancelledError
from authok.management.context import Context


def test_on_cancel_runs_callback_on_cancel():
    ctx = Context.with_cancel()
    callback = MagicMock()

    ctx.on_cancel(callback)
    callback.assert_not_called()

    ctx.cancel()
    callback.assert_called_once_with()


def test_on_cancel_runs_at_once_when_already_cancelled():
    ctx = Context.with_cancel()
    ctx.cancel()
    callback = MagicMock()

    ctx.on_cancel(callback)

    callback.assert_called_once_with()


def test_on_cancel_fires_on_parent_cancel():
    parent = Context.with_cancel()
    child = Context.with_timeout(60, parent=parent)
    callback = MagicMock()

    child.on_cancel(callback)
    parent.cancel()

    callback.assert_called()
    assert child.cancelled


def test_unregistered_callback_is_not_run():
    parent = Context.with_cancel()
    child = Context.with_cancel(parent=parent)
    callback = MagicMock()

    unregister = child.on_cancel(callback)
    unregister()
    parent.cancel()
    child.cancel()

    callback.assert_not_called()


def test_cancel_is_idempotent():
    ctx = Context.with_cancel()
    callback = MagicMock()
    ctx.on_cancel(callback)

    ctx.cancel()
    ctx.cancel()

    callback.assert_called_once_with()


def test_cancellation_wins_over_expired_deadline():
    ctx = Context.with_timeout(0)
    assert isinstance(ctx.error(), DeadlineExceededError)

    ctx.cancel()
    assert isinstance(ctx.error(), RequestCancelledError)
