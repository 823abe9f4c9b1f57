from datetime import timedelta

from shoplists.infrastructure.repositories import InMemoryCredentialStore, InMemorySessionRegistry
from shoplists.infrastructure.session_sweeper import SessionSweeper
from shoplists.shared.config import CredentialsConfig


def _registry(clock) -> InMemorySessionRegistry:
    return InMemorySessionRegistry(InMemoryCredentialStore.seeded(CredentialsConfig()), clock=clock)


def test_sweep_once_purges_expired_sessions(clock) -> None:
    registry = _registry(clock)
    registry.create("admin")
    clock.advance(timedelta(days=8))

    sweeper = SessionSweeper(registry, interval=60)

    assert sweeper.sweep_once() == 1
    assert registry.count() == 0


def test_start_and_stop_thread(clock) -> None:
    sweeper = SessionSweeper(_registry(clock), interval=60)

    sweeper.start()
    assert sweeper.running

    sweeper.stop()
    assert not sweeper.running
