# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Application dependency container."""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import datetime, timedelta
from functools import cached_property

from shoplists.application import (
    CreateListUseCase,
    DeleteListUseCase,
    GetListUseCase,
    ListListsUseCase,
    LoginUserUseCase,
    PatchListUseCase,
    PushItemUseCase,
    ReplaceListUseCase,
)
from shoplists.infrastructure.auth import AccessGuard
from shoplists.infrastructure.repositories import (
    InMemoryCredentialStore,
    InMemoryListRepository,
    InMemorySessionRegistry,
)
from shoplists.infrastructure.repositories.sessions import utcnow
from shoplists.infrastructure.session_sweeper import SessionSweeper
from shoplists.interfaces.http.controllers.auth_controller import AuthController
from shoplists.interfaces.http.controllers.lists_controller import ListsController
from shoplists.interfaces.http.controllers.misc_controller import MiscController
from shoplists.shared.config import AppConfig


class Container:
    """Owns the process state and wires it into guards and controllers.

    One container holds one credential store, one session registry and one
    list store. The session registry and list store share ``state_lock``.
    """

    def __init__(
        self,
        config: AppConfig,
        *,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._config = config
        self._clock = clock

    @property
    def config(self) -> AppConfig:
        return self._config

    @cached_property
    def state_lock(self) -> threading.RLock:
        return threading.RLock()

    # Stores

    @cached_property
    def credential_store(self) -> InMemoryCredentialStore:
        return InMemoryCredentialStore.seeded(self._config.credentials)

    @cached_property
    def session_registry(self) -> InMemorySessionRegistry:
        return InMemorySessionRegistry(
            self.credential_store,
            lock=self.state_lock,
            ttl=timedelta(seconds=self._config.session.ttl_seconds),
            clock=self._clock,
        )

    @cached_property
    def list_repository(self) -> InMemoryListRepository:
        return InMemoryListRepository(lock=self.state_lock)

    @cached_property
    def session_sweeper(self) -> SessionSweeper:
        return SessionSweeper(self.session_registry, self._config.session.sweep_interval)

    @cached_property
    def access_guard(self) -> AccessGuard:
        return AccessGuard(sessions=self.session_registry, credentials=self.credential_store)

    # Use cases

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            credentials=self.credential_store,
            sessions=self.session_registry,
        )

    @cached_property
    def create_list_use_case(self) -> CreateListUseCase:
        return CreateListUseCase(lists=self.list_repository)

    @cached_property
    def list_lists_use_case(self) -> ListListsUseCase:
        return ListListsUseCase(lists=self.list_repository)

    @cached_property
    def get_list_use_case(self) -> GetListUseCase:
        return GetListUseCase(lists=self.list_repository)

    @cached_property
    def replace_list_use_case(self) -> ReplaceListUseCase:
        return ReplaceListUseCase(lists=self.list_repository)

    @cached_property
    def patch_list_use_case(self) -> PatchListUseCase:
        return PatchListUseCase(lists=self.list_repository)

    @cached_property
    def push_item_use_case(self) -> PushItemUseCase:
        return PushItemUseCase(lists=self.list_repository)

    @cached_property
    def delete_list_use_case(self) -> DeleteListUseCase:
        return DeleteListUseCase(lists=self.list_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(login_use_case=self.login_user_use_case)

    @cached_property
    def lists_controller(self) -> ListsController:
        return ListsController(
            guard=self.access_guard,
            create_list=self.create_list_use_case,
            list_lists=self.list_lists_use_case,
            get_list=self.get_list_use_case,
            replace_list=self.replace_list_use_case,
            patch_list=self.patch_list_use_case,
            push_item=self.push_item_use_case,
            delete_list=self.delete_list_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(lists=self.list_repository, sessions=self.session_registry)
