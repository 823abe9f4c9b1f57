# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.lists.create_list import CreateListUseCase
from .use_cases.lists.delete_list import DeleteListUseCase
from .use_cases.lists.get_list import GetListUseCase
from .use_cases.lists.list_lists import ListListsUseCase
from .use_cases.lists.patch_list import PatchListUseCase
from .use_cases.lists.push_item import PushItemUseCase
from .use_cases.lists.replace_list import ReplaceListUseCase
from .use_cases.users.login_user import LoginUserUseCase

__all__ = [
    "CreateListUseCase",
    "DeleteListUseCase",
    "GetListUseCase",
    "ListListsUseCase",
    "LoginUserUseCase",
    "PatchListUseCase",
    "PushItemUseCase",
    "ReplaceListUseCase",
]
