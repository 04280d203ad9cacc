"""todo-ui - server-rendered todo list over a tRPC todo API.

Public API exports:
- Data model (Todo, Status)
- Remote API (TodoApi protocol, tRPC client, in-memory API)
- View models (TodoListModel, CreateTodoModel, TodoPage)
- Components (TodoList, IndexPage, ...)
"""

# Data model
from todo_ui.models import Status, Todo, normalize_statuses

# Errors
from todo_ui.errors import RemoteCallError, TodoUIError, UnknownViewError

# Configuration
from todo_ui.config import Settings, get_settings

# Remote API
from todo_ui.client import TodoApi, TrpcClient, TrpcTodoApi
from todo_ui.memory import InMemoryTodoApi

# View models
from todo_ui.mutation import Mutation
from todo_ui.views import ALL_VIEW, CreateTodoModel, TodoListModel, TodoPage

# Rendering
from todo_ui.markup import component
from todo_ui.styles import STATUS_STYLES, StyleDescriptor, style_for
from todo_ui.components import (
    CheckIcon,
    CreateTodoForm,
    IndexPage,
    TabTrigger,
    TodoItem,
    TodoList,
    XMarkIcon,
)

__all__ = [
    # Data model
    'Status',
    'Todo',
    'normalize_statuses',
    # Errors
    'TodoUIError',
    'RemoteCallError',
    'UnknownViewError',
    # Configuration
    'Settings',
    'get_settings',
    # Remote API
    'TodoApi',
    'TrpcClient',
    'TrpcTodoApi',
    'InMemoryTodoApi',
    # View models
    'Mutation',
    'ALL_VIEW',
    'TodoListModel',
    'CreateTodoModel',
    'TodoPage',
    # Rendering
    'component',
    'STATUS_STYLES',
    'StyleDescriptor',
    'style_for',
    'CheckIcon',
    'XMarkIcon',
    'TodoItem',
    'TodoList',
    'TabTrigger',
    'CreateTodoForm',
    'IndexPage',
]
