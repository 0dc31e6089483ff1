"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_thread import GetThreadRequest, GetThreadResponse, GetThreadUseCase
from .thread_view import (
    NodeViewState,
    ThreadNodeView,
    ThreadViewState,
    ThreadViewStore,
    render_thread,
)
from .toggle_thread_state import (
    ThreadToggle,
    ToggleThreadStateRequest,
    ToggleThreadStateResponse,
    ToggleThreadStateUseCase,
)

__all__ = [
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
    "NodeViewState",
    "ThreadNodeView",
    "ThreadToggle",
    "ThreadViewState",
    "ThreadViewStore",
    "ToggleThreadStateRequest",
    "ToggleThreadStateResponse",
    "ToggleThreadStateUseCase",
    "render_thread",
]
