"""Thread use cases."""

from .cancel_reply import CancelReplyRequest, CancelReplyUseCase
from .get_thread import GetThreadUseCase
from .submit_reply import SubmitReplyRequest, SubmitReplyResponse, SubmitReplyUseCase
from .toggle_collapse import ToggleCollapseRequest, ToggleCollapseUseCase
from .toggle_reply import ToggleReplyRequest, ToggleReplyUseCase
from .view import CommentView, ThreadResponse

__all__ = [
    "CancelReplyRequest",
    "CancelReplyUseCase",
    "CommentView",
    "GetThreadUseCase",
    "SubmitReplyRequest",
    "SubmitReplyResponse",
    "SubmitReplyUseCase",
    "ThreadResponse",
    "ToggleCollapseRequest",
    "ToggleCollapseUseCase",
    "ToggleReplyRequest",
    "ToggleReplyUseCase",
]
