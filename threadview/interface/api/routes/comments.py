"""Comment thread routes.

Every action returns the full updated thread so the client can re-render
from it. Unknown comment IDs are not an error: the thread comes back with
transient state reset and nothing else changed.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel, Field

from threadview.application.usecase.thread import (
    CancelReplyRequest,
    CancelReplyUseCase,
    GetThreadUseCase,
    SubmitReplyRequest,
    SubmitReplyResponse,
    SubmitReplyUseCase,
    ThreadResponse,
    ToggleCollapseRequest,
    ToggleCollapseUseCase,
    ToggleReplyRequest,
    ToggleReplyUseCase,
)

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


@router.get("", response_model=ThreadResponse)
async def get_thread(
    get_thread_use_case: FromDishka[GetThreadUseCase],
) -> ThreadResponse:
    """Get the whole comment thread.

    Args:
        get_thread_use_case: Get thread use case from DI

    Returns:
        Thread with collapsed replies hidden
    """
    return await get_thread_use_case.execute()


@router.post("/{comment_id}/reply-box", response_model=ThreadResponse)
async def toggle_reply(
    comment_id: str,
    toggle_reply_use_case: FromDishka[ToggleReplyUseCase],
) -> ThreadResponse:
    """Open or close the reply box under a comment.

    Args:
        comment_id: Comment ID
        toggle_reply_use_case: Toggle reply use case from DI

    Returns:
        Updated thread
    """
    request = ToggleReplyRequest(comment_id=comment_id)
    return await toggle_reply_use_case.execute(request)


@router.post("/{comment_id}/reply-box/cancel", response_model=ThreadResponse)
async def cancel_reply(
    comment_id: str,
    cancel_reply_use_case: FromDishka[CancelReplyUseCase],
) -> ThreadResponse:
    """Cancel the reply in progress under a comment.

    Args:
        comment_id: Comment ID
        cancel_reply_use_case: Cancel reply use case from DI

    Returns:
        Updated thread
    """
    request = CancelReplyRequest(comment_id=comment_id)
    return await cancel_reply_use_case.execute(request)


@router.post("/{comment_id}/collapse", response_model=ThreadResponse)
async def toggle_collapse(
    comment_id: str,
    toggle_collapse_use_case: FromDishka[ToggleCollapseUseCase],
) -> ThreadResponse:
    """Collapse or expand the replies of a comment.

    Args:
        comment_id: Comment ID
        toggle_collapse_use_case: Toggle collapse use case from DI

    Returns:
        Updated thread
    """
    request = ToggleCollapseRequest(comment_id=comment_id)
    return await toggle_collapse_use_case.execute(request)


class SubmitReplyAPIRequest(BaseModel):
    """API request for submitting a reply."""

    # Empty text is accepted and ignored
    text: str = Field(max_length=10000)


@router.post("/{comment_id}/replies", response_model=SubmitReplyResponse)
async def submit_reply(
    comment_id: str,
    request: SubmitReplyAPIRequest,
    submit_reply_use_case: FromDishka[SubmitReplyUseCase],
) -> SubmitReplyResponse:
    """Add a reply under a comment.

    Args:
        comment_id: Comment being replied to
        request: Reply text
        submit_reply_use_case: Submit reply use case from DI

    Returns:
        Updated thread and the new reply ID (null if the text was empty)
    """
    use_case_request = SubmitReplyRequest(comment_id=comment_id, text=request.text)
    return await submit_reply_use_case.execute(use_case_request)
