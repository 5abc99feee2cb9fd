# server/api/social.py

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from api.auth import get_current_user


# -------------------------------
# Social graph placeholders
# -------------------------------

# Authenticated, but no behaviour behind them yet.
router = APIRouter(dependencies=[Depends(get_current_user)], default_response_class=PlainTextResponse)


@router.post("/request")
def send_request():
    return "Request handled"


@router.get("/pendingRequests")
def pending_requests():
    return "Pending requests fetched"


@router.post("/acceptRequest")
def accept_request():
    return "Request accepted"


@router.post("/updatePrivacySettings")
def update_privacy_settings():
    return "Privacy settings updated"


@router.post("/likePost")
def like_post():
    return "Post liked"


@router.post("/addComment")
def add_comment():
    return "Comment added"
