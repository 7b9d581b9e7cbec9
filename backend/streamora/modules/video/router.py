"""API router for video endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from streamora.core.exceptions import InputValidationError, StorageError
from streamora.core.store import RecordStore, get_store
from streamora.modules.identity.dependencies import require_admin, require_session
from streamora.modules.identity.models import Session
from streamora.modules.video.schemas import (
    CommentCreate,
    EmbedVideoCreate,
    VideoCreate,
    VideoListResponse,
    VideoResponse,
)
from streamora.modules.video.service import VideoService

router = APIRouter(prefix="/videos", tags=["videos"])


def _video_list(videos) -> VideoListResponse:
    return VideoListResponse(
        videos=[VideoResponse.model_validate(v.model_dump()) for v in videos],
        total=len(videos),
    )


def _not_found(video_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Video {video_id} not found",
    )


@router.get("/feed/home", response_model=VideoListResponse)
def get_home_feed(store: RecordStore = Depends(get_store)):
    """Get promoted long and embedded videos with thumbnails."""
    return _video_list(VideoService(store).home_feed())


@router.get("/feed/shorts", response_model=VideoListResponse)
def get_shorts_feed(store: RecordStore = Depends(get_store)):
    """Get all shorts."""
    return _video_list(VideoService(store).shorts_feed())


@router.get("/search", response_model=VideoListResponse)
def search_videos(
    q: str = Query(..., min_length=1),
    store: RecordStore = Depends(get_store),
):
    """Search titles and tags."""
    return _video_list(VideoService(store).search(q))


@router.get("/uploader/{handle}", response_model=VideoListResponse)
def get_uploader_videos(handle: str, store: RecordStore = Depends(get_store)):
    """Get every video uploaded by a creator."""
    return _video_list(VideoService(store).list_by_uploader(handle))


@router.post("", response_model=VideoResponse, status_code=status.HTTP_201_CREATED)
def publish_video(
    request: VideoCreate,
    session: Session = Depends(require_session),
    store: RecordStore = Depends(get_store),
):
    """Publish an uploaded video for the signed-in creator."""
    try:
        video = VideoService(store).publish(session.secret_handle, session.public_name, request)
    except InputValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    return VideoResponse.model_validate(video.model_dump())


@router.post("/embed", response_model=VideoResponse, status_code=status.HTTP_201_CREATED)
def embed_video(
    request: EmbedVideoCreate,
    session: Session = Depends(require_admin),
    store: RecordStore = Depends(get_store),
):
    """Embed a YouTube or Rumble video as a platform video."""
    try:
        video = VideoService(store).embed(session.secret_handle, request)
    except InputValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    return VideoResponse.model_validate(video.model_dump())


@router.get("/{video_id}", response_model=VideoResponse)
def get_video(video_id: str, store: RecordStore = Depends(get_store)):
    """Get video by ID."""
    video = VideoService(store).get_video(video_id)
    if not video:
        raise _not_found(video_id)
    return VideoResponse.model_validate(video.model_dump())


@router.delete("/{video_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_video(
    video_id: str,
    session: Session = Depends(require_session),
    store: RecordStore = Depends(get_store),
):
    """Delete a video. Only its uploader or the admin may do this."""
    service = VideoService(store)
    video = service.get_video(video_id)
    if not video:
        raise _not_found(video_id)
    if video.uploader_handle != session.secret_handle and not session.is_privileged:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not your video")
    try:
        service.delete_video(video_id)
    except StorageError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))


@router.post("/{video_id}/view", response_model=VideoResponse)
def record_view(video_id: str, store: RecordStore = Depends(get_store)):
    """Count a view."""
    video = VideoService(store).record_view(video_id)
    if not video:
        raise _not_found(video_id)
    return VideoResponse.model_validate(video.model_dump())


@router.post("/{video_id}/like", response_model=VideoResponse)
def like_video(
    video_id: str,
    _: Session = Depends(require_session),
    store: RecordStore = Depends(get_store),
):
    """Like a video."""
    video = VideoService(store).like(video_id)
    if not video:
        raise _not_found(video_id)
    return VideoResponse.model_validate(video.model_dump())


@router.post("/{video_id}/comments", response_model=VideoResponse)
def comment_on_video(
    video_id: str,
    request: CommentCreate,
    session: Session = Depends(require_session),
    store: RecordStore = Depends(get_store),
):
    """Comment on a video as the signed-in creator."""
    try:
        video = VideoService(store).comment(
            video_id, session.secret_handle, session.public_name, request.text
        )
    except InputValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    if not video:
        raise _not_found(video_id)
    return VideoResponse.model_validate(video.model_dump())
