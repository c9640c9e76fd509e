"""
Stream bridge API: HLS playlist/segment redirects and the RTMP publish callback.

Responses carry no body. Callers (video players, the RTMP server) only
look at the status code and, on success, the redirect target.
"""

# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse, Response

# Local application imports
from ...application.dto.stream_dto import StreamCommand, StreamOutcome
from ...application.use_cases.stream.request_stream import RequestStreamUseCase
from ...core.config import get_settings
from ...di.container import get_container
from ...infrastructure.streaming import StreamActivityTracker

logger = logging.getLogger(__name__)

router = APIRouter(tags=["streams"])

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}


def _hls_redirect(camera_exid: str, filename: str) -> RedirectResponse:
    hls_url = get_settings().hls_url.rstrip("/")
    return RedirectResponse(
        url=f"{hls_url}/{camera_exid}/{filename}",
        status_code=302,
        headers=CORS_HEADERS,
    )


# Declared before the segment route so the playlist is never treated as a segment
@router.get("/live/{token}/index.m3u8")
async def get_playlist(token: str, camera_id: str, request: Request) -> Response:
    """
    Ensure the camera's transcoder runs, wait for its playlist, then redirect to it
    
    Args:
        token: Stream token embedding the camera credentials and RTSP URL
        camera_id: Camera external ID
        request: Incoming request, used to stop polling when the client disconnects
    """
    container = get_container()
    request_stream_use_case = container.get(RequestStreamUseCase)
    
    outcome = await request_stream_use_case.execute(
        camera_exid=camera_id,
        token=token,
        command=StreamCommand.CHECK,
        is_cancelled=request.is_disconnected,
    )
    
    if outcome.status_code == 200:
        return _hls_redirect(camera_id, "index.m3u8")
    
    logger.debug("Playlist request for camera %s ended as %s", camera_id, outcome.value)
    return Response(status_code=outcome.status_code)


@router.get("/live/{token}/{filename}")
async def get_segment(token: str, filename: str, camera_id: str) -> RedirectResponse:
    """Redirect a segment request to the HLS server"""
    container = get_container()
    container.get(StreamActivityTracker).touch_existing(camera_id)
    return _hls_redirect(camera_id, filename)


@router.api_route("/rtmp/auth", methods=["GET", "POST"])
async def rtmp_auth(request: Request) -> Response:
    """
    RTMP publish callback: restart the camera's transcoder
    
    nginx-rtmp sends name and token as a form-encoded POST body; they are also
    accepted from the query string. Form values win when both are present.
    A missing name or token is rejected with 401 like any other bad token.
    """
    params = dict(request.query_params)
    content_type = request.headers.get("content-type", "")
    if request.method == "POST" and content_type.startswith(
        ("application/x-www-form-urlencoded", "multipart/form-data")
    ):
        form = await request.form()
        params.update({key: value for key, value in form.items() if isinstance(value, str)})
    
    container = get_container()
    request_stream_use_case = container.get(RequestStreamUseCase)
    
    outcome: StreamOutcome = await request_stream_use_case.execute(
        camera_exid=params.get("name", ""),
        token=params.get("token", ""),
        command=StreamCommand.KILL,
    )
    return Response(status_code=outcome.status_code)
