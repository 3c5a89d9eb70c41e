"""Record/replay diagnostic endpoints.

Both services expose the same two operations under their own prefix, so
the router is built per prefix from the module-level handlers.
"""

from typing import Annotated

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse

from petclinic.app.usecases.recording_usecases import RecordingService
from petclinic.container import Container


@inject
async def start_recording(
    recording: Annotated[RecordingService, Depends(Provide[Container.recording_service])],
) -> Response:
    """Start recording this process. Tool failures are logged, never returned."""
    await recording.start()
    return Response(status_code=status.HTTP_200_OK)


@inject
async def save_recording(
    filename: str,
    recording: Annotated[RecordingService, Depends(Provide[Container.recording_service])],
) -> PlainTextResponse:
    """Save the recording to ``filename`` and stop recording."""
    saved = await recording.save(filename)
    return PlainTextResponse(f"Recording saved to {saved}")


def create_recording_router(prefix: str) -> APIRouter:
    """Build the recording routes under ``prefix``.

    Args:
        prefix: Path prefix ("/api/gateway" or "/owners")

    Returns:
        Router with ``startRecording`` and ``saveRecording/{filename}``
    """
    router = APIRouter(prefix=prefix, tags=["recording"])
    router.add_api_route(
        "/startRecording",
        start_recording,
        methods=["GET"],
        response_class=Response,
        summary="Start Recording",
        description="Attach the record/replay tool to this process",
    )
    router.add_api_route(
        "/saveRecording/{filename:path}",
        save_recording,
        methods=["GET"],
        response_class=PlainTextResponse,
        summary="Save Recording",
        description="Save the current recording to the given file and stop recording",
    )
    return router
