"""Record/replay diagnostic use cases shared by both services."""

from petclinic.external.interfaces import IRecorder
from petclinic.infrastructure.logging.config import get_logger


logger = get_logger(__name__)


class RecordingService:
    """Starts and saves recordings, never letting a tool failure reach the caller."""

    def __init__(self, recorder: IRecorder) -> None:
        self._recorder = recorder

    async def start(self) -> None:
        logger.info("recording_start")
        try:
            await self._recorder.start()
        except Exception as e:
            logger.error("recording_start_failed", error=str(e), error_type=type(e).__name__)

    async def save(self, filename: str) -> str:
        """Save the recording to ``filename`` and stop recording.

        A single leading ``/`` of the captured path is dropped before use.

        Args:
            filename: Path captured from the request URL

        Returns:
            The filename the recording was saved to
        """
        filename = filename.removeprefix("/")
        logger.info("recording_save", filename=filename)
        try:
            await self._recorder.save(filename)
            logger.info("recording_saved", filename=filename)
            await self._recorder.stop()
            logger.info("recording_stopped")
        except Exception as e:
            logger.error(
                "recording_save_failed",
                filename=filename,
                error=str(e),
                error_type=type(e).__name__,
            )
        return filename
