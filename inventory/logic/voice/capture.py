"""Single-shot voice capture.

One activation captures one utterance. ``CaptureSession`` is the state machine
(Idle -> Listening -> Completed | Errored, with stop/end returning to Idle) and
``capture_transcript`` runs one capture against a Recognizer as a cancellable
coroutine. The recognizer is stopped after a result or error and aborted on
cancellation, timeout or any other exit.
"""
from __future__ import annotations
import asyncio
import logging
from enum import Enum
from typing import Callable, Optional

from inventory.logic import status

logger = logging.getLogger(__name__)

UNSUPPORTED_ERROR = "not-supported"
TIMEOUT_ERROR = "timeout"


class CaptureState(Enum):
    IDLE = "idle"
    LISTENING = "listening"
    COMPLETED = "completed"
    ERRORED = "errored"


class InvalidTransition(Exception):
    def __init__(self, state: CaptureState, trigger: str):
        super().__init__(f"Cannot {trigger} while {state.value}")
        self.state = state
        self.trigger = trigger


class CaptureSession:
    def __init__(self):
        self.state = CaptureState.IDLE
        self.transcript: Optional[str] = None
        self.error: Optional[str] = None

    @property
    def is_listening(self) -> bool:
        return self.state is CaptureState.LISTENING

    def _require(self, trigger: str, *allowed: CaptureState):
        if self.state not in allowed:
            raise InvalidTransition(self.state, trigger)

    def start(self):
        self._require("start", CaptureState.IDLE, CaptureState.COMPLETED, CaptureState.ERRORED)
        self.state = CaptureState.LISTENING
        self.transcript = None
        self.error = None
        return self

    def receive_transcript(self, transcript: str):
        self._require("receive a transcript", CaptureState.LISTENING)
        self.state = CaptureState.COMPLETED
        self.transcript = transcript
        return self

    def receive_error(self, error: str):
        self._require("receive an error", CaptureState.LISTENING)
        self.state = CaptureState.ERRORED
        self.error = error
        logger.warning("Speech recognition error: %s", error)
        return self

    def unsupported(self):
        self._require("report unsupported", CaptureState.IDLE, CaptureState.COMPLETED, CaptureState.ERRORED)
        self.state = CaptureState.ERRORED
        self.error = UNSUPPORTED_ERROR
        return self

    def stop(self):
        """Explicit stop (or recognition end): leaves Listening, keeps a finished result."""
        if self.state is CaptureState.LISTENING:
            self.state = CaptureState.IDLE
        return self

    def reset(self):
        self.state = CaptureState.IDLE
        self.transcript = None
        self.error = None
        return self

    @property
    def status(self) -> str:
        if self.state is CaptureState.LISTENING:
            return status.LISTENING_STATUS
        if self.state is CaptureState.ERRORED:
            if self.error == UNSUPPORTED_ERROR:
                return status.UNSUPPORTED_STATUS
            return status.capture_error(self.error)
        return status.IDLE_STATUS

    @property
    def transcript_display(self) -> Optional[str]:
        if self.state is CaptureState.LISTENING:
            return status.LISTENING_TRANSCRIPT
        if self.state is CaptureState.ERRORED and self.error != UNSUPPORTED_ERROR:
            return status.ERROR_TRANSCRIPT
        if self.state is CaptureState.COMPLETED:
            return status.transcript_echo(self.transcript)
        return None

    def to_dict(self):
        return {
            'state': self.state.value,
            'listening': self.is_listening,
            'transcript': self.transcript,
            'error': self.error,
            'status': self.status,
            'transcript_display': self.transcript_display,
        }


class Recognizer:
    """Speech engine collaborator. Delivers at most one final transcript per start()."""

    def start(self, on_result: Callable[[str], None], on_error: Callable[[str], None],
              on_end: Callable[[], None]) -> None:
        raise NotImplementedError

    def stop(self) -> None:
        raise NotImplementedError

    def abort(self) -> None:
        raise NotImplementedError


class CaptureResult:
    def __init__(self, transcript: Optional[str] = None, error: Optional[str] = None):
        self.transcript = transcript
        self.error = error

    @property
    def ok(self) -> bool:
        return self.transcript is not None

    @property
    def status(self) -> str:
        if self.error == UNSUPPORTED_ERROR:
            return status.UNSUPPORTED_STATUS
        if self.error is not None:
            return status.capture_error(self.error)
        return status.IDLE_STATUS

    def __repr__(self) -> str:
        return f"CaptureResult(transcript={self.transcript!r}, error={self.error!r})"


async def capture_transcript(recognizer: Optional[Recognizer], *, timeout: Optional[float] = None,
                             session: Optional[CaptureSession] = None) -> CaptureResult:
    """Capture one utterance. Cancelling the awaiting task aborts the recognizer."""
    session = session or CaptureSession()
    if recognizer is None:
        session.unsupported()
        return CaptureResult(error=UNSUPPORTED_ERROR)

    loop = asyncio.get_running_loop()
    outcome: asyncio.Future = loop.create_future()

    def _settle(kind: str, value: Optional[str] = None):
        if not outcome.done():
            outcome.set_result((kind, value))

    session.start()
    finished = False
    try:
        recognizer.start(
            lambda text: loop.call_soon_threadsafe(_settle, "result", text),
            lambda error: loop.call_soon_threadsafe(_settle, "error", str(error)),
            lambda: loop.call_soon_threadsafe(_settle, "end"),
        )
        try:
            kind, value = await asyncio.wait_for(outcome, timeout)
        except asyncio.TimeoutError:
            session.receive_error(TIMEOUT_ERROR)
            return CaptureResult(error=TIMEOUT_ERROR)

        finished = True
        recognizer.stop()
        if kind == "result":
            session.receive_transcript(value)
            return CaptureResult(transcript=value)
        if kind == "error":
            session.receive_error(value)
            return CaptureResult(error=value)
        session.stop()
        return CaptureResult()
    finally:
        if not finished:
            recognizer.abort()
            session.stop()


__all__ = [
    'CaptureState', 'CaptureSession', 'InvalidTransition', 'Recognizer',
    'CaptureResult', 'capture_transcript', 'UNSUPPORTED_ERROR', 'TIMEOUT_ERROR'
]
