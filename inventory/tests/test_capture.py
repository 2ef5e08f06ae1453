import asyncio
import unittest
import pytest
from inventory.logic.voice.capture import (
    CaptureSession, CaptureState, InvalidTransition, Recognizer, capture_transcript,
    TIMEOUT_ERROR, UNSUPPORTED_ERROR
)


class FakeRecognizer(Recognizer):
    """Recognizer that replays a scripted outcome when started."""

    def __init__(self, transcript=None, error=None, silent=False):
        self.transcript = transcript
        self.error = error
        self.silent = silent
        self.calls = []

    def start(self, on_result, on_error, on_end):
        self.calls.append("start")
        if self.silent:
            return
        if self.error is not None:
            on_error(self.error)
        elif self.transcript is not None:
            on_result(self.transcript)
        on_end()

    def stop(self):
        self.calls.append("stop")

    def abort(self):
        self.calls.append("abort")


class TestCaptureSession(unittest.TestCase):

    def setUp(self):
        self.session = CaptureSession()

    def test_result_flow(self):
        self.session.start()
        self.assertEqual(self.session.state, CaptureState.LISTENING)
        self.assertEqual(self.session.status, "Listening... Speak your command")
        self.session.receive_transcript("I used 5 syringes")
        self.assertEqual(self.session.state, CaptureState.COMPLETED)
        self.assertEqual(self.session.transcript_display, 'You said: "I used 5 syringes"')
        # the recognizer's end event keeps the finished result
        self.session.stop()
        self.assertEqual(self.session.state, CaptureState.COMPLETED)

    def test_error_flow(self):
        self.session.start().receive_error("no-speech")
        self.assertEqual(self.session.state, CaptureState.ERRORED)
        self.assertEqual(self.session.status, "Error: no-speech")
        self.assertEqual(self.session.transcript_display, "Error occurred. Please try again.")

    def test_explicit_stop_returns_to_idle(self):
        self.session.start().stop()
        self.assertEqual(self.session.state, CaptureState.IDLE)
        self.assertEqual(self.session.status, "Click the button and speak your inventory update")

    def test_reactivation_after_result(self):
        self.session.start().receive_transcript("remove 3 bandages")
        self.session.start()
        self.assertTrue(self.session.is_listening)
        self.assertIsNone(self.session.transcript)

    def test_invalid_transitions(self):
        with self.assertRaises(InvalidTransition):
            self.session.receive_transcript("too early")
        self.session.start()
        with self.assertRaises(InvalidTransition):
            self.session.start()

    def test_unsupported(self):
        self.session.unsupported()
        self.assertEqual(self.session.status,
                         "Speech recognition not supported. Please use Chrome, Edge, or Safari.")


@pytest.mark.asyncio
async def test_capture_returns_transcript_and_stops_recognizer():
    recognizer = FakeRecognizer(transcript="I used 5 syringes")
    session = CaptureSession()
    result = await capture_transcript(recognizer, session=session)
    assert result.ok
    assert result.transcript == "I used 5 syringes"
    assert recognizer.calls == ["start", "stop"]
    assert session.state is CaptureState.COMPLETED


@pytest.mark.asyncio
async def test_capture_error_is_reported():
    recognizer = FakeRecognizer(error="network")
    result = await capture_transcript(recognizer)
    assert not result.ok
    assert result.status == "Error: network"
    assert recognizer.calls == ["start", "stop"]


@pytest.mark.asyncio
async def test_capture_without_recognizer_is_unsupported():
    result = await capture_transcript(None)
    assert result.error == UNSUPPORTED_ERROR
    assert "not supported" in result.status


@pytest.mark.asyncio
async def test_capture_timeout_aborts_recognizer():
    recognizer = FakeRecognizer(silent=True)
    session = CaptureSession()
    result = await capture_transcript(recognizer, timeout=0.01, session=session)
    assert result.error == TIMEOUT_ERROR
    assert recognizer.calls == ["start", "abort"]
    assert session.state is CaptureState.ERRORED


@pytest.mark.asyncio
async def test_capture_cancel_aborts_recognizer():
    recognizer = FakeRecognizer(silent=True)
    session = CaptureSession()
    task = asyncio.create_task(capture_transcript(recognizer, session=session))
    await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert recognizer.calls == ["start", "abort"]
    assert session.state is CaptureState.IDLE


@pytest.mark.asyncio
async def test_capture_end_without_result():
    recognizer = FakeRecognizer()
    session = CaptureSession()
    result = await capture_transcript(recognizer, session=session)
    assert result.transcript is None and result.error is None
    assert session.state is CaptureState.IDLE
