from typing import List, Optional, Sequence

from garden_assistant.modules.plant_assistant.domain.services.speech_capture import (
    SpeechCaptureStream,
    SpeechRecognizer,
    TranscriptEvent,
    TranscriptEventType,
)


class ScriptedRecognizer(SpeechRecognizer):
    def __init__(self, batches: List[Sequence], error: Optional[Exception] = None):
        self.batches = batches
        self.error = error
        self.started = 0
        self.stopped = 0

    def start(self):
        self.started += 1

    def stop(self):
        self.stopped += 1

    async def results(self):
        for batch in self.batches:
            yield batch
        if self.error is not None:
            raise self.error


async def collect(stream):
    return [event async for event in stream.events()]


async def test_interim_then_final_transcripts_end_with_end_event():
    recognizer = ScriptedRecognizer([
        [("گیاه من", False)],
        [("گیاه من ", True), ("زرد شده", False)],
        [("گیاه من زرد شده", True)],
    ])
    stream = SpeechCaptureStream(recognizer)

    events = await collect(stream)

    assert events == [
        TranscriptEvent(TranscriptEventType.INTERIM, "گیاه من"),
        TranscriptEvent(TranscriptEventType.INTERIM, "گیاه من زرد شده"),
        TranscriptEvent(TranscriptEventType.FINAL, "گیاه من زرد شده"),
        TranscriptEvent(TranscriptEventType.END),
    ]
    assert recognizer.started == 1
    assert recognizer.stopped == 1
    assert not stream.is_listening


async def test_recognizer_error_yields_error_then_end():
    recognizer = ScriptedRecognizer([[("سلام", False)]], error=RuntimeError("no-speech"))
    stream = SpeechCaptureStream(recognizer)

    events = await collect(stream)

    assert [e.type for e in events] == [
        TranscriptEventType.INTERIM,
        TranscriptEventType.ERROR,
        TranscriptEventType.END,
    ]
    assert events[1].text == "خطایی در تشخیص گفتار رخ داد."
    assert recognizer.stopped == 1


async def test_stop_during_capture_ends_stream():
    recognizer = ScriptedRecognizer([[("یک", True)], [("دو", True)], [("سه", True)]])
    stream = SpeechCaptureStream(recognizer)

    events = []
    async for event in stream.events():
        events.append(event)
        if event.text == "یک":
            stream.stop()

    assert [e.text for e in events] == ["یک", ""]
    assert events[-1].is_terminal
    assert recognizer.stopped == 1


def test_start_and_stop_are_idempotent():
    recognizer = ScriptedRecognizer([])
    stream = SpeechCaptureStream(recognizer)

    stream.start()
    stream.start()
    stream.stop()
    stream.stop()

    assert recognizer.started == 1
    assert recognizer.stopped == 1


def test_language_defaults_to_persian_and_is_configurable():
    assert SpeechCaptureStream(ScriptedRecognizer([])).language == "fa-IR"

    recognizer = ScriptedRecognizer([])
    SpeechCaptureStream(recognizer, language="en-US")
    assert recognizer.language == "en-US"
