# 📄 File: garden_assistant/modules/plant_assistant/domain/services/speech_capture.py
# 🧭 Purpose (Layman Explanation):
# Lets the user speak a question instead of typing it. While they talk we keep showing
# what has been understood so far, and we say so politely if recognition fails.
# 🧪 Purpose (Technical Summary):
# Adapts a platform speech recognizer (start/stop plus async batches of
# (transcript, is_final) segments) into a cancellable async stream of transcript events
# that always terminates with exactly one END event.
# 🔗 Dependencies:
# abc, asyncio-compatible async iterators, prompts (error message), logging
# 🔄 Connected Modules / Calls From:
# Chat input integrations, tests

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import AsyncIterator, List, Optional, Sequence, Tuple

from garden_assistant.modules.plant_assistant.domain.prompts import SPEECH_ERROR_MESSAGE
from garden_assistant.shared.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SPEECH_LANGUAGE = "fa-IR"

# (transcript, is_final)
Segment = Tuple[str, bool]


class TranscriptEventType(str, Enum):
    INTERIM = "interim"
    FINAL = "final"
    ERROR = "error"
    END = "end"


@dataclass(frozen=True)
class TranscriptEvent:
    type: TranscriptEventType
    text: str = ""

    @property
    def is_terminal(self) -> bool:
        return self.type == TranscriptEventType.END


class SpeechRecognizer(ABC):
    """Platform speech recognition capability."""

    language: str = DEFAULT_SPEECH_LANGUAGE

    @abstractmethod
    def start(self) -> None:
        """Begin capturing audio."""

    @abstractmethod
    def stop(self) -> None:
        """Stop capturing audio."""

    @abstractmethod
    def results(self) -> AsyncIterator[Sequence[Segment]]:
        """Yield result batches until capture ends."""


class SpeechCaptureStream:
    """
    Cancellable transcript stream over a SpeechRecognizer.

    The consumer decides when to commit the latest text; this stream only
    reports what has been recognized so far.
    """

    def __init__(self, recognizer: SpeechRecognizer, language: Optional[str] = None):
        self.recognizer = recognizer
        self.language = language or DEFAULT_SPEECH_LANGUAGE
        self.recognizer.language = self.language
        self._listening = False

    @property
    def is_listening(self) -> bool:
        return self._listening

    def start(self) -> None:
        if self._listening:
            return
        self.recognizer.start()
        self._listening = True
        logger.debug("Speech capture started", extra={"language": self.language})

    def stop(self) -> None:
        if not self._listening:
            return
        self._listening = False
        self.recognizer.stop()
        logger.debug("Speech capture stopped")

    @staticmethod
    def transcript_event(batch: Sequence[Segment]) -> TranscriptEvent:
        """Concatenate final text then interim text for one result batch."""
        final_parts: List[str] = []
        interim_parts: List[str] = []
        for text, is_final in batch:
            (final_parts if is_final else interim_parts).append(text)

        event_type = TranscriptEventType.INTERIM if interim_parts else TranscriptEventType.FINAL
        return TranscriptEvent(event_type, "".join(final_parts) + "".join(interim_parts))

    async def events(self) -> AsyncIterator[TranscriptEvent]:
        """
        Yield transcript events for the current capture.

        A recognizer failure becomes one ERROR event. Stopping the stream
        (or the recognizer running out of results) ends iteration; END is
        always the last event.
        """
        if not self._listening:
            self.start()

        try:
            async for batch in self.recognizer.results():
                if not self._listening:
                    break
                yield self.transcript_event(batch)
        except Exception as e:
            logger.warning(
                f"Speech recognition failed: {e}",
                extra={"error_type": type(e).__name__, "language": self.language},
            )
            yield TranscriptEvent(TranscriptEventType.ERROR, SPEECH_ERROR_MESSAGE)
        finally:
            self.stop()

        yield TranscriptEvent(TranscriptEventType.END)
