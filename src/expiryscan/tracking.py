"""Frame sampling and multi-frame confirmation.

The extractor is stateless and judges one frame at a time. A live camera
feed needs two more things, both owned by the caller's frame loop:

- FrameThrottle: only every Nth frame is sent for recognition.
- DetectionTracker: a date is acted on only once the same date has been
  seen in several consecutive processed frames.

Example:
    ```python
    throttle = FrameThrottle(interval=10)
    tracker = DetectionTracker(required=3)
    extractor = DateExtractor()

    for frame in camera:
        if not throttle.should_process():
            continue
        texts = recognizer(frame)
        match = extractor.extract(texts)
        state = tracker.observe(match.date if match else None)
        if state is DetectionState.CONFIRMED:
            notify(tracker.confirmed_date)
            break
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from expiryscan.exceptions import ValidationError
from expiryscan.models import ResolvedDate

logger = logging.getLogger(__name__)


class FrameThrottle:
    """Let through every Nth frame.

    Attributes:
        interval: N. An interval of 1 lets every frame through.
    """

    def __init__(self, interval: int = 10) -> None:
        if interval < 1:
            raise ValidationError("interval", "must be at least 1")
        self.interval = interval
        self._count = 0

    @classmethod
    def from_settings(cls) -> FrameThrottle:
        from expiryscan.config import settings

        return cls(interval=settings.frame_interval)

    def should_process(self) -> bool:
        """Count one frame; True on the Nth, 2Nth, ... call."""
        self._count += 1
        return self._count % self.interval == 0

    @property
    def frames_seen(self) -> int:
        return self._count

    def reset(self) -> None:
        self._count = 0


class DetectionState(str, Enum):
    """Where the tracker is in the confirmation cycle."""

    SEARCHING = "searching"  # No date in the last processed frame
    CANDIDATE = "candidate"  # A date seen, not yet often enough
    CONFIRMED = "confirmed"  # Same date seen in `required` frames in a row


class DetectionTracker:
    """State machine: SEARCHING -> CANDIDATE(date, seen_count) -> CONFIRMED.

    - A frame without a date resets to SEARCHING.
    - The same date as the current candidate increments seen_count.
    - A different date restarts the count at 1 with the new date.
    - Reaching `required` confirms. CONFIRMED is terminal until reset().

    Attributes:
        required: Consecutive sightings needed to confirm.
    """

    def __init__(self, required: int = 3) -> None:
        if required < 1:
            raise ValidationError("required", "must be at least 1")
        self.required = required
        self._state = DetectionState.SEARCHING
        self._candidate: ResolvedDate | None = None
        self._seen = 0

    @classmethod
    def from_settings(cls) -> DetectionTracker:
        from expiryscan.config import settings

        return cls(required=settings.confirmation_frames)

    @property
    def state(self) -> DetectionState:
        return self._state

    @property
    def candidate(self) -> ResolvedDate | None:
        """Date currently being confirmed (or the confirmed date)."""
        return self._candidate

    @property
    def seen_count(self) -> int:
        return self._seen

    @property
    def confirmed_date(self) -> ResolvedDate | None:
        return self._candidate if self._state is DetectionState.CONFIRMED else None

    def observe(self, found: ResolvedDate | None) -> DetectionState:
        """Feed the result of one processed frame.

        Args:
            found: The date extracted from the frame, or None.

        Returns:
            The state after this frame.
        """
        if self._state is DetectionState.CONFIRMED:
            return self._state

        if found is None:
            if self._state is not DetectionState.SEARCHING:
                logger.debug("Lost candidate %s after %d frames", self._candidate, self._seen)
            self._state = DetectionState.SEARCHING
            self._candidate = None
            self._seen = 0
            return self._state

        if found == self._candidate:
            self._seen += 1
        else:
            self._candidate = found
            self._seen = 1

        if self._seen >= self.required:
            self._state = DetectionState.CONFIRMED
            logger.debug("Confirmed %s after %d frames", found, self._seen)
        else:
            self._state = DetectionState.CANDIDATE
        return self._state

    def reset(self) -> None:
        """Return to SEARCHING, forgetting any candidate."""
        self._state = DetectionState.SEARCHING
        self._candidate = None
        self._seen = 0


class Guidance(str, Enum):
    """Positioning hint for a frame in which no date was found.

    The caller turns these into spoken or on-screen prompts.
    """

    NO_TEXT = "no_text"
    EXPIRY_AREA = "expiry_area"  # Expiry label visible, hold steady
    TOO_MUCH_TEXT = "too_much_text"  # Focus on the expiry area
    MOVE_CLOSER = "move_closer"
    SCANNING = "scanning"


TOO_MUCH_TEXT_CHARS = 100
TOO_LITTLE_TEXT_CHARS = 20


def guidance_for(texts: Sequence[str]) -> Guidance:
    """Pick a positioning hint from the text of a dateless frame."""
    texts = [t for t in texts if isinstance(t, str)]
    if not texts:
        return Guidance.NO_TEXT
    joined = " ".join(texts).upper()
    if "EXP" in joined:
        return Guidance.EXPIRY_AREA
    if len(joined) > TOO_MUCH_TEXT_CHARS:
        return Guidance.TOO_MUCH_TEXT
    if len(joined) < TOO_LITTLE_TEXT_CHARS:
        return Guidance.MOVE_CLOSER
    return Guidance.SCANNING
