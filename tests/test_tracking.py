"""Tests for frame throttling, multi-frame confirmation and guidance."""

import pytest

from expiryscan.exceptions import ValidationError
from expiryscan.extraction import DateExtractor
from expiryscan.models import ResolvedDate
from expiryscan.tracking import (
    DetectionState,
    DetectionTracker,
    FrameThrottle,
    Guidance,
    guidance_for,
)

NOV_15 = ResolvedDate(year=2027, month=11, day=15)
DEC_01 = ResolvedDate(year=2027, month=12, day=1)


class TestFrameThrottle:
    """Tests for FrameThrottle."""

    def test_every_nth_frame(self):
        throttle = FrameThrottle(interval=10)
        processed = [i for i in range(1, 31) if throttle.should_process()]

        assert processed == [10, 20, 30]
        assert throttle.frames_seen == 30

    def test_interval_one(self):
        throttle = FrameThrottle(interval=1)
        assert all(throttle.should_process() for _ in range(5))

    def test_reset(self):
        throttle = FrameThrottle(interval=3)
        throttle.should_process()
        throttle.should_process()
        throttle.reset()
        assert throttle.frames_seen == 0
        assert not throttle.should_process()

    def test_invalid_interval(self):
        with pytest.raises(ValidationError):
            FrameThrottle(interval=0)

    def test_from_settings(self):
        from expiryscan.config import settings

        assert FrameThrottle.from_settings().interval == settings.frame_interval


class TestDetectionTracker:
    """Tests for the confirmation state machine."""

    def test_initial_state(self):
        tracker = DetectionTracker()
        assert tracker.state is DetectionState.SEARCHING
        assert tracker.candidate is None
        assert tracker.seen_count == 0
        assert tracker.confirmed_date is None

    def test_confirms_after_required_frames(self):
        tracker = DetectionTracker(required=3)

        assert tracker.observe(NOV_15) is DetectionState.CANDIDATE
        assert tracker.observe(NOV_15) is DetectionState.CANDIDATE
        assert tracker.seen_count == 2
        assert tracker.observe(NOV_15) is DetectionState.CONFIRMED
        assert tracker.confirmed_date == NOV_15

    def test_equal_dates_from_separate_extractions(self):
        """Dates from different frames compare by value."""
        extractor = DateExtractor()
        tracker = DetectionTracker(required=2)

        tracker.observe(extractor.extract(["EXP 15/11/2027"]).date)
        state = tracker.observe(extractor.extract(["15.11.2027"]).date)
        assert state is DetectionState.CONFIRMED

    def test_frame_without_date_resets(self):
        tracker = DetectionTracker(required=3)
        tracker.observe(NOV_15)
        tracker.observe(NOV_15)

        assert tracker.observe(None) is DetectionState.SEARCHING
        assert tracker.candidate is None
        assert tracker.seen_count == 0

    def test_different_date_restarts_count(self):
        tracker = DetectionTracker(required=3)
        tracker.observe(NOV_15)
        tracker.observe(NOV_15)

        assert tracker.observe(DEC_01) is DetectionState.CANDIDATE
        assert tracker.candidate == DEC_01
        assert tracker.seen_count == 1

    def test_confirmed_is_terminal(self):
        tracker = DetectionTracker(required=1)
        tracker.observe(NOV_15)

        assert tracker.observe(None) is DetectionState.CONFIRMED
        assert tracker.observe(DEC_01) is DetectionState.CONFIRMED
        assert tracker.confirmed_date == NOV_15

    def test_reset(self):
        tracker = DetectionTracker(required=1)
        tracker.observe(NOV_15)
        tracker.reset()

        assert tracker.state is DetectionState.SEARCHING
        assert tracker.confirmed_date is None

    def test_invalid_required(self):
        with pytest.raises(ValidationError):
            DetectionTracker(required=0)

    def test_from_settings(self):
        from expiryscan.config import settings

        assert DetectionTracker.from_settings().required == settings.confirmation_frames


class TestGuidance:
    """Tests for positioning hints on dateless frames."""

    def test_no_text(self):
        assert guidance_for([]) is Guidance.NO_TEXT
        assert guidance_for([None]) is Guidance.NO_TEXT  # type: ignore[list-item]

    def test_expiry_label_visible(self):
        assert guidance_for(["PARACETAMOL", "Exp"]) is Guidance.EXPIRY_AREA

    def test_too_much_text(self):
        texts = ["PARACETAMOL 500 MG TABLET FILM COATED"] * 4
        assert guidance_for(texts) is Guidance.TOO_MUCH_TEXT

    def test_too_little_text(self):
        assert guidance_for(["ABC", "12"]) is Guidance.MOVE_CLOSER

    def test_scanning(self):
        assert guidance_for(["PARACETAMOL 500 MG TABLET"]) is Guidance.SCANNING
