#!/usr/bin/env python3
"""Live-feed confirmation demonstration.

Simulates a camera feed: only every Nth frame is recognized, and a date is
acted on only after the same date was extracted from several processed
frames in a row. Frames without a date produce a positioning hint.

Usage:
    python examples/local/frame_loop_demo.py
"""

from expiryscan import (
    DateExtractor,
    DetectionState,
    DetectionTracker,
    FrameThrottle,
    bind_context,
    classify,
    configure_logging,
    get_logger,
    guidance_for,
)

# OCR output for each processed frame; the recognizer itself is not part of
# this package
RECOGNIZED = [
    [],
    ["PARACETAMOL"],
    ["PARACETAMOL 500 MG", "EXP"],
    ["PARACETAMOL 500 MG", "EXP 15/11/2027"],
    ["EXP 15/11/2021"],
    ["EXP 15/11/2027"],
    ["EXP. 15/11/2027", "BATCH 2211"],
    ["EXP 15/11/2027"],
]


def main() -> None:
    """Run the frame loop demo."""
    configure_logging(level="INFO", format="text")
    logger = get_logger("frame_loop_demo")
    bind_context(session_id="demo")

    extractor = DateExtractor()
    throttle = FrameThrottle(interval=5)
    tracker = DetectionTracker(required=3)

    results = iter(RECOGNIZED)
    frame = 0
    while True:
        frame += 1
        if not throttle.should_process():
            continue
        texts = next(results, None)
        if texts is None:
            logger.info("Feed ended without confirmation", frames=frame)
            return

        match = extractor.extract(texts)
        state = tracker.observe(match.date if match else None)
        if match is None:
            logger.info("No date", frame=frame, hint=guidance_for(texts).value)
            continue

        logger.info(
            "Date seen",
            frame=frame,
            date=match.date.isoformat(),
            state=state.value,
            seen=tracker.seen_count,
        )
        if state is DetectionState.CONFIRMED:
            report = classify(tracker.confirmed_date)
            logger.info(
                "Confirmed",
                date=report.expiry.isoformat(),
                days_remaining=report.days_remaining,
                status=report.status.value,
            )
            return


if __name__ == "__main__":
    main()
