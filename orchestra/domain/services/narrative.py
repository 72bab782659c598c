"""State machine for the scripted demo tour.

The tour is linear: ``welcome -> action -> resolve -> done``. Each step
advances only on its own event; leaving demo mode jumps to ``done`` from
anywhere, and ``done`` is terminal.
"""

from enum import Enum


class DemoStep(str, Enum):
    WELCOME = "welcome"
    ACTION = "action"
    RESOLVE = "resolve"
    DONE = "done"


class NarrativeEvent(str, Enum):
    DISMISS_WELCOME = "dismiss_welcome"
    OPEN_ACTION_ITEMS = "open_action_items"
    RESOLVE_SCRIPTED_ALERT = "resolve_scripted_alert"
    LEAVE_DEMO = "leave_demo"


TRANSITIONS: dict[tuple[DemoStep, NarrativeEvent], DemoStep] = {
    (DemoStep.WELCOME, NarrativeEvent.DISMISS_WELCOME): DemoStep.ACTION,
    (DemoStep.ACTION, NarrativeEvent.OPEN_ACTION_ITEMS): DemoStep.RESOLVE,
    (DemoStep.RESOLVE, NarrativeEvent.RESOLVE_SCRIPTED_ALERT): DemoStep.DONE,
    (DemoStep.WELCOME, NarrativeEvent.LEAVE_DEMO): DemoStep.DONE,
    (DemoStep.ACTION, NarrativeEvent.LEAVE_DEMO): DemoStep.DONE,
    (DemoStep.RESOLVE, NarrativeEvent.LEAVE_DEMO): DemoStep.DONE,
}

TOUR_ORDER = (
    DemoStep.WELCOME,
    DemoStep.ACTION,
    DemoStep.RESOLVE,
    DemoStep.DONE,
)


def next_step(step: DemoStep, event: NarrativeEvent) -> DemoStep:
    """Return the step reached from ``step`` on ``event``.

    Unlisted pairs leave the step unchanged.
    """
    return TRANSITIONS.get((step, event), step)


__all__ = [
    "DemoStep",
    "NarrativeEvent",
    "TRANSITIONS",
    "TOUR_ORDER",
    "next_step",
]
