"""Call lifecycle normalization for Events API deliveries.

Slack reports calls and huddles through several event shapes that changed
over time. ``normalize_event`` walks an ordered list of rules and returns
the first match as ``CallStarted`` or ``CallEnded``; anything no rule
recognizes is an ``OtherEvent``.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type

from infrastructure.logging import get_module_logger

logger = get_module_logger()

STARTED_STATES = frozenset({"started", "active", "in_progress"})
ENDED_STATES = frozenset({"ended", "completed", "finished"})


@dataclass(frozen=True)
class LifecycleEvent:
    event_type: Optional[str] = None
    user_id: Optional[str] = None
    channel_id: Optional[str] = None
    call_id: Optional[str] = None
    matched_rule: Optional[str] = None


class CallStarted(LifecycleEvent):
    pass


class CallEnded(LifecycleEvent):
    pass


class OtherEvent(LifecycleEvent):
    pass


Rule = Callable[[Dict[str, Any]], Optional[LifecycleEvent]]


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _first_str(*values: Any) -> Optional[str]:
    for value in values:
        if isinstance(value, str) and value:
            return value
    return None


def _build(
    kind: Type[LifecycleEvent],
    event: Dict[str, Any],
    rule: str,
    call: Optional[Dict[str, Any]] = None,
) -> LifecycleEvent:
    room = _as_dict(event.get("room"))
    call = call or {}
    user = event.get("user")
    channels = room.get("channels")
    return kind(
        event_type=event.get("type"),
        user_id=_first_str(
            user, _as_dict(user).get("id"), call.get("user_id"), room.get("created_by")
        ),
        channel_id=_first_str(
            event.get("channel"),
            event.get("channel_id"),
            call.get("channel_id"),
            channels[0] if isinstance(channels, list) and channels else None,
        ),
        call_id=_first_str(
            event.get("call_id"), call.get("call_id"), call.get("id"), room.get("id")
        ),
        matched_rule=rule,
    )


def match_explicit_type(event: Dict[str, Any]) -> Optional[LifecycleEvent]:
    event_type = event.get("type")
    if event_type in ("call_started", "call.started"):
        return _build(CallStarted, event, "explicit_type")
    if event_type in ("call_ended", "call.ended"):
        return _build(CallEnded, event, "explicit_type")
    return None


def match_room_message(event: Dict[str, Any]) -> Optional[LifecycleEvent]:
    if event.get("type") != "message":
        return None
    subtype = event.get("subtype")
    if subtype == "sh_room_created":
        return _build(CallStarted, event, "room_message")
    if subtype == "sh_room_shared" and _as_dict(event.get("room")).get("date_end"):
        return _build(CallEnded, event, "room_message")
    return None


def match_huddle_thread(event: Dict[str, Any]) -> Optional[LifecycleEvent]:
    if event.get("type") != "message" or event.get("subtype") != "huddle_thread":
        return None
    room = _as_dict(event.get("room"))
    date_end = room.get("date_end")
    ended = room.get("has_ended") is True or (
        isinstance(date_end, (int, float)) and date_end > 0
    )
    return _build(CallEnded if ended else CallStarted, event, "huddle_thread")


def match_huddle_state(event: Dict[str, Any]) -> Optional[LifecycleEvent]:
    if event.get("type") != "user_huddle_changed":
        return None
    profile = _as_dict(_as_dict(event.get("user")).get("profile"))
    state = profile.get("huddle_state")
    if state == "in_a_huddle":
        return _build(CallStarted, event, "huddle_state")
    if state == "default_unset":
        return _build(CallEnded, event, "huddle_state")
    return None


def match_call_object(event: Dict[str, Any]) -> Optional[LifecycleEvent]:
    call = event.get("call") if isinstance(event.get("call"), dict) else event
    if not (call.get("call_id") or call.get("id")):
        return None
    state = call.get("state") or call.get("status")
    if not isinstance(state, str):
        return None
    state = state.lower()
    if state in STARTED_STATES:
        return _build(CallStarted, event, "call_object", call)
    if state in ENDED_STATES:
        return _build(CallEnded, event, "call_object", call)
    return None


RULES: List[Rule] = [
    match_explicit_type,
    match_room_message,
    match_huddle_thread,
    match_huddle_state,
    match_call_object,
]


def normalize_event(event: Any) -> LifecycleEvent:
    """Map an Events API ``event`` object to a lifecycle event.

    Args:
        event: The inner ``event`` of an ``event_callback`` envelope.

    Returns:
        LifecycleEvent: The first rule match, else ``OtherEvent``.
    """
    if not isinstance(event, dict):
        return OtherEvent()
    for rule in RULES:
        result = rule(event)
        if result is not None:
            return result
    return OtherEvent(event_type=event.get("type"))


def log_lifecycle_event(envelope: Dict[str, Any]) -> LifecycleEvent:
    """Normalize the event in an ``event_callback`` envelope and log it."""
    lifecycle_event = normalize_event(envelope.get("event"))
    if isinstance(lifecycle_event, OtherEvent):
        logger.debug("event_ignored", event_type=lifecycle_event.event_type)
        return lifecycle_event

    log_event = "call_started" if isinstance(lifecycle_event, CallStarted) else "call_ended"
    logger.info(
        log_event,
        slack_user_id=lifecycle_event.user_id,
        channel_id=lifecycle_event.channel_id,
        call_id=lifecycle_event.call_id,
        matched_rule=lifecycle_event.matched_rule,
        team_id=envelope.get("team_id"),
    )
    return lifecycle_event
