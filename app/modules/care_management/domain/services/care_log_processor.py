# 📄 File: app/modules/care_management/domain/services/care_log_processor.py
# 🧭 Purpose (Layman Explanation):
# Records a care activity against a plant: checks the date makes sense, moves "last watered/fed" forward, and refreshes the plant's next due dates and health
# 🧪 Purpose (Technical Summary):
# Pure care log application returning a new PlantInstance and append-only history; monotonic max rule makes application commutative and duplicate ids idempotent
# 🔗 Dependencies:
# pydantic, due_date_calculator.py, health_evaluator.py, app.shared.core.exceptions, app.shared.utils.clock
# 🔄 Connected Modules / Calls From:
# log_care_activity command handler

import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from app.modules.care_management.domain.models.care_log import CareActivityType, CareLogEntry
from app.modules.care_management.domain.models.due_state import ReminderWindow
from app.modules.care_management.domain.models.plant_instance import REMINDER_FIELDS, HealthStatus, PlantInstance
from app.modules.care_management.domain.services.due_date_calculator import compute_next_due
from app.modules.care_management.domain.services.health_evaluator import DEFAULT_PROBLEM_WINDOW, evaluate_health
from app.shared.core.exceptions import InvalidTimestampError, UnknownEntityError
from app.shared.utils.clock import TimezoneLike, ensure_aware, resolve_timezone

logger = logging.getLogger(__name__)


class CareLogResult(BaseModel):
    """Outcome of applying one care log entry"""

    model_config = ConfigDict(frozen=True)

    instance: PlantInstance
    history: Tuple[CareLogEntry, ...]
    entry: CareLogEntry
    applied: bool
    next_due: Dict[CareActivityType, Optional[datetime]]
    previous_health: HealthStatus

    @property
    def health_changed(self) -> bool:
        return self.instance.health_status != self.previous_health


def next_due_dates(instance: PlantInstance, now: datetime, tz: Optional[TimezoneLike] = "UTC") -> Dict[CareActivityType, Optional[datetime]]:
    """Next due instant per reminder-bearing activity (None when unscheduled)."""
    due_dates: Dict[CareActivityType, Optional[datetime]] = {}
    for activity in REMINDER_FIELDS:
        config = instance.reminder_for(activity)
        due_dates[activity] = (
            compute_next_due(instance.last_performed_at(activity), instance.acquired_at, config, now, tz)
            if config is not None else None
        )
    return due_dates


def apply_care_log(
    instance: PlantInstance,
    entry: CareLogEntry,
    history: Iterable[CareLogEntry] = (),
    now: Optional[datetime] = None,
    tz: Optional[TimezoneLike] = "UTC",
    window: Optional[ReminderWindow] = None,
    default_problem_window: timedelta = DEFAULT_PROBLEM_WINDOW,
) -> CareLogResult:
    """
    Apply a care log entry to a plant instance.

    Inputs are never mutated; the result carries the updated instance and
    the history with the entry appended.

    Raises:
        UnknownEntityError: Entry references a different plant instance
        InvalidTimestampError: Entry is dated in the future or before acquisition
    """
    now = ensure_aware(now) if now is not None else datetime.now(timezone.utc)
    tzinfo = resolve_timezone(tz)
    history = tuple(history)

    if entry.plant_instance_id != instance.id:
        raise UnknownEntityError("plant_instance", entry.plant_instance_id)

    # 1. Duplicate submissions are no-ops
    existing = next((logged for logged in history if logged.id == entry.id), None)
    if existing is not None:
        logger.debug("Care log already applied", extra={"care_log_id": entry.id})
        return CareLogResult(
            instance=instance,
            history=history,
            entry=existing,
            applied=False,
            next_due=next_due_dates(instance, now, tzinfo),
            previous_health=instance.health_status,
        )

    # 2. Timestamp validation
    performed_at = entry.performed_at
    if performed_at > now:
        raise InvalidTimestampError(
            message="Care activity cannot be logged in the future",
            plant_instance_id=instance.id,
            performed_at=performed_at.isoformat(),
            reason="future",
        )
    if performed_at < instance.acquired_at:
        raise InvalidTimestampError(
            message="Care activity cannot predate the plant's acquisition",
            plant_instance_id=instance.id,
            performed_at=performed_at.isoformat(),
            reason="before_acquisition",
        )

    # 3. Monotonic last-performed update
    updates = {}
    fields = REMINDER_FIELDS.get(entry.activity_type)
    if fields is not None:
        current = getattr(instance, fields[1])
        if current is None or performed_at > current:
            updates[fields[1]] = performed_at
    updated = instance.model_copy(update=updates)

    # 4. Recompute due dates and health for this instance only
    due_dates = next_due_dates(updated, now, tzinfo)
    stamped = entry.model_copy(update={"next_scheduled_at": due_dates.get(entry.activity_type)})
    new_history = history + (stamped,)
    health = evaluate_health(updated, new_history, now, tzinfo, window, default_problem_window)

    updated = updated.model_copy(update={"health_status": health, "updated_at": now})
    logger.debug(
        "Applied care log",
        extra={
            "care_log_id": entry.id,
            "plant_instance_id": instance.id,
            "activity_type": entry.activity_type.value,
            "health_status": health.value,
        },
    )
    return CareLogResult(
        instance=updated,
        history=new_history,
        entry=stamped,
        applied=True,
        next_due=due_dates,
        previous_health=instance.health_status,
    )
