from __future__ import annotations
from typing import Protocol, List, Optional
from sqlalchemy.orm import Session

from ..db import models

# Largest value a signed 64-bit INTEGER primary key can hold.
MAX_ROW_ID = 2**63 - 1


class EventRepository(Protocol):
    def list_for_picker(self, db: Session, calendar_id: Optional[int] = None) -> List[models.CalendarEvent]: ...
    def get(self, db: Session, event_id: int) -> Optional[models.CalendarEvent]: ...


class SqlAlchemyEventRepository:
    """Published events offered in the picker popup, newest first."""

    def list_for_picker(self, db: Session, calendar_id: Optional[int] = None) -> List[models.CalendarEvent]:
        q = db.query(models.CalendarEvent)
        q = q.filter(models.CalendarEvent.published == 1)
        if calendar_id is not None:
            q = q.filter(models.CalendarEvent.pid == calendar_id)
        q = q.order_by(models.CalendarEvent.start_date.desc(), models.CalendarEvent.id.desc())
        return q.all()

    def get(self, db: Session, event_id: int) -> Optional[models.CalendarEvent]:
        if not 0 < event_id <= MAX_ROW_ID:
            return None
        return db.query(models.CalendarEvent).filter(models.CalendarEvent.id == event_id).first()
