from sqlalchemy import Column, String, DateTime, Integer, ForeignKey
from datetime import datetime, timezone
from .session import Base


class Calendar(Base):
    __tablename__ = "tl_calendar"
    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))


class CalendarEvent(Base):
    __tablename__ = "tl_calendar_events"
    id = Column(Integer, primary_key=True, autoincrement=True)
    pid = Column(Integer, ForeignKey("tl_calendar.id", ondelete="CASCADE"), nullable=False, index=True)  # parent calendar
    title = Column(String, nullable=False)
    alias = Column(String, nullable=True, index=True)
    start_date = Column(DateTime, nullable=True, index=True)
    published = Column(Integer, nullable=False, default=1, index=True)  # 0/1 as boolean
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
