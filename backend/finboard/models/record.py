from sqlalchemy import Integer, String, DateTime, JSON, func
from sqlalchemy.orm import Mapped, mapped_column
from finboard.db.base import Base

class StoreRecord(Base):
    __tablename__ = "records"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    collection: Mapped[str] = mapped_column(String(64), index=True)
    data: Mapped[dict] = mapped_column(JSON, default=dict)
    created_on: Mapped[DateTime] = mapped_column(DateTime, server_default=func.now())
    modified_on: Mapped[DateTime | None] = mapped_column(DateTime, nullable=True, onupdate=func.now())
