from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Declarative base for all SQLAlchemy models of the admin backend."""


class AuditableModelMixin:
    """Adds created_on and updated_on columns. Mirrors domain AuditableMixin."""

    created_on: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow
    )
    updated_on: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        onupdate=_utcnow,
        index=True,
    )


class DistrictModel(AuditableModelMixin, Base):
    __tablename__ = "district"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))

    tehsils: Mapped[list["TehsilModel"]] = relationship(back_populates="district")


class TehsilModel(AuditableModelMixin, Base):
    """
    Tehsil row. ``district`` is eagerly joined so that loaded entities
    always carry their District's id and name.
    """

    __tablename__ = "tehsil"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))
    district_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("district.id"), nullable=True, index=True
    )

    district: Mapped[Optional["DistrictModel"]] = relationship(
        back_populates="tehsils", lazy="joined"
    )


class HospitalModel(AuditableModelMixin, Base):
    __tablename__ = "hospital"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))
    tehsil_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("tehsil.id"), nullable=True, index=True
    )


class UserAccountModel(AuditableModelMixin, Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(150), unique=True)
    tehsil_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("tehsil.id"), nullable=True, index=True
    )
