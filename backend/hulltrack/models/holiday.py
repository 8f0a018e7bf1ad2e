"""CompanyHoliday SQLAlchemy model."""

from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hulltrack.core.database import Base


class CompanyHoliday(Base):
    """A non-working calendar date."""

    __tablename__ = "company_holidays"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    holiday_name: Mapped[str] = mapped_column(String(100), nullable=False)
    holiday_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
