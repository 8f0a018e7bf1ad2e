"""DoNotShowOption SQLAlchemy model."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from hulltrack.core.database import Base


class DoNotShowOption(Base):
    """Order PDF text that is never stored as an order option."""

    __tablename__ = "do_not_show_options"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    option_text: Mapped[str] = mapped_column(Text, nullable=False)
