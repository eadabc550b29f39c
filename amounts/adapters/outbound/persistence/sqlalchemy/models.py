import uuid

from sqlalchemy import Boolean, Column, SmallInteger, String
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class CurrencyModel(Base):
    __tablename__ = "currencies"

    id = Column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        server_default=func.gen_random_uuid(),
    )
    code = Column(String(3), nullable=False, unique=True, comment="ISO 4217 currency code")
    name = Column(String(255), nullable=False)
    symbol = Column(String(10), nullable=False)
    decimals = Column(SmallInteger, nullable=False, default=2, server_default="2")
    is_active = Column(Boolean, nullable=False, default=True, server_default="true", index=True)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Currency {self.code}: {self.decimals} decimals>"
