from sqlalchemy import Column, String, Integer, DateTime
from .db import Base

# -----------------------------
# ORM model for scanned business cards
# -----------------------------
class BusinessCard(Base):
    __tablename__ = "BusinessCard"
    # Text columns keep the camelCase names used in the JSON API
    id              = Column(Integer, primary_key=True, autoincrement=True)
    name            = Column(String, nullable=False, default="")
    position        = Column(String, nullable=False, default="")
    email           = Column(String, nullable=False, default="")
    phone           = Column(String, nullable=False, default="")
    company_name    = Column("companyName", String, nullable=False, default="")
    company_address = Column("companyAddress", String, nullable=False, default="")
    category        = Column(String, nullable=False, default="")
    created_at      = Column("createdAt", DateTime(timezone=True), nullable=False, index=True)

    def __repr__(self):
        return f"<BusinessCard(id={self.id}, name={self.name}, companyName={self.company_name})>"
