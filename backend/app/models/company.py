"""
Company Model
"""
from sqlalchemy import Column, Integer, String, Text, CheckConstraint
from sqlalchemy.orm import relationship

from app.core.database import Base


class Company(Base):
    __tablename__ = "companies"

    # Primary Key
    handle = Column(String(25), primary_key=True)

    # Basic Info
    name = Column(Text, unique=True, nullable=False)
    num_employees = Column(Integer)
    description = Column(Text, nullable=False)
    logo_url = Column(Text)

    # Relationships
    jobs = relationship("Job", back_populates="company", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("handle = lower(handle)", name="ck_companies_handle_lower"),
        CheckConstraint("num_employees >= 0", name="ck_companies_num_employees_non_negative"),
    )
