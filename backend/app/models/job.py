"""
Job Model
"""
from sqlalchemy import Column, Integer, String, Text, Numeric, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from app.core.database import Base


class Job(Base):
    __tablename__ = "jobs"

    # Primary Key
    id = Column(Integer, primary_key=True, autoincrement=True)

    # Basic Info
    title = Column(Text, nullable=False)
    salary = Column(Integer)
    equity = Column(Numeric)

    # Owner (immutable after creation)
    company_handle = Column(
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
    )

    # Relationships
    company = relationship("Company", back_populates="jobs")

    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary_non_negative"),
        CheckConstraint("equity <= 1.0", name="ck_jobs_equity_max_one"),
    )
