"""SQLAlchemy ORM models — maps to the branch queue tables."""

from datetime import datetime

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.adapters.persistence.database import Base

department_operation_groups = Table(
    "department_operation_groups",
    Base.metadata,
    Column("department_id", String(50), ForeignKey("departments.id"), primary_key=True),
    Column("operation_group_id", String(50), ForeignKey("operation_groups.id"), primary_key=True),
)

employee_operation_groups = Table(
    "employee_operation_groups",
    Base.metadata,
    Column("employee_id", String(50), ForeignKey("employees.id"), primary_key=True),
    Column("operation_group_id", String(50), ForeignKey("operation_groups.id"), primary_key=True),
)


class DepartmentModel(Base):
    __tablename__ = "departments"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)

    operation_groups: Mapped[list["OperationGroupModel"]] = relationship(
        secondary=department_operation_groups, back_populates="departments"
    )
    employees: Mapped[list["EmployeeModel"]] = relationship(back_populates="department")


class OperationGroupModel(Base):
    __tablename__ = "operation_groups"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    operations: Mapped[list["OperationModel"]] = relationship(back_populates="group")
    departments: Mapped[list["DepartmentModel"]] = relationship(
        secondary=department_operation_groups, back_populates="operation_groups"
    )
    employees: Mapped[list["EmployeeModel"]] = relationship(
        secondary=employee_operation_groups, back_populates="operation_groups"
    )


class OperationModel(Base):
    __tablename__ = "operations"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    operation_group_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("operation_groups.id"), nullable=False
    )

    group: Mapped["OperationGroupModel"] = relationship(back_populates="operations")


class EmployeeModel(Base):
    __tablename__ = "employees"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    telegram_id: Mapped[str | None] = mapped_column(String(100), unique=True, nullable=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    on_duty: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    department_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("departments.id"), nullable=False
    )

    department: Mapped["DepartmentModel"] = relationship(back_populates="employees")
    operation_groups: Mapped[list["OperationGroupModel"]] = relationship(
        secondary=employee_operation_groups, back_populates="employees"
    )
    assignments: Mapped[list["AssignmentModel"]] = relationship(back_populates="employee")

    __table_args__ = (Index("idx_employees_department_duty", "department_id", "on_duty"),)


class TicketModel(Base):
    __tablename__ = "tickets"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    appointed_time: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    operation_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("operations.id"), nullable=False
    )
    department_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("departments.id"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    assignment: Mapped["AssignmentModel | None"] = relationship(
        back_populates="ticket", uselist=False
    )

    __table_args__ = (
        Index("idx_tickets_department_created", "department_id", "created_at"),
        Index("idx_tickets_appointed", "appointed_time"),
    )


class AssignmentModel(Base):
    __tablename__ = "ticket_operations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ticket_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("tickets.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    employee_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("employees.id"), nullable=False
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="CALL")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    assigned_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )

    ticket: Mapped["TicketModel"] = relationship(back_populates="assignment")
    employee: Mapped["EmployeeModel"] = relationship(back_populates="assignments")

    __table_args__ = (Index("idx_assignments_employee_status", "employee_id", "status"),)
