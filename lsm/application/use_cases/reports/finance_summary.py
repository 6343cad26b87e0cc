from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from lsm.application.errors import ValidationError
from lsm.application.interfaces.unit_of_work import UnitOfWork
from lsm.infrastructure.db.orm.expense import ExpenseORM
from lsm.infrastructure.db.orm.income import IncomeORM


@dataclass(slots=True)
class CategoryTotal:
    category: str
    total: float


@dataclass(slots=True)
class FinanceSummary:
    total_income: float = 0.0
    total_expenses: float = 0.0
    net_profit: float = 0.0
    income_by_category: list[CategoryTotal] = field(default_factory=list)
    expenses_by_category: list[CategoryTotal] = field(default_factory=list)


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    *,
    start_date: date | None = None,
    end_date: date | None = None,
) -> FinanceSummary:
    """Sum the owner's income and expenses, each filtered on its own date column."""
    if start_date and end_date and start_date > end_date:
        raise ValidationError("startDate must not be after endDate")

    incomes = uow.records(IncomeORM, owner_id)
    income_conds = incomes.within_dates(IncomeORM.income_date, start_date, end_date)
    total_income = await incomes.sum(IncomeORM.amount, *income_conds)
    income_by_category = await incomes.sum_by(
        IncomeORM.amount, IncomeORM.category, *income_conds
    )

    expenses = uow.records(ExpenseORM, owner_id)
    expense_conds = expenses.within_dates(ExpenseORM.expense_date, start_date, end_date)
    total_expenses = await expenses.sum(ExpenseORM.amount, *expense_conds)
    expenses_by_category = await expenses.sum_by(
        ExpenseORM.amount, ExpenseORM.category, *expense_conds
    )

    return FinanceSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        net_profit=total_income - total_expenses,
        income_by_category=[CategoryTotal(c, t) for c, t in income_by_category],
        expenses_by_category=[CategoryTotal(c, t) for c, t in expenses_by_category],
    )
