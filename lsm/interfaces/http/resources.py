from __future__ import annotations

from lsm.application.resources import Reference, Resource
from lsm.domain.value_objects.scheduling import ReminderStatus
from lsm.domain.value_objects.staff import TaskStatus
from lsm.infrastructure.db.orm.animal_sale import AnimalSaleORM
from lsm.infrastructure.db.orm.attendance import AttendanceORM
from lsm.infrastructure.db.orm.breeding_record import BreedingRecordORM
from lsm.infrastructure.db.orm.employee import EmployeeORM
from lsm.infrastructure.db.orm.environmental_data import EnvironmentalDataORM
from lsm.infrastructure.db.orm.expense import ExpenseORM
from lsm.infrastructure.db.orm.feeding_record import FeedingRecordORM
from lsm.infrastructure.db.orm.health_record import HealthRecordORM
from lsm.infrastructure.db.orm.income import IncomeORM
from lsm.infrastructure.db.orm.inventory_item import InventoryItemORM
from lsm.infrastructure.db.orm.livestock import LivestockORM
from lsm.infrastructure.db.orm.product_sale import ProductSaleORM
from lsm.infrastructure.db.orm.production_record import ProductionRecordORM
from lsm.infrastructure.db.orm.reminder import ReminderORM
from lsm.infrastructure.db.orm.task import TaskORM
from lsm.infrastructure.db.orm.veterinary_record import VeterinaryRecordORM
from lsm.interfaces.http.schemas import (
    breeding,
    environment,
    feeding,
    finance,
    health,
    inventory,
    livestock,
    production,
    sales,
    scheduler,
    staff,
    veterinary,
)

ANIMAL_PROJECTION = ("name", "species", "breed")
EMPLOYEE_PROJECTION = ("name", "position")


def _animal(field: str = "animal_id") -> Reference:
    return Reference(field=field, model=LivestockORM, projection=ANIMAL_PROJECTION)


def _employee(field: str) -> Reference:
    return Reference(field=field, model=EmployeeORM, projection=EMPLOYEE_PROJECTION)


def _terminal(statuses) -> frozenset[str]:
    return frozenset(status.value for status in statuses if status.is_terminal())


LIVESTOCK = Resource(
    name="livestock",
    label="Livestock",
    model=LivestockORM,
    create_schema=livestock.LivestockCreate,
    update_schema=livestock.LivestockUpdate,
    response_schema=livestock.LivestockResponse,
    filter_fields=("species", "gender", "health_status"),
)

BREEDING = Resource(
    name="breeding_record",
    label="Breeding record",
    model=BreedingRecordORM,
    create_schema=breeding.BreedingRecordCreate,
    update_schema=breeding.BreedingRecordUpdate,
    response_schema=breeding.BreedingRecordResponse,
    references=(_animal(), _animal("partner_animal_id")),
    date_field="breeding_date",
    filter_fields=("outcome", "animal_id"),
)

FEEDING = Resource(
    name="feeding_record",
    label="Feeding record",
    model=FeedingRecordORM,
    create_schema=feeding.FeedingRecordCreate,
    update_schema=feeding.FeedingRecordUpdate,
    response_schema=feeding.FeedingRecordResponse,
    references=(_animal(),),
    date_field="date",
    filter_fields=("animal_id",),
)

HEALTH = Resource(
    name="health_record",
    label="Health record",
    model=HealthRecordORM,
    create_schema=health.HealthRecordCreate,
    update_schema=health.HealthRecordUpdate,
    response_schema=health.HealthRecordResponse,
    references=(_animal(),),
    date_field="checkup_date",
    filter_fields=("animal_id",),
)

PRODUCTION = Resource(
    name="production_record",
    label="Production record",
    model=ProductionRecordORM,
    create_schema=production.ProductionRecordCreate,
    update_schema=production.ProductionRecordUpdate,
    response_schema=production.ProductionRecordResponse,
    references=(_animal(),),
    date_field="date",
    filter_fields=("animal_id", "product_type"),
)

VETERINARY = Resource(
    name="veterinary_record",
    label="Veterinary record",
    model=VeterinaryRecordORM,
    create_schema=veterinary.VeterinaryRecordCreate,
    update_schema=veterinary.VeterinaryRecordUpdate,
    response_schema=veterinary.VeterinaryRecordResponse,
    references=(_animal(),),
    date_field="appointment_date",
    filter_fields=("animal_id", "visit_type"),
)

ANIMAL_SALES = Resource(
    name="animal_sale",
    label="Animal sale",
    model=AnimalSaleORM,
    create_schema=sales.AnimalSaleCreate,
    update_schema=sales.AnimalSaleUpdate,
    response_schema=sales.AnimalSaleResponse,
    references=(_animal(),),
    date_field="sale_date",
    filter_fields=("sale_reason",),
)

PRODUCT_SALES = Resource(
    name="product_sale",
    label="Product sale",
    model=ProductSaleORM,
    create_schema=sales.ProductSaleCreate,
    update_schema=sales.ProductSaleUpdate,
    response_schema=sales.ProductSaleResponse,
    references=(_animal(),),
    date_field="sale_date",
    filter_fields=("product_type",),
)

INVENTORY = Resource(
    name="inventory_item",
    label="Inventory item",
    model=InventoryItemORM,
    create_schema=inventory.InventoryItemCreate,
    update_schema=inventory.InventoryItemUpdate,
    response_schema=inventory.InventoryItemResponse,
    filter_fields=("category",),
)

EXPENSES = Resource(
    name="expense",
    label="Expense",
    model=ExpenseORM,
    create_schema=finance.ExpenseCreate,
    update_schema=finance.ExpenseUpdate,
    response_schema=finance.ExpenseResponse,
    references=(_animal(),),
    date_field="expense_date",
    filter_fields=("category",),
)

INCOME = Resource(
    name="income",
    label="Income",
    model=IncomeORM,
    create_schema=finance.IncomeCreate,
    update_schema=finance.IncomeUpdate,
    response_schema=finance.IncomeResponse,
    references=(_animal(),),
    date_field="income_date",
    filter_fields=("category",),
)

EMPLOYEES = Resource(
    name="employee",
    label="Employee",
    model=EmployeeORM,
    create_schema=staff.EmployeeCreate,
    update_schema=staff.EmployeeUpdate,
    response_schema=staff.EmployeeResponse,
    filter_fields=("status",),
)

TASKS = Resource(
    name="task",
    label="Task",
    model=TaskORM,
    create_schema=staff.TaskCreate,
    update_schema=staff.TaskUpdate,
    response_schema=staff.TaskResponse,
    references=(_employee("assigned_to"), _animal()),
    order_by=("due_date", "asc"),
    date_field="due_date",
    filter_fields=("status", "priority", "task_type", "assigned_to"),
    status_field="status",
    terminal_statuses=_terminal(TaskStatus),
)

ATTENDANCE = Resource(
    name="attendance",
    label="Attendance record",
    model=AttendanceORM,
    create_schema=staff.AttendanceCreate,
    update_schema=staff.AttendanceUpdate,
    response_schema=staff.AttendanceResponse,
    references=(_employee("employee_id"),),
    order_by=("date", "desc"),
    date_field="date",
    filter_fields=("employee_id", "status"),
)

REMINDERS = Resource(
    name="reminder",
    label="Reminder",
    model=ReminderORM,
    create_schema=scheduler.ReminderCreate,
    update_schema=scheduler.ReminderUpdate,
    response_schema=scheduler.ReminderResponse,
    references=(_animal(),),
    order_by=("due_date", "asc"),
    date_field="due_date",
    filter_fields=("status", "reminder_type", "priority"),
    status_field="status",
    terminal_statuses=_terminal(ReminderStatus),
)

ENVIRONMENT = Resource(
    name="environmental_data",
    label="Environmental data",
    model=EnvironmentalDataORM,
    create_schema=environment.EnvironmentalDataCreate,
    update_schema=environment.EnvironmentalDataUpdate,
    response_schema=environment.EnvironmentalDataResponse,
    order_by=("date", "desc"),
    date_field="date",
    filter_fields=("weather_condition",),
    search_field="city",
)
