#!/usr/bin/env python3
"""
Fill the database with plausible demo farm data for one user.

This script:
1. Creates the user (or reuses an existing one with the same email)
2. Inserts livestock and every kind of record that refers to it
3. Inserts staff, inventory, finance, environment and scheduler data

Usage:
  python scripts/seed_demo.py --email demo@example.com --password secret123 [--animals 50]
"""

import argparse
import asyncio
import random
import sys
from datetime import timedelta
from pathlib import Path
from uuid import UUID

from faker import Faker

sys.path.insert(0, str(Path(__file__).parent.parent))

from lsm.application.use_cases.auth import signup_user
from lsm.config.settings import get_settings
from lsm.infrastructure.auth.jwt_service import JWTService
from lsm.infrastructure.auth.password import PasswordHasher
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
from lsm.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)
from lsm.utils.datetime_tz import utcnow

fake = Faker("en_US")

FARM_ANIMALS = {
    "Cattle": ["Holstein", "Angus", "Hereford"],
    "Sheep": ["Merino", "Suffolk", "Dorset"],
    "Goat": ["Boer", "Nubian", "Alpine"],
    "Pig": ["Yorkshire", "Duroc", "Berkshire"],
    "Chicken": ["Leghorn", "Rhode Island Red"],
}

# species -> (product type, sale unit)
ANIMAL_PRODUCTS = {
    "Cattle": ("Milk", "Liters"),
    "Sheep": ("Wool", "Kilograms"),
    "Goat": ("Milk", "Liters"),
    "Pig": ("Meat", "Kilograms"),
    "Chicken": ("Eggs", "Pieces"),
}

FEED_TYPES = ["Grain", "Hay", "Silage", "Pasture", "Concentrates"]

HEALTH_ISSUES = {
    "Mastitis": "Antibiotic treatment and udder care",
    "Lameness": "Hoof trimming and anti-inflammatory medication",
    "Pneumonia": "Course of antibiotics and supportive care",
    "Scours": "Electrolytes and fluid therapy",
    "Vaccination": "Routine annual vaccination administered",
    "Parasite Control": "Deworming medication administered",
}

INVENTORY_ITEMS = [
    ("Cattle Feed", "Feed", "Kilograms"),
    ("Chicken Feed", "Feed", "Kilograms"),
    ("Hay Bales", "Feed", "Pieces"),
    ("Mineral Blocks", "Supplies", "Pieces"),
    ("Amoxicillin", "Medicine", "Bottles"),
    ("Ivermectin", "Medicine", "Bottles"),
    ("Water Trough", "Equipment", "Pieces"),
]

POSITIONS = ["Farm Manager", "Livestock Handler", "Veterinary Technician", "Farm Hand"]

TASK_TITLES = [
    "Repair fence in the north pasture",
    "Move cattle to the lower field",
    "Clean and disinfect the milking parlor",
    "Perform health checks on newborn calves",
]

REMINDER_TITLES = [
    "Schedule annual herd health check",
    "Order new supply of cattle feed",
    "Rotate sheep to new pasture",
    "Plan for upcoming breeding season",
]

CITIES = ["Nairobi", "Nakuru", "Eldoret"]


async def ensure_user(uow: SQLAlchemyUnitOfWork, email: str, password: str) -> UUID:
    existing = await uow.users.get_by_email(email)
    if existing:
        print(f"ℹ️  User {email} already exists (ID: {existing.id})")
        return existing.id
    settings = get_settings()
    result = await signup_user.execute(
        uow=uow,
        payload=signup_user.SignupInput(name=fake.name(), email=email, password=password),
        password_hasher=PasswordHasher(),
        jwt_service=JWTService(
            secret_key=settings.jwt_secret_key.get_secret_value(),
            algorithm=settings.jwt_algorithm,
            access_token_expires_minutes=settings.jwt_access_token_expires_minutes,
        ),
    )
    print(f"✨ Created user {email} (ID: {result.user.id})")
    return result.user.id


async def seed_animals(uow: SQLAlchemyUnitOfWork, owner_id: UUID, count: int) -> list:
    repo = uow.records(LivestockORM, owner_id)
    animals = []
    for _ in range(count):
        species = random.choice(list(FARM_ANIMALS))
        animals.append(
            await repo.add(
                {
                    "name": fake.first_name(),
                    "species": species,
                    "breed": random.choice(FARM_ANIMALS[species]),
                    "date_of_birth": fake.date_between(start_date="-5y", end_date="-3M"),
                    "gender": random.choice(["Male", "Female"]),
                    "health_status": random.choice(
                        ["Healthy", "Healthy", "Sick", "Under Treatment", "Recovered"]
                    ),
                }
            )
        )
    return animals


async def seed_animal_records(uow: SQLAlchemyUnitOfWork, owner_id: UUID, animals: list) -> None:
    males = [a for a in animals if a.gender == "Male"]
    females = [a for a in animals if a.gender == "Female"]
    breeding = uow.records(BreedingRecordORM, owner_id)
    for male in males:
        partners = [f for f in females if f.species == male.species]
        if partners:
            await breeding.add(
                {
                    "animal_id": random.choice(partners).id,
                    "partner_animal_id": male.id,
                    "breeding_date": fake.date_between(start_date="-1y"),
                    "outcome": random.choice(["Successful", "Unsuccessful", "Pending"]),
                }
            )

    feeding = uow.records(FeedingRecordORM, owner_id)
    health = uow.records(HealthRecordORM, owner_id)
    production = uow.records(ProductionRecordORM, owner_id)
    veterinary = uow.records(VeterinaryRecordORM, owner_id)
    for animal in animals:
        await feeding.add(
            {
                "animal_id": animal.id,
                "feed_type": random.choice(FEED_TYPES),
                "quantity": round(random.uniform(2, 25), 1),
                "date": fake.date_between(start_date="-30d"),
            }
        )
        diagnosis, treatment = random.choice(list(HEALTH_ISSUES.items()))
        await health.add(
            {
                "animal_id": animal.id,
                "checkup_date": fake.date_between(start_date="-1y"),
                "diagnosis": diagnosis,
                "treatment": treatment,
                "vet_name": f"Dr. {fake.last_name()}",
            }
        )
        product_type, _ = ANIMAL_PRODUCTS[animal.species]
        await production.add(
            {
                "animal_id": animal.id,
                "date": fake.date_between(start_date="-30d"),
                "product_type": product_type,
                "quantity": round(random.uniform(1, 30), 1),
            }
        )
        if random.random() < 0.3:
            await veterinary.add(
                {
                    "animal_id": animal.id,
                    "appointment_date": utcnow() - timedelta(days=random.randint(1, 180)),
                    "vet_name": f"Dr. {fake.last_name()}",
                    "vet_contact": fake.phone_number(),
                    "visit_type": random.choice(["Routine Checkup", "Vaccination", "Treatment"]),
                    "diagnosis": diagnosis,
                    "treatment": treatment,
                    "cost": round(random.uniform(20, 300), 2),
                }
            )


async def seed_sales_and_finance(uow: SQLAlchemyUnitOfWork, owner_id: UUID, animals: list) -> None:
    animal_sales = uow.records(AnimalSaleORM, owner_id)
    product_sales = uow.records(ProductSaleORM, owner_id)
    income = uow.records(IncomeORM, owner_id)
    expenses = uow.records(ExpenseORM, owner_id)

    for animal in random.sample(animals, k=max(1, len(animals) // 10)):
        price = round(random.uniform(100, 1500), 2)
        sale_date = fake.date_between(start_date="-6M")
        await animal_sales.add(
            {
                "animal_id": animal.id,
                "sale_date": sale_date,
                "buyer_name": fake.name(),
                "buyer_contact": fake.phone_number(),
                "sale_price": price,
                "sale_reason": random.choice(["Breeding", "Meat", "Dairy", "Other"]),
            }
        )
        await income.add(
            {
                "income_date": sale_date,
                "category": "Animal Sale",
                "description": f"Sale of {animal.name}",
                "amount": price,
                "animal_id": animal.id,
            }
        )

    for animal in random.sample(animals, k=max(1, len(animals) // 5)):
        product_type, unit = ANIMAL_PRODUCTS[animal.species]
        quantity = random.randint(5, 100)
        unit_price = round(random.uniform(0.5, 8), 2)
        sale_date = fake.date_between(start_date="-3M")
        await product_sales.add(
            {
                "animal_id": animal.id,
                "sale_date": sale_date,
                "product_type": product_type,
                "quantity": quantity,
                "unit": unit,
                "unit_price": unit_price,
                "total_price": round(quantity * unit_price, 2),
                "buyer_name": fake.company(),
            }
        )
        await income.add(
            {
                "income_date": sale_date,
                "category": "Product Sale",
                "description": f"{product_type} sale",
                "amount": round(quantity * unit_price, 2),
            }
        )

    for _ in range(30):
        await expenses.add(
            {
                "expense_date": fake.date_between(start_date="-1y"),
                "category": random.choice(["Feed", "Medicine", "Equipment", "Labor", "Utilities"]),
                "description": fake.sentence(nb_words=4),
                "amount": round(random.uniform(10, 800), 2),
                "supplier": fake.company(),
                "payment_method": random.choice(["Cash", "Bank Transfer", "Credit Card"]),
            }
        )

    inventory = uow.records(InventoryItemORM, owner_id)
    for item_name, category, unit in INVENTORY_ITEMS:
        await inventory.add(
            {
                "item_name": item_name,
                "category": category,
                "unit": unit,
                # Some items start under their minimum so low-stock has content
                "current_stock": random.randint(5, 200),
                "minimum_stock": 25,
                "unit_cost": round(random.uniform(1, 50), 2),
                "supplier": fake.company(),
            }
        )


async def seed_staff(uow: SQLAlchemyUnitOfWork, owner_id: UUID, animals: list) -> None:
    employees = uow.records(EmployeeORM, owner_id)
    tasks = uow.records(TaskORM, owner_id)
    attendance = uow.records(AttendanceORM, owner_id)
    now = utcnow()
    for _ in range(5):
        first, last = fake.first_name(), fake.last_name()
        employee = await employees.add(
            {
                "name": f"{first} {last}",
                "position": random.choice(POSITIONS),
                "email": f"{first.lower()}.{last.lower()}@farm.example",
                "phone": fake.phone_number(),
                "hire_date": fake.date_between(start_date="-3y"),
                "salary": round(random.uniform(800, 3000), 2),
                "skills": random.sample(["Milking", "Feeding", "Driving", "Fencing"], k=2),
            }
        )
        for _ in range(3):
            await tasks.add(
                {
                    "title": random.choice(TASK_TITLES),
                    "description": "Complete task by end of day.",
                    "assigned_to": employee.id,
                    "animal_id": random.choice(animals).id,
                    "task_type": random.choice(["Feeding", "Cleaning", "Health Check", "Milking"]),
                    "due_date": now + timedelta(days=random.randint(1, 30)),
                }
            )
        for days_ago in range(1, 8):
            day = (now - timedelta(days=days_ago)).date()
            await attendance.add(
                {
                    "employee_id": employee.id,
                    "date": day,
                    "hours_worked": random.choice([8, 8, 8, 4]),
                    "status": random.choice(["Present", "Present", "Late", "Half Day"]),
                }
            )


async def seed_environment_and_reminders(
    uow: SQLAlchemyUnitOfWork, owner_id: UUID, animals: list
) -> None:
    environment = uow.records(EnvironmentalDataORM, owner_id)
    now = utcnow()
    for city in CITIES:
        for days_ago in range(14):
            await environment.add(
                {
                    "city": city,
                    "latitude": float(fake.latitude()),
                    "longitude": float(fake.longitude()),
                    "date": now - timedelta(days=days_ago),
                    "temperature": round(random.uniform(10, 32), 1),
                    "humidity": round(random.uniform(30, 95), 1),
                    "water_level": round(random.uniform(20, 100), 1),
                    "rainfall": round(random.uniform(0, 40), 1),
                    "wind_speed": round(random.uniform(0, 25), 1),
                    "weather_condition": random.choice(["Sunny", "Cloudy", "Rainy"]),
                    "air_quality": random.choice(["Excellent", "Good", "Moderate"]),
                }
            )

    reminders = uow.records(ReminderORM, owner_id)
    for _ in range(12):
        await reminders.add(
            {
                "title": random.choice(REMINDER_TITLES),
                "animal_id": random.choice(animals).id if random.random() < 0.5 else None,
                "reminder_type": random.choice(["Vaccination", "Health Check", "Feeding", "Other"]),
                "due_date": now + timedelta(days=random.randint(-5, 20)),
                "priority": random.choice(["Low", "Medium", "High", "Urgent"]),
            }
        )


async def seed(email: str, password: str, animal_count: int) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            owner_id = await ensure_user(uow, email, password)

        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            animals = await seed_animals(uow, owner_id, animal_count)
            print(f"🐄 {len(animals)} livestock records")
            await seed_animal_records(uow, owner_id, animals)
            await seed_sales_and_finance(uow, owner_id, animals)
            await seed_staff(uow, owner_id, animals)
            await seed_environment_and_reminders(uow, owner_id, animals)
            await uow.commit()
        print("\n✅ Demo data created")
    except Exception as exc:
        print(f"\n❌ Error seeding demo data: {exc}")
        raise SystemExit(1) from exc
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed demo farm data for one user")
    parser.add_argument("--email", required=True, help="Email of the demo user")
    parser.add_argument("--password", required=True, help="Password if the user is created")
    parser.add_argument("--animals", type=int, default=50, help="Number of animals to create")
    args = parser.parse_args()

    if args.animals < 1:
        print("❌ Error: --animals must be at least 1")
        sys.exit(1)

    asyncio.run(seed(args.email, args.password, args.animals))
