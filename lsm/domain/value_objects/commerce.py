from __future__ import annotations

from enum import Enum


class SaleReason(str, Enum):
    BREEDING = "Breeding"
    MEAT = "Meat"
    DAIRY = "Dairy"
    WOOL = "Wool"
    OTHER = "Other"


class ProductType(str, Enum):
    MILK = "Milk"
    EGGS = "Eggs"
    MEAT = "Meat"
    WOOL = "Wool"
    CHEESE = "Cheese"
    BUTTER = "Butter"
    OTHER = "Other"


class SaleUnit(str, Enum):
    LITERS = "Liters"
    PIECES = "Pieces"
    KILOGRAMS = "Kilograms"
    GRAMS = "Grams"
    POUNDS = "Pounds"
    OTHER = "Other"


class InventoryCategory(str, Enum):
    FEED = "Feed"
    MEDICINE = "Medicine"
    EQUIPMENT = "Equipment"
    SUPPLIES = "Supplies"
    OTHER = "Other"


class InventoryUnit(str, Enum):
    KILOGRAMS = "Kilograms"
    LITERS = "Liters"
    PIECES = "Pieces"
    BAGS = "Bags"
    BOTTLES = "Bottles"
    OTHER = "Other"


class ExpenseCategory(str, Enum):
    FEED = "Feed"
    MEDICINE = "Medicine"
    EQUIPMENT = "Equipment"
    LABOR = "Labor"
    VETERINARY = "Veterinary"
    UTILITIES = "Utilities"
    TRANSPORT = "Transport"
    OTHER = "Other"


class IncomeCategory(str, Enum):
    ANIMAL_SALE = "Animal Sale"
    PRODUCT_SALE = "Product Sale"
    MILK = "Milk"
    EGGS = "Eggs"
    MEAT = "Meat"
    WOOL = "Wool"
    OTHER = "Other"


class PaymentMethod(str, Enum):
    CASH = "Cash"
    BANK_TRANSFER = "Bank Transfer"
    CHECK = "Check"
    CREDIT_CARD = "Credit Card"
    OTHER = "Other"
