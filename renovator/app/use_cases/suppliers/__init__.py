"""
Supplier Use Cases
"""

from .manage_suppliers_use_case import ManageSuppliersUseCase
from .dtos import CreateSupplierCommand, SupplierResponse, UpdateSupplierCommand

__all__ = [
    "ManageSuppliersUseCase",
    "CreateSupplierCommand",
    "SupplierResponse",
    "UpdateSupplierCommand",
]
