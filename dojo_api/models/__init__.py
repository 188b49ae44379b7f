# dojo_api/models/__init__.py

from .dojo import (
    User,
    Student,
    DojoConfig,
    FinancialConfig
)
