from .operations import (
    AuthSession,
    ContactsOperations,
    CustomerPaymentsOperations,
    InvoicesOperations,
    OperationState,
    OperationTracker,
    SalesReceiptsOperations,
)

__all__ = [
    "AuthSession", "ContactsOperations", "CustomerPaymentsOperations", "InvoicesOperations",
    "OperationState", "OperationTracker", "SalesReceiptsOperations",
]
