from theater.services.statement_service import StatementService, statement

__all__ = ["StatementService", "statement"]
