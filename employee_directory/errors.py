"""Error types raised by the employee directory."""


class EmployeeDirectoryError(Exception):
    """Base class for directory errors."""


class EmployeeNotFoundError(EmployeeDirectoryError, LookupError):
    """Raised when an update or delete targets an id that is not stored."""

    def __init__(self, employee_id: int) -> None:
        super().__init__(f"Employee {employee_id} not found")
        self.employee_id = employee_id


class PersistenceUnavailableError(EmployeeDirectoryError):
    """The snapshot storage could not be read or written."""


class SeedUnavailableError(EmployeeDirectoryError):
    """The static seed resource could not be fetched or decoded."""
