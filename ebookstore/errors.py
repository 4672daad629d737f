"""Domain errors shared by every bounded context.

The set is closed: anything else reaching the error handlers is reported
as an unexpected failure. Each error keeps its structured payload so the
handlers can build the HTTP envelope without parsing messages.
"""


class DomainError(Exception):
    """Base class for the errors translated by the error handlers."""


class NotValid(DomainError):
    def __init__(self, input: str, cause):
        self.input = input
        self.cause = cause
        super().__init__(str(self))

    def __str__(self):
        return f"{self.input} not valid: {self.cause}"


class DuplicateKey(DomainError):
    def __init__(self, key: str, cause):
        self.key = key
        self.cause = cause
        super().__init__(str(self))

    def __str__(self):
        return f"{self.key} violation: {self.cause}"


class EntityNotFound(DomainError):
    def __init__(self, entity: str, cause):
        self.entity = entity
        self.cause = cause
        super().__init__(str(self))

    def __str__(self):
        return f"{self.entity} could not be found: {self.cause}"


class WrongPassword(DomainError):
    def __init__(self, cause="the password does not match"):
        self.cause = cause
        super().__init__(str(self))

    def __str__(self):
        return str(self.cause)


class OrderNotPaid(DomainError):
    def __init__(self, cause="only books from paid orders can be downloaded"):
        self.cause = cause
        super().__init__(str(self))

    def __str__(self):
        return str(self.cause)


class Unauthorized(DomainError):
    def __init__(self, reason: str = "The user must be authenticated"):
        self.reason = reason
        super().__init__(reason)

    def __str__(self):
        return self.reason


class Forbidden(DomainError):
    def __init__(self, reason: str = "This resource is reserved for administrators"):
        self.reason = reason
        super().__init__(reason)

    def __str__(self):
        return self.reason
