class NotFoundException(Exception):
    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier

    def __str__(self):
        return f"{self.resource} '{self.identifier}' not found"


class StorageError(Exception):
    def __init__(self, path: str, operation: str, reason: str):
        self.path = path
        self.operation = operation
        self.reason = reason

    def __str__(self):
        return f"could not {self.operation} '{self.path}': {self.reason}"


class CustomerStoreCorrupted(Exception):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason

    def __str__(self):
        return f"customer file '{self.path}' is malformed: {self.reason}"


class InvalidDates(Exception):
    pass


class NoCustomers(Exception):
    pass


class CustomerNotSelected(Exception):
    pass


class EmptyBill(Exception):
    pass


class InvalidBillNumber(Exception):
    pass


class DuplicateBillNumber(Exception):
    pass


class InvoiceRenderError(Exception):
    pass
