from fastapi import status
from renovator.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Error codes that map to 404 for every resource route
NOT_FOUND_CODES = frozenset(
    {
        "PROJECT_NOT_FOUND",
        "MILESTONE_NOT_FOUND",
        "TASK_NOT_FOUND",
        "TEMPLATE_NOT_FOUND",
        "BUDGET_NOT_FOUND",
        "BUDGET_ITEM_NOT_FOUND",
        "SESSION_NOT_FOUND",
        "RESOURCE_NOT_FOUND",
        "SUPPLIER_NOT_FOUND",
    }
)


def raise_for_error(error: Error, **status_by_code: int):
    """
    Raise the HTTP error for a failed use case result.

    *_NOT_FOUND codes become 404, codes passed as keyword arguments use
    the given status, anything else is a ServerError.
    """
    if error.code in status_by_code:
        raise ClientError(error, status_code=status_by_code[error.code])
    if error.code in NOT_FOUND_CODES:
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)
