from enum import Enum
from typing import List, Optional, Type, TypeVar

from fastapi import status

from renovator.api.error import ClientError
from renovator.libs.result import Error

E = TypeVar("E", bound=Enum)


def parse_enum_list(raw: Optional[str], enum_cls: Type[E], param: str) -> Optional[List[E]]:
    """Parse a comma separated filter such as ``status=active,on_hold``."""
    if not raw:
        return None
    values = [part.strip() for part in raw.split(",") if part.strip()]
    try:
        return [enum_cls(value) for value in values] or None
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ClientError(
            Error("INVALID_FILTER", f"Invalid {param}; expected one of: {allowed}"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
