from typing import Optional
from datetime import date
from fastapi import Query
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """ snake_case in Python, camelCase on the wire """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# --- Reporting window (query params) ---
class DateWindow(BaseModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None


def date_window(
    start_date: Optional[date] = Query(None, alias="startDate", description="Inclusive lower bound (calendar day)"),
    end_date: Optional[date] = Query(None, alias="endDate", description="Inclusive upper bound (calendar day)"),
) -> DateWindow:
    return DateWindow(start_date=start_date, end_date=end_date)


class SuccessResponse(BaseModel):
    success: bool = True
