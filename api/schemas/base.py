# api/schemas/base.py
from datetime import datetime
from typing import Annotated
from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from core.utils.dates import as_utc

# Timestamps always go out in UTC with an explicit offset
UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]

class CamelModel(BaseModel):
    """Schema whose JSON keys are camelCase while Python attributes stay snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

class SuccessResponse(BaseModel):
    success: bool = True
