# horecascan/schemas/base.py

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # immutable; accepts both snake_case and the camelCase keys sent by web clients
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)
