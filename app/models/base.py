from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for request/response bodies. The web client speaks camelCase
    ('requestedBy', 'producedQty'); Python code uses the snake_case names.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MessageResponse(BaseModel):
    message: str
