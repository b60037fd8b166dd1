from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """응답 스키마 공통 베이스 (JSON 직렬화 시 camelCase)"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
