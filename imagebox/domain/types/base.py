from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field


def _snake_to_camel(name: str) -> str:
    components = name.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


class BaseInfo(BaseModel):
    metadata: Union[Dict[str, Any], None] = Field(default_factory=dict)

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        alias_generator=_snake_to_camel,
        serialize_by_alias=True,
        use_enum_values=True,
    )
