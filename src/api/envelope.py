"""Success envelope: ``{"data": ...}``."""

from typing import Any

from carriage.models.base import CarriageModel


def wrap(payload: CarriageModel | list[CarriageModel] | Any) -> dict[str, Any]:
    if isinstance(payload, CarriageModel):
        return {"data": payload.to_item()}
    if isinstance(payload, list):
        return {"data": [item.to_item() if isinstance(item, CarriageModel) else item for item in payload]}
    return {"data": payload}
