"""
Item models: what goes into the processor and what comes out.

Output records keep the workflow-item shape
``{"json": {...}, "pairedItem": {"item": <input index>}}``.
"""

from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field


class ItemOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    translate: bool = False
    summarize: bool = False
    max_results: int = Field(10, ge=1, le=50, alias="maxResults")


class ItemInput(BaseModel):
    """One input item: operation name, identifier and options."""
    operation: str
    identifier: str
    options: ItemOptions = Field(default_factory=ItemOptions)


class ItemSuccess(BaseModel):
    item_index: int
    result: Dict[str, Any]
    warnings: List[str] = Field(default_factory=list)

    def to_json(self) -> Dict[str, Any]:
        data = dict(self.result)
        if self.warnings:
            data["warnings"] = list(self.warnings)
        return data

    def to_record(self) -> Dict[str, Any]:
        return {"json": self.to_json(), "pairedItem": {"item": self.item_index}}


class ItemFailure(BaseModel):
    """Recovered per-item error (continue-on-failure)."""
    item_index: int
    error_item_index: int
    error: str
    details: str = ""

    def to_json(self) -> Dict[str, Any]:
        return {"error": self.error, "itemIndex": self.error_item_index, "details": self.details}

    def to_record(self) -> Dict[str, Any]:
        return {"json": self.to_json(), "pairedItem": {"item": self.item_index}}


ItemOutcome = Union[ItemSuccess, ItemFailure]
