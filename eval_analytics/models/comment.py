#eval_analytics/models/comment.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional


class CommentRecord(BaseModel):
    """A free-text evaluator comment attached to one evaluation component."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    text: str = ""
    component_name: str = Field(default="Unknown", alias="componentName")
    paper_id: Optional[str] = Field(default=None, alias="paperId")

    @field_validator("text", mode="before")
    @classmethod
    def coerce_text(cls, v):
        return "" if v is None else str(v)

    @field_validator("component_name", mode="before")
    @classmethod
    def default_component(cls, v):
        return v or "Unknown"
