"""Pydantic schemas for API responses."""
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field


# ============ Person Schemas ============

class PersonRecord(BaseModel):
    """A person derived from one image filename."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    external_id: Optional[str] = Field(default=None, alias="externalId")
    name: str
    image_path: str = Field(..., alias="imagePath")


# ============ Response Envelopes ============

class PeopleListResponse(BaseModel):
    """Response for the full people listing."""
    success: bool = True
    data: List[PersonRecord]
    count: int


class PersonDetailResponse(BaseModel):
    """Response for a single person lookup."""
    success: bool = True
    data: PersonRecord


class SearchResponse(BaseModel):
    """Response for a people search."""
    success: bool = True
    data: List[PersonRecord]
    count: int
    query: str


class HealthResponse(BaseModel):
    """Health check response."""
    success: bool = True
    message: str
    timestamp: str


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""
    success: bool = False
    error: str
    message: Optional[str] = None
