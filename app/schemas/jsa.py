"""
Pydantic schemas for API request/response models
"""

from pydantic import AnyUrl, BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

RiskLevel = Literal["low", "medium", "high"]


class HazardItem(BaseModel):
    """A single hazard with its controls and required PPE"""

    model_config = ConfigDict(populate_by_name=True)

    category: str = Field(description="Hazard category, e.g. 'Fall'")
    specific_risk: str = Field(description="What can go wrong")
    likelihood: Optional[RiskLevel] = None
    potential_severity: Optional[RiskLevel] = None
    recommended_controls: List[str] = Field(
        description="Controls, most effective first"
    )
    required_ppe: List[str] = Field(
        alias="required_PPE", description="Personal protective equipment"
    )
    references: Optional[List[str]] = Field(
        default=None, description="Standards or notes backing the controls"
    )


class JobInfo(BaseModel):
    """Job the analysis is written for"""

    company: str
    task: str
    date: str = Field(description="Calendar date, yyyy-mm-dd")
    location: str
    supervisor: Optional[str] = None
    crew: Optional[List[str]] = None


class RenderJsaRequest(BaseModel):
    """Payload for rendering a JSA document"""

    model_config = ConfigDict(populate_by_name=True)

    job: JobInfo
    hazards: List[HazardItem] = Field(min_length=1)
    verification_checklist: List[str] = Field(
        default_factory=list, alias="verificationChecklist"
    )
    notes: Optional[str] = None


class RenderJsaResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_url: str = Field(alias="fileUrl")


class JobContext(BaseModel):
    """Optional context about the job the photos were taken for"""

    task: Optional[str] = None
    location: Optional[str] = None
    environment: Optional[str] = None
    equipment: Optional[List[str]] = None


class PhotoAnalysisRequest(BaseModel):
    """Photos to analyze for hazards"""

    model_config = ConfigDict(populate_by_name=True)

    file_urls: List[AnyUrl] = Field(min_length=1, alias="fileUrls")
    job_context: Optional[JobContext] = Field(default=None, alias="jobContext")


class PhotoAnalysisResponse(BaseModel):
    summary: str
    hazards: List[HazardItem]


class HealthResponse(BaseModel):
    ok: bool = True
