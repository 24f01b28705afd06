import uuid
from datetime import date, datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

IncidentStatus = Literal["open", "in_progress", "resolved", "closed"]


class IncidentRecord(BaseModel):
    """A single incident report as held by the record store."""

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()), description="Unique incident identifier"
    )
    description: str = Field(default="", description="Free-text description of the incident")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the incident was reported",
    )
    location: str = Field(default="", description="Free-text locality key")
    category: str = Field(default="", description="Waste-type label (empty until classified)")
    status: IncidentStatus = Field(default="open", description="Workflow status")
    text_vector: Optional[List[float]] = Field(
        default=None, description="Featurized description (same length for all records)"
    )


class TrainingSample(BaseModel):
    """Labeled description used to fit the classifier"""

    text: str
    label: str


class ClassificationScore(BaseModel):
    label: str
    confidence: float = Field(..., ge=0.0)


class ClassificationResult(BaseModel):
    """
    Ranked probability distribution over the known labels.

    `scores` is sorted by descending confidence, so `label` is always
    the label of the first entry (or "unknown" when there are no labels).
    """

    label: str
    scores: List[ClassificationScore]


class SimilarityMatch(BaseModel):
    incident: IncidentRecord
    score: float = Field(..., ge=0.0, le=1.0, description="Cosine similarity to the query")


class DuplicateCheck(BaseModel):
    """Outcome of assessing a new incident against the existing records."""

    incident: IncidentRecord = Field(..., description="Incident with vector and category filled in")
    possible_duplicate: bool = False
    duplicate_of: Optional[str] = Field(default=None, description="ID of the best match, if any")
    similarity: float = Field(default=0.0, description="Score of the best match")


class DailyCount(BaseModel):
    day: date
    count: int = Field(..., ge=0)


class AnomalyPoint(BaseModel):
    day: date
    count: int
    z_score: float
    is_anomaly: bool


class TrendSummary(BaseModel):
    """Daily series plus the coarse last-day spike flag."""

    data: List[DailyCount]
    last_day_z_score: Optional[float] = Field(
        default=None, description="None when there is not enough history"
    )
    spike: bool = False


class CategoryCount(BaseModel):
    category: str
    count: int
