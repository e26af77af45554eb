"""
Pydantic schemas for all data structures.

Includes the typed argument models produced by validation and the
association row/page models consumed by the pagination aggregator.
"""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from opentargets_mcp.constants import (
    DEFAULT_ASSOCIATION_SIZE,
    DEFAULT_SEARCH_SIZE,
    DEFAULT_SUMMARY_SIZE,
    MAX_RESULT_SIZE,
    MAX_SUMMARY_SIZE,
    ResponseFormat,
)

# ============================================================================
# Base Models
# ============================================================================


def _reject_bool(value: Any) -> Any:
    """Booleans are ints in Python but never valid sizes or scores."""
    if isinstance(value, bool):
        raise ValueError("must be a number, not a boolean")
    return value


class BaseToolInput(BaseModel):
    """Base class for all tool argument models."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        populate_by_name=True,
        extra="ignore",  # The flat argument bag is shared by all methods
    )


class SizedToolInput(BaseToolInput):
    """Base class for methods accepting a result-size bound."""

    size: int = Field(
        default=DEFAULT_SEARCH_SIZE,
        gt=0,
        le=MAX_RESULT_SIZE,
        description=f"Number of results to return (1-{MAX_RESULT_SIZE})",
    )

    @field_validator("size", mode="before")
    @classmethod
    def validate_size_type(cls, v: Any) -> Any:
        return _reject_bool(v)


class ScoredToolInput(SizedToolInput):
    """Base class for methods accepting a minimum association score."""

    min_score: float | None = Field(
        default=None,
        ge=0.0,
        le=1.0,
        alias="minScore",
        description="Minimum association score (0-1)",
    )

    @field_validator("min_score", mode="before")
    @classmethod
    def validate_min_score_type(cls, v: Any) -> Any:
        return _reject_bool(v)


# ============================================================================
# Argument Models
# ============================================================================


class SearchQuery(SizedToolInput):
    """Arguments for search_targets and search_diseases."""

    query: str = Field(..., min_length=1, description="Free-text search query")
    format: ResponseFormat = Field(
        default=ResponseFormat.JSON,
        description="Output format: 'json' (structured) or 'tsv' (tabular)",
    )


class AssociationQuery(ScoredToolInput):
    """
    Arguments for get_target_disease_associations.

    At least one of target_id / disease_id must be present. Both present
    selects the pair-lookup stub.
    """

    target_id: str | None = Field(
        default=None,
        alias="targetId",
        description="Target Ensembl gene ID (e.g., ENSG00000012048)",
    )
    disease_id: str | None = Field(
        default=None,
        alias="diseaseId",
        description="Disease EFO ID (e.g., EFO_0000305)",
    )
    size: int = Field(default=DEFAULT_ASSOCIATION_SIZE, gt=0, le=MAX_RESULT_SIZE)

    @field_validator("target_id", "disease_id")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        return v or None

    @model_validator(mode="after")
    def require_one_identifier(self) -> "AssociationQuery":
        if self.target_id is None and self.disease_id is None:
            raise ValueError("targetId or diseaseId is required")
        return self

    @property
    def has_both(self) -> bool:
        return self.target_id is not None and self.disease_id is not None


class DiseaseTargetsSummaryQuery(ScoredToolInput):
    """Arguments for get_disease_targets_summary (diseaseId or id)."""

    disease_id: str = Field(..., min_length=1, description="Disease EFO ID")
    size: int = Field(default=DEFAULT_SUMMARY_SIZE, ge=1, le=MAX_SUMMARY_SIZE)

    @model_validator(mode="before")
    @classmethod
    def pick_disease_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and "disease_id" not in data:
            data = dict(data)
            data["disease_id"] = data.get("diseaseId") or data.get("id")
        return data


class EntityDetailsQuery(BaseToolInput):
    """Arguments for get_target_details and get_disease_details."""

    id: str = Field(..., min_length=1, description="Target Ensembl ID or disease EFO ID")


# ============================================================================
# Association Rows and Pages
# ============================================================================


class TargetRef(BaseModel):
    """Target counterpart of an association row."""

    model_config = ConfigDict(extra="allow")

    id: str
    approvedSymbol: str | None = None
    approvedName: str | None = None


class DiseaseRef(BaseModel):
    """Disease counterpart of an association row."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str | None = None


class AssociationRow(BaseModel):
    """
    One scored target-disease edge.

    Upstream field names are kept verbatim; unknown fields pass through.
    """

    model_config = ConfigDict(extra="allow")

    score: float
    target: TargetRef | None = None
    disease: DiseaseRef | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class PagedBatch(BaseModel):
    """One page of association rows plus the upstream-reported total."""

    rows: list[AssociationRow] = Field(default_factory=list)
    total_count: int = Field(0, ge=0, description="Upstream-reported total row count")
    page_index: int = Field(..., ge=0)
    page_size: int = Field(..., gt=0)
    entity_id: str | None = None
    entity_name: str | None = None


class PaginationSummary(BaseModel):
    """Pagination metadata reported with aggregated results."""

    requested: int = Field(..., description="Caller-requested result size")
    returned: int = Field(..., description="Rows in this response")
    total: int = Field(..., description="Upstream total before filtering")
    filtered: int = Field(..., description="Fetched rows passing the score filter")


class AggregatedAssociations(BaseModel):
    """Output of the pagination aggregator."""

    entity_id: str | None = None
    entity_name: str | None = None
    total_count: int = 0
    filtered_count: int = 0
    requested: int
    pages_fetched: int = 0
    rows: list[AssociationRow] = Field(default_factory=list)

    @property
    def pagination(self) -> PaginationSummary:
        return PaginationSummary(
            requested=self.requested,
            returned=len(self.rows),
            total=self.total_count,
            filtered=self.filtered_count,
        )

    def row_payloads(self) -> list[dict[str, Any]]:
        return [row.to_payload() for row in self.rows]
