"""
Pydantic schemas for investor-to-company reconciliation.

MatchResult is a tagged union on ``status``; each variant carries only
the payload that applies to it.
"""

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


MatchType = Literal["manual", "exact", "normalized"]
MATCH_TYPES = ("manual", "exact", "normalized")


class CompanyCandidate(BaseModel):
    """Reference to a catalog company."""

    id: str
    name: str

    model_config = ConfigDict(frozen=True)


class _MatchResultBase(BaseModel):
    investor_id: str
    investor_name: str
    client_name: str


class AlreadySetResult(_MatchResultBase):
    status: Literal["already_set"] = "already_set"


class MatchedResult(_MatchResultBase):
    status: Literal["matched"] = "matched"
    match_type: Literal["exact", "normalized"]
    matched_company_id: str
    matched_company_name: str


class AmbiguousResult(_MatchResultBase):
    status: Literal["ambiguous"] = "ambiguous"
    candidates: List[CompanyCandidate]


class NotFoundResult(_MatchResultBase):
    status: Literal["not_found"] = "not_found"


MatchResult = Annotated[
    Union[AlreadySetResult, MatchedResult, AmbiguousResult, NotFoundResult],
    Field(discriminator="status"),
]


class ReconciliationPreview(BaseModel):
    """Preview response: per-status counts plus every classified investor."""

    total: int = 0
    already_set: int = 0
    matched: int = 0
    not_found: int = 0
    ambiguous: int = 0
    results: List[MatchResult] = Field(default_factory=list)


class UpdateRequest(BaseModel):
    """
    One link to apply.

    Fields are optional and scalars are kept as text so a malformed row is
    reported in the apply outcome instead of rejecting the whole batch.
    """

    investor_id: Optional[str] = None
    company_id: Optional[str] = None
    match_type: Optional[str] = None

    @field_validator("investor_id", "company_id", "match_type", mode="before")
    @classmethod
    def coerce_to_text(cls, v: Any):
        if v is None or isinstance(v, str):
            return v
        return str(v)


class ApplyRequest(BaseModel):
    company_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("company_id", "companyId"),
    )
    updates: Optional[List[UpdateRequest]] = None
    force: bool = False


class ApplyError(BaseModel):
    investor_id: str
    reason: str


class ApplyOutcome(BaseModel):
    updated: int = 0
    skipped: int = 0
    errors: Optional[List[ApplyError]] = None
