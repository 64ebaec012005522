"""Payload and response shapes for the DocNexus API (v5 and advanced search)."""

from typing import Any, Dict, List, Optional

from typing_extensions import NotRequired, TypedDict


class SearchParams(TypedDict):
    first_name: str
    last_name: str
    specialty: NotRequired[Optional[str]]
    country: NotRequired[Optional[str]]
    other_info: NotRequired[Optional[Dict[str, Any]]]
    is_refresh_data: NotRequired[bool]


class DocnexusResult(TypedDict, total=False):
    id: str
    profile_photo: Optional[str]
    emails: Optional[List[str]]
    url: Optional[str]
    country: Optional[str]
    first_name: Optional[str]
    middle_name: Optional[str]
    last_name: Optional[str]
    company: Optional[str]
    address: Optional[str]
    city: Optional[str]
    state: Optional[str]
    zip: Optional[str]
    conditions: Optional[List[str]]
    specialties: Optional[List[str]]
    confidence_score: float


class SearchResponse(TypedDict, total=False):
    title: Optional[str]
    company: Optional[str]
    address: Optional[str]
    city: Optional[str]
    state: Optional[str]
    zip: Optional[str]
    phone: Optional[str]
    biography: Optional[str]
    research_areas: Optional[List[str]]
    timestamp: Optional[str]
    docnexus_results: List[DocnexusResult]
    international_tag: bool
    profile_photo: Optional[str]


class USProfileResponse(TypedDict):
    clinical_trials: List[Any]
    publications: List[Any]
    payments: List[Any]
    diagnosis: List[Any]
    prescriptions: List[Any]
    procedures: List[Any]
    conferences: List[Any]
    referrers: List[Any]
    diagnosis_referrals: List[Any]
    procedure_referrals: List[Any]
    affiliations: List[Any]


class TokenResponse(TypedDict):
    access_token: str
    refresh_token: str
    token_type: str


class RefreshResponse(TypedDict):
    access_token: str
    token_type: str


class HealthResponse(TypedDict):
    status: str


# Payload for v5/search through the name-based dispatcher
DocnexusLinkSearchPayload = SearchParams


class DocnexusLinkProfilePayload(TypedDict):
    npi: str


# See the advanced-search backend QueryConfig
AdvancedSearchQueryPayload = Dict[str, Any]


__all__ = [
    "SearchParams",
    "DocnexusResult",
    "SearchResponse",
    "USProfileResponse",
    "TokenResponse",
    "RefreshResponse",
    "HealthResponse",
    "DocnexusLinkSearchPayload",
    "DocnexusLinkProfilePayload",
    "AdvancedSearchQueryPayload",
]
