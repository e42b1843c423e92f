"""
Response records for the Police API.

Each model maps the upstream JSON one-to-one. Optional upstream fields are
None when the API leaves them out or sends null; nothing is defaulted to an
empty string or zero. Unknown fields are ignored so additive schema changes
do not break decoding.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# -----------------------
# Forces
# -----------------------

class Force(_Record):
    id: str
    name: str


class EngagementMethod(_Record):
    type: str
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None


class ForceDetail(_Record):
    id: str
    name: str
    description: Optional[str] = None
    url: Optional[str] = None
    telephone: Optional[str] = None
    engagement_methods: List[EngagementMethod]


class ContactDetails(_Record):
    email: Optional[str] = None
    telephone: Optional[str] = None
    mobile: Optional[str] = None
    fax: Optional[str] = None
    web: Optional[str] = None
    address: Optional[str] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    youtube: Optional[str] = None
    myspace: Optional[str] = None
    bebo: Optional[str] = None
    flickr: Optional[str] = None
    google_plus: Optional[str] = Field(None, alias="google-plus")
    forum: Optional[str] = None
    e_messaging: Optional[str] = Field(None, alias="e-messaging")
    blog: Optional[str] = None
    rss: Optional[str] = None


class SeniorOfficer(_Record):
    name: str
    rank: str
    bio: Optional[str] = None
    contact_details: ContactDetails


class NeighbourhoodTeamMember(SeniorOfficer):
    """Same shape as a senior officer, returned per neighbourhood."""


# -----------------------
# Crime
# -----------------------

class CrimeCategory(_Record):
    url: str
    name: str


class CrimeLastUpdated(_Record):
    # e.g. "2024-01-01"; only the month is meaningful
    date: str


class AvailableDate(_Record):
    date: str
    stop_and_search: List[str] = Field(alias="stop-and-search")


class Street(_Record):
    id: int
    name: str


class Location(_Record):
    latitude: str
    longitude: str
    street: Street


class OutcomeStatus(_Record):
    category: str
    date: str


class Crime(_Record):
    id: int
    category: str
    month: str
    persistent_id: Optional[str] = None
    location_type: Optional[str] = None
    location_subtype: Optional[str] = None
    location: Optional[Location] = None
    context: Optional[str] = None
    outcome_status: Optional[OutcomeStatus] = None


class OutcomeDetail(_Record):
    code: str
    name: str


class Outcome(_Record):
    """One entry of outcomes-at-location."""
    category: OutcomeDetail
    date: str
    person_id: Optional[int] = None
    crime: Crime


class CrimeOutcome(_Record):
    category: OutcomeDetail
    date: str
    person_id: Optional[int] = None


class CrimeOutcomes(_Record):
    crime: Crime
    outcomes: List[CrimeOutcome]


# -----------------------
# Neighbourhoods
# -----------------------

class Neighbourhood(_Record):
    # only unique within a force
    id: str
    name: str


class LatLng(_Record):
    latitude: str
    longitude: str


class Link(_Record):
    url: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


class NeighbourhoodLocation(_Record):
    name: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    postcode: Optional[str] = None
    address: Optional[str] = None
    telephone: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None


class NeighbourhoodDetail(_Record):
    id: str
    name: str
    description: Optional[str] = None
    population: Optional[str] = None
    url_force: Optional[str] = None
    contact_details: ContactDetails
    centre: LatLng
    links: List[Link]
    locations: List[NeighbourhoodLocation]


class NeighbourhoodEvent(_Record):
    title: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    type: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    contact_details: Optional[ContactDetails] = None


class NeighbourhoodPriority(_Record):
    issue: Optional[str] = None
    issue_date: Optional[str] = Field(None, alias="issue-date")
    action: Optional[str] = None
    action_date: Optional[str] = Field(None, alias="action-date")


class LocateNeighbourhoodResult(_Record):
    force: str
    neighbourhood: str


# -----------------------
# Stop and search
# -----------------------

class StopAndSearchType(str, Enum):
    PERSON = "Person search"
    VEHICLE = "Vehicle search"
    PERSON_AND_VEHICLE = "Person and Vehicle search"


class OutcomeObject(_Record):
    id: Optional[str] = None
    name: Optional[str] = None


class StopAndSearch(_Record):
    type: Optional[StopAndSearchType] = None
    involved_person: Optional[bool] = None
    datetime: Optional[str] = None
    operation: Optional[bool] = None
    operation_name: Optional[str] = None
    location: Optional[Location] = None
    gender: Optional[str] = None
    age_range: Optional[str] = None
    self_defined_ethnicity: Optional[str] = None
    officer_defined_ethnicity: Optional[str] = None
    legislation: Optional[str] = None
    object_of_search: Optional[str] = None
    outcome: Optional[str] = None
    outcome_linked_to_object_of_search: Optional[bool] = None
    removal_of_more_than_outer_clothing: Optional[bool] = None
    outcome_object: Optional[OutcomeObject] = None

    @field_validator("outcome", mode="before")
    @classmethod
    def _false_means_nothing_found(cls, v):
        # the API sends false instead of null when nothing was found
        if v is False:
            return None
        return v
