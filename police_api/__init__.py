"""Typed client for the UK Police API (https://data.police.uk/docs/)."""

from .area import Area, Coordinate, LocationId, Point, Polygon, encode_area
from .client import Client
from .errors import (
    DecodeError, HttpError, InvalidInputError, NotFoundError, PoliceApiError, TransportError,
)
from .models import (
    AvailableDate, ContactDetails, Crime, CrimeCategory, CrimeLastUpdated, CrimeOutcome,
    CrimeOutcomes, EngagementMethod, Force, ForceDetail, LatLng, Link, Location,
    LocateNeighbourhoodResult, Neighbourhood, NeighbourhoodDetail, NeighbourhoodEvent,
    NeighbourhoodLocation, NeighbourhoodPriority, NeighbourhoodTeamMember, Outcome,
    OutcomeDetail, OutcomeObject, OutcomeStatus, SeniorOfficer, StopAndSearch,
    StopAndSearchType, Street,
)

__version__ = "0.1.0"
