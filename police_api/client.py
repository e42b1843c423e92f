from __future__ import annotations

from types import TracebackType
from typing import List, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from .area import Area, Coordinate, LocationId, encode_area
from .config import load_settings
from .errors import InvalidInputError
from .http_client import Endpoint, dispatch
from .models import (
    AvailableDate, Crime, CrimeCategory, CrimeLastUpdated, CrimeOutcomes, Force, ForceDetail,
    LatLng, LocateNeighbourhoodResult, Neighbourhood, NeighbourhoodDetail, NeighbourhoodEvent,
    NeighbourhoodPriority, NeighbourhoodTeamMember, Outcome, SeniorOfficer, StopAndSearch,
)
from .utils import require_id, validate_ym


def _seg(name: str, value: str) -> str:
    return quote(require_id(name, value), safe="")


class Client:
    """
    Handle on the Police API. Safe to share between threads: nothing on it
    changes after construction, the session manages its own connection pool.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        session=None,
        timeout: float | None = None,
    ) -> None:
        if not base_url or timeout is None:
            try:
                settings = load_settings()
            except ValidationError as e:
                raise InvalidInputError(f"invalid POLICE_API_* settings: {e}") from e
            base_url = base_url or settings.base_url
            timeout = timeout if timeout is not None else settings.timeout
        self.base_url = base_url
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _get(self, name: str, path: str, shape, params: dict | None = None):
        endpoint = Endpoint(path=path, shape=shape, params=params or {}, name=name)
        return dispatch(self.session, self.base_url, endpoint, timeout=self.timeout)

    # ----- Forces -----

    def forces(self) -> List[Force]:
        return self._get("forces", "forces", List[Force])

    def force(self, force_id: str) -> ForceDetail:
        return self._get("force", f"forces/{_seg('force_id', force_id)}", ForceDetail)

    def senior_officers(self, force_id: str) -> List[SeniorOfficer]:
        return self._get(
            "senior_officers", f"forces/{_seg('force_id', force_id)}/people", List[SeniorOfficer]
        )

    # ----- Crime -----

    def crime_categories(self, date: Optional[str] = None) -> List[CrimeCategory]:
        return self._get(
            "crime_categories", "crime-categories", List[CrimeCategory], {"date": validate_ym(date)}
        )

    def crime_last_updated(self) -> CrimeLastUpdated:
        return self._get("crime_last_updated", "crime-last-updated", CrimeLastUpdated)

    def crime_street_dates(self) -> List[AvailableDate]:
        """Months with street-level data, and the forces with stop and search data for each."""
        return self._get("crime_street_dates", "crimes-street-dates", List[AvailableDate])

    def street_level_crimes(
        self, area: Area, category: str = "all-crime", date: Optional[str] = None
    ) -> List[Crime]:
        params = {**encode_area(area), "date": validate_ym(date)}
        return self._get(
            "street_level_crimes", f"crimes-street/{_seg('category', category)}", List[Crime], params
        )

    def crimes_at_location(self, location_id: str, date: Optional[str] = None) -> List[Crime]:
        params = {**encode_area(LocationId(location_id)), "date": validate_ym(date)}
        return self._get("crimes_at_location", "crimes-at-location", List[Crime], params)

    def crimes_no_location(
        self, force: str, category: str = "all-crime", date: Optional[str] = None
    ) -> List[Crime]:
        params = {
            "category": require_id("category", category),
            "force": require_id("force", force),
            "date": validate_ym(date),
        }
        return self._get("crimes_no_location", "crimes-no-location", List[Crime], params)

    def street_level_outcomes(self, area: Area, date: Optional[str] = None) -> List[Outcome]:
        params = {**encode_area(area), "date": validate_ym(date)}
        return self._get("street_level_outcomes", "outcomes-at-location", List[Outcome], params)

    def outcomes_for_crime(self, persistent_id: str) -> CrimeOutcomes:
        return self._get(
            "outcomes_for_crime",
            f"outcomes-for-crime/{_seg('persistent_id', persistent_id)}",
            CrimeOutcomes,
        )

    # ----- Neighbourhoods -----

    def neighbourhoods(self, force_id: str) -> List[Neighbourhood]:
        return self._get(
            "neighbourhoods", f"{_seg('force_id', force_id)}/neighbourhoods", List[Neighbourhood]
        )

    def _neighbourhood_path(self, force_id: str, neighbourhood_id: str) -> str:
        return f"{_seg('force_id', force_id)}/{_seg('neighbourhood_id', neighbourhood_id)}"

    def neighbourhood(self, force_id: str, neighbourhood_id: str) -> NeighbourhoodDetail:
        return self._get(
            "neighbourhood", self._neighbourhood_path(force_id, neighbourhood_id), NeighbourhoodDetail
        )

    def neighbourhood_boundary(self, force_id: str, neighbourhood_id: str) -> List[LatLng]:
        path = f"{self._neighbourhood_path(force_id, neighbourhood_id)}/boundary"
        return self._get("neighbourhood_boundary", path, List[LatLng])

    def neighbourhood_team(self, force_id: str, neighbourhood_id: str) -> List[NeighbourhoodTeamMember]:
        path = f"{self._neighbourhood_path(force_id, neighbourhood_id)}/people"
        return self._get("neighbourhood_team", path, List[NeighbourhoodTeamMember])

    def neighbourhood_events(self, force_id: str, neighbourhood_id: str) -> List[NeighbourhoodEvent]:
        path = f"{self._neighbourhood_path(force_id, neighbourhood_id)}/events"
        return self._get("neighbourhood_events", path, List[NeighbourhoodEvent])

    def neighbourhood_priorities(self, force_id: str, neighbourhood_id: str) -> List[NeighbourhoodPriority]:
        path = f"{self._neighbourhood_path(force_id, neighbourhood_id)}/priorities"
        return self._get("neighbourhood_priorities", path, List[NeighbourhoodPriority])

    def locate_neighbourhood(self, coordinate: Coordinate) -> LocateNeighbourhoodResult:
        return self._get(
            "locate_neighbourhood", "locate-neighbourhood", LocateNeighbourhoodResult,
            {"q": coordinate.as_param()},
        )

    # ----- Stop and search -----

    def stops_street(self, area: Area, date: Optional[str] = None) -> List[StopAndSearch]:
        params = {**encode_area(area), "date": validate_ym(date)}
        return self._get("stops_street", "stops-street", List[StopAndSearch], params)

    def stops_at_location(self, location_id: str, date: Optional[str] = None) -> List[StopAndSearch]:
        params = {**encode_area(LocationId(location_id)), "date": validate_ym(date)}
        return self._get("stops_at_location", "stops-at-location", List[StopAndSearch], params)

    def stops_no_location(self, force: str, date: Optional[str] = None) -> List[StopAndSearch]:
        params = {"force": require_id("force", force), "date": validate_ym(date)}
        return self._get("stops_no_location", "stops-no-location", List[StopAndSearch], params)

    def stops_force(self, force: str, date: Optional[str] = None) -> List[StopAndSearch]:
        params = {"force": require_id("force", force), "date": validate_ym(date)}
        return self._get("stops_force", "stops-force", List[StopAndSearch], params)
