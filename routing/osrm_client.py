#Purpose: The OSRM "adapter/client".
#Sole responsibility: talk to OSRM via HTTP and return normalized outputs.
#Encapsulates OSRM-specific details:
#coordinate formatting (lon,lat)
#URL construction (/route)
#timeouts and error handling
#parsing response JSON into our internal shape
#It should not contain order rules or persistence.

from typing import List, Tuple, Dict, Optional
import logging

import requests

logger = logging.getLogger(__name__)

# Internal coordinate type: (lat, lon)
LatLon = Tuple[float, float]


class OSRMError(Exception):
    """Raised when OSRM cannot be reached or answers with an error."""
    pass


class OSRMClient:
    """
    OSRM Adapter / Client

    Sole responsibility:
    - Talk to OSRM via HTTP
    - Convert internal (lat, lon) -> OSRM (lon,lat)
    - Return normalized outputs

    """
    def __init__(self, base_url: str, profile: str = "driving", timeout: float = 5,
                 session: Optional[requests.Session] = None):
        if not base_url:
            raise ValueError("OSRM base URL not set. Please set OSRM_BASE_URL in the environment.")

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout #seconds to wait for OSRM before giving up
        self.profile = profile #the mode of transportation (driving, walking, cycling)
        self.session = session or requests.Session()

    def close(self) -> None:
        self.session.close()

    #----------------
    # Internal helpers
    #----------------
    @staticmethod
    def format_coordinates(coords: List[LatLon]) -> str:
        """Convert list of (lat, lon) to OSRM format 'lon,lat;lon,lat;...'"""
        return ';'.join([f"{lon},{lat}" for lat, lon in coords])

    def _get(self, url: str, params: Dict[str, str]) -> Dict:
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise OSRMError(f"OSRM request failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise OSRMError(f"OSRM returned a non-JSON response (HTTP {response.status_code})") from exc
        if not isinstance(data, dict):
            raise OSRMError(f"OSRM returned an unexpected response (HTTP {response.status_code})")

        #OSRM reports failures in the body, sometimes with a 4xx status
        if data.get("code") != "Ok":
            raise OSRMError(f"OSRM error: {data.get('message', data.get('code', 'Unknown error'))}")
        return data

    #----------------
    # Public methods
    #----------------
    def compute_route(self, coordinates: List[LatLon], alternatives: bool = False
                      ) -> List[Dict[str, float]]:
        """
        calls the OSRM /route endpoint with the given coordinates and
        returns one dict per route found

        Returns:
            [
                {
                    "distance": float, # in meters
                    "duration": float, # in seconds
                },
            ]
        """
        if len(coordinates) < 2:
            raise ValueError("At least two coordinates are required to compute a route.")

        url = f"{self.base_url}/route/v1/{self.profile}/{self.format_coordinates(coordinates)}"
        data = self._get(url, params={
            "overview": "false", # we don't need the geometry of the route
            "alternatives": "true" if alternatives else "false",
        })

        routes = data.get("routes") or []
        logger.debug("OSRM returned %d route(s) for %s", len(routes), coordinates)

        #Normalize output to internal format
        return [
            {"distance": route["distance"], "duration": route["duration"]}
            for route in routes
        ]
