#Purpose: The directions provider "adapter/client".
#Sole responsibility: ask an OSRM-compatible /route endpoint for the road path
#between two points and return it in our (lat, lon) shape.
#Encapsulates provider-specific details:
#coordinate formatting (lon,lat)
#URL construction (/route/v1/{profile}/...)
#timeouts and error handling
#parsing the GeoJSON geometry back into (lat, lon) points
#It never decides where a route may go; that is routing.decision.


from dotenv import load_dotenv
import os
from typing import Any, Dict, List, Optional, Tuple
import requests

# Read the directions base URL from environment
# Example in .env:
# OSRM_BASE_URL=http://router.project-osrm.org
load_dotenv()

# Internal coordinate type: (lat, lon)
LatLon = Tuple[float, float]


class DirectionsError(Exception):
    """Raised when the directions provider cannot produce a route."""
    pass


class DirectionsClient:
    """
    Directions adapter / client

    - Talk to the provider via HTTP
    - Convert internal (lat, lon) -> provider (lon,lat)
    - Return the road path as a list of (lat, lon)
    """
    def __init__(self, base_url: Optional[str] = None, profile: str = "driving", timeout: int = 5):
        self.base_url = (base_url or os.getenv("OSRM_BASE_URL") or "").rstrip("/")
        self.timeout = timeout #seconds to wait for the provider before giving up
        self.profile = profile #driving, walking, cycling

        if not self.base_url:
            raise ValueError("Directions base URL not set. Pass base_url or set OSRM_BASE_URL in the .env file.")

    def format_coordinates(self, coords: List[LatLon]) -> str:
        """Convert list of (lat, lon) to provider format 'lon,lat;lon,lat;...'"""
        return ';'.join(f"{lon},{lat}" for lat, lon in coords)

    def fetch_route(self, start: LatLon, end: LatLon) -> Dict[str, Any]:
        """
        Calls /route for a single leg.

        Returns:
            {
                "distance": float, # in meters
                "duration": float, # in seconds
                "path": List[LatLon], # road geometry, start to end
            }
        """
        coordinates = self.format_coordinates([start, end])
        url = f"{self.base_url}/route/v1/{self.profile}/{coordinates}"

        response = requests.get(
            url,
            params={
                "overview": "full", # full geometry, not simplified
                "geometries": "geojson",
                "steps": "false",
            },
            timeout=self.timeout,
        )

        try:
            data = response.json()
        except ValueError as exc:
            raise DirectionsError(f"Directions provider returned invalid JSON (HTTP {response.status_code})") from exc

        if data.get("code") != "Ok":
            raise DirectionsError(f"Directions error: {data.get('message', data.get('code', 'Unknown error'))}")

        routes = data.get("routes") or []
        if not routes:
            raise DirectionsError("No route found")

        route = routes[0] #the provider may return alternatives, we take the first

        try:
            #GeoJSON is [lon, lat], flip back to our (lat, lon)
            path = [(lat, lon) for lon, lat in route["geometry"]["coordinates"]]
            distance = route["distance"]
            duration = route["duration"]
        except (KeyError, TypeError, ValueError) as exc:
            raise DirectionsError(f"Malformed route in directions response: {exc!r}") from exc

        return {
            "distance": distance,
            "duration": duration,
            "path": path,
        }

    def fetch_path(self, start: LatLon, end: LatLon) -> List[LatLon]:
        return self.fetch_route(start, end)["path"]
