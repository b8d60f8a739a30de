"""
Save candidate routes to an HTML file you can open in a browser.
No API key required; uses Leaflet + OSM tiles.
"""

import json
from pathlib import Path
from typing import Sequence

from .candidates import CandidateRoute
from .geo import Point


def save_candidates_map(
    routes: Sequence[CandidateRoute],
    start: Point,
    output_path: str = "route_map.html",
) -> str:
    """
    Write an HTML file drawing each candidate in its colour, plus a start marker.
    Returns the absolute path to the file.
    """
    drawable = [r for r in routes if r.coordinates]
    if not drawable:
        raise ValueError("No route coordinates; nothing to draw.")

    lines = [
        {
            "color": r.color,
            "label": f"Bearing: {r.bearing:g}°, Color: {r.color}",
            "coords": [[p[0], p[1]] for p in r.coordinates],
        }
        for r in drawable
    ]
    items = "\n".join(f"    <li>{line['label']}</li>" for line in lines)

    html = f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8" />
  <title>Candidate Routes</title>
  <link rel="stylesheet" href="https://unpkg.com/leaflet@1.9.4/dist/leaflet.css" />
  <script src="https://unpkg.com/leaflet@1.9.4/dist/leaflet.js"></script>
</head>
<body>
  <div id="map" style="height: 500px; width: 100%;"></div>
  <h3>Candidate Routes:</h3>
  <ul>
{items}
  </ul>
  <script>
    var map = L.map('map').setView([{start[0]}, {start[1]}], 14);
    L.tileLayer('https://{{s}}.tile.openstreetmap.org/{{z}}/{{x}}/{{y}}.png', {{
      attribution: '&copy; OpenStreetMap contributors'
    }}).addTo(map);
    var routes = {json.dumps(lines)};
    var bounds = L.latLngBounds([[{start[0]}, {start[1]}]]);
    routes.forEach(function(r) {{
      var pl = L.polyline(r.coords, {{color: r.color, weight: 5, opacity: 0.8}}).addTo(map);
      pl.bindPopup(r.label);
      bounds.extend(pl.getBounds());
    }});
    map.fitBounds(bounds);
    L.marker([{start[0]}, {start[1]}]).addTo(map).bindPopup('Start');
  </script>
</body>
</html>
"""
    out = Path(output_path).resolve()
    out.write_text(html, encoding="utf-8")
    return str(out)
