# run_great_circle.py
import json
import logging
import os
import sys

# Add the project root to the Python path to ensure imports work correctly
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from greatcircle import great_circle, GreatCircleError
from greatcircle.utils.geometry import truncate

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

# (name, start, end, bearing)
ROUTES = [
    ("Seattle to Washington DC", [-122, 48], [-77, 39], None),
    ("Tokyo to San Francisco", [139.6917, 35.6895], [-122.4194, 37.7749], None),
    ("Seattle due west", [-122, 48], None, 270),
]

def main():
    """
    Computes a few great-circle routes, prints a summary of each and, when an
    output path is given as the first argument, writes them as a GeoJSON
    FeatureCollection.
    """
    output_path = sys.argv[1] if len(sys.argv) > 1 else None
    features = []

    print("--- Great Circle Routes ---")
    for name, start, end, bearing in ROUTES:
        try:
            line = great_circle(start, end, properties={"name": name}, bearing=bearing)
        except GreatCircleError as e:
            print(f"  [!] {name}: {e}")
            continue

        geometry = line["geometry"]
        if geometry["type"] == "LineString":
            print(f"  > {name}: LineString, {len(geometry['coordinates'])} points")
        else:
            sizes = ", ".join(str(len(run)) for run in geometry["coordinates"])
            print(f"  > {name}: MultiLineString, runs of {sizes} points")
        features.append(truncate(line))

    if output_path:
        with open(output_path, "w") as f:
            json.dump({"type": "FeatureCollection", "features": features}, f, indent=2)
        print(f"\nWrote {len(features)} routes to {output_path}")

if __name__ == "__main__":
    main()
