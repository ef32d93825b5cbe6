"""Export JSON schemas for TripRequest, ItineraryResult and ItineraryDocument."""

import json
from pathlib import Path

from backend.app.models import ItineraryDocument, ItineraryResult, TripRequest

SCHEMAS = {
    "TripRequest": TripRequest,
    "ItineraryResult": ItineraryResult,
    "ItineraryDocument": ItineraryDocument,
}


def main(schemas_dir: Path = Path("docs/schemas")) -> None:
    """Export schemas to docs/schemas/."""
    schemas_dir.mkdir(parents=True, exist_ok=True)

    for name, model in SCHEMAS.items():
        path = schemas_dir / f"{name}.schema.json"
        with open(path, "w") as f:
            json.dump(model.model_json_schema(), f, indent=2)
        print(f"Exported {name} schema to {path}")


if __name__ == "__main__":
    main()
