"""Export JSON schemas for TripPlan, DayPlan and OptimizationSuggestion."""

import json
from pathlib import Path

from tripengine.models import DayPlan, OptimizationSuggestion, TripPlan


def main() -> None:
    """Export schemas to docs/schemas/."""
    schemas_dir = Path("docs/schemas")
    schemas_dir.mkdir(parents=True, exist_ok=True)

    for model in (TripPlan, DayPlan, OptimizationSuggestion):
        schema = model.model_json_schema(by_alias=True)
        path = schemas_dir / f"{model.__name__}.schema.json"
        with open(path, "w") as f:
            json.dump(schema, f, indent=2)
        print(f"Exported {model.__name__} schema to {path}")


if __name__ == "__main__":
    main()
