"""Shared fixtures for greatcircle tests."""
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_addoption(parser):
    parser.addoption(
        "--regen-fixtures", action="store_true", default=False,
        help="Rewrite the stored great-circle outputs under fixtures/out/.",
    )


@dataclass(frozen=True)
class RouteFixture:
    name: str
    filename: str
    collection: Dict[str, Any]

    @property
    def start(self) -> Dict[str, Any]:
        return self.collection["features"][0]

    @property
    def end(self) -> Optional[Dict[str, Any]]:
        features = self.collection["features"]
        return features[1] if len(features) > 1 else None

    @property
    def expected(self) -> Dict[str, Any]:
        return self.collection["expected"]


@dataclass(frozen=True)
class FixtureConfig:
    """Where route fixtures live and whether stored outputs are rewritten."""
    in_dir: Path
    out_dir: Path
    regen: bool = False

    def load(self) -> List[RouteFixture]:
        return [
            RouteFixture(name=path.stem, filename=path.name, collection=json.loads(path.read_text()))
            for path in sorted(self.in_dir.glob("*.geojson"))
        ]

    def stored_output(self, fixture: RouteFixture) -> Optional[Dict[str, Any]]:
        path = self.out_dir / fixture.filename
        if not path.exists():
            return None
        return json.loads(path.read_text())

    def write_output(self, fixture: RouteFixture, results: Dict[str, Any]) -> None:
        self.out_dir.mkdir(parents=True, exist_ok=True)
        (self.out_dir / fixture.filename).write_text(json.dumps(results, indent=2))


@pytest.fixture(scope="session")
def fixture_config(request) -> FixtureConfig:
    return FixtureConfig(
        in_dir=FIXTURES_DIR / "in",
        out_dir=FIXTURES_DIR / "out",
        regen=request.config.getoption("--regen-fixtures"),
    )


@pytest.fixture(scope="session")
def route_fixtures(fixture_config) -> List[RouteFixture]:
    return fixture_config.load()


@pytest.fixture(scope="session")
def seattle_dc(route_fixtures) -> RouteFixture:
    return next(f for f in route_fixtures if f.name == "seattle-dc")
