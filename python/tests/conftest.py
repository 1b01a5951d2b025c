import pytest

from StarChart.context import Datasets
from StarChart.sky_types import Constellation, ObjectKind

from chart_test_utils import dso, make_context, star


@pytest.fixture
def context():
    return make_context()


@pytest.fixture
def orion_data():
    """A handful of real-ish objects around Orion"""
    stars = [
        star(88.79, 7.41, 0.5, "27989", "Betelgeuse"),
        star(78.63, -8.20, 0.13, "24436", "Rigel"),
        star(81.28, 6.35, 1.64, "25336", "Bellatrix"),
        star(83.00, -0.30, 2.25, "25930"),
        star(84.05, -1.20, 1.69, "26311", "Alnilam"),
        star(85.19, -1.94, 1.74, "26727", "Alnitak"),
        star(86.94, -9.67, 2.07, "27366", "Saiph"),
    ]
    objects = [
        dso(83.64, 22.01, 9.0, ObjectKind.BRIGHT_NEBULA, "NGC", "1952", 6.0),
        dso(88.10, 32.55, 6.2, ObjectKind.OPEN_CLUSTER, "M", "37", 24.0),
        dso(
            83.82, -5.39, 4.0, ObjectKind.BRIGHT_NEBULA, "M", "42", 85.0, "Orion Nebula"
        ),
        dso(81.10, 2.0, 12.5, ObjectKind.GALAXY, "NGC", "1800", 2.0),
    ]
    orion = Constellation.from_polylines(
        "Orion",
        [
            [s.coords for s in (stars[2], stars[0])],
            [s.coords for s in (stars[3], stars[4], stars[5])],
            [s.coords for s in (stars[1], stars[3])],
            [s.coords for s in (stars[5], stars[6])],
        ],
    )
    return Datasets(stars=stars, objects=objects, constellations=[orion])
