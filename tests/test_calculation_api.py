"""
HTTP API tests — calculation endpoints, reference listings, health, registry.
"""

import pytest

from backend.calculators.bend import BendCalculator
from backend.calculators.registry import get_calculator, has_calculator, list_calculators
from backend.calculators.straight_pipe import StraightPipeCalculator


def _pipe_payload(**overrides):
    payload = {
        "nominal_bore_mm": 500,
        "schedule_mode": "schedule",
        "schedule_number": "Sch20",
        "individual_pipe_length": 12.192,
        "length_unit": "meters",
        "quantity_mode": "total_length",
        "quantity_value": 8000,
        "working_pressure_bar": 10,
        "steel_specification_id": 1,
    }
    payload.update(overrides)
    return payload


def _bend_payload(**overrides):
    payload = {
        "nominal_bore_mm": 350,
        "schedule_number": "Sch40",
        "bend_type": "3D",
        "bend_degrees": 90,
        "number_of_tangents": 0,
        "tangent_lengths": [],
        "quantity_value": 2,
        "working_pressure_bar": 16,
        "working_temperature_c": 20,
        "steel_specification_id": 1,
    }
    payload.update(overrides)
    return payload


# ============================================================
# Straight pipe
# ============================================================

def test_straight_pipe_calculate(client, seeded_db):
    res = client.post("/api/rfq/straight-pipe/calculate", json=_pipe_payload())
    assert res.status_code == 200
    data = res.json()
    assert data["item_type"] == "straight_pipe"
    assert data["calculated_pipe_count"] == 657
    assert data["number_of_flanges"] == 1314
    assert data["number_of_flange_welds"] == 1314
    assert data["number_of_butt_welds"] == 0
    assert data["outside_diameter_mm"] == 508.0
    assert data["wall_thickness_mm"] == 9.53
    assert data["total_pipe_weight_kg"] == pytest.approx(937200, abs=1)


def test_straight_pipe_with_flange_hardware(client, seeded_db):
    res = client.post("/api/rfq/straight-pipe/calculate",
                      json=_pipe_payload(flange_standard_id=1, flange_pressure_class_id=6))
    assert res.status_code == 200
    data = res.json()
    assert data["total_flange_weight_kg"] == pytest.approx(257793.66)
    assert data["total_system_weight_kg"] == pytest.approx(1332859, abs=1)


def test_straight_pipe_unknown_schedule_404(client, seeded_db):
    res = client.post("/api/rfq/straight-pipe/calculate", json=_pipe_payload(schedule_number="Sch55"))
    assert res.status_code == 404
    detail = res.json()["detail"]
    assert "schedule 55" in detail
    assert "Sch55" in detail


def test_straight_pipe_unknown_steel_404(client, seeded_db):
    res = client.post("/api/rfq/straight-pipe/calculate", json=_pipe_payload(steel_specification_id=42))
    assert res.status_code == 404
    assert "42" in res.json()["detail"]


def test_straight_pipe_empty_reference_tables_404(client):
    res = client.post("/api/rfq/straight-pipe/calculate", json=_pipe_payload())
    assert res.status_code == 404


def test_straight_pipe_schedule_mode_requires_schedule(client):
    res = client.post("/api/rfq/straight-pipe/calculate", json=_pipe_payload(schedule_number=None))
    assert res.status_code == 422


def test_straight_pipe_wall_thickness_mode_requires_thickness(client):
    res = client.post("/api/rfq/straight-pipe/calculate",
                      json=_pipe_payload(schedule_mode="wall_thickness", schedule_number=None))
    assert res.status_code == 422


@pytest.mark.parametrize("field, value", [
    ("nominal_bore_mm", 0),
    ("individual_pipe_length", -1),
    ("quantity_value", 0),
    ("working_pressure_bar", 1500),
    ("length_unit", "yards"),
])
def test_straight_pipe_invalid_input_422(client, field, value):
    res = client.post("/api/rfq/straight-pipe/calculate", json=_pipe_payload(**{field: value}))
    assert res.status_code == 422


# ============================================================
# Bend
# ============================================================

def test_bend_calculate(client):
    """No reference data needed — works against an empty database."""
    res = client.post("/api/rfq/bend/calculate", json=_bend_payload())
    assert res.status_code == 200
    data = res.json()
    assert data["item_type"] == "bend"
    assert data["bend_radius_mm"] == 1050
    assert data["center_to_face_mm"] == pytest.approx(742.46)
    assert data["quantity_value"] == 2
    assert data["outside_diameter_mm"] == 370


def test_bend_unknown_schedule_uses_default_wall(client):
    res = client.post("/api/rfq/bend/calculate", json=_bend_payload(schedule_number="Sch55"))
    assert res.status_code == 200
    assert res.json()["wall_thickness_mm"] == 6.35


def test_bend_tangent_mismatch_422(client):
    res = client.post("/api/rfq/bend/calculate",
                      json=_bend_payload(number_of_tangents=2, tangent_lengths=[500]))
    assert res.status_code == 422


def test_bend_unknown_bend_type_422(client):
    res = client.post("/api/rfq/bend/calculate", json=_bend_payload(bend_type="4D"))
    assert res.status_code == 422


# ============================================================
# Reference data
# ============================================================

def test_seed_endpoint(client):
    res = client.post("/api/reference/seed")
    assert res.status_code == 200
    assert res.json()["seeded"]["nb_nps_lookup"] == 30

    again = client.post("/api/reference/seed")
    assert again.json()["seeded"] == {}


def test_reference_listings(client, seeded_db):
    nb = client.get("/api/reference/nb-nps").json()
    assert len(nb) == 30
    assert nb[0]["nominal_bore_mm"] == 15

    steels = client.get("/api/reference/steel-specifications").json()
    assert [s["id"] for s in steels] == [1, 2, 3]

    standards = client.get("/api/reference/flange-standards").json()
    assert standards[0]["code"] == "BS 4504"

    classes = client.get("/api/reference/flange-pressure-classes", params={"standard_id": 2}).json()
    assert [c["designation"] for c in classes] == ["600/3", "1000/3", "1600/3", "2500/3", "4000/3"]


def test_bend_types(client):
    res = client.get("/api/reference/bend-types")
    assert res.json() == ["1.5D", "2D", "3D", "5D"]


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"


# ============================================================
# Registry
# ============================================================

def test_registry_lists_item_types():
    assert set(list_calculators()) == {"straight_pipe", "bend"}
    assert has_calculator("bend")
    assert not has_calculator("reducer")


def test_registry_returns_calculators(reference_data):
    assert isinstance(get_calculator("straight_pipe", reference_data), StraightPipeCalculator)
    assert isinstance(get_calculator("bend"), BendCalculator)


def test_registry_unknown_type_raises():
    with pytest.raises(ValueError, match="No calculator registered"):
        get_calculator("reducer")


def test_straight_pipe_calculator_requires_provider():
    from backend.schemas import PipeSpecification
    spec = PipeSpecification(**_pipe_payload())
    with pytest.raises(ValueError):
        StraightPipeCalculator().calculate(spec)
