"""
Shared test fixtures — SQLite test database, test client, in-memory reference data.
"""

import os
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Configure before importing app modules
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["SEED_REFERENCE_DATA"] = "false"

from backend.database import Base, get_db
from backend.main import app
from backend.calculators.reference_data import InMemoryReferenceData
from backend.routers.reference import seed_reference_data


TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def db():
    """Direct database session for test setup/assertions."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded_db(db):
    """Database session with the bundled reference tables loaded."""
    seed_reference_data(db)
    return db


@pytest.fixture
def bundled_reference_data():
    """In-memory provider over the bundled reference tables."""
    return InMemoryReferenceData.from_bundled_tables()


# --- Small hand-built reference set with known numbers ---

STEEL_A106 = 1
STANDARD_BS4504 = 1
CLASS_16_3 = 3
CLASS_NO_BOLTS = 7
CLASS_UNPRICED_BOLT = 8
BOLT_M16 = 3
BOLT_M33 = 8


def sample_tables():
    return {
        "nb_nps": [
            {"nominal_bore_mm": 100, "nps_inch": 4, "outside_diameter_mm": 114.3},
            {"nominal_bore_mm": 200, "nps_inch": 8, "outside_diameter_mm": 219.1},
            {"nominal_bore_mm": 500, "nps_inch": 20, "outside_diameter_mm": 508.0},
        ],
        "steel_specifications": [
            {"id": STEEL_A106, "name": "ASTM A106 Grade B"},
        ],
        "pipe_dimensions": [
            # 100NB Sch40 with a tabulated mass
            {"nominal_bore_mm": 100, "steel_specification_id": STEEL_A106,
             "schedule_designation": "40", "schedule_number": 40,
             "outside_diameter_mm": 114.3, "wall_thickness_mm": 6.02, "mass_per_meter_kg": 16.08},
            # 100NB STD with no mass: weight must be computed
            {"nominal_bore_mm": 100, "steel_specification_id": STEEL_A106,
             "schedule_designation": "STD", "schedule_number": None,
             "outside_diameter_mm": 114.3, "wall_thickness_mm": 6.02, "mass_per_meter_kg": None},
            # 200NB by wall thickness, zero mass: weight must be computed
            {"nominal_bore_mm": 200, "steel_specification_id": None,
             "schedule_designation": None, "schedule_number": None,
             "outside_diameter_mm": 219.1, "wall_thickness_mm": 8.0, "mass_per_meter_kg": 0},
            # 500NB Sch20
            {"nominal_bore_mm": 500, "steel_specification_id": STEEL_A106,
             "schedule_designation": "20", "schedule_number": 20,
             "outside_diameter_mm": 508.0, "wall_thickness_mm": 9.53, "mass_per_meter_kg": 117.15},
        ],
        "flange_standards": [
            {"id": STANDARD_BS4504, "code": "BS 4504"},
        ],
        "flange_pressure_classes": [
            {"id": CLASS_16_3, "standard_id": STANDARD_BS4504, "designation": "16/3"},
            {"id": CLASS_NO_BOLTS, "standard_id": STANDARD_BS4504, "designation": "100/3"},
            {"id": CLASS_UNPRICED_BOLT, "standard_id": STANDARD_BS4504, "designation": "160/3"},
        ],
        "flange_dimensions": [
            # 20 mm thick → bolt estimate = max(50, 60) = 60 mm
            {"nominal_bore_mm": 100, "standard_id": STANDARD_BS4504, "pressure_class_id": CLASS_16_3,
             "outside_diameter_mm": 220.0, "thickness_mm": 20.0, "num_holes": 8,
             "hole_diameter_mm": 18.0, "pcd_mm": 180.0, "bolt_type_id": BOLT_M16,
             "flange_mass_kg": 5.0},
            # 12 mm thick → bolt estimate floored at 50 mm
            {"nominal_bore_mm": 200, "standard_id": STANDARD_BS4504, "pressure_class_id": CLASS_16_3,
             "outside_diameter_mm": 340.0, "thickness_mm": 12.0, "num_holes": 12,
             "hole_diameter_mm": 22.0, "pcd_mm": 295.0, "bolt_type_id": BOLT_M16,
             "flange_mass_kg": 10.0},
            # No bolt type recorded
            {"nominal_bore_mm": 100, "standard_id": STANDARD_BS4504, "pressure_class_id": CLASS_NO_BOLTS,
             "outside_diameter_mm": 250.0, "thickness_mm": 30.0, "num_holes": 8,
             "hole_diameter_mm": 26.0, "pcd_mm": 200.0, "bolt_type_id": None,
             "flange_mass_kg": 8.0},
            # Bolt type with no mass rows
            {"nominal_bore_mm": 100, "standard_id": STANDARD_BS4504, "pressure_class_id": CLASS_UNPRICED_BOLT,
             "outside_diameter_mm": 265.0, "thickness_mm": 44.0, "num_holes": 8,
             "hole_diameter_mm": 30.0, "pcd_mm": 210.0, "bolt_type_id": BOLT_M33,
             "flange_mass_kg": 15.3},
        ],
        "bolt_masses": [
            # Deliberately out of order: provider must scan ascending
            {"bolt_type_id": BOLT_M16, "length_mm": 90, "mass_kg": 0.182},
            {"bolt_type_id": BOLT_M16, "length_mm": 50, "mass_kg": 0.119},
            {"bolt_type_id": BOLT_M16, "length_mm": 70, "mass_kg": 0.150},
            {"bolt_type_id": BOLT_M16, "length_mm": 55, "mass_kg": 0.127},
        ],
        "nut_masses": [
            {"bolt_type_id": BOLT_M16, "mass_kg": 0.034},
        ],
    }


@pytest.fixture
def reference_data():
    """In-memory provider over the small hand-built reference set."""
    return InMemoryReferenceData(**sample_tables())
