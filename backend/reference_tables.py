# Bundled reference tables, seeded into the database on first run and used
# by InMemoryReferenceData. Sources: ASME B36.10M / SABS 62 / SABS 719 pipe
# tables, BS 4504 / SABS 1123 / BS 10 flange tables, ISO 4014 bolt catalogs.

# NB (mm) → NPS (inch), true outside diameter (mm)
_NB_NPS = [
    (15, 0.5, 21.3),
    (20, 0.75, 26.7),
    (25, 1, 33.4),
    (32, 1.25, 42.2),
    (40, 1.5, 48.3),
    (50, 2, 60.3),
    (65, 2.5, 73.0),
    (80, 3, 88.9),
    (90, 3.5, 101.6),
    (100, 4, 114.3),
    (125, 5, 141.3),
    (150, 6, 168.3),
    (200, 8, 219.1),
    (250, 10, 273.0),
    (300, 12, 323.8),
    (350, 14, 355.6),
    (400, 16, 406.4),
    (450, 18, 457.2),
    (500, 20, 508.0),
    (550, 22, 558.8),
    (600, 24, 609.6),
    (650, 26, 660.4),
    (700, 28, 711.2),
    (750, 30, 762.0),
    (800, 32, 812.8),
    (850, 34, 863.6),
    (900, 36, 914.4),
    (1000, 40, 1016.0),
    (1050, 42, 1066.8),
    (1200, 48, 1219.2),
]

NB_NPS_LOOKUP = [
    {"nominal_bore_mm": nb, "nps_inch": nps, "outside_diameter_mm": od}
    for nb, nps, od in _NB_NPS
]

ASTM_A106_GR_B = 1
SABS_719_ERW = 2
SABS_62_ERW = 3

STEEL_SPECIFICATIONS = [
    {"id": ASTM_A106_GR_B, "name": "ASTM A106 Grade B"},
    {"id": SABS_719_ERW, "name": "SABS 719 ERW"},
    {"id": SABS_62_ERW, "name": "SABS 62 ERW Medium/Heavy"},
]

# (NB mm, OD mm, schedule designation, WT mm, kg/m): ASME B36.10M plain-end masses
_ASTM_A106_SCHEDULES = [
    (50, 60.3, "40", 3.91, 5.44),
    (50, 60.3, "STD", 3.91, 5.44),
    (50, 60.3, "80", 5.54, 7.48),
    (50, 60.3, "XS", 5.54, 7.48),
    (50, 60.3, "160", 8.74, 11.11),
    (80, 88.9, "40", 5.49, 11.29),
    (80, 88.9, "80", 7.62, 15.27),
    (80, 88.9, "160", 11.13, 21.35),
    (100, 114.3, "40", 6.02, 16.08),
    (100, 114.3, "80", 8.56, 22.32),
    (100, 114.3, "160", 13.49, 33.54),
    (150, 168.3, "40", 7.11, 28.26),
    (150, 168.3, "80", 10.97, 42.56),
    (150, 168.3, "160", 18.26, 67.56),
    (200, 219.1, "20", 6.35, 33.31),
    (200, 219.1, "30", 7.04, 36.81),
    (200, 219.1, "40", 8.18, 42.55),
    (200, 219.1, "80", 12.70, 64.64),
    (250, 273.0, "20", 6.35, 41.77),
    (250, 273.0, "30", 7.80, 51.01),
    (250, 273.0, "40", 9.27, 60.31),
    (250, 273.0, "80", 15.09, 96.01),
    (300, 323.8, "20", 6.35, 49.73),
    (300, 323.8, "30", 8.38, 65.20),
    (300, 323.8, "STD", 9.53, 73.88),
    (300, 323.8, "40", 10.31, 79.73),
    (300, 323.8, "80", 17.48, 132.08),
    (350, 355.6, "10", 6.35, 54.69),
    (350, 355.6, "20", 7.92, 67.90),
    (350, 355.6, "30", 9.53, 81.33),
    (350, 355.6, "40", 11.13, 94.55),
    (400, 406.4, "10", 6.35, 62.64),
    (400, 406.4, "20", 7.92, 77.83),
    (400, 406.4, "30", 9.53, 93.27),
    (400, 406.4, "40", 12.70, 123.30),
    (450, 457.2, "10", 6.35, 70.57),
    (450, 457.2, "20", 7.92, 87.71),
    (450, 457.2, "40", 14.27, 155.80),
    (500, 508.0, "10", 6.35, 78.55),
    (500, 508.0, "20", 9.53, 117.15),
    (500, 508.0, "30", 12.70, 155.12),
    (500, 508.0, "40", 15.09, 183.42),
    (600, 609.6, "10", 6.35, 94.53),
    (600, 609.6, "20", 9.53, 141.12),
    (600, 609.6, "40", 17.48, 255.41),
]

# SABS 62 small-bore tube: MEDIUM / HEAVY designations
_SABS_62_DESIGNATIONS = [
    (25, 33.7, "MEDIUM", 3.2, 2.41),
    (25, 33.7, "HEAVY", 4.0, 2.93),
    (50, 60.3, "MEDIUM", 3.6, 5.03),
    (50, 60.3, "HEAVY", 4.5, 6.19),
    (100, 114.3, "MEDIUM", 4.5, 12.20),
    (100, 114.3, "HEAVY", 5.4, 14.50),
]

# SABS 719 ERW: ordered by wall thickness, no tabulated mass (computed from OD/WT)
_SABS_719_WALLS = [
    (200, 219.1, 4.5),
    (200, 219.1, 6.0),
    (300, 323.9, 6.0),
    (300, 323.9, 8.0),
    (500, 508.0, 6.0),
    (500, 508.0, 8.0),
    (600, 610.0, 8.0),
]


def _schedule_number(designation):
    return float(designation) if designation.isdigit() else None


PIPE_DIMENSIONS = [
    {
        "nominal_bore_mm": nb, "steel_specification_id": ASTM_A106_GR_B,
        "schedule_designation": sch, "schedule_number": _schedule_number(sch),
        "outside_diameter_mm": od, "wall_thickness_mm": wt, "mass_per_meter_kg": kgm,
    }
    for nb, od, sch, wt, kgm in _ASTM_A106_SCHEDULES
] + [
    {
        "nominal_bore_mm": nb, "steel_specification_id": SABS_62_ERW,
        "schedule_designation": sch, "schedule_number": None,
        "outside_diameter_mm": od, "wall_thickness_mm": wt, "mass_per_meter_kg": kgm,
    }
    for nb, od, sch, wt, kgm in _SABS_62_DESIGNATIONS
] + [
    {
        "nominal_bore_mm": nb, "steel_specification_id": SABS_719_ERW,
        "schedule_designation": None, "schedule_number": None,
        "outside_diameter_mm": od, "wall_thickness_mm": wt, "mass_per_meter_kg": None,
    }
    for nb, od, wt in _SABS_719_WALLS
]

# --- Flanges ---

BS_4504 = 1
SABS_1123 = 2
BS_10 = 3

FLANGE_STANDARDS = [
    {"id": BS_4504, "code": "BS 4504"},
    {"id": SABS_1123, "code": "SABS 1123"},
    {"id": BS_10, "code": "BS 10"},
]

_PRESSURE_CLASSES = {
    BS_4504: ["6/3", "10/3", "16/3", "25/3", "40/3", "64/3", "100/3", "160/3"],
    SABS_1123: ["600/3", "1000/3", "1600/3", "2500/3", "4000/3"],
    BS_10: ["T/D", "T/E", "T/F"],
}

FLANGE_PRESSURE_CLASSES = []
_PRESSURE_CLASS_IDS = {}
for _standard_id, _designations in _PRESSURE_CLASSES.items():
    for _designation in _designations:
        _pc_id = len(FLANGE_PRESSURE_CLASSES) + 1
        FLANGE_PRESSURE_CLASSES.append(
            {"id": _pc_id, "standard_id": _standard_id, "designation": _designation})
        _PRESSURE_CLASS_IDS[(_standard_id, _designation)] = _pc_id

BOLT_DESIGNATIONS = [
    "M10", "M12", "M16", "M20", "M24", "M27", "M30", "M33",
    "M36", "M39", "M42", "M45", "M52", "M56", "M64",
]
BOLT_TYPES = [{"id": i + 1, "designation": d} for i, d in enumerate(BOLT_DESIGNATIONS)]
_BOLT_IDS = {d: i + 1 for i, d in enumerate(BOLT_DESIGNATIONS)}

# (NB, standard, class, D, b, d4, f, holes, d1, bolt, pcd, mass kg)
_FLANGES = [
    (15, BS_4504, "6/3", 80.0, 12.0, 40.0, 2.0, 4, 11.0, "M10", 55.0, 0.35),
    (15, BS_4504, "10/3", 95.0, 14.0, 45.0, 2.0, 4, 14.0, "M12", 65.0, 0.59),
    (15, BS_4504, "16/3", 95.0, 14.0, 45.0, 2.0, 4, 14.0, "M12", 65.0, 0.59),
    (15, BS_4504, "64/3", 105.0, 20.0, 45.0, 2.0, 4, 14.0, None, 75.0, 0.0),
    (15, SABS_1123, "1000/3", 95.0, 10.0, 45.0, 2.0, 4, 14.0, "M12", 65.0, 0.42),
    (15, BS_10, "T/D", 95.3, 4.8, None, None, 4, 14.3, None, 66.7, 0.67),
    (25, BS_4504, "10/3", 115.0, 16.0, 68.0, 2.0, 4, 14.0, "M12", 85.0, 1.00),
    (25, BS_4504, "16/3", 115.0, 16.0, 68.0, 2.0, 4, 14.0, "M12", 85.0, 1.00),
    (25, SABS_1123, "1000/3", 115.0, 10.0, 68.0, 2.0, 4, 14.0, "M12", 85.0, 0.63),
    (25, SABS_1123, "2500/3", 115.0, 16.0, 68.0, 2.0, 4, 14.0, "M12", 85.0, 1.07),
    (50, BS_4504, "6/3", 140.0, 16.0, 90.0, 3.0, 4, 14.0, "M12", 110.0, 1.30),
    (80, BS_4504, "100/3", 230.0, 34.0, 138.0, 3.0, 8, 26.0, "M24", 180.0, 6.87),
    (100, BS_4504, "160/3", 265.0, 44.0, 162.0, 3.0, 8, 30.0, "M27", 210.0, 15.30),
    (200, BS_4504, "25/3", 360.0, 28.0, 278.0, 3.0, 12, 26.0, "M24", 310.0, 12.00),
    (300, BS_4504, "40/3", 515.0, 50.0, 410.0, 4.0, 16, 33.0, "M30", 450.0, 42.00),
    (500, BS_4504, "64/3", 800.0, 94.0, 615.0, 4.0, 20, 48.0, "M45", 705.0, 196.19),
    (1000, BS_4504, "6/3", 1175.0, 46.0, 1080.0, 5.0, 28, 30.0, "M27", 1120.0, 86.00),
    (1200, BS_4504, "25/3", 1530.0, 116.0, 1350.0, 5.0, 32, 56.0, "M52", 1420.0, 472.56),
]

FLANGE_DIMENSIONS = [
    {
        "nominal_bore_mm": nb,
        "standard_id": std,
        "pressure_class_id": _PRESSURE_CLASS_IDS[(std, pc)],
        "outside_diameter_mm": D,
        "thickness_mm": b,
        "raised_face_diameter_mm": d4,
        "raised_face_height_mm": f,
        "num_holes": holes,
        "hole_diameter_mm": d1,
        "bolt_type_id": _BOLT_IDS[bolt] if bolt else None,
        "pcd_mm": pcd,
        "flange_mass_kg": mass,
    }
    for nb, std, pc, D, b, d4, f, holes, d1, bolt, pcd, mass in _FLANGES
]

# Hex bolt masses (kg) by length (mm): shank + head, full-thread approximation
_BOLT_MASS_TABLE = {
    "M10": {50: 0.043, 60: 0.049, 70: 0.055, 80: 0.061, 90: 0.068, 100: 0.074},
    "M12": {50: 0.063, 60: 0.072, 70: 0.081, 80: 0.090, 90: 0.099, 100: 0.108},
    "M16": {50: 0.119, 60: 0.135, 70: 0.150, 80: 0.166, 90: 0.182, 100: 0.198},
    "M20": {60: 0.223, 70: 0.248, 80: 0.272, 90: 0.297, 100: 0.322, 110: 0.346, 120: 0.371},
    "M24": {70: 0.374, 80: 0.409, 90: 0.445, 100: 0.480, 110: 0.516, 120: 0.551,
            140: 0.622, 160: 0.693},
    "M27": {80: 0.540, 90: 0.585, 100: 0.630, 120: 0.719, 140: 0.809, 160: 0.899},
    "M30": {90: 0.739, 100: 0.795, 120: 0.906, 140: 1.017, 150: 1.072, 160: 1.128,
            180: 1.239, 200: 1.350},
    "M45": {200: 3.277, 220: 3.527, 240: 3.776, 260: 4.026, 280: 4.276, 300: 4.526,
            320: 4.775},
}

BOLT_MASSES = [
    {"bolt_type_id": _BOLT_IDS[bolt], "length_mm": float(length), "mass_kg": mass}
    for bolt, by_length in _BOLT_MASS_TABLE.items()
    for length, mass in by_length.items()
]

# Hex nut masses (kg) per bolt type
_NUT_MASS_TABLE = {
    "M10": 0.011,
    "M12": 0.017,
    "M16": 0.034,
    "M20": 0.062,
    "M24": 0.110,
    "M27": 0.160,
    "M30": 0.220,
    "M45": 0.720,
}

NUT_MASSES = [
    {"bolt_type_id": _BOLT_IDS[bolt], "mass_kg": mass}
    for bolt, mass in _NUT_MASS_TABLE.items()
]
