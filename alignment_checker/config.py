# Design limits used by the speed and length engines
DESIGN_LIMITS = {
    "max_vp": 100,                  # cap for radius Vp, km/h
    "max_straight_vp": 100,         # straight longer than every breakpoint, km/h
    "vp_diff_tolerance": 20,        # allowed Vp jump between neighbours, km/h
    "vp_ceiling": 100,              # at this Vp the jump tolerance is inclusive
    "radius_seconds": 1,            # driving time for radius min length, s
    "straight_seconds": 1,          # driving time for straight min length, s
    "same_direction_seconds": 5,    # straight between same-direction radii, s
    "clothoid_max_factor": 2.0,     # AMax = sqrt(|R| * L * factor)
}

# Type tokens as written in the input files
TYPE_TOKENS = {
    "Gerade": "Straight",
    "Radius": "Radius",
    "Klothoide": "Clothoid",
}

# Layer names for each error type
ERROR_LAYERS = {
    "VpDiff": "ERROR_VP_DIFF",
    "MinLength": "ERROR_TOO_SHORT",
    "MaxLength": "ERROR_TOO_LONG",
}

# DXF colors for each error type
ERROR_COLORS = {
    "VpDiff": 1,        # Red
    "MinLength": 2,     # Yellow
    "MaxLength": 6,     # Magenta
}

# Layer names / colors for the element axis of the speed band
ELEMENT_LAYERS = {
    "Straight": "AXIS_STRAIGHT",
    "Clothoid": "AXIS_CLOTHOID",
    "Radius": "AXIS_RADIUS",
}

ELEMENT_COLORS = {
    "Straight": 7,
    "Clothoid": 3,      # Green
    "Radius": 5,        # Blue
}

VP_BAND_LAYER = "VP_BAND"
LABEL_LAYER = "ELEMENT_IDS"

# Drawing units per km/h on the Vp axis
DXF_VP_SCALE = 1.0
DXF_TEXT_HEIGHT = 2.5

# Default DXF version for output files
DXF_VERSION = 'R2010'

# XDATA application id for error markers
DXF_APPID = "ALIGNMENT_CHECKER"

# Layout of the exported element list
CSV_LAYOUT = {
    "header_rows": 3,
    "footer_rows": 1,
    "id_column": 0,
    "type_column": 1,
    "length_column": 3,
    "radius_column": 6,
}

# Checks run when none are selected on the command line
DEFAULT_CHECKS = ["vp_diff", "too_short", "too_long"]
