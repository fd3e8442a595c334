"""Application constants."""

USER_AGENT = "venue-map/0.3 (+position-feed)"

# British National Grid as a transverse Mercator on Airy 1830 / OSGB36.
OSGB36_PROJ = (
    "+proj=tmerc +lat_0=49 +lon_0=-2 +k=0.9996012717 "
    "+x_0=400000 +y_0=-100000 +ellps=airy +datum=OSGB36 +units=m +no_defs"
)
WGS84_PROJ = "+proj=longlat +datum=WGS84 +no_defs"

QUAD_CORNER_COUNT = 4

DEFAULT_MAP_STYLE = "mapbox://styles/mapbox/streets-v12"
DEFAULT_CENTER = (-74.5, 40.0)
DEFAULT_ZOOM = 12
DEFAULT_FLY_TO_DURATION_MS = 2000

STAGES = (
    "convert",
    "polygons",
    "validate",
)
EXIT_SUCCESS = 0
EXIT_PARTIAL = 10
EXIT_HARD_FAIL = 20
JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "venue",
    "event",
    "status",
    "attempt",
    "duration_ms",
    "rows_in",
    "rows_out",
    "error_code",
    "message",
)
