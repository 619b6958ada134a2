"""Column layout of a trip record as it moves through the pipeline."""

# raw monthly file, in file order
RAW_COLUMNS = [
    "ride_id",
    "rideable_type",
    "started_at",
    "ended_at",
    "start_station_name",
    "start_station_id",
    "end_station_name",
    "end_station_id",
    "start_lat",
    "start_lng",
    "end_lat",
    "end_lng",
    "member_casual",
]

RENAMES = {"started_at": "time_start", "ended_at": "time_end"}

RAW_TIME_COLUMNS = list(RENAMES)
COORD_COLUMNS = ["start_lat", "start_lng", "end_lat", "end_lng"]
STATION_COLUMNS = [
    "start_station_name",
    "start_station_id",
    "end_station_name",
    "end_station_id",
]

# (id column, name column, lat column, lng column) per endpoint
ENDPOINTS = [
    ("start_station_id", "start_station_name", "start_lat", "start_lng"),
    ("end_station_id", "end_station_name", "end_lat", "end_lng"),
]

RIDEABLE_TYPES = ["classic_bike", "electric_bike", "docked_bike"]
MEMBER_TYPES = ["member", "casual"]

# derived
DURATION = "duration_mins"
DAY_TYPE = "day_type"
TRIP_TYPE = "trip_type"
HOUR_START = "hour_start"
MONTH_START = "month_start"
DISTANCE = "distance_miles"
DIRECTION = "direction"

WEEKEND = "Weekend"
SHOULDER_WEEKDAY = "Shoulder Weekday"
MIDDLE_WEEKDAY = "Middle Weekday"
DAY_TYPES = [WEEKEND, SHOULDER_WEEKDAY, MIDDLE_WEEKDAY]

ROUND_TRIP = "Round Trip"
ONE_WAY = "One Way"
TRIP_TYPES = [ROUND_TRIP, ONE_WAY]

GEOMETRY_COLUMNS = ["ride_id", DISTANCE, DIRECTION]

# never persisted
EXPORT_EXCLUDED = [DURATION]
