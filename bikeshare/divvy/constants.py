DATA_BUCKET_URL = "https://divvy-tripdata.s3.amazonaws.com"
ARCHIVE_NAME    = "{year}{month:02d}-divvy-tripdata.zip"
TRIP_FILE_GLOB  = "*-divvy-tripdata.csv"
HEADERS = {
    "User-Agent": "BikeShareReport/1.0",
    "Accept-Language": "en-US,en;q=0.9",
}
TIMEOUT      = 60
DEFAULT_YEAR = 2023

# cleaning
TEST_MARKER        = "test"
MAX_DURATION_MINS  = 1440

# sampling
SAMPLE_FRAC = 0.10
RANDOM_SEED = 42

# geometry (great-circle on a sphere of mean earth radius)
EARTH_RADIUS_M  = 6371008.8
METERS_PER_MILE = 1609.344
