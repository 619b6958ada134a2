from __future__ import annotations
from enum import Enum


class ErrorCode(str, Enum):
    OK = "OK"
    CONFIG = "CONFIG"
    NO_INPUT_FILES = "NO_INPUT_FILES"
    SCHEMA_MISMATCH = "SCHEMA_MISMATCH"
    DUPLICATE_RIDE_ID = "DUPLICATE_RIDE_ID"
    GEOMETRY_INPUT = "GEOMETRY_INPUT"
    INTERNAL = "INTERNAL"


class TripPipelineError(Exception):
    """Base class for all fatal trip-pipeline errors."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code: ErrorCode = code
        self.message: str = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, msg={self.message})"


class ConfigError(TripPipelineError):
    def __init__(self, msg: str):
        super().__init__(ErrorCode.CONFIG, msg)


class NoInputFilesError(TripPipelineError):
    def __init__(self, data_dir, pattern: str) -> None:
        super().__init__(
            ErrorCode.NO_INPUT_FILES,
            f"No trip files matching '{pattern}' in {data_dir}",
        )


class SchemaMismatchError(TripPipelineError):
    def __init__(self, file_name: str, missing: list[str], unexpected: list[str]) -> None:
        super().__init__(
            ErrorCode.SCHEMA_MISMATCH,
            f"{file_name}: missing columns {missing}, unexpected columns {unexpected}",
        )
        self.file_name = file_name
        self.missing = missing
        self.unexpected = unexpected


class DuplicateRideIdError(TripPipelineError):
    def __init__(self, duplicates: int) -> None:
        super().__init__(
            ErrorCode.DUPLICATE_RIDE_ID,
            f"{duplicates} duplicated ride_id value(s); rerun ingestion",
        )
        self.duplicates = duplicates


class GeometryInputError(TripPipelineError):
    def __init__(self, msg: str):
        super().__init__(ErrorCode.GEOMETRY_INPUT, msg)
