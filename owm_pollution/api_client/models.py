from typing import Any, Dict, List, Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

AQI_CATEGORIES = {1: "Good", 2: "Fair", 3: "Moderate", 4: "Poor", 5: "Very Poor"}

RECORD_COLUMNS = ["timestamp", "aqi", "co", "no", "no2", "o3", "so2", "pm2_5", "pm10", "nh3"]


class _ApiModel(BaseModel):
    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, v: Any, info: ValidationInfo) -> Any:
        # JSON null decodes to the field's zero value
        if v is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return v


class Coordinates(_ApiModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    latitude: float = Field(0.0, alias="lat")
    longitude: float = Field(0.0, alias="lon")


class PollutionQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: Coordinates


class HistoricalPollutionQuery(BaseModel):
    """Query for the history endpoint.

    `start` and `end` are unix seconds (UTC) and are sent as given; no
    ordering check is made.
    """
    model_config = ConfigDict(frozen=True)

    location: Coordinates
    start: int
    end: int


class PollutionComponents(_ApiModel):
    co: float = 0.0
    no: float = 0.0
    no2: float = 0.0
    o3: float = 0.0
    so2: float = 0.0
    pm2_5: float = 0.0
    pm10: float = 0.0
    nh3: float = 0.0


class PollutionEntry(_ApiModel):
    model_config = ConfigDict(populate_by_name=True)

    timestamp: int = Field(0, alias="dt")
    air_quality_index: float = 0.0
    components: PollutionComponents = Field(default_factory=PollutionComponents)

    @model_validator(mode="before")
    @classmethod
    def _lift_main_aqi(cls, data: Any) -> Any:
        # the API nests the index as {"main": {"aqi": ...}}
        if isinstance(data, dict) and "main" in data:
            data = dict(data)
            main = data.pop("main") or {}
            if not isinstance(main, dict):
                raise ValueError("main must be an object")
            data.setdefault("air_quality_index", main.get("aqi", 0.0))
        return data

    @property
    def aqi_category(self) -> str:
        aqi = self.air_quality_index
        if not float(aqi).is_integer():
            return "Unknown"
        return AQI_CATEGORIES.get(int(aqi), "Unknown")

    def to_record(self) -> Dict[str, Any]:
        comp = self.components
        return {
            "timestamp": self.timestamp,
            "aqi": self.air_quality_index,
            "co": comp.co,
            "no": comp.no,
            "no2": comp.no2,
            "o3": comp.o3,
            "so2": comp.so2,
            "pm2_5": comp.pm2_5,
            "pm10": comp.pm10,
            "nh3": comp.nh3,
        }


class PollutionResult(_ApiModel):
    """Decoded body of any of the three air pollution endpoints."""
    model_config = ConfigDict(populate_by_name=True)

    timestamp: str = Field("", alias="dt")
    location: Coordinates = Field(default_factory=Coordinates, alias="coord")
    entries: List[PollutionEntry] = Field(default_factory=list, alias="list")

    @field_validator("timestamp", mode="before")
    @classmethod
    def _timestamp_as_text(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    def to_records(self) -> List[Dict[str, Any]]:
        return [entry.to_record() for entry in self.entries]

    def to_dataframe(self) -> pd.DataFrame:
        """Entries as a DataFrame with `timestamp` converted to UTC datetimes."""
        df = pd.DataFrame(self.to_records(), columns=RECORD_COLUMNS)
        df["timestamp"] = pd.to_datetime(df["timestamp"].astype("int64"), unit="s", utc=True)
        return df

    def closest_entry(self, unix_ts: int) -> Optional[PollutionEntry]:
        if not self.entries:
            return None
        return min(self.entries, key=lambda e: abs(e.timestamp - int(unix_ts)))
