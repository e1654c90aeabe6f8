from dataclasses import dataclass
from typing import Any, Dict, List, NamedTuple, Optional


@dataclass(frozen=True)
class Station:
    """A flood-monitoring station as listed by the stations endpoint."""
    id: str
    label: Optional[str] = None
    catchment_name: Optional[str] = None

    @property
    def reference(self) -> str:
        return self.id.rstrip("/").split("/")[-1]

    @property
    def display_name(self) -> str:
        return self.catchment_name or self.label or "Unnamed Station"

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "Station":
        label = item.get("label")
        # The API occasionally returns a list of labels for merged stations
        if isinstance(label, list):
            label = label[0] if label else None
        return cls(id=item["@id"], label=label, catchment_name=item.get("catchmentName"))

    def to_item(self) -> Dict[str, Any]:
        return {"@id": self.id, "label": self.label, "catchmentName": self.catchment_name}


@dataclass(frozen=True)
class RawReading:
    """One timestamped sample exactly as the readings endpoint reports it."""
    id: str
    date_time: str
    measure: str
    value: float

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "RawReading":
        """Builds a reading from an API item, raising KeyError/ValueError/TypeError if malformed."""
        return cls(
            id=str(item.get("@id", "")),
            date_time=str(item["dateTime"]),
            measure=str(item["measure"]),
            value=float(item["value"]),
        )

    def to_item(self) -> Dict[str, Any]:
        item = {"dateTime": self.date_time, "measure": self.measure, "value": self.value}
        if self.id:
            item = {"@id": self.id, **item}
        return item


@dataclass(frozen=True)
class SeriesPoint:
    """Chart-ready readings merged for a single timestamp."""
    date_time: str
    display_time: str
    stage: Optional[float] = None
    downstream: Optional[float] = None


class TransformResult(NamedTuple):
    points: List[SeriesPoint]
    has_stage: bool
    has_downstream: bool
