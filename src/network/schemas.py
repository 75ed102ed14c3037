from pydantic import BaseModel, Field
from typing import Annotated, List, Literal, NamedTuple, Optional, Union

class NodeKey(NamedTuple):
    """Graph node identity: a station name served by one line"""
    name: str
    line: str

class StationSeed(BaseModel):
    """Corridor entry as declared in the static network data"""
    name: str
    lat: Optional[float] = None
    lon: Optional[float] = None

class InterchangeDeclaration(BaseModel):
    """Walking connection between two (station, line) nodes"""
    station_a: str
    line_a: str
    station_b: str
    line_b: str
    minutes: float = Field(gt=0)

class Station(BaseModel):
    """One (station, line) record of the catalog"""
    id: int
    name: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    line_name: str
    line_color: Optional[str] = None

    class Config:
        frozen = True

    @property
    def key(self) -> NodeKey:
        return NodeKey(self.name, self.line_name)

class RideEdge(BaseModel):
    """Train ride between adjacent stations of one corridor"""
    kind: Literal["ride"] = "ride"
    target: NodeKey
    minutes: float = Field(gt=0)
    line: str

    class Config:
        frozen = True

class TransferEdge(BaseModel):
    """In-station walk between two lines"""
    kind: Literal["transfer"] = "transfer"
    target: NodeKey
    minutes: float = Field(gt=0)

    class Config:
        frozen = True

Edge = Annotated[Union[RideEdge, TransferEdge], Field(discriminator="kind")]

class LineSummary(BaseModel):
    """Line with its ordered stations, for display"""
    name: str
    color: Optional[str] = None
    stations: List[str]
