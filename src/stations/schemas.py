from pydantic import BaseModel
from typing import List

from src.network.schemas import InterchangeDeclaration, LineSummary

class LineList(BaseModel):
    lines: List[LineSummary]

class InterchangeList(BaseModel):
    interchanges: List[InterchangeDeclaration]
