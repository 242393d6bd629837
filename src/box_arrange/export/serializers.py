"""Serializers: convert arrangement objects to JSON and tabular formats."""

from __future__ import annotations

import json
from typing import Iterable

import pandas as pd

from ..layout.arranger import ArrangementRequest, ArrangementResult
from ..layout.geometry import Rect


FRAME_COLUMNS = ["x", "y", "width", "height", "right", "bottom"]


def serialize_frames(frames: ArrangementResult | Iterable[Rect]) -> str:
    """Serialize frames as a JSON list of {x, y, width, height}."""
    return json.dumps([f.to_dict() for f in frames])


def serialize_result(result: ArrangementResult) -> str:
    """Serialize a result, including the spacing that was applied."""
    return json.dumps(result.to_dict())


def serialize_request(request: ArrangementRequest) -> str:
    """Serialize a request's inputs as a JSON string."""
    return json.dumps(request.to_dict())


def frames_to_dataframe(frames: Iterable[Rect]) -> pd.DataFrame:
    """One row per frame, indexed by item position."""
    rows = [
        (f.x, f.y, f.width, f.height, f.right, f.bottom)
        for f in frames
    ]
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS, dtype=float)
    df.index.name = "item"
    return df
