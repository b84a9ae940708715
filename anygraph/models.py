"""Dataset, parse result and scale models

Datasets are frozen value objects: a render pass never mutates them and a
new dataset replaces an old one wholesale.
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class ValuesDataset(BaseModel):
    """One or more series of scalar samples, plotted against their index"""

    model_config = ConfigDict(frozen=True)

    data_type: Literal["values"] = "values"
    values: List[List[float]] = []


class PointsDataset(BaseModel):
    """One or more series of (x, y) points"""

    model_config = ConfigDict(frozen=True)

    data_type: Literal["points"] = "points"
    points: List[List[Point]] = []


Dataset = Annotated[Union[ValuesDataset, PointsDataset], Field(discriminator="data_type")]


class ParseResult(BaseModel):
    """Outcome of parsing user text.

    ``raw_data`` always holds the untouched input, whether or not parsing
    succeeded.
    """

    success: bool
    dataset: Optional[Dataset] = None
    error: Optional[str] = None
    raw_data: str = ""

    @model_validator(mode="after")
    def _check_outcome(self) -> "ParseResult":
        if self.success:
            if self.dataset is None:
                raise ValueError("A successful parse result must carry a dataset")
            if self.error is not None:
                raise ValueError("A successful parse result cannot carry an error")
        else:
            if not self.error:
                raise ValueError("A failed parse result must carry a non-empty error")
            if self.dataset is not None:
                raise ValueError("A failed parse result cannot carry a dataset")
        return self

    @classmethod
    def ok(cls, dataset: Union[ValuesDataset, PointsDataset], raw_data: str) -> "ParseResult":
        return cls(success=True, dataset=dataset, raw_data=raw_data)

    @classmethod
    def fail(cls, error: str, raw_data: str) -> "ParseResult":
        return cls(success=False, error=error, raw_data=raw_data)


class Bounds(BaseModel):
    """Data-space extent of a plot; equal min and max is a valid zero range"""

    model_config = ConfigDict(frozen=True)

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @property
    def x_range(self) -> float:
        return self.x_max - self.x_min

    @property
    def y_range(self) -> float:
        return self.y_max - self.y_min


class Scale(Bounds):
    """Normalized bounds plus the pixel mapping of a square plot area.

    ``x_scale`` and ``y_scale`` are always the same pixels-per-unit factor.
    """

    x_scale: float
    y_scale: float
    offset_x: float
    offset_y: float
    plot_size: float

    @property
    def span(self) -> float:
        """Side length of the normalized data range, exact even far from the origin"""
        return self.plot_size / self.x_scale

    def to_pixel_x(self, value: float) -> float:
        return self.offset_x + (value - self.x_min) * self.x_scale

    def to_pixel_y(self, value: float, inverted: bool = False) -> float:
        """Map a y value to a canvas row.

        Canvas rows grow downward, so the standard mapping flips the axis;
        ``inverted`` maps y_min to the top edge instead.
        """
        if inverted:
            return self.offset_y + (value - self.y_min) * self.y_scale
        return self.offset_y + self.plot_size - (value - self.y_min) * self.y_scale

    def contains_pixel_x(self, px: float) -> bool:
        return self.offset_x <= px <= self.offset_x + self.plot_size

    def contains_pixel_y(self, py: float) -> bool:
        return self.offset_y <= py <= self.offset_y + self.plot_size
