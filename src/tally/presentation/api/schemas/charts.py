"""Pydantic schemas for report chart endpoints.

The payload follows the Chart.js data structure (labels plus one dataset per
series) so the frontend can hand it to the chart library unchanged.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ChartDatasetResponse(BaseModel):
    """One series of a chart (e.g. 'Income')."""

    label: str = Field(description="Series name shown in the chart legend")
    data: list[Decimal] = Field(
        default_factory=list,
        description="One value per label, rounded to two decimal places",
    )


class ChartResponse(BaseModel):
    """Chart payload: axis labels and the datasets plotted against them."""

    count: int = Field(description="Number of datasets")
    currency: str = Field(description="ISO 4217 code of every amount")
    labels: list[str] = Field(description="Axis labels, one per data point")
    datasets: list[ChartDatasetResponse] = Field(description="Plotted series")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "count": 2,
                "currency": "EUR",
                "labels": ["Jan 2024", "Feb 2024"],
                "datasets": [
                    {"label": "Income", "data": ["3200.00", "3150.00"]},
                    {"label": "Expenses", "data": ["-2450.17", "-2710.90"]},
                ],
            }
        }
    )
