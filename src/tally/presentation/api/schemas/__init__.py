"""Pydantic request/response schemas."""

from tally.presentation.api.schemas.charts import ChartDatasetResponse, ChartResponse

__all__ = ["ChartDatasetResponse", "ChartResponse"]
