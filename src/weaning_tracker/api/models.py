"""Request models for the HTTP API."""

from datetime import date

from pydantic import BaseModel

from weaning_tracker.services.periods import ReportPeriod


class GrowthReportRequest(BaseModel):
    """Body of a growth report request."""

    period: ReportPeriod = ReportPeriod.WEEK
    start_date: date | None = None
    end_date: date | None = None
    as_of: date | None = None

    def custom_range(self) -> tuple[date, date] | None:
        """Explicit bounds, when both were supplied."""
        if self.start_date is None or self.end_date is None:
            return None
        return self.start_date, self.end_date
