"""
Analytics Aggregation Service

Builds the clinic dashboard report: runs recent visit notes through the
condition detector and medicine normalizer, ranks the resulting frequency
tables and combines them with patient, follow-up and appointment statistics.
"""

import asyncio
from datetime import datetime, timedelta
from typing import Iterable, Mapping, Optional

from prometheus_client import Histogram

from app.config import get_settings
from app.core.cache import CacheService
from app.core.logging import get_logger
from app.schemas.analytics import (
    AnalyticsReport,
    AppointmentStats,
    FollowUpStats,
    GenderDistribution,
    OverviewStats,
    RankedEntry,
    WeeklyRegistration,
)
from app.schemas.clinic import VisitRecord, to_local_naive
from app.services.clinic_data import ClinicDataSource
from app.services.condition_detector import detect_conditions
from app.services.medicine_normalizer import extract_medicines, group_medicines

logger = get_logger(__name__)

REPORT_DURATION = Histogram(
    "clinic_analytics_report_seconds",
    "Time spent generating the analytics report"
)

# (label, inclusive upper bound); None is open-ended
AGE_BANDS: tuple[tuple[str, Optional[int]], ...] = (
    ("0-18", 18),
    ("19-35", 35),
    ("36-50", 50),
    ("51-65", 65),
    ("65+", None),
)


# ============================================================================
# AGGREGATION HELPERS
# ============================================================================

def rank_frequencies(table: Mapping[str, int], limit: int = 10) -> list[RankedEntry]:
    """
    Sort a frequency table by count, highest first, and keep the top entries.

    Ties keep first-encountered order.
    """
    ranked = sorted(table.items(), key=lambda item: -item[1])
    return [RankedEntry(name=name, count=count) for name, count in ranked[:limit]]


def count_conditions(visits: Iterable[VisitRecord]) -> dict[str, int]:
    """Count, per condition, the visits whose signs mention it."""
    counts: dict[str, int] = {}
    for visit in visits:
        for condition in detect_conditions(visit.signs):
            counts[condition] = counts.get(condition, 0) + 1
    return counts


def count_medicines(visits: Iterable[VisitRecord]) -> dict[str, int]:
    """Count medicine mentions across visits, dosage variants collapsed."""
    mentions: list[str] = []
    for visit in visits:
        mentions.extend(extract_medicines(visit.medicines))
    return group_medicines(mentions)


def bucket_ages(ages: Iterable[Optional[int]]) -> dict[str, int]:
    """Bucket patient ages into the dashboard's age bands."""
    buckets = {label: 0 for label, _ in AGE_BANDS}
    for age in ages:
        if age is None:
            continue
        for label, upper in AGE_BANDS:
            if upper is None or age <= upper:
                buckets[label] += 1
                break
    return buckets


def growth_rate(current: int, previous: int) -> float:
    """Percent change from previous to current; 0 when previous is 0."""
    if previous <= 0:
        return 0.0
    return round((current - previous) / previous * 100, 1)


def percentage(part: int, whole: int) -> float:
    """Share of whole as a percentage; 0 when whole is 0."""
    if whole <= 0:
        return 0.0
    return round(part / whole * 100, 1)


def start_of_day(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_week(moment: datetime) -> datetime:
    """Midnight of the Sunday on or before moment."""
    days_since_sunday = (moment.weekday() + 1) % 7
    return start_of_day(moment) - timedelta(days=days_since_sunday)


def build_weekly_registrations(
    week_starts: list[datetime],
    counts: list[int]
) -> list[WeeklyRegistration]:
    """Label weekly counts oldest-first and compute week-over-week change."""
    weeks = []
    previous: Optional[int] = None

    for index, (week_start, count) in enumerate(zip(week_starts, counts)):
        change = count - previous if previous is not None else 0
        change_percent = round(change / previous * 100) if previous else 0
        weeks.append(WeeklyRegistration(
            label=f"Week {index + 1}",
            week_start=week_start,
            week_end=week_start + timedelta(days=7),
            count=count,
            change=change,
            change_percent=change_percent,
            is_current=index == len(week_starts) - 1
        ))
        previous = count

    return weeks


# ============================================================================
# REPORT GENERATION
# ============================================================================

class AnalyticsService:
    """
    Aggregates clinic records into the analytics dashboard report.

    Data source failures propagate unchanged; no partial report is produced.
    """

    def __init__(
        self,
        data_source: ClinicDataSource,
        cache: Optional[CacheService] = None
    ):
        self.data_source = data_source
        self.cache = cache
        settings = get_settings()
        self.visit_window = settings.VISIT_TEXT_WINDOW
        self.top_n = settings.TOP_N
        self.registration_weeks = settings.REGISTRATION_WEEKS
        self.cache_ttl = settings.ANALYTICS_CACHE_TTL

    async def get_dashboard(self, now: Optional[datetime] = None) -> AnalyticsReport:
        """
        Get the dashboard report, served from cache when available.

        Args:
            now: Reference time; defaults to the current local time.

        Returns:
            The analytics report.
        """
        now = to_local_naive(now) or datetime.now()
        key = None

        if self.cache is not None and self.cache.is_connected:
            key = CacheService.generate_key("analytics", now.date().isoformat())
            cached = await self.cache.get(key)
            if cached:
                return AnalyticsReport.model_validate(cached)

        report = await self.generate_report(now)

        if key is not None:
            await self.cache.set(key, report.model_dump(mode="json"), self.cache_ttl)

        return report

    async def invalidate_dashboard(self) -> int:
        """
        Drop every cached dashboard report.

        Returns:
            Number of cache entries removed.
        """
        if self.cache is None:
            return 0
        return await self.cache.clear_pattern("analytics")

    async def generate_report(self, now: Optional[datetime] = None) -> AnalyticsReport:
        """
        Build the analytics report from the clinic's current records.

        Args:
            now: Reference time; defaults to the current local time.

        Returns:
            The analytics report.
        """
        now = to_local_naive(now) or datetime.now()

        with REPORT_DURATION.time():
            report = await self._build_report(now)

        logger.info(
            "Analytics report generated",
            extra={
                "visits_analyzed": report.visits_analyzed,
                "conditions": len(report.top_conditions),
                "medicines": len(report.top_medicines)
            }
        )
        return report

    async def _build_report(self, now: datetime) -> AnalyticsReport:
        source = self.data_source

        today_start = start_of_day(now)
        today_end = today_start + timedelta(days=1)
        month_start = today_start.replace(day=1)
        last_month_start = (month_start - timedelta(days=1)).replace(day=1)
        week_start = start_of_week(now)
        week_end = week_start + timedelta(days=7)

        registration_week_starts = [
            week_start - timedelta(days=7 * i)
            for i in range(self.registration_weeks - 1, -1, -1)
        ]

        (
            visits,
            total_patients,
            patients_this_month,
            patients_last_month,
            patients_this_week,
            consultations_today,
            upcoming_follow_ups,
            follow_ups_this_week,
            overdue_follow_ups,
            complete_records,
            male_count,
            female_count,
            other_count,
            ages,
            total_appointments,
            existing_appointments,
            walk_in_appointments,
            *weekly_counts,
        ) = await asyncio.gather(
            source.fetch_recent_visits(self.visit_window),
            source.count_patients(),
            source.count_patients(created_from=month_start),
            source.count_patients(created_from=last_month_start, created_before=month_start),
            source.count_patients(created_from=week_start),
            source.count_visits(today_start, today_end),
            source.count_follow_ups(start=now),
            source.count_follow_ups(start=week_start, end=week_end),
            source.count_follow_ups(end=now),
            source.count_patients_with_complete_records(),
            source.count_patients(gender="Male"),
            source.count_patients(gender="Female"),
            source.count_patients(gender="Other"),
            source.fetch_patient_ages(),
            source.count_appointments(),
            source.count_appointments(linked_to_patient=True),
            source.count_appointments(linked_to_patient=False),
            *[
                source.count_patients(
                    created_from=start,
                    created_before=start + timedelta(days=7)
                )
                for start in registration_week_starts
            ],
        )

        top_conditions = rank_frequencies(count_conditions(visits), self.top_n)
        top_medicines = rank_frequencies(count_medicines(visits), self.top_n)

        overview = OverviewStats(
            total_patients=total_patients,
            patients_this_month=patients_this_month,
            patients_last_month=patients_last_month,
            patients_this_week=patients_this_week,
            consultations_today=consultations_today,
            patients_with_complete_records=complete_records,
            avg_patients_per_day=round(patients_this_month / now.day, 1),
            growth_rate=growth_rate(patients_this_month, patients_last_month),
            completion_rate=percentage(complete_records, total_patients)
        )

        appointments = AppointmentStats(
            total=total_appointments,
            existing_patients=existing_appointments,
            new_patients=walk_in_appointments,
            existing_percent=percentage(existing_appointments, total_appointments),
            new_percent=percentage(walk_in_appointments, total_appointments)
        )

        return AnalyticsReport(
            generated_at=now,
            overview=overview,
            follow_ups=FollowUpStats(
                upcoming=upcoming_follow_ups,
                this_week=follow_ups_this_week,
                overdue=overdue_follow_ups
            ),
            top_conditions=top_conditions,
            top_medicines=top_medicines,
            gender=GenderDistribution(male=male_count, female=female_count, other=other_count),
            age_groups=bucket_ages(ages),
            appointments=appointments,
            weekly_registrations=build_weekly_registrations(
                registration_week_starts, list(weekly_counts)
            ),
            visits_analyzed=len(visits)
        )
