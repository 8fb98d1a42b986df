from typing import Any, Dict, Iterable, List
from core.models import Reservation, RuleResult, SearchRequest, SearchResult
from schemas.availability.search import AvailabilityRequest, ReservationItem
from scheduler.calendar import CategoryAvailability, DayStatus
from scheduler.validator import ValidationReport
from utils.constants import BLOCKING_STATUSES


def to_reservations(items: Iterable[ReservationItem]) -> List[Reservation]:
    """Convert request items, keeping only statuses that occupy the calendar."""
    reservations = []
    for item in items:
        if item.status.strip().lower() not in BLOCKING_STATUSES:
            continue
        path = [
            item.parentCategory,
            item.subCategory1,
            item.subCategory2,
            item.subCategory3,
            item.subCategory4,
        ]
        reservations.append(
            Reservation(
                id=item.id,
                start_date=item.startDate,
                end_date=item.endDate,
                category_path=tuple(p.strip() for p in path if p and p.strip()),
                legacy_category=item.category,
                entity_id=item.businessId,
                entity_name=item.business,
                status=item.status,
            )
        )
    return reservations


def to_search_request(payload: AvailabilityRequest) -> SearchRequest:
    return SearchRequest(
        category_path=tuple(payload.categoryPath),
        entity_id=payload.businessId,
        entity_name=payload.business,
        requested_duration=payload.duration,
        search_from=payload.searchFrom,
        exclude_reservation_id=payload.excludeReservationId,
    )


def search_result_to_dict(result: SearchResult) -> Dict[str, Any]:
    return {
        "date": result.date.isoformat(),
        "endDate": result.end_date.isoformat(),
        "daysUntilLaunch": result.lead_time_days,
        "durationDays": result.duration_days,
        "attempts": result.attempts,
        "startsAt": result.starts_at.isoformat(),
        "endsAt": result.ends_at.isoformat(),
    }


def rule_result_to_dict(result: RuleResult) -> Dict[str, Any]:
    out = {"rule": result.rule, "message": result.message, "advanceDays": result.advance_days}
    if result.conflicting is not None:
        out["conflictingReservationId"] = result.conflicting.reservation_id
    return out


def report_to_dict(report: ValidationReport) -> Dict[str, Any]:
    return {
        "valid": report.is_valid,
        "startDate": report.start_date.isoformat(),
        "endDate": report.end_date.isoformat(),
        "durationDays": report.duration_days,
        "violations": [rule_result_to_dict(v) for v in report.violations],
        "warnings": report.warnings,
        "launchesOnStart": report.launches_on_start,
        "dailyStatus": report.daily_status.value,
    }


def day_status_to_dict(status: DayStatus) -> Dict[str, Any]:
    return {"date": status.day.isoformat(), "launches": status.launches, "status": status.status.value}


def category_availability_to_dict(item: CategoryAvailability) -> Dict[str, Any]:
    return {
        "categoryPath": list(item.category_path),
        "categoryKey": item.category_key,
        "nextAvailableDate": item.next_available_date.isoformat() if item.next_available_date else None,
        "daysUntilLaunch": item.lead_time_days,
        "error": item.error,
    }
