"""Normalization of snapshot records into fully-populated internal rows.

Every optional or duck-typed field is resolved here once (timestamps parsed, blank
identities dropped, labels defaulted) so the filter/sort pipeline only ever sees
concrete values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Literal

from docket_view.models import Case, OpenDefenceCase
from docket_view.timeutil import parse_iso_ms

logger = logging.getLogger(__name__)

OPEN_DEFENCE_LABEL = "Open defence"
UNKNOWN_LABEL = "Unknown"


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def display_case_label(case_title: str | None, case_id: str | None) -> str:
    title = _clean(case_title)
    if title:
        return title
    return case_id or UNKNOWN_LABEL


def build_search_text(
    case_id: str,
    case_title: str | None,
    summary: str,
    prosecution_agent_id: str,
    defendant_agent_id: str | None,
) -> str:
    parts: Iterable[str] = (
        case_id,
        case_title or "",
        summary or "",
        prosecution_agent_id or "",
        defendant_agent_id or "",
    )
    return "".join(parts).lower()


@dataclass(frozen=True)
class CaseRecord:
    case: Case
    index: int
    display_label: str
    scheduled_ms: int | None
    created_ms: int | None
    effective_ms: int | None
    countdown_end_ms: int | None
    countdown_total_ms: int | None
    defendant_agent_id: str | None
    defence_agent_id: str | None
    search_text: str


@dataclass(frozen=True)
class OpenDefenceRecord:
    item: OpenDefenceCase
    index: int
    display_label: str
    status: Literal["scheduled", "active"]
    scheduled_ms: int | None
    filed_ms: int | None
    defendant_agent_id: str | None
    defence_agent_id: str | None
    tags: tuple[str, ...]
    search_text: str


def normalize_case(case: Case, index: int = 0) -> CaseRecord:
    scheduled_ms = parse_iso_ms(case.scheduled_for_iso)
    created_ms = parse_iso_ms(case.created_at_iso)
    if scheduled_ms is None and created_ms is None:
        logger.debug("Case %s has no usable timestamps; it will sort last", case.id)
    effective_ms = scheduled_ms if scheduled_ms is not None else created_ms

    countdown_end_ms = parse_iso_ms(case.countdown_end_at_iso)
    if countdown_end_ms is None:
        countdown_end_ms = scheduled_ms

    defendant = _clean(case.defendant_agent_id)
    return CaseRecord(
        case=case,
        index=index,
        display_label=display_case_label(case.case_title, case.id),
        scheduled_ms=scheduled_ms,
        created_ms=created_ms,
        effective_ms=effective_ms,
        countdown_end_ms=countdown_end_ms,
        countdown_total_ms=case.countdown_total_ms,
        defendant_agent_id=defendant,
        defence_agent_id=_clean(case.defence_agent_id),
        search_text=build_search_text(
            case.id, case.case_title, case.summary, case.prosecution_agent_id, defendant
        ),
    )


def normalize_open_defence(item: OpenDefenceCase, index: int = 0) -> OpenDefenceRecord:
    defendant = _clean(item.defendant_agent_id)
    return OpenDefenceRecord(
        item=item,
        index=index,
        display_label=display_case_label(item.case_title, item.case_id),
        status=item.status,
        scheduled_ms=parse_iso_ms(item.scheduled_for_iso),
        filed_ms=parse_iso_ms(item.filed_at_iso),
        defendant_agent_id=defendant,
        defence_agent_id=_clean(item.defence_agent_id),
        tags=tuple(tag for tag in item.tags if tag),
        search_text=build_search_text(
            item.case_id, item.case_title, item.summary, item.prosecution_agent_id, defendant
        ),
    )


def normalize_cases(cases: Iterable[Case]) -> list[CaseRecord]:
    return [normalize_case(case, idx) for idx, case in enumerate(cases)]


def normalize_open_defence_cases(items: Iterable[OpenDefenceCase]) -> list[OpenDefenceRecord]:
    return [normalize_open_defence(item, idx) for idx, item in enumerate(items)]
