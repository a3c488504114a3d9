# discipline/violations.py
#
# Summaries of a student's violation history, fed to the counselor prompt.
# Records are dicts with ``violationtype``, ``violationcategory`` and
# ``datereported`` (ISO date string).

from collections import Counter
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

SEVERITY_ORDER: Dict[str, int] = {
    "Minor Offenses": 1,
    "Major Type A": 2,
    "Major Type B": 3,
}

RECENT_LIMIT = 5
TOP_TYPES_LIMIT = 3


def _reported_at(violation: Dict[str, Any]) -> Optional[datetime]:
    raw = violation.get("datereported")
    if not raw:
        return None
    try:
        return datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
    except ValueError:
        return None


def _by_date(violations: Sequence[Dict[str, Any]], newest_first: bool = False) -> List[Dict[str, Any]]:
    # Undated records sort as the oldest.
    def key(v: Dict[str, Any]) -> float:
        when = _reported_at(v)
        return when.timestamp() if when else float("-inf")

    return sorted(violations, key=key, reverse=newest_first)


def has_escalating_severity(violations: Sequence[Dict[str, Any]]) -> bool:
    levels = [SEVERITY_ORDER.get(v.get("violationcategory")) for v in _by_date(violations)]
    for prev, curr in zip(levels, levels[1:]):
        if prev is not None and curr is not None and curr > prev:
            return True
    return False


def has_repeated_violations(violations: Sequence[Dict[str, Any]]) -> bool:
    seen = set()
    for v in violations:
        kind = v.get("violationtype")
        if kind in seen:
            return True
        seen.add(kind)
    return False


def analyze_violation_patterns(violations: Optional[Sequence[Dict[str, Any]]]) -> Dict[str, Any]:
    if not violations:
        return {"totalViolations": 0, "patterns": "No violations recorded"}

    category_count = {name: 0 for name in SEVERITY_ORDER}
    type_count: Counter = Counter()
    monthly: Counter = Counter()

    for v in violations:
        category = v.get("violationcategory")
        if category in category_count:
            category_count[category] += 1
        type_count[v.get("violationtype")] += 1
        when = _reported_at(v)
        if when is not None:
            monthly[f"{when.year}-{when.month}"] += 1

    recent = _by_date(violations, newest_first=True)[:RECENT_LIMIT]

    return {
        "totalViolations": len(violations),
        "categoryBreakdown": category_count,
        "mostFrequentTypes": [
            {"type": kind, "count": count} for kind, count in type_count.most_common(TOP_TYPES_LIMIT)
        ],
        "monthlyTrends": [{"month": month, "count": monthly[month]} for month in sorted(monthly)],
        "recentViolations": [
            {
                "type": v.get("violationtype"),
                "category": v.get("violationcategory"),
                "date": v.get("datereported"),
            }
            for v in recent
        ],
        "patterns": {
            "hasEscalatingSeverity": has_escalating_severity(violations),
            "hasRepeatedViolations": has_repeated_violations(violations),
            "hasRecentViolations": len(recent) > 0,
        },
    }
