# discipline/catalog.py
#
# Static topic configuration: titles, FAQ rules, focus keywords and follow-up
# suggestions. Built once at import time and never mutated afterwards.

import re
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from .models import Category, CategoryProfile, FAQRule

MATCH_ALL = ".*"


def _faq(pattern: str, answer: str) -> FAQRule:
    return FAQRule(re.compile(pattern, re.IGNORECASE), answer)


def _faqs(*pairs: Tuple[str, str]) -> Tuple[FAQRule, ...]:
    return tuple(_faq(p, a) for p, a in pairs)


_PROFILES: List[CategoryProfile] = [
    CategoryProfile(
        category=Category.VIOLATIONS,
        title="Student Conduct and Discipline",
        faqs=_faqs(
            (
                r"(types?|categor|classif|kinds?)\s+.*(violation|offense)|(violation|offense)s?\s+(types?|categor)",
                "Violations are grouped into three levels:\n"
                "- Minor Offenses: ID, uniform, littering, loitering and similar lapses.\n"
                "- Major Offenses Category A and Category B: serious misconduct such as fighting, "
                "disrespect, cheating or vandalism.\n"
                "- Category C (Destructive & Harmful): drugs, weapons, hazing and fraternity involvement.",
            ),
            (
                r"what\s+happens\s+if\s+.*(break|violate)|consequence|sanction|penalt",
                "Sanctions escalate with repetition and severity: reminders and a Disciplinary "
                "Notification Form (DNF) for first minor lapses, a Disciplinary Warning Form (DWF) "
                "and parent conference for repeats, then suspension or dismissal for major and "
                "Category C offenses.",
            ),
            (
                MATCH_ALL,
                "Violations are classified as Minor Offenses, Major Offenses (Category A/B), and "
                "Category C (Destructive & Harmful). Sanctions escalate with repeats and severity.",
            ),
        ),
        keywords=("violation", "offense", "rule", "sanction", "discipline"),
        suggestions=(
            "What are the violation categories?",
            "What happens if I break a rule?",
            "How are violations classified?",
        ),
    ),
    CategoryProfile(
        category=Category.ATTENDANCE,
        title="Attendance",
        faqs=_faqs(
            (
                r"tardy|\blate",
                "Arriving after the start of class is recorded as tardy, and repeated tardiness "
                "is sanctioned. See the Attendance section of the Student Handbook for details.",
            ),
            (
                r"excuse|medical|sick|certificate",
                "Absences are excused with an excuse letter or medical certificate. Check the "
                "Attendance section of the Student Handbook for when and where to submit it.",
            ),
            (
                MATCH_ALL,
                "Absences over 20% of class days may lead to failing grade unless excused. Provide "
                "excuse letter/medical certificate; prolonged absences require parental notice.",
            ),
        ),
        keywords=("attendance", "absent", "tardy", "late"),
        suggestions=(
            "What is the attendance policy?",
            "How many absences are allowed?",
            "What are sanctions for tardiness?",
        ),
    ),
    CategoryProfile(
        category=Category.DRESS_CODE,
        title="Dress Code",
        faqs=_faqs(
            (
                r"((what\s+happens\s+if)\s+.*dress\s*code)"
                r"|((violate|violation|break|penalt|penalty|sanction|consequence).*(dress\s*code|uniform|groom))"
                r"|((dress\s*code|uniform|groom).*(violate|violation|break|penalt|penalty|sanction|consequence))",
                "Dress Code sanctions (summary):\n"
                "- 1st offense: reminder/counseling; may issue Disciplinary Notification Form (DNF).\n"
                "- Repeated: Disciplinary Warning Form (DWF) and parent conference.\n"
                "- Further/repeated non-compliance: suspension possible; may be treated as Major Offense.\n"
                "Follow grooming rules and uniform policy to avoid escalation.",
            ),
            (
                r"what\s+is\s+the\s+dress\s*code|uniform|groom",
                "Students must be presentable and modest.\n"
                "- Boys: navy pants, white polo with school patch, black leather shoes, clean 2x3/3x4 haircut.\n"
                "- Girls: gray/white checkered skirt, white blouse with patch, ribbon/tie, black shoes.\n"
                "PE uniforms only on PE days; ID must be worn at all times.",
            ),
            (
                MATCH_ALL,
                "Dress Code highlights:\n"
                "- Wear school uniform and ID at all times.\n"
                "- Follow grooming rules (clean haircut; no make-up, long/polished nails, "
                "jewelry/piercings, tattoos).\n"
                "- PE uniform only on PE days.",
            ),
        ),
        keywords=("dress", "uniform", "groom", "haircut", "attire", "clothing"),
        suggestions=(
            "What is the dress code?",
            "What are the grooming rules?",
            "What happens if I violate dress code?",
        ),
    ),
    CategoryProfile(
        category=Category.MINOR_OFFENSES,
        title="Minor Offenses",
        faqs=_faqs(
            (
                r"sanction|penalt|consequence|punish",
                "Minor offense sanctions escalate with repeats, from reminders and a Disciplinary "
                "Notification Form (DNF) to a Disciplinary Warning Form (DWF) and parent conference. "
                "See the Minor Offenses section of the Student Handbook for the full schedule.",
            ),
            (
                MATCH_ALL,
                "Minor offenses include ID violations, tardiness, loitering and littering. Sanctions "
                "escalate with repeats; the Student Handbook lists every minor offense.",
            ),
        ),
        keywords=("minor", "identification", "litter", "loiter", "tardiness"),
        suggestions=(
            "What are minor offenses?",
            "Sanctions for minor violations",
            "Examples of minor offenses",
        ),
    ),
    CategoryProfile(
        category=Category.MAJOR_OFFENSES_A,
        title="Major Offenses Category A",
        faqs=_faqs(
            (
                r"repeat|again|second|third",
                "Sanctions for Category A offenses escalate with repeats. Check the Major Offenses "
                "section of the Student Handbook for the sanction that applies to each repeat.",
            ),
            (
                MATCH_ALL,
                "Category A major offenses include disrespect, fighting, public display of "
                "affection, cutting classes and unauthorized recording. See the Major Offenses "
                "section of the Student Handbook for the sanctions.",
            ),
        ),
        keywords=("category a", "disrespect", "fight", "affection", "cutting", "record"),
        suggestions=(
            "What are Major Offenses Category A?",
            "Sanctions for Category A offenses",
            "What happens for repeated violations?",
        ),
    ),
    CategoryProfile(
        category=Category.MAJOR_OFFENSES_B,
        title="Major Offenses Category B",
        faqs=_faqs(
            (
                r"cheat|plagiar",
                "Cheating and plagiarism are Category B major offenses. Academic integrity must be "
                "maintained; see the Major Offenses section of the Student Handbook for the sanctions.",
            ),
            (
                MATCH_ALL,
                "Category B major offenses include cheating, plagiarism, gambling, alcohol and "
                "vandalism. See the Major Offenses section of the Student Handbook for the sanctions.",
            ),
        ),
        keywords=("category b", "cheat", "plagiar", "gambl", "alcohol", "vandal"),
        suggestions=(
            "What are Major Offenses Category B?",
            "What is the penalty for cheating?",
            "Sanctions for Category B offenses",
        ),
    ),
    CategoryProfile(
        category=Category.CATEGORY_C,
        title="Destructive & Harmful Offenses (Category C)",
        faqs=_faqs(
            (
                r"drug|weapon",
                "Prohibited drugs and weapons fall under Category C (Destructive & Harmful), the "
                "most serious offense level. See the Student Handbook for the sanctions.",
            ),
            (
                r"frat|haz",
                "Fraternity involvement and hazing fall under Category C (Destructive & Harmful). "
                "See the Student Handbook for the sanctions.",
            ),
            (
                MATCH_ALL,
                "Category C covers destructive and harmful acts such as drugs, weapons, hazing and "
                "fraternity involvement. These carry the heaviest sanctions in the Student Handbook.",
            ),
        ),
        keywords=("category c", "drug", "weapon", "hazing", "fraternit", "harmful"),
        suggestions=(
            "What are Category C offenses?",
            "Consequences for drugs or weapons?",
            "Fraternities or hazing consequences",
        ),
    ),
    CategoryProfile(
        category=Category.BULLYING,
        title="Anti-Bullying",
        faqs=_faqs(
            (
                r"report|victim|help",
                "Report bullying to a teacher or the Discipline Office. The Anti-Bullying section of "
                "the Student Handbook describes how reports are handled.",
            ),
            (
                MATCH_ALL,
                "Bullying in any form is prohibited and is sanctioned by the Discipline Office. See "
                "the Anti-Bullying section of the Student Handbook for details.",
            ),
        ),
        keywords=("bully", "bullying", "harass", "cyber"),
        suggestions=(
            "What happens if I bully someone?",
            "How is bullying handled?",
            "Anti-bullying policy",
        ),
    ),
    CategoryProfile(
        category=Category.APPEALS,
        title="Appeals Process",
        faqs=_faqs(
            (
                r"how\s+(do|can)\s+i|process|steps",
                "Students may appeal disciplinary decisions. Appeals must be submitted within 48 "
                "hours; parent/guardian involvement is encouraged. See the Student Handbook for the "
                "full appeals process.",
            ),
            (
                MATCH_ALL,
                "Students may appeal disciplinary decisions in writing. Appeals must be submitted "
                "within 48 hours of the decision; parent/guardian involvement is encouraged.",
            ),
        ),
        keywords=("appeal", "reconsider", "review", "grievance"),
        suggestions=(
            "How do I appeal a decision?",
            "What is the appeals process?",
            "Can I challenge a violation?",
        ),
    ),
    CategoryProfile(
        category=Category.SUSPENSION,
        title="Suspension",
        faqs=_faqs(
            (
                r"how\s+long|days|duration",
                "The length of a suspension depends on the offense and the student's record. See the "
                "Suspension section of the Student Handbook for details.",
            ),
            (
                MATCH_ALL,
                "Suspension is a sanction for serious or repeated violations. See the Suspension "
                "section of the Student Handbook for how it is imposed.",
            ),
        ),
        keywords=("suspension", "suspend", "suspended"),
        suggestions=(
            "What is the suspension policy?",
            "How long can I be suspended?",
            "What happens during suspension?",
        ),
    ),
    CategoryProfile(
        category=Category.EXPULSION,
        title="Expulsion",
        faqs=_faqs(
            (
                r"when|why|reason",
                "Expulsion applies to the most serious offenses. See the Expulsion section of the "
                "Student Handbook for the grounds.",
            ),
            (
                MATCH_ALL,
                "Expulsion removes a student from the school and is the heaviest sanction. See the "
                "Expulsion section of the Student Handbook for details.",
            ),
        ),
        keywords=("expulsion", "expel", "dismissal", "dismiss"),
        suggestions=(
            "What is expulsion?",
            "When can I be expelled?",
            "Consequences of expulsion",
        ),
    ),
]

GENERAL_SUGGESTIONS: Tuple[str, ...] = (
    "What are the violation types?",
    "What is the dress code?",
    "What are the attendance rules?",
)


def validate_profiles(profiles: Iterable[CategoryProfile]) -> None:
    """Every registered category needs a trailing rule that matches anything."""
    for profile in profiles:
        if not profile.faqs:
            raise ValueError(f"Category {profile.category.value} has no FAQ rules")
        fallback = profile.faqs[-1]
        if not fallback.matches(""):
            raise ValueError(
                f"Category {profile.category.value} does not end with a match-everything rule"
            )
        if len(profile.suggestions) != 3:
            raise ValueError(f"Category {profile.category.value} needs exactly 3 suggestions")


def build_catalog(profiles: Sequence[CategoryProfile]) -> Mapping[Category, CategoryProfile]:
    validate_profiles(profiles)
    return MappingProxyType({p.category: p for p in profiles})


CATALOG: Mapping[Category, CategoryProfile] = build_catalog(_PROFILES)


def list_categories(catalog: Mapping[Category, CategoryProfile] = CATALOG) -> List[Dict[str, str]]:
    return [{"key": p.category.value, "title": p.title} for p in catalog.values()]


def focus_keywords(
    category: Category, catalog: Mapping[Category, CategoryProfile] = CATALOG
) -> Tuple[str, ...]:
    profile = catalog.get(category)
    return profile.keywords if profile else ()


def suggestions_for(
    category: Category, catalog: Mapping[Category, CategoryProfile] = CATALOG
) -> List[str]:
    profile = catalog.get(category)
    if profile and profile.suggestions:
        return list(profile.suggestions)
    return list(GENERAL_SUGGESTIONS)
