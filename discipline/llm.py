# discipline/llm.py

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

import ollama

from .violations import analyze_violation_patterns

logger = logging.getLogger(__name__)

# Used when the handbook file is missing so report suggestions still have context.
FALLBACK_HANDBOOK_TEXT = """
STUDENT HANDBOOK - DISCIPLINARY POLICIES

General Disciplinary Guidelines:
- Students are expected to maintain appropriate behavior at all times
- Respect for teachers, staff, and fellow students is required
- Academic integrity must be maintained
- School property must be treated with care

Common Violations:
- Tardiness and absenteeism
- Disruptive behavior in class
- Inappropriate language or conduct
- Damage to school property
- Academic dishonesty

Disciplinary Actions:
- Verbal warnings for minor infractions
- Written warnings for repeated violations
- Parent/guardian notification
- Detention or community service
- Suspension for serious violations

Appeal Process:
- Students may appeal disciplinary decisions
- Appeals must be submitted within 48 hours
- Parent/guardian involvement is encouraged
""".strip()

REPORT_SECTIONS = [
    "Trends Noticed",
    "Immediate Actions",
    "Follow-up Steps",
    "Prevention Strategies",
    "Demographics Insights",
    "Comparative Analysis",
    "Possible Underlying Reasons",
    "Records Needed",
    "Overall Recommendation",
]


class LLMUnavailable(RuntimeError):
    """The language model call failed or returned nothing usable."""


def build_report_prompt(category: str, summary: str, handbook_text: str) -> str:
    layout = "\n\n".join(
        f"### {name}\n- " + ("single short paragraph" if name == "Overall Recommendation" else "item")
        for name in REPORT_SECTIONS
    )
    return (
        "You are a helpful school discipline analyst. Using the student handbook excerpt and the "
        "provided data summary, write a SHORT, structured markdown report for the category "
        f'"{category}". Keep items concise, concrete, and school-appropriate. Do not include '
        "prefaces or concluding fluff. Use the following section order and headings exactly. "
        "Where a section has no signal, omit it. Also analyze TOP CAUSES from the summary "
        "(topCauses/causesByType) and propose targeted resolutions.\n\n"
        f"Data Summary (JSON):\n{summary}\n\n"
        f"Student Handbook Excerpt (for reference only):\n{handbook_text}\n\n"
        f"Output format (markdown):\n{layout}\n\n"
        "Additional Required Focus:\n"
        "- Top Causes Analysis: identify top 2-3 recurring causes from data summary "
        "(topCauses/causesByType)\n"
        "- For each, state likely root causes and give concrete resolution steps the discipline "
        "office can implement within the next month\n\n"
        "Constraints:\n"
        "- Max 6 bullets per list.\n"
        "- Be specific (who/what/when) and actionable.\n"
        "- Reference handbook practices only when helpful (no citations)."
    )


def build_personality_prompt(answers: Any, violations: Sequence[Dict[str, Any]]) -> str:
    patterns = analyze_violation_patterns(violations)
    return (
        "As a professional student counselor, analyze these personality test answers and recent "
        "violations to provide a concise, professional analysis focusing on behavioral patterns "
        "and potential areas for improvement. Keep the analysis brief but insightful, focusing on "
        "key personality traits and behavioral tendencies that may be relevant for student "
        "discipline and development.\n\n"
        f"Personality Test Answers: {json.dumps(answers, default=str)}\n"
        f"Recent Violations: {json.dumps(list(violations), default=str)}\n"
        f"Violation Patterns: {json.dumps(patterns, default=str)}\n\n"
        "Provide a brief analysis (2-3 sentences) that highlights:\n"
        "1. Key personality traits\n"
        "2. Recent behavioral patterns based on violations, specifically noting:\n"
        "   - Frequency of violations\n"
        "   - Types of violations (Minor/Major Type A/Major Type B)\n"
        "   - Any patterns in violation categories\n"
        "   - Recent trends in behavior\n"
        "3. Areas for positive development\n"
        "4. Specific recommendations based on violation history and patterns\n"
        "5. Suggested interventions based on violation types"
    )


class ReportAssistant:
    def __init__(
        self,
        llm_model: str,
        host: Optional[str] = None,
        temperature: float = 0.1,
        max_handbook_chars: int = 8000,
        client: Optional[Any] = None,
    ) -> None:
        self.llm_model = llm_model
        self.temperature = temperature
        self.max_handbook_chars = max_handbook_chars
        self.client = client if client is not None else ollama.Client(host=host)

    def _chat(self, prompt: str) -> str:
        messages: List[Dict[str, str]] = [{"role": "user", "content": prompt}]
        logger.info("Sending %d-char prompt to %s", len(prompt), self.llm_model)
        try:
            response = self.client.chat(
                model=self.llm_model,
                messages=messages,
                options={"temperature": self.temperature},
            )
        except Exception as e:
            raise LLMUnavailable(f"Language model request failed: {e}") from e
        content = (response["message"]["content"] or "").strip()
        if not content:
            raise LLMUnavailable("Language model returned an empty response")
        return content

    def suggest_report(self, category: str, summary: str, handbook_text: Optional[str]) -> str:
        excerpt = (handbook_text or FALLBACK_HANDBOOK_TEXT)[: self.max_handbook_chars]
        return self._chat(build_report_prompt(category, summary, excerpt))

    def analyze_personality(self, answers: Any, violations: Sequence[Dict[str, Any]]) -> str:
        return self._chat(build_personality_prompt(answers, violations or []))
