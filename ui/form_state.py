"""Per-form state for the Streamlit dashboard.

Every call the form issues gets a ticket (a monotonically increasing
sequence number). A reply is applied only if its ticket is still the latest,
so a slow reply for a previously selected role can never overwrite the
fields generated for the current one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class AnalysisFormState:
    job_role: str = ""
    job_description: str = ""
    keywords: str = ""
    candidate_response: str = ""
    result: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    field_errors: List[Dict[str, str]] = field(default_factory=list)
    generating_details: bool = False
    analyzing: bool = False
    details_seq: int = 0
    analysis_seq: int = 0
    # Bumped whenever job details are replaced so the widgets are rebuilt from state
    widget_seq: int = 0

    @property
    def controls_disabled(self) -> bool:
        return self.generating_details or self.analyzing

    # --- job role cascade ---
    def select_role(self, role: str) -> int:
        """Clear everything derived from the previous role and return the details ticket."""
        self.job_role = role
        self.job_description = ""
        self.keywords = ""
        self.result = None
        self.error = None
        self.generating_details = True
        self.field_errors = []
        # an analysis still running for the old role must not land either
        self.analysis_seq += 1
        self.analyzing = False
        self.details_seq += 1
        self.widget_seq += 1
        return self.details_seq

    def apply_job_details(self, ticket: int, details: Dict[str, Any]) -> bool:
        if ticket != self.details_seq:
            return False
        self.job_description = details.get("jobDescription", "")
        self.keywords = details.get("keywords", "")
        self.generating_details = False
        self.widget_seq += 1
        return True

    def fail_job_details(self, ticket: int, message: str) -> bool:
        if ticket != self.details_seq:
            return False
        self.error = message
        self.generating_details = False
        self.widget_seq += 1
        return True

    def edit_job_details(self, job_description: str, keywords: str) -> None:
        # Manual edits are locked while a generated description is on its way
        if self.generating_details:
            raise RuntimeError("Job details are being generated; edits are disabled.")
        self.job_description = job_description
        self.keywords = keywords

    # --- analysis ---
    def begin_analysis(self) -> int:
        if self.controls_disabled:
            raise RuntimeError("Another request is still in flight.")
        self.result = None
        self.error = None
        self.field_errors = []
        self.analyzing = True
        self.analysis_seq += 1
        return self.analysis_seq

    def apply_analysis(self, ticket: int, result: Dict[str, Any]) -> bool:
        if ticket != self.analysis_seq:
            return False
        self.result = result
        self.analyzing = False
        return True

    def fail_analysis(
        self, ticket: int, message: str, field_errors: Optional[List[Dict[str, str]]] = None
    ) -> bool:
        if ticket != self.analysis_seq:
            return False
        self.error = message
        self.field_errors = list(field_errors or [])
        self.analyzing = False
        return True

    def analysis_payload(self) -> Dict[str, str]:
        return {
            "candidateResponse": self.candidate_response,
            "jobDescription": self.job_description,
            "keywords": self.keywords,
        }


@dataclass
class InsightsFormState:
    job_description: str = ""
    responses: List[str] = field(default_factory=lambda: [""])
    result: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    pending: bool = False
    seq: int = 0

    def add_response(self) -> None:
        self.responses.append("")

    def remove_response(self, index: int) -> None:
        # The form always keeps at least one response box
        if len(self.responses) > 1:
            del self.responses[index]

    def begin(self) -> int:
        if self.pending:
            raise RuntimeError("Insights are already being generated.")
        self.result = None
        self.error = None
        self.pending = True
        self.seq += 1
        return self.seq

    def apply(self, ticket: int, result: Dict[str, Any]) -> bool:
        if ticket != self.seq:
            return False
        self.result = result
        self.pending = False
        return True

    def fail(self, ticket: int, message: str) -> bool:
        if ticket != self.seq:
            return False
        self.error = message
        self.pending = False
        return True

    def payload(self) -> Dict[str, Any]:
        return {
            "jobDescription": self.job_description,
            "candidateResponses": list(self.responses),
        }
