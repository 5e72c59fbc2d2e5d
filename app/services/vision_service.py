"""
Photo analysis placeholder

Returns a generic hazard for any set of photos. The photo URLs are never
fetched.
"""

from typing import List, Optional

from app.schemas.jsa import HazardItem, JobContext, PhotoAnalysisResponse

GENERIC_HAZARD = {
    "category": "General",
    "specific_risk": "Unverified site conditions",
    "likelihood": "medium",
    "potential_severity": "high",
    "recommended_controls": [
        "Conduct site walk with competent person",
        "Establish exclusion zones and signage",
        "Brief crew on specific hazards before start",
    ],
    "required_PPE": ["Hard hat", "Hi-vis vest", "Safety boots", "Safety glasses"],
    "references": ["Plan per OSHA topic relevant to task (falls, electrical, etc.)"],
}


def analyze_photos(
    file_urls: List[str], job_context: Optional[JobContext] = None
) -> PhotoAnalysisResponse:
    summary = f"Analyzed {len(file_urls)} photo(s)"
    if job_context and job_context.task:
        summary += f" for task: {job_context.task}"

    return PhotoAnalysisResponse(
        summary=summary,
        hazards=[HazardItem.model_validate(GENERIC_HAZARD)],
    )
