"""
Job Matcher — ranks catalog postings for a candidate.

Used by recommendation_service.py. Each posting is listed with its id so the
model can echo it back; titles are not unique across the catalog.
Temperature: 0.7 | Max tokens: 300 | JSON only
"""

SYSTEM_PROMPT = (
    "You are an AI job-matching assistant that finds the best job matches "
    "based on skills, experience, and job preferences."
)

USER_PROMPT_TEMPLATE = """\
Match {full_name} to the best jobs based on:
- Skills: {skills}
- Experience: {experience}
- Job Preferences: {job_preferences}

Available Jobs:
{job_lines}

Rank at most {limit} jobs from the list above, best match first.
Only use jobs from the list. Copy the id and title exactly as shown.

Respond with JSON only:
{{
  "jobs": [
    {{"id": "job id", "title": "job title"}}
  ]
}}
"""

JOB_LINE_TEMPLATE = "- [id: {id}] {title} at {company} (Required Skills: {skills})"
