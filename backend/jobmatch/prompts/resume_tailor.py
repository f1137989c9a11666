"""
Resume Tailor — job-specific rewrite of the candidate's resume for auto-apply.

Temperature: 0.7 | Max tokens: 600 | free text
"""

USER_PROMPT_TEMPLATE = """\
Optimize {full_name}'s resume for {job_title} at {company}.
- Highlight relevant experience & skills (the job asks for: {skills_required}).
- Make it ATS-friendly.
- Improve formatting & clarity.

Original Resume:
{resume_text}

Return only the optimized resume.
"""
