"""
Hiring Score — predicts how likely a candidate is to be hired for a posting.

Temperature: 0.5 | Max tokens: 500 | JSON only
"""

USER_PROMPT_TEMPLATE = """\
Predict the hiring score for {full_name} applying for {job_title} at {company}.
- Candidate's Skills: {skills}
- Experience: {experience}
- Job Requirements: {skills_required}

Provide a hiring score (1-100) and improvement suggestions. Respond with JSON only:
{{
  "score": 85,
  "reason": "Candidate matches 85% of required skills but lacks experience with cloud platforms.",
  "improvements": ["AWS Certification", "More experience in Microservices"]
}}
"""
