"""
CV Optimizer — rewrites a resume for ATS readability and lists missing skills.

Temperature: 0.7 | Max tokens: 800 | JSON only
"""

SYSTEM_PROMPT = "You are an AI career coach that optimizes resumes for ATS and professional readability."

USER_PROMPT_TEMPLATE = """\
Optimize the following resume for a {seniority_level} position in {industry}.
The user prefers a {optimization_style} style.
Improve clarity, grammar, and structure while making it ATS-friendly.
Additionally, identify any missing skills relevant to {job_title}.

Respond in JSON format only:
{{
  "optimizedResume": "Updated resume text...",
  "missingSkills": ["Skill 1", "Skill 2"]
}}

Original Resume:
{resume_text}
"""
