"""
Skill Gap — missing skills for a posting plus recommended online courses.

Temperature: 0.5 | Max tokens: 500 | JSON only
"""

USER_PROMPT_TEMPLATE = """\
Identify skill gaps for {full_name} applying for {job_title} at {company}.
- Candidate's Skills: {skills}
- Job Requirements: {skills_required}

List missing skills and recommend relevant courses from Udemy, Coursera, and LinkedIn Learning.

Respond with JSON only:
{{
  "missingSkills": ["AWS Cloud", "Microservices", "CI/CD"],
  "recommendedCourses": [
    {{
      "platform": "Udemy",
      "courseTitle": "AWS Certified Solutions Architect",
      "link": "https://www.udemy.com/course/aws-solutions-architect/"
    }}
  ]
}}
"""
