"""
Cover Letter — business letter for one auto-apply job.

Temperature: 0.7 | Max tokens: 600 | free text
"""

USER_PROMPT_TEMPLATE = """\
Write a professional, customized cover letter for {full_name} applying for {job_title} at {company}.
- The user's resume:
{resume_text}
- Job description:
{job_description}

Follow this structure:
- Introduction
- Why I'm a great fit
- Key skills that match the job
- Closing statement

Format it as a well-written business letter.
"""
