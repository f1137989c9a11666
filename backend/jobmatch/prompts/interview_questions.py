"""
Interview Questions — technical and behavioral questions with sample answers.

Temperature: 0.7 | Max tokens: 800 | JSON only
"""

SYSTEM_PROMPT = "You are an AI interview coach. Generate structured interview questions with answers."

USER_PROMPT_TEMPLATE = """\
Generate {question_count} interview questions for a {job_title} role.
The candidate has skills in: {skills}.
Provide a mix of technical and behavioral questions.
Each question should have a sample answer.

Respond with JSON only:
{{
  "questions": [
    {{"question": "What is dependency injection?", "answer": "Dependency Injection (DI) is a design pattern..."}},
    {{"question": "Explain SOLID principles.", "answer": "SOLID principles are five design principles in OOP..."}}
  ]
}}
"""
