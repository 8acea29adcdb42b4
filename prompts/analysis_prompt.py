"""
Match-analysis prompt.
Asks the backend to compare a resume with a job description and propose interview questions.
"""

ANALYSIS_SHAPE = """{
  "matchScore": <integer between 0 and 100>,
  "summary": "<2-3 sentence overall assessment>",
  "strengths": ["<strength 1>", "<strength 2>", "<strength 3>"],
  "missingSkills": ["<missing skill 1>", "<missing skill 2>"],
  "interviewQuestions": [
    { "question": "<question 1>", "type": "<Behavioral | Technical | Situational>" },
    { "question": "<question 2>", "type": "<Behavioral | Technical | Situational>" },
    { "question": "<question 3>", "type": "<Behavioral | Technical | Situational>" },
    { "question": "<question 4>", "type": "<Behavioral | Technical | Situational>" },
    { "question": "<question 5>", "type": "<Behavioral | Technical | Situational>" }
  ]
}"""

JSON_ONLY_INSTRUCTION = "Only return the JSON. No extra text, no markdown, no code blocks."


def build_analysis_prompt(job_description: str, resume: str) -> str:
    """
    Build the match-analysis prompt.

    Both inputs are embedded verbatim. Callers reject empty inputs before
    getting here (see agents.analyzer.analyze).
    """
    return f"""You are a senior technical recruiter and interview coach.

Analyze the following resume against the job description and return a JSON response with this exact structure:
{ANALYSIS_SHAPE}

{JSON_ONLY_INSTRUCTION}

JOB DESCRIPTION:
{job_description}

RESUME:
{resume}
"""
