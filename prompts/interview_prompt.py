"""
Interview-turn prompts.

Two mutually exclusive shapes:
- feedback on the candidate's latest answer, ending in a NEXT: directive
- a final performance summary over the whole transcript
"""

from typing import List, Optional, Sequence

from state import Message
from prompts.analysis_prompt import JSON_ONLY_INSTRUCTION

NEXT_MARKER = "NEXT:"
INTERVIEW_COMPLETE = "INTERVIEW_COMPLETE"

SUMMARY_SHAPE = """{
  "overallScore": <integer between 0 and 100>,
  "summary": "<2-3 sentence overall assessment>",
  "strengths": ["<strength 1>", "<strength 2>", "<strength 3>"],
  "improvements": ["<area 1>", "<area 2>"],
  "recommendation": "<Hire | Consider | Not Ready>"
}"""

FEEDBACK_JSON_SHAPE = f"""{{
  "feedback": "<2-3 sentences of feedback>",
  "next": "<the next question, or {INTERVIEW_COMPLETE}>"
}}"""


def format_transcript(transcript: Sequence[Message]) -> str:
    """Render the transcript as alternating Candidate:/Interviewer: lines."""
    return "\n".join(
        f"{'Candidate' if m['role'] == 'user' else 'Interviewer'}: {m['content']}"
        for m in transcript
    )


def build_interview_turn_prompt(
    transcript: Sequence[Message],
    job_description: str,
    current_question: str,
    is_complete: bool,
    remaining_questions: Optional[List[str]] = None,
    feedback_format: str = "marker",
) -> str:
    """
    Build the prompt for one interview turn.

    When is_complete is set the prompt asks for an InterviewSummary over the
    full transcript. Otherwise it asks for feedback on the last transcript
    entry, which must be the candidate's answer.
    """
    if is_complete:
        return _build_summary_prompt(transcript, job_description)

    if not transcript or transcript[-1]["role"] != "user":
        raise ValueError("Feedback prompt needs a transcript ending with the candidate's answer")

    return _build_feedback_prompt(
        answer=transcript[-1]["content"],
        job_description=job_description,
        current_question=current_question,
        remaining_questions=remaining_questions or [],
        feedback_format=feedback_format,
    )


def _build_summary_prompt(transcript: Sequence[Message], job_description: str) -> str:
    return f"""You are a senior interviewer. Based on this interview conversation, provide a final performance summary.

Job Description:
{job_description}

Interview Conversation:
{format_transcript(transcript)}

Return a JSON object with this exact structure:
{SUMMARY_SHAPE}

{JSON_ONLY_INSTRUCTION}
"""


def _build_feedback_prompt(
    answer: str,
    job_description: str,
    current_question: str,
    remaining_questions: List[str],
    feedback_format: str,
) -> str:
    if remaining_questions:
        upcoming = "\n".join(f"- {q}" for q in remaining_questions)
    else:
        upcoming = "(none - this was the last question)"

    if feedback_format == "json":
        output_rules = f"""Return a JSON object with this exact structure:
{FEEDBACK_JSON_SHAPE}

{JSON_ONLY_INSTRUCTION}"""
    else:
        output_rules = f"""Give brief, constructive feedback on their answer in 2-3 sentences. Be encouraging but honest.
Then on a new line write "{NEXT_MARKER}" followed by either the next question from the list or "{INTERVIEW_COMPLETE}" if there are no more questions."""

    return f"""You are conducting a professional job interview.

Job Description:
{job_description}

Current Question Asked:
{current_question}

Candidate's Answer:
{answer}

Remaining Questions:
{upcoming}

{output_rules}

Keep your tone professional and supportive.
"""
