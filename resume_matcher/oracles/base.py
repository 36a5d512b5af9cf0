from abc import ABC, abstractmethod

_FIT_PROMPT = """\
You are helping {program} match students to life sciences internships.

Job Description:
{job}

Student Resume:
{resume}

Analyze this student's fit for the internship. Consider:
- Relevant coursework and academic background
- Skills that match the role
- Potential and motivation (especially important for underrepresented students)
- Life sciences interest and experience
- Any leadership or extracurricular activities

Respond with ONLY a JSON object in this format:
{{
  "score": [number from 0-100],
  "reasoning": "[2-3 sentences explaining the match]",
  "key_strengths": ["strength1", "strength2", "strength3"],
  "concerns": ["concern1 if any"]
}}"""


def build_prompt(job: str, resume_text: str, program: str = "Project Onramp") -> str:
    return _FIT_PROMPT.format(program=program, job=job, resume=resume_text)


class FitOracleClient(ABC):
    """One blocking request per call, no retries.

    Implementations raise OracleTransportFailure, OracleServiceUnavailable
    or OracleEmptyResponse instead of returning on failure.
    """

    name = "oracle"

    @abstractmethod
    def request(self, job: str, resume_text: str) -> str:
        pass
