RESUME_SYSTEM_INSTRUCTION = (
    "You are a professional resume analyzer. "
    "Analyze resumes and provide constructive feedback."
)

MATCH_SYSTEM_INSTRUCTION = (
    "You are an expert resume analyzer and career advisor. "
    "Analyze the resume and job description to provide detailed matching analysis "
    "and actionable recommendations. Return ONLY valid JSON."
)


def build_resume_prompt(resume_text: str) -> str:
    return f"""
Analyze the following resume and provide a detailed analysis. Focus on:
1. Overall match score (0-100) for a software engineering position
2. Key strengths
3. Missing points or areas for improvement
4. Skills to add or enhance
5. Specific recommendations for improvement

[Resume]
{resume_text}

📤 Provide the analysis in the following JSON format:

{{
  "overallScore": number,
  "keyStrengths": string[],
  "missingPoints": string[],
  "skillsToAdd": string[],
  "recommendations": string[]
}}
"""


def build_match_prompt(resume_text: str, job_description: str) -> str:
    return f"""
Analyze the following resume and job description to provide a detailed matching analysis. Consider both technical skills and experience requirements.

[Resume]
{resume_text}

[Job Description]
{job_description}

📋 Instructions:
- overallScore is a score out of 100 for how well the resume matches the job requirements
- keyStrengths.technical: technical skills that match the job well
- keyStrengths.experience: relevant experience that aligns with the job requirements
- keyStrengths.achievements: specific achievements that demonstrate capability
- missingPoints.technical: technical skills that need improvement, with explanations
- missingPoints.experience: experience gaps that need to be addressed
- missingPoints.softSkills: soft skills or other areas that need development
- skillsToAdd.priority: high priority skills to acquire, with reasons
- skillsToAdd.recommended: additional skills that would be beneficial
- recommendations.shortTerm: immediate actions to improve the match
- recommendations.longTerm: long-term development suggestions

📤 Respond in this JSON format:

{{
  "overallScore": number,
  "keyStrengths": {{
    "technical": string[],
    "experience": string[],
    "achievements": string[]
  }},
  "missingPoints": {{
    "technical": string[],
    "experience": string[],
    "softSkills": string[]
  }},
  "skillsToAdd": {{
    "priority": string[],
    "recommended": string[]
  }},
  "recommendations": {{
    "shortTerm": string[],
    "longTerm": string[]
  }}
}}

IMPORTANT: Return ONLY the JSON object, no additional text or explanation.
"""
