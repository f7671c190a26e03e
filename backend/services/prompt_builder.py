"""Prompt templates for the resume/job comparison LLM call."""

from models.schemas.job import JobDescription, JobSkill
from models.schemas.profile import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    ResumeRecord,
    Skill,
)

SYSTEM_PROMPT = """You are an expert HR recruiter and technical hiring manager with deep expertise in resume analysis and candidate evaluation. Your task is to analyze resumes against job descriptions with precision and provide actionable insights.

ANALYSIS FRAMEWORK:
1. Skills Assessment (40% weight): Evaluate technical and soft skills match
2. Experience Relevance (35% weight): Assess work history alignment
3. Education & Certifications (15% weight): Review educational background
4. Cultural & Role Fit (10% weight): Overall suitability assessment

SCORING GUIDELINES:
- 9-10: Exceptional match, ideal candidate
- 7-8: Strong match, highly recommended
- 5-6: Good match with some gaps, consider with reservations
- 3-4: Moderate match, significant skill gaps
- 1-2: Poor match, not recommended

RESPONSE FORMAT:
Provide your analysis in the following JSON structure:
{
  "overallScore": number (1-10),
  "skillsScore": number (1-10),
  "experienceScore": number (1-10),
  "educationScore": number (1-10),
  "reasoning": "Detailed explanation of the score",
  "strengths": ["List of candidate strengths"],
  "weaknesses": ["List of areas for improvement"],
  "recommendations": ["Actionable hiring recommendations"],
  "matchedSkills": ["Skills that align with requirements"],
  "missingSkills": ["Critical skills the candidate lacks"],
  "experienceHighlights": ["Relevant experience points"],
  "riskFactors": ["Potential concerns or red flags"]
}

Be objective, specific, and provide concrete examples to support your assessment."""

SKILL_GAP_SYSTEM_PROMPT = (
    "You are a technical skills assessment expert. Analyze skill gaps and "
    "provide specific learning recommendations."
)


def format_skills(skills: list[Skill]) -> str:
    """Group skills by category: ``TECHNICAL: Python (advanced), ...``."""
    if not skills:
        return "No skills listed"

    grouped: dict[str, list[str]] = {}
    for skill in skills:
        grouped.setdefault(skill.category or "other", []).append(
            f"{skill.name} ({skill.proficiency_level or 'unknown'})"
        )
    return "\n".join(
        f"{category.upper()}: {', '.join(names)}" for category, names in grouped.items()
    )


def _format_duration(exp: ExperienceEntry) -> str:
    if exp.duration:
        return exp.duration
    if exp.start_date and exp.end_date:
        end = "Present" if exp.is_current else exp.end_date.year
        return f"{exp.start_date.year} - {end}"
    return "Unknown duration"


def format_experience(experience: list[ExperienceEntry]) -> str:
    if not experience:
        return "No experience listed"

    blocks = []
    for exp in experience:
        description = f"{exp.description[:200]}..." if exp.description else "No description"
        blocks.append(
            f"• {exp.position or 'Unknown Position'} at {exp.company or 'Unknown Company'} "
            f"({_format_duration(exp)})\n  {description}"
        )
    return "\n\n".join(blocks)


def format_education(education: list[EducationEntry]) -> str:
    if not education:
        return "No education listed"
    return "\n".join(
        f"• {edu.degree or 'Unknown Degree'} - {edu.institution or 'Unknown Institution'} "
        f"({edu.graduation_year or 'Unknown Year'})"
        for edu in education
    )


def format_certifications(certifications: list[CertificationEntry]) -> str:
    if not certifications:
        return "No certifications listed"
    return "\n".join(
        f"• {cert.name} - {cert.issuer or 'Unknown Issuer'}" for cert in certifications
    )


def format_job_skills(skills: list[JobSkill]) -> str:
    if not skills:
        return "None specified"
    return "\n".join(
        f"• {skill.name}{f' ({skill.importance})' if skill.importance else ''}"
        for skill in skills
    )


def _format_years(value: float) -> str:
    return f"{value:g}"


def build_comparison_prompt(resume: ResumeRecord, job: JobDescription) -> str:
    """User prompt: formatted candidate profile followed by the job to match."""
    profile = resume.extracted_data
    requirements = job.requirements
    responsibilities = "\n• ".join(job.responsibilities) or "Not specified"
    certifications = ", ".join(requirements.certifications) or "Not specified"

    return f"""
RESUME ANALYSIS REQUEST

CANDIDATE PROFILE:
Name: {resume.candidate_name or profile.name or 'Not specified'}
Total Experience: {_format_years(profile.total_experience_years)} years

SKILLS:
{format_skills(profile.skills)}

EXPERIENCE:
{format_experience(profile.experience)}

EDUCATION:
{format_education(profile.education)}

CERTIFICATIONS:
{format_certifications(profile.certifications)}

SUMMARY:
{profile.summary or 'No summary available'}

---

JOB DESCRIPTION TO MATCH:

POSITION: {job.title}
COMPANY: {job.company}
EXPERIENCE LEVEL: {job.experience_level}
MINIMUM EXPERIENCE: {_format_years(requirements.minimum_experience)} years

REQUIRED SKILLS:
{format_job_skills(requirements.required_skills)}

PREFERRED SKILLS:
{format_job_skills(requirements.preferred_skills)}

JOB DESCRIPTION:
{job.description}

RESPONSIBILITIES:
{responsibilities}

REQUIREMENTS:
Education: {requirements.education_requirement or 'Not specified'}
Certifications: {certifications}

---

ANALYSIS REQUEST:
Compare this resume with the job description and rate the candidate's fit on a scale of 1-10 with detailed justification. Focus on:

1. Technical skill alignment and proficiency levels
2. Relevant work experience and achievements
3. Educational background compatibility
4. Overall role suitability and growth potential

Provide specific examples and be constructive in your feedback. Consider both current fit and future potential."""


def build_skill_gap_prompt(candidate_skills: list[Skill], required_skills: list[JobSkill]) -> str:
    candidate = "\n".join(f"• {s.name} ({s.proficiency_level})" for s in candidate_skills)
    required = "\n".join(f"• {s.name} ({s.importance or 'required'})" for s in required_skills)

    return f"""
SKILL GAP ANALYSIS

CANDIDATE SKILLS:
{candidate}

REQUIRED SKILLS:
{required}

Please analyze:
1. Which required skills the candidate has and their proficiency levels
2. Which critical skills are missing
3. Skill development recommendations with priority levels
4. Estimated timeline for skill gap closure

Provide specific, actionable advice for both the candidate and hiring manager."""
